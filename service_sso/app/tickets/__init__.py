"""
Ticket package.

Holds the ticket-granting ticket model with its expiration policy, the
ticket stores (in-memory and Redis), and the validity checker that
decides between the notExists, invalid and valid outcomes.
"""

from .models import Ticket, TicketExpirationPolicy, TicketCheckOutcome
from .store import TicketStore, InMemoryTicketStore, RedisTicketStore
from .checker import TicketValidityChecker, TicketCheckContext

__all__ = [
    "Ticket",
    "TicketExpirationPolicy",
    "TicketCheckOutcome",
    "TicketStore",
    "InMemoryTicketStore",
    "RedisTicketStore",
    "TicketValidityChecker",
    "TicketCheckContext",
]
