"""
Ticket-granting ticket validity check.

There are three possible outcomes:

- notExists: no ticket id was presented with the request.
- invalid: the ticket is unknown to the store or has expired.
- valid: the ticket is in the store and has not expired.

For the invalid case, expired tickets found in the store are removed and
the browser cookie is cleared. Nothing is mutated for the other two.
"""

import time
from typing import Any, Optional, Protocol

from shared.logging import get_logger
from shared.metrics import MetricsCollector
from .models import TicketCheckOutcome
from .store import TicketStore


class TicketCheckContext(Protocol):
    """What the checker needs from the surrounding request."""

    def get_ticket_id(self) -> Optional[str]:
        ...

    def get_response(self) -> Any:
        ...


class TicketCookie(Protocol):
    """Client-side holder of the ticket id."""

    def clear(self, response: Any) -> None:
        ...


class TicketValidityChecker:
    """Decides whether the ticket referenced by a request is still usable."""

    def __init__(self, ticket_store: TicketStore, ticket_cookie: TicketCookie,
                 metrics: Optional[MetricsCollector] = None):
        self.ticket_store = ticket_store
        self.ticket_cookie = ticket_cookie
        self.metrics = metrics
        self.logger = get_logger("sso.checker")

    def check_validity(self, context: TicketCheckContext) -> TicketCheckOutcome:
        """Determine whether the ticket in the request context is valid.

        Store and cookie failures are not caught here.
        """
        start_time = time.time()
        outcome = self._check(context)
        self._record(outcome, time.time() - start_time)
        return outcome

    def _check(self, context: TicketCheckContext) -> TicketCheckOutcome:
        ticket_id = context.get_ticket_id()
        if not ticket_id or not ticket_id.strip():
            return TicketCheckOutcome.NOT_EXISTS

        ticket = self.ticket_store.find(ticket_id)
        if ticket is None:
            self.logger.debug("Removing cookie for non-existent ticket", ticket_id=ticket_id)
            self.ticket_cookie.clear(context.get_response())
            self._count("ticket_cookies_cleared_total", reason="not_found")
            return TicketCheckOutcome.INVALID

        if ticket.is_expired():
            self.logger.debug("Removing expired ticket", ticket_id=ticket_id)
            self.ticket_store.delete(ticket_id)
            self._count("tickets_removed_total")
            self.ticket_cookie.clear(context.get_response())
            self._count("ticket_cookies_cleared_total", reason="expired")
            return TicketCheckOutcome.INVALID

        return TicketCheckOutcome.VALID

    def _record(self, outcome: TicketCheckOutcome, duration: float):
        if self.metrics is None:
            return
        self.metrics.increment_counter("ticket_checks_total", outcome=outcome.value)
        self.metrics.observe_histogram("ticket_check_duration_seconds", duration)

    def _count(self, metric_name: str, **labels):
        if self.metrics is not None:
            self.metrics.increment_counter(metric_name, **labels)
