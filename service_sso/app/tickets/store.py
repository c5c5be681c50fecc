"""
Ticket stores for the SSO service.

Both stores are safe to share between concurrent request handlers.
Neither holds a lock across a find followed by a delete: a ticket may
vanish between the two calls, and delete of a missing id is a no-op.
"""

import json
import threading
from typing import Dict, Optional, Protocol, runtime_checkable

import redis
from redis.exceptions import ConnectionError as RedisConnectionError, TimeoutError as RedisTimeoutError

from shared.logging import get_logger
from shared.errors import TicketStoreError
from .models import Ticket


@runtime_checkable
class TicketStore(Protocol):
    """Registry of live tickets keyed by ticket id."""

    def find(self, ticket_id: str) -> Optional[Ticket]:
        ...

    def delete(self, ticket_id: str) -> None:
        ...


class InMemoryTicketStore:
    """Process-local ticket store."""

    def __init__(self):
        self._tickets: Dict[str, Ticket] = {}
        self._lock = threading.Lock()
        self.logger = get_logger("sso.store.memory")

    def add(self, ticket: Ticket):
        with self._lock:
            self._tickets[ticket.ticket_id] = ticket

    def find(self, ticket_id: str) -> Optional[Ticket]:
        with self._lock:
            return self._tickets.get(ticket_id)

    def delete(self, ticket_id: str) -> None:
        with self._lock:
            removed = self._tickets.pop(ticket_id, None)
        if removed is not None:
            self.logger.debug("Ticket deleted", ticket_id=ticket_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._tickets)

    def __contains__(self, ticket_id: str) -> bool:
        with self._lock:
            return ticket_id in self._tickets


class RedisTicketStore:
    """Redis-backed ticket store.

    Tickets are kept as JSON documents under ``<prefix><ticket_id>``.
    Tickets with a hard lifetime get a matching Redis TTL so Redis
    evicts them on its own; the check still treats a present but
    expired ticket as invalid.
    """

    def __init__(self, redis_url: str, key_prefix: str = "tgt:", client: Optional[redis.Redis] = None):
        self.redis_url = redis_url
        self.key_prefix = key_prefix
        self.logger = get_logger("sso.store.redis")
        self.redis = client or redis.from_url(
            redis_url,
            encoding="utf-8",
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
            retry_on_timeout=True,
            health_check_interval=30
        )

    def add(self, ticket: Ticket):
        key = self._key(ticket.ticket_id)
        payload = json.dumps(ticket.to_dict())
        ttl = ticket.expiration_policy.remaining_lifetime(ticket)

        try:
            if ttl is None:
                self.redis.set(key, payload)
            else:
                # SETEX rejects a zero TTL
                self.redis.setex(key, max(ttl, 1), payload)
        except (RedisConnectionError, RedisTimeoutError) as e:
            self.logger.error("Failed to store ticket", ticket_id=ticket.ticket_id, error=str(e))
            raise TicketStoreError(str(e), details={"operation": "add"}) from e

        self.logger.debug("Ticket stored", ticket_id=ticket.ticket_id, ttl=ttl)

    def find(self, ticket_id: str) -> Optional[Ticket]:
        try:
            cached = self.redis.get(self._key(ticket_id))
        except (RedisConnectionError, RedisTimeoutError) as e:
            self.logger.error("Failed to look up ticket", ticket_id=ticket_id, error=str(e))
            raise TicketStoreError(str(e), details={"operation": "find"}) from e

        if not cached:
            return None

        return Ticket.from_dict(json.loads(cached))

    def delete(self, ticket_id: str) -> None:
        try:
            removed = self.redis.delete(self._key(ticket_id))
        except (RedisConnectionError, RedisTimeoutError) as e:
            self.logger.error("Failed to delete ticket", ticket_id=ticket_id, error=str(e))
            raise TicketStoreError(str(e), details={"operation": "delete"}) from e

        if removed:
            self.logger.debug("Ticket deleted", ticket_id=ticket_id)

    def ping(self) -> bool:
        """Check Redis health."""
        try:
            return bool(self.redis.ping())
        except (RedisConnectionError, RedisTimeoutError):
            return False

    def _key(self, ticket_id: str) -> str:
        return f"{self.key_prefix}{ticket_id}"
