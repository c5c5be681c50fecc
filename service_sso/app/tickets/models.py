"""
Ticket data models for the SSO service.
"""

from typing import Dict, Any, Optional
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TicketCheckOutcome(str, Enum):
    """Result of a ticket-granting ticket validity check."""
    NOT_EXISTS = "notExists"
    INVALID = "invalid"
    VALID = "valid"


@dataclass
class TicketExpirationPolicy:
    """Hard lifetime plus sliding idle timeout.

    Either limit may be None to disable it; with both disabled the
    ticket never expires on its own.
    """
    max_lifetime_seconds: Optional[int] = None
    idle_timeout_seconds: Optional[int] = None

    def is_expired(self, ticket: "Ticket", now: Optional[datetime] = None) -> bool:
        now = now or utcnow()

        if self.max_lifetime_seconds is not None:
            if (now - ticket.created_at).total_seconds() >= self.max_lifetime_seconds:
                return True

        if self.idle_timeout_seconds is not None:
            if (now - ticket.last_used_at).total_seconds() >= self.idle_timeout_seconds:
                return True

        return False

    def remaining_lifetime(self, ticket: "Ticket", now: Optional[datetime] = None) -> Optional[int]:
        """Seconds until the hard lifetime runs out, or None when unbounded."""
        if self.max_lifetime_seconds is None:
            return None
        now = now or utcnow()
        elapsed = (now - ticket.created_at).total_seconds()
        return max(0, int(self.max_lifetime_seconds - elapsed))


@dataclass
class Ticket:
    """Ticket-granting ticket held by a ticket store."""
    ticket_id: str
    principal: str
    created_at: datetime = field(default_factory=utcnow)
    last_used_at: Optional[datetime] = None
    expired: bool = False
    expiration_policy: TicketExpirationPolicy = field(default_factory=TicketExpirationPolicy)

    def __post_init__(self):
        if not self.ticket_id:
            raise ValueError("ticket_id is required")
        # Timestamps without an offset are taken as UTC
        if self.created_at.tzinfo is None:
            self.created_at = self.created_at.replace(tzinfo=timezone.utc)
        if self.last_used_at is None:
            self.last_used_at = self.created_at
        elif self.last_used_at.tzinfo is None:
            self.last_used_at = self.last_used_at.replace(tzinfo=timezone.utc)

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Whether the ticket was explicitly expired or its policy says so."""
        return self.expired or self.expiration_policy.is_expired(self, now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ticket_id": self.ticket_id,
            "principal": self.principal,
            "created_at": self.created_at.isoformat(),
            "last_used_at": self.last_used_at.isoformat(),
            "expired": self.expired,
            "expiration_policy": {
                "max_lifetime_seconds": self.expiration_policy.max_lifetime_seconds,
                "idle_timeout_seconds": self.expiration_policy.idle_timeout_seconds,
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Ticket":
        policy = data.get("expiration_policy") or {}
        return cls(
            ticket_id=data["ticket_id"],
            principal=data["principal"],
            created_at=datetime.fromisoformat(data["created_at"]),
            last_used_at=datetime.fromisoformat(data["last_used_at"]) if data.get("last_used_at") else None,
            expired=data.get("expired", False),
            expiration_policy=TicketExpirationPolicy(
                max_lifetime_seconds=policy.get("max_lifetime_seconds"),
                idle_timeout_seconds=policy.get("idle_timeout_seconds"),
            ),
        )


class TicketCheckResponse(BaseModel):
    """Response model for the ticket check endpoint."""
    outcome: TicketCheckOutcome = Field(..., description="notExists, invalid or valid")
