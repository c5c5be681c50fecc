"""
Unit tests for ticket models and expiration policies.
"""

import pytest
from datetime import datetime, timedelta, timezone

from service_sso.app.tickets.models import Ticket, TicketExpirationPolicy


NOW = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestTicketExpirationPolicy:
    """Test cases for TicketExpirationPolicy."""

    def test_unbounded_policy_never_expires(self):
        ticket = Ticket(ticket_id="TGT-1", principal="user1", created_at=NOW - timedelta(days=365))

        assert ticket.is_expired(NOW) is False
        assert ticket.expiration_policy.remaining_lifetime(ticket, NOW) is None

    def test_hard_lifetime(self):
        policy = TicketExpirationPolicy(max_lifetime_seconds=3600)
        ticket = Ticket(ticket_id="TGT-1", principal="user1", created_at=NOW, expiration_policy=policy)

        assert ticket.is_expired(NOW + timedelta(seconds=3599)) is False
        assert ticket.is_expired(NOW + timedelta(seconds=3600)) is True

    def test_idle_timeout_slides_with_last_use(self):
        policy = TicketExpirationPolicy(idle_timeout_seconds=600)
        ticket = Ticket(
            ticket_id="TGT-1",
            principal="user1",
            created_at=NOW - timedelta(hours=2),
            last_used_at=NOW - timedelta(seconds=60),
            expiration_policy=policy,
        )

        assert ticket.is_expired(NOW) is False
        assert ticket.is_expired(NOW + timedelta(seconds=540)) is True

    def test_hard_lifetime_wins_over_recent_use(self):
        policy = TicketExpirationPolicy(max_lifetime_seconds=3600, idle_timeout_seconds=600)
        ticket = Ticket(
            ticket_id="TGT-1",
            principal="user1",
            created_at=NOW - timedelta(hours=2),
            last_used_at=NOW,
            expiration_policy=policy,
        )

        assert ticket.is_expired(NOW) is True

    def test_remaining_lifetime(self):
        policy = TicketExpirationPolicy(max_lifetime_seconds=3600)
        ticket = Ticket(ticket_id="TGT-1", principal="user1", created_at=NOW, expiration_policy=policy)

        assert policy.remaining_lifetime(ticket, NOW + timedelta(seconds=600)) == 3000
        assert policy.remaining_lifetime(ticket, NOW + timedelta(hours=5)) == 0


class TestTicket:
    """Test cases for Ticket."""

    def test_last_used_defaults_to_creation(self):
        ticket = Ticket(ticket_id="TGT-1", principal="user1", created_at=NOW)

        assert ticket.last_used_at == NOW

    def test_empty_id_rejected(self):
        with pytest.raises(ValueError):
            Ticket(ticket_id="", principal="user1")

    def test_expired_flag(self):
        ticket = Ticket(ticket_id="TGT-1", principal="user1", expired=True)

        assert ticket.is_expired() is True

    def test_naive_timestamps_taken_as_utc(self):
        policy = TicketExpirationPolicy(max_lifetime_seconds=3600, idle_timeout_seconds=600)
        ticket = Ticket(
            ticket_id="TGT-1",
            principal="user1",
            created_at=NOW.replace(tzinfo=None),
            last_used_at=(NOW + timedelta(minutes=5)).replace(tzinfo=None),
            expiration_policy=policy,
        )

        assert ticket.created_at == NOW
        assert ticket.last_used_at == NOW + timedelta(minutes=5)
        assert ticket.is_expired(NOW + timedelta(minutes=10)) is False
        assert ticket.is_expired(NOW + timedelta(hours=2)) is True

    def test_naive_created_at_without_last_use(self):
        ticket = Ticket(ticket_id="TGT-1", principal="user1", created_at=NOW.replace(tzinfo=None))

        assert ticket.last_used_at.tzinfo is not None
        assert ticket.is_expired() is False

    def test_dict_round_trip_keeps_policy(self):
        policy = TicketExpirationPolicy(max_lifetime_seconds=28800, idle_timeout_seconds=7200)
        ticket = Ticket(
            ticket_id="TGT-1",
            principal="user1",
            created_at=NOW,
            last_used_at=NOW + timedelta(minutes=5),
            expiration_policy=policy,
        )

        restored = Ticket.from_dict(ticket.to_dict())

        assert restored == ticket
