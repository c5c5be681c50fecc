"""
SSO service: ticket-granting ticket checks over HTTP.
"""

import asyncio
from typing import Dict, Optional

from fastapi import Request, Response

from shared.base_service import BaseService
from shared.config import ServiceConfig
from shared.errors import ConfigurationError
from .cookies.ticket_cookie import TicketGrantingCookie, CookieTicketContext
from .tickets.checker import TicketValidityChecker
from .tickets.models import TicketCheckResponse
from .tickets.store import InMemoryTicketStore, RedisTicketStore, TicketStore


class SSOService(BaseService):
    """SSO service implementation."""

    def __init__(self, config: Optional[ServiceConfig] = None, ticket_store: Optional[TicketStore] = None):
        super().__init__("sso", 8020, config)
        self.ticket_store = ticket_store if ticket_store is not None else self._create_ticket_store()
        self.ticket_cookie = TicketGrantingCookie.from_config(self.config)
        self.checker = TicketValidityChecker(self.ticket_store, self.ticket_cookie, self.metrics)

        self._setup_sso_routes()

    def _create_ticket_store(self) -> TicketStore:
        backend = self.config.ticket_store_backend.lower()
        if backend == "memory":
            return InMemoryTicketStore()
        if backend == "redis":
            return RedisTicketStore(self.config.redis_url, self.config.ticket_key_prefix)
        raise ConfigurationError(
            f"Unknown ticket store backend: {backend}",
            details={"ticket_store_backend": backend}
        )

    def _setup_sso_routes(self):
        """Set up SSO-specific routes."""

        @self.app.get("/")
        async def root():
            """Root endpoint."""
            return {
                "service": "sso",
                "message": "Ticket-granting ticket SSO Service",
                "version": "1.0.0"
            }

        @self.app.get("/sso/check", response_model=TicketCheckResponse)
        def check_ticket(request: Request, response: Response):
            """Check the ticket-granting ticket referenced by the request cookie."""
            context = CookieTicketContext(request, response, self.ticket_cookie)
            outcome = self.checker.check_validity(context)
            return TicketCheckResponse(outcome=outcome)

    async def _check_dependencies(self) -> Dict[str, str]:
        """Check SSO dependencies."""
        dependencies = {}

        if isinstance(self.ticket_store, RedisTicketStore):
            healthy = await asyncio.to_thread(self.ticket_store.ping)
            dependencies["redis"] = "ok" if healthy else "error"

        return dependencies


def create_app():
    """Create FastAPI application."""
    service = SSOService()
    return service.app


if __name__ == "__main__":
    service = SSOService()
    service.run()
