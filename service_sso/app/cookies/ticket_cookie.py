"""
Ticket-granting cookie handling.
"""

from typing import Optional

from fastapi import Request, Response

from shared.config import BaseConfig


class TicketGrantingCookie:
    """Browser cookie that carries the ticket-granting ticket id."""

    def __init__(self, name: str = "TGC", path: str = "/", domain: Optional[str] = None,
                 secure: bool = True, http_only: bool = True, same_site: str = "lax"):
        self.name = name
        self.path = path
        self.domain = domain
        self.secure = secure
        self.http_only = http_only
        self.same_site = same_site

    @classmethod
    def from_config(cls, config: BaseConfig) -> "TicketGrantingCookie":
        return cls(
            name=config.tgt_cookie_name,
            path=config.tgt_cookie_path,
            domain=config.tgt_cookie_domain,
            secure=config.tgt_cookie_secure,
            http_only=config.tgt_cookie_http_only,
            same_site=config.tgt_cookie_same_site,
        )

    def extract_ticket_id(self, request: Request) -> Optional[str]:
        return request.cookies.get(self.name)

    def clear(self, response: Response) -> None:
        """Expire the cookie on the client (Max-Age=0)."""
        response.delete_cookie(
            self.name,
            path=self.path,
            domain=self.domain,
            secure=self.secure,
            httponly=self.http_only,
            samesite=self.same_site,
        )


class CookieTicketContext:
    """Binds one request/response pair to the ticket check."""

    def __init__(self, request: Request, response: Response, cookie: TicketGrantingCookie):
        self.request = request
        self.response = response
        self.cookie = cookie

    def get_ticket_id(self) -> Optional[str]:
        return self.cookie.extract_ticket_id(self.request)

    def get_response(self) -> Response:
        return self.response
