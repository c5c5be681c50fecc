"""
Shared configuration management for the SSO ticket services.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SSO_",
        case_sensitive=False,
        extra="allow"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")

    # Ticket store
    ticket_store_backend: str = Field(default="memory")
    redis_url: str = Field(default="redis://localhost:6379/0")
    ticket_key_prefix: str = Field(default="tgt:")

    # Ticket-granting cookie
    tgt_cookie_name: str = Field(default="TGC")
    tgt_cookie_path: str = Field(default="/")
    tgt_cookie_domain: Optional[str] = Field(default=None)
    tgt_cookie_secure: bool = Field(default=True)
    tgt_cookie_http_only: bool = Field(default=True)
    tgt_cookie_same_site: str = Field(default="lax")


class ServiceConfig(BaseConfig):
    """Service-specific configuration."""

    service_name: str
    port: int
    host: str = "0.0.0.0"

    def __init__(self, service_name: str, port: int, **kwargs):
        super().__init__(service_name=service_name, port=port, **kwargs)


def get_config(service_name: str, port: int, **overrides) -> ServiceConfig:
    """Get configuration for a specific service."""
    return ServiceConfig(service_name=service_name, port=port, **overrides)
