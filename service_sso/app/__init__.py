"""
SSO Service package.

This package exposes the FastAPI application that checks whether the
ticket-granting ticket presented by a browser is still usable:

- app.main: Application entrypoint that wires routes and lifecycle.
- app.tickets: Ticket models, stores and the validity checker.
- app.cookies: Ticket-granting cookie extraction and clearing.

Design notes:
- Module import must not perform network calls; the Redis client
  connects lazily on first use.
- Use the shared/ utilities for logging, metrics and errors.
- Ticket issuance and renewal belong to other services; this package
  only reads tickets and removes expired ones.
"""
