"""Accept header parsing middleware."""

import logging
from typing import Any

from fastapi_accept.settings import get_settings
from fastapi_accept.utils.accept import parse_accept

logger = logging.getLogger(__name__)


class AcceptMiddleware:
    """Parse the Accept header once per request and store it on request state."""

    def __init__(self, app: Any, *, state_key: str | None = None) -> None:
        """Store the ASGI app and the request state key for the parsed clauses."""
        self.app = app
        self.state_key = get_settings().state_key if state_key is None else state_key

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Attach parsed Accept clauses to the scope before calling the app."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        values = [
            value.decode("latin-1")
            for name, value in scope.get("headers", [])
            if name.decode("latin-1").lower() == "accept"
        ]
        clauses = parse_accept(", ".join(values))
        logger.debug("Parsed %d Accept clause(s) for %s", len(clauses), scope.get("path"))

        scope.setdefault("state", {})[self.state_key] = clauses
        await self.app(scope, receive, send)
