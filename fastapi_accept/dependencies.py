"""FastAPI dependencies exposing parsed Accept headers."""

from typing import Callable

from fastapi import Request

from fastapi_accept.schemas.accept import AcceptClause
from fastapi_accept.settings import get_settings
from fastapi_accept.utils.accept import parse_accept


def accept_clauses_dependency(
    state_key: str | None = None,
) -> Callable[[Request], list[AcceptClause]]:
    """Build a dependency reading clauses stored under ``state_key``.

    Use the same ``state_key`` as the ``AcceptMiddleware`` it pairs with;
    ``None`` means the configured ``ACCEPT__STATE_KEY``.

    Examples:
        app.add_middleware(AcceptMiddleware, state_key="accept")

        @app.get("/items")
        async def list_items(
            clauses: list[AcceptClause] = Depends(accept_clauses_dependency("accept")),
        ) -> dict[str, Any]:
            ...
    """

    def dependency(request: Request) -> list[AcceptClause]:
        key = get_settings().state_key if state_key is None else state_key
        clauses = getattr(request.state, key, None)
        if clauses is not None:
            return clauses
        return parse_accept(", ".join(request.headers.getlist("accept")))

    return dependency


def get_accept_clauses(request: Request) -> list[AcceptClause]:
    """Return the request's Accept clauses, ordered by descending quality.

    Reuses the clauses stored by ``AcceptMiddleware`` under the configured
    state key when it is installed, otherwise parses every Accept header of
    the request.
    """
    return accept_clauses_dependency()(request)
