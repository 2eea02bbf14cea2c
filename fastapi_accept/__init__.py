"""HTTP Accept header parsing for FastAPI applications."""

from .dependencies import accept_clauses_dependency, get_accept_clauses
from .middleware.accept import AcceptMiddleware
from .schemas.accept import AcceptClause
from .utils.accept import parse_accept

__all__ = [
    "AcceptClause",
    "AcceptMiddleware",
    "accept_clauses_dependency",
    "get_accept_clauses",
    "parse_accept",
]
