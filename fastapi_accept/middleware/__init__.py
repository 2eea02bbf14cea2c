"""ASGI middleware for Accept header parsing."""

from .accept import AcceptMiddleware

__all__ = ["AcceptMiddleware"]
