"""Utilities for Accept header parsing."""

from .accept import parse_accept

__all__ = ["parse_accept"]
