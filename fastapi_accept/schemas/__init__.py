"""Pydantic schemas for Accept header parsing."""

from .accept import AcceptClause

__all__ = ["AcceptClause"]
