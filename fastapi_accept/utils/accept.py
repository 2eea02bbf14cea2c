"""Helpers for parsing HTTP Accept headers (RFC 2616 section 14.1, loosely)."""

from __future__ import annotations

import logging
import re

from fastapi_accept.schemas.accept import AcceptClause

logger = logging.getLogger(__name__)

# ASCII decimal floats and infinities only; no inner whitespace, "_" or nan.
_QUALITY_RE = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|[+-]?inf(?:inity)?",
    re.IGNORECASE,
)


def _trim(value: str) -> str:
    return value.strip(" ")


def _parse_quality(value: str) -> float:
    if _QUALITY_RE.fullmatch(value) is None:
        logger.debug("Malformed q value %r, using 0.0", value)
        return 0.0
    return float(value)


def parse_accept(header: str) -> list[AcceptClause]:
    """Parse an Accept header into clauses ordered by descending quality.

    Malformed media ranges are dropped, parameters without ``=`` are ignored
    and an unparsable ``q`` yields a quality of 0.0. Clauses with equal
    quality keep the order in which they appear in the header.
    """
    clauses: list[AcceptClause] = []

    for segment in header.split(","):
        segment = _trim(segment)

        # media-range = ( "*/*" | ( type "/" "*" ) | ( type "/" subtype ) ) *( ";" parameter )
        media_range, *raw_params = segment.split(";")
        types = media_range.split("/")

        if len(types) == 1 and types[0] == "*":
            # Bare "*" is not valid media-range syntax but is accepted as "*/*".
            main_type, sub_type = "*", "*"
        elif len(types) == 2:
            main_type, sub_type = _trim(types[0]), _trim(types[1])
            if not main_type or not sub_type:
                logger.debug("Dropping media range with empty token: %r", segment)
                continue
        else:
            if segment:
                logger.debug("Dropping malformed media range: %r", segment)
            continue

        quality = 1.0
        parameters: dict[str, str] = {}
        for param in raw_params:
            parts = param.split("=", 1)
            if len(parts) != 2:
                logger.debug("Ignoring parameter without value: %r", param)
                continue
            key, value = _trim(parts[0]), _trim(parts[1])
            if key == "q":
                quality = _parse_quality(value)
            else:
                parameters[key] = value

        clauses.append(
            AcceptClause(
                type=main_type,
                sub_type=sub_type,
                quality=quality,
                parameters=parameters,
            )
        )

    return sorted(clauses, key=lambda clause: clause.quality, reverse=True)
