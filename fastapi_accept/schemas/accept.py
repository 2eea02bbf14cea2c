"""Pydantic schema for parsed Accept header clauses."""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class AcceptClause(BaseModel):
    """One media-range entry of an Accept header: type/subtype, q and params."""

    model_config = ConfigDict(frozen=True)

    type: str
    sub_type: str
    quality: float = 1.0
    parameters: Dict[str, str] = Field(default_factory=dict)

    @property
    def media_range(self) -> str:
        """Return the media range as ``type/subtype``."""
        return f"{self.type}/{self.sub_type}"
