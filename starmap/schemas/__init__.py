"""Pydantic record schemas for generated and stored maps."""

from .records import (
    MapDocument,
    SectorRecord,
    StarRecord,
    SuggestedPlayerRecord,
    WormholeRecord,
)

__all__ = [
    "MapDocument",
    "SectorRecord",
    "StarRecord",
    "SuggestedPlayerRecord",
    "WormholeRecord",
]
