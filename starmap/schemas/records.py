"""Pydantic record schemas for map output and storage.

The generator's output doubles as the storage format: records serialize with
camelCase keys (``model_dump(by_alias=True)``) and validate from either the
camelCase keys, the snake_case field names, or the column names used by the
game database (``star_id``, ``pos_x``, ``sector_y``...).
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, Field

from ..models.sector import Sector
from ..models.star import Star
from ..models.wormhole import Wormhole


class StarRecord(BaseModel):
    """Plain star record."""

    id: int = Field(
        ge=0, validation_alias=AliasChoices("id", "star_id"), description="Star ID"
    )
    name: str = Field(min_length=1, description="Display name")
    x: float = Field(validation_alias=AliasChoices("x", "pos_x"))
    y: float = Field(validation_alias=AliasChoices("y", "pos_y"))
    z: float = Field(default=0.0, validation_alias=AliasChoices("z", "pos_z"))
    sector_row: int = Field(
        ge=0,
        validation_alias=AliasChoices("sectorRow", "sector_row", "sector_y"),
        serialization_alias="sectorRow",
    )
    sector_col: int = Field(
        ge=0,
        validation_alias=AliasChoices("sectorCol", "sector_col", "sector_x"),
        serialization_alias="sectorCol",
    )
    resource: int = Field(
        default=0,
        ge=0,
        le=100,
        validation_alias=AliasChoices("resource", "resourceValue"),
        description="Natural resource value (0-100)",
    )

    @classmethod
    def from_star(cls, star: Star) -> "StarRecord":
        return cls(
            id=star.id,
            name=star.name,
            x=star.x,
            y=star.y,
            z=star.z,
            sector_row=star.sector_row,
            sector_col=star.sector_col,
            resource=star.resource,
        )

    def to_star(self) -> Star:
        """Build a fresh Star with empty gameplay fields."""
        return Star(
            id=self.id,
            name=self.name,
            x=self.x,
            y=self.y,
            z=self.z,
            sector_row=self.sector_row,
            sector_col=self.sector_col,
            resource=self.resource,
        )


class WormholeRecord(BaseModel):
    """Plain wormhole record (an unordered star ID pair)."""

    star_a_id: int = Field(
        validation_alias=AliasChoices("starAId", "star_a_id", "aStarId"),
        serialization_alias="starAId",
    )
    star_b_id: int = Field(
        validation_alias=AliasChoices("starBId", "star_b_id", "bStarId"),
        serialization_alias="starBId",
    )
    distance: float | None = Field(default=None, description="Length at creation time")

    @classmethod
    def from_wormhole(cls, wormhole: Wormhole) -> "WormholeRecord":
        return cls(
            star_a_id=wormhole.star_a_id,
            star_b_id=wormhole.star_b_id,
            distance=wormhole.distance,
        )


class SuggestedPlayerRecord(BaseModel):
    """Suggested player start: a corner sector and one of its stars."""

    sector_row: int = Field(
        validation_alias=AliasChoices("sectorRow", "sector_row"),
        serialization_alias="sectorRow",
    )
    sector_col: int = Field(
        validation_alias=AliasChoices("sectorCol", "sector_col"),
        serialization_alias="sectorCol",
    )
    star_id: int = Field(
        validation_alias=AliasChoices("starId", "star_id"),
        serialization_alias="starId",
    )


class SectorRecord(BaseModel):
    """Plain sector record."""

    row: int = Field(ge=0)
    col: int = Field(ge=0)
    x: float
    y: float
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    star_ids: list[int] = Field(
        default_factory=list,
        validation_alias=AliasChoices("starIds", "star_ids"),
        serialization_alias="starIds",
    )

    @classmethod
    def from_sector(cls, sector: Sector) -> "SectorRecord":
        return cls(
            row=sector.row,
            col=sector.col,
            x=sector.x,
            y=sector.y,
            width=sector.width,
            height=sector.height,
            star_ids=list(sector.star_ids),
        )


class MapDocument(BaseModel):
    """A whole generated map as written to storage."""

    config: dict[str, Any] | None = None
    stars: list[StarRecord] = Field(default_factory=list)
    wormholes: list[WormholeRecord] = Field(default_factory=list)
    sectors: list[SectorRecord] = Field(default_factory=list)
    suggested_players: list[SuggestedPlayerRecord] = Field(
        default_factory=list,
        validation_alias=AliasChoices("suggestedPlayers", "suggested_players"),
        serialization_alias="suggestedPlayers",
    )
