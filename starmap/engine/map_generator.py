"""Deterministic galaxy map generation."""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Union

from ..errors import MapConfigError
from ..models import MapConfig, MapModel, Sector, Star, Wormhole
from ..schemas import (
    MapDocument,
    SectorRecord,
    StarRecord,
    SuggestedPlayerRecord,
    WormholeRecord,
)
from ..utils import SeededRandom, StarNameGenerator, normalize_seed
from .connectivity import build_wormholes
from .placement_advisor import SuggestedPlayer, suggest_player_placements
from .sector_grid import build_sector_grid
from .star_placer import SectorPlacement, place_stars

logger = logging.getLogger(__name__)


@dataclass
class GeneratedMap:
    """Result of one generation run.

    The model holds the stars, sectors and wormholes; the rest records how
    the run went.
    """

    model: MapModel
    suggested_players: List[SuggestedPlayer] = field(default_factory=list)
    placements: List[SectorPlacement] = field(default_factory=list)
    config: MapConfig | None = None

    @property
    def stars(self) -> List[Star]:
        return self.model.get_stars()

    @property
    def wormholes(self) -> List[Wormhole]:
        return self.model.get_wormholes()

    @property
    def sectors(self) -> List[List[Sector]]:
        return self.model.get_sectors()

    @property
    def connected(self) -> bool:
        return self.model.is_connected()

    @property
    def exhausted_sectors(self) -> List[SectorPlacement]:
        """Sectors that placed fewer stars than they drew."""
        return [p for p in self.placements if p.exhausted]

    def to_document(self) -> MapDocument:
        return MapDocument(
            config=self.config.to_dict() if self.config else None,
            stars=[StarRecord.from_star(s) for s in self.stars],
            wormholes=[WormholeRecord.from_wormhole(w) for w in self.wormholes],
            sectors=[SectorRecord.from_sector(s) for row in self.sectors for s in row],
            suggested_players=[
                SuggestedPlayerRecord(
                    sector_row=p.sector_row, sector_col=p.sector_col, star_id=p.star_id
                )
                for p in self.suggested_players
            ],
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-compatible output, also used as the storage format."""
        return self.to_document().model_dump(by_alias=True)


def generate_map(config: Union[MapConfig, Mapping[str, Any]]) -> GeneratedMap:
    """Generate a galaxy map from a configuration.

    Pipeline:
    1. Validate config (raises before any draw)
    2. Build the sector grid
    3. Place stars sector by sector (row-major)
    4. Connect stars inside sectors, then bridge neighbouring sectors
    5. Suggest player starts in the corner sectors

    The same config always yields the same map.

    Args:
        config: MapConfig, or a mapping accepted by MapConfig.from_dict

    Returns:
        GeneratedMap with the assembled MapModel

    Raises:
        MapConfigError: If the configuration is invalid
    """
    if not isinstance(config, MapConfig):
        config = MapConfig.from_dict(config)

    logger.debug("Generating map with config: %s", config.to_dict())
    rng = SeededRandom(config.numeric_seed)
    generated = build_galaxy(rng, config.map_size, config.density_min, config.density_max)
    generated.config = config

    if not generated.connected:
        components = generated.model.connected_components()
        logger.warning(
            "Generated map (seed %r) is disconnected: %d components",
            config.seed,
            len(components),
        )

    logger.info(
        "Generated map: %d stars, %d wormholes, %d suggested players",
        len(generated.stars),
        len(generated.wormholes),
        len(generated.suggested_players),
    )
    return generated


def build_galaxy(
    rng: SeededRandom, map_size: int, density_min: int, density_max: int
) -> GeneratedMap:
    """Run the generation stages with an explicit RNG and no config checks.

    generate_map() is the public entry point; this function exists so the
    stages can be driven directly (including single-sector grids).
    """
    names = StarNameGenerator(rng)
    grid = build_sector_grid(map_size)
    stars, placements = place_stars(grid, density_min, density_max, rng, names)
    stars_by_id = {star.id: star for star in stars}
    wormholes = build_wormholes(grid, stars_by_id)
    suggested = suggest_player_placements(grid, stars_by_id, rng)

    model = MapModel(seed=rng.seed)
    model.set_map_data(grid, stars, wormholes)

    return GeneratedMap(model=model, suggested_players=suggested, placements=placements)


def load_map(data: Union[MapDocument, Mapping[str, Any]], map_size: int | None = None) -> MapModel:
    """Rebuild a MapModel from stored map data.

    The model is built from scratch: stars, then wormholes, then sectors.

    Args:
        data: MapDocument or its dict form (as produced by GeneratedMap.to_dict)
        map_size: Grid size the map was generated with. Falls back to the
            stored config's mapSize; if neither is present, build_sectors
            raises.

    Returns:
        Reconstructed MapModel

    Raises:
        MapConfigError: If no map size is available or the stored seed is
            not an int or str
        pydantic.ValidationError: If the data is malformed
    """
    if not isinstance(data, MapDocument):
        data = MapDocument.model_validate(data)

    if map_size is None and data.config is not None:
        map_size = data.config.get("mapSize", data.config.get("map_size"))

    seed = data.config.get("seed") if data.config else None
    if seed is not None:
        # Same integer seed a freshly generated model carries
        try:
            seed = normalize_seed(seed)
        except TypeError as e:
            raise MapConfigError(str(e)) from e
    model = MapModel(seed=seed)
    model.set_stars(data.stars)
    model.set_wormholes(data.wormholes)
    model.build_sectors(map_size)
    return model
