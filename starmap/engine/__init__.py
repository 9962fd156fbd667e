"""Map generation engine."""

from .connectivity import (
    bridge_sectors,
    build_wormholes,
    connect_adjacent_sectors,
    connect_sector_stars,
)
from .map_generator import GeneratedMap, build_galaxy, generate_map, load_map
from .placement_advisor import SuggestedPlayer, suggest_player_placements
from .sector_grid import build_sector_grid, corner_sectors, iter_sectors
from .star_placer import SectorPlacement, place_sector_stars, place_stars

__all__ = [
    "bridge_sectors",
    "build_wormholes",
    "connect_adjacent_sectors",
    "connect_sector_stars",
    "GeneratedMap",
    "build_galaxy",
    "generate_map",
    "load_map",
    "SuggestedPlayer",
    "suggest_player_placements",
    "build_sector_grid",
    "corner_sectors",
    "iter_sectors",
    "SectorPlacement",
    "place_sector_stars",
    "place_stars",
]
