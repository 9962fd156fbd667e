"""Suggested player start positions."""

from dataclasses import dataclass
from typing import Dict, List

from ..models.sector import Sector
from ..models.star import Star
from ..utils import SeededRandom
from .sector_grid import corner_sectors


@dataclass(frozen=True)
class SuggestedPlayer:
    """A proposed starting star in one of the corner sectors."""

    sector_row: int
    sector_col: int
    star_id: int


def suggest_player_placements(
    grid: List[List[Sector]], stars_by_id: Dict[int, Star], rng: SeededRandom
) -> List[SuggestedPlayer]:
    """Pick one star in each corner sector as a player start.

    Corners are visited top-left, top-right, bottom-left, bottom-right, and
    each non-empty one gets a star chosen with ``rng.pick``. Empty corners
    are skipped.

    Args:
        grid: Sector grid with star_ids filled in
        stars_by_id: Star index
        rng: Random number generator, continued from placement

    Returns:
        Up to four suggestions, in corner order
    """
    suggestions: List[SuggestedPlayer] = []
    for sector in corner_sectors(grid):
        if sector.is_empty:
            continue
        star = stars_by_id[rng.pick(sector.star_ids)]
        suggestions.append(
            SuggestedPlayer(sector_row=sector.row, sector_col=sector.col, star_id=star.id)
        )
    return suggestions
