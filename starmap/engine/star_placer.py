"""Star placement within sectors using bounded rejection sampling."""

import logging
from dataclasses import dataclass
from typing import List, Tuple

from ..models.sector import Sector
from ..models.star import Star
from ..utils import (
    MAX_PLACEMENT_ATTEMPTS,
    MIN_SEPARATION_RATIO,
    RESOURCE_RANGE,
    SECTOR_MARGIN_RATIO,
    STAR_DEPTH_RANGE,
    SeededRandom,
    StarNameGenerator,
    euclidean_distance,
)
from .sector_grid import iter_sectors

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SectorPlacement:
    """Outcome of placing stars in one sector.

    Distinguishes a sector that asked for few stars from one where stars
    were dropped after running out of attempts.
    """

    row: int
    col: int
    requested: int  # Star count drawn from the density range
    placed: int  # Stars actually placed

    @property
    def dropped(self) -> int:
        """Number of stars dropped after MAX_PLACEMENT_ATTEMPTS failures."""
        return self.requested - self.placed

    @property
    def exhausted(self) -> bool:
        """True if any star ran out of placement attempts."""
        return self.dropped > 0

    @property
    def complete(self) -> bool:
        return self.placed == self.requested


def place_stars(
    grid: list[list[Sector]],
    density_min: int,
    density_max: int,
    rng: SeededRandom,
    names: StarNameGenerator,
) -> Tuple[List[Star], List[SectorPlacement]]:
    """Place stars in every sector of the grid.

    Sectors are visited in row-major order and star IDs are handed out
    sequentially from 0, so the star list comes back sorted by ID. Each
    sector's ``star_ids`` is filled in as a side effect.

    Args:
        grid: Sector grid from build_sector_grid
        density_min: Minimum stars drawn per sector
        density_max: Maximum stars drawn per sector
        rng: Random number generator (shared across all sectors)
        names: Name generator for the map

    Returns:
        Tuple of (all stars in ID order, one SectorPlacement per sector)
    """
    stars: List[Star] = []
    placements: List[SectorPlacement] = []

    for sector in iter_sectors(grid):
        sector_stars, requested = place_sector_stars(
            sector, density_min, density_max, rng, names, next_id=len(stars)
        )
        sector.star_ids = [star.id for star in sector_stars]
        stars.extend(sector_stars)

        placement = SectorPlacement(
            row=sector.row, col=sector.col, requested=requested, placed=len(sector_stars)
        )
        if placement.exhausted:
            logger.debug(
                "Sector (%d, %d): placed %d of %d requested stars",
                sector.row,
                sector.col,
                placement.placed,
                placement.requested,
            )
        placements.append(placement)

    return stars, placements


def place_sector_stars(
    sector: Sector,
    density_min: int,
    density_max: int,
    rng: SeededRandom,
    names: StarNameGenerator,
    next_id: int,
) -> Tuple[List[Star], int]:
    """Place stars inside a single sector.

    Draws the star count, then for each star samples up to
    MAX_PLACEMENT_ATTEMPTS candidate positions inside the sector (inset by
    SECTOR_MARGIN_RATIO), rejecting any that land closer than
    MIN_SEPARATION_RATIO * sector width to a star already placed here. A star
    whose attempts all fail is skipped.

    Draw order per attempt is x, y, z; an accepted candidate then draws its
    resource value and its name.

    Args:
        sector: Sector to fill
        density_min: Minimum star count
        density_max: Maximum star count
        rng: Random number generator
        names: Name generator
        next_id: ID for the first star placed here

    Returns:
        Tuple of (placed stars, requested star count)
    """
    requested = rng.next_int(density_min, density_max)

    margin_x = sector.width * SECTOR_MARGIN_RATIO
    margin_y = sector.height * SECTOR_MARGIN_RATIO
    available_width = sector.width - 2 * margin_x
    available_height = sector.height - 2 * margin_y
    min_separation = sector.width * MIN_SEPARATION_RATIO
    z_min, z_max = STAR_DEPTH_RANGE

    placed: List[Star] = []
    for _ in range(requested):
        for _attempt in range(MAX_PLACEMENT_ATTEMPTS):
            x = sector.x + margin_x + rng.next_float(0, available_width)
            y = sector.y + margin_y + rng.next_float(0, available_height)
            z = rng.next_float(z_min, z_max)

            if _too_close(x, y, z, placed, min_separation):
                continue

            resource = rng.next_int(*RESOURCE_RANGE)
            placed.append(
                Star(
                    id=next_id + len(placed),
                    name=names.next_name(),
                    x=x,
                    y=y,
                    z=z,
                    sector_row=sector.row,
                    sector_col=sector.col,
                    resource=resource,
                )
            )
            break

    return placed, requested


def _too_close(x: float, y: float, z: float, placed: List[Star], min_separation: float) -> bool:
    for star in placed:
        if euclidean_distance(x, y, z, star.x, star.y, star.z) < min_separation:
            return True
    return False
