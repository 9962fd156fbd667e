"""Sector grid construction."""

from ..models.sector import Sector
from ..utils.constants import WORLD_EXTENT


def build_sector_grid(
    map_size: int, extent: tuple[float, float] = WORLD_EXTENT
) -> list[list[Sector]]:
    """Partition the square world into map_size x map_size sectors.

    Sectors tile the extent exactly: sector (row, col) starts at
    ``extent_min + col * size`` horizontally and ``extent_min + row * size``
    vertically, where ``size = (extent_max - extent_min) / map_size``.
    No randomness is involved.

    Args:
        map_size: Number of sectors per side (>= 1)
        extent: (min, max) world coordinate, shared by both axes

    Returns:
        Rows of sectors, indexed ``grid[row][col]``

    Raises:
        ValueError: If map_size < 1 or the extent is empty
    """
    if map_size < 1:
        raise ValueError(f"Invalid map_size: {map_size} (must be >= 1)")
    world_min, world_max = extent
    if world_max <= world_min:
        raise ValueError(f"Invalid extent: {extent} (max must be > min)")

    sector_size = (world_max - world_min) / map_size

    return [
        [
            Sector(
                row=row,
                col=col,
                x=world_min + col * sector_size,
                y=world_min + row * sector_size,
                width=sector_size,
                height=sector_size,
            )
            for col in range(map_size)
        ]
        for row in range(map_size)
    ]


def iter_sectors(grid: list[list[Sector]]):
    """Yield sectors in row-major order, the order every stage walks them."""
    for row in grid:
        yield from row


def corner_sectors(grid: list[list[Sector]]) -> list[Sector]:
    """Corner sectors: top-left, top-right, bottom-left, bottom-right.

    Always four entries for a non-empty grid; on a single-sector grid all
    four are the same sector.
    """
    if not grid:
        return []
    last = len(grid) - 1
    return [grid[row][col] for row, col in ((0, 0), (0, last), (last, 0), (last, last))]
