"""Wormhole graph construction.

Two passes, both scanning in a fixed order so the graph is reproducible:

1. Inside each sector, stars are joined into a spanning tree by repeatedly
   attaching the unconnected star closest to any already connected star.
2. Each sector is bridged to its right and bottom neighbours through the
   closest pair of stars across the shared border.

Comparisons use strict ``<``, so among equally close pairs the first one
met in scan order wins.
"""

import math
from typing import Dict, List, Optional, Sequence

from ..models.sector import Sector
from ..models.star import Star
from ..models.wormhole import Wormhole
from .sector_grid import iter_sectors


def connect_sector_stars(stars: Sequence[Star]) -> List[Wormhole]:
    """Connect all stars of one sector into a single tree.

    Starts from the first star in placement order. Each round scans every
    (unconnected, connected) pair, unconnected stars in placement order on
    the outside, and attaches the closest unconnected star to its closest
    connected star.

    Args:
        stars: Stars of one sector, in placement order

    Returns:
        len(stars) - 1 wormholes (none for fewer than 2 stars)
    """
    if len(stars) < 2:
        return []

    unconnected = list(stars[1:])
    connected = [stars[0]]
    wormholes: List[Wormhole] = []

    while unconnected:
        nearest_index = 0
        nearest_connected: Optional[Star] = None
        nearest_distance = math.inf

        for i, candidate in enumerate(unconnected):
            for anchor in connected:
                distance = anchor.distance_to(candidate)
                if distance < nearest_distance:
                    nearest_distance = distance
                    nearest_index = i
                    nearest_connected = anchor

        nearest = unconnected.pop(nearest_index)
        connected.append(nearest)
        wormholes.append(Wormhole(nearest_connected.id, nearest.id, nearest_distance))

    return wormholes


def bridge_sectors(stars_a: Sequence[Star], stars_b: Sequence[Star]) -> Optional[Wormhole]:
    """Find the wormhole joining the closest pair of stars across two sectors.

    Returns:
        Wormhole from the stars_a side to the stars_b side, or None if either
        sector is empty
    """
    closest: Optional[Wormhole] = None
    closest_distance = math.inf

    for star_a in stars_a:
        for star_b in stars_b:
            distance = star_a.distance_to(star_b)
            if distance < closest_distance:
                closest_distance = distance
                closest = Wormhole(star_a.id, star_b.id, distance)

    return closest


def connect_adjacent_sectors(
    grid: List[List[Sector]], stars_by_id: Dict[int, Star]
) -> List[Wormhole]:
    """Bridge every sector to its right neighbour, then its bottom neighbour.

    Left, top and diagonal neighbours are never bridged directly; those links
    come from the other sector's right/bottom bridge. Empty sectors produce
    no bridge in either direction.
    """
    wormholes: List[Wormhole] = []
    size = len(grid)

    for sector in iter_sectors(grid):
        neighbours = []
        if sector.col < size - 1:
            neighbours.append(grid[sector.row][sector.col + 1])
        if sector.row < size - 1:
            neighbours.append(grid[sector.row + 1][sector.col])

        own_stars = _resolve(sector, stars_by_id)
        for neighbour in neighbours:
            bridge = bridge_sectors(own_stars, _resolve(neighbour, stars_by_id))
            if bridge is not None:
                wormholes.append(bridge)

    return wormholes


def build_wormholes(grid: List[List[Sector]], stars_by_id: Dict[int, Star]) -> List[Wormhole]:
    """Build the full wormhole graph for a placed grid.

    Runs the intra-sector pass over every sector in row-major order, then the
    inter-sector pass. Both stars of every wormhole get each other recorded
    in ``connected_star_ids``. A pair already joined is never joined again.

    Args:
        grid: Sector grid with star_ids filled in
        stars_by_id: Star index covering every ID in the grid

    Returns:
        Intra-sector wormholes followed by inter-sector bridges
    """
    candidates: List[Wormhole] = []
    for sector in iter_sectors(grid):
        candidates.extend(connect_sector_stars(_resolve(sector, stars_by_id)))
    candidates.extend(connect_adjacent_sectors(grid, stars_by_id))

    wormholes: List[Wormhole] = []
    seen = set()
    for wormhole in candidates:
        if wormhole.key in seen:
            continue
        seen.add(wormhole.key)
        wormholes.append(wormhole)
        stars_by_id[wormhole.star_a_id].add_connection(wormhole.star_b_id)
        stars_by_id[wormhole.star_b_id].add_connection(wormhole.star_a_id)

    return wormholes


def _resolve(sector: Sector, stars_by_id: Dict[int, Star]) -> List[Star]:
    return [stars_by_id[star_id] for star_id in sector.star_ids]
