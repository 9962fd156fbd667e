"""Map model: the queryable, assembled galaxy.

The model owns the canonical star-by-ID index. Sectors and wormholes hold
star IDs only and are resolved through the index when read.
"""

import logging
import math
from collections import deque
from typing import Any, Iterable, Mapping, Optional

from ..errors import MapConfigError
from ..schemas.records import StarRecord, WormholeRecord
from .economy import Economy
from .sector import Sector
from .ship import Ship
from .star import Star
from .wormhole import Wormhole

logger = logging.getLogger(__name__)


class MapModel:
    """Data container for a generated or loaded map.

    Contains no generation logic. Fresh maps are installed with
    set_map_data(); maps loaded from storage are rebuilt from scratch with
    set_stars(), set_wormholes() and build_sectors().
    """

    def __init__(self, seed: int | str | None = None):
        self.seed = seed
        self.star_lookup: dict[int, Star] = {}
        self.sectors: list[list[Sector]] = []
        self.wormholes: list[Wormhole] = []

    # ===== Assembly =====

    def set_map_data(
        self,
        sectors: list[list[Sector]],
        stars: Iterable[Star],
        wormholes: list[Wormhole],
    ) -> None:
        """Install freshly generated map data."""
        self.sectors = sectors
        self.wormholes = list(wormholes)
        self.star_lookup = {star.id: star for star in stars}

    def set_stars(self, records: Iterable[StarRecord | Mapping[str, Any]]) -> None:
        """Rebuild the star index from persisted records.

        Clears wormholes and sectors, since both refer to the old index.

        Raises:
            pydantic.ValidationError: If a record is malformed
            ValueError: If two records share an ID
        """
        lookup: dict[int, Star] = {}
        for record in records:
            if not isinstance(record, StarRecord):
                record = StarRecord.model_validate(record)
            if record.id in lookup:
                raise ValueError(f"Duplicate star id: {record.id}")
            lookup[record.id] = record.to_star()

        self.star_lookup = lookup
        self.wormholes = []
        self.sectors = []

    def set_wormholes(self, records: Iterable[WormholeRecord | Mapping[str, Any]]) -> None:
        """Rebuild wormholes from persisted records.

        Each record's star IDs are resolved through the current index. Records
        naming an unknown star are dropped with a warning, as are self loops
        and repeats of an already seen pair. Star connection lists are rebuilt
        from the kept wormholes.
        """
        for star in self.star_lookup.values():
            star.clear_connections()

        wormholes: list[Wormhole] = []
        seen: set[tuple[int, int]] = set()
        for record in records:
            if not isinstance(record, WormholeRecord):
                record = WormholeRecord.model_validate(record)

            star_a = self.star_lookup.get(record.star_a_id)
            star_b = self.star_lookup.get(record.star_b_id)
            if star_a is None or star_b is None:
                logger.warning(
                    "Wormhole references non-existent star: %s or %s",
                    record.star_a_id,
                    record.star_b_id,
                )
                continue
            if star_a.id == star_b.id:
                logger.warning("Dropping self-loop wormhole on star %s", star_a.id)
                continue

            distance = record.distance
            if distance is None:
                distance = star_a.distance_to(star_b)
            wormhole = Wormhole(star_a.id, star_b.id, distance)
            if wormhole.key in seen:
                logger.warning("Dropping duplicate wormhole %s", wormhole.key)
                continue

            seen.add(wormhole.key)
            wormholes.append(wormhole)
            star_a.add_connection(star_b.id)
            star_b.add_connection(star_a.id)

        self.wormholes = wormholes

    def build_sectors(self, original_map_size: Optional[int]) -> None:
        """Rebuild the sector grid from star positions.

        The grid spans the bounding box of the stars, split into
        original_map_size x original_map_size square sectors. Stars on the
        far edge fall into the last row/column.

        Args:
            original_map_size: Grid size the map was generated with. Required;
                guessing it from the stars would silently produce the wrong
                number of sectors.

        Raises:
            MapConfigError: If original_map_size is missing or not positive
        """
        if original_map_size is None:
            raise MapConfigError(
                "build_sectors() requires original_map_size; "
                "the caller must pass the map size the game was created with"
            )
        if isinstance(original_map_size, bool) or not isinstance(original_map_size, int):
            raise MapConfigError(f"Invalid original_map_size: {original_map_size!r} (must be int)")
        if original_map_size < 1:
            raise MapConfigError(f"Invalid original_map_size: {original_map_size} (must be >= 1)")

        stars = self.get_stars()
        if not stars:
            self.sectors = []
            return

        min_x, max_x, min_y, max_y = self.calculate_bounds(stars)
        extent = max(max_x - min_x, max_y - min_y)
        # A lone star (or stars on one point) still needs a non-zero sector
        sector_size = extent / original_map_size if extent > 0 else 1.0

        self.sectors = [
            [
                Sector(
                    row=row,
                    col=col,
                    x=min_x + col * sector_size,
                    y=min_y + row * sector_size,
                    width=sector_size,
                    height=sector_size,
                )
                for col in range(original_map_size)
            ]
            for row in range(original_map_size)
        ]

        last = original_map_size - 1
        for star in stars:
            col = min(max(math.floor((star.x - min_x) / sector_size), 0), last)
            row = min(max(math.floor((star.y - min_y) / sector_size), 0), last)
            self.sectors[row][col].star_ids.append(star.id)

    @staticmethod
    def calculate_bounds(stars: Iterable[Star]) -> tuple[float, float, float, float]:
        """Return (min_x, max_x, min_y, max_y) over the given stars."""
        xs = []
        ys = []
        for star in stars:
            xs.append(star.x)
            ys.append(star.y)
        if not xs:
            return (0.0, 0.0, 0.0, 0.0)
        return (min(xs), max(xs), min(ys), max(ys))

    # ===== Accessors =====

    def get_star_by_id(self, star_id: int) -> Optional[Star]:
        return self.star_lookup.get(star_id)

    def get_stars(self) -> list[Star]:
        """All stars in ID order."""
        return [self.star_lookup[star_id] for star_id in sorted(self.star_lookup)]

    def get_wormholes(self) -> list[Wormhole]:
        return list(self.wormholes)

    def get_sectors(self) -> list[list[Sector]]:
        return self.sectors

    def get_sector_stars(self, row: int, col: int) -> list[Star]:
        """Resolve the stars of one sector, in placement order.

        Raises:
            IndexError: If (row, col) is outside the grid
        """
        sector = self.sectors[row][col]
        return [self.star_lookup[star_id] for star_id in sector.star_ids]

    def get_connected_stars(self, star_id: int) -> list[Star]:
        star = self._require_star(star_id)
        return [
            self.star_lookup[other_id]
            for other_id in star.connected_star_ids
            if other_id in self.star_lookup
        ]

    # ===== Mutation =====

    def assign_owner(self, star_id: int, owner_id: str) -> Star:
        star = self._require_star(star_id)
        star.assign_owner(owner_id)
        return star

    def remove_owner(self, star_id: int) -> Star:
        star = self._require_star(star_id)
        star.remove_owner()
        return star

    def add_ship(self, star_id: int, ship: Ship) -> Star:
        star = self._require_star(star_id)
        star.add_ship(ship)
        return star

    def remove_ship(self, star_id: int, ship_id: str) -> Optional[Ship]:
        return self._require_star(star_id).remove_ship(ship_id)

    def attach_economy(self, star_id: int, economy: Optional[Economy] = None) -> Economy:
        """Attach an economy to a star (a fresh one if none is given)."""
        star = self._require_star(star_id)
        star.set_economy(economy if economy is not None else Economy())
        return star.economy

    def _require_star(self, star_id: int) -> Star:
        star = self.star_lookup.get(star_id)
        if star is None:
            raise KeyError(f"Unknown star id: {star_id}")
        return star

    # ===== Analysis =====

    def connected_components(self) -> list[list[int]]:
        """Group star IDs into wormhole-connected components.

        Components are listed in order of their smallest star ID, each
        sorted by ID.
        """
        adjacency: dict[int, list[int]] = {star_id: [] for star_id in self.star_lookup}
        for wormhole in self.wormholes:
            adjacency[wormhole.star_a_id].append(wormhole.star_b_id)
            adjacency[wormhole.star_b_id].append(wormhole.star_a_id)

        components = []
        visited: set[int] = set()
        for start in sorted(adjacency):
            if start in visited:
                continue
            component = []
            queue = deque([start])
            visited.add(start)
            while queue:
                current = queue.popleft()
                component.append(current)
                for neighbor in adjacency[current]:
                    if neighbor not in visited:
                        visited.add(neighbor)
                        queue.append(neighbor)
            components.append(sorted(component))
        return components

    def is_connected(self) -> bool:
        """True if every star can reach every other star (vacuously for 0 or 1)."""
        return len(self.connected_components()) <= 1

    def stats(self) -> dict[str, float]:
        sector_count = sum(len(row) for row in self.sectors)
        star_count = len(self.star_lookup)
        return {
            "sectors": sector_count,
            "stars": star_count,
            "wormholes": len(self.wormholes),
            "average_stars_per_sector": star_count / sector_count if sector_count else 0.0,
        }
