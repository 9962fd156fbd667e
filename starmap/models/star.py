"""Star system data model."""

from dataclasses import dataclass, field
from typing import Optional

from ..utils.constants import RESOURCE_RANGE
from ..utils.distance import star_distance
from .economy import Economy
from .ship import Ship


@dataclass
class Star:
    """Represents a star system on the map.

    Position, sector and resource value are fixed at generation time. The
    gameplay fields (owner, ships, economy) start empty and are written later
    through MapModel. Connections are stored as star IDs so that stars never
    hold references to each other.
    """

    id: int  # Unique identifier, assigned in placement order
    name: str  # Generated display name
    x: float
    y: float
    z: float  # Depth jitter, visual only
    sector_row: int
    sector_col: int
    resource: int = 0  # Natural resource value (0-100)
    owner: Optional[str] = None  # Owning player ID, or None
    ships: list[Ship] = field(default_factory=list)
    economy: Optional[Economy] = None
    connected_star_ids: list[int] = field(default_factory=list)

    def __post_init__(self):
        """Validate star data after initialization."""
        if self.id < 0:
            raise ValueError(f"Invalid id: {self.id} (must be >= 0)")
        if not self.name:
            raise ValueError("name cannot be empty")
        lo, hi = RESOURCE_RANGE
        if not (lo <= self.resource <= hi):
            raise ValueError(f"Invalid resource: {self.resource} (must be {lo}-{hi})")
        if self.sector_row < 0 or self.sector_col < 0:
            raise ValueError(
                f"Invalid sector: ({self.sector_row}, {self.sector_col}) (must be >= 0)"
            )
        if self.id in self.connected_star_ids:
            raise ValueError(f"Star {self.id} cannot be connected to itself")

    @property
    def position(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @property
    def sector(self) -> tuple[int, int]:
        """(row, col) of the owning sector."""
        return (self.sector_row, self.sector_col)

    def distance_to(self, other: "Star") -> float:
        return star_distance(self, other)

    # ===== Ownership =====

    def assign_owner(self, owner_id: str) -> None:
        if not owner_id:
            raise ValueError("owner_id cannot be empty")
        self.owner = owner_id

    def remove_owner(self) -> None:
        self.owner = None

    @property
    def is_owned(self) -> bool:
        return self.owner is not None

    # ===== Ships =====

    def add_ship(self, ship: Ship) -> None:
        """Station a ship here. Adding the same ship twice is a no-op."""
        if ship not in self.ships:
            self.ships.append(ship)

    def remove_ship(self, ship_id: str) -> Optional[Ship]:
        """Remove a ship by ID.

        Returns:
            The removed ship, or None if it was not here
        """
        for i, ship in enumerate(self.ships):
            if ship.id == ship_id:
                return self.ships.pop(i)
        return None

    def find_ship(self, ship_id: str) -> Optional[Ship]:
        return next((s for s in self.ships if s.id == ship_id), None)

    def clear_ships(self) -> None:
        self.ships = []

    # ===== Economy =====

    def set_economy(self, economy: Optional[Economy]) -> None:
        self.economy = economy

    def create_economy(self, **kwargs) -> Economy:
        """Attach a new Economy unless one exists, and return the current one."""
        if self.economy is None:
            self.economy = Economy(**kwargs)
        return self.economy

    def remove_economy(self) -> None:
        self.economy = None

    # ===== Connections =====

    def add_connection(self, star_id: int) -> bool:
        """Record a wormhole to star_id.

        Self connections and duplicates are ignored.

        Returns:
            True if the connection was added
        """
        if star_id == self.id or star_id in self.connected_star_ids:
            return False
        self.connected_star_ids.append(star_id)
        return True

    def remove_connection(self, star_id: int) -> None:
        if star_id in self.connected_star_ids:
            self.connected_star_ids.remove(star_id)

    def is_connected_to(self, star_id: int) -> bool:
        return star_id in self.connected_star_ids

    def clear_connections(self) -> None:
        self.connected_star_ids = []
