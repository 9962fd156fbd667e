"""Ship data model for vessels stationed at stars."""

from dataclasses import dataclass


@dataclass
class Ship:
    """Represents a single ship parked at a star.

    Ships are owned by other subsystems; the map only keeps track of which
    star each ship currently sits at.
    """

    id: str  # Unique identifier (e.g., "ship-003")
    owner: str  # Owning player ID
    hp: float = 100.0  # Hit points
    power: float = 10.0  # Combat power

    def __post_init__(self):
        """Validate ship data after initialization."""
        if not self.id:
            raise ValueError("id cannot be empty")
        if not self.owner:
            raise ValueError("owner cannot be empty")
        if self.hp < 0:
            raise ValueError(f"Invalid hp: {self.hp} (must be >= 0)")
        if self.power < 0:
            raise ValueError(f"Invalid power: {self.power} (must be >= 0)")
