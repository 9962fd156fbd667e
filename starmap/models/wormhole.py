"""Wormhole data model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Wormhole:
    """An undirected edge between two stars.

    Wormholes reference stars by ID; resolve them through MapModel.
    """

    star_a_id: int
    star_b_id: int
    distance: float | None = None  # Euclidean length at creation time

    def __post_init__(self):
        """Validate wormhole data after initialization."""
        if self.star_a_id == self.star_b_id:
            raise ValueError(f"Invalid wormhole: star {self.star_a_id} connected to itself")

    @property
    def key(self) -> tuple[int, int]:
        """Unordered pair identifying this wormhole."""
        a, b = self.star_a_id, self.star_b_id
        return (a, b) if a <= b else (b, a)

    def other_end(self, star_id: int) -> int:
        """Return the ID at the opposite end from star_id.

        Raises:
            ValueError: If star_id is not an endpoint
        """
        if star_id == self.star_a_id:
            return self.star_b_id
        if star_id == self.star_b_id:
            return self.star_a_id
        raise ValueError(f"Star {star_id} is not an endpoint of wormhole {self.key}")
