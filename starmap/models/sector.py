"""Sector data model."""

from dataclasses import dataclass, field


@dataclass
class Sector:
    """One cell of the generation grid.

    A sector owns a square region of the world and the IDs of the stars
    placed inside it, in placement order.
    """

    row: int  # Grid row (0 = top)
    col: int  # Grid column (0 = left)
    x: float  # Left edge
    y: float  # Top edge
    width: float
    height: float
    star_ids: list[int] = field(default_factory=list)

    def __post_init__(self):
        """Validate sector data after initialization."""
        if self.row < 0 or self.col < 0:
            raise ValueError(f"Invalid sector coordinates: ({self.row}, {self.col}) (must be >= 0)")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Invalid sector size: {self.width}x{self.height} (must be > 0)"
            )

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """(min_x, min_y, max_x, max_y)"""
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    def contains(self, x: float, y: float) -> bool:
        """True if (x, y) lies inside this sector (left/top edges inclusive)."""
        min_x, min_y, max_x, max_y = self.bounds
        return min_x <= x < max_x and min_y <= y < max_y

    @property
    def is_empty(self) -> bool:
        return not self.star_ids
