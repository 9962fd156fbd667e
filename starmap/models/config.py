"""Map generation configuration."""

from dataclasses import dataclass
from typing import Any, Mapping

from ..errors import MapConfigError
from ..utils.constants import DENSITY_RANGE, MAP_SIZE_RANGE
from ..utils.rng import normalize_seed

# Accepted spellings for each config key (camelCase from stored games)
_KEY_ALIASES = {
    "seed": ("seed",),
    "map_size": ("map_size", "mapSize"),
    "density_min": ("density_min", "densityMin", "minStarDensity"),
    "density_max": ("density_max", "densityMax", "maxStarDensity"),
}


@dataclass(frozen=True)
class MapConfig:
    """Inputs that fully determine a generated map.

    The same MapConfig always produces the same map.
    """

    seed: int | str  # Integer seed, or text hashed to one
    map_size: int  # Grid is map_size x map_size sectors (2-9)
    density_min: int  # Minimum stars drawn per sector (0-9)
    density_max: int  # Maximum stars drawn per sector (0-9)

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.seed, bool) or not isinstance(self.seed, (int, str)):
            raise MapConfigError(f"Invalid seed: {self.seed!r} (must be int or str)")

        lo, hi = MAP_SIZE_RANGE
        if not _is_int(self.map_size) or not lo <= self.map_size <= hi:
            raise MapConfigError(f"Invalid map_size: {self.map_size} (must be {lo}-{hi})")

        lo, hi = DENSITY_RANGE
        if not _is_int(self.density_min) or not lo <= self.density_min <= hi:
            raise MapConfigError(f"Invalid density_min: {self.density_min} (must be {lo}-{hi})")
        if not _is_int(self.density_max) or not lo <= self.density_max <= hi:
            raise MapConfigError(f"Invalid density_max: {self.density_max} (must be {lo}-{hi})")
        if self.density_min > self.density_max:
            raise MapConfigError(
                f"Invalid density range: {self.density_min}-{self.density_max} "
                f"(density_min must be <= density_max)"
            )

    @property
    def numeric_seed(self) -> int:
        """Integer seed fed to SeededRandom."""
        return normalize_seed(self.seed)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MapConfig":
        """Build a config from a mapping using snake_case or camelCase keys.

        Raises:
            MapConfigError: If a key is missing or a value is invalid
        """
        values = {}
        for field_name, aliases in _KEY_ALIASES.items():
            for key in aliases:
                if key in data:
                    values[field_name] = data[key]
                    break
            else:
                raise MapConfigError(f"Missing config key: {field_name}")
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Config in the camelCase shape used by stored games."""
        return {
            "seed": self.seed,
            "mapSize": self.map_size,
            "densityMin": self.density_min,
            "densityMax": self.density_max,
        }


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
