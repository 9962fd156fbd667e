"""starmap: deterministic procedural galaxy map generation."""

from .errors import MapConfigError
from .models import MapConfig, MapModel
from .engine import GeneratedMap, generate_map, load_map

__all__ = [
    "MapConfigError",
    "MapConfig",
    "MapModel",
    "GeneratedMap",
    "generate_map",
    "load_map",
]

__version__ = "0.1.0"
