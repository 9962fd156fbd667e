"""Data models for starmap."""

from .config import MapConfig
from .economy import Economy
from .sector import Sector
from .ship import Ship
from .star import Star
from .wormhole import Wormhole
from .map_model import MapModel

__all__ = [
    "MapConfig",
    "Economy",
    "Sector",
    "Ship",
    "Star",
    "Wormhole",
    "MapModel",
]
