"""Utility functions and constants for starmap."""

from .constants import (
    DENSITY_RANGE,
    MAP_SIZE_RANGE,
    MAX_PLACEMENT_ATTEMPTS,
    MIN_SEPARATION_RATIO,
    RESOURCE_RANGE,
    RNG_SEED_DEFAULT,
    SECTOR_MARGIN_RATIO,
    STAR_DEPTH_RANGE,
    WORLD_EXTENT,
)
from .distance import euclidean_distance, star_distance
from .naming import StarNameGenerator, generate_star_name
from .rng import SeededRandom, hash_seed, normalize_seed

__all__ = [
    "DENSITY_RANGE",
    "MAP_SIZE_RANGE",
    "MAX_PLACEMENT_ATTEMPTS",
    "MIN_SEPARATION_RATIO",
    "RESOURCE_RANGE",
    "RNG_SEED_DEFAULT",
    "SECTOR_MARGIN_RATIO",
    "STAR_DEPTH_RANGE",
    "WORLD_EXTENT",
    "euclidean_distance",
    "star_distance",
    "StarNameGenerator",
    "generate_star_name",
    "SeededRandom",
    "hash_seed",
    "normalize_seed",
]
