"""Map generation constants."""

# Map configuration bounds (inclusive)
MAP_SIZE_RANGE = (2, 9)  # Grid is map_size x map_size sectors
DENSITY_RANGE = (0, 9)  # Stars drawn per sector

# World extent in normalized coordinates, shared by both axes
WORLD_EXTENT = (-1.0, 1.0)

# Star placement
MAX_PLACEMENT_ATTEMPTS = 50  # Tries per star before giving up
SECTOR_MARGIN_RATIO = 0.05  # Inset from sector edges (fraction of width/height)
MIN_SEPARATION_RATIO = 0.1  # Minimum distance between stars (fraction of sector width)
STAR_DEPTH_RANGE = (-0.01, 0.01)  # z jitter, visual only
RESOURCE_RANGE = (0, 100)  # Natural resource value

# Star naming
NAME_MAX_ATTEMPTS = 50
UNIQUE_NAME_MAX_ATTEMPTS = 100
NAME_LENGTH_RANGE = (3, 12)

# Testing
RNG_SEED_DEFAULT = 12345  # Default seed for testing
