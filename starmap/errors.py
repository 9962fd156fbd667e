"""Exceptions raised by map generation."""


class MapConfigError(ValueError):
    """Invalid generation configuration or caller misuse.

    Raised before any random draw happens, so a failed call never leaves a
    partially generated map behind.
    """
