"""Distance calculations for the galaxy map."""

import math


def euclidean_distance(
    x1: float, y1: float, z1: float, x2: float, y2: float, z2: float
) -> float:
    """Calculate Euclidean distance between two points in 3D space.

    Wormhole lengths and star spacing are both measured this way, so the
    tiny z jitter applied to stars contributes to every distance.

    Args:
        x1: X coordinate of first point
        y1: Y coordinate of first point
        z1: Z coordinate of first point
        x2: X coordinate of second point
        y2: Y coordinate of second point
        z2: Z coordinate of second point

    Returns:
        Euclidean distance between the two points

    Examples:
        >>> euclidean_distance(0, 0, 0, 3, 4, 0)
        5.0
    """
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2 + (z2 - z1) ** 2)


def star_distance(a, b) -> float:
    """Distance between two objects exposing x, y and z attributes."""
    return euclidean_distance(a.x, a.y, a.z, b.x, b.y, b.z)
