"""Tests for distance calculations."""

import math

from starmap.models import Star
from starmap.utils import euclidean_distance, star_distance


class TestEuclideanDistance:
    """Test Euclidean distance calculation."""

    def test_distance_same_point(self):
        """Test distance from a point to itself."""
        assert euclidean_distance(1, 2, 3, 1, 2, 3) == 0

    def test_distance_axis_aligned(self):
        """Test distance along each axis."""
        assert euclidean_distance(0, 0, 0, 5, 0, 0) == 5
        assert euclidean_distance(0, 0, 0, 0, -5, 0) == 5
        assert euclidean_distance(0, 0, 0, 0, 0, 5) == 5

    def test_distance_pythagorean(self):
        """Test a 3-4-5 triangle."""
        assert euclidean_distance(0, 0, 0, 3, 4, 0) == 5

    def test_distance_3d(self):
        """Test that depth contributes to the distance."""
        assert math.isclose(euclidean_distance(0, 0, 0, 1, 1, 1), math.sqrt(3))

    def test_distance_symmetric(self):
        """Test distance is the same in both directions."""
        assert euclidean_distance(-1, 2, 0.5, 3, -4, 0) == euclidean_distance(3, -4, 0, -1, 2, 0.5)

    def test_star_distance(self):
        """Test distance between two stars."""
        a = Star(id=0, name="Alar", x=0.0, y=0.0, z=0.0, sector_row=0, sector_col=0)
        b = Star(id=1, name="Belor", x=0.3, y=0.4, z=0.0, sector_row=0, sector_col=0)
        assert math.isclose(star_distance(a, b), 0.5)
        assert math.isclose(a.distance_to(b), 0.5)
