"""Tests for star placement."""

import itertools

from starmap.engine import (
    SectorPlacement,
    build_sector_grid,
    iter_sectors,
    place_sector_stars,
    place_stars,
)
from starmap.models import Sector
from starmap.utils import (
    MIN_SEPARATION_RATIO,
    SECTOR_MARGIN_RATIO,
    STAR_DEPTH_RANGE,
    SeededRandom,
    StarNameGenerator,
)


class StuckRandom(SeededRandom):
    """RNG that always returns the lowest value, so every candidate collides."""

    def next_int(self, min_value, max_value):
        return min(min_value, max_value)

    def next_float(self, min_value=0.0, max_value=1.0):
        return min(min_value, max_value)


def place(seed, map_size=3, density_min=2, density_max=6):
    rng = SeededRandom(seed)
    grid = build_sector_grid(map_size)
    stars, placements = place_stars(grid, density_min, density_max, rng, StarNameGenerator(rng))
    return grid, stars, placements


class TestPlaceStars:
    """Test place_stars over a whole grid."""

    def test_ids_sequential_in_sector_order(self):
        """Test IDs count up from 0 in row-major sector order."""
        grid, stars, _ = place(1)
        assert [s.id for s in stars] == list(range(len(stars)))

        flattened = [star_id for sector in iter_sectors(grid) for star_id in sector.star_ids]
        assert flattened == [s.id for s in stars]

    def test_stars_know_their_sector(self):
        """Test each star lies inside the sector that lists it."""
        grid, stars, _ = place(2)
        by_id = {s.id: s for s in stars}
        for sector in iter_sectors(grid):
            for star_id in sector.star_ids:
                star = by_id[star_id]
                assert star.sector == (sector.row, sector.col)
                assert sector.contains(star.x, star.y)

    def test_density_bounds(self):
        """Test every sector draws a count in range and never places more."""
        for seed in range(10):
            grid, _, placements = place(seed, map_size=4, density_min=3, density_max=7)
            assert len(placements) == 16
            for placement, sector in zip(placements, iter_sectors(grid)):
                assert 3 <= placement.requested <= 7
                assert placement.placed <= placement.requested
                assert placement.placed == len(sector.star_ids)

    def test_placement_margin(self):
        """Test stars keep clear of sector edges."""
        grid, stars, _ = place(3, density_min=9, density_max=9)
        by_id = {s.id: s for s in stars}
        z_min, z_max = STAR_DEPTH_RANGE
        for sector in iter_sectors(grid):
            margin = sector.width * SECTOR_MARGIN_RATIO
            for star_id in sector.star_ids:
                star = by_id[star_id]
                assert sector.x + margin <= star.x < sector.x + sector.width - margin
                assert sector.y + margin <= star.y < sector.y + sector.height - margin
                assert z_min <= star.z < z_max

    def test_separation_invariant(self):
        """Test stars in one sector are at least the minimum separation apart."""
        grid, stars, _ = place(4, map_size=5, density_min=9, density_max=9)
        by_id = {s.id: s for s in stars}
        for sector in iter_sectors(grid):
            min_separation = sector.width * MIN_SEPARATION_RATIO
            sector_stars = [by_id[i] for i in sector.star_ids]
            for a, b in itertools.combinations(sector_stars, 2):
                assert a.distance_to(b) >= min_separation

    def test_resource_values(self):
        """Test resource values fall in 0-100."""
        _, stars, _ = place(5, density_min=5, density_max=9)
        assert stars
        assert all(0 <= s.resource <= 100 for s in stars)

    def test_zero_density(self):
        """Test a zero density range places nothing."""
        grid, stars, placements = place(6, density_min=0, density_max=0)
        assert stars == []
        assert all(p.requested == 0 and p.placed == 0 for p in placements)
        assert all(p.complete for p in placements)

    def test_deterministic(self):
        """Test the same seed places the same stars."""
        _, stars_a, _ = place(7)
        _, stars_b, _ = place(7)
        assert [(s.id, s.name, s.position, s.resource) for s in stars_a] == [
            (s.id, s.name, s.position, s.resource) for s in stars_b
        ]


class TestPlacementExhaustion:
    """Test behaviour when candidates keep colliding."""

    def test_exhausted_stars_are_skipped(self):
        """Test a star that never finds room is dropped, not an error."""
        rng = StuckRandom(0)
        sector = Sector(row=0, col=0, x=0.0, y=0.0, width=1.0, height=1.0)
        stars, requested = place_sector_stars(
            sector, 3, 3, rng, StarNameGenerator(rng), next_id=10
        )
        assert requested == 3
        assert len(stars) == 1
        assert stars[0].id == 10

    def test_exhaustion_reported_per_sector(self):
        """Test SectorPlacement tells requested apart from placed."""
        rng = StuckRandom(0)
        grid = build_sector_grid(2)
        stars, placements = place_stars(grid, 3, 3, rng, StarNameGenerator(rng))
        assert len(stars) == 4
        for placement in placements:
            assert placement.requested == 3
            assert placement.placed == 1
            assert placement.dropped == 2
            assert placement.exhausted is True
            assert not placement.complete

    def test_full_sector_not_exhausted(self):
        """Test a sector that placed everything reports no drops."""
        placement = SectorPlacement(row=0, col=0, requested=4, placed=4)
        assert placement.dropped == 0
        assert placement.exhausted is False
        assert placement.complete

        empty = SectorPlacement(row=1, col=1, requested=0, placed=0)
        assert empty.exhausted is False
