"""Tests for map generator."""

import itertools
import logging
from collections import deque

import pytest

from starmap import MapConfig, MapConfigError, generate_map
from starmap.engine import build_galaxy, iter_sectors
from starmap.utils import MIN_SEPARATION_RATIO, SeededRandom, hash_seed

SCENARIO = MapConfig(seed=12345, map_size=5, density_min=3, density_max=7)


def snapshot(generated):
    """Everything that must match between two runs."""
    return (
        [(s.id, s.name, s.x, s.y, s.z, s.sector, s.resource) for s in generated.stars],
        [(w.star_a_id, w.star_b_id, w.distance) for w in generated.wormholes],
        generated.suggested_players,
    )


def bfs(generated, start):
    adjacency = {s.id: [] for s in generated.stars}
    for w in generated.wormholes:
        adjacency[w.star_a_id].append(w.star_b_id)
        adjacency[w.star_b_id].append(w.star_a_id)
    visited = {start}
    queue = deque([start])
    while queue:
        for neighbor in adjacency[queue.popleft()]:
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
    return visited


class TestMapGenerator:
    """Test map generation."""

    def test_generate_scenario(self):
        """Test basic properties of the reference scenario."""
        generated = generate_map(SCENARIO)

        assert generated.config == SCENARIO
        assert len(generated.sectors) == 5
        assert all(len(row) == 5 for row in generated.sectors)
        assert 25 * 3 <= len(generated.stars) <= 25 * 7
        assert [s.id for s in generated.stars] == list(range(len(generated.stars)))
        assert generated.model.seed == 12345

    def test_deterministic_generation(self):
        """Test that the same config produces the same map, byte for byte."""
        first = generate_map(SCENARIO)
        second = generate_map(SCENARIO)
        assert snapshot(first) == snapshot(second)
        assert first.to_dict() == second.to_dict()

    def test_bfs_from_star_zero_reaches_all(self):
        """Test the reference scenario is fully traversable from star 0."""
        generated = generate_map(SCENARIO)
        assert bfs(generated, 0) == {s.id for s in generated.stars}
        assert generated.connected

    def test_different_seeds_produce_different_maps(self):
        """Test that different seeds produce different maps."""
        first = generate_map(SCENARIO)
        second = generate_map(MapConfig(seed=54321, map_size=5, density_min=3, density_max=7))
        assert snapshot(first) != snapshot(second)

    def test_string_seed(self):
        """Test string seeds equal their hashed integer seed."""
        by_text = generate_map(MapConfig(seed="andromeda", map_size=3, density_min=1, density_max=4))
        by_int = generate_map(
            MapConfig(seed=hash_seed("andromeda"), map_size=3, density_min=1, density_max=4)
        )
        assert snapshot(by_text) == snapshot(by_int)

    def test_negative_seed_is_distinct(self):
        """Test a negative seed does not reproduce the map of its absolute value."""
        positive = generate_map(MapConfig(seed=5, map_size=3, density_min=2, density_max=5))
        negative = generate_map(MapConfig(seed=-5, map_size=3, density_min=2, density_max=5))
        assert negative.model.seed == -5
        assert snapshot(positive) != snapshot(negative)

    def test_accepts_mapping(self):
        """Test a camelCase config mapping is accepted."""
        generated = generate_map(
            {"seed": 12345, "mapSize": 5, "densityMin": 3, "densityMax": 7}
        )
        assert snapshot(generated) == snapshot(generate_map(SCENARIO))

    def test_density_bound(self):
        """Test sector star counts stay within the density range."""
        for seed in range(5):
            generated = generate_map(MapConfig(seed=seed, map_size=6, density_min=2, density_max=5))
            for placement, sector in zip(generated.placements, iter_sectors(generated.sectors)):
                assert len(sector.star_ids) <= 5
                if not placement.exhausted:
                    assert len(sector.star_ids) >= 2

    def test_separation_invariant(self):
        """Test stars in the same sector respect the minimum separation."""
        generated = generate_map(MapConfig(seed=8, map_size=4, density_min=9, density_max=9))
        for sector in iter_sectors(generated.sectors):
            stars = generated.model.get_sector_stars(sector.row, sector.col)
            for a, b in itertools.combinations(stars, 2):
                assert a.distance_to(b) >= sector.width * MIN_SEPARATION_RATIO

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4, 99, "nebula"])
    def test_connected_when_no_sector_empty(self, seed):
        """Test the graph is connected whenever every sector has a star."""
        generated = generate_map(MapConfig(seed=seed, map_size=7, density_min=1, density_max=9))
        assert all(sector.star_ids for sector in iter_sectors(generated.sectors))
        assert generated.connected
        assert bfs(generated, 0) == {s.id for s in generated.stars}

    def test_no_duplicate_edges(self):
        """Test the wormhole list has no repeated unordered pair."""
        generated = generate_map(MapConfig(seed=5, map_size=9, density_min=0, density_max=9))
        keys = [w.key for w in generated.wormholes]
        assert len(keys) == len(set(keys))

    def test_bridging_directionality(self):
        """Test cross-sector wormholes go right or down from their first star."""
        generated = generate_map(SCENARIO)
        stars = {s.id: s for s in generated.stars}
        for wormhole in generated.wormholes:
            a = stars[wormhole.star_a_id]
            b = stars[wormhole.star_b_id]
            if a.sector == b.sector:
                continue
            assert (b.sector_row - a.sector_row, b.sector_col - a.sector_col) in {(0, 1), (1, 0)}

    def test_edge_count(self):
        """Test spanning trees per sector plus one bridge per adjacent pair."""
        generated = generate_map(SCENARIO)
        intra = sum(len(s.star_ids) - 1 for s in iter_sectors(generated.sectors))
        assert len(generated.wormholes) == intra + 2 * 5 * 4

    def test_star_names_unique(self):
        """Test no two stars share a name."""
        generated = generate_map(MapConfig(seed=3, map_size=9, density_min=9, density_max=9))
        names = [s.name for s in generated.stars]
        assert len(names) == len(set(names))

    def test_initial_gameplay_fields(self):
        """Test stars start unowned, without ships or economy."""
        for star in generate_map(SCENARIO).stars:
            assert star.owner is None
            assert star.ships == []
            assert star.economy is None

    def test_suggested_players_in_corners(self):
        """Test suggestions sit in corner sectors and name real stars."""
        generated = generate_map(SCENARIO)
        assert len(generated.suggested_players) == 4
        for suggestion in generated.suggested_players:
            assert suggestion.sector_row in (0, 4)
            assert suggestion.sector_col in (0, 4)
            star = generated.model.get_star_by_id(suggestion.star_id)
            assert star.sector == (suggestion.sector_row, suggestion.sector_col)

    def test_to_dict_shape(self):
        """Test the plain output uses the documented record keys."""
        data = generate_map(SCENARIO).to_dict()
        assert set(data) == {"config", "stars", "wormholes", "sectors", "suggestedPlayers"}
        assert set(data["stars"][0]) == {
            "id", "name", "x", "y", "z", "sectorRow", "sectorCol", "resource"
        }
        assert set(data["wormholes"][0]) == {"starAId", "starBId", "distance"}
        assert set(data["suggestedPlayers"][0]) == {"sectorRow", "sectorCol", "starId"}
        assert len(data["sectors"]) == 25
        assert data["config"] == {"seed": 12345, "mapSize": 5, "densityMin": 3, "densityMax": 7}


class TestGenerationEdgeCases:
    """Test empty maps, disconnection and configuration errors."""

    def test_single_sector_zero_density(self):
        """Test a 1x1 grid with zero density yields an empty map."""
        generated = build_galaxy(SeededRandom(1), 1, 0, 0)
        assert generated.stars == []
        assert generated.wormholes == []
        assert generated.suggested_players == []
        assert generated.connected

    def test_single_sector_suggests_four_starts(self):
        """Test a populated 1x1 grid gets a suggestion for each coinciding corner."""
        generated = build_galaxy(SeededRandom(1), 1, 3, 3)
        assert len(generated.suggested_players) == 4
        star_ids = {s.id for s in generated.stars}
        for suggestion in generated.suggested_players:
            assert (suggestion.sector_row, suggestion.sector_col) == (0, 0)
            assert suggestion.star_id in star_ids

    def test_zero_density_map(self):
        """Test an all-empty map through the public entry point."""
        generated = generate_map(MapConfig(seed=1, map_size=2, density_min=0, density_max=0))
        assert generated.stars == []
        assert generated.wormholes == []
        assert generated.suggested_players == []
        assert generated.to_dict()["stars"] == []

    def test_single_sector_config_rejected(self):
        """Test generate_map refuses map_size 1."""
        with pytest.raises(MapConfigError, match="Invalid map_size"):
            generate_map({"seed": 1, "mapSize": 1, "densityMin": 0, "densityMax": 0})

    def test_inverted_density_fails_before_placement(self, monkeypatch):
        """Test density_min > density_max raises before any star is placed."""

        def fail(*args, **kwargs):
            raise AssertionError("placement should not run")

        monkeypatch.setattr("starmap.engine.map_generator.place_stars", fail)
        with pytest.raises(MapConfigError):
            generate_map({"seed": 1, "mapSize": 5, "densityMin": 5, "densityMax": 2})

    def test_disconnected_map_is_reported(self, caplog):
        """Test a map split by empty sectors is returned and flagged."""
        for seed in range(200):
            config = MapConfig(seed=seed, map_size=3, density_min=0, density_max=1)
            with caplog.at_level(logging.WARNING, logger="starmap.engine.map_generator"):
                caplog.clear()
                generated = generate_map(config)
            if not generated.connected:
                break
        else:
            pytest.fail("expected a disconnected map within 200 seeds")

        assert len(generated.model.connected_components()) > 1
        assert "disconnected" in caplog.text
