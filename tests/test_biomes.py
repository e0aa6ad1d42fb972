"""Tests for biome generation"""
import random

import numpy as np
import pytest

from isometric_terrain.generation.biomes import (
    BiomeContext,
    ForestNucleus,
    _carve_rivers,
    _forest_density,
    _grow_ponds,
    generate_biome_map,
)
from isometric_terrain.generation.shared import make_rng


def _map(seed: int = 42):
    return generate_biome_map(52, 7, make_rng(seed, 'biomes'))


class TestBiomeMap:
    """Test rivers, ponds, shores and forests"""

    def test_covers_every_cell(self):
        """Test the map has an entry per grid cell"""
        biome_map = _map()
        assert len(biome_map) == 52 * 7
        assert all(isinstance(b, BiomeContext) for b in biome_map.values())

    def test_deterministic(self):
        """Test equal seeds give equal maps"""
        assert dict(_map(7)) == dict(_map(7))

    def test_seed_changes_map(self):
        """Test different seeds give different layouts"""
        maps = {tuple(sorted(k for k, b in _map(seed).items() if b.is_water)) for seed in range(5)}
        assert len(maps) > 1

    def test_rivers_span_every_week(self):
        """Test each week column holds at least one river cell"""
        biome_map = _map()
        for week in range(52):
            assert any(biome_map[(week, day)].is_river for day in range(7))

    def test_shore_is_dry(self):
        """Test near-water cells are never water themselves"""
        for biome in _map().values():
            assert not (biome.near_water and biome.is_water)

    def test_shore_touches_water(self):
        """Test every near-water cell has a water neighbor"""
        biome_map = _map()
        for (week, day), biome in biome_map.items():
            if not biome.near_water:
                continue
            neighbors = [(week + 1, day), (week - 1, day), (week, day + 1), (week, day - 1)]
            assert any(biome_map.get(n, BiomeContext()).is_water for n in neighbors)

    @pytest.mark.parametrize('seed', range(10))
    def test_every_shore_cell_flagged(self, seed):
        """Test each dry cell beside a river or pond is marked near water"""
        biome_map = _map(seed)
        for (week, day), biome in biome_map.items():
            if biome.is_water:
                continue
            neighbors = [(week + 1, day), (week - 1, day), (week, day + 1), (week, day - 1)]
            if any(biome_map.get(n, BiomeContext()).is_water for n in neighbors):
                assert biome.near_water, (week, day)

    def test_forest_density_bounds(self):
        """Test forest density stays inside [0, 1] and forests exist"""
        densities = [b.forest_density for b in _map().values()]
        assert all(0.0 <= d <= 1.0 for d in densities)
        assert max(densities) > 0.5

    def test_read_only(self):
        """Test the map cannot be mutated"""
        with pytest.raises(TypeError):
            _map()[(0, 0)] = BiomeContext()

    def test_empty_grid(self):
        """Test an empty grid yields an empty map"""
        assert len(generate_biome_map(0, 7, random.Random(1))) == 0

    def test_small_grid(self):
        """Test tiny grids still work"""
        biome_map = generate_biome_map(3, 2, random.Random(3))
        assert set(biome_map) == {(w, d) for w in range(3) for d in range(2)}


def _clusters(mask):
    """8-connected groups of set cells"""
    remaining = {(int(w), int(d)) for w, d in zip(*np.nonzero(mask))}
    clusters = []
    while remaining:
        stack = [remaining.pop()]
        cluster = set(stack)
        while stack:
            w, d = stack.pop()
            for dw in (-1, 0, 1):
                for dd in (-1, 0, 1):
                    n = (w + dw, d + dd)
                    if n in remaining:
                        remaining.remove(n)
                        cluster.add(n)
                        stack.append(n)
        clusters.append(cluster)
    return clusters


class TestPonds:
    """Test ponds grown from river bends"""

    @pytest.mark.parametrize('seed', range(12))
    def test_ponds_grow_from_bends(self, seed):
        """Test every pond cluster contains the bend it grew from"""
        rng = random.Random(seed)
        river = np.zeros((52, 7), dtype=bool)
        pond = np.zeros((52, 7), dtype=bool)
        bends = _carve_rivers(river, rng)
        count = _grow_ponds(pond, bends, rng)

        if not bends:
            assert count == 0
            assert not pond.any()
            return
        assert 1 <= count <= 2
        assert pond.any()
        for cluster in _clusters(pond):
            assert cluster & set(bends)

    def test_no_bends_no_ponds(self):
        """Test a straight river leaves no ponds"""
        pond = np.zeros((5, 3), dtype=bool)
        assert _grow_ponds(pond, [], random.Random(0)) == 0
        assert not pond.any()


class TestForestDensity:
    """Test forest density fields"""

    def test_single_nucleus_falloff(self):
        """Test density falls off linearly from the nucleus"""
        density = _forest_density(10, 7, [ForestNucleus(5, 3, 4.0)])
        assert density[5, 3] == 1.0
        assert density[6, 3] == pytest.approx(0.75)
        assert density[9, 3] == 0.0

    def test_overlap_takes_strongest(self):
        """Test overlapping forests keep the maximum instead of adding up"""
        single = _forest_density(10, 7, [ForestNucleus(5, 3, 4.0)])
        doubled = _forest_density(10, 7, [ForestNucleus(5, 3, 4.0), ForestNucleus(5, 3, 4.0)])
        assert np.array_equal(single, doubled)
        assert doubled[6, 3] == pytest.approx(0.75)
        assert doubled[7, 3] == pytest.approx(0.5)

    def test_neighbor_nucleus_does_not_compound(self):
        """Test a weaker neighbor never raises a cell past its strongest forest"""
        density = _forest_density(10, 7, [ForestNucleus(4, 3, 4.0), ForestNucleus(6, 3, 4.0)])
        assert density[5, 3] == pytest.approx(0.75)
        assert density[4, 3] == 1.0
        assert density.max() <= 1.0
