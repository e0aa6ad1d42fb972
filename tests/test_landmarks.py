"""Tests for landmark gating and placement"""
import random
from types import MappingProxyType

import pytest

from isometric_terrain.data.activity import ContributionStats
from isometric_terrain.generation.biomes import BiomeContext
from isometric_terrain.generation.catalog import LANDMARK_ROSTERS, ColorMode, LandmarkTier
from isometric_terrain.generation.intensity import normalize_weeks
from isometric_terrain.generation.landmarks import (
    MAX_LANDMARKS,
    MIN_SPACING,
    TIER_CONFIG,
    eligible_tiers,
    landmark_chance,
    select_landmarks,
    streak_multiplier,
)
from isometric_terrain.generation.projection import to_iso_cells
from isometric_terrain.generation.shared import make_rng, manhattan
from isometric_terrain.rendering.palette import get_terrain_palette


class AlwaysRolls(random.Random):
    """Generator whose every draw is zero, so every roll succeeds"""

    def random(self):
        return 0.0


def _iso(calendar):
    return to_iso_cells(normalize_weeks(calendar.weeks), get_terrain_palette(ColorMode.DARK))


def _stats(total, longest, current=0):
    return ContributionStats(total=total, longest_streak=longest, current_streak=current, most_active_day='Monday')


class TestGates:
    """Test statistics gates and roll thresholds"""

    @pytest.mark.parametrize('total, longest, expected', [
        (10, 2, []),
        (200, 0, [LandmarkTier.RARE]),
        (0, 7, [LandmarkTier.RARE]),
        (500, 14, [LandmarkTier.EPIC, LandmarkTier.RARE]),
        (1000, 30, [LandmarkTier.LEGENDARY, LandmarkTier.EPIC, LandmarkTier.RARE]),
    ])
    def test_eligible_tiers(self, total, longest, expected):
        """Test tiers unlock by total and streak, highest first"""
        assert eligible_tiers(_stats(total, longest)) == expected

    def test_gates_are_monotonic(self):
        """Test a higher tier's gate implies every lower tier's"""
        for total in (0, 199, 200, 499, 500, 999, 1000, 5000):
            for longest in (0, 6, 7, 13, 14, 29, 30, 120):
                stats = _stats(total, longest)
                if TIER_CONFIG[LandmarkTier.LEGENDARY].stats_gate(stats):
                    assert TIER_CONFIG[LandmarkTier.EPIC].stats_gate(stats)
                if TIER_CONFIG[LandmarkTier.EPIC].stats_gate(stats):
                    assert TIER_CONFIG[LandmarkTier.RARE].stats_gate(stats)

    @pytest.mark.parametrize('streak, expected', [(0, 1.0), (6, 1.0), (7, 1.15), (29, 1.15), (30, 1.44)])
    def test_streak_multiplier(self, streak, expected):
        """Test the current streak boosts the roll"""
        assert streak_multiplier(streak) == expected

    def test_landmark_chance(self):
        """Test the richness bonus is capped at half again"""
        assert landmark_chance(LandmarkTier.RARE, 0.45, 1.0) == pytest.approx(0.018)
        assert landmark_chance(LandmarkTier.RARE, 1.0, 1.0) == pytest.approx(0.027)
        assert landmark_chance(LandmarkTier.LEGENDARY, 1.0, 1.44) == pytest.approx(0.003 * 1.5 * 1.44)


class TestSelectLandmarks:
    """Test whole-grid placement"""

    def test_quiet_stats_place_nothing(self, uniform_calendar, quiet_stats):
        """Test locked tiers yield no landmarks"""
        assert select_landmarks(_iso(uniform_calendar), AlwaysRolls(), quiet_stats) == []

    def test_cap_and_spacing(self, uniform_calendar, legendary_stats):
        """Test at most three landmarks, kept apart"""
        placed = select_landmarks(_iso(uniform_calendar), AlwaysRolls(), legendary_stats)
        assert len(placed) == MAX_LANDMARKS
        for i, first in enumerate(placed):
            for second in placed[i + 1:]:
                assert manhattan(first.key, second.key) >= MIN_SPACING

    def test_highest_tier_first(self, uniform_calendar, legendary_stats):
        """Test saturated cells roll against the legendary tier"""
        placed = select_landmarks(_iso(uniform_calendar), AlwaysRolls(), legendary_stats)
        assert {p.tier for p in placed} == {LandmarkTier.LEGENDARY}
        assert all(p.type is LANDMARK_ROSTERS[LandmarkTier.LEGENDARY][0] for p in placed)

    def test_never_on_water(self, uniform_calendar, legendary_stats):
        """Test water cells are skipped"""
        dry = {(10, 3), (20, 3)}
        biome_map = MappingProxyType({
            (w, d): BiomeContext(is_river=(w, d) not in dry) for w in range(52) for d in range(7)
        })
        placed = select_landmarks(_iso(uniform_calendar), AlwaysRolls(), legendary_stats, biome_map)
        assert {p.key for p in placed} == dry

    def test_low_intensity_blocks_every_tier(self, year_calendar, legendary_stats):
        """Test cells below the rare threshold never hold a landmark"""
        cells = _iso(year_calendar)
        by_key = {c.key: c for c in cells}
        for landmark in select_landmarks(cells, AlwaysRolls(), legendary_stats):
            assert by_key[landmark.key].intensity >= TIER_CONFIG[LandmarkTier.RARE].min_intensity

    def test_position_matches_cell(self, uniform_calendar, legendary_stats):
        """Test landmarks sit on their cell's screen point"""
        cells = {c.key: c for c in _iso(uniform_calendar)}
        for landmark in select_landmarks(list(cells.values()), AlwaysRolls(), legendary_stats):
            assert (landmark.x, landmark.y) == (cells[landmark.key].x, cells[landmark.key].y)

    def test_deterministic(self, uniform_calendar, legendary_stats):
        """Test equal seeds give equal landmarks"""
        cells = _iso(uniform_calendar)
        first = select_landmarks(cells, make_rng(9, 'landmarks'), legendary_stats)
        second = select_landmarks(cells, make_rng(9, 'landmarks'), legendary_stats)
        assert first == second
        assert len(first) <= MAX_LANDMARKS
