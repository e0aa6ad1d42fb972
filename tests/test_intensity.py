"""Tests for intensity normalization"""
from isometric_terrain.data.activity import ActivityDay
from isometric_terrain.generation.intensity import (
    MAX_INTENSITY,
    effective_max,
    intensity_for,
    normalize_weeks,
)

from conftest import SAMPLE_WEEKS, make_calendar


class TestEffectiveMax:
    """Test the percentile anchor"""

    def test_no_activity(self):
        """Test all-zero counts anchor at 1"""
        assert effective_max([0, 0, 0]) == 1

    def test_ninetieth_percentile(self):
        """Test the anchor ignores the busiest tenth"""
        assert effective_max(range(1, 11)) == 10
        assert effective_max([1] * 18 + [50, 100]) == 50
        assert effective_max([1] * 19 + [100]) == 1

    def test_zeros_are_ignored(self):
        """Test zero days do not drag the anchor down"""
        assert effective_max([0] * 100 + [4]) == 4


class TestIntensityFor:
    """Test the count to intensity mapping"""

    def test_zero_stays_zero(self):
        """Test zero maps to zero"""
        assert intensity_for(0, 10) == 0

    def test_nonzero_is_at_least_one(self):
        """Test any activity shows up"""
        assert intensity_for(1, 10_000) >= 1

    def test_anchor_maps_to_max(self):
        """Test counts at or above the anchor saturate"""
        assert intensity_for(10, 10) == MAX_INTENSITY
        assert intensity_for(500, 10) == MAX_INTENSITY

    def test_square_root_curve(self):
        """Test a quarter of the anchor lands halfway"""
        assert intensity_for(25, 100) == 50

    def test_monotonic(self):
        """Test more activity never lowers intensity"""
        values = [intensity_for(c, 40) for c in range(0, 60)]
        assert values == sorted(values)


class TestNormalizeWeeks:
    """Test grid construction"""

    def test_sample_grid(self, sample_calendar):
        """Test the sample produces one cell per day with bounded intensity"""
        cells = normalize_weeks(sample_calendar.weeks)
        assert len(cells) == 28
        assert all(0 <= c.intensity <= MAX_INTENSITY for c in cells)
        assert all((c.intensity == 0) == (c.raw_count == 0) for c in cells)

    def test_sample_values(self, sample_calendar):
        """Test specific cells of the sample"""
        cells = {c.key: c for c in normalize_weeks(sample_calendar.weeks)}
        assert cells[(2, 3)].intensity == MAX_INTENSITY
        assert cells[(0, 6)].intensity == 41
        assert cells[(0, 0)].intensity == 0

    def test_uniform_activity(self, uniform_calendar):
        """Test identical counts all saturate"""
        cells = normalize_weeks(uniform_calendar.weeks)
        assert {c.intensity for c in cells} == {MAX_INTENSITY}

    def test_long_week_is_truncated(self, caplog):
        """Test days past the seventh are dropped with a warning"""
        week = [ActivityDay(date=f'2025-01-{d:02d}', count=1) for d in range(1, 10)]
        cells = normalize_weeks([week])
        assert len(cells) == 7
        assert 'keeping the first 7' in caplog.text

    def test_short_and_empty_weeks(self):
        """Test short weeks simply yield fewer cells"""
        calendar = make_calendar([[1, 2, 3], [], SAMPLE_WEEKS[0]])
        cells = normalize_weeks(calendar.weeks)
        assert len(cells) == 10
        assert {c.week for c in cells} == {0, 2}
