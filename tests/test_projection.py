"""Tests for isometric projection and the shared helpers"""
import pytest

from isometric_terrain.generation.catalog import ColorMode
from isometric_terrain.generation.intensity import normalize_weeks
from isometric_terrain.generation.projection import (
    DEFAULT_ORIGIN,
    TILE_HALF_HEIGHT,
    TILE_HALF_WIDTH,
    cell_lookup,
    depth_key,
    project,
    to_iso_cells,
)
from isometric_terrain.generation.shared import (
    derive_seed,
    hash_string,
    make_rng,
    manhattan,
    round_half_up,
    select_evenly,
)
from isometric_terrain.rendering.palette import get_terrain_palette


class TestProject:
    """Test screen placement"""

    def test_origin(self):
        """Test cell (0, 0) sits on the origin"""
        assert project(0, 0) == DEFAULT_ORIGIN

    def test_axes(self):
        """Test weeks run right-down and days run left-down"""
        ox, oy = DEFAULT_ORIGIN
        assert project(1, 0) == (ox + TILE_HALF_WIDTH, oy + TILE_HALF_HEIGHT)
        assert project(0, 1) == (ox - TILE_HALF_WIDTH, oy + TILE_HALF_HEIGHT)
        assert project(51, 6) == (405 + 45 * 8, 6 + 57 * 3.5)

    def test_custom_origin(self):
        """Test the origin shifts every cell"""
        assert project(2, 1, origin=(0, 0)) == (8, 10.5)


class TestIsoCells:
    """Test projection of whole calendars"""

    def test_depth_order(self, year_calendar):
        """Test cells come back in painter's order"""
        cells = to_iso_cells(normalize_weeks(year_calendar.weeks), get_terrain_palette(ColorMode.DARK))
        keys = [depth_key(c) for c in cells]
        assert keys == sorted(keys)
        assert len(cells) == 364

    def test_height_and_colors_from_palette(self, sample_calendar):
        """Test cells carry the palette's height and colors for their intensity"""
        palette = get_terrain_palette(ColorMode.LIGHT)
        for cell in to_iso_cells(normalize_weeks(sample_calendar.weeks), palette):
            assert cell.height == palette.get_height(cell.intensity)
            assert cell.colors == palette.get_elevation(cell.intensity)

    def test_lookup(self, sample_calendar):
        """Test the lookup is keyed by (week, day)"""
        cells = to_iso_cells(normalize_weeks(sample_calendar.weeks), get_terrain_palette(ColorMode.DARK))
        lookup = cell_lookup(cells)
        assert lookup[(2, 3)].intensity == 99
        assert len(lookup) == 28


class TestSharedHelpers:
    """Test hashing, rounding and sampling helpers"""

    def test_hash_is_stable(self):
        """Test the string hash does not depend on the process"""
        assert hash_string('') == 5381
        assert hash_string('a') == (5381 * 33) ^ ord('a')
        assert hash_string('octocatdark') == hash_string('octocatdark')
        assert 0 <= hash_string('x' * 500) < 2 ** 32

    def test_stage_seeds_differ(self):
        """Test each stage gets its own stream"""
        assert derive_seed(1, 'clouds') != derive_seed(1, 'snow')
        assert make_rng(1, 'clouds').random() == make_rng(1, 'clouds').random()
        assert make_rng(1, 'clouds').random() != make_rng(1, 'snow').random()

    @pytest.mark.parametrize('value, expected', [(0.5, 1), (1.5, 2), (2.5, 3), (-0.5, 0), (2.49, 2)])
    def test_round_half_up(self, value, expected):
        """Test halves always round up"""
        assert round_half_up(value) == expected

    def test_select_evenly(self):
        """Test even sampling keeps short lists and spreads long ones"""
        assert select_evenly([1, 2, 3], 5) == [1, 2, 3]
        assert select_evenly(list(range(10)), 5) == [0, 2, 4, 6, 8]
        assert select_evenly(list(range(10)), 3) == [0, 3, 6]

    def test_manhattan(self):
        """Test grid distance"""
        assert manhattan((0, 0), (2, 3)) == 5
