"""Tests for sky, water, particle and text layers"""
import random
from types import MappingProxyType

import pytest

from isometric_terrain.generation.biomes import BiomeContext
from isometric_terrain.generation.catalog import ColorMode
from isometric_terrain.generation.projection import IsoCell, project
from isometric_terrain.generation.shared import make_rng
from isometric_terrain.rendering.effects import (
    MAX_TOWN_SPARKLE,
    MAX_WATER_SHIMMER,
    render_animated_overlays,
    render_celestials,
    render_clouds,
    render_leaves,
    render_petals,
    render_snow,
    render_stats_bar,
    render_terrain_css,
    render_title,
    render_water_overlays,
    render_water_ripples,
    shimmer_cells,
    sparkle_cells,
    stats_items,
)
from isometric_terrain.rendering.palette import ElevationColors, get_terrain_palette

DARK = get_terrain_palette(ColorMode.DARK)
LIGHT = get_terrain_palette(ColorMode.LIGHT)
COLORS = ElevationColors(top='#111111', left='#222222', right='#333333')


def _cells(intensity, weeks=range(52), days=range(7)):
    cells = []
    for week in weeks:
        for day in days:
            x, y = project(week, day)
            cells.append(IsoCell(week=week, day=day, intensity=intensity, height=4, x=x, y=y, colors=COLORS))
    return cells


def _rivers(cells):
    return MappingProxyType({c.key: BiomeContext(is_river=True) for c in cells})


class TestCellSelectors:
    """Test which cells get shimmer and sparkle"""

    def test_shimmer_band(self):
        """Test only the natural water band shimmers, capped"""
        assert len(shimmer_cells(_cells(15))) == MAX_WATER_SHIMMER
        assert shimmer_cells(_cells(9)) == []
        assert shimmer_cells(_cells(23)) == []

    def test_sparkle_threshold(self):
        """Test towns sparkle from intensity 90"""
        assert len(sparkle_cells(_cells(90))) == MAX_TOWN_SPARKLE
        assert sparkle_cells(_cells(89)) == []


class TestTerrainCss:
    """Test the scene style sheet"""

    def test_always_has_sway_and_landmark_rules(self):
        """Test static rules are present even without water or towns"""
        css = render_terrain_css(_cells(50))
        assert '.sway-gentle' in css
        assert '@keyframes tree-sway' in css
        assert '@keyframes epic-pulse' in css
        assert 'water-shimmer' not in css
        assert 'town-sparkle' not in css

    def test_water_classes(self):
        """Test one class per shimmering cell"""
        css = render_terrain_css(_cells(15))
        assert css.count('@keyframes water-shimmer') == 1
        assert '.water-14 {' in css
        assert '.water-15 {' not in css
        assert '.water-1 { animation: water-shimmer 3.8s ease-in-out 0.7s infinite; }' in css

    def test_sparkle_classes(self):
        """Test towns get sparkle classes"""
        css = render_terrain_css(_cells(95))
        assert '@keyframes town-sparkle' in css
        assert '.sparkle-9 {' in css

    def test_river_classes_share_keyframes(self):
        """Test rivers reuse the water keyframes"""
        cells = _cells(50, weeks=range(3))
        css = render_terrain_css(cells, _rivers(cells))
        assert css.count('@keyframes water-shimmer') == 1
        assert '.river-shimmer-7 {' in css


class TestSky:
    """Test celestial bodies and clouds"""

    def test_night_sky(self):
        """Test dark mode draws stars and a moon"""
        svg = render_celestials(random.Random(1), DARK)
        assert svg.startswith('<g class="celestials">')
        assert 'fill="#e8e4d0"' in svg
        assert svg.count('<circle') >= 18 + 3

    def test_day_sky(self):
        """Test light mode draws a sun with eight rays"""
        svg = render_celestials(random.Random(1), LIGHT)
        assert svg.count('stroke="#ffdd66"') == 8
        assert '#e8e4d0' not in svg

    def test_clouds(self):
        """Test two drifting clouds in mode colors"""
        svg = render_clouds(random.Random(1), DARK)
        assert svg.count('<animateTransform') == 2
        assert svg.count('<ellipse') == 10
        assert DARK.chrome.cloud_fill in svg

    def test_sky_is_deterministic(self):
        """Test equal generators draw equal skies"""
        assert render_clouds(make_rng(3, 'clouds'), LIGHT) == render_clouds(make_rng(3, 'clouds'), LIGHT)


class TestWater:
    """Test water overlays and ripples"""

    def test_no_biomes(self):
        """Test dry scenes have no water layers"""
        cells = _cells(50, weeks=range(2))
        assert render_water_overlays(cells, DARK, None) == ''
        assert render_water_ripples(cells, DARK, None, random.Random(1)) == ''

    def test_overlays(self):
        """Test each water cell gets a tint and a highlight"""
        cells = _cells(50, weeks=range(2))
        svg = render_water_overlays(cells, DARK, _rivers(cells))
        assert svg.startswith('<g class="water-overlays">')
        assert svg.count('<polygon') == 2 * len(cells)
        assert 'class="river-shimmer-0"' in svg
        assert DARK.asset('river_overlay') in svg

    def test_ripples(self):
        """Test three strokes per water cell"""
        cells = _cells(50, weeks=range(2))
        svg = render_water_ripples(cells, DARK, _rivers(cells), random.Random(1))
        assert svg.count('<path') == 3 * len(cells)


class TestParticles:
    """Test seasonal snow, petals and leaves"""

    def test_snow_in_winter(self):
        """Test winter weeks snow"""
        svg = render_snow(_cells(50, weeks=range(5)), rotation=0, rng=make_rng(1, 'snow'))
        assert svg.startswith('<g class="snow-particles">')
        assert 0 < svg.count('<circle') <= 35

    def test_no_snow_in_summer(self):
        """Test summer weeks stay clear"""
        assert render_snow(_cells(50, weeks=range(5)), rotation=26, rng=random.Random(1)) == ''

    def test_petals_in_spring(self):
        """Test spring weeks drop petals"""
        svg = render_petals(_cells(50, weeks=range(13, 18)), 0, DARK, make_rng(1, 'petals'))
        assert DARK.asset('cherry_petal_pink') in svg
        assert render_petals(_cells(50, weeks=range(5)), 26, DARK, random.Random(1)) == ''

    def test_leaves_in_autumn(self):
        """Test autumn weeks drop leaves"""
        svg = render_leaves(_cells(50, weeks=range(39, 44)), 0, DARK, make_rng(1, 'leaves'))
        assert svg.startswith('<g class="falling-leaves">')
        assert render_leaves(_cells(50, weeks=range(5)), 0, DARK, random.Random(1)) == ''

    def test_particles_capped(self):
        """Test particle counts never exceed their caps"""
        svg = render_snow(_cells(50, weeks=range(52)), rotation=0, rng=random.Random(2))
        assert svg.count('<circle') <= 40


class TestText:
    """Test title, stats bar and overlays"""

    def test_title_escaped(self):
        """Test the title is XML-escaped"""
        svg = render_title('<Tom & "Jerry">', DARK)
        assert '&lt;Tom &amp; &quot;Jerry&quot;&gt;' in svg
        assert DARK.chrome.text_primary in svg

    def test_stats_items(self, legendary_stats):
        """Test the four stats labels"""
        assert stats_items(legendary_stats) == [
            '5,000 contributions',
            '45d current streak',
            '120d longest streak',
            'Most active: Tuesday',
        ]

    def test_stats_bar_layout(self, quiet_stats):
        """Test labels are spaced 200 units apart"""
        svg = render_stats_bar(quiet_stats, LIGHT)
        for x in (24, 224, 424, 624):
            assert f'<text x="{x}" y="233"' in svg

    @pytest.mark.parametrize('intensity, marker', [(15, 'class="water-0"'), (95, 'class="sparkle-0"')])
    def test_animated_overlays(self, intensity, marker):
        """Test overlays bind to the style-sheet classes"""
        assert marker in render_animated_overlays(_cells(intensity, weeks=range(2)), DARK)
