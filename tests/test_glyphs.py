"""Tests for glyph primitives and the glyph tables"""
import pytest

from isometric_terrain.data.asset_colors import get_asset_colors
from isometric_terrain.generation.catalog import (
    CSS_ANIMATED,
    SMIL_ANIMATED,
    ColorMode,
    DecorationType,
    LandmarkTier,
    LandmarkType,
)
from isometric_terrain.generation.landmarks import TIER_CONFIG, PlacedLandmark
from isometric_terrain.rendering.decoration_glyphs import DECORATION_GLYPHS, SWAY_CLASS, render_decoration
from isometric_terrain.rendering.glyphs import Glyph, check_glyph_table, circle, is_literal_color, line, rect
from isometric_terrain.rendering.landmark_glyphs import (
    LANDMARK_GLYPHS,
    glow_id,
    render_glow_defs,
    render_landmarks,
)
from isometric_terrain.rendering.palette import get_week_palettes

ASSETS = {'trunk': '#5a3a1a', 'leaf': '#2e7d32'}


class TestShapes:
    """Test primitive rendering"""

    def test_asset_paint_is_resolved(self):
        """Test color names resolve against the asset table"""
        assert rect(-1, -2, 2, 2, 'trunk').render(ASSETS) == '<rect x="-1" y="-2" width="2" height="2" fill="#5a3a1a"/>'

    def test_literal_paint_passes_through(self):
        """Test literal colors are used verbatim"""
        svg = circle(0, 0, 1, '#fff', opacity=0.5).render({})
        assert svg == '<circle cx="0" cy="0" r="1" fill="#fff" opacity="0.5"/>'

    def test_stroke_style(self):
        """Test stroke colors resolve and widths become attributes"""
        svg = line(0, 0, 0, -3, 'trunk', 0.5).render(ASSETS)
        assert 'stroke="#5a3a1a"' in svg
        assert 'stroke-width="0.5"' in svg

    @pytest.mark.parametrize('value, literal', [
        ('#abc', True), ('rgb(1,2,3)', True), ('rgba(1,2,3,0.5)', True),
        ('url(#g)', True), ('none', True), ('trunk', False),
    ])
    def test_literal_detection(self, value, literal):
        """Test which paint values bypass the asset table"""
        assert is_literal_color(value) is literal

    def test_unknown_color_raises(self):
        """Test a missing asset name is a KeyError"""
        with pytest.raises(KeyError):
            rect(0, 0, 1, 1, 'nope').render(ASSETS)


class TestGlyph:
    """Test glyph variants and placement"""

    def test_variant_modulo(self):
        """Test variants wrap around the available drawings"""
        glyph = Glyph(variants=((rect(0, 0, 1, 1, 'trunk'),), (circle(0, 0, 1, 'leaf'),)))
        assert glyph.render(0, 0, 2, ASSETS) == glyph.render(0, 0, 0, ASSETS)
        assert '<circle' in glyph.render(0, 0, 1, ASSETS)

    def test_translated_group(self):
        """Test glyphs are placed with a translate group"""
        glyph = Glyph(variants=((rect(0, 0, 1, 1, 'trunk'),),))
        assert glyph.render(12.5, 40, 0, ASSETS).startswith('<g transform="translate(12.5,40)">')

    def test_css_class_wraps_body(self):
        """Test a style-sheet class wraps the drawing in an inner group"""
        glyph = Glyph(variants=((rect(0, 0, 1, 1, 'trunk'),),), css_class='sway')
        assert '<g class="sway">' in glyph.render(0, 0, 0, ASSETS)
        assert glyph.is_animated

    def test_empty_glyph_rejected(self):
        """Test glyphs need at least one drawing"""
        with pytest.raises(ValueError):
            Glyph(variants=())

    def test_color_keys(self):
        """Test only named colors are reported"""
        glyph = Glyph(variants=((rect(0, 0, 1, 1, 'trunk'), circle(0, 0, 1, '#fff')),))
        assert glyph.color_keys() == {'trunk'}


class TestGlyphTables:
    """Test the decoration and landmark tables"""

    def test_decorations_complete(self):
        """Test every decoration type has a drawing"""
        assert set(DECORATION_GLYPHS) == set(DecorationType)

    def test_landmarks_complete(self):
        """Test every landmark type has a drawing"""
        assert set(LANDMARK_GLYPHS) == set(LandmarkType)

    def test_motion_script_types_animate(self):
        """Test motion-script decorations carry inline animation"""
        for decoration in SMIL_ANIMATED:
            assert '<animate' in render_decoration(decoration, 0, 0, 0, get_asset_colors('dark'))

    def test_style_sheet_types_sway(self):
        """Test style-sheet decorations carry the sway class"""
        for decoration in CSS_ANIMATED:
            assert DECORATION_GLYPHS[decoration].css_class == SWAY_CLASS

    @pytest.mark.parametrize('mode', ['dark', 'light'])
    def test_every_variant_renders(self, mode):
        """Test all drawings resolve against both asset tables"""
        assets = get_asset_colors(mode)
        for decoration, glyph in DECORATION_GLYPHS.items():
            for variant in range(len(glyph.variants)):
                assert render_decoration(decoration, 0, 0, variant, assets)
        for glyph in LANDMARK_GLYPHS.values():
            assert glyph.render(0, 0, 0, assets)

    def test_check_rejects_missing_entry(self):
        """Test the completeness check names missing types"""
        partial = {DecorationType.ROCK: DECORATION_GLYPHS[DecorationType.ROCK]}
        with pytest.raises(RuntimeError, match='bush'):
            check_glyph_table('partial', partial, [DecorationType.ROCK, DecorationType.BUSH], {'stone'})

    def test_check_rejects_unknown_color(self):
        """Test the color check names unknown asset keys"""
        table = {DecorationType.ROCK: Glyph(variants=((rect(0, 0, 1, 1, 'mystery'),),))}
        with pytest.raises(RuntimeError, match='mystery'):
            check_glyph_table('bad', table, [DecorationType.ROCK], set(get_asset_colors('dark')))


class TestLandmarkRendering:
    """Test glow gradients and landmark groups"""

    def test_glow_defs(self):
        """Test one gradient per tier with mode-dependent opacity"""
        dark = render_glow_defs(ColorMode.DARK)
        light = render_glow_defs(ColorMode.LIGHT)
        assert dark.count('<radialGradient') == len(LandmarkTier)
        assert f'id="{glow_id(LandmarkTier.EPIC)}"' in dark
        assert TIER_CONFIG[LandmarkTier.LEGENDARY].glow_color in dark
        assert 'stop-opacity="0.4"' in dark
        assert 'stop-opacity="0.3"' in light

    def test_no_landmarks(self):
        """Test an empty placement renders nothing"""
        assert render_landmarks([], get_week_palettes(ColorMode.DARK, 0)) == ''

    def test_landmark_group(self):
        """Test each landmark gets a glow and a drawing"""
        landmark = PlacedLandmark(LandmarkType.PYRAMID, LandmarkTier.RARE, week=3, day=2, x=120, y=60)
        svg = render_landmarks([landmark], get_week_palettes(ColorMode.DARK, 0))
        assert svg.startswith('<g class="landmarks">')
        assert 'fill="url(#epic-glow-rare)"' in svg
        assert '<g transform="translate(120,60)">' in svg
