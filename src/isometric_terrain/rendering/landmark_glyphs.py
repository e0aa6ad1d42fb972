"""
Landmark drawings, glow underlays and their style rules.

Each landmark sits on a radial glow in its tier's color. The gradients are
emitted once into the document's <defs>; every placed landmark references
its tier's gradient by id.
"""
from types import MappingProxyType
from typing import Mapping, Sequence

from isometric_terrain.data.asset_colors import get_asset_colors
from isometric_terrain.generation.catalog import ColorMode, LandmarkTier, LandmarkType as L
from isometric_terrain.generation.landmarks import TIER_CONFIG, PlacedLandmark
from isometric_terrain.rendering.glyphs import (
    Glyph,
    check_glyph_table,
    circle,
    ellipse,
    line,
    moving,
    path,
    poly,
    rect,
    spin,
)
from isometric_terrain.rendering.palette import TerrainPalette
from isometric_terrain.rendering.svg import fmt

PULSE_CLASS = 'epic-glow-pulse'
SWIRL_CLASS = 'epic-portal-swirl'

LANDMARK_CSS = '\n'.join([
    '@keyframes epic-pulse { 0%,100% { opacity: 0.4; } 50% { opacity: 0.9; } }',
    f'.{PULSE_CLASS} {{ animation: epic-pulse 3s ease-in-out infinite; }}',
    '@keyframes epic-swirl { 0% { transform: rotate(0deg); } 100% { transform: rotate(360deg); } }',
    f'.{SWIRL_CLASS} {{ animation: epic-swirl 8s linear infinite; transform-origin: center; }}',
])


def _one(*shapes) -> Glyph:
    return Glyph(variants=(tuple(shapes),))


_COLUMNS = tuple(line(x, -2, x, -8, 'epic_marble', 0.8) for x in (-4, -1.3, 1.3, 4))
_WINDOWS = tuple(
    rect(x, y, 0.6, 0.6, 'epic_crystal', opacity=0.5)
    for y in (-10, -8, -6)
    for x in (-1.2, 0.6)
)

_TABLE = {
    # Rare
    L.PYRAMID: _one(
        poly([(-5, 0), (0, -10), (5, 0)], 'epic_gold'),
        poly([(0, -10), (5, 0), (0, 0)], 'epic_gold', opacity=0.7),
        line(-3.5, -3, 3.5, -3, 'epic_gold', 0.3, opacity=0.5),
        line(-2, -6, 2, -6, 'epic_gold', 0.3, opacity=0.5),
    ),
    L.COLOSSEUM: _one(
        ellipse(0, -2, 5, 3, 'epic_marble'),
        ellipse(0, -2, 4, 2, 'wall_shade', opacity=0.4),
        rect(-5, -5, 10, 3, 'epic_marble'),
        *(line(x, -5, x, -2, 'wall', 0.5) for x in (-4, -2, 0, 2, 4)),
    ),
    L.PARTHENON: _one(
        rect(-5, -2, 10, 2, 'epic_marble'),
        poly([(-5, -8), (0, -11), (5, -8)], 'epic_marble'),
        *_COLUMNS,
    ),
    L.SPHINX: _one(
        ellipse(0, -1, 4, 1.5, 'epic_gold'),
        rect(-1.5, -5, 3, 4, 'epic_gold', rx=0.5),
        circle(0, -6, 1.5, 'epic_gold'),
        rect(3, -2, 2, 1, 'epic_gold', rx=0.3),
    ),
    L.PAGODA: _one(
        rect(-2, -3, 4, 3, 'roof_a'),
        poly([(-4, -3), (0, -4.5), (4, -3)], 'roof_a'),
        rect(-1.5, -6.5, 3, 2.5, 'roof_a'),
        poly([(-3, -6.5), (0, -8), (3, -6.5)], 'roof_a'),
        rect(-1, -10, 2, 2.5, 'roof_a'),
        poly([(-2.5, -10), (0, -12), (2.5, -10)], 'roof_a'),
        line(0, -12, 0, -13, 'epic_gold', 0.4),
    ),
    L.TORII: _one(
        line(-4, 0, -4, -8, 'roof_a', 1),
        line(4, 0, 4, -8, 'roof_a', 1),
        path('M-5,-7 Q0,-8.5 5,-7', stroke='roof_a', width=0.8),
        line(-4.5, -6, 4.5, -6, 'roof_a', 0.6),
    ),
    L.GREAT_WALL: _one(
        rect(-6, -4, 12, 4, 'rock'),
        *(rect(x, -5.2, 1.5, 1.5, 'rock') for x in (-6, -3.5, -1, 1.5, 4.5)),
        rect(4, -8, 2.5, 4, 'rock'),
        poly([(4, -8), (5.25, -10), (6.5, -8)], 'roof_a'),
    ),
    L.TEMPLE_OF_HEAVEN: _one(
        ellipse(0, -1, 5, 1.5, 'epic_marble'),
        path('M-4,-3 Q0,-6 4,-3', fill='epic_jade'),
        path('M-3,-5 Q0,-8 3,-5', fill='epic_jade'),
        path('M-2,-7 Q0,-10 2,-7', fill='epic_jade'),
        circle(0, -10.5, 0.5, 'epic_gold'),
    ),
    L.EIFFEL_TOWER: _one(
        line(-3, 0, -0.5, -10, 'boulder', 0.5),
        line(3, 0, 0.5, -10, 'boulder', 0.5),
        line(0, -10, 0, -14, 'boulder', 0.4),
        line(-2, -3, 2, -3, 'boulder', 0.4),
        line(-1.3, -6, 1.3, -6, 'boulder', 0.4),
        rect(-1.5, -10.5, 3, 1, 'boulder'),
    ),
    L.BIG_BEN: _one(
        rect(-2, -10, 4, 10, 'epic_marble'),
        poly([(-2.5, -10), (0, -13), (2.5, -10)], 'roof_b'),
        circle(0, -8, 1.2, 'epic_gold'),
        line(0, -8, 0, -9, '#333', 0.3),
        line(0, -8, 0.6, -7.6, '#333', 0.2),
        rect(-1.2, -4, 2.4, 1.5, 'wall_shade'),
    ),
    L.WINDMILL_GRAND: _one(
        rect(-2, -8, 4, 8, 'windmill'),
        poly([(-2.5, -8), (0, -10), (2.5, -8)], 'roof_a'),
        moving(
            tuple(line(0, 0, dx, dy, 'wind_blade', 0.8) for dx, dy in ((0, -6), (6, 0), (0, 6), (-6, 0))),
            spin(6),
            transform='translate(0,-7)',
        ),
        circle(0, -7, 0.6, 'boulder'),
    ),
    L.OBSERVATORY: _one(
        rect(-3, -5, 6, 5, 'epic_marble'),
        path('M-3,-5 Q0,-9 3,-5', fill='rock'),
        rect(1, -7.5, 1, 3, 'boulder', transform='rotate(-30,1.5,-6)'),
    ),
    L.VOLCANO: _one(
        poly([(-5, 0), (-1.5, -8), (1.5, -8), (5, 0)], 'boulder'),
        ellipse(0, -8, 1.8, 0.8, '#ff4500'),
        ellipse(0, -8, 1, 0.4, '#ff8c00'),
        circle(-0.5, -9.5, 0.4, '#ff4500', opacity=0.7),
        circle(0.5, -10, 0.3, '#ff6600', opacity=0.6),
    ),
    L.GIANT_MUSHROOM: _one(
        rect(-0.8, -5, 1.6, 5, 'mushroom'),
        ellipse(0, -6, 4.5, 3, 'mushroom_cap'),
        circle(-2, -6.5, 0.6, 'mushroom', opacity=0.6),
        circle(1.5, -5.5, 0.5, 'mushroom', opacity=0.6),
        circle(0, -7.5, 0.4, 'mushroom', opacity=0.6),
    ),
    # Epic
    L.FORBIDDEN_CITY: _one(
        rect(-5, -3, 10, 3, 'roof_a'),
        poly([(-6, -3), (0, -5.5), (6, -3)], 'roof_a'),
        poly([(-5, -5.5), (0, -7.5), (5, -5.5)], 'roof_a'),
        rect(-4, -3, 8, 2.5, 'epic_gold', opacity=0.3),
        line(-4, -3, -4, 0, 'roof_a', 0.5),
        line(4, -3, 4, 0, 'roof_a', 0.5),
        circle(0, -7.8, 0.4, 'epic_gold'),
    ),
    L.TAJ_MAHAL: _one(
        rect(-4, -4, 8, 4, 'epic_marble'),
        path('M-2,-4 Q0,-10 2,-4', fill='epic_marble'),
        circle(0, -10, 0.5, 'epic_gold'),
        line(-5, 0, -5, -8, 'epic_marble', 0.4),
        line(5, 0, 5, -8, 'epic_marble', 0.4),
        circle(-5, -8.3, 0.3, 'epic_gold'),
        circle(5, -8.3, 0.3, 'epic_gold'),
    ),
    L.NOTRE_DAME: _one(
        rect(-4, -6, 8, 6, 'epic_marble'),
        rect(-4.5, -10, 2.5, 4.5, 'epic_marble'),
        rect(2, -10, 2.5, 4.5, 'epic_marble'),
        circle(0, -5, 1.5, 'epic_magic', opacity=0.5),
        poly([(-1.5, -6), (0, -9), (1.5, -6)], 'epic_marble'),
    ),
    L.ST_BASILS: _one(
        rect(-4, -4, 8, 4, 'epic_marble'),
        ellipse(-3, -8, 1.2, 1.8, 'roof_a'),
        ellipse(0, -9, 1.4, 2, 'epic_jade'),
        ellipse(3, -8, 1.2, 1.8, 'epic_magic'),
        circle(-3, -10, 0.3, 'epic_gold'),
        circle(0, -11.2, 0.4, 'epic_gold'),
        circle(3, -10, 0.3, 'epic_gold'),
    ),
    L.COLOSSUS_LIGHTHOUSE: _one(
        rect(-1.5, -8, 3, 8, 'epic_marble'),
        circle(0, -9, 1.2, 'epic_marble'),
        line(1.5, -6, 4, -8, 'epic_marble', 0.5),
        circle(4.2, -8.5, 0.6, 'epic_gold', opacity=0.8),
        line(-1.5, -6, -3, -4, 'epic_marble', 0.5),
        rect(-2.5, -1, 5, 1, 'rock'),
    ),
    L.OPERA_HOUSE: _one(
        rect(-5, -1, 10, 1.5, 'epic_marble'),
        path('M-4,-1 Q-2,-7 0,-1', fill='epic_marble'),
        path('M-1,-1 Q1,-8 3,-1', fill='epic_marble'),
        path('M2,-1 Q4,-6 5,-1', fill='epic_marble'),
    ),
    L.SKYSCRAPER: _one(
        rect(-2, -12, 4, 12, 'rock'),
        rect(-2.5, -2, 5, 2, 'boulder'),
        line(0, -12, 0, -14, 'boulder', 0.3),
        *_WINDOWS,
    ),
    L.ENCHANTED_FORGE: _one(
        rect(-3, -4, 6, 4, 'blacksmith'),
        poly([(-3.5, -4), (0, -6), (3.5, -4)], 'boulder'),
        rect(-1, -3, 2, 3, 'blacksmith', opacity=0.8),
        rect(-0.5, -2.5, 1, 1, 'epic_magic', opacity=0.6),
        circle(2, -5.5, 0.5, 'epic_magic', opacity=0.7),
        circle(2.5, -6.5, 0.3, 'epic_magic', opacity=0.5),
    ),
    L.ANCIENT_RUINS: _one(
        line(-4, 0, -4, -6, 'epic_marble', 0.8),
        line(-1, 0, -1, -8, 'epic_marble', 0.8),
        line(2, 0, 2, -4, 'epic_marble', 0.8),
        rect(-1.8, -8.5, 1.6, 0.8, 'epic_marble'),
        rect(-5, -0.5, 3, 0.5, 'rock', opacity=0.5),
        circle(3.5, -0.5, 0.6, 'moss', opacity=0.6),
        circle(-3, -3, 0.4, 'moss', opacity=0.5),
    ),
    L.BONSAI_GIANT: _one(
        path('M0,0 Q-2,-3 -1,-5 Q-3,-5 -2,-7', stroke='trunk', width=1),
        path('M0,0 Q1,-2 2,-4 Q1,-5 1.5,-6', stroke='trunk', width=0.8),
        ellipse(-2, -8, 2.5, 1.8, 'epic_jade'),
        ellipse(1.5, -7, 2, 1.5, 'epic_jade'),
        ellipse(0, -9.5, 1.8, 1.2, 'epic_jade'),
    ),
    # Legendary
    L.FLOATING_ISLAND: _one(
        poly([(-3, 2), (-1, -1), (1, -1), (3, 2), (1, 4), (-1, 4)], 'boulder', opacity=0.7),
        poly([(-2, 1), (0, -1), (2, 1)], 'boulder', opacity=0.5),
        ellipse(0, -2, 4, 1.5, 'leaf'),
        rect(-0.5, -5, 1, 3, 'trunk'),
        ellipse(0, -6, 2, 1.5, 'epic_jade'),
    ),
    L.CRYSTAL_SPIRE: _one(
        poly([(-2, 0), (-1, -8), (0, -12), (1, -8), (2, 0)], 'epic_crystal', opacity=0.8),
        poly([(-1.5, -2), (-0.5, -10), (0, -12), (0.5, -10), (1.5, -2)], 'epic_crystal', opacity=0.5),
        poly([(-3, 0), (-2, -5), (-1, -2)], 'epic_crystal', opacity=0.4),
        poly([(3, 0), (2, -5), (1, -2)], 'epic_crystal', opacity=0.4),
        line(0, -12, 0, -13, 'epic_crystal', 0.3, opacity=0.6),
    ),
    L.DRAGON_NEST: _one(
        ellipse(0, -1, 5, 2, 'trunk'),
        ellipse(0, -1.5, 3.5, 1.2, 'trunk', opacity=0.6),
        ellipse(-1, -2, 1, 1.2, 'epic_gold'),
        ellipse(1, -2, 1, 1.2, 'epic_gold'),
        ellipse(0, -2.5, 0.8, 1, 'epic_crystal'),
        path('M3,-2 Q5,-6 4,-8 Q6,-7 5,-4', fill='epic_jade', opacity=0.5),
    ),
    L.WORLD_TREE: _one(
        rect(-1.5, -6, 3, 6, 'trunk', rx=0.5),
        ellipse(0, -8, 5, 4, 'epic_jade'),
        ellipse(-2, -10, 3, 2.5, 'epic_jade', opacity=0.8),
        ellipse(2, -10, 3, 2.5, 'epic_jade', opacity=0.8),
        ellipse(0, -12, 2.5, 2, 'epic_jade', opacity=0.7),
        *(circle(cx, cy, r, 'epic_gold', **{'class': PULSE_CLASS})
          for cx, cy, r in ((-3, -9, 0.3), (2, -11, 0.3), (0, -7, 0.25), (-1, -12, 0.2))),
    ),
    L.SKY_TEMPLE: _one(
        ellipse(0, 0, 5, 1.5, 'epic_marble', opacity=0.3),
        rect(-3.5, -3, 7, 3, 'epic_marble'),
        poly([(-4, -3), (0, -6), (4, -3)], 'epic_gold'),
        *(line(x, -3, x, 0, 'epic_marble', 0.6) for x in (-3, 0, 3)),
        circle(0, -5, 0.5, 'epic_portal', opacity=0.6),
    ),
    L.ANCIENT_PORTAL: _one(
        rect(-4, -8, 2, 8, 'rock', rx=0.5),
        rect(2, -8, 2, 8, 'rock', rx=0.5),
        path('M-3,-8 Q0,-12 3,-8', fill='rock'),
        ellipse(0, -4, 2.5, 3.5, 'epic_portal', opacity=0.4, **{'class': SWIRL_CLASS}),
        ellipse(0, -4, 1.5, 2.5, 'epic_portal', opacity=0.3, **{'class': SWIRL_CLASS}),
    ),
}

LANDMARK_GLYPHS: Mapping[L, Glyph] = MappingProxyType(_TABLE)

check_glyph_table('LANDMARK_GLYPHS', LANDMARK_GLYPHS, L, set(get_asset_colors('dark')))


def glow_id(tier: LandmarkTier) -> str:
    return f'epic-glow-{tier.value}'


def render_glow_defs(mode: ColorMode) -> str:
    """One radial gradient per tier, for the document's <defs>"""
    inner_opacity = 0.4 if mode is ColorMode.DARK else 0.3
    return ''.join(
        f'<radialGradient id="{glow_id(tier)}">'
        f'<stop offset="0%" stop-color="{config.glow_color}" stop-opacity="{inner_opacity}"/>'
        f'<stop offset="100%" stop-color="{config.glow_color}" stop-opacity="0"/>'
        f'</radialGradient>'
        for tier, config in TIER_CONFIG.items()
    )


def render_landmarks(placed: Sequence[PlacedLandmark], week_palettes: Sequence[TerrainPalette]) -> str:
    """Glow plus drawing for each landmark, colored by its week's palette"""
    if not placed:
        return ''
    parts = []
    for landmark in placed:
        palette = week_palettes[min(landmark.week, len(week_palettes) - 1)]
        glow = (
            f'<ellipse cx="{fmt(landmark.x)}" cy="{fmt(landmark.y)}" rx="8" ry="4" '
            f'fill="url(#{glow_id(landmark.tier)})" opacity="0.6"/>'
        )
        parts.append(glow + LANDMARK_GLYPHS[landmark.type].render(landmark.x, landmark.y, 0, palette.assets))
    return f'<g class="landmarks">{"".join(parts)}</g>'
