"""
Drawings for every decoration type.

Most decorations are built from a handful of archetypes (round tree, conifer,
bush, stone, bloom, critter, flyer, swimmer, vessel, building, tower, crop,
scatter, puddle) parameterized by asset colors. The animated ones carry their
own motion: inline animation elements for motion-script types and the
sway-gentle class for the style-sheet types.

DECORATION_GLYPHS is checked at import for completeness against the catalog
and for unknown color names against the asset tables.
"""
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence, Tuple

from isometric_terrain.data.asset_colors import get_asset_colors
from isometric_terrain.generation.catalog import CSS_ANIMATED, DecorationType as D
from isometric_terrain.generation.decorations import PlacedDecoration
from isometric_terrain.rendering.glyphs import (
    Glyph,
    Shape,
    bob,
    check_glyph_table,
    circle,
    ellipse,
    flicker,
    line,
    moving,
    path,
    poly,
    rect,
    rise,
    spin,
)
from isometric_terrain.rendering.palette import TerrainPalette
from isometric_terrain.rendering.svg import fmt

SWAY_CLASS = 'sway-gentle'

Variant = Tuple[Shape, ...]


def _glyph(*variants: Sequence[Shape], css_class: Optional[str] = None) -> Glyph:
    return Glyph(variants=tuple(tuple(v) for v in variants), css_class=css_class)


def _with(variants: Iterable[Sequence[Shape]], *extra: Shape) -> Tuple[Variant, ...]:
    """Append the same shapes to every variant"""
    return tuple(tuple(v) + extra for v in variants)


# =============================================================================
# Archetypes
# =============================================================================

def round_tree(crown: str, trunk: str = 'trunk', fruit: Optional[str] = None) -> Tuple[Variant, ...]:
    variants = (
        (rect(-0.4, -3, 0.8, 3, trunk), circle(0, -4.5, 2.2, crown)),
        (rect(-0.4, -3.5, 0.8, 3.5, trunk), ellipse(0, -5.5, 1.8, 2.8, crown)),
        (
            rect(-0.4, -2.5, 0.8, 2.5, trunk),
            circle(-0.9, -3.8, 1.6, crown),
            circle(1, -4.2, 1.7, crown),
            circle(0, -5.3, 1.5, crown),
        ),
    )
    if fruit:
        return _with(variants, circle(-0.8, -4.4, 0.35, fruit), circle(0.9, -3.6, 0.35, fruit), circle(0.2, -5.4, 0.3, fruit))
    return variants


def conifer(color: str, cap: Optional[str] = None) -> Tuple[Variant, ...]:
    stem = rect(-0.3, -1.5, 0.6, 1.5, 'trunk')
    variants = (
        (stem, poly([(-2.2, -1.5), (0, -7), (2.2, -1.5)], color)),
        (
            stem,
            poly([(-2.4, -1.5), (0, -5), (2.4, -1.5)], color),
            poly([(-1.8, -4), (0, -8), (1.8, -4)], color),
        ),
        (stem, poly([(-1.4, -1.5), (0, -8.5), (1.4, -1.5)], color)),
    )
    if cap:
        tops = (-7, -8, -8.5)
        return tuple(
            v + (poly([(-0.9, top + 2), (0, top), (0.9, top + 2)], cap),)
            for v, top in zip(variants, tops)
        )
    return variants


def bush(color: str, dots: Optional[str] = None) -> Tuple[Variant, ...]:
    variants = (
        (ellipse(0, -1.2, 2, 1.3, color),),
        (ellipse(-0.8, -1, 1.4, 1, color), ellipse(0.9, -1.2, 1.5, 1.2, color)),
        (ellipse(0, -1.5, 1.6, 1.6, color), ellipse(0.4, -2.2, 0.9, 0.7, color, opacity=0.7)),
    )
    if dots:
        return _with(variants, circle(-0.6, -1.4, 0.3, dots), circle(0.7, -1.1, 0.3, dots), circle(0, -2, 0.25, dots))
    return variants


def stone(color: str, cap: Optional[str] = None) -> Tuple[Variant, ...]:
    variants = (
        (poly([(-1.8, 0), (-1.2, -1.4), (0.6, -1.8), (1.8, -0.6), (1.4, 0)], color),),
        (ellipse(0, -0.8, 1.6, 0.9, color), ellipse(0.4, -1.1, 0.6, 0.3, '#fff', opacity=0.15)),
        (poly([(-1.2, 0), (-0.6, -1.2), (0.8, -1), (1.2, 0)], color), circle(1.6, -0.3, 0.4, color)),
    )
    if cap:
        return _with(variants, ellipse(0, -1.4, 1.3, 0.45, cap))
    return variants


def bloom(petal: str, center: str = 'flower_center', stem: str = 'leaf') -> Tuple[Variant, ...]:
    return (
        (line(0, 0, 0, -2.5, stem, 0.3), circle(0, -2.8, 0.8, petal), circle(0, -2.8, 0.3, center)),
        (
            line(-0.8, 0, -0.8, -2, stem, 0.3),
            line(0.8, 0, 0.8, -2.6, stem, 0.3),
            circle(-0.8, -2.2, 0.6, petal),
            circle(0.8, -2.8, 0.6, petal),
        ),
        (
            line(0, 0, 0, -1.8, stem, 0.3),
            ellipse(0, -2.4, 0.5, 0.8, petal),
            ellipse(-1.2, -0.8, 0.5, 0.4, petal),
            ellipse(1.1, -0.6, 0.5, 0.4, petal),
        ),
    )


def critter(body: str, head: Optional[str] = None, legs: str = 'trunk', spot: Optional[str] = None) -> Tuple[Variant, ...]:
    head = head or body
    base = (
        line(-1.2, -0.9, -1.2, 0, legs, 0.35),
        line(1.2, -0.9, 1.2, 0, legs, 0.35),
        ellipse(0, -1.4, 1.8, 0.9, body),
    )
    variants = (
        base + (circle(-1.9, -2, 0.6, head),),
        base + (circle(1.9, -2, 0.6, head),),
        base + (circle(-1.9, -1.2, 0.6, head),),
    )
    if spot:
        return _with(variants, ellipse(0.4, -1.6, 0.5, 0.35, spot))
    return variants


def small_critter(body: str, accent: str) -> Tuple[Variant, ...]:
    return (
        (ellipse(0, -0.7, 0.9, 0.6, body), circle(-0.8, -1.1, 0.4, body), circle(-0.95, -1.2, 0.1, accent)),
        (ellipse(0, -0.7, 0.9, 0.6, body), circle(0.8, -1.1, 0.4, body), circle(0.95, -1.2, 0.1, accent)),
        (ellipse(0, -0.9, 0.6, 0.8, body), circle(0, -1.8, 0.35, body)),
    )


def flyer(color: str, altitude: float = 6) -> Tuple[Variant, ...]:
    y = -altitude
    return (
        (path(f'M-1.5,{fmt(y)} Q-0.75,{fmt(y - 1)} 0,{fmt(y)} Q0.75,{fmt(y - 1)} 1.5,{fmt(y)}', stroke=color, width=0.35),),
        (
            path(f'M-2,{fmt(y)} Q-1,{fmt(y - 1.2)} 0,{fmt(y)} Q1,{fmt(y - 1.2)} 2,{fmt(y)}', stroke=color, width=0.35),
            path(f'M1,{fmt(y - 2)} Q1.5,{fmt(y - 2.6)} 2,{fmt(y - 2)} Q2.5,{fmt(y - 2.6)} 3,{fmt(y - 2)}', stroke=color, width=0.3),
        ),
        (path(f'M-1.2,{fmt(y + 1)} Q-0.6,{fmt(y + 0.2)} 0,{fmt(y + 1)} Q0.6,{fmt(y + 0.2)} 1.2,{fmt(y + 1)}', stroke=color, width=0.3),),
    )


def perched_bird(body: str, accent: str) -> Tuple[Variant, ...]:
    return (
        (ellipse(0, -1, 0.8, 0.55, body), circle(-0.6, -1.5, 0.35, body), poly([(-1, -1.5), (-1.4, -1.4), (-1, -1.3)], accent)),
        (ellipse(0, -1, 0.8, 0.55, body), circle(0.6, -1.5, 0.35, body), poly([(1, -1.5), (1.4, -1.4), (1, -1.3)], accent)),
        (ellipse(0, -1.2, 0.6, 0.8, body), circle(0, -2.1, 0.35, accent)),
    )


def swimmer(color: str, accent: str = '#fff') -> Tuple[Variant, ...]:
    return (
        (ellipse(0, -0.8, 1.8, 0.7, color), poly([(1.8, -0.8), (2.8, -2), (2.8, 0.4)], color), circle(-1, -0.9, 0.25, accent)),
        (ellipse(-1, -0.5, 1.3, 0.5, color), poly([(0.3, -0.5), (1, -1.3), (1, 0.3)], color), ellipse(1, -1.5, 1.1, 0.4, color, opacity=0.8)),
        (ellipse(0, -1, 2.2, 0.9, color), poly([(2.2, -1), (3.2, -2.2), (3.2, 0.2)], color), circle(-1.3, -1.1, 0.3, accent)),
    )


def vessel(hull: str, sail: Optional[str] = None) -> Tuple[Variant, ...]:
    hull_shape = poly([(-3, 0), (-2, -1.5), (3, -1.5), (3.5, 0)], hull)
    if sail is None:
        return (
            (hull_shape, rect(-1, -2.5, 2, 1, hull, opacity=0.8)),
            (poly([(-2.5, 0), (-1.5, -1), (2.5, -1), (3, 0)], hull), line(2, -1, 3.5, -3, 'trunk', 0.3)),
        )
    mast = line(0, -1.5, 0, -6, 'trunk', 0.4)
    return (
        (hull_shape, mast, poly([(0, -5.5), (0, -2), (2.5, -2.5)], sail, opacity=0.9)),
        (hull_shape, mast, poly([(0, -5.5), (0, -2), (2.5, -2.5)], sail, opacity=0.9), poly([(0, -5), (0, -2.5), (-2, -3)], sail, opacity=0.7)),
        (poly([(-2.5, 0), (-1.5, -1.2), (2.5, -1.2), (3, 0)], hull), line(0.5, -1.2, 0.5, -5, 'trunk', 0.35), poly([(0.5, -4.8), (0.5, -1.6), (2.4, -1.8)], sail)),
    )


def building(wall: str, roof: str, width: float = 4, height: float = 3, door: str = 'wall_shade',
             chimney: bool = False) -> Tuple[Variant, ...]:
    half = width / 2

    def house(w: float, h: float) -> Variant:
        shapes = (
            rect(-w, -h, w * 2, h, wall),
            rect(0, -h, w, h, 'wall_shade', opacity=0.35),
            poly([(-w - 0.5, -h), (0, -h - w * 0.9), (w + 0.5, -h)], roof),
            rect(-0.5, -1.4, 1, 1.4, door),
        )
        if chimney:
            shapes += (rect(w * 0.4, -h - w * 0.8, 0.6, 1.2, 'chimney'),)
        return shapes

    return (
        house(half, height),
        house(half * 0.85, height * 1.2),
        house(half * 1.15, height * 0.85) + (rect(-half * 0.9, -height * 0.7, 0.8, 0.7, 'lantern_glow', opacity=0.7),),
    )


def tower(wall: str, roof: str, width: float = 2.4, height: float = 8, face: Optional[str] = None) -> Tuple[Variant, ...]:
    half = width / 2
    body = (
        rect(-half, -height, width, height, wall),
        rect(0, -height, half, height, 'wall_shade', opacity=0.3),
    )
    variants = (
        body + (poly([(-half - 0.4, -height), (0, -height - 3), (half + 0.4, -height)], roof),),
        body + (rect(-half - 0.3, -height - 1, width + 0.6, 1, roof),) + tuple(
            rect(-half - 0.3 + i * (width + 0.6) / 3, -height - 1.8, 0.6, 0.8, roof) for i in range(3)
        ),
    )
    if face:
        return _with(variants, circle(0, -height + 1.6, 0.7, face))
    return variants


def crop(color: str, accent: Optional[str] = None) -> Tuple[Variant, ...]:
    rows = tuple(line(-2 + i, 0, -2 + i + 0.2, -2.2, color, 0.45) for i in range(5))
    variants = (
        rows,
        tuple(line(-2 + i * 1.3, 0.3, -1.6 + i * 1.3, -1.8, color, 0.5) for i in range(4)),
    )
    if accent:
        return _with(variants, circle(-1.5, -2.2, 0.3, accent), circle(0.5, -2.3, 0.3, accent), circle(2, -2.1, 0.3, accent))
    return variants


def scatter(color: str, other: Optional[str] = None, size: float = 0.4) -> Tuple[Variant, ...]:
    other = other or color
    return (
        (circle(-1.2, -0.3, size, color), circle(0.4, -0.6, size, other), circle(1.3, 0, size * 0.8, color)),
        (ellipse(-0.6, -0.2, size * 1.4, size * 0.6, color), ellipse(1, -0.5, size * 1.2, size * 0.5, other)),
        (circle(-1.5, 0, size * 0.8, other), circle(-0.2, -0.4, size, color), circle(1, -0.1, size * 0.9, other), circle(1.8, -0.5, size * 0.7, color)),
    )


def puddle(color: str, rim: Optional[str] = None) -> Tuple[Variant, ...]:
    variants = (
        (ellipse(0, -0.3, 2, 0.8, color, opacity=0.8),),
        (ellipse(-0.5, -0.2, 1.5, 0.6, color, opacity=0.8), ellipse(1.2, -0.4, 0.8, 0.35, color, opacity=0.7)),
    )
    if rim:
        return _with(variants, ellipse(0, -0.3, 2.2, 0.95, 'none', stroke=rim, stroke_width=0.3))
    return variants


def stall(body: str, awning: str, stripe: Optional[str] = None) -> Tuple[Variant, ...]:
    base = (rect(-2, -2, 4, 2, body), poly([(-2.5, -2), (-2, -3.5), (2, -3.5), (2.5, -2)], awning))
    variants = (base, base + (line(-2.2, -2, -2.2, 0, 'trunk', 0.3), line(2.2, -2, 2.2, 0, 'trunk', 0.3)))
    if stripe:
        return _with(variants, line(-1, -3.5, -1.2, -2, stripe, 0.4), line(1, -3.5, 1.2, -2, stripe, 0.4))
    return variants


def post(color: str, top: str, top_r: float = 0.6, height: float = 4) -> Tuple[Variant, ...]:
    return (
        (line(0, 0, 0, -height, color, 0.4), circle(0, -height - top_r * 0.5, top_r, top)),
        (line(-0.5, 0, -0.5, -height * 0.8, color, 0.4), circle(-0.5, -height * 0.8 - top_r * 0.5, top_r, top)),
    )


# =============================================================================
# Bespoke animated drawings
# =============================================================================

def _seagull() -> Glyph:
    wings = flyer('seagull', altitude=7)
    return _glyph(*(
        (moving(v, bob(3, -1, 5)),) for v in wings
    ))


def _bird() -> Glyph:
    return _glyph(*(
        (moving(v, bob(-2.5, -0.8, 4)),) for v in flyer('bird', altitude=8)
    ))


def _waves() -> Glyph:
    crest = (
        path('M-3,-0.3 Q-1.5,-1.3 0,-0.3 Q1.5,0.7 3,-0.3', stroke='water_light', width=0.4),
        path('M-2,0.6 Q-0.8,-0.2 0.4,0.6 Q1.6,1.4 2.6,0.6', stroke='water_light', width=0.3, opacity=0.6),
    )
    return _glyph(
        (moving(crest, bob(1, 0, 3)),),
        (moving(crest[:1], bob(-1, 0, 3.5)),),
    )


def _windmill() -> Glyph:
    blades = tuple(
        line(0, 0, dx, dy, 'wind_blade', 0.7)
        for dx, dy in ((0, -4.5), (4.5, 0), (0, 4.5), (-4.5, 0))
    )
    body = (
        poly([(-1.6, 0), (-1, -6), (1, -6), (1.6, 0)], 'windmill'),
        poly([(-1.3, -6), (0, -7.5), (1.3, -6)], 'roof_a'),
        rect(-0.4, -1.4, 0.8, 1.4, 'wall_shade'),
    )
    hub = moving(blades + (circle(0, 0, 0.4, 'boulder'),), spin(6), transform='translate(0,-6)')
    return _glyph(body + (hub,), body[:2] + (moving(blades, spin(8), transform='translate(0,-6)'),))


def _smoke() -> Glyph:
    puffs = (circle(0, -1, 0.8, 'smoke', opacity=0.5), circle(0.6, -2.2, 0.6, 'smoke', opacity=0.4), circle(-0.3, -3.2, 0.5, 'smoke', opacity=0.3))
    return _glyph((moving(puffs, rise(3, 4)),), (moving(puffs[:2], rise(2.5, 3.5)),))


def _fountain() -> Glyph:
    basin = (ellipse(0, -0.6, 2.4, 0.9, 'fountain'), ellipse(0, -0.8, 1.8, 0.6, 'fountain_water'), rect(-0.3, -3, 0.6, 2.4, 'fountain'))
    spray = moving(
        (path('M0,-3 Q-1.2,-4.5 -1.6,-1', stroke='fountain_water', width=0.3), path('M0,-3 Q1.2,-4.5 1.6,-1', stroke='fountain_water', width=0.3)),
        flicker(0.4, 1, 1.5),
    )
    return _glyph(basin + (spray,))


def _watermill() -> Glyph:
    wheel = moving(
        (circle(0, 0, 2, 'none', stroke='trunk', stroke_width=0.4),)
        + tuple(line(0, 0, dx, dy, 'trunk', 0.3) for dx, dy in ((0, -2), (2, 0), (0, 2), (-2, 0))),
        spin(5),
        transform='translate(2.5,-2)',
    )
    house = (rect(-3, -4, 4, 4, 'wall'), poly([(-3.5, -4), (-1, -6), (1.5, -4)], 'roof_b'), rect(-1.6, -1.6, 0.9, 1.6, 'wall_shade'))
    return _glyph(house + (wheel,))


def _jellyfish() -> Glyph:
    body = (
        path('M-1.2,-2 Q0,-4 1.2,-2 Z', fill='jellyfish', opacity=0.8),
        line(-0.7, -2, -0.9, -0.4, 'jellyfish', 0.2),
        line(0, -2, 0, -0.2, 'jellyfish', 0.2),
        line(0.7, -2, 0.9, -0.4, 'jellyfish', 0.2),
    )
    return _glyph((moving(body, bob(0, -1.2, 3)),), (moving(body[:3], bob(0, -0.8, 2.5)),))


def _turtle() -> Glyph:
    body = (
        ellipse(0, -0.8, 1.6, 0.9, 'turtle'),
        circle(-1.8, -0.8, 0.5, 'turtle'),
        path('M-1,-1.2 L1,-1.2 M0,-1.7 L0,-0.2', stroke='#000', width=0.15, opacity=0.3),
    )
    return _glyph((moving(body, bob(-1.5, 0, 6)),), (moving(body[:2], bob(1.5, 0, 7)),))


def _butterfly() -> Glyph:
    wings = (
        ellipse(-0.6, -4, 0.6, 0.45, 'butterfly_wing'),
        ellipse(0.6, -4, 0.6, 0.45, 'butterfly_wing'),
        line(0, -4.4, 0, -3.6, 'butterfly', 0.25),
    )
    return _glyph(
        (moving(wings, bob(1.5, -1, 3)),),
        (moving(wings, bob(-1.2, -1.4, 3.5)),),
    )


def _bakery() -> Glyph:
    base = building('wall', 'roof_b', width=4, height=3, chimney=True)
    steam = moving((circle(1.1, -6.4, 0.5, 'smoke', opacity=0.4),), rise(2, 3))
    return _glyph(*(v + (steam,) for v in base))


def _clocktower() -> Glyph:
    hand = moving((line(0, 0, 0, -0.6, 'trunk', 0.2),), spin(12), transform='translate(0,-8.4)')
    return _glyph(*(v + (hand,) for v in tower('clocktower', 'roof_b', width=2.4, height=10, face='clock_face')))


def _campfire() -> Glyph:
    logs = (line(-1.2, 0, 1.2, -0.6, 'log', 0.5), line(-1.2, -0.6, 1.2, 0, 'log', 0.5))
    flame = moving(
        (poly([(-0.7, -0.4), (0, -2.4), (0.7, -0.4)], 'campfire_flame'), poly([(-0.35, -0.4), (0, -1.5), (0.35, -0.4)], 'torch_flame')),
        flicker(0.6, 1, 0.8),
    )
    return _glyph(logs + (flame,))


# =============================================================================
# Table
# =============================================================================

_TABLE: dict = {
    # Water
    D.WHALE: _glyph(*(
        (ellipse(0, -1.2, 3.5, 2, 'whale'), ellipse(0, -0.5, 2.5, 1, 'whale_belly', opacity=0.5),
         path('M3,-1.2 Q4.5,-1.2 5,-2.5 M3,-1.2 Q4.5,-1.2 5,0', stroke='whale', width=1), circle(-2, -1.5, 0.4, '#fff')),
        (ellipse(0, -0.5, 3, 1.5, 'whale', transform='rotate(-15)'), ellipse(0, 0, 2, 0.8, 'whale_belly', opacity=0.5)),
        (ellipse(0, -0.8, 2.2, 1.3, 'whale'), ellipse(0, -0.3, 1.5, 0.6, 'whale_belly', opacity=0.5), circle(-1.2, -1, 0.3, '#fff')),
    )),
    D.FISH: _glyph(*swimmer('fish')),
    D.FISH_SCHOOL: _glyph(
        (ellipse(-1, -0.5, 1, 0.4, 'fish', opacity=0.8), ellipse(1, -1.2, 0.8, 0.35, 'fish', opacity=0.7), ellipse(0.5, 0, 0.9, 0.4, 'fish', opacity=0.6)),
    ),
    D.BOAT: _glyph(*vessel('boat', 'sail')),
    D.SEAGULL: _seagull(),
    D.DOCK: _glyph(
        (rect(-3, -1, 6, 1, 'dock'), line(-2.5, 0, -2.5, 1.2, 'trunk', 0.4), line(2.5, 0, 2.5, 1.2, 'trunk', 0.4)),
        (rect(-1, -1, 4, 1, 'dock'), line(2.6, 0, 2.6, 1.2, 'trunk', 0.4)),
    ),
    D.WAVES: _waves(),
    D.KELP: _glyph(
        (path('M0,0 Q-0.8,-1.5 0,-3 Q0.8,-4.5 0,-5.5', stroke='moss', width=0.5),),
        (path('M-0.6,0 Q-1.2,-1.5 -0.6,-3.5', stroke='moss', width=0.4), path('M0.6,0 Q1.2,-2 0.4,-4', stroke='moss', width=0.4)),
    ),
    D.CORAL: _glyph(*scatter('coral', 'flower', size=0.6)),
    D.JELLYFISH: _jellyfish(),
    D.TURTLE: _turtle(),
    D.BUOY: _glyph((ellipse(0, -0.4, 0.9, 0.4, 'buoy'), rect(-0.4, -2.2, 0.8, 1.8, 'buoy'), line(0, -2.2, 0, -3, 'trunk', 0.2))),
    D.SAILBOAT: _glyph(*vessel('boat', 'sail')[1:]),
    D.LIGHTHOUSE: _glyph(
        (poly([(-1.3, 0), (-0.8, -7), (0.8, -7), (1.3, 0)], 'lighthouse'), rect(-1, -4.5, 2, 0.8, 'roof_a'),
         rect(-0.9, -8.2, 1.8, 1.2, 'lantern_glow'), poly([(-1.1, -8.2), (0, -9.4), (1.1, -8.2)], 'roof_a')),
    ),
    D.CRAB: _glyph(*small_critter('crab', '#000')),
    # Shore and wetland
    D.ROCK: _glyph(*stone('rock')),
    D.BOULDER: _glyph(*stone('boulder')),
    D.FLOWER: _glyph(*bloom('flower')),
    D.BUSH: _glyph(*bush('bush')),
    D.DRIFTWOOD: _glyph((line(-2, -0.2, 2, -0.8, 'driftwood', 0.7), line(0.8, -0.6, 1.6, -1.4, 'driftwood', 0.35))),
    D.SANDCASTLE: _glyph(
        (rect(-1.5, -1.5, 3, 1.5, 'sandcastle'), rect(-1.5, -2.5, 0.8, 1, 'sandcastle'), rect(0.7, -2.5, 0.8, 1, 'sandcastle')),
    ),
    D.TIDE_POOLS: _glyph(*puddle('tide_pools', rim='rock')),
    D.HERON: _glyph(
        (line(-0.2, 0, -0.2, -2, 'heron', 0.2), line(0.2, 0, 0.2, -2, 'heron', 0.2), ellipse(0, -2.6, 0.9, 0.6, 'heron'),
         path('M-0.6,-3 Q-1,-4 -0.8,-4.6', stroke='heron', width=0.3), line(-0.8, -4.6, -1.8, -4.4, 'torch_flame', 0.2)),
    ),
    D.SHELLFISH: _glyph(*scatter('shellfish', size=0.45)),
    D.CATTAIL: _glyph(
        (line(0, 0, 0, -4, 'leaf', 0.3), ellipse(0, -4.3, 0.3, 0.8, 'cattail'), line(0.8, 0, 0.9, -3, 'leaf', 0.3), ellipse(0.9, -3.3, 0.25, 0.7, 'cattail')),
        css_class=SWAY_CLASS,
    ),
    D.FROG: _glyph(*small_critter('frog', '#000')),
    D.LILY: _glyph((ellipse(0, -0.2, 1.3, 0.5, 'lily'), circle(0.3, -0.5, 0.35, 'flower'))),
    # Grassland
    D.PINE: _glyph(*conifer('pine')),
    D.DECIDUOUS: _glyph(*round_tree('leaf')),
    D.MUSHROOM: _glyph(
        (rect(-0.25, -1, 0.5, 1, 'mushroom'), ellipse(0, -1.1, 1, 0.6, 'mushroom_cap'), circle(-0.3, -1.3, 0.15, 'mushroom')),
        (rect(-0.9, -0.8, 0.4, 0.8, 'mushroom'), ellipse(-0.7, -0.9, 0.7, 0.45, 'mushroom_cap'), rect(0.5, -1.2, 0.4, 1.2, 'mushroom'), ellipse(0.7, -1.3, 0.8, 0.5, 'mushroom_cap')),
    ),
    D.STUMP: _glyph((rect(-0.8, -1, 1.6, 1, 'stump'), ellipse(0, -1, 0.8, 0.35, 'log'))),
    D.DEER: _glyph(*_with(critter('deer'), path('M-2,-2.4 L-2.4,-3.4 M-1.8,-2.4 L-1.6,-3.4', stroke='trunk', width=0.2))),
    D.RABBIT: _glyph(*_with(small_critter('rabbit', '#000'), line(-0.8, -1.4, -0.9, -2.2, 'rabbit', 0.25))),
    D.FOX: _glyph(*_with(critter('fox'), ellipse(2, -1.2, 0.8, 0.3, 'fox'))),
    D.BUTTERFLY: _butterfly(),
    D.BEEHIVE: _glyph((line(0, 0, 0, -1.5, 'trunk', 0.4), ellipse(0, -2.4, 0.9, 1.1, 'beehive'), line(-0.8, -2.4, 0.8, -2.4, 'trunk', 0.15))),
    D.WILDFLOWER_PATCH: _glyph(*scatter('wildflower', 'flower', size=0.45)),
    D.TALL_GRASS: _glyph(
        (line(-0.8, 0, -1, -2.5, 'tall_grass', 0.3), line(0, 0, 0.1, -3, 'tall_grass', 0.3), line(0.8, 0, 1.1, -2.3, 'tall_grass', 0.3)),
        css_class=SWAY_CLASS,
    ),
    D.BIRCH: _glyph(*round_tree('leaf', trunk='birch_bark')),
    D.HAYBALE: _glyph((ellipse(0, -0.9, 1.3, 0.9, 'haybale'), ellipse(-0.9, -0.9, 0.35, 0.8, 'wheat'))),
    # Forest
    D.WILLOW: _glyph(
        (rect(-0.4, -3, 0.8, 3, 'trunk'), ellipse(0, -4.5, 2.5, 2, 'willow'),
         path('M-2,-4 Q-2.4,-2 -2.2,-0.8 M2,-4 Q2.4,-2 2.2,-0.8', stroke='willow', width=0.4)),
    ),
    D.PALM: _glyph(
        (path('M0,0 Q0.5,-3 0.2,-6', stroke='palm', width=0.6),
         path('M0.2,-6 Q-2,-6.5 -3,-5 M0.2,-6 Q2,-6.8 3,-5.2 M0.2,-6 Q0,-8 -1.2,-8', stroke='leaf', width=0.5)),
    ),
    D.BIRD: _bird(),
    D.OWL: _glyph((ellipse(0, -1.4, 0.9, 1.3, 'owl'), circle(-0.35, -2, 0.3, '#fff'), circle(0.35, -2, 0.3, '#fff'), circle(-0.35, -2, 0.12, '#000'), circle(0.35, -2, 0.12, '#000'))),
    D.SQUIRREL: _glyph(*_with(small_critter('squirrel', '#000'), path('M0.8,-0.6 Q1.8,-1.6 1,-2.4', stroke='squirrel', width=0.5))),
    D.MOSS: _glyph(*scatter('moss', size=0.6)),
    D.FERN: _glyph(
        (path('M0,0 Q-1.5,-1 -2.2,-2.2 M0,0 Q0,-1.8 0.2,-2.8 M0,0 Q1.5,-1 2.2,-2', stroke='fern', width=0.4),),
    ),
    D.DEAD_TREE: _glyph(
        (line(0, 0, 0, -4.5, 'dead_tree', 0.6), line(0, -2.5, -1.4, -3.6, 'dead_tree', 0.35), line(0, -3.2, 1.2, -4.4, 'dead_tree', 0.35)),
    ),
    D.LOG: _glyph((rect(-1.8, -0.9, 3.6, 0.9, 'log', rx=0.4), ellipse(1.8, -0.45, 0.35, 0.45, 'stump'))),
    D.BERRY_BUSH: _glyph(*bush('berry_bush', dots='berry')),
    D.SPIDER: _glyph(
        (path('M-1.5,-3 L1.5,-0.5 M1.5,-3 L-1.5,-0.5 M0,-3.4 L0,-0.2', stroke='spider_web', width=0.15),
         circle(0, -1.8, 1, 'none', stroke='spider_web', stroke_width=0.15), circle(0.3, -1.6, 0.25, '#222')),
    ),
    # Farm
    D.WHEAT: _glyph(*crop('wheat')),
    D.FENCE: _glyph(
        (line(-2, -1.5, 2, -0.5, 'fence', 0.3), line(-2, -0.7, 2, 0.3, 'fence', 0.3),
         line(-1.8, -1.9, -1.8, 0, 'fence', 0.35), line(0, -1.5, 0, 0.4, 'fence', 0.35), line(1.8, -1, 1.8, 0.8, 'fence', 0.35)),
    ),
    D.SCARECROW: _glyph(
        (line(0, 0, 0, -4, 'trunk', 0.4), line(-1.6, -3, 1.6, -3, 'trunk', 0.35), rect(-0.8, -3.3, 1.6, 1.8, 'scarecrow'),
         circle(0, -4.2, 0.6, 'haybale'), poly([(-0.9, -4.5), (0, -5.4), (0.9, -4.5)], 'scarecrow_hat')),
    ),
    D.BARN: _glyph(*building('roof_a', 'roof_b', width=5, height=3.5, door='trunk')),
    D.SHEEP: _glyph(*critter('sheep', head='sheep_head', legs='sheep_head')),
    D.COW: _glyph(*critter('cow', legs='cow_spot', spot='cow_spot')),
    D.CHICKEN: _glyph(*perched_bird('chicken', 'torch_flame')),
    D.HORSE: _glyph(*_with(critter('horse'), line(-2.3, -2.4, -1.6, -1.6, 'trunk', 0.3))),
    D.RICE_PADDY: _glyph(
        (ellipse(0, -0.3, 2.4, 0.9, 'rice_paddy_water'),) + tuple(line(-1.5 + i * 0.75, -0.2, -1.5 + i * 0.75, -1.4, 'rice_paddy', 0.3) for i in range(5)),
    ),
    D.SILO: _glyph((rect(-1, -6, 2, 6, 'silo'), ellipse(0, -6, 1, 0.6, 'roof_b'), rect(0, -6, 1, 6, 'wall_shade', opacity=0.3))),
    D.PIGPEN: _glyph(
        (rect(-2.2, -1.2, 4.4, 1.2, 'none', stroke='fence', stroke_width=0.3), ellipse(-0.5, -0.7, 0.9, 0.55, 'pig'), ellipse(1, -0.6, 0.7, 0.45, 'pig')),
    ),
    D.TROUGH: _glyph((rect(-1.5, -0.9, 3, 0.9, 'trough'), ellipse(0, -0.9, 1.3, 0.25, 'water'))),
    D.HAYSTACK: _glyph((poly([(-1.8, 0), (-1, -2.2), (0, -2.8), (1, -2.2), (1.8, 0)], 'haystack'),)),
    D.ORCHARD: _glyph(*round_tree('orchard', fruit='orchard_fruit')),
    D.BEE_FARM: _glyph(
        (rect(-2, -1.2, 1.2, 1.2, 'bee_farm'), rect(-0.4, -1.2, 1.2, 1.2, 'bee_farm'), rect(1.2, -1.2, 1.2, 1.2, 'bee_farm'),
         circle(0.2, -2.2, 0.15, '#222'), circle(1.4, -2.6, 0.15, '#222')),
    ),
    D.PUMPKIN: _glyph(
        (ellipse(0, -0.7, 1, 0.7, 'pumpkin'), line(0, -1.4, 0.2, -1.9, 'leaf', 0.3)),
        (ellipse(-0.8, -0.6, 0.8, 0.6, 'pumpkin'), ellipse(0.8, -0.5, 0.7, 0.5, 'pumpkin')),
    ),
    # Village
    D.TENT: _glyph(
        (poly([(-2, 0), (0, -3), (2, 0)], 'tent'), line(0, -3, 0, 0, 'tent_stripe', 0.3), poly([(-0.4, 0), (0, -1.2), (0.4, 0)], 'wall_shade')),
        (poly([(-2.4, 0), (-0.4, -2.6), (1.6, -2.6), (2.4, 0)], 'tent'), line(-1, -1.5, 1, -1.5, 'tent_stripe', 0.3)),
    ),
    D.HUT: _glyph(
        (rect(-1.5, -2, 3, 2, 'hut'), poly([(-2.2, -2), (0, -4), (2.2, -2)], 'haystack'), rect(-0.4, -1.2, 0.8, 1.2, 'wall_shade')),
    ),
    D.HOUSE: _glyph(*building('wall', 'roof_a', chimney=True)),
    D.HOUSE_B: _glyph(*building('wall', 'roof_b', width=3.6, height=3.5)),
    D.CHURCH: _glyph(
        *(v + (line(0, -9.5, 0, -11, 'church', 0.3), line(-0.5, -10.5, 0.5, -10.5, 'church', 0.3))
          for v in tower('church', 'roof_b', width=3, height=6)),
    ),
    D.WINDMILL: _windmill(),
    D.WELL: _glyph(
        (ellipse(0, -0.8, 1.4, 0.6, 'well'), rect(-1.4, -1.4, 2.8, 0.8, 'well'), line(-1.2, -1.4, -1.2, -3.4, 'trunk', 0.3),
         line(1.2, -1.4, 1.2, -3.4, 'trunk', 0.3), poly([(-1.7, -3.2), (0, -4.2), (1.7, -3.2)], 'roof_a')),
    ),
    D.TAVERN: _glyph(*_with(building('tavern', 'roof_a', width=5, height=3.5), line(2.6, -3, 3.6, -3, 'trunk', 0.3), rect(3, -2.9, 0.8, 0.6, 'tavern_sign'))),
    D.BAKERY: _bakery(),
    D.STABLE: _glyph(*building('stable', 'roof_b', width=5, height=2.5, door='trunk')),
    D.GARDEN: _glyph(
        (rect(-2, -0.8, 4, 0.8, 'garden_soil'), rect(-2.2, -1.2, 4.4, 1.4, 'none', stroke='garden_fence', stroke_width=0.25),
         circle(-1.2, -1, 0.4, 'leaf'), circle(0, -1.1, 0.4, 'flower'), circle(1.2, -1, 0.4, 'leaf')),
    ),
    D.LAUNDRY: _glyph(
        (line(-2, 0, -2, -3, 'trunk', 0.3), line(2, 0, 2, -3, 'trunk', 0.3), path('M-2,-2.8 Q0,-2.2 2,-2.8', stroke='trunk', width=0.15),
         rect(-1.4, -2.6, 0.8, 1.1, 'laundry'), rect(0.2, -2.5, 0.9, 1.2, 'flower')),
        css_class=SWAY_CLASS,
    ),
    D.DOGHOUSE: _glyph(
        (rect(-1, -1.3, 2, 1.3, 'doghouse'), poly([(-1.3, -1.3), (0, -2.3), (1.3, -1.3)], 'roof_a'), circle(0, -0.5, 0.4, '#222')),
    ),
    D.SHRINE: _glyph(
        (rect(-1, -2, 2, 2, 'shrine'), poly([(-1.8, -2), (0, -3), (1.8, -2)], 'roof_a'), line(-1.6, -2.1, 1.6, -2.1, 'roof_a', 0.3)),
    ),
    D.WAGON: _glyph(
        (rect(-2, -2, 4, 1.2, 'wagon'), path('M-2,-2 Q0,-4 2,-2', fill='tent'), circle(-1.3, -0.5, 0.6, 'none', stroke='trunk', stroke_width=0.3),
         circle(1.3, -0.5, 0.6, 'none', stroke='trunk', stroke_width=0.3)),
    ),
    # Town
    D.MARKET: _glyph(*stall('market', 'market_awning', stripe='wall')),
    D.INN: _glyph(*_with(building('inn', 'roof_b', width=5, height=4), rect(2.7, -3.2, 0.8, 0.6, 'inn_sign'))),
    D.BLACKSMITH: _glyph(
        *_with(building('blacksmith', 'roof_b', width=4, height=3, chimney=True), rect(2.4, -0.8, 1.2, 0.5, 'anvil'), rect(2.8, -0.3, 0.4, 0.3, 'anvil')),
    ),
    D.CASTLE: _glyph(
        (rect(-4, -5, 8, 5, 'castle'), rect(0, -5, 4, 5, 'wall_shade', opacity=0.3), rect(-4.5, -8, 2, 8, 'castle'), rect(2.5, -8, 2, 8, 'castle'),
         poly([(-4.8, -8), (-3.5, -10), (-2.2, -8)], 'castle_roof'), poly([(2.2, -8), (3.5, -10), (4.8, -8)], 'castle_roof'),
         rect(-0.8, -2.4, 1.6, 2.4, 'wall_shade'), line(-3.5, -10, -3.5, -11.2, 'trunk', 0.2), rect(-3.5, -11.2, 0.9, 0.5, 'flag')),
    ),
    D.TOWER: _glyph(*tower('tower', 'castle_roof')),
    D.BRIDGE: _glyph(
        (path('M-3,0 Q0,-2.5 3,0', fill='none', stroke='bridge', width=0.8), line(-3, -1.2, 3, -1.2, 'bridge', 0.3)),
    ),
    D.CATHEDRAL: _glyph(
        (rect(-3.5, -5, 7, 5, 'cathedral'), rect(-3, -10, 2, 5, 'cathedral'), rect(1, -10, 2, 5, 'cathedral'),
         poly([(-3.2, -10), (-2, -12.5), (-0.8, -10)], 'roof_b'), poly([(0.8, -10), (2, -12.5), (3.2, -10)], 'roof_b'),
         circle(0, -3.4, 1, 'cathedral_window'), rect(-0.6, -1.6, 1.2, 1.6, 'wall_shade')),
    ),
    D.LIBRARY: _glyph(
        (rect(-3, -4, 6, 4, 'library'), poly([(-3.5, -4), (0, -5.8), (3.5, -4)], 'roof_b'))
        + tuple(line(-2.2 + i * 1.1, -3.8, -2.2 + i * 1.1, 0, 'wall', 0.4) for i in range(5)),
    ),
    D.CLOCKTOWER: _clocktower(),
    D.STATUE: _glyph(
        (rect(-1, -1.2, 2, 1.2, 'statue'), rect(-0.35, -3.8, 0.7, 2.6, 'statue'), circle(0, -4.3, 0.5, 'statue')),
    ),
    D.PARK: _glyph(
        (ellipse(0, -0.4, 2.8, 1, 'leaf', opacity=0.6), rect(-1.2, -1.3, 2.4, 0.4, 'park_bench'), line(-1, -0.9, -1, -0.4, 'park_bench', 0.3),
         line(1, -0.9, 1, -0.4, 'park_bench', 0.3), circle(2, -2.2, 1.1, 'garden_tree')),
    ),
    D.WAREHOUSE: _glyph(*building('warehouse', 'roof_b', width=6, height=3, door='trunk')),
    D.GATEHOUSE: _glyph(
        (rect(-3, -5, 2, 5, 'gatehouse'), rect(1, -5, 2, 5, 'gatehouse'), rect(-1, -5, 2, 2, 'gatehouse'),
         path('M-1,-3 Q0,-4 1,-3 L1,0 L-1,0 Z', fill='wall_shade'), poly([(-3.3, -5), (0, -6.5), (3.3, -5)], 'castle_roof')),
    ),
    D.MANOR: _glyph(*_with(building('manor', 'roof_a', width=6, height=4, chimney=True), ellipse(-4, -0.5, 1.2, 0.6, 'manor_garden'))),
    # Biome blend
    D.REEDS: _glyph(
        (line(-0.8, 0, -1, -3, 'reeds', 0.3), line(0, 0, 0, -3.5, 'reeds', 0.3), line(0.8, 0, 1.1, -2.8, 'reeds', 0.3)),
        (line(-0.4, 0, -0.6, -2.6, 'reeds', 0.3), line(0.4, 0, 0.6, -3.2, 'reeds', 0.3)),
    ),
    D.FOUNTAIN: _fountain(),
    D.CANAL: _glyph((rect(-2.5, -0.8, 5, 0.8, 'canal'), line(-2.5, -0.8, 2.5, -0.8, 'cobble', 0.3), line(-2.5, 0, 2.5, 0, 'cobble', 0.3))),
    D.WATERMILL: _watermill(),
    D.GARDEN_TREE: _glyph(*round_tree('garden_tree')),
    D.POND_LILY: _glyph(
        (ellipse(-0.8, -0.2, 1, 0.4, 'lily'), ellipse(0.9, -0.3, 0.8, 0.35, 'lily'), circle(-0.6, -0.5, 0.3, 'cherry_petal_pink')),
    ),
    # Cross-level props
    D.CART: _glyph((rect(-1.8, -1.8, 3.6, 1.2, 'cart'), circle(-1, -0.5, 0.55, 'none', stroke='trunk', stroke_width=0.3), line(1.8, -1.4, 3, -0.8, 'trunk', 0.3))),
    D.BARREL: _glyph(
        (rect(-0.7, -1.6, 1.4, 1.6, 'barrel', rx=0.3), line(-0.7, -1.1, 0.7, -1.1, 'trunk', 0.15), line(-0.7, -0.5, 0.7, -0.5, 'trunk', 0.15)),
        (rect(-1.5, -1.4, 1.2, 1.4, 'barrel', rx=0.3), rect(0.3, -1.2, 1.1, 1.2, 'barrel', rx=0.3)),
    ),
    D.TORCH: _glyph(*post('torch', 'torch_flame', top_r=0.5, height=3)),
    D.FLAG: _glyph((line(0, 0, 0, -5, 'trunk', 0.3), poly([(0, -5), (2.2, -4.4), (0, -3.8)], 'flag'))),
    D.COBBLE_PATH: _glyph(*scatter('cobble', 'path', size=0.5)),
    D.SMOKE: _smoke(),
    D.SIGNPOST: _glyph((line(0, 0, 0, -3, 'trunk', 0.35), poly([(-1.2, -2.9), (1.2, -2.9), (1.7, -2.5), (1.2, -2.1), (-1.2, -2.1)], 'signpost'))),
    D.LANTERN: _glyph(*post('trunk', 'lantern_glow', top_r=0.5, height=3.5)),
    D.WOODPILE: _glyph(
        (circle(-0.8, -0.5, 0.5, 'woodpile'), circle(0.2, -0.5, 0.5, 'woodpile'), circle(1.2, -0.5, 0.5, 'woodpile'), circle(-0.3, -1.3, 0.5, 'woodpile'), circle(0.7, -1.3, 0.5, 'woodpile')),
    ),
    D.PUDDLE: _glyph(*puddle('puddle')),
    D.CAMPFIRE: _campfire(),
    # Winter
    D.SNOW_PINE: _glyph(*conifer('pine', cap='snow_cap')),
    D.SNOW_DECIDUOUS: _glyph(*_with(
        ((line(0, 0, 0, -4, 'bare_branch', 0.5), line(0, -2.5, -1.4, -3.8, 'bare_branch', 0.3), line(0, -3, 1.3, -4.4, 'bare_branch', 0.3)),),
        ellipse(-1.3, -3.9, 0.6, 0.2, 'snow_cap'), ellipse(1.2, -4.5, 0.6, 0.2, 'snow_cap'),
    )),
    D.SNOWMAN: _glyph(
        (circle(0, -1.2, 1.2, 'snow_ground'), circle(0, -3, 0.9, 'snow_ground'), circle(-0.3, -3.2, 0.12, 'snowman_coal'),
         circle(0.3, -3.2, 0.12, 'snowman_coal'), poly([(0, -2.9), (0.9, -2.8), (0, -2.7)], 'snowman_carrot'), rect(-0.9, -2.3, 1.8, 0.35, 'scarf_red')),
    ),
    D.SNOWDRIFT: _glyph(
        (path('M-2.5,0 Q-1,-1.6 0.5,-0.8 Q1.6,-1.4 2.5,0 Z', fill='snow_ground'),),
        (ellipse(0, -0.4, 2, 0.6, 'snow_ground'),),
    ),
    D.IGLOO: _glyph((path('M-2.2,0 Q-2.2,-2.8 0,-2.8 Q2.2,-2.8 2.2,0 Z', fill='igloo'), path('M-0.6,0 Q-0.6,-1 0,-1 Q0.6,-1 0.6,0 Z', fill='wall_shade'))),
    D.FROZEN_POND: _glyph(*puddle('ice', rim='frost_white')),
    D.ICICLE: _glyph(
        (line(-1.8, -2.6, 1.8, -2.6, 'roof_a', 0.4), poly([(-1.3, -2.6), (-1.1, -1.2), (-0.9, -2.6)], 'icicle'),
         poly([(-0.2, -2.6), (0, -0.8), (0.2, -2.6)], 'icicle'), poly([(0.9, -2.6), (1.1, -1.5), (1.3, -2.6)], 'icicle')),
    ),
    D.SLED: _glyph((rect(-1.5, -1, 3, 0.5, 'sled_wood'), path('M-1.6,-0.3 L1.4,-0.3 Q2,-0.3 2,-0.9', stroke='sled_runner', width=0.25))),
    D.SNOW_COVERED_ROCK: _glyph(*stone('rock', cap='snow_cap')),
    D.BARE_BUSH: _glyph(
        (path('M0,0 L-1.2,-1.8 M0,0 L0,-2.2 M0,0 L1.2,-1.6 M-0.6,-0.9 L-1.4,-1.1', stroke='bare_branch', width=0.25),),
    ),
    D.WINTER_BIRD: _glyph(*perched_bird('winter_bird_red', 'winter_bird_brown')),
    D.FIREWOOD: _glyph((line(-1.5, -0.4, 1.5, -0.4, 'firewood_log', 0.6), line(-1.3, -1, 1.3, -1, 'firewood_log', 0.6), line(-0.9, -1.6, 0.9, -1.6, 'firewood_log', 0.6))),
    # Spring
    D.CHERRY_BLOSSOM: _glyph(*round_tree('cherry_petal_pink', trunk='cherry_trunk', fruit='cherry_petal_white')),
    D.CHERRY_BLOSSOM_SMALL: _glyph(
        (line(0, 0, 0, -2.5, 'cherry_trunk', 0.4), line(0, -1.8, 0.9, -2.5, 'cherry_branch', 0.2), circle(0, -3, 1.3, 'cherry_petal_pink')),
    ),
    D.CHERRY_PETALS: _glyph(*scatter('cherry_petal_pink', 'cherry_petal_white', size=0.3)),
    D.TULIP: _glyph(*bloom('tulip_red', center='tulip_yellow', stem='tulip_stem')),
    D.TULIP_FIELD: _glyph(
        tuple(line(-2 + i, 0, -2 + i, -1.5, 'tulip_stem', 0.25) for i in range(5))
        + tuple(ellipse(-2 + i, -1.8, 0.35, 0.45, color) for i, color in enumerate(('tulip_red', 'tulip_yellow', 'tulip_purple', 'tulip_red', 'tulip_yellow'))),
    ),
    D.SPROUT: _glyph(
        (line(0, 0, 0, -1.2, 'sprout_green', 0.25), ellipse(-0.4, -1.3, 0.4, 0.2, 'sprout_green'), ellipse(0.4, -1.4, 0.4, 0.2, 'sprout_green')),
    ),
    D.NEST: _glyph((ellipse(0, -0.6, 1.2, 0.6, 'nest_brown'), circle(-0.35, -0.9, 0.28, 'egg_blue'), circle(0.35, -0.9, 0.28, 'egg_white'))),
    D.LAMB: _glyph(*critter('lamb_wool', head='sheep_head', legs='sheep_head')),
    D.CROCUS: _glyph(*bloom('crocus_purple', center='crocus_yellow', stem='sprout_green')),
    D.RAIN_PUDDLE: _glyph(*puddle('puddle', rim='water_light')),
    D.BIRDHOUSE: _glyph((line(0, 0, 0, -3, 'trunk', 0.35), rect(-0.7, -4.2, 1.4, 1.3, 'birdhouse_wood'), poly([(-1, -4.2), (0, -5), (1, -4.2)], 'roof_a'), circle(0, -3.6, 0.25, '#222'))),
    D.GARDEN_BED: _glyph((rect(-2, -0.8, 4, 0.8, 'garden_soil'), circle(-1.2, -1, 0.35, 'sprout_green'), circle(0, -1, 0.35, 'sprout_green'), circle(1.2, -1, 0.35, 'sprout_green'))),
    # Summer
    D.PARASOL: _glyph(
        (line(0, 0, 0, -3.5, 'trunk', 0.25), path('M-2,-3.3 Q0,-5 2,-3.3 Z', fill='parasol_red'), line(-1, -3.5, 0, -4.6, 'parasol_stripe', 0.3)),
        (line(0, 0, 0, -3.5, 'trunk', 0.25), path('M-2,-3.3 Q0,-5 2,-3.3 Z', fill='parasol_blue')),
        (line(0, 0, 0, -3.5, 'trunk', 0.25), path('M-2,-3.3 Q0,-5 2,-3.3 Z', fill='parasol_yellow')),
    ),
    D.BEACH_TOWEL: _glyph(
        (rect(-1.5, -0.8, 3, 1, 'beach_towel_a', transform='skewX(-30)'), line(-1, -0.3, 1, -0.3, 'beach_towel_b', 0.3)),
        (rect(-1.5, -0.8, 3, 1, 'beach_towel_b', transform='skewX(-30)'),),
    ),
    D.SANDCASTLE_SUMMER: _glyph(
        (rect(-1.8, -1.6, 3.6, 1.6, 'sandcastle_wall'), rect(-1.8, -2.8, 1, 1.2, 'sandcastle_wall'), rect(0.8, -2.8, 1, 1.2, 'sandcastle_wall'),
         line(1.3, -2.8, 1.3, -3.8, 'trunk', 0.15), poly([(1.3, -3.8), (2.1, -3.5), (1.3, -3.2)], 'flag')),
    ),
    D.SURFBOARD: _glyph((ellipse(0, -2, 0.7, 2.2, 'surfboard_body', transform='rotate(15)'), line(0, -3.8, 0.5, -0.2, 'surfboard_stripe', 0.25))),
    D.ICE_CREAM_CART: _glyph(
        (rect(-1.5, -2, 3, 1.5, 'ice_cream_cart'), circle(-0.8, -0.4, 0.4, '#333'), circle(0.8, -0.4, 0.4, '#333'),
         line(0, -2, 0, -3.6, 'trunk', 0.2), path('M-1.6,-3.4 Q0,-4.6 1.6,-3.4 Z', fill='ice_cream_umbrella')),
    ),
    D.HAMMOCK: _glyph(
        (line(-2.5, 0, -2.5, -3, 'trunk', 0.45), line(2.5, 0, 2.5, -3, 'trunk', 0.45), path('M-2.5,-2.5 Q0,-0.6 2.5,-2.5', stroke='hammock_fabric', width=0.7)),
    ),
    D.SUNFLOWER: _glyph(
        (line(0, 0, 0, -3.5, 'leaf', 0.35), circle(0, -4, 1, 'sunflower_petal'), circle(0, -4, 0.45, 'sunflower_center')),
        (line(0, 0, 0.3, -3, 'leaf', 0.35), circle(0.3, -3.5, 0.8, 'sunflower_petal'), circle(0.3, -3.5, 0.35, 'sunflower_center')),
    ),
    D.WATERMELON: _glyph(
        (path('M-1.4,-0.2 A1.4,1.4 0 0 1 1.4,-0.2 Z', fill='watermelon_rind'), path('M-1.1,-0.3 A1.1,1.1 0 0 1 1.1,-0.3 Z', fill='watermelon_flesh'),
         circle(-0.4, -0.6, 0.1, 'watermelon_seed'), circle(0.3, -0.8, 0.1, 'watermelon_seed')),
        (ellipse(0, -0.7, 1.5, 0.8, 'watermelon_rind'),),
    ),
    D.SPRINKLER: _glyph((line(0, 0, 0, -0.8, 'sprinkler_metal', 0.3), path('M0,-0.8 Q-1.5,-2.2 -2.2,-0.4 M0,-0.8 Q1.5,-2.2 2.2,-0.4', stroke='water_light', width=0.2, opacity=0.6))),
    D.LEMONADE: _glyph(*stall('lemonade_stand', 'parasol_yellow')),
    D.FIREFLIES: _glyph(*scatter('lantern_glow', size=0.2)),
    D.SWIMMING_POOL: _glyph((rect(-2.5, -1.6, 5, 1.6, 'pool_edge'), rect(-2.1, -1.3, 4.2, 1.1, 'pool_water'))),
    # Autumn
    D.AUTUMN_MAPLE: _glyph(*round_tree('maple_red', fruit='maple_orange')),
    D.AUTUMN_OAK: _glyph(*round_tree('oak_gold', trunk='oak_brown')),
    D.AUTUMN_BIRCH: _glyph(*round_tree('birch_yellow', trunk='birch_bark')),
    D.AUTUMN_GINKGO: _glyph(*round_tree('ginkgo_yellow')),
    D.FALLEN_LEAVES: _glyph(*scatter('fallen_leaf_red', 'fallen_leaf_gold', size=0.45)),
    D.LEAF_SWIRL: _glyph(
        (path('M-1.5,-1 Q0,-3 1.5,-1.5', stroke='fallen_leaf_brown', width=0.15, opacity=0.5), ellipse(-1.2, -1.2, 0.4, 0.2, 'fallen_leaf_orange'),
         ellipse(0.2, -2.2, 0.4, 0.2, 'fallen_leaf_red'), ellipse(1.3, -1.6, 0.4, 0.2, 'fallen_leaf_gold')),
    ),
    D.ACORN: _glyph(*scatter('acorn_body', 'acorn_cap', size=0.35)),
    D.CORN_STALK: _glyph(*crop('corn_stalk_color', accent='corn_ear')),
    D.SCARECROW_AUTUMN: _glyph(
        (line(0, 0, 0, -4, 'trunk', 0.4), line(-1.6, -3, 1.6, -3, 'trunk', 0.35), rect(-0.8, -3.3, 1.6, 1.8, 'scarecrow'),
         circle(0, -4.2, 0.6, 'pumpkin'), poly([(-0.9, -4.5), (0, -5.4), (0.9, -4.5)], 'scarecrow_hat'), ellipse(1.5, -0.5, 0.7, 0.5, 'pumpkin')),
    ),
    D.HARVEST_BASKET: _glyph((path('M-1.3,-1.2 L1.3,-1.2 L1,0 L-1,0 Z', fill='nest_brown'), circle(-0.5, -1.4, 0.4, 'harvest_apple'), circle(0.4, -1.5, 0.35, 'harvest_grape'))),
    D.HOT_DRINK: _glyph((rect(-0.6, -1.2, 1.2, 1.2, 'hot_drink_mug'), path('M0,-1.4 Q-0.4,-2 0,-2.6', stroke='hot_drink_steam', width=0.2, opacity=0.6))),
    D.AUTUMN_WREATH: _glyph((circle(0, -2, 1.3, 'none', stroke='wreath_green', stroke_width=0.6), circle(-0.9, -1.3, 0.25, 'wreath_berry'), circle(0.9, -1.3, 0.25, 'wreath_berry'))),
}

DECORATION_GLYPHS: Mapping[D, Glyph] = MappingProxyType(_TABLE)

check_glyph_table('DECORATION_GLYPHS', DECORATION_GLYPHS, D, set(get_asset_colors('dark')))

_unswayed = [d.value for d in CSS_ANIMATED if DECORATION_GLYPHS[d].css_class is None]
if _unswayed:
    raise RuntimeError(f"Style-sheet animated decorations without a class: {_unswayed}")


def render_decoration(decoration: D, x: float, y: float, variant: int, assets: Mapping[str, str]) -> str:
    return DECORATION_GLYPHS[decoration].render(x, y, variant, assets)


def render_decorations(placed: Sequence[PlacedDecoration], week_palettes: Sequence[TerrainPalette]) -> str:
    """All placed decorations, each colored with its week's palette"""
    parts = []
    for decoration in placed:
        palette = week_palettes[min(decoration.cell.week, len(week_palettes) - 1)]
        parts.append(render_decoration(decoration.type, decoration.x, decoration.y, decoration.variant, palette.assets))
    return f'<g class="terrain-decorations">{"".join(parts)}</g>'
