"""
Atmosphere around the terrain: sky, clouds, water surface detail, seasonal
particles, animated overlays, and the text chrome.

Every function returns one finished layer (an empty string when there is
nothing to draw) and takes its own random generator, so adding or removing a
layer never shifts the draws of another.
"""
import logging
import math
import random
from typing import List, Mapping, Optional, Sequence, Tuple

from isometric_terrain.data.activity import ContributionStats
from isometric_terrain.generation.biomes import BiomeContext
from isometric_terrain.generation.projection import TILE_HALF_HEIGHT as THH
from isometric_terrain.generation.projection import TILE_HALF_WIDTH as THW
from isometric_terrain.generation.projection import IsoCell
from isometric_terrain.generation.seasons import AUTUMN_ZONES, SPRING_ZONES, WINTER_ZONES, get_season_zone
from isometric_terrain.generation.shared import select_evenly
from isometric_terrain.rendering.landmark_glyphs import LANDMARK_CSS
from isometric_terrain.rendering.palette import TerrainPalette
from isometric_terrain.rendering.svg import escape_xml, fixed, fmt, format_number, points

logger = logging.getLogger(__name__)

BiomeMap = Mapping[Tuple[int, int], BiomeContext]

FONT_FAMILY = "'Segoe UI', system-ui, sans-serif"

SHIMMER_WATER = range(10, 23)
TOWN_INTENSITY = 90
RIVER_SHIMMER_INTENSITY = 22
MAX_WATER_SHIMMER = 15
MAX_TOWN_SPARKLE = 10
MAX_RIVER_SHIMMER = 8
NUM_CLOUDS = 2
MAX_SNOW = 40
MAX_PETALS = 30
MAX_LEAVES = 30

LEAF_COLORS = ('fallen_leaf_red', 'fallen_leaf_orange', 'fallen_leaf_gold', 'maple_red', 'oak_gold')

_WATER_SHIMMER = '@keyframes water-shimmer { 0% { opacity: 0.7; } 50% { opacity: 1; } 100% { opacity: 0.7; } }'
_TOWN_SPARKLE = '@keyframes town-sparkle { 0% { opacity: 1; } 40% { opacity: 0.5; } 100% { opacity: 1; } }'
_SWAY_RULES = (
    '@keyframes flag-wave { 0% { transform: scaleX(1); } 50% { transform: scaleX(0.7); } 100% { transform: scaleX(1); } }',
    '@keyframes sway-gentle { 0% { transform: rotate(-2deg); } 50% { transform: rotate(2deg); } 100% { transform: rotate(-2deg); } }',
    '.sway-gentle { animation: sway-gentle 3s ease-in-out infinite; transform-origin: bottom center; }',
    '@keyframes sway-slow { 0% { transform: rotate(-1deg); } 50% { transform: rotate(1deg); } 100% { transform: rotate(-1deg); } }',
    '.sway-slow { animation: sway-slow 4s ease-in-out infinite; transform-origin: bottom center; }',
)
_TREE_SWAY = '@keyframes tree-sway { 0% { transform: rotate(-1.5deg); } 50% { transform: rotate(1.5deg); } 100% { transform: rotate(-1.5deg); } }'


def _biome_water(cell: IsoCell, biome_map: Optional[BiomeMap]) -> Optional[BiomeContext]:
    if biome_map is None:
        return None
    biome = biome_map.get(cell.key)
    return biome if biome is not None and biome.is_water else None


def shimmer_cells(iso_cells: Sequence[IsoCell]) -> List[IsoCell]:
    return select_evenly([c for c in iso_cells if c.intensity in SHIMMER_WATER], MAX_WATER_SHIMMER)


def sparkle_cells(iso_cells: Sequence[IsoCell]) -> List[IsoCell]:
    return select_evenly([c for c in iso_cells if c.intensity >= TOWN_INTENSITY], MAX_TOWN_SPARKLE)


def river_shimmer_cells(iso_cells: Sequence[IsoCell], biome_map: Optional[BiomeMap]) -> List[IsoCell]:
    rivers = [
        c for c in iso_cells
        if _biome_water(c, biome_map) is not None and c.intensity > RIVER_SHIMMER_INTENSITY
    ]
    return select_evenly(rivers, MAX_RIVER_SHIMMER)


# =============================================================================
# Style sheet
# =============================================================================

def render_terrain_css(iso_cells: Sequence[IsoCell], biome_map: Optional[BiomeMap] = None) -> str:
    """Keyframes and per-cell animation classes for the whole scene"""
    rules = []
    water = shimmer_cells(iso_cells)
    if water:
        rules.append(_WATER_SHIMMER)
        for i in range(len(water)):
            dur = fixed(3 + i % 3 * 0.8)
            delay = fixed(i * 0.7 % 4)
            rules.append(f'.water-{i} {{ animation: water-shimmer {dur}s ease-in-out {delay}s infinite; }}')

    town = sparkle_cells(iso_cells)
    if town:
        rules.append(_TOWN_SPARKLE)
        for i in range(len(town)):
            dur = fixed(2 + i % 4 * 0.5)
            delay = fixed(i * 0.9 % 3.5)
            rules.append(f'.sparkle-{i} {{ animation: town-sparkle {dur}s ease-in-out {delay}s infinite; }}')

    rivers = river_shimmer_cells(iso_cells, biome_map)
    if rivers:
        if not water:
            rules.append(_WATER_SHIMMER)
        for i in range(len(rivers)):
            dur = fixed(3.5 + i % 3 * 0.6)
            delay = fixed(i * 0.8 % 3.5)
            rules.append(f'.river-shimmer-{i} {{ animation: water-shimmer {dur}s ease-in-out {delay}s infinite; }}')

    logger.debug(f"Animated cells: {len(water)} water, {len(town)} town, {len(rivers)} river")
    rules.extend(_SWAY_RULES)
    rules.append(_TREE_SWAY)
    rules.append(LANDMARK_CSS)
    return '\n'.join(rules)


# =============================================================================
# Sky
# =============================================================================

def _stars(rng: random.Random) -> List[str]:
    parts = []
    for _ in range(18 + math.floor(rng.random() * 10)):
        sx = 30 + rng.random() * 780
        sy = 5 + rng.random() * 55
        sr = 0.3 + rng.random() * 0.6
        opacity = 0.3 + rng.random() * 0.5
        parts.append(
            f'<circle cx="{fixed(sx)}" cy="{fixed(sy)}" r="{fixed(sr)}" fill="#fff" opacity="{fixed(opacity, 2)}"/>'
        )
    for _ in range(3):
        bx = 60 + rng.random() * 720
        by = 8 + rng.random() * 40
        length = 1.2 + rng.random() * 0.8
        opacity = fixed(0.5 + rng.random() * 0.3, 2)
        parts.append(
            f'<g opacity="{opacity}">'
            f'<line x1="{fmt(bx - length)}" y1="{fmt(by)}" x2="{fmt(bx + length)}" y2="{fmt(by)}" stroke="#fff" stroke-width="0.4"/>'
            f'<line x1="{fmt(bx)}" y1="{fmt(by - length)}" x2="{fmt(bx)}" y2="{fmt(by + length)}" stroke="#fff" stroke-width="0.4"/>'
            f'</g>'
        )
    return parts


def _moon(rng: random.Random, palette: TerrainPalette) -> str:
    mx = 750 + rng.random() * 60
    my = 18 + rng.random() * 15
    r = 8
    return (
        f'<g><circle cx="{fmt(mx)}" cy="{fmt(my)}" r="{r}" fill="#e8e4d0" opacity="0.85"/>'
        f'<circle cx="{fmt(mx + 3.5)}" cy="{fmt(my - 1.5)}" r="{fmt(r - 0.5)}" fill="{palette.chrome.bg_subtle}"/>'
        f'<circle cx="{fmt(mx)}" cy="{fmt(my)}" r="{r + 3}" fill="#e8e4d0" opacity="0.04"/></g>'
    )


def _sun(rng: random.Random) -> List[str]:
    sx = 770 + rng.random() * 50
    sy = 20 + rng.random() * 12
    sr = 7
    cx, cy = fmt(sx), fmt(sy)
    parts = [
        f'<circle cx="{cx}" cy="{cy}" r="{sr + 6}" fill="#ffeebb" opacity="0.1"/>',
        f'<circle cx="{cx}" cy="{cy}" r="{sr + 3}" fill="#ffdd88" opacity="0.15"/>',
        f'<circle cx="{cx}" cy="{cy}" r="{sr}" fill="#ffe066" opacity="0.9"/>',
        f'<circle cx="{fmt(sx - 1.5)}" cy="{fmt(sy - 1.5)}" r="{fmt(sr * 0.45)}" fill="#fff8cc" opacity="0.6"/>',
    ]
    for ray in range(8):
        angle = ray / 8 * math.pi * 2
        inner = sr + 2
        outer = sr + 5 + ray % 2 * 2
        x1, y1 = sx + math.cos(angle) * inner, sy + math.sin(angle) * inner
        x2, y2 = sx + math.cos(angle) * outer, sy + math.sin(angle) * outer
        parts.append(
            f'<line x1="{fixed(x1)}" y1="{fixed(y1)}" x2="{fixed(x2)}" y2="{fixed(y2)}" '
            f'stroke="#ffdd66" stroke-width="0.8" opacity="0.5" stroke-linecap="round"/>'
        )
    return parts


def render_celestials(rng: random.Random, palette: TerrainPalette) -> str:
    """Stars, sparkles and a crescent moon at night; a rayed sun by day"""
    if palette.is_dark:
        parts = _stars(rng)
        parts.append(_moon(rng, palette))
    else:
        parts = _sun(rng)
    return f'<g class="celestials">{"".join(parts)}</g>'


# (dx, dy, rx, ry, stroke width) per puff, in units of the cloud's scale
_PUFFS = (
    (0, 0, 28, 5, 0.4),
    (-14, -3, 12, 6, 0.3),
    (-2, -6, 14, 8, 0.3),
    (12, -3.5, 11, 5.5, 0.3),
)


def render_clouds(rng: random.Random, palette: TerrainPalette) -> str:
    chrome = palette.chrome
    fill, stroke, opacity = chrome.cloud_fill, chrome.cloud_stroke, fmt(chrome.cloud_opacity)
    clouds = []
    for _ in range(NUM_CLOUDS):
        base_x = 250 + rng.random() * 500
        base_y = 20 + rng.random() * 60
        scale = 0.8 + rng.random() * 0.5
        dur = fixed(35 + rng.random() * 20, 0)
        drift = fixed(60 + rng.random() * 50, 0)

        puffs = []
        for dx, dy, rx, ry, width in _PUFFS:
            cx = fmt(base_x) if dx == 0 else fixed(base_x + dx * scale)
            cy = fmt(base_y) if dy == 0 else fixed(base_y + dy * scale)
            puffs.append(
                f'<ellipse cx="{cx}" cy="{cy}" rx="{fixed(rx * scale)}" ry="{fixed(ry * scale)}" '
                f'fill="{fill}" stroke="{stroke}" stroke-width="{fmt(width)}" opacity="{opacity}"/>'
            )
        puffs.append(
            f'<ellipse cx="{fixed(base_x - 4 * scale)}" cy="{fixed(base_y - 9 * scale)}" '
            f'rx="{fixed(7 * scale)}" ry="{fixed(4 * scale)}" fill="{fill}" stroke="none" '
            f'opacity="{fixed(chrome.cloud_opacity * 0.7, 2)}"/>'
        )
        clouds.append(
            f'<g>{"".join(puffs)}'
            f'<animateTransform attributeName="transform" type="translate" '
            f'values="0,0;{drift},0;0,0" dur="{dur}s" repeatCount="indefinite"/></g>'
        )
    return f'<g class="terrain-clouds">{"".join(clouds)}</g>'


# =============================================================================
# Water surface
# =============================================================================

def _diamond(cx: float, cy: float, inset_y: float, inset_x: float) -> str:
    return points([(cx, cy - THH + inset_y), (cx + THW - inset_x, cy), (cx, cy + THH - inset_y), (cx - THW + inset_x, cy)])


def render_water_overlays(iso_cells: Sequence[IsoCell], palette: TerrainPalette, biome_map: Optional[BiomeMap]) -> str:
    """Tinted diamonds over river and pond cells, the first few shimmering"""
    overlays = []
    shimmer = 0
    for cell in iso_cells:
        biome = _biome_water(cell, biome_map)
        if biome is None:
            continue
        color = palette.asset('pond_overlay' if biome.is_pond else 'river_overlay')
        css_class = ''
        if cell.intensity > RIVER_SHIMMER_INTENSITY and shimmer < MAX_RIVER_SHIMMER:
            css_class = f' class="river-shimmer-{shimmer}"'
            shimmer += 1
        overlays.append(f'<polygon points="{_diamond(cell.x, cell.y, 0.5, 1)}" fill="{color}"{css_class}/>')
        overlays.append(
            f'<polygon points="{_diamond(cell.x, cell.y, 2.2, 2.2 * 1.2)}" '
            f'fill="{palette.asset("water_light")}" opacity="0.18"/>'
        )
    if not overlays:
        return ''
    return f'<g class="water-overlays">{"".join(overlays)}</g>'


def render_water_ripples(
    iso_cells: Sequence[IsoCell],
    palette: TerrainPalette,
    biome_map: Optional[BiomeMap],
    rng: random.Random,
) -> str:
    """Three jittered quadratic strokes per water cell"""
    color = palette.asset('water_light')
    ripples = []
    for cell in iso_cells:
        if _biome_water(cell, biome_map) is None:
            continue
        cx, cy = cell.x, cell.y
        jx = (rng.random() - 0.5) * 2
        jy = (rng.random() - 0.5) * 0.8

        amp = 0.3 + rng.random() * 0.15
        d = (
            f'M{fmt(cx - THW * 0.55 + jx)},{fmt(cy - THH * 0.05 + jy)} '
            f'Q{fmt(cx - THW * 0.1)},{fmt(cy - THH * amp)} {fmt(cx + THW * 0.4)},{fmt(cy - THH * 0.12)}'
        )
        ripples.append(f'<path d="{d}" stroke="{color}" fill="none" stroke-width="0.25" opacity="0.28"/>')

        amp = 0.15 + rng.random() * 0.2
        d = (
            f'M{fmt(cx - THW * 0.35 + jx * 0.5)},{fmt(cy + THH * 0.15 + jy)} '
            f'Q{fmt(cx + THW * 0.05)},{fmt(cy - THH * amp)} {fmt(cx + THW * 0.45)},{fmt(cy + THH * 0.05)}'
        )
        ripples.append(f'<path d="{d}" stroke="{color}" fill="none" stroke-width="0.2" opacity="0.22"/>')

        amp = 0.1 + rng.random() * 0.12
        d = (
            f'M{fmt(cx - THW * 0.2 + jx * 0.3)},{fmt(cy + THH * 0.35 + jy)} '
            f'Q{fmt(cx + THW * 0.15)},{fmt(cy + THH * amp)} {fmt(cx + THW * 0.35)},{fmt(cy + THH * 0.28)}'
        )
        ripples.append(f'<path d="{d}" stroke="{color}" fill="none" stroke-width="0.2" opacity="0.18"/>')
    if not ripples:
        return ''
    return f'<g class="water-ripples">{"".join(ripples)}</g>'


# =============================================================================
# Seasonal particles
# =============================================================================

def _seasonal_cells(iso_cells: Sequence[IsoCell], rotation: int, zones, limit: int) -> List[Tuple[IsoCell, int]]:
    cells = [(c, get_season_zone(c.week, rotation)) for c in iso_cells]
    return select_evenly([(c, zone) for c, zone in cells if zone in zones], limit)


def render_snow(iso_cells: Sequence[IsoCell], rotation: int, rng: random.Random) -> str:
    """Snowflakes over winter weeks, densest in deep winter"""
    flakes = []
    for cell, zone in _seasonal_cells(iso_cells, rotation, WINTER_ZONES, MAX_SNOW):
        density = 0.8 if zone == 0 else 0.4
        if rng.random() > density:
            continue
        px = cell.x + (rng.random() - 0.5) * 10
        py = cell.y - cell.height - 5 - rng.random() * 20
        r = 0.3 + rng.random() * 0.4
        opacity = 0.3 + rng.random() * 0.4
        flakes.append(
            f'<circle cx="{fixed(px)}" cy="{fixed(py)}" r="{fixed(r)}" fill="#fff" opacity="{fixed(opacity, 2)}"/>'
        )
    if not flakes:
        return ''
    return f'<g class="snow-particles">{"".join(flakes)}</g>'


def _falling_ellipse(px: float, py: float, rx: float, ry: float, rotation: int, color: str, opacity: float) -> str:
    x, y = fixed(px), fixed(py)
    return (
        f'<ellipse cx="{x}" cy="{y}" rx="{fixed(rx)}" ry="{fixed(ry, 2)}" fill="{color}" '
        f'opacity="{fixed(opacity, 2)}" transform="rotate({rotation},{x},{y})"/>'
    )


def render_petals(iso_cells: Sequence[IsoCell], rotation: int, palette: TerrainPalette, rng: random.Random) -> str:
    color = palette.asset('cherry_petal_pink')
    petals = []
    for cell, zone in _seasonal_cells(iso_cells, rotation, SPRING_ZONES, MAX_PETALS):
        density = 0.7 if zone == 2 else 0.35
        if rng.random() > density:
            continue
        px = cell.x + (rng.random() - 0.5) * 8
        py = cell.y - cell.height - 3 - rng.random() * 15
        rx = 0.3 + rng.random() * 0.2
        ry = 0.12 + rng.random() * 0.08
        spin = math.floor(rng.random() * 180)
        opacity = 0.35 + rng.random() * 0.3
        petals.append(_falling_ellipse(px, py, rx, ry, spin, color, opacity))
    if not petals:
        return ''
    return f'<g class="falling-petals">{"".join(petals)}</g>'


def render_leaves(iso_cells: Sequence[IsoCell], rotation: int, palette: TerrainPalette, rng: random.Random) -> str:
    colors = [palette.asset(key) for key in LEAF_COLORS]
    leaves = []
    for cell, zone in _seasonal_cells(iso_cells, rotation, AUTUMN_ZONES, MAX_LEAVES):
        density = 0.7 if zone == 6 else 0.35
        if rng.random() > density:
            continue
        px = cell.x + (rng.random() - 0.5) * 8
        py = cell.y - cell.height - 2 - rng.random() * 12
        rx = 0.4 + rng.random() * 0.3
        ry = 0.15 + rng.random() * 0.1
        spin = math.floor(rng.random() * 360)
        opacity = 0.4 + rng.random() * 0.3
        color = colors[math.floor(rng.random() * len(colors))]
        leaves.append(_falling_ellipse(px, py, rx, ry, spin, color, opacity))
    if not leaves:
        return ''
    return f'<g class="falling-leaves">{"".join(leaves)}</g>'


# =============================================================================
# Overlays and text
# =============================================================================

def render_animated_overlays(iso_cells: Sequence[IsoCell], palette: TerrainPalette) -> str:
    """Shimmer diamonds and sparkle dots bound to the style sheet's classes"""
    overlays = []
    for i, cell in enumerate(shimmer_cells(iso_cells)):
        overlays.append(
            f'<polygon points="{_diamond(cell.x, cell.y, 1, 2)}" fill="{palette.chrome.text_accent}" '
            f'opacity="0.15" class="water-{i}"/>'
        )
    for i, cell in enumerate(sparkle_cells(iso_cells)):
        overlays.append(
            f'<circle cx="{fmt(cell.x)}" cy="{fmt(cell.y - cell.height - 1)}" r="1" fill="#ffe080" '
            f'opacity="0.7" class="sparkle-{i}"/>'
        )
    return f'<g class="terrain-overlays">{"".join(overlays)}</g>'


def render_title(title: str, palette: TerrainPalette) -> str:
    return (
        f'<text x="24" y="17" font-family="{FONT_FAMILY}" font-size="14" '
        f'fill="{palette.chrome.text_primary}" font-weight="600">{escape_xml(title)}</text>'
    )


def stats_items(stats: ContributionStats) -> List[str]:
    return [
        f'{format_number(stats.total)} contributions',
        f'{format_number(stats.current_streak)}d current streak',
        f'{format_number(stats.longest_streak)}d longest streak',
        f'Most active: {stats.most_active_day}',
    ]


def render_stats_bar(stats: ContributionStats, palette: TerrainPalette) -> str:
    segments = ''.join(
        f'<text x="{24 + i * 200}" y="233" font-family="{FONT_FAMILY}" font-size="11" '
        f'fill="{palette.chrome.text_secondary}">{escape_xml(text)}</text>'
        for i, text in enumerate(stats_items(stats))
    )
    return f'<g class="stats-bar">{segments}</g>'
