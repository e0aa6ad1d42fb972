"""
Isometric terrain blocks.

A block is a top diamond plus, when it has height, a left and a right face
hanging below it. Water blocks get an inner highlight, a specular glint and
darker lower halves on their side faces.
"""
import logging
import re
from dataclasses import replace
from typing import Mapping, Optional, Sequence, Tuple

from isometric_terrain.generation.biomes import BiomeContext
from isometric_terrain.generation.projection import TILE_HALF_HEIGHT as THH
from isometric_terrain.generation.projection import TILE_HALF_WIDTH as THW
from isometric_terrain.generation.projection import IsoCell
from isometric_terrain.generation.seasons import WINTER_ZONES, get_season_zone
from isometric_terrain.generation.shared import round_half_up
from isometric_terrain.rendering.palette import ElevationColors, TerrainPalette, rgb_to_hex
from isometric_terrain.rendering.svg import fmt, points

logger = logging.getLogger(__name__)

Rgb = Tuple[int, int, int]

NATURAL_WATER = range(9, 23)
WATER_INSET = 1.5
DEPTH_SHADE = '#1a3a6a'
_CHANNELS = re.compile(r'\d+')


def is_natural_water(intensity: int) -> bool:
    return intensity in NATURAL_WATER


def _top_diamond(cx: float, cy: float) -> str:
    return points([(cx, cy - THH), (cx + THW, cy), (cx, cy + THH), (cx - THW, cy)])


def _water_surface(cx: float, cy: float, colors: ElevationColors) -> str:
    inner = points([
        (cx, cy - THH + WATER_INSET),
        (cx + THW - WATER_INSET * 1.5, cy),
        (cx, cy + THH - WATER_INSET),
        (cx - THW + WATER_INSET * 1.5, cy),
    ])
    return (
        f'<polygon points="{inner}" fill="{colors.top}" opacity="0.3" style="filter:brightness(1.3)"/>'
        f'<ellipse cx="{fmt(cx + 1)}" cy="{fmt(cy - 0.5)}" rx="1.5" ry="0.6" fill="#fff" opacity="0.15"/>'
    )


def render_block(cell: IsoCell, is_water: bool = False) -> str:
    """SVG for one block, faces drawn left, right, then top"""
    cx, cy, h, colors = cell.x, cell.y, cell.height, cell.colors
    top = f'<polygon points="{_top_diamond(cx, cy)}" fill="{colors.top}" stroke="{colors.left}" stroke-width="0.3"/>'

    if h == 0:
        return top + _water_surface(cx, cy, colors) if is_water else top

    parts = []
    left = points([(cx - THW, cy), (cx, cy + THH), (cx, cy + THH + h), (cx - THW, cy + h)])
    parts.append(f'<polygon points="{left}" fill="{colors.left}"/>')
    if is_water:
        shade = points([
            (cx - THW, cy + h * 0.5), (cx, cy + THH + h * 0.5),
            (cx, cy + THH + h), (cx - THW, cy + h),
        ])
        parts.append(f'<polygon points="{shade}" fill="{DEPTH_SHADE}" opacity="0.15"/>')

    right = points([(cx + THW, cy), (cx, cy + THH), (cx, cy + THH + h), (cx + THW, cy + h)])
    parts.append(f'<polygon points="{right}" fill="{colors.right}"/>')
    if is_water:
        shade = points([
            (cx + THW, cy + h * 0.5), (cx, cy + THH + h * 0.5),
            (cx, cy + THH + h), (cx + THW, cy + h),
        ])
        parts.append(f'<polygon points="{shade}" fill="{DEPTH_SHADE}" opacity="0.12"/>')

    parts.append(top)
    if is_water:
        parts.append(_water_surface(cx, cy, colors))
    return ''.join(parts)


def _parse_color(color: str) -> Rgb:
    if color.startswith('#'):
        return tuple(int(color[i:i + 2], 16) for i in (1, 3, 5))
    channels = _CHANNELS.findall(color)
    if len(channels) < 3:
        raise ValueError(f"Unparseable color: {color}")
    return tuple(int(c) for c in channels[:3])


def blend_toward_water(color: str, water_rgb: Rgb, strength: float) -> str:
    """Move a color toward the water color, keeping its hex or rgb() form"""
    r, g, b = (
        round_half_up(c + (w - c) * strength)
        for c, w in zip(_parse_color(color), water_rgb)
    )
    if color.startswith('#'):
        return rgb_to_hex((r, g, b))
    return f'rgb({r},{g},{b})'


def water_blend_strength(intensity: int, is_river: bool) -> float:
    if is_river:
        return 0.4
    if intensity <= 14:
        return 0.25
    return 0.45


def blend_with_water(colors: ElevationColors, water_rgb: Rgb, intensity: int, is_river: bool) -> ElevationColors:
    strength = water_blend_strength(intensity, is_river)
    return ElevationColors(
        top=blend_toward_water(colors.top, water_rgb, strength),
        left=blend_toward_water(colors.left, water_rgb, strength),
        right=blend_toward_water(colors.right, water_rgb, strength),
    )


def render_terrain_blocks(
    iso_cells: Sequence[IsoCell],
    week_palettes: Sequence[TerrainPalette],
    rotation: int,
    biome_map: Optional[Mapping[Tuple[int, int], BiomeContext]] = None,
) -> str:
    """
    Draw all blocks, recolored with their week's seasonal palette.

    Natural water freezes over in the winter zones; every other water cell is
    blended toward the mode's water color and drawn with water styling.
    """
    blocks = []
    frozen = 0
    for cell in iso_cells:
        palette = week_palettes[min(cell.week, len(week_palettes) - 1)]
        tinted = replace(
            cell,
            colors=palette.get_elevation(cell.intensity),
            height=palette.get_height(cell.intensity),
        )
        biome = biome_map.get(cell.key) if biome_map is not None else None
        natural = is_natural_water(cell.intensity)

        if natural or (biome is not None and biome.is_water):
            if natural and get_season_zone(cell.week, rotation) in WINTER_ZONES:
                ice = ElevationColors(
                    top=palette.asset('ice'),
                    left=palette.asset('frozen_water'),
                    right=palette.asset('frozen_water'),
                )
                blocks.append(render_block(replace(tinted, colors=ice)))
                frozen += 1
                continue
            is_river = biome is not None and biome.is_river
            water = blend_with_water(tinted.colors, palette.chrome.water_rgb, cell.intensity, is_river)
            blocks.append(render_block(replace(tinted, colors=water), is_water=True))
        else:
            blocks.append(render_block(tinted))

    logger.debug(f"Rendered {len(blocks)} blocks ({frozen} frozen)")
    return f'<g class="terrain-blocks">{"".join(blocks)}</g>'
