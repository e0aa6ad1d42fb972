"""
Terrain palette: anchor-interpolated colors and block heights per intensity.

Each color mode defines a short table of anchor points over the 0-99 intensity
scale. Intensities between anchors are linearly interpolated, so the terrain
shades smoothly from desert through water and grassland into town.
"""
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Sequence, Tuple

from isometric_terrain.data.asset_colors import get_asset_colors
from isometric_terrain.generation.catalog import ColorMode
from isometric_terrain.generation.seasons import (
    SeasonalTint,
    apply_tint,
    get_seasonal_tint,
    tint_color,
)
from isometric_terrain.generation.shared import clamp, lerp, round_half_up

logger = logging.getLogger(__name__)

Rgb = Tuple[int, int, int]

LEVELS = 100


@dataclass(frozen=True)
class ColorAnchor:
    level: int
    rgb: Rgb


@dataclass(frozen=True)
class HeightAnchor:
    level: int
    height: int


DARK_COLOR_ANCHORS: Tuple[ColorAnchor, ...] = (
    ColorAnchor(0, (160, 130, 90)),    # desert sand
    ColorAnchor(4, (140, 120, 85)),    # dry earth
    ColorAnchor(8, (100, 115, 100)),   # scrubland
    ColorAnchor(12, (40, 80, 130)),    # shallow water
    ColorAnchor(18, (30, 70, 120)),    # deeper water
    ColorAnchor(24, (80, 130, 95)),    # shore
    ColorAnchor(30, (130, 160, 90)),   # grassland
    ColorAnchor(40, (90, 145, 60)),    # meadow
    ColorAnchor(52, (55, 120, 42)),    # forest
    ColorAnchor(65, (45, 105, 38)),    # deep forest
    ColorAnchor(75, (90, 140, 55)),    # farmland
    ColorAnchor(85, (80, 125, 50)),    # village
    ColorAnchor(93, (70, 110, 52)),    # town
    ColorAnchor(99, (65, 100, 55)),    # city
)

LIGHT_COLOR_ANCHORS: Tuple[ColorAnchor, ...] = (
    ColorAnchor(0, (195, 170, 130)),
    ColorAnchor(4, (180, 158, 120)),
    ColorAnchor(8, (145, 155, 135)),
    ColorAnchor(12, (100, 160, 210)),
    ColorAnchor(18, (85, 148, 200)),
    ColorAnchor(24, (120, 168, 140)),
    ColorAnchor(30, (160, 195, 115)),
    ColorAnchor(40, (115, 175, 80)),
    ColorAnchor(52, (75, 150, 58)),
    ColorAnchor(65, (65, 135, 52)),
    ColorAnchor(75, (115, 170, 75)),
    ColorAnchor(85, (100, 155, 68)),
    ColorAnchor(93, (90, 140, 65)),
    ColorAnchor(99, (80, 128, 62)),
)

HEIGHT_ANCHORS: Tuple[HeightAnchor, ...] = (
    HeightAnchor(0, 0),
    HeightAnchor(8, 0),
    HeightAnchor(12, 0),
    HeightAnchor(18, 0),
    HeightAnchor(24, 1),
    HeightAnchor(30, 3),
    HeightAnchor(40, 5),
    HeightAnchor(52, 8),
    HeightAnchor(65, 11),
    HeightAnchor(75, 14),
    HeightAnchor(85, 18),
    HeightAnchor(93, 21),
    HeightAnchor(99, 24),
)

COLOR_ANCHORS: Dict[ColorMode, Tuple[ColorAnchor, ...]] = {
    ColorMode.DARK: DARK_COLOR_ANCHORS,
    ColorMode.LIGHT: LIGHT_COLOR_ANCHORS,
}


def _check_anchors(anchors: Sequence) -> None:
    levels = [a.level for a in anchors]
    if levels[0] != 0 or levels[-1] != LEVELS - 1 or levels != sorted(set(levels)):
        raise ValueError(f"Anchor levels must ascend strictly from 0 to 99: {levels}")


for _table in (DARK_COLOR_ANCHORS, LIGHT_COLOR_ANCHORS, HEIGHT_ANCHORS):
    _check_anchors(_table)


def _bracket(anchors: Sequence, level: float):
    """Anchor pair enclosing level and the interpolation factor between them."""
    lower, upper = anchors[0], anchors[-1]
    for a, b in zip(anchors, anchors[1:]):
        if a.level <= level <= b.level:
            lower, upper = a, b
            break
    if lower.level == upper.level:
        return lower, upper, 0.0
    return lower, upper, (level - lower.level) / (upper.level - lower.level)


def interpolate_rgb(anchors: Sequence[ColorAnchor], level: float) -> Rgb:
    """Interpolated anchor color for an intensity (clamped to 0-99)"""
    lower, upper, t = _bracket(anchors, clamp(level, 0, LEVELS - 1))
    return tuple(
        round_half_up(lerp(a, b, t)) for a, b in zip(lower.rgb, upper.rgb)
    )


def interpolate_height(anchors: Sequence[HeightAnchor], level: float) -> int:
    """Interpolated block height for an intensity (clamped to 0-99)"""
    lower, upper, t = _bracket(anchors, clamp(level, 0, LEVELS - 1))
    return round_half_up(lerp(lower.height, upper.height, t))


def rgb_to_hex(rgb: Rgb) -> str:
    return '#{:02x}{:02x}{:02x}'.format(*rgb)


def darken(rgb: Rgb, factor: float) -> str:
    """Scaled color as an rgb() string"""
    r, g, b = (round_half_up(c * factor) for c in rgb)
    return f'rgb({r},{g},{b})'


@dataclass(frozen=True)
class ElevationColors:
    """Colors for the three visible faces of a block"""
    top: str
    left: str
    right: str

    @classmethod
    def from_rgb(cls, rgb: Rgb) -> 'ElevationColors':
        return cls(top=rgb_to_hex(rgb), left=darken(rgb, 0.75), right=darken(rgb, 0.6))


@dataclass(frozen=True)
class ModeChrome:
    """Non-terrain colors for a mode: text, background and clouds"""
    text_primary: str
    text_secondary: str
    text_accent: str
    bg_subtle: str
    cloud_fill: str
    cloud_stroke: str
    cloud_opacity: float
    water_rgb: Rgb


MODE_CHROME: Dict[ColorMode, ModeChrome] = {
    ColorMode.DARK: ModeChrome(
        text_primary='#e6edf3',
        text_secondary='#8b949e',
        text_accent='#58a6ff',
        bg_subtle='#161b22',
        cloud_fill='rgba(200,210,220,0.12)',
        cloud_stroke='rgba(200,210,220,0.06)',
        cloud_opacity=0.8,
        water_rgb=(40, 80, 140),
    ),
    ColorMode.LIGHT: ModeChrome(
        text_primary='#1f2328',
        text_secondary='#656d76',
        text_accent='#0969da',
        bg_subtle='#f6f8fa',
        cloud_fill='rgba(190,205,220,0.35)',
        cloud_stroke='rgba(160,175,195,0.30)',
        cloud_opacity=0.85,
        water_rgb=(70, 140, 200),
    ),
}


@dataclass(frozen=True)
class TerrainPalette:
    """
    Resolved colors for one mode, optionally tinted for one week.

    Elevations and heights are precomputed for all 100 intensity levels.
    """
    mode: ColorMode
    chrome: ModeChrome
    assets: Mapping[str, str]
    elevations: Tuple[ElevationColors, ...] = field(repr=False)
    heights: Tuple[int, ...] = field(repr=False)
    tint: Optional[SeasonalTint] = None

    @property
    def is_dark(self) -> bool:
        return self.mode is ColorMode.DARK

    def get_elevation(self, level: int) -> ElevationColors:
        return self.elevations[int(clamp(level, 0, LEVELS - 1))]

    def get_height(self, level: int) -> int:
        return self.heights[int(clamp(level, 0, LEVELS - 1))]

    def asset(self, key: str) -> str:
        """
        Asset color by name.

        Raises:
            KeyError: for unknown color names
        """
        return self.assets[key]


def _build_palette(mode: ColorMode, tint: Optional[SeasonalTint]) -> TerrainPalette:
    anchors = COLOR_ANCHORS[mode]
    base_assets = get_asset_colors(mode.value)

    if tint is None or tint.is_identity:
        rgbs = [interpolate_rgb(anchors, level) for level in range(LEVELS)]
        assets: Mapping[str, str] = base_assets
        tint = None
    else:
        rgbs = [apply_tint(interpolate_rgb(anchors, level), tint) for level in range(LEVELS)]
        assets = MappingProxyType(
            {key: tint_color(value, tint) for key, value in base_assets.items()}
        )

    return TerrainPalette(
        mode=mode,
        chrome=MODE_CHROME[mode],
        assets=assets,
        elevations=tuple(ElevationColors.from_rgb(rgb) for rgb in rgbs),
        heights=tuple(interpolate_height(HEIGHT_ANCHORS, level) for level in range(LEVELS)),
        tint=tint,
    )


@lru_cache(maxsize=None)
def get_terrain_palette(mode: ColorMode) -> TerrainPalette:
    """Untinted palette for a mode (cached, palettes are immutable)"""
    return _build_palette(mode, None)


def get_seasonal_palette(mode: ColorMode, week: int, rotation: int = 0) -> TerrainPalette:
    """
    Palette tinted for a grid week.

    Peak-summer weeks carry the identity tint and get the base palette back.
    """
    tint = get_seasonal_tint(week, rotation)
    if tint.is_identity:
        return get_terrain_palette(mode)
    return _build_palette(mode, tint)


def get_week_palettes(mode: ColorMode, rotation: int, weeks: int = 52) -> Tuple[TerrainPalette, ...]:
    """One palette per grid week"""
    palettes = tuple(get_seasonal_palette(mode, week, rotation) for week in range(weeks))
    logger.debug(f"Built {len(palettes)} week palettes for {mode.value} (rotation={rotation})")
    return palettes
