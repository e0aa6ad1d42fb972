"""
Seasonal cycle for the terrain.

The 52 week columns are split into eight zones (four peak seasons and four
transitions). A rotation computed from the calendar's first date lines the
zones up with real months, so a calendar that starts in June opens in summer.

Each week gets a SeasonalTint: a bundle of color-transform parameters that is
interpolated between the two neighbouring peak seasons. The same blend drives
which seasonal decorations are added to or removed from the pools.

Usage:
  rotation = compute_season_rotation(date(2024, 6, 15), Hemisphere.NORTH)
  tint = get_seasonal_tint(week=10, rotation=rotation)
  r, g, b = apply_tint((120, 160, 90), tint)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

from isometric_terrain.generation.catalog import DecorationType as D
from isometric_terrain.generation.catalog import Hemisphere, Season
from isometric_terrain.generation.shared import clamp, lerp, round_half_up

Rgb = tuple[int, int, int]

CYCLE_WEEKS = 52
SNOW_WHITE: Rgb = (240, 244, 250)

# =============================================================================
# Zones
# =============================================================================


@dataclass(frozen=True)
class ZoneBound:
  zone: int
  start: int
  end: int


ZONE_BOUNDS: tuple[ZoneBound, ...] = (
  ZoneBound(0, 0, 6),  # winter
  ZoneBound(1, 7, 12),  # winter -> spring
  ZoneBound(2, 13, 19),  # spring
  ZoneBound(3, 20, 25),  # spring -> summer
  ZoneBound(4, 26, 32),  # summer
  ZoneBound(5, 33, 38),  # summer -> autumn
  ZoneBound(6, 39, 45),  # autumn
  ZoneBound(7, 46, 51),  # autumn -> winter
)

# (from, to) season pair for every zone; peaks map a season onto itself
ZONE_SEASONS: dict[int, tuple[Season, Season]] = {
  0: (Season.WINTER, Season.WINTER),
  1: (Season.WINTER, Season.SPRING),
  2: (Season.SPRING, Season.SPRING),
  3: (Season.SPRING, Season.SUMMER),
  4: (Season.SUMMER, Season.SUMMER),
  5: (Season.SUMMER, Season.AUTUMN),
  6: (Season.AUTUMN, Season.AUTUMN),
  7: (Season.AUTUMN, Season.WINTER),
}

WINTER_ZONES = frozenset({0, 1, 7})
SPRING_ZONES = frozenset({1, 2, 3})
AUTUMN_ZONES = frozenset({5, 6, 7})


def compute_season_rotation(oldest: date, hemisphere: Hemisphere = Hemisphere.NORTH) -> int:
  """
  Week offset that aligns week 0 of the grid with the seasonal cycle.

  The cycle starts on the most recent December 1st on or before `oldest`.
  The southern hemisphere is shifted by half a year.

  Returns:
    Rotation in [0, 51]
  """
  dec1 = date(oldest.year, 12, 1)
  reference = dec1 if oldest >= dec1 else date(oldest.year - 1, 12, 1)
  rotation = round_half_up((oldest - reference).days / 7)
  if hemisphere is Hemisphere.SOUTH:
    rotation += CYCLE_WEEKS // 2
  return rotation % CYCLE_WEEKS


def _cycle_week(week: int, rotation: int) -> int:
  return (week + rotation) % CYCLE_WEEKS


def get_season_zone(week: int, rotation: int = 0) -> int:
  """Zone index 0-7 for a grid week."""
  w = _cycle_week(week, rotation)
  for bound in ZONE_BOUNDS:
    if bound.start <= w <= bound.end:
      return bound.zone
  raise AssertionError(f"Zone bounds do not cover week {w}")


def get_transition_blend(week: int, rotation: int = 0) -> tuple[Season, Season, float]:
  """
  Seasons a week sits between and how far along it is.

  Peak zones return (season, season, 0.0).
  """
  zone = get_season_zone(week, rotation)
  source, target = ZONE_SEASONS[zone]
  if source is target:
    return source, target, 0.0
  bound = ZONE_BOUNDS[zone]
  t = (_cycle_week(week, rotation) - bound.start) / (bound.end - bound.start)
  return source, target, t


# =============================================================================
# Tints
# =============================================================================


@dataclass(frozen=True)
class SeasonalTint:
  """Color transform parameters for one point in the seasonal cycle."""

  color_shift: float
  color_target: Rgb
  green_mul: float
  warmth: float
  snow_coverage: float
  saturation: float

  @property
  def is_identity(self) -> bool:
    return (
      self.color_shift == 0
      and self.warmth == 0
      and self.snow_coverage == 0
      and self.green_mul == 1
      and self.saturation == 1
    )


SEASON_TINTS: dict[Season, SeasonalTint] = {
  Season.WINTER: SeasonalTint(0.35, (238, 242, 248), 0.60, -5, 0.35, 0.65),
  Season.SPRING: SeasonalTint(0.05, (255, 220, 230), 1.15, 5, 0.0, 1.15),
  Season.SUMMER: SeasonalTint(0.0, (0, 0, 0), 1.0, 0, 0.0, 1.0),
  Season.AUTUMN: SeasonalTint(0.10, (210, 140, 60), 0.70, 20, 0.0, 1.05),
}


def lerp_tint(a: SeasonalTint, b: SeasonalTint, t: float) -> SeasonalTint:
  """Blend two tints; target channels are rounded to whole values."""
  return SeasonalTint(
    color_shift=lerp(a.color_shift, b.color_shift, t),
    color_target=tuple(
      round_half_up(lerp(x, y, t)) for x, y in zip(a.color_target, b.color_target)
    ),
    green_mul=lerp(a.green_mul, b.green_mul, t),
    warmth=lerp(a.warmth, b.warmth, t),
    snow_coverage=lerp(a.snow_coverage, b.snow_coverage, t),
    saturation=lerp(a.saturation, b.saturation, t),
  )


def get_seasonal_tint(week: int, rotation: int = 0) -> SeasonalTint:
  source, target, t = get_transition_blend(week, rotation)
  return lerp_tint(SEASON_TINTS[source], SEASON_TINTS[target], t)


def apply_tint(rgb: Rgb, tint: SeasonalTint) -> Rgb:
  """
  Run the five-step tint pipeline on an RGB triple.

  1. desaturate toward luminance by `saturation`
  2. scale green by `green_mul`
  3. add `warmth` to red, subtract it from blue
  4. blend toward `color_target` by `color_shift`
  5. blend toward snow white by `snow_coverage`

  Channels are only rounded and clamped at the end.
  """
  if tint.is_identity:
    return rgb

  r, g, b = rgb
  gray = 0.299 * r + 0.587 * g + 0.114 * b
  nr = gray + (r - gray) * tint.saturation
  ng = gray + (g - gray) * tint.saturation
  nb = gray + (b - gray) * tint.saturation

  ng *= tint.green_mul

  nr += tint.warmth
  nb -= tint.warmth

  if tint.color_shift > 0:
    nr = lerp(nr, tint.color_target[0], tint.color_shift)
    ng = lerp(ng, tint.color_target[1], tint.color_shift)
    nb = lerp(nb, tint.color_target[2], tint.color_shift)

  if tint.snow_coverage > 0:
    nr = lerp(nr, SNOW_WHITE[0], tint.snow_coverage)
    ng = lerp(ng, SNOW_WHITE[1], tint.snow_coverage)
    nb = lerp(nb, SNOW_WHITE[2], tint.snow_coverage)

  return tuple(int(clamp(round_half_up(c), 0, 255)) for c in (nr, ng, nb))


_CHANNELS = re.compile(r"\d+(?:\.\d+)?")


def tint_color(color: str, tint: SeasonalTint) -> str:
  """
  Tint a color string.

  Accepts #rrggbb and rgb()/rgba(); alpha is carried through untouched.
  Anything else is returned as is.
  """
  if tint.is_identity:
    return color
  if color.startswith("#") and len(color) == 7:
    rgb = tuple(int(color[i : i + 2], 16) for i in (1, 3, 5))
    return "#{:02x}{:02x}{:02x}".format(*apply_tint(rgb, tint))
  if color.startswith("rgb"):
    channels = _CHANNELS.findall(color)
    if len(channels) < 3:
      return color
    r, g, b = apply_tint(tuple(int(float(c)) for c in channels[:3]), tint)
    if len(channels) >= 4:
      return f"rgba({r},{g},{b},{channels[3]})"
    return f"rgb({r},{g},{b})"
  return color


# =============================================================================
# Seasonal Decoration Pools
# =============================================================================

_WINTER_ONLY = frozenset({
  D.SNOW_PINE, D.SNOW_DECIDUOUS, D.SNOWMAN, D.SNOWDRIFT, D.IGLOO, D.FROZEN_POND,
  D.ICICLE, D.SLED, D.SNOW_COVERED_ROCK, D.BARE_BUSH, D.WINTER_BIRD, D.FIREWOOD,
})

_BEACH_SUMMER = frozenset({
  D.PARASOL, D.BEACH_TOWEL, D.SURFBOARD, D.SWIMMING_POOL, D.ICE_CREAM_CART,
  D.LEMONADE, D.SPRINKLER, D.SANDCASTLE_SUMMER,
})

_AUTUMN_ONLY = frozenset({
  D.AUTUMN_MAPLE, D.AUTUMN_OAK, D.AUTUMN_BIRCH, D.AUTUMN_GINKGO, D.FALLEN_LEAVES,
  D.LEAF_SWIRL, D.CORN_STALK, D.SCARECROW_AUTUMN, D.HARVEST_BASKET, D.HOT_DRINK,
  D.AUTUMN_WREATH,
})

_WARM_SEASON = frozenset({
  D.FLOWER, D.BUTTERFLY, D.WILDFLOWER_PATCH, D.TULIP, D.TULIP_FIELD,
  D.CHERRY_BLOSSOM, D.CHERRY_BLOSSOM_SMALL, D.CHERRY_PETALS, D.CROCUS, D.LAMB,
  D.SPROUT, D.GARDEN_BED, D.BIRDHOUSE, D.NEST, D.SUNFLOWER, D.WATERMELON,
  D.HAMMOCK, D.FIREFLIES,
}) | _BEACH_SUMMER

SEASON_REMOVE: dict[Season, frozenset[D]] = {
  Season.WINTER: _WARM_SEASON,
  Season.SPRING: _WINTER_ONLY | _BEACH_SUMMER,
  Season.SUMMER: _WINTER_ONLY | _AUTUMN_ONLY,
  Season.AUTUMN: _WINTER_ONLY | _WARM_SEASON,
}


@dataclass(frozen=True)
class SeasonAdditions:
  """Seasonal pool additions, tiered by cell intensity."""

  general: tuple[D, ...]
  nature: tuple[D, ...]
  settlement: tuple[D, ...]

  def for_intensity(self, intensity: int) -> list[D]:
    result = list(self.general)
    if 31 <= intensity <= 65:
      result.extend(self.nature)
    elif intensity >= 66:
      result.extend(self.settlement)
    return result


SEASON_ADD: dict[Season, SeasonAdditions] = {
  Season.WINTER: SeasonAdditions(
    general=(D.SNOWDRIFT, D.SNOW_COVERED_ROCK, D.BARE_BUSH, D.ICICLE),
    nature=(D.SNOW_PINE, D.SNOW_DECIDUOUS, D.SNOW_COVERED_ROCK, D.BARE_BUSH, D.WINTER_BIRD, D.SNOWDRIFT),
    settlement=(D.SNOWMAN, D.IGLOO, D.SLED, D.FIREWOOD, D.ICICLE, D.SNOWDRIFT),
  ),
  Season.SPRING: SeasonAdditions(
    general=(D.SPROUT, D.CROCUS, D.CHERRY_PETALS, D.RAIN_PUDDLE),
    nature=(D.CHERRY_BLOSSOM, D.CHERRY_BLOSSOM_SMALL, D.TULIP, D.TULIP_FIELD, D.SPROUT, D.CROCUS, D.LAMB),
    settlement=(D.CHERRY_BLOSSOM, D.TULIP_FIELD, D.NEST, D.BIRDHOUSE, D.GARDEN_BED, D.RAIN_PUDDLE, D.CHERRY_PETALS),
  ),
  Season.SUMMER: SeasonAdditions(
    general=(D.SUNFLOWER, D.WATERMELON),
    nature=(D.SUNFLOWER, D.FIREFLIES, D.WATERMELON),
    settlement=(D.PARASOL, D.BEACH_TOWEL, D.HAMMOCK, D.ICE_CREAM_CART, D.LEMONADE, D.SPRINKLER, D.SWIMMING_POOL),
  ),
  Season.AUTUMN: SeasonAdditions(
    general=(D.FALLEN_LEAVES, D.LEAF_SWIRL, D.ACORN),
    nature=(D.AUTUMN_MAPLE, D.AUTUMN_OAK, D.AUTUMN_BIRCH, D.AUTUMN_GINKGO, D.FALLEN_LEAVES, D.LEAF_SWIRL, D.ACORN),
    settlement=(D.CORN_STALK, D.SCARECROW_AUTUMN, D.HARVEST_BASKET, D.HOT_DRINK, D.AUTUMN_WREATH, D.FALLEN_LEAVES),
  ),
}


def get_seasonal_pool_overrides(
  week: int, rotation: int, intensity: int
) -> tuple[list[D], frozenset[D]]:
  """
  Seasonal (additions, removals) for a cell's decoration pool.

  Inside a transition both seasons' removals apply, and the additions are a
  proportional slice of each season's list.
  """
  source, target, t = get_transition_blend(week, rotation)
  if source is target:
    return SEASON_ADD[source].for_intensity(intensity), SEASON_REMOVE[source]

  remove = SEASON_REMOVE[source] | SEASON_REMOVE[target]
  from_add = SEASON_ADD[source].for_intensity(intensity)
  to_add = SEASON_ADD[target].for_intensity(intensity)
  from_count = round_half_up(len(from_add) * (1 - t))
  to_count = round_half_up(len(to_add) * t)
  return from_add[:from_count] + to_add[:to_count], remove
