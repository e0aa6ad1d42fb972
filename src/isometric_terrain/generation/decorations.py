"""
Decoration selection for terrain cells.

Every cell gets a candidate pool from its intensity band. The biome under it
and the season of its week reshape the pool, and the richness of its
neighborhood raises the chance of placing something. Animated decorations
draw from fixed per-render budgets so a busy calendar stays cheap to display.

The generators are consumed in a fixed order per cell, so the result is a
pure function of (cells, generators, biome map, rotation).

Usage:
  placed = select_decorations(
    iso_cells,
    rng=make_rng(seed, "decorations"),
    variant_rng=make_rng(variant_seed, "variants"),
    biome_map=biome_map,
    rotation=rotation,
  )
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, field
from typing import Iterable, Mapping

from isometric_terrain.generation.biomes import BiomeContext
from isometric_terrain.generation.catalog import (
  CSS_ANIMATED,
  SMIL_ANIMATED,
  DecorationType as D,
)
from isometric_terrain.generation.projection import IsoCell, cell_lookup
from isometric_terrain.generation.seasons import get_seasonal_pool_overrides

logger = logging.getLogger(__name__)

VARIANTS = 3
MAX_CHANCE = 0.65
RICHNESS_WEIGHT = 0.2

SMIL_BUDGET = 12
CSS_BUDGET = 10
SMOKE_BUDGET = 5

SMIL_FALLBACK = D.BARREL
CSS_FALLBACK = D.BUSH
SMOKE_FALLBACK = D.BARREL
SECOND_SMOKE_FALLBACK = D.TORCH

SECOND_PICK_RICHNESS = 0.5
SECOND_PICK_MIN_INTENSITY = 30
SECOND_PICK_CHANCE = 0.3


# =============================================================================
# Intensity Bands
# =============================================================================


@dataclass(frozen=True)
class LevelPool:
  """Candidate decorations for cells up to max_intensity."""

  max_intensity: int
  types: tuple[D, ...]
  chance: float


@dataclass(frozen=True)
class DecorationPool:
  """A working pool for one cell."""

  types: tuple[D, ...]
  chance: float


LEVEL_POOLS: tuple[LevelPool, ...] = (
  # Desert and dry earth
  LevelPool(4, (D.ROCK, D.BOULDER, D.STUMP, D.DEAD_TREE, D.PUDDLE), 0.06),
  LevelPool(8, (D.ROCK, D.BOULDER, D.BUSH, D.STUMP, D.DEAD_TREE, D.SIGNPOST), 0.10),
  # Open water
  LevelPool(14, (
    D.WHALE, D.FISH, D.FISH_SCHOOL, D.BOAT, D.SEAGULL, D.DOCK, D.WAVES, D.KELP,
    D.CORAL, D.JELLYFISH, D.TURTLE, D.CRAB, D.BUOY,
  ), 0.16),
  LevelPool(22, (
    D.FISH, D.FISH_SCHOOL, D.BOAT, D.SEAGULL, D.WAVES, D.DOCK, D.KELP, D.CORAL,
    D.TURTLE, D.SAILBOAT, D.LIGHTHOUSE, D.CRAB, D.BUOY,
  ), 0.18),
  # Shore and wetland
  LevelPool(27, (
    D.ROCK, D.BOULDER, D.FLOWER, D.BUSH, D.BIRD, D.DRIFTWOOD, D.SANDCASTLE,
    D.TIDE_POOLS, D.HERON, D.SHELLFISH, D.CATTAIL, D.FROG, D.LILY,
  ), 0.16),
  LevelPool(30, (
    D.BUSH, D.FLOWER, D.ROCK, D.FENCE, D.DRIFTWOOD, D.TIDE_POOLS, D.HERON,
    D.CATTAIL, D.FROG, D.LILY, D.PUDDLE,
  ), 0.18),
  # Grassland
  LevelPool(36, (
    D.BUSH, D.FLOWER, D.MUSHROOM, D.DEER, D.BIRD, D.RABBIT, D.FOX, D.BUTTERFLY,
    D.WILDFLOWER_PATCH, D.TALL_GRASS, D.SIGNPOST, D.PUDDLE,
  ), 0.22),
  LevelPool(42, (
    D.PINE, D.DECIDUOUS, D.BUSH, D.MUSHROOM, D.FLOWER, D.DEER, D.RABBIT, D.FOX,
    D.BUTTERFLY, D.BEEHIVE, D.BIRCH, D.HAYBALE, D.TALL_GRASS, D.LANTERN,
  ), 0.25),
  # Forest
  LevelPool(52, (
    D.PINE, D.PINE, D.DECIDUOUS, D.WILLOW, D.BIRD, D.BUSH, D.OWL, D.SQUIRREL,
    D.MOSS, D.FERN, D.BERRY_BUSH, D.LOG, D.WOODPILE,
  ), 0.30),
  LevelPool(58, (
    D.PINE, D.DECIDUOUS, D.WILLOW, D.PALM, D.BIRD, D.PINE, D.STUMP, D.OWL,
    D.MOSS, D.FERN, D.DEAD_TREE, D.LOG, D.SPIDER, D.CAMPFIRE,
  ), 0.32),
  LevelPool(65, (
    D.DECIDUOUS, D.WILLOW, D.PINE, D.PALM, D.BIRD, D.MUSHROOM, D.SQUIRREL,
    D.BERRY_BUSH, D.FERN, D.MOSS, D.LOG, D.WOODPILE,
  ), 0.28),
  # Farmland
  LevelPool(70, (
    D.WHEAT, D.FENCE, D.SHEEP, D.CHICKEN, D.BUSH, D.RICE_PADDY, D.PUMPKIN,
    D.ORCHARD, D.TROUGH, D.HAYSTACK, D.SIGNPOST,
  ), 0.30),
  LevelPool(75, (
    D.WHEAT, D.FENCE, D.SCARECROW, D.COW, D.SHEEP, D.CHICKEN, D.HORSE,
    D.RICE_PADDY, D.SILO, D.PIGPEN, D.TROUGH, D.ORCHARD, D.BEE_FARM, D.PUMPKIN,
  ), 0.35),
  LevelPool(78, (
    D.BARN, D.SHEEP, D.COW, D.HORSE, D.WHEAT, D.FENCE, D.CHICKEN, D.CART,
    D.RICE_PADDY, D.SILO, D.PIGPEN, D.HAYSTACK, D.ORCHARD, D.BEE_FARM, D.HAYBALE,
  ), 0.38),
  # Village
  LevelPool(84, (
    D.TENT, D.HUT, D.HOUSE, D.WELL, D.FENCE, D.SHEEP, D.BARREL, D.TAVERN,
    D.BAKERY, D.STABLE, D.GARDEN, D.DOGHOUSE, D.SHRINE, D.LANTERN, D.WOODPILE,
  ), 0.38),
  LevelPool(90, (
    D.HOUSE, D.HOUSE_B, D.CHURCH, D.WINDMILL, D.WELL, D.BARREL, D.TORCH,
    D.TAVERN, D.BAKERY, D.STABLE, D.GARDEN, D.LAUNDRY, D.WAGON, D.SHRINE,
    D.LANTERN, D.SIGNPOST,
  ), 0.42),
  # Town and city
  LevelPool(95, (
    D.HOUSE, D.HOUSE_B, D.MARKET, D.INN, D.WINDMILL, D.FLAG, D.COBBLE_PATH,
    D.TORCH, D.GARDEN_TREE, D.FLOWER, D.BUSH, D.CATHEDRAL, D.LIBRARY,
    D.CLOCKTOWER, D.STATUE, D.PARK, D.WAREHOUSE, D.LANTERN,
  ), 0.48),
  LevelPool(99, (
    D.CASTLE, D.TOWER, D.CHURCH, D.MARKET, D.INN, D.BLACKSMITH, D.BRIDGE,
    D.FLAG, D.COBBLE_PATH, D.GARDEN_TREE, D.FLOWER, D.FOUNTAIN, D.CATHEDRAL,
    D.LIBRARY, D.CLOCKTOWER, D.STATUE, D.PARK, D.GATEHOUSE, D.MANOR,
    D.WAREHOUSE, D.LANTERN,
  ), 0.55),
)


def get_level_pool(intensity: int) -> DecorationPool:
  """Base pool for an intensity; anything past the last band uses it."""
  for band in LEVEL_POOLS:
    if intensity <= band.max_intensity:
      return DecorationPool(band.types, band.chance)
  last = LEVEL_POOLS[-1]
  return DecorationPool(last.types, last.chance)


# =============================================================================
# Pool Shaping
# =============================================================================


def blend_with_biome(pool: DecorationPool, biome: BiomeContext, intensity: int) -> DecorationPool:
  """
  Add biome-specific candidates and adjust the placement chance.

  Water wins over shoreline; forest additions stack on top of either. The
  result is capped at MAX_CHANCE.
  """
  types = list(pool.types)
  chance = pool.chance

  if biome.is_river:
    if intensity >= 91:
      types += [D.BRIDGE, D.CANAL]
    elif intensity >= 66:
      types += [D.WATERMILL, D.CANAL, D.REEDS, D.HERON]
    elif intensity >= 31:
      types += [D.REEDS, D.REEDS, D.WILLOW, D.FROG, D.HERON, D.CATTAIL]
    else:
      types += [D.REEDS, D.POND_LILY, D.LILY, D.FROG]
    chance = max(chance, 0.35)
  elif biome.is_pond:
    if intensity >= 79:
      types += [D.FOUNTAIN, D.POND_LILY, D.REEDS, D.LILY]
    else:
      types += [D.POND_LILY, D.POND_LILY, D.REEDS, D.LILY, D.FROG, D.CATTAIL]
    chance = max(chance, 0.30)
  elif biome.near_water:
    if intensity >= 79:
      types += [D.FOUNTAIN, D.GARDEN_TREE]
    else:
      types += [D.WILLOW, D.REEDS, D.BUSH, D.DRIFTWOOD, D.HERON]
    chance += 0.05

  if biome.forest_density > 0.3:
    for _ in range(3 if biome.forest_density > 0.6 else 1):
      if intensity >= 91:
        types += [D.GARDEN_TREE, D.FLOWER]
      elif intensity >= 79:
        types += [D.GARDEN_TREE]
      elif intensity >= 43:
        types += [D.PINE, D.DECIDUOUS, D.OWL, D.SQUIRREL, D.MOSS, D.FERN]
      else:
        types += [D.PINE, D.BIRCH]
    chance += biome.forest_density * 0.08

  if intensity >= 96:
    types += [D.GARDEN_TREE, D.FOUNTAIN, D.PARK]
  elif intensity >= 91:
    types += [D.GARDEN_TREE, D.LANTERN]

  return DecorationPool(tuple(types), min(chance, MAX_CHANCE))


def apply_season(pool: DecorationPool, week: int, rotation: int, intensity: int) -> DecorationPool:
  """Drop out-of-season candidates and append the season's own."""
  additions, removals = get_seasonal_pool_overrides(week, rotation, intensity)
  kept = [t for t in pool.types if t not in removals]
  return DecorationPool(tuple(kept + additions), pool.chance)


def compute_richness(cell: IsoCell, lookup: Mapping[tuple[int, int], IsoCell]) -> float:
  """
  Mean neighbor intensity over the 8 surrounding cells, scaled to [0, 1].

  Only neighbors that exist count, so edge cells average fewer cells. An
  isolated cell has richness 0.
  """
  total = 0
  count = 0
  for dw in (-1, 0, 1):
    for dd in (-1, 0, 1):
      if dw == 0 and dd == 0:
        continue
      neighbor = lookup.get((cell.week + dw, cell.day + dd))
      if neighbor is not None:
        total += neighbor.intensity
        count += 1
  if count == 0:
    return 0.0
  return total / (count * 99)


# =============================================================================
# Selection
# =============================================================================


@dataclass(frozen=True)
class PlacedDecoration:
  """A decoration anchored to a cell with a small screen offset."""

  cell: IsoCell
  type: D
  offset_x: float
  offset_y: float
  variant: int

  @property
  def x(self) -> float:
    return self.cell.x + self.offset_x

  @property
  def y(self) -> float:
    return self.cell.y + self.offset_y


@dataclass
class AnimationBudget:
  """Remaining animation slots for one render."""

  smil: int = SMIL_BUDGET
  css: int = CSS_BUDGET
  smoke: int = SMOKE_BUDGET
  substitutions: int = field(default=0)

  def admit_smoke(self, decoration: D, fallback: D) -> D:
    if decoration is not D.SMOKE:
      return decoration
    if self.smoke <= 0:
      self.substitutions += 1
      return fallback
    self.smoke -= 1
    return decoration

  def admit_smil(self, decoration: D) -> D:
    if decoration not in SMIL_ANIMATED:
      return decoration
    if self.smil <= 0:
      self.substitutions += 1
      return SMIL_FALLBACK
    self.smil -= 1
    return decoration

  def admit_css(self, decoration: D) -> D:
    if decoration not in CSS_ANIMATED:
      return decoration
    if self.css <= 0:
      self.substitutions += 1
      return CSS_FALLBACK
    self.css -= 1
    return decoration


def cell_pool(
  cell: IsoCell,
  biome_map: Mapping[tuple[int, int], BiomeContext] | None,
  rotation: int | None,
) -> DecorationPool:
  """Fully shaped pool for a cell: band, then biome, then season."""
  pool = get_level_pool(cell.intensity)
  if biome_map is not None:
    biome = biome_map.get(cell.key)
    if biome is not None:
      pool = blend_with_biome(pool, biome, cell.intensity)
  if rotation is not None:
    pool = apply_season(pool, cell.week, rotation, cell.intensity)
  return pool


def select_decorations(
  iso_cells: Iterable[IsoCell],
  rng: random.Random,
  variant_rng: random.Random,
  biome_map: Mapping[tuple[int, int], BiomeContext] | None = None,
  rotation: int | None = None,
) -> list[PlacedDecoration]:
  """
  Choose decorations for every cell, at most two per cell.

  Args:
    iso_cells: Cells in drawing order; the order fixes the random draw order
    rng: Generator for presence, type and offset draws
    variant_rng: Generator for visual variants only
    biome_map: Optional biome layer keyed by (week, day)
    rotation: Season rotation; None disables seasonal pools

  Returns:
    Placed decorations in cell order
  """
  cells = list(iso_cells)
  lookup = cell_lookup(cells)
  budget = AnimationBudget()
  placed: list[PlacedDecoration] = []

  for cell in cells:
    # Inactive days stay bare
    if cell.intensity == 0:
      continue
    pool = cell_pool(cell, biome_map, rotation)
    richness = compute_richness(cell, lookup)
    final_chance = pool.chance + richness * RICHNESS_WEIGHT
    if not pool.types:
      continue
    if rng.random() >= final_chance:
      continue

    first = pool.types[math.floor(rng.random() * len(pool.types))]
    first = budget.admit_smoke(first, SMOKE_FALLBACK)
    offset_x = (rng.random() - 0.5) * 3
    offset_y = (rng.random() - 0.5) * 1.5
    variant = math.floor(variant_rng.random() * VARIANTS)
    first = budget.admit_css(budget.admit_smil(first))
    placed.append(PlacedDecoration(cell, first, offset_x, offset_y, variant))

    if (
      richness > SECOND_PICK_RICHNESS
      and cell.intensity >= SECOND_PICK_MIN_INTENSITY
      and rng.random() < SECOND_PICK_CHANCE
    ):
      second = pool.types[math.floor(rng.random() * len(pool.types))]
      second = budget.admit_smoke(second, SECOND_SMOKE_FALLBACK)
      second = budget.admit_smil(second)
      second_variant = math.floor(variant_rng.random() * VARIANTS)
      second = budget.admit_css(second)
      placed.append(
        PlacedDecoration(
          cell,
          second,
          offset_x=(rng.random() - 0.5) * 4,
          offset_y=(rng.random() - 0.5) * 2,
          variant=second_variant,
        )
      )

  logger.debug(
    f"Placed {len(placed)} decorations over {len(cells)} cells "
    f"({budget.substitutions} budget substitutions, smil left={budget.smil}, css left={budget.css})"
  )
  return placed
