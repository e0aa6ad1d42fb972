"""
Landmark selection: rare structures gated three ways.

A tier can only appear when
  1. the cell is intense enough (min_intensity),
  2. its neighborhood is rich enough (min_richness), and
  3. the contributor's overall statistics unlock the tier.

The third gate is checked once per render. Cells are then visited in a
shuffled order and each gets at most one roll, against the highest tier whose
first two gates it passes. No more than MAX_LANDMARKS are placed, never on
water and never within MIN_SPACING (Manhattan) of one another.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Callable, Iterable, Mapping

from isometric_terrain.data.activity import ContributionStats
from isometric_terrain.generation.biomes import BiomeContext
from isometric_terrain.generation.catalog import LANDMARK_ROSTERS, LandmarkTier, LandmarkType
from isometric_terrain.generation.decorations import compute_richness
from isometric_terrain.generation.projection import IsoCell, cell_lookup
from isometric_terrain.generation.shared import manhattan

logger = logging.getLogger(__name__)

MAX_LANDMARKS = 3
MIN_SPACING = 3
MAX_RICHNESS_BONUS = 0.5


@dataclass(frozen=True)
class TierConfig:
  min_intensity: int
  min_richness: float
  base_chance: float
  glow_color: str
  stats_gate: Callable[[ContributionStats], bool]


TIER_CONFIG: dict[LandmarkTier, TierConfig] = {
  LandmarkTier.RARE: TierConfig(
    min_intensity=88,
    min_richness=0.45,
    base_chance=0.018,
    glow_color="#FFD700",
    stats_gate=lambda s: s.total >= 200 or s.longest_streak >= 7,
  ),
  LandmarkTier.EPIC: TierConfig(
    min_intensity=93,
    min_richness=0.55,
    base_chance=0.008,
    glow_color="#9B59B6",
    stats_gate=lambda s: s.total >= 500 and s.longest_streak >= 14,
  ),
  LandmarkTier.LEGENDARY: TierConfig(
    min_intensity=97,
    min_richness=0.65,
    base_chance=0.003,
    glow_color="#00CED1",
    stats_gate=lambda s: s.total >= 1000 and s.longest_streak >= 30,
  ),
}


@dataclass(frozen=True)
class PlacedLandmark:
  type: LandmarkType
  tier: LandmarkTier
  week: int
  day: int
  x: float
  y: float

  @property
  def key(self) -> tuple[int, int]:
    return (self.week, self.day)


def eligible_tiers(stats: ContributionStats) -> list[LandmarkTier]:
  """Tiers unlocked by the statistics gate, highest first."""
  return [tier for tier in reversed(LandmarkTier) if TIER_CONFIG[tier].stats_gate(stats)]


def streak_multiplier(current_streak: int) -> float:
  if current_streak >= 30:
    return 1.44
  if current_streak >= 7:
    return 1.15
  return 1.0


def landmark_chance(tier: LandmarkTier, richness: float, multiplier: float) -> float:
  """Roll threshold for a cell that passed the tier's first two gates."""
  config = TIER_CONFIG[tier]
  bonus = 1 + min((richness - config.min_richness) * 2, MAX_RICHNESS_BONUS)
  return config.base_chance * bonus * multiplier


def _shuffled(cells: list[IsoCell], rng: random.Random) -> list[IsoCell]:
  """Fisher-Yates from the end, drawing j = floor(r * (i + 1))."""
  order = list(cells)
  for i in range(len(order) - 1, 0, -1):
    j = math.floor(rng.random() * (i + 1))
    order[i], order[j] = order[j], order[i]
  return order


def select_landmarks(
  iso_cells: Iterable[IsoCell],
  rng: random.Random,
  stats: ContributionStats,
  biome_map: Mapping[tuple[int, int], BiomeContext] | None = None,
) -> list[PlacedLandmark]:
  """
  Place up to MAX_LANDMARKS landmarks.

  Args:
    iso_cells: Projected cells
    rng: Generator dedicated to this stage
    stats: Statistics for the tier unlock gate
    biome_map: Optional biome layer; water cells are never used

  Returns:
    Landmarks in placement order
  """
  cells = list(iso_cells)
  tiers = eligible_tiers(stats)
  if not tiers:
    logger.debug("No landmark tier unlocked")
    return []

  multiplier = streak_multiplier(stats.current_streak)
  lookup = cell_lookup(cells)
  placed: list[PlacedLandmark] = []

  for cell in _shuffled(cells, rng):
    if len(placed) >= MAX_LANDMARKS:
      break

    biome = biome_map.get(cell.key) if biome_map is not None else None
    if biome is not None and biome.is_water:
      continue
    if any(manhattan(p.key, cell.key) < MIN_SPACING for p in placed):
      continue

    richness = compute_richness(cell, lookup)
    for tier in tiers:
      config = TIER_CONFIG[tier]
      if cell.intensity < config.min_intensity or richness < config.min_richness:
        continue
      if rng.random() < landmark_chance(tier, richness, multiplier):
        roster = LANDMARK_ROSTERS[tier]
        landmark = roster[math.floor(rng.random() * len(roster))]
        placed.append(PlacedLandmark(landmark, tier, cell.week, cell.day, cell.x, cell.y))
        logger.debug(f"Landmark {landmark.value} ({tier.value}) at week {cell.week}, day {cell.day}")
      break

  return placed
