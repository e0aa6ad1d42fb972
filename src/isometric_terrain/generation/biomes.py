"""
Procedural biome generation: rivers, ponds, shorelines and forests.

Biomes are laid over the grid independently of activity, so an empty calendar
still gets its rivers. All randomness comes from the injected generator in a
fixed order (rivers, ponds, forests); changing that order changes every later
draw.

Usage:
  biome_map = generate_biome_map(52, 7, make_rng(seed, "biomes"))
  biome_map[(10, 3)].is_river
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

import numpy as np

logger = logging.getLogger(__name__)

NUM_RIVERS = 2
DRIFT_LEFT = 0.2  # draws below this move the river one day up
DRIFT_RIGHT = 0.8  # draws above this move it one day down


@dataclass(frozen=True)
class BiomeContext:
  """Biome flags for one cell."""

  is_river: bool = False
  is_pond: bool = False
  near_water: bool = False
  forest_density: float = 0.0

  @property
  def is_water(self) -> bool:
    return self.is_river or self.is_pond


BiomeMap = Mapping[tuple[int, int], BiomeContext]


@dataclass(frozen=True)
class ForestNucleus:
  week: int
  day: int
  radius: float


def _carve_rivers(
  river: np.ndarray, rng: random.Random
) -> list[tuple[int, int]]:
  """Walk each river across the weeks; returns the cells where it bent."""
  weeks, days = river.shape
  bends: list[tuple[int, int]] = []
  for index in range(NUM_RIVERS):
    if index == 0:
      day = math.floor(rng.random() * (days // 2))
    else:
      day = days // 2 + math.floor(rng.random() * math.ceil(days / 2))

    for week in range(weeks):
      river[week, day] = True
      drift = rng.random()
      previous = day
      if drift < DRIFT_LEFT:
        day = max(0, day - 1)
      elif drift > DRIFT_RIGHT:
        day = min(days - 1, day + 1)
      if day != previous:
        bends.append((week, day))
  return bends


def _grow_ponds(
  pond: np.ndarray, bends: list[tuple[int, int]], rng: random.Random
) -> int:
  """Seed ponds on a random subset of river bends and grow them by jitter."""
  weeks, days = pond.shape
  count = min(len(bends), 1 + math.floor(rng.random() * 2))

  sort_keys = [rng.random() for _ in bends]
  shuffled = [bend for _, bend in sorted(zip(sort_keys, bends), key=lambda pair: pair[0])]

  for center in shuffled[:count]:
    size = 2 + math.floor(rng.random() * 3)
    cells = [center]
    for _ in range(size):
      base_w, base_d = cells[math.floor(rng.random() * len(cells))]
      nw = base_w + math.floor(rng.random() * 3) - 1
      nd = base_d + math.floor(rng.random() * 3) - 1
      if 0 <= nw < weeks and 0 <= nd < days:
        cells.append((nw, nd))
    for w, d in cells:
      pond[w, d] = True
  return count


def _near_water(water: np.ndarray) -> np.ndarray:
  """Cells that are dry but touch water along one of the four grid directions."""
  touching = np.zeros_like(water)
  touching[1:, :] |= water[:-1, :]
  touching[:-1, :] |= water[1:, :]
  touching[:, 1:] |= water[:, :-1]
  touching[:, :-1] |= water[:, 1:]
  return touching & ~water


def _forest_density(weeks: int, days: int, nuclei: list[ForestNucleus]) -> np.ndarray:
  """
  Per-cell forest density: the strongest nucleus wins.

  Each nucleus contributes 1 - distance/radius inside its radius. Taking the
  maximum keeps overlapping forests from compounding past 1.
  """
  density = np.zeros((weeks, days), dtype=float)
  ww, dd = np.meshgrid(np.arange(weeks), np.arange(days), indexing="ij")
  for nucleus in nuclei:
    dist = np.sqrt((ww - nucleus.week) ** 2 + (dd - nucleus.day) ** 2)
    contribution = np.where(dist < nucleus.radius, 1 - dist / nucleus.radius, 0.0)
    density = np.maximum(density, contribution)
  return density


def generate_biome_map(weeks: int, days: int, rng: random.Random) -> BiomeMap:
  """
  Generate the biome layer for a grid.

  Args:
    weeks: Number of week columns
    days: Number of day rows
    rng: Generator dedicated to this stage

  Returns:
    Read-only mapping of (week, day) to BiomeContext, covering every cell
  """
  if weeks <= 0 or days <= 0:
    return MappingProxyType({})

  river = np.zeros((weeks, days), dtype=bool)
  pond = np.zeros((weeks, days), dtype=bool)

  bends = _carve_rivers(river, rng)
  ponds = _grow_ponds(pond, bends, rng)
  near = _near_water(river | pond)

  nuclei = [
    ForestNucleus(
      week=math.floor(rng.random() * weeks),
      day=math.floor(rng.random() * days),
      radius=2 + rng.random() * 3,
    )
    for _ in range(4 + math.floor(rng.random() * 3))
  ]
  density = _forest_density(weeks, days, nuclei)

  logger.debug(
    f"Biomes: {int(river.sum())} river cells, {len(bends)} bends, "
    f"{ponds} ponds ({int(pond.sum())} cells), {len(nuclei)} forests"
  )

  return MappingProxyType({
    (w, d): BiomeContext(
      is_river=bool(river[w, d]),
      is_pond=bool(pond[w, d]),
      near_water=bool(near[w, d]),
      forest_density=float(density[w, d]),
    )
    for w in range(weeks)
    for d in range(days)
  })
