"""
Intensity normalization for contribution calendars.

Maps raw per-day counts onto a 0-99 intensity scale. The scale is anchored at
the 90th percentile of the non-zero counts and bent with a square root so a
few very busy days do not flatten everything else.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Sequence

from isometric_terrain.data.activity import ActivityDay
from isometric_terrain.generation.shared import DAYS, clamp, round_half_up

logger = logging.getLogger(__name__)

MAX_INTENSITY = 99
PERCENTILE = 0.9


@dataclass(frozen=True)
class GridCell100:
  """A calendar cell with its normalized intensity."""

  week: int
  day: int
  raw_count: int
  intensity: int

  @property
  def key(self) -> tuple[int, int]:
    return (self.week, self.day)


def effective_max(counts: Iterable[int]) -> float:
  """
  90th percentile of the non-zero counts.

  Returns 1 when there are no non-zero counts.
  """
  nonzero = sorted(c for c in counts if c > 0)
  if not nonzero:
    return 1
  index = min(math.floor(len(nonzero) * PERCENTILE), len(nonzero) - 1)
  return nonzero[index]


def intensity_for(count: int, max_count: float) -> int:
  """Map a raw count onto 0-99; zero stays zero, anything else is at least 1."""
  if count <= 0:
    return 0
  ratio = clamp(count / max_count, 0.0, 1.0)
  return int(clamp(round_half_up(math.sqrt(ratio) * 98) + 1, 1, MAX_INTENSITY))


def normalize_weeks(weeks: Sequence[Sequence[ActivityDay]]) -> list[GridCell100]:
  """
  Build the intensity grid for a sequence of weeks.

  Weeks longer than seven days are truncated; short weeks simply contribute
  fewer cells.

  Args:
    weeks: Weeks oldest first, each holding days in date order

  Returns:
    Cells in week-major order
  """
  trimmed = []
  for index, week in enumerate(weeks):
    if len(week) > DAYS:
      logger.warning(f"Week {index} has {len(week)} days, keeping the first {DAYS}")
    trimmed.append(week[:DAYS])

  max_count = effective_max(day.count for week in trimmed for day in week)
  logger.debug(f"Intensity scale anchored at {max_count}")

  return [
    GridCell100(
      week=w,
      day=d,
      raw_count=day.count,
      intensity=intensity_for(day.count, max_count),
    )
    for w, week in enumerate(trimmed)
    for d, day in enumerate(week)
  ]
