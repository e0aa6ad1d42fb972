"""
Shared utilities for the terrain generation stages.

Contains the numeric helpers every stage relies on (clamping, interpolation,
half-up rounding), the string hash used to derive seeds, and the factory for
the per-stage random generators.
"""

from __future__ import annotations

import math
import random
from typing import Sequence, TypeVar

T = TypeVar("T")

# Canonical grid shape of a contribution calendar
WEEKS = 52
DAYS = 7


# =============================================================================
# Numeric Helpers
# =============================================================================


def clamp(value: float, low: float, high: float) -> float:
  """Clamp value into [low, high]."""
  return max(low, min(high, value))


def lerp(a: float, b: float, t: float) -> float:
  """Linear interpolation between a and b."""
  return a + (b - a) * t


def round_half_up(value: float) -> int:
  """
  Round to the nearest integer, with .5 always rounding up.

  The built-in round() uses banker's rounding, which would shift colors and
  intensities by one at exact halves.
  """
  return math.floor(value + 0.5)


def select_evenly(items: Sequence[T], limit: int) -> list[T]:
  """Pick at most `limit` items spread evenly across the sequence."""
  if len(items) <= limit:
    return list(items)
  step = len(items) / limit
  return [items[math.floor(i * step)] for i in range(limit)]


# =============================================================================
# Seeding
# =============================================================================


def hash_string(text: str) -> int:
  """
  Hash a string to an unsigned 32-bit integer (djb2, xor variant).

  Stable across processes and interpreter versions, unlike hash().
  """
  h = 5381
  for ch in text:
    h = ((h * 33) ^ ord(ch)) & 0xFFFFFFFF
  return h


def derive_seed(seed: int, stage: str) -> int:
  """Derive an independent seed for a named pipeline stage."""
  return hash_string(f"{seed}:{stage}")


def make_rng(seed: int, stage: str | None = None) -> random.Random:
  """
  Create a seeded generator, optionally for a named stage.

  Args:
    seed: Base seed for the render
    stage: Stage name mixed into the seed so stages never share a stream

  Returns:
    A fresh random.Random instance
  """
  if stage is not None:
    seed = derive_seed(seed, stage)
  return random.Random(seed)


def manhattan(a: tuple[int, int], b: tuple[int, int]) -> int:
  return abs(a[0] - b[0]) + abs(a[1] - b[1])
