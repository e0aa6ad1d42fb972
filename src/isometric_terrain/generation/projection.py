"""
Isometric projection of the intensity grid.

A cell at (week, day) maps to a diamond whose center sits at
  x = origin_x + (week - day) * TILE_HALF_WIDTH
  y = origin_y + (week + day) * TILE_HALF_HEIGHT

Cells are painted back to front: a smaller week + day is further away, and
within a diagonal the smaller week is drawn first.

Usage:
  iso_cells = to_iso_cells(normalize_weeks(calendar.weeks), palette)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from isometric_terrain.generation.intensity import GridCell100

if TYPE_CHECKING:
  from isometric_terrain.rendering.palette import ElevationColors, TerrainPalette

TILE_HALF_WIDTH = 8
TILE_HALF_HEIGHT = 3.5
DEFAULT_ORIGIN: tuple[float, float] = (405, 6)


@dataclass(frozen=True)
class IsoCell:
  """A grid cell placed in screen space with its resolved colors."""

  week: int
  day: int
  intensity: int
  height: int
  x: float
  y: float
  colors: ElevationColors

  @property
  def key(self) -> tuple[int, int]:
    return (self.week, self.day)


def project(
  week: int, day: int, origin: tuple[float, float] = DEFAULT_ORIGIN
) -> tuple[float, float]:
  """Screen position of a grid cell's diamond center."""
  origin_x, origin_y = origin
  return (
    origin_x + (week - day) * TILE_HALF_WIDTH,
    origin_y + (week + day) * TILE_HALF_HEIGHT,
  )


def depth_key(cell: IsoCell | GridCell100) -> tuple[int, int]:
  """Painter's-order key: far diagonals first, then lower weeks."""
  return (cell.week + cell.day, cell.week)


def to_iso_cells(
  cells: Iterable[GridCell100],
  palette: TerrainPalette,
  origin: tuple[float, float] = DEFAULT_ORIGIN,
) -> list[IsoCell]:
  """
  Project normalized cells and sort them into drawing order.

  Args:
    cells: Normalized cells in any order
    palette: Palette supplying block heights and face colors
    origin: Screen position of cell (0, 0)

  Returns:
    IsoCells sorted by depth_key
  """
  iso_cells = []
  for cell in cells:
    x, y = project(cell.week, cell.day, origin)
    iso_cells.append(
      IsoCell(
        week=cell.week,
        day=cell.day,
        intensity=cell.intensity,
        height=palette.get_height(cell.intensity),
        x=x,
        y=y,
        colors=palette.get_elevation(cell.intensity),
      )
    )
  iso_cells.sort(key=depth_key)
  return iso_cells


def cell_lookup(iso_cells: Iterable[IsoCell]) -> dict[tuple[int, int], IsoCell]:
  return {cell.key: cell for cell in iso_cells}
