"""
Grow-from-seeds planner.

Pick a random unassigned cell and grow a rectangle out from it. How far the
rectangle may extend is bounded by the maximum block size and by neighboring
rectangles.

Free space is measured twice: extending vertically then horizontally, and
horizontally then vertically. The second scan of each pass must keep the
whole strip found by the first scan free. The pass with the larger area wins
(ties go to vertical-first).

The block is then sized randomly within the available span and centered in
it. A minimum block size cannot be guaranteed: if the available span is
smaller, the lower sampling bound is clamped down to it.
"""

from __future__ import annotations

from dataclasses import dataclass

from block_tiling.generation.geometry import Placement, Point, Rectangle
from block_tiling.generation.grid import Axis, Grid
from block_tiling.generation.random_source import RandomSource
from block_tiling.generation.scanner import scan


@dataclass(frozen=True)
class Extents:
  """Free cells available around a seed cell in each direction."""

  x_negative: int
  x_positive: int
  y_negative: int
  y_positive: int

  @property
  def available_width(self) -> int:
    return self.x_negative + 1 + self.x_positive

  @property
  def available_height(self) -> int:
    return self.y_negative + 1 + self.y_positive

  @property
  def area(self) -> int:
    return self.available_width * self.available_height


def _extents_vertical_first(grid: Grid, seed: Point, max_extension: int) -> Extents:
  y_pos = scan(grid, Axis.Y, 1, seed.y, seed.x, seed.x, max_extension)
  y_neg = scan(grid, Axis.Y, -1, seed.y, seed.x, seed.x, max_extension)
  top, bottom = seed.y - y_neg, seed.y + y_pos
  x_pos = scan(grid, Axis.X, 1, seed.x, top, bottom, max_extension)
  x_neg = scan(grid, Axis.X, -1, seed.x, top, bottom, max_extension)
  return Extents(x_negative=x_neg, x_positive=x_pos, y_negative=y_neg, y_positive=y_pos)


def _extents_horizontal_first(grid: Grid, seed: Point, max_extension: int) -> Extents:
  x_pos = scan(grid, Axis.X, 1, seed.x, seed.y, seed.y, max_extension)
  x_neg = scan(grid, Axis.X, -1, seed.x, seed.y, seed.y, max_extension)
  left, right = seed.x - x_neg, seed.x + x_pos
  y_pos = scan(grid, Axis.Y, 1, seed.y, left, right, max_extension)
  y_neg = scan(grid, Axis.Y, -1, seed.y, left, right, max_extension)
  return Extents(x_negative=x_neg, x_positive=x_pos, y_negative=y_neg, y_positive=y_pos)


def find_available_extents(grid: Grid, seed: Point, max_extension: int) -> Extents:
  """
  Measure the free box around a seed cell.

  Every cell in the returned box is unassigned. Returns the larger of the
  vertical-first and horizontal-first measurements.
  """
  vertical_first = _extents_vertical_first(grid, seed, max_extension)
  horizontal_first = _extents_horizontal_first(grid, seed, max_extension)
  return vertical_first if vertical_first.area >= horizontal_first.area else horizontal_first


def centered_placement(
  seed: Point,
  extents: Extents,
  width: int,
  height: int,
) -> Placement:
  """
  Center a width x height block inside the available span around `seed`.

  The result may not contain the seed cell itself, but always stays inside
  the available span.
  """
  center_x = seed.x - extents.x_negative + extents.available_width // 2
  center_y = seed.y - extents.y_negative + extents.available_height // 2
  return Placement(
    x=center_x - width // 2,
    y=center_y - height // 2,
    width=width,
    height=height,
  )


class GrowthPlanner:
  """Planner that grows blocks from a shuffled pool of unassigned cells."""

  def __init__(self, rng: RandomSource, min_block_size: int, max_block_size: int):
    self.rng = rng
    self.min_block_size = min_block_size
    self.max_block_size = max_block_size
    self.grid: Grid | None = None
    self.pool: list[Point] = []
    self.cursor = 0

  def initialize(self, grid: Grid) -> None:
    """Collect every unassigned cell and shuffle the pool once."""
    self.grid = grid
    self.pool = list(grid.unassigned_cells())
    self.rng.shuffle(self.pool)
    self.cursor = 0

  def next_candidate(self) -> Point | None:
    if self.cursor >= len(self.pool):
      return None
    return self.pool[self.cursor]

  def compute_rectangle(self, seed: Point) -> Placement:
    if self.grid is None:
      raise RuntimeError("GrowthPlanner.initialize must be called first")

    extents = find_available_extents(self.grid, seed, self.max_block_size)
    available_width = extents.available_width
    available_height = extents.available_height

    width = self.rng.range_int(
      min(available_width, self.min_block_size),
      min(available_width, self.max_block_size),
    )
    height = self.rng.range_int(
      min(available_height, self.min_block_size),
      min(available_height, self.max_block_size),
    )
    return centered_placement(seed, extents, width, height)

  def on_committed(self, rect: Rectangle) -> None:
    """Advance the cursor past pooled cells that are now assigned."""
    if self.grid is None:
      raise RuntimeError("GrowthPlanner.initialize must be called first")
    while self.cursor < len(self.pool):
      p = self.pool[self.cursor]
      if not self.grid.is_assigned(p.x, p.y):
        break
      self.cursor += 1
