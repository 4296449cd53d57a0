"""
Top-left corner planner.

Maintain a frontier of corner points where a new block may start. Each round,
take the point with the lowest x (ties broken by lowest y), fill a randomly
sized block from it into the available space, then push the block's other
three corners onto the frontier. Points that fall on the outer edge or inside
an existing block are filtered out after every placement.

Available width is the distance to the right edge of the grid. Available
height is the free run of cells straight down the starting column.

Downsides:
- With larger max block sizes there is a clear left to right gradient of
  block size and shape, since the frontier is always consumed in x order.
"""

from __future__ import annotations

import logging

from block_tiling.generation.geometry import Placement, Point, Rectangle
from block_tiling.generation.grid import Axis, Grid
from block_tiling.generation.random_source import RandomSource
from block_tiling.generation.scanner import scan

logger = logging.getLogger(__name__)


class TopLeftPlanner:
  """Planner that greedily fills blocks from a frontier of corner points."""

  def __init__(self, rng: RandomSource, min_block_size: int, max_block_size: int):
    self.rng = rng
    self.min_block_size = min_block_size
    self.max_block_size = max_block_size
    self.grid: Grid | None = None
    self.frontier: list[Point] = []

  def initialize(self, grid: Grid) -> None:
    self.grid = grid
    self.frontier = [Point(0, 0)]
    self.filter_frontier()

  def next_candidate(self) -> Point | None:
    """Return the frontier point with the lowest x, then lowest y."""
    if not self.frontier:
      return None
    return min(self.frontier, key=lambda p: (p.x, p.y))

  def available_space(self, point: Point) -> tuple[int, int]:
    """Return (available_width, available_height) for a block starting at point."""
    if self.grid is None:
      raise RuntimeError("TopLeftPlanner.initialize must be called first")
    available_width = self.grid.width - point.x
    # Single-column check: count the free run below the starting cell.
    available_height = 1 + scan(
      self.grid, Axis.Y, 1, point.y, point.x, point.x, self.grid.height
    )
    return available_width, available_height

  def compute_rectangle(self, point: Point) -> Placement:
    available_width, available_height = self.available_space(point)

    note = ""
    if available_width < self.min_block_size or available_height < self.min_block_size:
      note = (
        f"Available space is less than min block size: "
        f"available=({available_width}, {available_height}), min={self.min_block_size}"
      )
      logger.warning(note)

    width = self.rng.range_int(
      min(self.min_block_size, available_width),
      min(self.max_block_size, available_width),
    )
    height = self.rng.range_int(
      min(self.min_block_size, available_height),
      min(self.max_block_size, available_height),
    )
    return Placement(x=point.x, y=point.y, width=width, height=height, note=note)

  def on_committed(self, rect: Rectangle) -> None:
    self.frontier.extend([rect.top_right, rect.bottom_left, rect.bottom_right])
    self.filter_frontier()

  def filter_frontier(self) -> None:
    """Drop points on the outer edge or inside an assigned cell."""
    if self.grid is None:
      raise RuntimeError("TopLeftPlanner.initialize must be called first")
    grid = self.grid
    self.frontier = [
      p
      for p in self.frontier
      if p.x < grid.width and p.y < grid.height and not grid.is_assigned(p.x, p.y)
    ]
