"""
Occupancy grid.

A fixed-size 2D array of cells, each either unassigned or holding the id of
the rectangle that owns it. The grid is the single source of truth for
occupancy; it is only ever mutated through `Grid.commit`.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator

import numpy as np

from block_tiling.generation.geometry import Point, Rectangle

UNASSIGNED = -1


class Axis(Enum):
  """Grid axes. Scans along one axis check spans on the other."""

  X = "x"
  Y = "y"

  @property
  def perpendicular(self) -> Axis:
    return Axis.Y if self is Axis.X else Axis.X


class Grid:
  """Cell ownership for a width x height grid, indexed as [x, y]."""

  def __init__(self, width: int, height: int):
    if width < 1 or height < 1:
      raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
    self.width = width
    self.height = height
    self.cells = np.full((width, height), UNASSIGNED, dtype=np.int64)

  def __repr__(self) -> str:
    return f"Grid({self.width}x{self.height}, unassigned={self.unassigned_count()})"

  def size_along(self, axis: Axis) -> int:
    return self.width if axis is Axis.X else self.height

  def in_bounds(self, x: int, y: int) -> bool:
    return 0 <= x < self.width and 0 <= y < self.height

  def is_assigned(self, x: int, y: int) -> bool:
    """Out-of-bounds cells are reported as unassigned."""
    return self.in_bounds(x, y) and self.cells[x, y] != UNASSIGNED

  def owner(self, x: int, y: int) -> int | None:
    """Return the id of the rectangle owning a cell, or None."""
    if not self.in_bounds(x, y):
      raise ValueError(f"Cell ({x},{y}) is outside the {self.width}x{self.height} grid")
    value = int(self.cells[x, y])
    return None if value == UNASSIGNED else value

  def is_span_free(self, axis: Axis, coord: int, lo: int, hi: int) -> bool:
    """
    Check a row or column segment.

    Args:
        axis: Axis that `coord` indexes. For Axis.X the segment is column
              `coord`, rows lo..hi; for Axis.Y it is row `coord`, columns lo..hi.
        coord: Coordinate along `axis`.
        lo: First cell of the segment on the perpendicular axis (inclusive).
        hi: Last cell of the segment on the perpendicular axis (inclusive).

    Returns:
        True if every cell of the segment is in bounds and unassigned.
    """
    if lo > hi:
      lo, hi = hi, lo
    if not 0 <= coord < self.size_along(axis):
      return False
    if lo < 0 or hi >= self.size_along(axis.perpendicular):
      return False
    if axis is Axis.X:
      segment = self.cells[coord, lo : hi + 1]
    else:
      segment = self.cells[lo : hi + 1, coord]
    return bool(np.all(segment == UNASSIGNED))

  def unassigned_count(self) -> int:
    return int(np.count_nonzero(self.cells == UNASSIGNED))

  def is_full(self) -> bool:
    return self.unassigned_count() == 0

  def unassigned_cells(self) -> Iterator[Point]:
    """Yield unassigned cells column by column (x-major)."""
    for x, y in np.argwhere(self.cells == UNASSIGNED):
      yield Point(int(x), int(y))

  def commit(self, rect: Rectangle) -> None:
    """
    Assign every cell of a rectangle to its id.

    Raises ValueError if the rectangle is empty, leaves the grid, or covers an
    assigned cell. The grid is left untouched when an error is raised.
    """
    if rect.width < 1 or rect.height < 1:
      raise ValueError(f"Rectangle {rect.id} has non-positive size {rect.width}x{rect.height}")
    if rect.x < 0 or rect.y < 0 or rect.right > self.width or rect.bottom > self.height:
      raise ValueError(
        f"Rectangle {rect.id} at ({rect.x},{rect.y}) size {rect.width}x{rect.height} "
        f"exceeds the {self.width}x{self.height} grid"
      )
    footprint = self.cells[rect.x : rect.right, rect.y : rect.bottom]
    if np.any(footprint != UNASSIGNED):
      taken = sorted({int(v) for v in footprint[footprint != UNASSIGNED]})
      raise ValueError(f"Rectangle {rect.id} overlaps rectangles {taken}")
    footprint[:, :] = rect.id
