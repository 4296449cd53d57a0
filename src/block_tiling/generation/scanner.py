"""
Directional free-space scanning.

Measures how far a rectangle edge can be pushed along one axis before it
runs into the grid boundary, an assigned cell, or a maximum extension.
"""

from __future__ import annotations

from block_tiling.generation.grid import Axis, Grid


def scan(
  grid: Grid,
  axis: Axis,
  direction: int,
  start: int,
  cross_min: int,
  cross_max: int,
  max_extension: int,
) -> int:
  """
  Count how many rows/columns can be added in one direction.

  Each candidate coordinate is accepted only if the whole perpendicular span
  cross_min..cross_max at that coordinate is in bounds and unassigned.

  Args:
      grid: Occupancy grid to scan.
      axis: Axis to move along.
      direction: +1 or -1.
      start: Starting coordinate on `axis` (already part of the rectangle).
      cross_min: First cell of the perpendicular span (inclusive).
      cross_max: Last cell of the perpendicular span (inclusive).
      max_extension: Stop once this many steps have been taken.

  Returns:
      The number of successful extension steps (0 if none).
  """
  if direction not in (1, -1):
    raise ValueError(f"direction must be +1 or -1, got {direction}")

  value = start
  while abs(value - start) < max_extension:
    if not grid.is_span_free(axis, value + direction, cross_min, cross_max):
      break
    value += direction

  return abs(value - start)
