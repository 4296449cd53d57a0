"""Geometry primitives shared by the grid, planners and sessions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Point:
  """A 2D grid cell coordinate."""

  x: int
  y: int

  def __str__(self) -> str:
    return f"({self.x},{self.y})"


@dataclass(frozen=True)
class Placement:
  """
  A rectangle computed by a planner but not yet committed to the grid.

  `note` holds a non-fatal diagnostic, e.g. when the available space was
  smaller than the minimum block size and the size had to be clamped.
  """

  x: int
  y: int
  width: int
  height: int
  note: str = ""


@dataclass(frozen=True)
class Rectangle:
  """A committed block. Coordinates are the top-left cell, sizes are >= 1."""

  id: int
  x: int
  y: int
  width: int
  height: int

  @property
  def right(self) -> int:
    """Exclusive right edge (x + width)."""
    return self.x + self.width

  @property
  def bottom(self) -> int:
    """Exclusive bottom edge (y + height)."""
    return self.y + self.height

  @property
  def area(self) -> int:
    return self.width * self.height

  @property
  def top_right(self) -> Point:
    return Point(self.right, self.y)

  @property
  def bottom_left(self) -> Point:
    return Point(self.x, self.bottom)

  @property
  def bottom_right(self) -> Point:
    return Point(self.right, self.bottom)

  def contains(self, p: Point) -> bool:
    """Check if a cell lies inside the rectangle."""
    return self.x <= p.x < self.right and self.y <= p.y < self.bottom

  def overlaps(self, other: Rectangle) -> bool:
    return (
      self.x < other.right
      and other.x < self.right
      and self.y < other.bottom
      and other.y < self.bottom
    )

  def cells(self) -> list[Point]:
    """Return every cell covered by the rectangle, row by row."""
    return [
      Point(x, y)
      for y in range(self.y, self.bottom)
      for x in range(self.x, self.right)
    ]

  def to_dict(self) -> dict[str, Any]:
    """Convert to JSON-serializable dict."""
    return {
      "id": self.id,
      "x": self.x,
      "y": self.y,
      "width": self.width,
      "height": self.height,
    }

  @classmethod
  def from_dict(cls, data: dict[str, Any]) -> Rectangle:
    return cls(
      id=int(data["id"]),
      x=int(data["x"]),
      y=int(data["y"]),
      width=int(data["width"]),
      height=int(data["height"]),
    )
