"""
Tiling results, validation and persistence.

A TilingPlan records the configuration, the committed rectangles in commit
order, and why generation stopped. Plans can be validated against the
tiling invariants and saved to or loaded from JSON.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from block_tiling.config.tiling_config import TilingConfig
from block_tiling.generation.geometry import Point, Rectangle
from block_tiling.generation.session import FinishReason, GenerationSession


@dataclass
class TilingPlan:
  """A complete tiling produced by one session."""

  config: TilingConfig
  rectangles: list[Rectangle] = field(default_factory=list)
  finish_reason: FinishReason | None = None

  def to_dict(self) -> dict[str, Any]:
    """Convert to JSON-serializable dict."""
    return {
      "config": self.config.to_dict(),
      "rectangles": [rect.to_dict() for rect in self.rectangles],
      "finish_reason": self.finish_reason.value if self.finish_reason else None,
    }

  @classmethod
  def from_dict(cls, data: dict[str, Any]) -> TilingPlan:
    reason = data.get("finish_reason")
    return cls(
      config=TilingConfig.from_dict(data["config"]),
      rectangles=[Rectangle.from_dict(item) for item in data.get("rectangles", [])],
      finish_reason=FinishReason(reason) if reason else None,
    )


def generate_tiling(config: TilingConfig) -> TilingPlan:
  """Run a session to completion and collect its rectangles."""
  session = GenerationSession(config)
  reason = session.run()
  return TilingPlan(config=config, rectangles=list(session.placed), finish_reason=reason)


# =============================================================================
# Validation
# =============================================================================


def validate_tiling(plan: TilingPlan) -> tuple[bool, list[str]]:
  """
  Validate a plan against the tiling invariants.

  Checks ids are 0..n-1 in order, every rectangle is inside the grid, no
  cell is covered twice, and (for exhausted plans) every cell is covered.

  Returns (is_valid, error_messages).
  """
  errors: list[str] = []
  width, height = plan.config.grid_width, plan.config.grid_height
  owners: dict[Point, int] = {}

  for index, rect in enumerate(plan.rectangles):
    if rect.id != index:
      errors.append(f"Rectangle at position {index} has id {rect.id}")

    if rect.width < 1 or rect.height < 1:
      errors.append(f"Rectangle {rect.id} has non-positive size {rect.width}x{rect.height}")
      continue

    if rect.x < 0 or rect.y < 0 or rect.right > width or rect.bottom > height:
      errors.append(f"Rectangle {rect.id} is out of bounds")

    for cell in rect.cells():
      if cell in owners:
        errors.append(
          f"Cell {cell} is covered by rectangles {owners[cell]} and {rect.id}"
        )
      else:
        owners[cell] = rect.id

  if plan.finish_reason is FinishReason.EXHAUSTED:
    missing = [
      Point(x, y)
      for y in range(height)
      for x in range(width)
      if Point(x, y) not in owners
    ]
    if missing:
      errors.append(f"Missing cells: {missing}")

  return len(errors) == 0, errors


def get_tiling_summary(plan: TilingPlan) -> dict[str, Any]:
  """Get a summary of the plan for display."""
  by_size: dict[str, int] = {}
  for rect in plan.rectangles:
    key = f"{rect.width}x{rect.height}"
    by_size[key] = by_size.get(key, 0) + 1

  covered = sum(rect.area for rect in plan.rectangles)
  cell_count = plan.config.cell_count

  return {
    "grid": {
      "width": plan.config.grid_width,
      "height": plan.config.grid_height,
    },
    "strategy": plan.config.strategy.value,
    "seed": plan.config.seed,
    "total_blocks": len(plan.rectangles),
    "covered_cells": covered,
    "coverage": covered / cell_count,
    "finish_reason": plan.finish_reason.value if plan.finish_reason else None,
    "blocks_by_size": by_size,
  }


# =============================================================================
# Plan File Operations
# =============================================================================


def save_tiling_plan(plan: TilingPlan, path: Path) -> Path:
  """Save the plan to a JSON file."""
  path = Path(path)
  with open(path, "w") as f:
    json.dump(plan.to_dict(), f, indent=2)
  return path


def load_tiling_plan(path: Path) -> TilingPlan:
  """Load a plan from a JSON file."""
  path = Path(path)
  if not path.exists():
    raise FileNotFoundError(f"Tiling plan not found: {path}")
  with open(path) as f:
    data = json.load(f)
  return TilingPlan.from_dict(data)
