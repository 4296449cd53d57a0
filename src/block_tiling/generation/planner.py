"""Planner capability set and strategy selection."""

from __future__ import annotations

from typing import Protocol

from block_tiling.config.tiling_config import Strategy, TilingConfig
from block_tiling.generation.geometry import Placement, Point, Rectangle
from block_tiling.generation.grid import Grid
from block_tiling.generation.growth_planner import GrowthPlanner
from block_tiling.generation.random_source import RandomSource
from block_tiling.generation.top_left_planner import TopLeftPlanner


class Planner(Protocol):
  """
  A placement strategy.

  Planners keep only a derived candidate pool; the grid stays the source of
  truth for occupancy. Pools must be consistent with the grid after every
  `on_committed` call.
  """

  def initialize(self, grid: Grid) -> None: ...

  def next_candidate(self) -> Point | None: ...

  def compute_rectangle(self, seed: Point) -> Placement: ...

  def on_committed(self, rect: Rectangle) -> None: ...


def create_planner(config: TilingConfig, rng: RandomSource) -> Planner:
  """Build the planner for the configured strategy."""
  if config.strategy is Strategy.GROWTH_FROM_SEEDS:
    return GrowthPlanner(rng, config.min_block_size, config.max_block_size)
  if config.strategy is Strategy.TOP_LEFT_FRONTIER:
    return TopLeftPlanner(rng, config.min_block_size, config.max_block_size)
  raise ValueError(f"Unsupported strategy: {config.strategy}")
