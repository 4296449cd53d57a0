"""Generation configuration for block tiling sessions"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from enum import Enum
from pathlib import Path
from typing import Any


class ConfigError(ValueError):
  """Raised when a tiling configuration is invalid."""


class Strategy(Enum):
  """Available block placement strategies."""

  GROWTH_FROM_SEEDS = "growth_from_seeds"
  TOP_LEFT_FRONTIER = "top_left_frontier"


@dataclass(frozen=True)
class TilingConfig:
  """Immutable settings for a single generation session"""

  grid_width: int = 100
  grid_height: int = 50
  min_block_size: int = 3
  max_block_size: int = 20
  max_steps: int = 100000
  seed: int = 3
  strategy: Strategy = Strategy.GROWTH_FROM_SEEDS

  def __post_init__(self) -> None:
    for name in ("grid_width", "grid_height", "min_block_size", "max_block_size", "max_steps", "seed"):
      value = getattr(self, name)
      if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    if not isinstance(self.strategy, Strategy):
      raise ConfigError(f"strategy must be a Strategy, got {self.strategy!r}")

    if self.grid_width < 1 or self.grid_height < 1:
      raise ConfigError(
        f"Grid dimensions must be positive, got {self.grid_width}x{self.grid_height}"
      )
    if self.max_block_size < 1:
      raise ConfigError(f"max_block_size must be at least 1, got {self.max_block_size}")
    if self.min_block_size < 1:
      raise ConfigError(f"min_block_size must be at least 1, got {self.min_block_size}")
    if self.min_block_size > self.max_block_size:
      raise ConfigError(
        f"min_block_size ({self.min_block_size}) must not exceed "
        f"max_block_size ({self.max_block_size})"
      )
    if self.max_steps < 0:
      raise ConfigError(f"max_steps must not be negative, got {self.max_steps}")

  @property
  def cell_count(self) -> int:
    return self.grid_width * self.grid_height

  def to_dict(self) -> dict[str, Any]:
    """Convert to JSON-serializable dict."""
    data = asdict(self)
    data["strategy"] = self.strategy.value
    return data

  @classmethod
  def from_dict(cls, data: dict[str, Any]) -> TilingConfig:
    """Build a config from a dict, falling back to defaults for missing keys."""
    known = {f for f in cls.__dataclass_fields__}
    unknown = set(data) - known
    if unknown:
      raise ConfigError(f"Unknown config keys: {sorted(unknown)}")

    values = dict(data)
    if "strategy" in values and not isinstance(values["strategy"], Strategy):
      try:
        values["strategy"] = Strategy(values["strategy"])
      except ValueError:
        valid = [s.value for s in Strategy]
        raise ConfigError(
          f"Unknown strategy {values['strategy']!r}, expected one of {valid}"
        ) from None
    return cls(**values)


def load_tiling_config(path: Path) -> TilingConfig:
  """Load a tiling config from a JSON file."""
  path = Path(path)
  if not path.exists():
    raise FileNotFoundError(f"Tiling config not found: {path}")

  with open(path) as f:
    data = json.load(f)
  if not isinstance(data, dict):
    raise ConfigError(f"Tiling config must be a JSON object: {path}")
  return TilingConfig.from_dict(data)
