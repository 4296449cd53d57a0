"""
Generation session.

Owns the grid, the random source, the id counter and the active planner, and
steps the planner one committed rectangle at a time:

1. Ask the planner for the next seed; finish as EXHAUSTED if there is none
2. Compute a rectangle and commit it to the grid under the next id
3. Let the planner update its candidate pool
4. Emit the rectangle to listeners
5. Finish as STEP_CAP_REACHED once max_steps rectangles have been placed

Grid and planner state are consistent between steps, so a driver may pause
for as long as it likes between calls to `step()`.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Iterator, Protocol

from block_tiling.config.tiling_config import TilingConfig
from block_tiling.generation.geometry import Rectangle
from block_tiling.generation.grid import Grid
from block_tiling.generation.planner import Planner, create_planner
from block_tiling.generation.random_source import RandomSource

logger = logging.getLogger(__name__)


class SessionState(Enum):
  """Lifecycle of a generation session."""

  IDLE = "idle"
  RUNNING = "running"
  EXHAUSTED = "exhausted"
  STEP_CAP_REACHED = "step_cap_reached"


class FinishReason(Enum):
  """Why a session stopped. Both are normal completions."""

  EXHAUSTED = "exhausted"
  STEP_CAP_REACHED = "step_cap_reached"


class GenerationListener(Protocol):
  """
  Consumer of session events (renderers, recorders).

  Listeners may also define `on_diagnostic(message: str)` to receive
  non-fatal warnings such as clamped block sizes.
  """

  def on_rectangle_placed(self, rect: Rectangle) -> None: ...

  def on_generation_finished(self, reason: FinishReason) -> None: ...


class GenerationSession:
  """A single tiling run over a fresh grid."""

  def __init__(
    self,
    config: TilingConfig,
    listeners: Iterable[GenerationListener] = (),
  ):
    """
    Initialize a session.

    Args:
        config: Validated tiling configuration (validation happens when the
                config is constructed, before any stepping).
        listeners: Receivers for placement and finish events.
    """
    if not isinstance(config, TilingConfig):
      raise TypeError(f"config must be a TilingConfig, got {type(config).__name__}")
    self.config = config
    self.grid = Grid(config.grid_width, config.grid_height)
    self.rng = RandomSource(config.seed)
    self.planner: Planner = create_planner(config, self.rng)
    self.listeners: list[GenerationListener] = list(listeners)

    self.state = SessionState.IDLE
    self.steps_taken = 0
    self.placed: list[Rectangle] = []
    self.finish_reason: FinishReason | None = None
    self._next_id = 0

  @property
  def is_finished(self) -> bool:
    return self.finish_reason is not None

  def add_listener(self, listener: GenerationListener) -> None:
    self.listeners.append(listener)

  def step(self) -> Rectangle | None:
    """
    Place one rectangle.

    Returns the committed rectangle, or None if the session has finished
    (either before or during this call).
    """
    if self.is_finished:
      return None

    if self.state is SessionState.IDLE:
      self.planner.initialize(self.grid)
      self.state = SessionState.RUNNING
      logger.debug(
        f"Starting {self.config.strategy.value} session on "
        f"{self.grid.width}x{self.grid.height} grid (seed={self.config.seed})"
      )

    if self.steps_taken >= self.config.max_steps:
      self._finish(FinishReason.STEP_CAP_REACHED)
      return None

    seed = self.planner.next_candidate()
    if seed is None:
      self._finish(FinishReason.EXHAUSTED)
      return None

    placement = self.planner.compute_rectangle(seed)
    if placement.note:
      self._emit_diagnostic(placement.note)

    rect = Rectangle(
      id=self._next_id,
      x=placement.x,
      y=placement.y,
      width=placement.width,
      height=placement.height,
    )
    self.grid.commit(rect)
    self._next_id += 1
    self.planner.on_committed(rect)
    self.placed.append(rect)

    logger.debug(
      f"Placed block {rect.id} at ({rect.x},{rect.y}) size {rect.width}x{rect.height}"
    )
    for listener in self.listeners:
      listener.on_rectangle_placed(rect)

    self.steps_taken += 1
    if self.steps_taken >= self.config.max_steps:
      self._finish(FinishReason.STEP_CAP_REACHED)

    return rect

  def rectangles(self) -> Iterator[Rectangle]:
    """
    Lazily yield committed rectangles until the session finishes.

    The sequence is finite and cannot be restarted: iterating a finished
    session yields nothing.
    """
    while not self.is_finished:
      rect = self.step()
      if rect is not None:
        yield rect

  def run(self) -> FinishReason:
    """Step until the session finishes and return the reason."""
    for _ in self.rectangles():
      pass
    if self.finish_reason is None:
      raise RuntimeError("Session stopped stepping without a finish reason")
    return self.finish_reason

  def _emit_diagnostic(self, message: str) -> None:
    for listener in self.listeners:
      on_diagnostic = getattr(listener, "on_diagnostic", None)
      if on_diagnostic is not None:
        on_diagnostic(message)

  def _finish(self, reason: FinishReason) -> None:
    self.finish_reason = reason
    self.state = SessionState(reason.value)
    logger.info(
      f"Generation finished ({reason.value}): {len(self.placed)} blocks, "
      f"{self.grid.unassigned_count()} cells unassigned"
    )
    for listener in self.listeners:
      listener.on_generation_finished(reason)
