"""
Seeded pseudo-random source.

Uses the mulberry32 generator with 32-bit wrap-around arithmetic so that a
given integer seed always reproduces the same stream of floats.
"""

from __future__ import annotations

import math
from typing import MutableSequence, TypeVar

T = TypeVar("T")

MASK_32 = 0xFFFFFFFF
MULBERRY_INCREMENT = 0x6D2B79F5
TWO_POW_32 = 4294967296


def _imul(a: int, b: int) -> int:
  """Low 32 bits of a * b."""
  return (a * b) & MASK_32


class RandomSource:
  """Deterministic float/int sampler owned by a single generation session."""

  def __init__(self, seed: int):
    self.seed = seed
    self._state = seed & MASK_32

  def random(self) -> float:
    """Return the next float in [0, 1)."""
    self._state = (self._state + MULBERRY_INCREMENT) & MASK_32
    t = self._state
    t = _imul(t ^ (t >> 15), t | 1)
    t ^= (t + _imul(t ^ (t >> 7), t | 61)) & MASK_32
    return ((t ^ (t >> 14)) & MASK_32) / TWO_POW_32

  def range_int(self, lo: int, hi: int) -> int:
    """
    Return an integer in [lo, hi], inclusive on both ends.

    Computed as round((hi - lo) * random()) + lo with halves rounded up.
    The end values are half as likely as interior values.
    """
    return math.floor((hi - lo) * self.random() + 0.5) + lo

  def shuffle(self, items: MutableSequence[T]) -> None:
    """Shuffle in place (Fisher-Yates, drawing from this source)."""
    for i in range(len(items) - 1, 0, -1):
      j = self.range_int(0, i)
      items[i], items[j] = items[j], items[i]
