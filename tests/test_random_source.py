"""
Tests for random_source.py

These tests verify the seeded random source:
- Reproducible streams from an integer seed
- Inclusive integer ranges using half-up rounding
- In-place shuffling
"""

from block_tiling.generation.random_source import RandomSource


class FixedRandom(RandomSource):
  """Random source that always returns the same float."""

  def __init__(self, value: float):
    super().__init__(0)
    self.value = value

  def random(self) -> float:
    return self.value


class TestRandom:
  def test_same_seed_same_stream(self) -> None:
    a = RandomSource(3)
    b = RandomSource(3)
    assert [a.random() for _ in range(100)] == [b.random() for _ in range(100)]

  def test_different_seeds_differ(self) -> None:
    a = RandomSource(1)
    b = RandomSource(2)
    assert [a.random() for _ in range(10)] != [b.random() for _ in range(10)]

  def test_values_in_unit_interval(self) -> None:
    rng = RandomSource(42)
    for _ in range(1000):
      v = rng.random()
      assert 0.0 <= v < 1.0

  def test_seed_wraps_to_32_bits(self) -> None:
    a = RandomSource(3)
    b = RandomSource(3 + 2**32)
    assert [a.random() for _ in range(10)] == [b.random() for _ in range(10)]

  def test_negative_seed(self) -> None:
    rng = RandomSource(-5)
    assert 0.0 <= rng.random() < 1.0


class TestRangeInt:
  def test_inclusive_bounds(self) -> None:
    rng = RandomSource(7)
    values = {rng.range_int(3, 6) for _ in range(2000)}
    assert values == {3, 4, 5, 6}

  def test_equal_bounds(self) -> None:
    rng = RandomSource(7)
    assert all(rng.range_int(4, 4) == 4 for _ in range(50))

  def test_rounds_half_up(self) -> None:
    """2.5 rounds to 3, unlike Python's round()."""
    assert FixedRandom(0.5).range_int(0, 5) == 3
    assert FixedRandom(0.5).range_int(10, 15) == 13

  def test_low_and_high_ends(self) -> None:
    assert FixedRandom(0.0).range_int(2, 9) == 2
    assert FixedRandom(0.999).range_int(2, 9) == 9
    assert FixedRandom(0.07).range_int(2, 9) == 2
    assert FixedRandom(0.08).range_int(2, 9) == 3


class TestShuffle:
  def test_is_permutation(self) -> None:
    rng = RandomSource(11)
    items = list(range(50))
    rng.shuffle(items)
    assert sorted(items) == list(range(50))

  def test_deterministic(self) -> None:
    a, b = list(range(30)), list(range(30))
    RandomSource(5).shuffle(a)
    RandomSource(5).shuffle(b)
    assert a == b

  def test_short_lists(self) -> None:
    rng = RandomSource(1)
    empty: list[int] = []
    rng.shuffle(empty)
    assert empty == []
    single = [1]
    rng.shuffle(single)
    assert single == [1]
