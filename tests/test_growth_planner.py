"""
Tests for growth_planner.py

These tests verify growth from seed cells:
- Free-space measurement in both axis orders
- Choosing the larger of the two measurements
- Sizing and centering blocks inside the available span
- Keeping the seed pool in sync with the grid
"""

from block_tiling.generation.geometry import Placement, Point, Rectangle
from block_tiling.generation.grid import Grid
from block_tiling.generation.growth_planner import (
  Extents,
  GrowthPlanner,
  centered_placement,
  find_available_extents,
)
from block_tiling.generation.random_source import RandomSource


class FixedRandom(RandomSource):
  """Random source that always returns the same float."""

  def __init__(self, value: float):
    super().__init__(0)
    self.value = value

  def random(self) -> float:
    return self.value


# =============================================================================
# Extents Tests
# =============================================================================


class TestExtents:
  def test_available_size(self) -> None:
    extents = Extents(x_negative=1, x_positive=2, y_negative=0, y_positive=3)
    assert extents.available_width == 4
    assert extents.available_height == 4
    assert extents.area == 16


class TestFindAvailableExtents:
  def test_empty_grid_capped_by_max_extension(self) -> None:
    grid = Grid(10, 10)
    extents = find_available_extents(grid, Point(5, 5), 3)
    assert extents == Extents(x_negative=3, x_positive=3, y_negative=3, y_positive=3)

  def test_clipped_by_grid_edges(self) -> None:
    grid = Grid(4, 3)
    extents = find_available_extents(grid, Point(0, 0), 10)
    assert extents == Extents(x_negative=0, x_positive=3, y_negative=0, y_positive=2)

  def test_prefers_larger_horizontal_first_area(self) -> None:
    """
    Vertical-first finds a 1x3 column blocked by (1,0); horizontal-first
    finds a 5x2 box below the blocker's row.
    """
    grid = Grid(5, 3)
    grid.commit(Rectangle(id=0, x=1, y=0, width=1, height=1))
    extents = find_available_extents(grid, Point(0, 1), 10)
    assert extents == Extents(x_negative=0, x_positive=4, y_negative=0, y_positive=1)
    assert extents.area == 10

  def test_prefers_larger_vertical_first_area(self) -> None:
    grid = Grid(3, 5)
    grid.commit(Rectangle(id=0, x=0, y=1, width=1, height=1))
    extents = find_available_extents(grid, Point(1, 0), 10)
    assert extents == Extents(x_negative=0, x_positive=1, y_negative=0, y_positive=4)

  def test_tie_prefers_vertical_first(self) -> None:
    """Both passes find area 2; the vertical-first column wins."""
    grid = Grid(2, 2)
    grid.commit(Rectangle(id=0, x=1, y=1, width=1, height=1))
    extents = find_available_extents(grid, Point(0, 0), 5)
    assert extents == Extents(x_negative=0, x_positive=0, y_negative=0, y_positive=1)

  def test_box_is_free(self) -> None:
    """Every cell in the measured box is unassigned."""
    grid = Grid(8, 8)
    grid.commit(Rectangle(id=0, x=2, y=2, width=2, height=1))
    grid.commit(Rectangle(id=1, x=5, y=5, width=1, height=2))
    grid.commit(Rectangle(id=2, x=0, y=6, width=3, height=2))
    for seed in [Point(0, 0), Point(4, 4), Point(7, 0), Point(3, 6)]:
      e = find_available_extents(grid, seed, 8)
      for x in range(seed.x - e.x_negative, seed.x + e.x_positive + 1):
        for y in range(seed.y - e.y_negative, seed.y + e.y_positive + 1):
          assert not grid.is_assigned(x, y), f"seed {seed} box covers ({x},{y})"


# =============================================================================
# Placement Tests
# =============================================================================


class TestCenteredPlacement:
  def test_centered_in_odd_span(self) -> None:
    extents = Extents(x_negative=3, x_positive=3, y_negative=3, y_positive=3)
    assert centered_placement(Point(5, 5), extents, 2, 2) == Placement(4, 4, 2, 2)
    assert centered_placement(Point(5, 5), extents, 3, 3) == Placement(4, 4, 3, 3)

  def test_may_exclude_seed(self) -> None:
    extents = Extents(x_negative=0, x_positive=9, y_negative=0, y_positive=0)
    placement = centered_placement(Point(0, 0), extents, 1, 1)
    assert placement == Placement(5, 0, 1, 1)

  def test_stays_within_span(self) -> None:
    for neg in range(4):
      for pos in range(4):
        extents = Extents(x_negative=neg, x_positive=pos, y_negative=pos, y_positive=neg)
        for size in range(1, extents.available_width + 1):
          p = centered_placement(Point(10, 10), extents, size, size)
          assert p.x >= 10 - neg
          assert p.x + p.width <= 10 + pos + 1
          assert p.y >= 10 - pos
          assert p.y + p.height <= 10 + neg + 1


class TestGrowthPlanner:
  def test_smallest_block(self) -> None:
    grid = Grid(10, 10)
    planner = GrowthPlanner(FixedRandom(0.0), min_block_size=2, max_block_size=3)
    planner.initialize(grid)
    assert planner.compute_rectangle(Point(5, 5)) == Placement(4, 4, 2, 2)

  def test_largest_block(self) -> None:
    grid = Grid(10, 10)
    planner = GrowthPlanner(FixedRandom(0.99), min_block_size=2, max_block_size=3)
    planner.initialize(grid)
    assert planner.compute_rectangle(Point(5, 5)) == Placement(4, 4, 3, 3)

  def test_min_size_clamped_to_available(self) -> None:
    grid = Grid(1, 1)
    planner = GrowthPlanner(FixedRandom(0.5), min_block_size=3, max_block_size=5)
    planner.initialize(grid)
    assert planner.compute_rectangle(Point(0, 0)) == Placement(0, 0, 1, 1)

  def test_pool_holds_every_cell_once(self) -> None:
    grid = Grid(4, 5)
    planner = GrowthPlanner(RandomSource(1), min_block_size=1, max_block_size=2)
    planner.initialize(grid)
    assert len(planner.pool) == 20
    assert set(planner.pool) == {Point(x, y) for x in range(4) for y in range(5)}

  def test_pool_skips_assigned_cells(self) -> None:
    grid = Grid(3, 3)
    grid.commit(Rectangle(id=0, x=0, y=0, width=3, height=1))
    planner = GrowthPlanner(RandomSource(1), min_block_size=1, max_block_size=2)
    planner.initialize(grid)
    assert len(planner.pool) == 6

  def test_on_committed_skips_covered_cells(self) -> None:
    grid = Grid(3, 3)
    planner = GrowthPlanner(RandomSource(1), min_block_size=1, max_block_size=2)
    planner.initialize(grid)
    rect = Rectangle(id=0, x=0, y=0, width=2, height=2)
    grid.commit(rect)
    planner.on_committed(rect)
    seed = planner.next_candidate()
    assert seed is not None
    assert not rect.contains(seed)
    assert not grid.is_assigned(seed.x, seed.y)

  def test_next_candidate_empty_pool(self) -> None:
    grid = Grid(1, 1)
    planner = GrowthPlanner(RandomSource(1), min_block_size=1, max_block_size=1)
    planner.initialize(grid)
    assert planner.next_candidate() == Point(0, 0)
    rect = Rectangle(id=0, x=0, y=0, width=1, height=1)
    grid.commit(rect)
    planner.on_committed(rect)
    assert planner.next_candidate() is None

  def test_seed_kept_when_not_covered(self) -> None:
    grid = Grid(10, 1)
    planner = GrowthPlanner(FixedRandom(0.0), min_block_size=1, max_block_size=9)
    planner.initialize(grid)
    # A constant 0.0 draw rotates the pool left by one
    assert planner.pool == [Point(x, 0) for x in range(1, 10)] + [Point(0, 0)]

    placement = planner.compute_rectangle(Point(0, 0))
    assert placement == Placement(5, 0, 1, 1)
    rect = Rectangle(id=0, x=5, y=0, width=1, height=1)
    grid.commit(rect)
    planner.on_committed(rect)
    assert planner.next_candidate() == Point(1, 0)

    rect = Rectangle(id=1, x=1, y=0, width=4, height=1)
    grid.commit(rect)
    planner.on_committed(rect)
    assert planner.next_candidate() == Point(6, 0)
    assert not grid.is_assigned(0, 0)

  def test_seed_order_is_first_unassigned_in_shuffled_order(self) -> None:
    """Each seed is the first pooled cell that is still unassigned."""
    grid = Grid(9, 7)
    planner = GrowthPlanner(RandomSource(5), min_block_size=1, max_block_size=3)
    planner.initialize(grid)
    shuffled = list(planner.pool)

    remaining = list(shuffled)
    seeds: list[Point] = []
    next_id = 0
    while (seed := planner.next_candidate()) is not None:
      assert remaining, "planner offered a seed after every cell was assigned"
      assert seed == remaining[0]
      seeds.append(seed)
      p = planner.compute_rectangle(seed)
      rect = Rectangle(id=next_id, x=p.x, y=p.y, width=p.width, height=p.height)
      next_id += 1
      grid.commit(rect)
      planner.on_committed(rect)
      remaining = [c for c in remaining if not rect.contains(c)]

    assert remaining == []
    assert grid.is_full()
    # Seeds appear in shuffled order, a seed may repeat until it is covered
    positions = [shuffled.index(s) for s in seeds]
    assert positions == sorted(positions)
