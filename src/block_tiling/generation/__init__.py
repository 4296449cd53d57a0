"""
Block tiling generation.

This package partitions a fixed-size grid into non-overlapping rectangles
that together cover every cell, including:
- Seeded random sources and the occupancy grid
- Growth-from-seeds and top-left-frontier planners
- Generation sessions that commit and emit rectangles one step at a time
"""
