"""
Occupancy grid for the snake body.
"""

import numpy as np


class OccupancyGrid:
    """Flat boolean table marking which cells the body covers.

    Out-of-range coordinates are ignored on writes and read as free, so
    callers probing past the edges never trigger an error.
    """

    def __init__(self, width, height):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.cells = np.zeros(width * height, dtype=bool)

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def set(self, x, y, occupied):
        if self.in_bounds(x, y):
            self.cells[y * self.width + x] = occupied

    def get(self, x, y):
        if self.in_bounds(x, y):
            return bool(self.cells[y * self.width + x])
        return False

    def clear(self):
        self.cells[:] = False

    def count(self):
        """Number of occupied cells"""
        return int(np.count_nonzero(self.cells))

    def as_array(self):
        """Read-only (height, width) view of the cells"""
        view = self.cells.reshape(self.height, self.width)
        view.flags.writeable = False
        return view
