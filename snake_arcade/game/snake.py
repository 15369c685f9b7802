"""
Snake movement and collision engine.

The body is a chain of segments from tail to head. Every step recycles the
tail segment as the new head, so steady-state movement allocates nothing.
Self-collision is detected through an occupancy grid rather than by
scanning the body.
"""

import logging
from enum import Enum

from .chain import NIL, SegmentChain
from .grid import OccupancyGrid

logger = logging.getLogger(__name__)

INITIAL_LENGTH = 5


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


class CollisionOrder(Enum):
    """When the tail's cell is released relative to the collision test.

    RELEASE_TAIL_FIRST lets the head enter the cell the tail leaves on the
    same tick. CHECK_FIRST tests the candidate cell before the tail moves,
    which forbids chasing the tail that closely.
    """
    RELEASE_TAIL_FIRST = "release_tail_first"
    CHECK_FIRST = "check_first"


def wrap(value, lo, hi):
    """Floored modulo of value into [lo, hi)"""
    return lo + (value - lo) % (hi - lo)


def _sign(value):
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


class Snake:
    """Grid-bounded snake body with wrap-around movement"""

    def __init__(self, width, height, start=(5, 5), initial_length=INITIAL_LENGTH,
                 collision_order=CollisionOrder.RELEASE_TAIL_FIRST):
        self.width = width
        self.height = height
        self.collision_order = CollisionOrder(collision_order)
        self.initial_length = initial_length

        self.chain = SegmentChain()
        self.grid = OccupancyGrid(width, height)

        self.tail = NIL
        self.head = NIL
        self._length = 0

        # Latched direction and pending input, one value per axis
        self.dir_x = 0
        self.dir_y = 0
        self.move_x = 0
        self.move_y = 0

        self.initialize(start[0], start[1], initial_length)

    def __len__(self):
        return self._length

    def initialize(self, start_x, start_y, initial_length=None):
        """Rebuild the body with every segment on the start cell, facing right"""
        if initial_length is None:
            initial_length = self.initial_length
        if initial_length < 1:
            raise ValueError(f"Initial length must be at least 1, got {initial_length}")
        if not self.grid.in_bounds(start_x, start_y):
            raise ValueError(
                f"Start ({start_x}, {start_y}) is outside the {self.width}x{self.height} level"
            )

        self.chain.clear()
        self.grid.clear()
        self.tail = NIL
        self.head = NIL
        self._length = 0

        for _ in range(initial_length):
            self.grow(start_x, start_y)

        self.move_x = 0
        self.move_y = 0
        self.dir_x = 1
        self.dir_y = 0

    @property
    def direction(self):
        """Latched (dx, dy) used by the next step"""
        return self.dir_x, self.dir_y

    @property
    def head_position(self):
        return self.chain.position(self.head)

    @property
    def tail_position(self):
        return self.chain.position(self.tail)

    def positions(self):
        """Segment coordinates from tail to head"""
        return [self.chain.position(index) for index in self.chain.walk(self.tail)]

    def is_occupied(self, x, y):
        return self.grid.get(x, y)

    def set_desired_direction(self, dx, dy):
        """Record player input; the last call before a step wins"""
        self.move_x = _sign(dx)
        self.move_y = _sign(dy)

    def _latch_direction(self, dx, dy):
        # An axis only accepts input while it is at rest, which rules out
        # reversing straight into the neck.
        if dx != 0 and self.dir_x == 0:
            self.dir_y = 0
            self.dir_x = dx

        if dy != 0 and self.dir_y == 0:
            self.dir_x = 0
            self.dir_y = dy

    def grow(self, x=None, y=None):
        """Add a segment after the head, on the head's cell unless given one"""
        if (x is None) != (y is None):
            raise ValueError(f"Give both coordinates or neither, got ({x}, {y})")
        if x is None:
            if self.head == NIL:
                raise ValueError("Cannot grow an empty body without a coordinate")
            x, y = self.chain.position(self.head)

        segment = self.chain.allocate()
        if self.head != NIL:
            self.chain.insert_after(segment, self.head)
        else:
            self.tail = segment

        self.chain.set_position(segment, x, y)
        self.grid.set(x, y, True)

        self.head = segment
        self._length += 1
        logger.debug("Snake grew to %d segments at (%d, %d)", self._length, x, y)

    def step(self):
        """Advance one cell; returns False when the head hit the body"""
        self._latch_direction(self.move_x, self.move_y)
        self.move_x = 0
        self.move_y = 0

        head_x, head_y = self.chain.position(self.head)
        x = wrap(head_x + self.dir_x, 0, self.width)
        y = wrap(head_y + self.dir_y, 0, self.height)

        if self.collision_order is CollisionOrder.CHECK_FIRST:
            collision = self.grid.get(x, y)

        tail_x, tail_y = self.chain.position(self.tail)
        self.grid.set(tail_x, tail_y, False)

        if self.collision_order is CollisionOrder.RELEASE_TAIL_FIRST:
            collision = self.grid.get(x, y)

        if self.tail == self.head:
            self.chain.set_position(self.head, x, y)
        else:
            # Old tail becomes the new head
            recycled = self.tail
            self.tail = self.chain.next_of(recycled)
            self.chain.insert_after(recycled, self.head)
            self.chain.set_position(recycled, x, y)
            self.head = recycled

        # The new tail may share the released cell when segments are stacked
        new_tail_x, new_tail_y = self.chain.position(self.tail)
        self.grid.set(new_tail_x, new_tail_y, True)
        self.grid.set(x, y, True)

        if collision:
            logger.debug("Self-collision at (%d, %d)", x, y)
        return not collision
