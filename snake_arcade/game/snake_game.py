"""
Snake game session.

Owns one snake and one food item, runs the per-tick update and exposes a
read-only snapshot for renderers.
"""

import logging
import math
from collections import namedtuple

import numpy as np

from ..config import GameConfig
from .snake import Snake

logger = logging.getLogger(__name__)

GameSnapshot = namedtuple("GameSnapshot", ["segments", "food", "score", "game_over", "width", "height"])


class Food:
    """Single food item on the grid"""

    def __init__(self, x=-1, y=-1):
        self.x = x
        self.y = y

    def set_position(self, x, y):
        self.x = x
        self.y = y

    @property
    def position(self):
        return self.x, self.y


class SnakeGame:
    """Single-player snake session driven one tick at a time"""

    def __init__(self, config=None, rng=None):
        self.config = config or GameConfig()
        self.width = self.config.width
        self.height = self.config.height
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)

        self.snake = Snake(
            self.width,
            self.height,
            start=self.config.start,
            initial_length=self.config.initial_length,
            collision_order=self.config.collision_order,
        )
        self.food = Food()

        self.set_cadence(self.config.cadence_ms)
        self.reset()

    def reset(self):
        """Start over; the only way out of game over"""
        start_x, start_y = self.config.start
        self.snake.initialize(start_x, start_y, self.config.initial_length)
        self.food.set_position(*self.config.food_start)
        self._score = 0
        self._game_over = False
        logger.info("Game reset, snake at (%d, %d)", start_x, start_y)

    @property
    def score(self):
        return self._score

    @property
    def game_over(self):
        return self._game_over

    @property
    def cadence(self):
        """Minimum milliseconds between two steps"""
        return self._cadence

    @property
    def food_position(self):
        return self.food.position

    def set_cadence(self, ms):
        if not math.isfinite(ms):
            logger.warning("Ignoring non-finite cadence %r, using %d ms", ms, self.config.cadence_ms)
            ms = self.config.cadence_ms
        self._cadence = min(max(ms, self.config.min_cadence_ms), self.config.max_cadence_ms)

    def set_direction(self, direction):
        """Forward a Direction to the snake as pending input"""
        dx, dy = direction.value
        self.snake.set_desired_direction(dx, dy)

    def _place_food(self):
        # Uniform over the level; may land on the body
        x = int(self.rng.integers(0, self.width))
        y = int(self.rng.integers(0, self.height))
        self.food.set_position(x, y)

    def update(self):
        """Run one tick: move, detect game over, eat"""
        if self._game_over:
            return

        if not self.snake.step():
            self._game_over = True
            logger.info("Game over with score %d", self._score)

        if self.snake.head_position == self.food.position:
            self.snake.grow()
            self._place_food()
            self._score += 1
            logger.debug("Food eaten, score %d, next food at %s", self._score, self.food.position)

    def snapshot(self):
        """Immutable view of everything a renderer needs"""
        return GameSnapshot(
            segments=tuple(self.snake.positions()),
            food=self.food.position,
            score=self._score,
            game_over=self._game_over,
            width=self.width,
            height=self.height,
        )
