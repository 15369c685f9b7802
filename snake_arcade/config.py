"""
Settings for the snake arcade.

Colours are plain RGB tuples; everything tunable per run lives on GameConfig.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

# Level colours
BACKGROUND = (0, 0, 0)
GRID_COLOR = (85, 85, 18)
APPLE_COLOR = (255, 18, 18)
WHITE = (255, 255, 255)

# Snake palettes: body, head, tail
ALIVE_PALETTE = ((18, 204, 22), (18, 255, 22), (18, 150, 22))
DEAD_PALETTE = ((204, 18, 22), (255, 18, 22), (150, 18, 22))


@dataclass
class GameConfig:
    width: int = 25
    height: int = 25
    tile_size: int = 20
    start: Tuple[int, int] = (5, 5)
    initial_length: int = 5
    food_start: Tuple[int, int] = (10, 10)
    cadence_ms: int = 130
    min_cadence_ms: int = 5
    max_cadence_ms: int = 1000
    collision_order: str = "release_tail_first"
    seed: Optional[int] = None

    # Starfield backdrop
    star_count: int = 100
    star_speed: float = 0.25
    star_znear: float = 1.0
    star_zfar: float = 10.0

    fps: int = 60

    @property
    def screen_size(self):
        return self.width * self.tile_size, self.height * self.tile_size
