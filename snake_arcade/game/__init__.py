"""
Snake Game Module

This module contains the core game logic: the segment chain, the occupancy
grid, the snake engine, the game session and the frame-driven loop.
"""

from .chain import NIL, SegmentChain
from .grid import OccupancyGrid
from .snake import Snake, Direction, CollisionOrder, wrap
from .snake_game import SnakeGame, Food, GameSnapshot
from .loop import GameLoop

__all__ = [
    'NIL', 'SegmentChain', 'OccupancyGrid',
    'Snake', 'Direction', 'CollisionOrder', 'wrap',
    'SnakeGame', 'Food', 'GameSnapshot', 'GameLoop',
]
