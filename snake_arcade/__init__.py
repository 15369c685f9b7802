"""
Snake Arcade

Grid snake with wrap-around movement, a starfield backdrop and a score readout.
"""

from .config import GameConfig
from .game import SnakeGame, GameLoop, Direction

__all__ = ['GameConfig', 'SnakeGame', 'GameLoop', 'Direction']

__version__ = "1.0.0"
