#!/usr/bin/env python3
"""
Snake Arcade Demo

Playable snake on a starfield. Arrow keys or WASD steer, R restarts,
Esc or closing the window quits.
"""

import argparse
import logging

import pygame

from .config import GameConfig
from .game import GameLoop, SnakeGame
from .game.loop import display_score, faster_cadence, faster_starfield
from .render import draw_frame
from .starfield import Starfield

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_LEFT: (-1, 0),
    pygame.K_a: (-1, 0),
    pygame.K_RIGHT: (1, 0),
    pygame.K_d: (1, 0),
    pygame.K_UP: (0, -1),
    pygame.K_w: (0, -1),
    pygame.K_DOWN: (0, 1),
    pygame.K_s: (0, 1),
}


class Arcade:
    """Wires the session, the loop and the starfield together"""

    def __init__(self, config):
        self.config = config
        self.game = SnakeGame(config)
        width_px, height_px = config.screen_size
        self.starfield = Starfield(
            count=config.star_count,
            speed=config.star_speed,
            znear=config.star_znear,
            zfar=config.star_zfar,
            width=width_px,
            height=height_px,
        )
        self.loop = GameLoop(self.game, on_score_change=self.score_changed, on_game_over=self.game_ended)
        self.shown_score = 0

    def score_changed(self, score):
        self.shown_score = display_score(score)
        self.game.set_cadence(faster_cadence(self.game.cadence))
        self.starfield.set_speed(faster_starfield(self.starfield.speed))
        logger.debug("Score %d, cadence now %.1f ms", score, self.game.cadence)

    def game_ended(self):
        self.starfield.set_speed(0)

    def restart(self):
        self.game.reset()
        self.game.set_cadence(self.config.cadence_ms)
        self.starfield.set_speed(self.config.star_speed)
        self.loop.reset()
        self.shown_score = 0

    def handle_key(self, key):
        """Returns False when the player asked to quit"""
        if key == pygame.K_ESCAPE:
            return False
        if key == pygame.K_r:
            self.restart()
        elif key in KEY_DIRECTIONS:
            self.game.snake.set_desired_direction(*KEY_DIRECTIONS[key])
        return True


def run(config):
    """Open the window and play until the player quits"""
    pygame.init()
    window = pygame.display.set_mode(config.screen_size)
    pygame.display.set_caption("Snake Arcade")
    clock = pygame.time.Clock()
    font = pygame.font.Font(None, 32)

    arcade = Arcade(config)
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                running = arcade.handle_key(event.key)

        now_ms = pygame.time.get_ticks()
        arcade.loop.advance(now_ms)
        arcade.starfield.update(now_ms)

        draw_frame(window, arcade.game.snapshot(), arcade.starfield, config.tile_size,
                   font=font, shown_score=arcade.shown_score)
        pygame.display.flip()
        clock.tick(config.fps)

    pygame.quit()
    return arcade.game


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play snake on a starfield")
    parser.add_argument("--width", type=int, default=GameConfig.width, help="Level width in cells")
    parser.add_argument("--height", type=int, default=GameConfig.height, help="Level height in cells")
    parser.add_argument("--tile-size", type=int, default=GameConfig.tile_size, help="Cell size in pixels")
    parser.add_argument("--cadence", type=int, default=GameConfig.cadence_ms,
                        help="Milliseconds between snake steps")
    parser.add_argument("--collision-order", choices=["release_tail_first", "check_first"],
                        default=GameConfig.collision_order,
                        help="Release the tail cell before or after the collision test")
    parser.add_argument("--stars", type=int, default=GameConfig.star_count, help="Number of stars")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    return parser.parse_args(argv)


def main(argv=None):
    """Main demo function"""
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    config = GameConfig(
        width=args.width,
        height=args.height,
        tile_size=args.tile_size,
        cadence_ms=args.cadence,
        collision_order=args.collision_order,
        star_count=args.stars,
        seed=args.seed,
    )

    try:
        game = run(config)
    except KeyboardInterrupt:
        print("\n\nDemo interrupted by user.")
        return

    print("\nGame Over!" if game.game_over else "\nGame closed.")
    print(f"Final Score: {display_score(game.score)} ({game.score} food, length {len(game.snake)})")


if __name__ == "__main__":
    main()
