"""
Pygame drawing for the snake arcade.

Everything here reads a GameSnapshot or a Starfield and paints onto a
Surface; nothing mutates game state.
"""

import pygame

from .config import (ALIVE_PALETTE, APPLE_COLOR, BACKGROUND, DEAD_PALETTE,
                     GRID_COLOR, WHITE)

STAR_RADIUS = 2


def draw_starfield(surface, starfield):
    """Draw stars with brightness fading towards the far plane"""
    xs, ys, alphas = starfield.project()
    for x, y, alpha in zip(xs, ys, alphas):
        shade = int(255 * min(max(alpha, 0.0), 1.0))
        pygame.draw.circle(surface, (shade, shade, shade), (int(x), int(y)), STAR_RADIUS)


def draw_node(surface, position, tile_size, color):
    x, y = position
    pygame.draw.rect(surface, color, pygame.Rect(x * tile_size, y * tile_size, tile_size, tile_size))


def draw_level(surface, snapshot, tile_size):
    """Draw grid lines, food and the snake (body, then tail, then head)"""
    width_px = snapshot.width * tile_size
    height_px = snapshot.height * tile_size

    # Draw grid
    for i in range(snapshot.width + 1):
        pygame.draw.line(surface, GRID_COLOR, (i * tile_size, 0), (i * tile_size, height_px), 1)
    for i in range(snapshot.height + 1):
        pygame.draw.line(surface, GRID_COLOR, (0, i * tile_size), (width_px, i * tile_size), 1)

    draw_node(surface, snapshot.food, tile_size, APPLE_COLOR)

    body_color, head_color, tail_color = DEAD_PALETTE if snapshot.game_over else ALIVE_PALETTE
    segments = snapshot.segments
    for position in segments[1:-1]:
        draw_node(surface, position, tile_size, body_color)
    draw_node(surface, segments[0], tile_size, tail_color)
    draw_node(surface, segments[-1], tile_size, head_color)


def draw_hud(surface, font, shown_score, game_over):
    """Score readout in the corner and a banner once the game is over"""
    score_text = font.render(f"Score: {shown_score}", True, WHITE)
    surface.blit(score_text, (10, 10))

    if game_over:
        banner = font.render("Game Over", True, WHITE)
        rect = banner.get_rect(center=(surface.get_width() // 2, surface.get_height() // 2))
        surface.blit(banner, rect)


def draw_frame(surface, snapshot, starfield, tile_size, font=None, shown_score=0):
    """Paint one complete frame"""
    surface.fill(BACKGROUND)
    draw_starfield(surface, starfield)
    draw_level(surface, snapshot, tile_size)
    if font is not None:
        draw_hud(surface, font, shown_score, snapshot.game_over)
