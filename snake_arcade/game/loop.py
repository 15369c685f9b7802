"""
Frame-driven game loop.

Logical ticks run on the session's cadence no matter how often frames
arrive: a late frame catches up with several ticks, an early one runs none.
The session never announces changes itself, so the loop diffs score and
game-over state after each frame and calls the listeners.
"""

import logging

logger = logging.getLogger(__name__)

SCORE_MULTIPLIER = 9


def display_score(score):
    """Score shown to the player"""
    return score * SCORE_MULTIPLIER


def faster_cadence(cadence):
    """Cadence after a point is scored, about ten percent quicker"""
    return cadence - max(1, cadence * 0.1)


def faster_starfield(speed):
    """Starfield speed after a point is scored"""
    return speed + max(0.001, speed * 0.01)


class GameLoop:
    """Runs session ticks from frame timestamps and notifies listeners

    Args:
        game: SnakeGame to drive
        on_score_change: called with the new score when it changes
        on_game_over: called once when the game ends
    """

    def __init__(self, game, on_score_change=None, on_game_over=None):
        self.game = game
        self.on_score_change = on_score_change
        self.on_game_over = on_game_over
        self.reset()

    def reset(self):
        self._reference_ms = None
        self._last_score = self.game.score
        self._reported_game_over = self.game.game_over

    def advance(self, now_ms):
        """Run every tick due by now_ms and return how many ran"""
        ticks = 0
        if self._reference_ms is None:
            self._reference_ms = now_ms
        else:
            while now_ms - self._reference_ms >= self.game.cadence:
                self._reference_ms += self.game.cadence
                self.game.update()
                ticks += 1

        self._notify()
        return ticks

    def _notify(self):
        score = self.game.score
        if score != self._last_score:
            self._last_score = score
            if self.on_score_change is not None:
                self.on_score_change(score)

        if self.game.game_over and not self._reported_game_over:
            self._reported_game_over = True
            logger.info("Game over reported after score %d", score)
            if self.on_game_over is not None:
                self.on_game_over()
