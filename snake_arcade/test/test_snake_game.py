import typing

import pytest

from snake_arcade.config import GameConfig
from snake_arcade.game.snake import Direction
from snake_arcade.game.snake_game import SnakeGame


class FixedRng:
    """Stands in for numpy's Generator, handing out preset values"""

    def __init__(self, values):
        self.values = iter(values)

    def integers(self, low, high):
        return next(self.values)


def end_game(game):
    # Fold the body so the next step runs into the neck
    game.snake.initialize(3, 0, 1)
    for x in (2, 1, 0):
        game.snake.grow(x, 0)
    game.update()


def test_initial_state():
    game = SnakeGame()
    assert game.score == 0
    assert not game.game_over
    assert game.cadence == 130
    assert game.food_position == (10, 10)
    assert len(game.snake) == 5
    assert game.snake.head_position == (5, 5)


@pytest.mark.parametrize("requested, expected", [(1, 5), (5, 5), (200, 200), (1000, 1000), (5000, 1000)])
def test_set_cadence_clamps(requested, expected):
    game = SnakeGame()
    game.set_cadence(requested)
    assert game.cadence == expected


def test_eating_food():
    game = SnakeGame(rng=FixedRng([3, 4]))
    game.food.set_position(6, 5)
    game.update()
    assert game.score == 1
    assert len(game.snake) == 6
    assert game.food_position == (3, 4)
    assert game.snake.head_position == (6, 5)
    assert not game.game_over


def test_food_may_land_on_body():
    game = SnakeGame(rng=FixedRng([5, 5]))
    game.food.set_position(6, 5)
    game.update()
    assert game.food_position == (5, 5)
    assert game.snake.is_occupied(5, 5)


def test_update_without_food_only_moves():
    game = SnakeGame()
    game.update()
    assert game.score == 0
    assert len(game.snake) == 5
    assert game.food_position == (10, 10)
    assert game.snake.head_position == (6, 5)


def test_food_stays_in_bounds():
    game = SnakeGame(GameConfig(seed=7))
    for _ in range(10):
        x, y = game.snake.head_position
        game.food.set_position((x + 1) % game.width, y)
        game.update()
        fx, fy = game.food_position
        assert 0 <= fx < game.width
        assert 0 <= fy < game.height
    assert game.score == 10
    assert len(game.snake) == 15
    assert not game.game_over


def test_set_direction():
    game = SnakeGame()
    game.set_direction(Direction.DOWN)
    game.update()
    assert game.snake.head_position == (5, 6)


def test_collision_ends_game():
    game = SnakeGame()
    end_game(game)
    assert game.game_over


def test_game_over_freezes_updates():
    game = SnakeGame()
    end_game(game)
    positions = game.snake.positions()
    for _ in range(5):
        game.update()
    assert game.game_over
    assert game.snake.positions() == positions
    assert game.score == 0


def test_reset_clears_game_over():
    game = SnakeGame()
    end_game(game)
    game.reset()
    assert not game.game_over
    assert game.score == 0
    assert game.food_position == (10, 10)
    assert game.snake.positions() == [(5, 5)] * 5


def test_snapshot():
    game = SnakeGame(GameConfig(width=12, height=11, start=(2, 3)))
    game.update()
    snapshot = game.snapshot()
    assert snapshot.segments == ((2, 3), (2, 3), (2, 3), (2, 3), (3, 3))
    assert snapshot.food == (10, 10)
    assert snapshot.score == 0
    assert not snapshot.game_over
    assert (snapshot.width, snapshot.height) == (12, 11)


def test_check_first_order_from_config():
    game = SnakeGame(GameConfig(collision_order="check_first"))
    game.snake.initialize(0, 0, 1)
    for x in range(1, 25):
        game.snake.grow(x, 0)
    game.update()
    assert game.game_over


def test_food_on_fatal_cell_is_still_eaten():
    game = SnakeGame(rng=FixedRng([3, 4]))
    game.food.set_position(1, 0)
    end_game(game)
    assert game.game_over
    assert game.score == 1
    assert len(game.snake) == 5
    assert game.food_position == (3, 4)


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
def test_set_cadence_ignores_non_finite(bad):
    game = SnakeGame()
    game.set_cadence(300)
    game.set_cadence(bad)
    assert game.cadence == 130


def test_config_annotations():
    hints = typing.get_type_hints(GameConfig)
    assert hints["seed"] == typing.Optional[int]
    assert hints["start"] == typing.Tuple[int, int]
    assert hints["food_start"] == typing.Tuple[int, int]
