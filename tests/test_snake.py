import random
from collections import deque

import pytest

from dsdrills.snake import (
    BOTTOM_WALL_Y,
    DEFAULT_FOOD_SCORE,
    DEFAULT_SLEEP_MS,
    RIGHT_WALL_X,
    SLOWEST_FOOD_SCORE,
    SLOWEST_MS,
    START_LENGTH,
    START_X,
    START_Y,
    Direction,
    SnakeGame,
    State,
)

FAR_AWAY = (2, 24)


def make_game(seed=1):
    game = SnakeGame(random.Random(seed))
    game.food = FAR_AWAY
    return game


def test_initial_state():
    game = SnakeGame(random.Random(0))
    assert game.head == (32, 5)
    assert game.body[-1] == (START_X, START_Y)
    assert len(game.body) == START_LENGTH
    assert game.direction is Direction.RIGHT
    assert game.score == 0
    assert game.food_score == DEFAULT_FOOD_SCORE
    assert game.sleep_time == DEFAULT_SLEEP_MS
    assert game.state is State.OK


@pytest.mark.parametrize("seed", range(40))
def test_food_is_on_free_even_cell(seed):
    game = SnakeGame(random.Random(seed))
    x, y = game.food
    assert x % 2 == 0
    assert 2 <= x <= 54
    assert 1 <= y <= 25
    assert game.food not in game.body


def test_spawn_food_raises_when_board_full():
    game = make_game()
    game.body = deque((x, y) for x in range(2, 55, 2) for y in range(1, 26))
    with pytest.raises(RuntimeError):
        game.spawn_food()


def test_turn_rejects_reversal():
    game = make_game()
    assert game.turn(Direction.LEFT) is False
    assert game.direction is Direction.RIGHT
    assert game.turn(Direction.UP) is True
    assert game.direction is Direction.UP
    assert game.turn(Direction.DOWN) is False


def test_step_moves_without_growing():
    game = make_game()
    x, y = game.head
    tail = game.body[-1]
    assert game.step() is False
    assert game.head == (x + 2, y)
    assert len(game.body) == START_LENGTH
    assert tail not in game.body


def test_step_eats_food():
    game = make_game()
    x, y = game.head
    game.food = (x + 2, y)
    assert game.step() is True
    assert game.head == (x + 2, y)
    assert len(game.body) == START_LENGTH + 1
    assert game.score == DEFAULT_FOOD_SCORE
    assert game.food not in game.body


def test_hitting_right_wall():
    game = make_game()
    while game.state is State.OK:
        game.step()
    assert game.state is State.KILL_BY_WALL
    assert game.head[0] == RIGHT_WALL_X
    assert game.end_message() == "您撞到了墙，游戏结束！"


def test_step_after_game_over_raises():
    game = make_game()
    game.quit()
    with pytest.raises(RuntimeError):
        game.step()


def test_biting_self():
    game = make_game()
    for direction in (Direction.UP, Direction.LEFT, Direction.DOWN):
        assert game.turn(direction)
        game.step()
    assert game.state is State.KILL_BY_SELF
    assert game.end_message() == "您吃到了自己，游戏结束！"


def test_speed_up_once():
    game = make_game()
    assert game.speed_up() is True
    assert game.sleep_time == 170
    assert game.food_score == 12


def test_speed_up_stops_at_limit():
    game = make_game()
    while game.speed_up():
        pass
    floor = game.sleep_time
    assert floor < 50
    assert game.speed_up() is False
    assert game.sleep_time == floor


def test_slow_down_reaches_slowest():
    game = make_game()
    while game.slow_down():
        pass
    assert game.sleep_time == SLOWEST_MS
    assert game.food_score == SLOWEST_FOOD_SCORE
    assert game.slow_down() is False


def test_speed_changes_are_reversible():
    game = make_game()
    game.speed_up()
    game.slow_down()
    assert game.sleep_time == DEFAULT_SLEEP_MS
    assert game.food_score == DEFAULT_FOOD_SCORE


def test_quit_message():
    game = make_game()
    assert game.end_message() == ""
    game.quit()
    assert game.state is State.END_NORMAL
    assert game.end_message() == "您退出了游戏，游戏结束！"


def test_wall_cells_frame_board():
    walls = make_game().wall_cells()
    assert (0, 0) in walls
    assert (RIGHT_WALL_X, 0) in walls
    assert (0, BOTTOM_WALL_Y) in walls
    assert (RIGHT_WALL_X, BOTTOM_WALL_Y) in walls
    assert all(x in (0, RIGHT_WALL_X) or y in (0, BOTTOM_WALL_Y) for x, y in walls)
    assert not walls & set(make_game().body)