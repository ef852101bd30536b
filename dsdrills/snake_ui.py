"""Terminal front end for the snake game."""

from __future__ import annotations

import argparse
import curses
import random
import time
from typing import Any

from .snake import (
    BODY,
    BOTTOM_WALL_Y,
    FOOD,
    RIGHT_WALL_X,
    WALL,
    Direction,
    SnakeGame,
    State,
)

HELP_X = 64
END_POS = (12, 24)
AGAIN_POS = (15, 25)
ESCAPE = 27
SPACE = ord(" ")
PRESS_ANY_KEY = "请按任意键继续. . ."
INSTRUCTIONS = "用↑ . ↓ . ← . → 分别控制蛇的移动， F3为加速，F4为减速"

_TURN_KEYS = {
    curses.KEY_UP: Direction.UP,
    curses.KEY_DOWN: Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT,
    curses.KEY_RIGHT: Direction.RIGHT,
}


def render_board(game: SnakeGame) -> list[str]:
    """Return the board as text rows indexed by y, columns indexed by x."""
    width = RIGHT_WALL_X + 1
    grid = [[" "] * width for _ in range(BOTTOM_WALL_Y + 1)]

    def put(cell: tuple[int, int], char: str) -> None:
        x, y = cell
        if 0 <= y < len(grid) and 0 <= x < width:
            grid[y][x] = char

    for cell in game.wall_cells():
        put(cell, WALL)
    put(game.food, FOOD)
    for cell in game.body:
        put(cell, BODY)
    return ["".join(row) for row in grid]


def help_lines(game: SnakeGame) -> list[tuple[int, str]]:
    """Return (row, text) pairs for the side panel."""
    return [
        (10, f"得分: {game.score:2d}"),
        (11, f"每个食物得分: {game.food_score:2d}"),
        (14, "游戏说明："),
        (15, "不能穿墙，不能咬到自己"),
        (16, "用↑ . ↓ . ← . → 分别控制蛇的移动"),
        (17, "F3为加速，F4为减速"),
        (18, "ESC:退出游戏。Space:暂停游戏。"),
    ]


def _put(stdscr: Any, y: int, x: int, text: str) -> None:
    try:
        stdscr.addstr(y, x, text)
    except curses.error:
        pass


def _draw(stdscr: Any, game: SnakeGame) -> None:
    stdscr.erase()
    for y, row in enumerate(render_board(game)):
        _put(stdscr, y, 0, row)
    for y, text in help_lines(game):
        _put(stdscr, y, HELP_X, text)
    stdscr.refresh()


def _wait_for_space(stdscr: Any) -> None:
    stdscr.nodelay(False)
    while stdscr.getch() != SPACE:
        pass
    stdscr.nodelay(True)


def play(stdscr: Any, game: SnakeGame) -> State:
    """Run ``game`` on a curses screen until it ends; return the final state."""
    stdscr.nodelay(True)
    while True:
        _draw(stdscr, game)
        key = stdscr.getch()
        if key in _TURN_KEYS:
            game.turn(_TURN_KEYS[key])
        elif key == SPACE:
            _wait_for_space(stdscr)
        elif key == curses.KEY_F3:
            game.speed_up()
        elif key == curses.KEY_F4:
            game.slow_down()
        elif key == ESCAPE:
            game.quit()
            break
        time.sleep(game.sleep_time / 1000)
        game.step()
        if game.state is not State.OK:
            break
    _draw(stdscr, game)
    _put(stdscr, *END_POS, game.end_message())
    stdscr.refresh()
    return game.state


def _pause_screen(stdscr: Any) -> None:
    _put(stdscr, 25, 40, PRESS_ANY_KEY)
    stdscr.refresh()
    stdscr.nodelay(False)
    stdscr.getch()
    stdscr.erase()


def _welcome(stdscr: Any) -> None:
    stdscr.erase()
    _put(stdscr, 15, 40, "欢迎来到贪吃蛇小游戏！")
    _pause_screen(stdscr)
    _put(stdscr, 12, 25, INSTRUCTIONS)
    _put(stdscr, 13, 25, "加速将能得到更高的分数。")
    _pause_screen(stdscr)


def _session(stdscr: Any, rng: random.Random) -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    stdscr.keypad(True)
    while True:
        _welcome(stdscr)
        play(stdscr, SnakeGame(rng))
        _put(stdscr, *AGAIN_POS, "您是否再来一局？(Y/N):")
        stdscr.refresh()
        stdscr.nodelay(False)
        if stdscr.getch() not in (ord("y"), ord("Y")):
            break


def main(argv: list[str] | None = None) -> int:
    """Play snake in the terminal until the player declines another round."""
    parser = argparse.ArgumentParser(prog="snake", description="Snake game.")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    args = parser.parse_args(argv)
    curses.wrapper(_session, random.Random(args.seed))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())