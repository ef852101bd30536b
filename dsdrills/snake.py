"""Game state and rules for a console snake game."""

from __future__ import annotations

import random
from collections import deque
from enum import Enum

WALL = "□"
BODY = "■"
FOOD = "★"

START_X = 24
START_Y = 5
START_LENGTH = 5

RIGHT_WALL_X = 56
BOTTOM_WALL_Y = 26
# The head dies one row above the drawn bottom wall.
DEADLY_BOTTOM_Y = 25

DEFAULT_FOOD_SCORE = 10
DEFAULT_SLEEP_MS = 200
SPEED_STEP_MS = 30
FOOD_SCORE_STEP = 2
FASTEST_ADJUSTABLE_MS = 50
SLOWEST_MS = 350
SLOWEST_FOOD_SCORE = 1

Cell = tuple[int, int]


class Direction(Enum):
    """Heading of the snake's head."""

    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4

    @property
    def opposite(self) -> Direction:
        return _OPPOSITE[self]

    @property
    def delta(self) -> Cell:
        """Offset of one step; a cell is two columns wide."""
        return _DELTA[self]


_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_DELTA = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-2, 0),
    Direction.RIGHT: (2, 0),
}


class State(Enum):
    """Whether the game runs, and how it ended."""

    OK = 0
    END_NORMAL = 1
    KILL_BY_WALL = 2
    KILL_BY_SELF = 3


_END_MESSAGES = {
    State.OK: "",
    State.END_NORMAL: "您退出了游戏，游戏结束！",
    State.KILL_BY_SELF: "您吃到了自己，游戏结束！",
    State.KILL_BY_WALL: "您撞到了墙，游戏结束！",
}


def _food_candidates() -> set[Cell]:
    return {(x, y) for x in range(2, 55, 2) for y in range(1, 26)}


class SnakeGame:
    """A snake on a walled board, advanced one step at a time."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.body: deque[Cell] = deque(
            (START_X + 2 * i, START_Y) for i in reversed(range(START_LENGTH))
        )
        self.direction = Direction.RIGHT
        self.food_score = DEFAULT_FOOD_SCORE
        self.score = 0
        self.sleep_time = DEFAULT_SLEEP_MS
        self.state = State.OK
        self.food: Cell = self.spawn_food()

    @property
    def head(self) -> Cell:
        return self.body[0]

    def spawn_food(self) -> Cell:
        """Place food on a random free even-column cell and return it."""
        occupied = set(self.body)
        if not _food_candidates() - occupied:
            raise RuntimeError("no free cell left for food")
        while True:
            while True:
                x = self.rng.randrange(53) + 2
                y = self.rng.randrange(25) + 1
                if x % 2 == 0:
                    break
            if (x, y) not in occupied:
                self.food = (x, y)
                return self.food

    def turn(self, direction: Direction) -> bool:
        """Head towards ``direction`` unless it reverses the snake."""
        if direction is self.direction.opposite:
            return False
        self.direction = direction
        return True

    def speed_up(self) -> bool:
        """Shorten the step delay and raise the food value, within limits."""
        if self.sleep_time < FASTEST_ADJUSTABLE_MS:
            return False
        self.sleep_time -= SPEED_STEP_MS
        self.food_score += FOOD_SCORE_STEP
        return True

    def slow_down(self) -> bool:
        """Lengthen the step delay and lower the food value, within limits."""
        changed = False
        if self.sleep_time < SLOWEST_MS:
            self.sleep_time += SPEED_STEP_MS
            self.food_score -= FOOD_SCORE_STEP
            changed = True
        if self.sleep_time == SLOWEST_MS:
            self.food_score = SLOWEST_FOOD_SCORE
        return changed

    def quit(self) -> None:
        """End the game at the player's request."""
        self.state = State.END_NORMAL

    def step(self) -> bool:
        """Move one cell; return True when food was eaten."""
        if self.state is not State.OK:
            raise RuntimeError("the game is over")
        dx, dy = self.direction.delta
        x, y = self.head
        nxt = (x + dx, y + dy)
        ate = nxt == self.food
        self.body.appendleft(nxt)
        if ate:
            self.score += self.food_score
            self.spawn_food()
        else:
            self.body.pop()
        hx, hy = self.head
        if hx in (0, RIGHT_WALL_X) or hy in (0, DEADLY_BOTTOM_Y):
            self.state = State.KILL_BY_WALL
        if any(cell == self.head for cell in list(self.body)[1:]):
            self.state = State.KILL_BY_SELF
        return ate

    def wall_cells(self) -> frozenset[Cell]:
        """Return every cell that is drawn as wall."""
        cells = set()
        for x in range(0, RIGHT_WALL_X + 2, 2):
            cells.add((x, 0))
            cells.add((x, BOTTOM_WALL_Y))
        for y in range(BOTTOM_WALL_Y):
            cells.add((0, y))
            cells.add((RIGHT_WALL_X, y))
        return frozenset(cells)

    def end_message(self) -> str:
        """Return the closing message for the current state."""
        return _END_MESSAGES[self.state]