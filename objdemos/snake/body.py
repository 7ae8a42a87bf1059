"""The snake: a chain of cells on the wall, head first."""

from __future__ import annotations

from collections import deque
from enum import Enum

from objdemos.snake.food import Food
from objdemos.snake.wall import BODY, BORDER, EMPTY, FOOD, HEAD, Wall


class Direction(str, Enum):
    """Movement keys."""

    UP = "w"
    DOWN = "s"
    LEFT = "a"
    RIGHT = "d"


_STEPS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


class Snake:
    """The snake's cells, drawn onto the wall as it moves."""

    def __init__(self, wall: Wall, food: Food) -> None:
        self.wall = wall
        self.food = food
        self.rolled = False
        self._points: deque[tuple[int, int]] = deque()

    @property
    def points(self) -> list[tuple[int, int]]:
        """The snake's cells, head first."""
        return list(self._points)

    def reset(self) -> None:
        """Start over as three cells on row 5, head at column 5."""
        self._points.clear()
        for x, y in ((5, 3), (5, 4), (5, 5)):
            self.add_point(x, y)

    def add_point(self, x: int, y: int) -> None:
        """Grow a new head at (x, y); the old head becomes body."""
        if self._points:
            old_x, old_y = self._points[0]
            self.wall.set(old_x, old_y, BODY)
        self._points.appendleft((x, y))
        self.wall.set(x, y, HEAD)

    def remove_tail(self) -> None:
        """Drop the last cell, unless the snake is a single cell."""
        if len(self._points) < 2:
            return
        x, y = self._points.pop()
        self.wall.set(x, y, EMPTY)

    def move(self, key: str) -> bool:
        """Move one step; return False when the snake hits a wall or itself."""
        if len(self._points) < 2:
            raise ValueError("the snake needs at least two cells to move")
        x, y = self._points[0]
        try:
            dx, dy = _STEPS[Direction(key)]
        except ValueError:
            dx, dy = 0, 0
        x, y = x + dx, y + dy

        if self._points[-1] == (x, y):
            self.rolled = True
        elif self.wall.get(x, y) in (BORDER, BODY):
            self.add_point(x, y)
            self.remove_tail()
            return False

        if self.wall.get(x, y) == FOOD:
            self.add_point(x, y)
            self.food.place()
        else:
            self.add_point(x, y)
            self.remove_tail()
            if self.rolled:
                self.wall.set(x, y, HEAD)
        return True