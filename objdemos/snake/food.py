"""Food placed on a random empty cell of the wall."""

from __future__ import annotations

import random

from objdemos.snake.wall import EMPTY, FOOD, Wall


class Food:
    """Places food on the wall; remembers where it was put."""

    def __init__(self, wall: Wall, rng: random.Random | None = None) -> None:
        self.wall = wall
        self.rng = rng if rng is not None else random.Random()
        self.x: int | None = None
        self.y: int | None = None

    def _has_room(self) -> bool:
        return any(
            self.wall.get(x, y) == EMPTY
            for x in range(1, self.wall.ROWS - 1)
            for y in range(1, self.wall.COLS - 1)
        )

    def place(self) -> tuple[int, int]:
        """Put food on a random empty inner cell and return its position."""
        if not self._has_room():
            raise RuntimeError("no empty cell left for food")
        while True:
            x = self.rng.randrange(self.wall.ROWS - 2) + 1
            y = self.rng.randrange(self.wall.COLS - 2) + 1
            if self.wall.get(x, y) == EMPTY:
                self.wall.set(x, y, FOOD)
                self.x, self.y = x, y
                return x, y