"""Terminal snake game: reads keys without echo and redraws the wall."""

from __future__ import annotations

import os
import select
import sys
import time
from contextlib import contextmanager, nullcontext
from typing import Iterator

from objdemos.snake.body import Direction, Snake
from objdemos.snake.food import Food
from objdemos.snake.wall import Wall

_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_CLEAR_SCREEN = "\033[H\033[2J"
_STEP_DELAY = 0.1


def resolve_key(key: str, previous: str | None) -> Direction | None:
    """Return the direction to move for a key press, or None to ignore it.

    A key reversing the previous direction keeps the previous direction,
    and the game cannot be started by moving left.
    """
    try:
        direction = Direction(key)
    except ValueError:
        return None
    if previous is None:
        return None if direction is Direction.LEFT else direction
    previous = Direction(previous)
    if _OPPOSITE[direction] is previous:
        return previous
    return direction


@contextmanager
def _raw_terminal(fd: int) -> Iterator[None]:
    import termios

    saved = termios.tcgetattr(fd)
    changed = termios.tcgetattr(fd)
    changed[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, changed)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, saved)


def _key_ready(fd: int, timeout: float) -> bool:
    ready, _, _ = select.select([fd], [], [], timeout)
    return bool(ready)


def _read_key(fd: int) -> str:
    return os.read(fd, 1).decode("latin-1")


def _redraw(wall: Wall) -> None:
    print(_CLEAR_SCREEN + wall.render(), end="", flush=True)


def main(argv: list[str] | None = None) -> int:
    """Play until the snake hits a wall or itself, or input ends."""
    fd = sys.stdin.fileno()
    wall = Wall()
    food = Food(wall)
    food.place()
    snake = Snake(wall, food)
    snake.reset()
    print(wall.render(), end="", flush=True)

    terminal = _raw_terminal(fd) if os.isatty(fd) else nullcontext()
    with terminal:
        previous: Direction | None = None
        while True:
            key = _read_key(fd)
            if not key:
                break
            while True:
                step = resolve_key(key, previous)
                if step is not None:
                    previous = step
                    if not snake.move(step):
                        _redraw(wall)
                        print("GAME OVER!!!", flush=True)
                        return 0
                    _redraw(wall)
                    time.sleep(_STEP_DELAY)
                key = previous.value if previous is not None else ""
                wait = 0.0 if previous is not None else _STEP_DELAY
                if _key_ready(fd, wait):
                    break
    return 0