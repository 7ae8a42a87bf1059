import random

import pytest

from objdemos.snake.body import Direction, Snake
from objdemos.snake.food import Food
from objdemos.snake.wall import BODY, BORDER, EMPTY, FOOD, HEAD, Wall


def make_snake(seed=0):
    wall = Wall()
    food = Food(wall, random.Random(seed))
    snake = Snake(wall, food)
    snake.reset()
    return wall, food, snake


def test_reset_lays_out_three_cells():
    wall, _, snake = make_snake()
    assert snake.points == [(5, 5), (5, 4), (5, 3)]
    assert wall.get(5, 5) == HEAD
    assert wall.get(5, 4) == BODY
    assert wall.get(5, 3) == BODY


def test_move_right_advances_and_clears_tail():
    wall, _, snake = make_snake()
    before = snake.points
    assert snake.move("d") is True
    head_x, head_y = before[0]
    assert snake.points[0] == (head_x, head_y + 1)
    assert len(snake.points) == len(before)
    assert wall.get(*before[-1]) == EMPTY
    assert wall.get(*snake.points[0]) == HEAD


def test_move_accepts_direction_enum():
    wall, _, snake = make_snake()
    before = snake.points
    assert snake.move(Direction.UP) is True
    assert snake.points[0] == (before[0][0] - 1, before[0][1])
    assert snake.points[1:] == before[:-1]


def test_moving_into_own_body_ends_game():
    _, _, snake = make_snake()
    assert snake.move("a") is False


def test_moving_into_border_ends_game():
    wall, _, snake = make_snake()
    for _ in range(4):
        assert snake.move("w") is True
    assert snake.move("w") is False
    assert wall.get(0, 5) == HEAD


def test_eating_food_grows_and_places_new_food():
    wall, _, snake = make_snake(seed=11)
    wall.set(5, 6, FOOD)
    assert snake.move("d") is True
    assert len(snake.points) == 4
    assert wall.get(5, 6) == HEAD
    cells = [wall.get(x, y) for x in range(Wall.ROWS) for y in range(Wall.COLS)]
    assert cells.count(FOOD) == 1


def test_chasing_own_tail_is_allowed():
    wall = Wall()
    snake = Snake(wall, Food(wall, random.Random(0)))
    for x, y in ((5, 3), (5, 4), (4, 4), (4, 3)):
        snake.add_point(x, y)
    assert snake.move("s") is True
    assert snake.rolled is True
    assert snake.points[0] == (5, 3)
    assert len(snake.points) == 4
    assert wall.get(5, 3) == HEAD


def test_remove_tail_keeps_single_cell():
    wall = Wall()
    snake = Snake(wall, Food(wall))
    snake.add_point(3, 3)
    snake.remove_tail()
    assert snake.points == [(3, 3)]
    assert wall.get(3, 3) == HEAD


def test_unknown_key_keeps_length():
    _, _, snake = make_snake()
    before = snake.points
    assert snake.move("x") is True
    assert len(snake.points) == len(before)
    assert snake.points[0] == before[0]


def test_move_needs_two_cells():
    wall = Wall()
    snake = Snake(wall, Food(wall))
    snake.add_point(3, 3)
    with pytest.raises(ValueError):
        snake.move("d")


def test_border_is_never_cleared_by_moves():
    wall, _, snake = make_snake()
    for key in "dddw":
        assert snake.move(key) is True
    assert all(wall.get(0, col) == BORDER for col in range(Wall.COLS))