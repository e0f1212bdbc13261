"""Tests for direction handling and follow-the-leader movement."""

import itertools

import pytest

from src.snakegame.snake import Snake, is_opposite
from src.snakegame.config import DIRECTIONS, OPPOSITES, LEFT, RIGHT, UP
from src.snakegame.state import Position

START = [Position(3, 7), Position(2, 7), Position(1, 7), Position(0, 7)]


class TestDirection:
    def test_starts_in_configured_direction(self):
        assert Snake("up").direction == "up"

    def test_is_opposite(self):
        assert is_opposite(LEFT, RIGHT)
        assert not is_opposite(LEFT, UP)

    @pytest.mark.parametrize("current", list(DIRECTIONS))
    def test_reversal_is_ignored(self, current):
        snake = Snake(current)
        snake.change_direction(OPPOSITES[current])
        assert snake.direction == current

    @pytest.mark.parametrize(
        "current,new",
        [(a, b) for a, b in itertools.product(DIRECTIONS, DIRECTIONS) if OPPOSITES[a] != b],
    )
    def test_non_opposite_turn_is_taken(self, current, new):
        snake = Snake(current)
        snake.change_direction(new)
        assert snake.direction == new

    def test_reset_direction(self):
        snake = Snake("right")
        snake.change_direction("up")
        snake.reset_direction()
        assert snake.direction == "right"

    def test_unknown_direction_raises(self):
        with pytest.raises(ValueError):
            Snake("right").change_direction("sideways")
        with pytest.raises(ValueError):
            Snake("north")


class TestMovement:
    def test_moves_right_one_cell(self):
        snake = Snake("right")
        assert snake.get_new_position(START) == [(4, 7), (3, 7), (2, 7), (1, 7)]

    @pytest.mark.parametrize("direction", ["up", "down", "right"])
    def test_head_moves_in_requested_direction(self, direction):
        snake = Snake("right")
        snake.change_direction(direction)
        dx, dy = DIRECTIONS[direction]
        new_body = snake.get_new_position(START)
        assert new_body[0] == (START[0].x + dx, START[0].y + dy)

    def test_opposite_request_keeps_previous_heading(self):
        snake = Snake("right")
        snake.change_direction("left")
        assert snake.get_new_position(START)[0] == (4, 7)

    def test_follow_the_leader(self):
        body = [Position(5, 5), Position(5, 6), Position(6, 6), Position(7, 6), Position(7, 5)]
        snake = Snake("up")
        new_body = snake.get_new_position(body)
        assert len(new_body) == len(body)
        for i in range(1, len(body)):
            assert new_body[i] == body[i - 1]

    def test_single_segment(self):
        snake = Snake("down")
        assert snake.get_new_position([Position(0, 0)]) == [(0, 1)]

    def test_input_is_not_mutated(self):
        body = list(START)
        Snake("right").get_new_position(body)
        assert body == START

    def test_duplicate_head_growth(self):
        grown = START + [START[0]]
        new_body = Snake("right").get_new_position(grown)
        assert len(new_body) == 5
        # the duplicate is dropped and the old tail is kept
        assert new_body[-1] == START[-1]


class TestTurnsWithinOneTick:
    def test_two_presses_cannot_reverse(self):
        snake = Snake("right")
        snake.change_direction("up")
        snake.change_direction("left")
        assert snake.direction == "up"
        assert snake.get_new_position(START)[0] == (3, 6)

    def test_last_valid_press_wins(self):
        snake = Snake("right")
        snake.change_direction("up")
        snake.change_direction("down")
        assert snake.get_new_position(START)[0] == (3, 8)

    def test_reversal_check_moves_on_after_a_step(self):
        snake = Snake("right")
        snake.change_direction("up")
        snake.get_new_position(START)
        snake.change_direction("left")
        assert snake.direction == "left"

    def test_reset_clears_pending_turn(self):
        snake = Snake("right")
        snake.change_direction("up")
        snake.reset_direction()
        assert snake.get_new_position(START)[0] == (4, 7)
