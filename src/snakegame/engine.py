# engine.py
"""
Per-tick rules: move the snake, then look for collisions and apples.

Nothing here schedules, draws or reads input. ``tick`` returns an
outcome value and the driver decides what to do with it.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional, Union

from .config import Config
from .snake import Snake
from .state import Apple, GameState, Position

logger = logging.getLogger(__name__)


# ---------- Outcomes ----------
@dataclass(frozen=True)
class Collision:
    reason: str     # "self" or "wall"


@dataclass(frozen=True)
class AteApple:
    apple: Apple


Outcome = Optional[Union[Collision, AteApple]]


# ---------- Collision detection ----------
def snake_eats_itself(state: GameState) -> bool:
    """True if the head shares a cell with any other segment."""
    head = state.get_snake_head()
    return any(part == head for part in state.get_snake()[1:])


def head_outside_field(state: GameState, grid_width: int) -> bool:
    hx, hy = state.get_snake_head()
    return not (0 <= hx < grid_width and 0 <= hy < grid_width)


def apple_under_head(state: GameState) -> Optional[Apple]:
    """First apple on the head's cell, or None."""
    head = state.get_snake_head()
    for apple in state.get_apples():
        if apple == head:
            return apple
    return None


# ---------- Tick ----------
def tick(state: GameState, snake: Snake, grid_width: int, walls: bool = True) -> Outcome:
    """
    Advance the game by one step.
    Returns Collision, AteApple(apple) or None when nothing happened.
    """
    state.set_snake(snake.get_new_position(state.get_snake()))
    logger.debug("Tick. Head at %s", state.get_snake_head())

    if snake_eats_itself(state):
        logger.debug("Snake collision")
        return Collision("self")

    if walls and head_outside_field(state, grid_width):
        logger.debug("Snake went outside the field")
        return Collision("wall")

    apple = apple_under_head(state)
    if apple is not None:
        logger.debug("Snake ate the apple at %s", apple)
        return AteApple(apple)

    return None


# ---------- Difficulty ----------
def speed_for_score(score: int, cfg: Config) -> int:
    """Milliseconds per tick: start speed minus a fixed step per point, floored."""
    return max(cfg.min_speed, cfg.start_speed - score * cfg.speed_step)


# ---------- Apples ----------
def random_apple(grid_width: int, rng: random.Random) -> Apple:
    """
    Uniform random cell. Apples are allowed to land on the snake or on
    another apple.
    """
    return Position(rng.randrange(grid_width), rng.randrange(grid_width))
