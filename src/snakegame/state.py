# state.py
from __future__ import annotations

import logging
from typing import List, NamedTuple, Optional

from .config import CFG, Config

logger = logging.getLogger(__name__)


class Position(NamedTuple):
    """A grid cell coordinate."""
    x: int
    y: int


# An apple is nothing more than the cell it sits on.
Apple = Position


class GameState:
    """
    Score, snake body, apples and speed of the game in progress.

    Plain accessors and mutators; the rules live in the tick engine.
    The snake is stored head first (index 0 is the head).
    """

    def __init__(self, cfg: Optional[Config] = None):
        self.cfg = cfg or CFG
        self.score = 0
        self.snake: List[Position] = []
        self.apples: List[Apple] = []
        self.speed = self.cfg.start_speed
        self.reset_state()
        logger.debug("State initialized: %r", self)

    def __repr__(self) -> str:
        return (
            f"GameState(score={self.score}, snake={self.snake}, "
            f"apples={self.apples}, speed={self.speed})"
        )

    # ---------- Lifecycle ----------
    def reset_state(self) -> None:
        """Restore the defaults: score 0, starting snake, no apples, start speed."""
        self.score = 0
        self.snake = [Position(x, y) for x, y in self.cfg.start_snake]
        self.apples = []
        self.speed = self.cfg.start_speed

    # ---------- Score ----------
    def get_score(self) -> int:
        return self.score

    def add_score_point(self) -> int:
        self.score += 1
        return self.score

    # ---------- Snake ----------
    def get_snake(self) -> List[Position]:
        return list(self.snake)

    def set_snake(self, snake: List[Position]) -> None:
        self.snake = [Position(*part) for part in snake]

    def get_snake_head(self) -> Position:
        return self.snake[0]

    def add_snake_part(self) -> None:
        """
        Grow by one segment by appending a copy of the head to the tail.
        The copy is overwritten by the next move, so growth shows up one
        tick later.
        """
        self.snake.append(self.snake[0])

    # ---------- Apples ----------
    def add_apple(self, apple: Apple) -> None:
        self.apples.append(Position(*apple))

    def get_apples(self) -> List[Apple]:
        return list(self.apples)

    def remove_apple(self, removing: Apple) -> None:
        """Remove every apple sitting exactly on *removing*."""
        self.apples = [
            apple for apple in self.apples
            if not (apple.x == removing[0] and apple.y == removing[1])
        ]

    # ---------- Speed ----------
    def get_speed(self) -> int:
        return self.speed

    def set_speed(self, value: int) -> None:
        self.speed = value
