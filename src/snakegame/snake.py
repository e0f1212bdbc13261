# snake.py
import logging
from typing import List, Tuple

from .config import DIRECTIONS
from .state import Position

logger = logging.getLogger(__name__)


def is_opposite(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


def _delta(name: str) -> Tuple[int, int]:
    try:
        return DIRECTIONS[name]
    except KeyError:
        raise ValueError(f"Unknown direction: {name!r}") from None


class Snake:
    """Direction of travel and follow-the-leader movement (no 180° turns)."""

    def __init__(self, start_direction: str = "right"):
        _delta(start_direction)
        self.start_direction = start_direction
        self._direction = start_direction   # what the last move used
        self._pending = start_direction     # what the next move will use

    @property
    def direction(self) -> str:
        """Heading the next move will take."""
        return self._pending

    def change_direction(self, new_direction: str) -> None:
        """
        Turn towards *new_direction* unless it would reverse into the neck.
        Checked against the last move, so several presses inside one tick
        can't add up to a reversal.
        """
        if is_opposite(_delta(new_direction), _delta(self._direction)):
            return
        if new_direction != self._pending:
            self._pending = new_direction
            logger.debug("New direction %s", new_direction)

    def reset_direction(self) -> None:
        self._direction = self.start_direction
        self._pending = self.start_direction

    def get_new_position(self, body: List[Position]) -> List[Position]:
        """
        Return the body after one step; *body* itself is left untouched.

        Commits the pending direction, then the head moves one cell that
        way and every other segment takes the place the segment ahead of
        it had.
        """
        self._direction = self._pending
        dx, dy = DIRECTIONS[self._direction]
        hx, hy = body[0]
        new_body = [Position(hx + dx, hy + dy)]
        new_body.extend(Position(*part) for part in body[:-1])
        return new_body
