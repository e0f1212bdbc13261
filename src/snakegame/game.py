# game.py
from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass
from typing import Optional, Protocol

from .config import CFG, Config
from .engine import AteApple, Collision, Outcome, random_apple, speed_for_score, tick
from .snake import Snake
from .state import Apple, GameState

logger = logging.getLogger(__name__)


# ---------- Collaborators ----------
class Scheduler(Protocol):
    """Calls back into the game every `interval_ms` until stopped."""

    def start(self, interval_ms: int) -> None: ...

    def stop(self) -> None: ...


class HighscoreStore(Protocol):
    def get(self) -> Optional[int]: ...

    def set(self, value: int) -> None: ...


class Phase(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


@dataclass(frozen=True)
class GameOver:
    score: int
    highscore: int
    new_highscore: bool
    reason: str


# ---------- Driver ----------
class SnakeGame:
    """
    Owns the state, the snake and the tick scheduler, and reacts to
    what every tick reports.

        prepare()  ended/idle -> idle
        start()    idle       -> running
        tick()     running    -> running | ended
    """

    def __init__(
        self,
        grid_width: int,
        scheduler: Scheduler,
        highscores: HighscoreStore,
        cfg: Config = CFG,
        rng: Optional[random.Random] = None,
    ):
        assert grid_width > 0, "grid_width must be positive"
        self.grid_width = grid_width
        self.scheduler = scheduler
        self.highscores = highscores
        self.cfg = cfg
        self.rng = rng or random.Random(cfg.seed)

        self.state = GameState(cfg)
        self.snake = Snake(cfg.start_direction)
        self.phase = Phase.IDLE
        self.last_game: Optional[GameOver] = None
        self._highscore = 0

    @property
    def running(self) -> bool:
        return self.phase is Phase.RUNNING

    @property
    def highscore(self) -> int:
        """Stored best score as of the last prepare() or stop()."""
        return self._highscore

    # ---------- Behaviours ----------
    def prepare(self) -> None:
        """Fresh state for a new game; the field stays idle until start()."""
        if self.phase is Phase.RUNNING:
            self.scheduler.stop()
        self.state.reset_state()
        self.snake.reset_direction()
        self.phase = Phase.IDLE
        self.last_game = None
        self._highscore = self.highscores.get() or 0
        logger.debug("Game prepared")

    def start(self) -> None:
        assert self.phase is Phase.IDLE, "Call prepare() before start()."
        logger.info("Starting game")
        self.add_random_apple()
        self.phase = Phase.RUNNING
        self.scheduler.start(self.state.get_speed())

    def change_direction(self, direction: str) -> None:
        self.snake.change_direction(direction)

    def tick(self) -> Outcome:
        """One scheduled step. Returns the outcome the engine reported."""
        assert self.phase is Phase.RUNNING, "Game is not running; call start() first."
        outcome = tick(self.state, self.snake, self.grid_width, walls=self.cfg.walls)

        if isinstance(outcome, Collision):
            self.stop(outcome.reason)
        elif isinstance(outcome, AteApple):
            self.eat_apple(outcome.apple)
        return outcome

    def eat_apple(self, apple: Apple) -> None:
        self.state.remove_apple(apple)
        self.state.add_snake_part()
        score = self.state.add_score_point()

        speed = speed_for_score(score, self.cfg)
        if speed != self.state.get_speed():
            logger.debug("Snake with speed %d ms", speed)
        self.state.set_speed(speed)

        # new interval: cancel and re-arm, never adjust in place
        self.scheduler.stop()
        self.scheduler.start(speed)
        self.add_random_apple()
        logger.debug("Point added. New score: %d", score)

    def stop(self, reason: str = "self") -> GameOver:
        self.scheduler.stop()
        self.phase = Phase.ENDED

        score = self.state.get_score()
        stored = self.highscores.get() or 0
        new_highscore = score > stored
        if new_highscore:
            self.highscores.set(score)

        self.last_game = GameOver(
            score=score,
            highscore=max(score, stored),
            new_highscore=new_highscore,
            reason=reason,
        )
        self._highscore = self.last_game.highscore
        logger.info("Game over (%s). Your result: %d", reason, score)
        return self.last_game

    def add_random_apple(self) -> Apple:
        apple = random_apple(self.grid_width, self.rng)
        self.state.add_apple(apple)
        return apple
