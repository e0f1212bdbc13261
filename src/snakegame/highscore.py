# highscore.py
from __future__ import annotations

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_HIGHSCORE_FILE = os.path.join(os.path.expanduser("~"), ".snakegame_highscore")


class MemoryHighscoreStore:
    """Keeps the high score for the lifetime of the process."""

    def __init__(self, value: Optional[int] = None):
        self.value = value

    def get(self) -> Optional[int]:
        return self.value

    def set(self, value: int) -> None:
        self.value = int(value)


class FileHighscoreStore:
    """High score kept as a single integer in a text file."""

    def __init__(self, path: str = DEFAULT_HIGHSCORE_FILE):
        self.path = path

    def get(self) -> Optional[int]:
        if not os.path.exists(self.path):
            return None
        try:
            with open(self.path) as f:
                return int(f.read().strip())
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable highscore file %s: %s", self.path, e)
            return None

    def set(self, value: int) -> None:
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w") as f:
            f.write(f"{int(value)}\n")
        logger.debug("Saved highscore %d to %s", value, self.path)
