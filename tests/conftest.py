import os

# No window or sound card needed for the tests.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from src.snakegame.config import Config


class FakeScheduler:
    """Records start/stop calls instead of arming a timer."""

    def __init__(self):
        self.calls = []
        self.interval_ms = None

    def start(self, interval_ms):
        self.calls.append(("start", interval_ms))
        self.interval_ms = interval_ms

    def stop(self):
        self.calls.append(("stop", None))
        self.interval_ms = None


@pytest.fixture
def cfg():
    return Config()


@pytest.fixture
def scheduler():
    return FakeScheduler()
