import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest  # noqa: E402

from pixsnake.state import GameState  # noqa: E402

FAR = (0, 20)


class ScriptedRandom:
    """Stands in for random.Random; every randrange() returns `value`."""

    def __init__(self, value=20):
        self.value = value

    def randrange(self, n):
        return self.value % n


def advance_clear(state, ticks=1):
    """Advance while keeping the fruit parked away from row 5."""
    for _ in range(ticks):
        state.advance()
        state.fruit_x, state.fruit_y = FAR


@pytest.fixture
def state():
    return GameState.new(25, ScriptedRandom())
