import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from flappy.display import FrameInput, Key
from flappy.game_state import State


@pytest.fixture
def state():
    return State(random.Random(1234))


@pytest.fixture
def playing(state):
    state.tick(FrameInput(key=Key.P))
    return state
