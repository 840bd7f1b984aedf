import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # type: ignore  # noqa: E402
import pytest  # noqa: E402

from arcade_snake.config import RIGHT  # noqa: E402
from arcade_snake.game import GameState, Phase  # noqa: E402


@pytest.fixture
def playing():
    """A one-cell snake at (10, 10) heading right, already in play."""
    return GameState(
        snake=[(10, 10)],
        direction=RIGHT,
        pending=RIGHT,
        fruit=(0, 23),
        phase=Phase.PLAYING,
        rng=random.Random(7),
    )


@pytest.fixture
def pygame_fonts():
    pygame.font.init()
    yield
    pygame.font.quit()


@pytest.fixture
def pygame_audio():
    yield
    pygame.mixer.quit()
