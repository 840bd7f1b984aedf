# src/arcade_snake/controls.py
from typing import Iterable

import pygame  # type: ignore

from .config import UP, DOWN, LEFT, RIGHT
from .game import GameState, Phase, handle_begin, handle_direction, handle_quit

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}
BEGIN_KEY = pygame.K_SPACE
QUIT_KEY = pygame.K_ESCAPE


def handle_events(state: GameState, events: Iterable[pygame.event.Event]) -> None:
    """Feed pygame events into the state machine."""
    for event in events:
        if event.type == pygame.QUIT:
            handle_quit(state)
        elif event.type == pygame.KEYDOWN:
            if event.key == QUIT_KEY:
                handle_quit(state)
            elif state.phase is Phase.PLAYING:
                cand = KEY_DIRECTIONS.get(event.key)
                if cand is not None:
                    handle_direction(state, cand)
            elif event.key == BEGIN_KEY:
                handle_begin(state)
