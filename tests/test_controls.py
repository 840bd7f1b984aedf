import random

import pygame  # type: ignore

from arcade_snake.config import RIGHT, UP, DOWN, CUE_TURN
from arcade_snake.controls import handle_events
from arcade_snake.game import Phase, new_game_state


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def test_space_begins_from_start_screen():
    state = new_game_state(random.Random(0))
    handle_events(state, [key(pygame.K_SPACE)])
    assert state.phase is Phase.PLAYING


def test_arrows_ignored_before_play():
    state = new_game_state(random.Random(0))
    handle_events(state, [key(pygame.K_UP)])
    assert state.pending == RIGHT
    assert state.phase is Phase.START


def test_arrows_turn_while_playing(playing):
    handle_events(playing, [key(pygame.K_UP), key(pygame.K_DOWN)])
    assert playing.pending == DOWN
    assert playing.cues == [CUE_TURN, CUE_TURN]


def test_reverse_arrow_is_silent(playing):
    handle_events(playing, [key(pygame.K_LEFT)])
    assert playing.pending == RIGHT
    assert playing.cues == []


def test_space_does_not_restart_during_play(playing):
    playing.score = 20
    handle_events(playing, [key(pygame.K_SPACE)])
    assert playing.score == 20


def test_space_restarts_after_game_over(playing):
    playing.phase = Phase.GAME_OVER
    playing.score = 40
    handle_events(playing, [key(pygame.K_SPACE), key(pygame.K_UP)])
    assert playing.phase is Phase.PLAYING
    assert playing.score == 0
    assert playing.pending == UP


def test_window_close_and_escape_quit(playing):
    handle_events(playing, [pygame.event.Event(pygame.QUIT)])
    assert not playing.running

    state = new_game_state(random.Random(0))
    handle_events(state, [key(pygame.K_ESCAPE)])
    assert not state.running
