# src/arcade_snake/game.py
import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .config import (
    GRID_W, GRID_H,
    START_CELL, START_DIRECTION, FRUIT_POINTS,
    CUE_TURN, CUE_GAME_OVER,
)
from .grid import Cell, Direction, in_bounds, is_opposite, shift

logger = logging.getLogger(__name__)


class Phase(Enum):
    START = "start"
    PLAYING = "playing"
    GAME_OVER = "game_over"


# ---------- Helpers ----------
def spawn_fruit(rng=random) -> Cell:
    """
    Pick a uniformly random grid cell for the fruit.
    The snake is not consulted, so the fruit can land on the body.
    """
    return (rng.randrange(GRID_W), rng.randrange(GRID_H))


# ---------- State ----------
@dataclass
class GameState:
    snake: List[Cell]              # head at index 0
    direction: Direction
    pending: Direction
    fruit: Cell
    score: int = 0
    phase: Phase = Phase.START
    running: bool = True
    cues: List[str] = field(default_factory=list)   # sound cues not yet played
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    @property
    def head(self) -> Cell:
        return self.snake[0]


def new_game_state(rng: Optional[random.Random] = None) -> GameState:
    rng = rng if rng is not None else random.Random()
    return GameState(
        snake=[START_CELL],
        direction=START_DIRECTION,
        pending=START_DIRECTION,
        fruit=spawn_fruit(rng),
        rng=rng,
    )


def drain_cues(state: GameState) -> List[str]:
    """Hand the queued sound cues to the caller and clear the queue."""
    cues, state.cues = state.cues, []
    return cues


# ---------- State machine ----------
def handle_begin(state: GameState) -> None:
    """Start a fresh session from the start screen or after a game over."""
    if state.phase is Phase.PLAYING:
        return
    state.score = 0
    state.snake = [START_CELL]
    state.direction = START_DIRECTION
    state.pending = START_DIRECTION
    state.fruit = spawn_fruit(state.rng)
    logger.debug("%s -> playing", state.phase.value)
    state.phase = Phase.PLAYING


def handle_direction(state: GameState, direction: Direction) -> bool:
    """Queue a turn (no 180° turns). Returns True if it was accepted."""
    if state.phase is not Phase.PLAYING:
        return False
    if is_opposite(direction, state.direction):
        return False
    state.pending = direction
    state.cues.append(CUE_TURN)
    return True


def handle_quit(state: GameState) -> None:
    state.running = False


def _game_over(state: GameState, reason: str) -> None:
    logger.debug("game over (%s) at %s, score %d", reason, state.head, state.score)
    state.phase = Phase.GAME_OVER
    state.cues.append(CUE_GAME_OVER)


# ---------- Tick ----------
def tick(state: GameState) -> None:
    """
    Advance the snake one cell. Does nothing outside the playing phase.
    A wall hit leaves the body untouched; a self hit is detected after
    the move, so eating into your own body still ends the game.
    """
    if state.phase is not Phase.PLAYING:
        return

    # Commit direction once per tick
    state.direction = state.pending
    new_head = shift(state.head, state.direction)

    if not in_bounds(new_head):
        _game_over(state, "wall")
        return

    state.snake.insert(0, new_head)

    if new_head == state.fruit:
        state.score += FRUIT_POINTS
        state.fruit = spawn_fruit(state.rng)
    else:
        state.snake.pop()

    if new_head in state.snake[1:]:
        _game_over(state, "self")
