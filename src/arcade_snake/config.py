# src/arcade_snake/config.py
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple

# ----- Window & grid -----
WIDTH, HEIGHT = 640, 480
CELL_SIZE = 20
GRID_W, GRID_H = WIDTH // CELL_SIZE, HEIGHT // CELL_SIZE

# ----- Colors -----
BG    = (20, 20, 24)
WHITE = (255, 255, 255)
RED   = (255, 0, 0)
TEXT  = (255, 255, 255)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

# ----- Rules -----
START_CELL: Tuple[int, int] = (10, 10)
START_DIRECTION = RIGHT
FRUIT_POINTS = 10

# Sound cue names emitted by the simulation
CUE_TURN = "turn"
CUE_GAME_OVER = "game_over"

DEFAULT_ASSETS: Dict[str, str] = {
    "background": "background.jpg",
    "start": "start.png",
    "game_over": "gameover.png",
    "font": "ARIALBD1.ttf",
    "music": "music.mp3",
    "turn": "move.mp3",
    "game_over_sound": "gameover.mp3",
}

# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    tick_ms: int = 100          # one simulation step per tick
    assets_dir: Path = Path("assets")
    font_size: int = 24
    assets: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_ASSETS))

    def __post_init__(self):
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        self.assets_dir = Path(self.assets_dir)

    def asset_path(self, key: str) -> Path:
        return self.assets_dir / self.assets[key]
