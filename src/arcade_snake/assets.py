# src/arcade_snake/assets.py
"""
Images, font and sounds used by the presentation layer.

Every asset is optional. A file that is missing or unreadable is logged
and its slot stays None; the draw and play helpers skip empty slots, so
the game stays playable with no assets at all.
"""
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

import pygame  # type: ignore

from .config import WIDTH, HEIGHT, Config, CUE_TURN, CUE_GAME_OVER

logger = logging.getLogger(__name__)


@dataclass
class Assets:
    background: Optional[pygame.Surface] = None
    start: Optional[pygame.Surface] = None
    game_over: Optional[pygame.Surface] = None
    font: Optional[pygame.font.Font] = None
    music: Optional[Path] = None
    sounds: Dict[str, Optional[pygame.mixer.Sound]] = field(default_factory=dict)

    def play(self, cue: str) -> None:
        """Fire-and-forget playback of a cue; unknown or missing cues are skipped."""
        sound = self.sounds.get(cue)
        if sound is not None:
            sound.play()

    def start_music(self) -> None:
        if self.music is None:
            return
        try:
            pygame.mixer.music.play(-1)
        except pygame.error as e:
            logger.warning("Failed to play background music: %s", e)


# ---------- Loaders ----------
def load_image(path: Path) -> Optional[pygame.Surface]:
    """Load an image stretched to the window size, or None on failure."""
    try:
        image = pygame.image.load(str(path))
    except (pygame.error, OSError) as e:
        logger.warning("Failed to load image %s: %s", path, e)
        return None
    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    if image.get_size() != (WIDTH, HEIGHT):
        image = pygame.transform.scale(image, (WIDTH, HEIGHT))
    return image


def load_font(path: Path, size: int) -> Optional[pygame.font.Font]:
    """Load a TTF font, falling back to pygame's default font."""
    try:
        return pygame.font.Font(str(path), size)
    except (pygame.error, OSError) as e:
        logger.warning("Failed to load font %s: %s", path, e)
    try:
        return pygame.font.SysFont(None, size)
    except pygame.error as e:
        logger.warning("No fallback font available, text disabled: %s", e)
        return None


def load_sound(path: Path) -> Optional[pygame.mixer.Sound]:
    try:
        return pygame.mixer.Sound(str(path))
    except (pygame.error, OSError) as e:
        logger.warning("Failed to load sound %s: %s", path, e)
        return None


def load_music(path: Path) -> Optional[Path]:
    try:
        pygame.mixer.music.load(str(path))
    except (pygame.error, OSError) as e:
        logger.warning("Failed to load background music %s: %s", path, e)
        return None
    return path


def _mixer_ready() -> bool:
    if pygame.mixer.get_init():
        return True
    try:
        pygame.mixer.init(44100, -16, 2, 2048)
    except pygame.error as e:
        logger.warning("Audio unavailable, sounds disabled: %s", e)
        return False
    return True


def load_assets(cfg: Config) -> Assets:
    assets = Assets(
        background=load_image(cfg.asset_path("background")),
        start=load_image(cfg.asset_path("start")),
        game_over=load_image(cfg.asset_path("game_over")),
        font=load_font(cfg.asset_path("font"), cfg.font_size),
    )
    if _mixer_ready():
        assets.music = load_music(cfg.asset_path("music"))
        assets.sounds = {
            CUE_TURN: load_sound(cfg.asset_path("turn")),
            CUE_GAME_OVER: load_sound(cfg.asset_path("game_over_sound")),
        }
    return assets
