# src/arcade_snake/render.py
from typing import Optional, Tuple

import pygame  # type: ignore

from .assets import Assets
from .config import WIDTH, HEIGHT, BG, WHITE, RED, TEXT
from .game import GameState, Phase
from .grid import Cell, cell_to_pixel

SCORE_POS = (10, 10)


# ---------- Helpers ----------
def draw_cell(screen: pygame.Surface, cell: Cell, color: Tuple[int, int, int]) -> None:
    pygame.draw.rect(screen, color, pygame.Rect(cell_to_pixel(cell)))


def draw_backdrop(screen: pygame.Surface, image: Optional[pygame.Surface]) -> None:
    if image is not None:
        screen.blit(image, (0, 0))
    else:
        screen.fill(BG)


def draw_text(screen: pygame.Surface, font: Optional[pygame.font.Font], text: str,
              topleft: Optional[Tuple[int, int]] = None,
              center: Optional[Tuple[int, int]] = None) -> None:
    """Render one line of text; a missing font draws nothing."""
    if font is None:
        return
    surf = font.render(text, True, TEXT)
    rect = surf.get_rect(center=center) if center is not None else surf.get_rect(topleft=topleft)
    screen.blit(surf, rect)


# ---------- Frames ----------
def draw_start(screen: pygame.Surface, assets: Assets) -> None:
    draw_backdrop(screen, assets.start)
    if assets.start is None:
        draw_text(screen, assets.font, "Press SPACE to start", center=(WIDTH // 2, HEIGHT // 2))


def draw_game(screen: pygame.Surface, assets: Assets, state: GameState) -> None:
    draw_backdrop(screen, assets.background)
    # snake
    for cell in state.snake:
        draw_cell(screen, cell, WHITE)
    # fruit
    draw_cell(screen, state.fruit, RED)
    # score
    draw_text(screen, assets.font, f"Score: {state.score}", topleft=SCORE_POS)


def draw_game_over(screen: pygame.Surface, assets: Assets, state: GameState) -> None:
    if assets.game_over is not None:
        screen.blit(assets.game_over, (0, 0))
    else:
        # Dim the last playfield with a translucent overlay
        draw_game(screen, assets, state)
        overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 140))  # RGBA
        screen.blit(overlay, (0, 0))
        draw_text(screen, assets.font, "GAME OVER", center=(WIDTH // 2, HEIGHT // 2 - 40))
    draw_text(screen, assets.font, f"Your Score: {state.score}", center=(WIDTH // 2, HEIGHT // 2))


def draw_frame(screen: pygame.Surface, assets: Assets, state: GameState) -> None:
    """Draw the frame for the current phase. Never mutates the state."""
    if state.phase is Phase.START:
        draw_start(screen, assets)
    elif state.phase is Phase.GAME_OVER:
        draw_game_over(screen, assets, state)
    else:
        draw_game(screen, assets, state)
