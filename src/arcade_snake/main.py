# src/arcade_snake/main.py
import argparse
import logging
import random
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional

import pygame  # type: ignore

from .assets import load_assets
from .config import WIDTH, HEIGHT, Config
from .controls import handle_events
from .game import drain_cues, new_game_state, tick
from .render import draw_frame

logger = logging.getLogger(__name__)


@contextmanager
def session() -> Iterator[pygame.Surface]:
    """Own the pygame runtime and the window; released on every exit path."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Snake Game")
        yield screen
    finally:
        pygame.quit()


def run(cfg: Config) -> int:
    """Play until the window is closed. Returns the last score."""
    with session() as screen:
        assets = load_assets(cfg)
        assets.start_music()
        clock = pygame.time.Clock()
        state = new_game_state(random.Random(cfg.seed))
        logger.info("Session started (tick %d ms)", cfg.tick_ms)

        while state.running:
            # 1) input
            handle_events(state, pygame.event.get())
            if not state.running:
                break
            # 2) update
            tick(state)
            for cue in drain_cues(state):
                assets.play(cue)
            # 3) render
            draw_frame(screen, assets, state)
            pygame.display.flip()
            clock.tick(1000 / cfg.tick_ms)

        logger.info("Session ended, score %d", state.score)
        return state.score


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play snake.")
    parser.add_argument("--tick-ms", type=int, default=100,
                        help="milliseconds per snake step (default: 100)")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for fruit placement")
    parser.add_argument("--assets", type=Path, default=Path("assets"),
                        help="directory holding images, font and sounds")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)
    if args.tick_ms <= 0:
        parser.error(f"--tick-ms must be positive, got {args.tick_ms}")
    return args


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    cfg = Config(seed=args.seed, tick_ms=args.tick_ms, assets_dir=args.assets)
    run(cfg)


if __name__ == "__main__":
    main()
