import logging

import pygame  # type: ignore

from arcade_snake.assets import Assets, load_assets, load_font, load_image, load_sound
from arcade_snake.config import WIDTH, HEIGHT, Config, CUE_TURN, CUE_GAME_OVER
from arcade_snake.main import session


class FakeSound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1


def test_missing_assets_degrade_to_none(tmp_path, caplog, pygame_fonts, pygame_audio):
    with caplog.at_level(logging.WARNING, logger="arcade_snake.assets"):
        assets = load_assets(Config(assets_dir=tmp_path))

    assert assets.background is None
    assert assets.start is None
    assert assets.game_over is None
    assert assets.music is None
    assert all(s is None for s in assets.sounds.values())
    assert "Failed to load image" in caplog.text
    assert "Failed to load font" in caplog.text


def test_missing_font_falls_back_to_default(tmp_path, pygame_fonts):
    assert load_font(tmp_path / "nope.ttf", 24) is not None


def test_missing_image_and_sound_return_none(tmp_path):
    assert load_image(tmp_path / "nope.png") is None
    assert load_sound(tmp_path / "nope.mp3") is None


def test_image_is_stretched_to_window(tmp_path):
    path = tmp_path / "bg.bmp"
    pygame.image.save(pygame.Surface((8, 6)), str(path))
    image = load_image(path)
    assert image.get_size() == (WIDTH, HEIGHT)


def test_play_skips_missing_sounds():
    turn = FakeSound()
    assets = Assets(sounds={CUE_TURN: turn, CUE_GAME_OVER: None})
    assets.play(CUE_TURN)
    assets.play(CUE_GAME_OVER)
    assets.play("unknown")
    assert turn.plays == 1


def test_music_without_track_is_noop():
    Assets().start_music()


def test_images_keep_alpha_once_window_exists(tmp_path):
    path = tmp_path / "start.png"
    image = pygame.Surface((8, 6), pygame.SRCALPHA)
    image.fill((255, 0, 0, 64))
    pygame.image.save(image, str(path))

    with session():
        loaded = load_image(path)
        assert loaded.get_flags() & pygame.SRCALPHA
        assert loaded.get_at((0, 0)).a == 64
