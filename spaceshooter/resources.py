"""Shared constants and asset loading helpers."""

from __future__ import annotations

import logging
import math
from pathlib import Path

import pygame

log = logging.getLogger(__name__)

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
TILE_SIZE = 64
PI = math.pi

#: Tiles strictly above this value block movement and bullets.
COLLISION_BLOCK = 1

ASSETS_DIR = Path(__file__).resolve().parent / "assets"


def asset_path(*args) -> Path:
    """Return the path of an asset below the package's asset directory."""
    return ASSETS_DIR.joinpath(*args)


def load_image(path):
    """Load an image, returning None (and logging) when it cannot be read."""
    try:
        image = pygame.image.load(str(path))
    except (pygame.error, OSError) as exc:
        log.error("cannot load image %s: %s", path, exc)
        return None
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


def load_sound(path):
    """Load a sound effect, returning None when it or the mixer is unavailable."""
    if not Path(path).is_file():
        log.error("cannot load sound %s: no such file", path)
        return None
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        return pygame.mixer.Sound(str(path))
    except (pygame.error, OSError) as exc:
        log.error("cannot load sound %s: %s", path, exc)
        return None


def play_sound(sound, volume) -> bool:
    """Restart ``sound`` at ``volume`` (0-100). Return whether it was played."""
    if sound is None:
        return False
    sound.set_volume(volume / 100)
    sound.stop()
    sound.play()
    return True