"""Heads-up display: health bar, score and floating damage numbers."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import pygame

from .resources import WINDOW_WIDTH, asset_path

log = logging.getLogger(__name__)

DAMAGE_TTL = 30
FONT_SIZE = 50
HEALTH_COLOUR = (255, 0, 0)
OUTLINE_COLOUR = (0, 0, 0)
SCORE_COLOUR = (255, 255, 255)
DAMAGE_COLOUR = (255, 0, 0)


@dataclass
class DamageMarker:
    """A damage number shown at a world position for ``ttl`` frames."""

    position: tuple[float, float]
    amount: int
    ttl: int = DAMAGE_TTL


class Gui:
    def __init__(self):
        self.markers: list[DamageMarker] = []
        self.font = None
        self._marker_font = None

    def load(self) -> None:
        """Load the HUD font, falling back to pygame's default font."""
        pygame.font.init()
        self.font = self._open_font()
        self._marker_font = self._open_font()
        self._marker_font.set_bold(True)

    @staticmethod
    def _open_font():
        path = asset_path("beon.ttf")
        try:
            return pygame.font.Font(str(path), FONT_SIZE)
        except (pygame.error, OSError) as exc:
            log.error("cannot load font %s: %s", path, exc)
            return pygame.font.Font(None, FONT_SIZE)

    def add_damage(self, position, amount) -> None:
        x, y = position
        self.markers.append(DamageMarker((x, y), amount))

    def health_width(self, health) -> int:
        """Width in pixels of the health bar for ``health``."""
        return health * 2 if health > 0 else 0

    def decay(self) -> None:
        """Age every damage marker by one frame and drop expired ones."""
        for marker in self.markers:
            marker.ttl -= 1
        self.markers = [marker for marker in self.markers if marker.ttl > 0]

    def draw(self, surface, camera, level, player) -> None:
        surface.fill(OUTLINE_COLOUR, pygame.Rect(20, 20, 220, 60))
        width = self.health_width(player.health)
        if width:
            surface.fill(HEALTH_COLOUR, pygame.Rect(30, 30, width, 40))

        if self.font is not None:
            score = self.font.render(str(level.score), True, SCORE_COLOUR)
            surface.blit(score, (WINDOW_WIDTH - 165, 5))

        if self._marker_font is not None:
            for marker in self.markers:
                text = self._marker_font.render(str(marker.amount), True, DAMAGE_COLOUR)
                surface.blit(text, camera.to_screen(*marker.position))
        self.decay()