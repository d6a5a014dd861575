"""Projectiles fired by the player."""

from __future__ import annotations

import functools
from dataclasses import dataclass

import pygame

from .resources import COLLISION_BLOCK, TILE_SIZE, WINDOW_WIDTH, asset_path, load_image

_FALLBACK_COLOUR = (255, 220, 0)


@functools.lru_cache(maxsize=1)
def _sprite():
    return load_image(asset_path("graphics", "bullet.png"))


@dataclass
class Bullet:
    """A bullet with a position, a per-frame velocity and a sprite rotation in degrees."""

    damage: int
    x: float = 0.0
    y: float = 0.0
    dx: float = 0.0
    dy: float = 0.0
    rotation: float = 0.0

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def advance(self) -> None:
        self.x += self.dx
        self.y += self.dy

    def collides(self, level, camera, gui, volume) -> bool:
        """Return True when the bullet left the view, hit an active enemy or a wall.

        Hitting an enemy damages it and shows a damage marker.
        """
        half = WINDOW_WIDTH // 2
        if (
            self.x < camera.x - half
            or self.x > camera.x + half
            or self.y < camera.y - half
            or self.y > camera.y + half
        ):
            return True

        reach = TILE_SIZE // 2
        for index in level.active_enemies:
            ex, ey = level.enemies[index].position
            if ex - reach < self.x < ex + reach and ey - reach < self.y < ey + reach:
                gui.add_damage(self.position, self.damage)
                level.damage_enemy(index, self.damage, volume)
                return True

        return level.tile_at(int(self.x), int(self.y)) > COLLISION_BLOCK

    def draw(self, surface, camera) -> None:
        sx, sy = camera.to_screen(self.x, self.y)
        sprite = _sprite()
        if sprite is None:
            pygame.draw.circle(surface, _FALLBACK_COLOUR, (int(sx), int(sy)), 3)
            return
        rotated = pygame.transform.rotate(sprite, -self.rotation)
        surface.blit(rotated, rotated.get_rect(center=(sx, sy)))