"""Enemies that chase the player along paths computed on the tile grid."""

from __future__ import annotations

import enum
import functools
import math

import pygame

from .resources import (
    COLLISION_BLOCK,
    TILE_SIZE,
    asset_path,
    load_image,
    load_sound,
    play_sound,
)

#: Unit direction for each path digit, matching the pathfinder's encoding.
_STEERING = {
    0: (1, 0),
    1: (1, 1),
    2: (0, 1),
    3: (-1, 1),
    4: (-1, 0),
    5: (-1, -1),
    6: (0, -1),
    7: (1, -1),
}


class EnemyKind(enum.IntEnum):
    KAMIKAZE = 0
    SNIPER = 1


@functools.lru_cache(maxsize=None)
def _sprite(name):
    return load_image(asset_path("graphics", name))


@functools.lru_cache(maxsize=1)
def _hit_sound():
    return load_sound(asset_path("sounds", "impact_enemy.wav"))


def _path_direction(path):
    """Return the direction of the first step of ``path``, or None."""
    if not path:
        return None
    return _STEERING.get(ord(path[0]) - ord("0"))


class Enemy:
    """An enemy with health, a movement speed and the damage it deals on contact."""

    DEFAULT_KIND = EnemyKind.KAMIKAZE
    SPRITE: str | None = None
    COLOUR = (200, 60, 60)

    def __init__(self, health, speed, damage, kind=None, position=(0.0, 0.0)):
        self.health = health
        self.speed = speed
        self.damage = damage
        self.kind = EnemyKind(kind) if kind is not None else self.DEFAULT_KIND
        self.x, self.y = position
        self.speed_x = self.speed_y = 0
        self.dir_x = self.dir_y = 0
        self.rotation = 0.0
        self.col_top = self.col_down = self.col_right = self.col_left = False
        self.go_top = self.go_down = self.go_right = self.go_left = False

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    @position.setter
    def position(self, value) -> None:
        self.x, self.y = value

    def take_damage(self, amount, volume) -> None:
        play_sound(_hit_sound(), volume)
        self.health -= amount

    def steer(self, path) -> None:
        """Set speed, direction and intent flags from the first step of ``path``."""
        self.go_down = self.go_top = self.go_right = self.go_left = False
        self.speed_x = self.speed_y = 0
        self.dir_x = self.dir_y = 0
        step = _path_direction(path)
        if step is None:
            return
        dx, dy = step
        self.dir_x, self.dir_y = dx, dy
        if dx:
            self.speed_x = self.speed
        if dy:
            self.speed_y = self.speed
        self.go_right, self.go_left = dx > 0, dx < 0
        self.go_down, self.go_top = dy > 0, dy < 0

    def check_collisions(self, level) -> None:
        """Update the wall flags; an enemy outside the map is killed."""
        map_height = len(level.grid) * TILE_SIZE
        map_width = len(level.grid[0]) * TILE_SIZE
        if self.y > map_height or self.y < 0 or self.x > map_width or self.x < 0:
            self.health = 0
            return

        half = TILE_SIZE // 2
        x, y = self.x, self.y

        def hit(px, py):
            return level.tile_at(int(px), int(py)) > COLLISION_BLOCK

        for i in range(int(self.speed_x)):
            if hit(x + half - 1 + i, y + half - 1):
                self.col_right = True
                break
            self.col_right = hit(x + half - 1 + i, y - half)
            if hit(x - half - i, y + half - 1):
                self.col_left = True
                break
            self.col_left = hit(x - half - i, y - half)

        for i in range(int(self.speed_y)):
            if hit(x + half - 1, y + half - 1 + i):
                self.col_down = True
                break
            self.col_down = hit(x - half, y + half - 1 + i)
            if hit(x + half - 1, y - half - i):
                self.col_top = True
                break
            self.col_top = hit(x - half, y - half - i)

    def step(self, path) -> None:
        """Move one frame along the first step of ``path``, sliding along walls."""
        step = _path_direction(path)
        if step is None:
            return
        dx, dy = step
        v = self.speed
        if dy == 0:
            blocked = self.col_right if dx > 0 else self.col_left
            if not blocked:
                self.x += dx * v
            elif self.col_down:
                self.y -= v
            elif self.col_top:
                self.y += v
        elif dx == 0:
            blocked = self.col_down if dy > 0 else self.col_top
            if not blocked:
                self.y += dy * v
            elif self.col_right:
                self.x -= v
            elif self.col_left:
                self.x += v
        elif not self.col_right and not self.col_left:
            self.x += dx * v
            self.y += dy * v
        else:
            toward = self.col_right if dx > 0 else self.col_left
            away = self.col_left if dx > 0 else self.col_right
            if toward:
                self.y += dy * v
            if away:
                self.x += dx * v

    def draw(self, surface, camera) -> None:
        self.rotation = math.atan2(self.dir_x, -self.dir_y)
        sx, sy = camera.to_screen(self.x, self.y)
        sprite = _sprite(self.SPRITE) if self.SPRITE else None
        if sprite is None:
            pygame.draw.circle(surface, self.COLOUR, (int(sx), int(sy)), TILE_SIZE // 2)
            return
        rotated = pygame.transform.rotate(sprite, -math.degrees(self.rotation))
        surface.blit(rotated, rotated.get_rect(center=(sx, sy)))


class Kamikaze(Enemy):
    """An enemy that hurts the player by ramming into it."""

    DEFAULT_KIND = EnemyKind.KAMIKAZE
    SPRITE = "kamikaze.png"
    COLOUR = (220, 120, 40)


class Sniper(Enemy):
    """A slower, tougher enemy with its own magazine."""

    DEFAULT_KIND = EnemyKind.SNIPER
    SPRITE = "sniper.png"
    COLOUR = (150, 60, 200)

    def __init__(self, health, speed, damage, kind=None, position=(0.0, 0.0)):
        super().__init__(health, speed, damage, kind, position)
        self.magazine = []
        self.fire_rate = 0