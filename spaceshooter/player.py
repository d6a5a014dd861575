"""The player's ship: movement, wall and enemy collisions, and shooting."""

from __future__ import annotations

import functools
import math

import pygame

from .bullet import Bullet
from .enemy import EnemyKind
from .resources import (
    COLLISION_BLOCK,
    TILE_SIZE,
    asset_path,
    load_image,
    load_sound,
    play_sound,
)

#: Tile value that doubles the player's speed.
SPEED_TILE = 1
#: Damage dealt to an enemy that touches the player.
CONTACT_DAMAGE = 100
BULLET_DAMAGE = 10
_FALLBACK_COLOUR = (80, 200, 255)


@functools.lru_cache(maxsize=None)
def _sound(name):
    return load_sound(asset_path("sounds", name))


@functools.lru_cache(maxsize=1)
def _sprite():
    return load_image(asset_path("graphics", "player.png"))


class Player:
    """The ship controlled by the keyboard."""

    SPEED = 8
    CADENCE = 10
    BULLET_SPEED = 25
    MAX_HEALTH = 100

    def __init__(self, level):
        columns, rows = len(level.grid[0]), len(level.grid)
        self.x = float(columns * TILE_SIZE // 2 + TILE_SIZE // 2)
        self.y = float(rows * TILE_SIZE // 2)
        self.speed_x = self.speed_y = 0
        self.rotation = 0.0
        self.cooldown = 0
        self.magazine: list[Bullet] = []
        self.firing = False
        self.health = self.MAX_HEALTH
        self.super_speed = False
        self._speed_sound_on = False

        self.col_right = self.col_left = self.col_down = self.col_top = False
        self.corner_top_left = self.corner_top_right = False
        self.corner_bottom_left = self.corner_bottom_right = False
        self.pixels_right = self.pixels_left = self.pixels_down = self.pixels_top = 0
        self.go_right = self.go_left = self.go_up = self.go_down = False

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def steer(self, controls) -> None:
        """Set the intended directions and speeds from the controls."""
        self.go_down = self.go_up = self.go_right = self.go_left = False
        self.speed_x = self.speed_y = 0
        dx, dy = (int(value) for value in controls.direction)

        if dy < 0:
            self.go_up = True
            self.speed_y = self.SPEED
        elif dy > 0:
            self.go_down = True
            self.speed_y = self.SPEED

        if dx < 0:
            self.go_left = True
            self.speed_x = self.SPEED
        elif dx > 0:
            self.go_right = True
            self.speed_x = self.SPEED

    def check_collisions(self, level, gui, volume, camera) -> None:
        """Update wall flags, resolve contact with enemies and detect speed tiles."""
        half = TILE_SIZE // 2
        x, y = self.x, self.y

        def hit(px, py):
            return level.tile_at(int(px), int(py)) > COLLISION_BLOCK

        for i in range(int(self.speed_x)):
            if hit(x + half - 1 + i, y + half - 1):
                self.col_right, self.pixels_right = True, i
                break
            if hit(x + half - 1 + i, y - half):
                self.col_right, self.pixels_right = True, i
            else:
                self.col_right = False
            if hit(x - half - i, y + half - 1):
                self.col_left, self.pixels_left = True, i
                break
            if hit(x - half - i, y - half):
                self.col_left, self.pixels_left = True, i
            else:
                self.col_left = False

        for i in range(int(self.speed_y)):
            if hit(x + half - 1, y + half - 1 + i):
                self.col_down, self.pixels_down = True, i
                break
            if hit(x - half, y + half - 1 + i):
                self.col_down, self.pixels_down = True, i
            else:
                self.col_down = False
            if hit(x + half - 1, y - half - i):
                self.col_top, self.pixels_top = True, i
                break
            if hit(x - half, y - half - i):
                self.col_top, self.pixels_top = True, i
            else:
                self.col_top = False

        sx, sy = self.speed_x, self.speed_y
        if not self.col_left:
            self.corner_top_left = hit(x - half - sx, y - half - sy)
            self.corner_bottom_left = hit(x - half - sx, y + half - 1 + sy)
        if not self.col_right:
            self.corner_top_right = hit(x + half - 1 + sx, y - half - sy)
            self.corner_bottom_right = hit(x + half - 1 + sx, y + half - 1 + sy)

        level.refresh_active(camera)
        for index in list(level.active_enemies):
            enemy = level.enemies[index]
            ex, ey = enemy.position
            apart = (
                x + half < ex - half
                or x - half > ex + half
                or y + half < ey - half
                or y - half > ey + half
            )
            if apart:
                continue
            if enemy.kind == EnemyKind.KAMIKAZE:
                self.take_damage(enemy.damage, volume)
                gui.add_damage(self.position, enemy.damage)
            level.damage_enemy(index, CONTACT_DAMAGE, volume)

        if level.tile_at(int(x), int(y)) == SPEED_TILE:
            if not self._speed_sound_on:
                sound = _sound("speed.wav")
                if sound is not None:
                    sound.set_volume(volume / 100)
                    sound.play(loops=-1)
                self._speed_sound_on = True
            self.super_speed = True
        else:
            self.super_speed = False
            self.stop_speed_sound()

    def move(self) -> None:
        """Move one frame in every intended direction that is not blocked."""
        step = self.SPEED * 2 if self.super_speed else self.SPEED
        if self.go_right and not self.col_right:
            self.x += step
        if self.go_left and not self.col_left:
            self.x -= step
        if (
            self.go_down
            and not self.col_down
            and not self.corner_bottom_left
            and not self.corner_bottom_right
        ):
            self.y += step
        if (
            self.go_up
            and not self.col_top
            and not self.corner_top_left
            and not self.corner_top_right
        ):
            self.y -= step

    def fire(self, controls, level, camera, gui, volume) -> None:
        """Shoot when allowed, then advance bullets and drop those that hit something."""
        if controls.btn_a and self.cooldown == 0:
            self.firing = True
            play_sound(_sound("piou.wav"), volume)
        if self.firing:
            angle = self.rotation - math.pi / 2
            self.magazine.append(
                Bullet(
                    BULLET_DAMAGE,
                    self.x,
                    self.y,
                    self.BULLET_SPEED * math.cos(angle),
                    self.BULLET_SPEED * math.sin(angle),
                    rotation=math.degrees(self.rotation),
                )
            )
            self.cooldown = self.CADENCE
            self.firing = False

        if self.cooldown:
            self.cooldown -= 1

        survivors = []
        for bullet in self.magazine:
            bullet.advance()
            if not bullet.collides(level, camera, gui, volume):
                survivors.append(bullet)
        self.magazine = survivors

    def aim(self, controls) -> None:
        """Point the ship along the control direction (radians, 0 is up)."""
        dx, dy = controls.direction
        self.rotation = math.atan2(dx, -dy)

    def take_damage(self, amount, volume) -> None:
        play_sound(_sound("impact_player.wav"), volume)
        self.health -= amount

    def is_dead(self, volume) -> bool:
        """Return whether the player has no health left, playing the death sound if so."""
        dead = self.health <= 0
        if dead:
            play_sound(_sound("death.wav"), volume)
        return dead

    def stop_speed_sound(self) -> None:
        sound = _sound("speed.wav")
        if sound is not None:
            sound.stop()
        self._speed_sound_on = False

    def draw(self, surface, camera) -> None:
        for bullet in self.magazine:
            bullet.draw(surface, camera)
        sx, sy = camera.to_screen(self.x, self.y)
        sprite = _sprite()
        if sprite is None:
            pygame.draw.circle(surface, _FALLBACK_COLOUR, (int(sx), int(sy)), TILE_SIZE // 2)
            return
        rotated = pygame.transform.rotate(sprite, -math.degrees(self.rotation))
        surface.blit(rotated, rotated.get_rect(center=(sx, sy)))