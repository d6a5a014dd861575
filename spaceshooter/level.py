"""The tile map, its spawners and the enemies living on it."""

from __future__ import annotations

import functools
import re

import pygame

from .enemy import EnemyKind
from .pathfinding import find_path
from .resources import (
    TILE_SIZE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    asset_path,
    load_image,
    load_sound,
    play_sound,
)
from .spawner import Spawner

MAP_FILES = {1: "map1.txt", 2: "map2.txt", 3: "map3.txt"}
SPAWNER_TILE = 2
BG_SPEED = 1
BACKGROUND_ORIGIN = (3840, 2400)
SPAWN_CADENCE = 180
SPAWN_LIMIT = 4
PATHFIND_PERIOD = 60
PATHFIND_STAGGER = 6

#: Points for a kill per difficulty: (kamikaze, other kinds).
KILL_POINTS = {1: (50, 100), 2: (100, 200), 3: (250, 500)}

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FALLBACK_TILE_COLOURS = {0: (20, 20, 40), 1: (40, 90, 160), SPAWNER_TILE: (150, 40, 40)}
_FALLBACK_WALL_COLOUR = (110, 110, 110)


class TileOutOfRange(IndexError):
    """A pixel position lies outside the tile map."""


def _atoi(token):
    match = _INT_PREFIX.match(token)
    return int(match.group(1)) if match else 0


def parse_map(text):
    """Parse rows of space-separated tile numbers; blank lines are skipped."""
    return [[_atoi(token) for token in line.split(" ")] for line in text.split("\n") if line]


@functools.lru_cache(maxsize=None)
def _image(name):
    return load_image(asset_path("graphics", name))


@functools.lru_cache(maxsize=1)
def _death_sound():
    return load_sound(asset_path("sounds", "death_enemy.wav"))


class Level:
    def __init__(self, difficulty):
        self.difficulty = difficulty
        self.grid: list[list[int]] = []
        self.spawners: list[Spawner] = []
        self.enemies = []
        self.paths: list[str] = []
        self.active_enemies: list[int] = []
        self.score = 0
        self.spawn_cadence = SPAWN_CADENCE
        self.spawn_time = 0
        self.pathfind_timer = 0
        self.bg_x = 0.0
        self.bg_y = 0.0

    def load(self, number) -> None:
        """Load one of the bundled maps by number."""
        try:
            name = MAP_FILES[number]
        except KeyError:
            raise ValueError(f"unknown map {number!r}") from None
        self.load_text(asset_path("maps", name).read_text(encoding="utf-8"))

    def load_text(self, text) -> None:
        self.grid = parse_map(text)
        self.score = 0
        self.spawn_cadence = SPAWN_CADENCE
        self.pathfind_timer = 0
        self.create_spawners()

    def tile_at(self, x, y) -> int:
        """Return the tile under the pixel position (x, y)."""
        x, y = int(x), int(y)
        if x < 0 or y < 0:
            raise TileOutOfRange(f"position ({x}, {y}) is outside the map")
        row, col = y // TILE_SIZE, x // TILE_SIZE
        if row >= len(self.grid) or col >= len(self.grid[row]):
            raise TileOutOfRange(f"position ({x}, {y}) is outside the map")
        return self.grid[row][col]

    def create_spawners(self) -> None:
        half = TILE_SIZE // 2
        self.spawners = [
            Spawner((float(col * TILE_SIZE + half), float(row * TILE_SIZE + half)))
            for row, tiles in enumerate(self.grid)
            for col, tile in enumerate(tiles)
            if tile == SPAWNER_TILE
        ]

    def add_enemy(self, enemy) -> None:
        self.enemies.append(enemy)
        self.paths.append("")

    def add_points(self, points) -> None:
        self.score += points

    def refresh_active(self, camera) -> list[int]:
        """Recompute the indices of enemies overlapping the view."""
        half, half_w, half_h = TILE_SIZE // 2, WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2
        self.active_enemies = [
            index
            for index, enemy in enumerate(self.enemies)
            if enemy.x - half < camera.x + half_w
            and enemy.x + half > camera.x - half_w
            and enemy.y - half < camera.y + half_h
            and enemy.y + half > camera.y - half_h
        ]
        return self.active_enemies

    def damage_enemy(self, index, damage, volume) -> None:
        self.enemies[index].take_damage(damage, volume)

    def _kill_points(self, enemy) -> int:
        points = KILL_POINTS.get(self.difficulty)
        if points is None:
            return 0
        return points[0] if enemy.kind == EnemyKind.KAMIKAZE else points[1]

    def remove_dead(self, volume) -> int:
        """Drop enemies without health, score them and return the points gained."""
        gained = 0
        kept = []
        new_index = {}
        for index, (enemy, path) in enumerate(zip(self.enemies, self.paths)):
            if enemy.health <= 0:
                play_sound(_death_sound(), volume)
                gained += self._kill_points(enemy)
            else:
                new_index[index] = len(kept)
                kept.append((enemy, path))
        self.enemies = [enemy for enemy, _ in kept]
        self.paths = [path for _, path in kept]
        self.active_enemies = [new_index[i] for i in self.active_enemies if i in new_index]
        self.add_points(gained)
        return gained

    def _path_for(self, enemy, player) -> str:
        ex, ey = enemy.position
        px, py = player.position
        try:
            return find_path(
                self.grid,
                int(ex / TILE_SIZE),
                int(ey / TILE_SIZE),
                int(px / TILE_SIZE),
                int(py / TILE_SIZE),
            )
        except ValueError:
            return ""

    def tick_spawners(self, player, rng=None) -> list:
        """Spawn a wave when few enemies remain and the cooldown is over."""
        spawned = []
        if len(self.enemies) < SPAWN_LIMIT and self.spawn_time <= 0:
            for spawner in self.spawners:
                enemy = spawner.spawn(self.difficulty, self, rng)
                self.paths[-1] = self._path_for(enemy, player)
                spawned.append(enemy)
            self.spawn_time = self.spawn_cadence
        else:
            self.spawn_time -= 1
        return spawned

    def move_enemies(self, player) -> None:
        """Move every enemy; paths are recomputed staggered over the period."""
        for index, enemy in enumerate(self.enemies):
            if self.pathfind_timer == index * PATHFIND_STAGGER:
                self.paths[index] = self._path_for(enemy, player)
            path = self.paths[index]
            if path:
                enemy.steer(path)
                enemy.check_collisions(self)
                enemy.step(path)
        self.pathfind_timer += 1
        if self.pathfind_timer >= PATHFIND_PERIOD:
            self.pathfind_timer = 0

    def place_background(self, player) -> None:
        self.bg_x, self.bg_y = player.position

    def scroll_background(self, camera) -> tuple[float, float]:
        """Shift the background slightly against the camera's movement."""
        if camera.go_right:
            self.bg_x -= BG_SPEED
        if camera.go_left:
            self.bg_x += BG_SPEED
        if camera.go_down:
            self.bg_y -= BG_SPEED
        if camera.go_up:
            self.bg_y += BG_SPEED
        return (self.bg_x, self.bg_y)

    def draw_background(self, surface, camera) -> None:
        self.scroll_background(camera)
        image = _image("background.png")
        if image is None:
            surface.fill((0, 0, 0))
            return
        ox, oy = BACKGROUND_ORIGIN
        surface.blit(image, camera.to_screen(self.bg_x - ox, self.bg_y - oy))

    def draw_map(self, surface, camera) -> None:
        """Draw the tiles near the view."""
        half_w, half_h = WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2
        tileset = _image("tileset.png")
        for row, tiles in enumerate(self.grid):
            y = row * TILE_SIZE
            if y < camera.y - half_h - TILE_SIZE or y > camera.y + half_h + TILE_SIZE:
                continue
            for col, tile in enumerate(tiles):
                x = col * TILE_SIZE
                if x < camera.x - half_w - TILE_SIZE or x > camera.x + half_w + TILE_SIZE:
                    continue
                sx, sy = camera.to_screen(x, y)
                dest = (int(sx), int(sy))
                if tileset is None:
                    colour = _FALLBACK_TILE_COLOURS.get(tile, _FALLBACK_WALL_COLOUR)
                    surface.fill(colour, pygame.Rect(dest, (TILE_SIZE, TILE_SIZE)))
                else:
                    area = pygame.Rect(
                        tile % 10 * TILE_SIZE, tile // 10 * TILE_SIZE, TILE_SIZE, TILE_SIZE
                    )
                    surface.blit(tileset, dest, area)

    def draw_enemies(self, surface, camera) -> None:
        for index in self.active_enemies:
            self.enemies[index].draw(surface, camera)