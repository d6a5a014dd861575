import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from spaceshooter.enemy import Enemy, EnemyKind, Kamikaze, Sniper
from spaceshooter.level import Level
from spaceshooter.pathfinding import DIRECTIONS
from spaceshooter.resources import TILE_SIZE, WINDOW_HEIGHT, WINDOW_WIDTH

HALF = TILE_SIZE // 2


class _Camera:
    def __init__(self, x, y):
        self.x, self.y = x, y

    def to_screen(self, x, y):
        return (x - self.x + WINDOW_WIDTH // 2, y - self.y + WINDOW_HEIGHT // 2)


def _level(rows):
    level = Level(1)
    level.load_text("\n".join(" ".join(str(t) for t in row) for row in rows) + "\n")
    return level


def _open_level(size=6):
    return _level([[0] * size for _ in range(size)])


def _centre(col, row):
    return (col * TILE_SIZE + HALF, row * TILE_SIZE + HALF)


@pytest.mark.parametrize("digit", "01234567")
def test_steer_follows_path_encoding(digit):
    enemy = Kamikaze(10, 6, 10, position=_centre(2, 2))
    enemy.steer(digit)
    dx, dy = DIRECTIONS[int(digit)]
    assert (enemy.dir_x, enemy.dir_y) == (dx, dy)
    assert enemy.speed_x == (6 if dx else 0)
    assert enemy.speed_y == (6 if dy else 0)
    assert enemy.go_right == (dx > 0) and enemy.go_left == (dx < 0)
    assert enemy.go_down == (dy > 0) and enemy.go_top == (dy < 0)


@pytest.mark.parametrize("path", ["9", ""])
def test_steer_unknown_step_stops(path):
    enemy = Kamikaze(10, 6, 10)
    enemy.steer("0")
    enemy.steer(path)
    assert (enemy.speed_x, enemy.speed_y, enemy.dir_x, enemy.dir_y) == (0, 0, 0, 0)
    assert not (enemy.go_right or enemy.go_left or enemy.go_top or enemy.go_down)


@pytest.mark.parametrize("digit", "01234567")
def test_step_in_open_space(digit):
    level = _open_level()
    start = _centre(2, 2)
    enemy = Kamikaze(10, 6, 10, position=start)
    enemy.steer(digit)
    enemy.check_collisions(level)
    enemy.step(digit)
    dx, dy = DIRECTIONS[int(digit)]
    assert (enemy.x - start[0], enemy.y - start[1]) == (dx * 6, dy * 6)


def test_wall_blocks_straight_move():
    level = _level([[0, 0, 0, 0], [0, 0, 3, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
    start = _centre(1, 1)
    enemy = Kamikaze(10, 8, 10, position=start)
    enemy.steer("0")
    enemy.check_collisions(level)
    assert enemy.col_right
    enemy.step("0")
    assert enemy.position == start


def test_wall_makes_diagonal_slide():
    level = _level([[0, 0, 0, 0], [0, 0, 3, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
    start = _centre(1, 1)
    enemy = Kamikaze(10, 8, 10, position=start)
    enemy.steer("1")
    enemy.check_collisions(level)
    enemy.step("1")
    assert enemy.x == start[0]
    assert enemy.y == start[1] + 8


@pytest.mark.parametrize("position", [(-5, 10), (10, -5), (6 * TILE_SIZE + 1, 10)])
def test_outside_map_kills(position):
    enemy = Sniper(20, 4, 10, position=position)
    enemy.check_collisions(_open_level())
    assert enemy.health == 0


def test_take_damage_reduces_health():
    enemy = Sniper(20, 4, 10)
    enemy.take_damage(7, 50)
    assert enemy.health == 13


def test_kinds():
    assert Kamikaze(1, 1, 1).kind is EnemyKind.KAMIKAZE
    assert Sniper(1, 1, 1).kind is EnemyKind.SNIPER
    assert Enemy(1, 1, 1, 1).kind is EnemyKind.SNIPER
    assert (int(EnemyKind.KAMIKAZE), int(EnemyKind.SNIPER)) == (0, 1)


def test_position_setter():
    enemy = Kamikaze(1, 1, 1)
    enemy.position = (12.0, 34.0)
    assert (enemy.x, enemy.y) == (12.0, 34.0)


def test_draw_paints_pixels():
    surface = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    enemy = Kamikaze(10, 6, 10, position=(500, 500))
    enemy.steer("2")
    enemy.draw(surface, _Camera(500, 500))
    black = pygame.mask.from_threshold(surface, (0, 0, 0, 255), (1, 1, 1, 255)).count()
    assert black < WINDOW_WIDTH * WINDOW_HEIGHT