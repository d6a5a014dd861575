from types import SimpleNamespace

from spaceshooter.bullet import Bullet
from spaceshooter.camera import Camera
from spaceshooter.gui import Gui
from spaceshooter.resources import TILE_SIZE, WINDOW_WIDTH


class FakeLevel:
    def __init__(self, grid, enemies=()):
        self.grid = grid
        self.enemies = list(enemies)
        self.active_enemies = list(range(len(self.enemies)))
        self.damaged = []

    def damage_enemy(self, index, damage, volume):
        self.damaged.append((index, damage, volume))

    def tile_at(self, x, y):
        return self.grid[y // TILE_SIZE][x // TILE_SIZE]


def open_grid():
    return [[0] * 30 for _ in range(20)]


def centred_camera():
    return Camera(SimpleNamespace(position=(640.0, 360.0)))


def test_advance_moves_by_velocity():
    bullet = Bullet(10, 100.0, 100.0, 5.0, -25.0)
    bullet.advance()
    bullet.advance()
    assert bullet.position == (110.0, 50.0)


def test_out_of_view_collides():
    level = FakeLevel(open_grid())
    bullet = Bullet(10, 640.0 + WINDOW_WIDTH // 2 + 1, 360.0)
    assert bullet.collides(level, centred_camera(), Gui(), 50) is True
    assert level.damaged == []


def test_hits_active_enemy():
    level = FakeLevel(open_grid(), [SimpleNamespace(position=(700.0, 400.0))])
    gui = Gui()
    bullet = Bullet(10, 710.0, 390.0)
    assert bullet.collides(level, centred_camera(), gui, 50) is True
    assert level.damaged == [(0, 10, 50)]
    assert [(m.position, m.amount) for m in gui.markers] == [((710.0, 390.0), 10)]


def test_inactive_enemy_is_ignored():
    level = FakeLevel(open_grid(), [SimpleNamespace(position=(700.0, 400.0))])
    level.active_enemies = []
    assert Bullet(10, 710.0, 390.0).collides(level, centred_camera(), Gui(), 50) is False
    assert level.damaged == []


def test_open_and_speed_tiles_do_not_stop_bullet():
    grid = open_grid()
    grid[5][10] = 1
    level = FakeLevel(grid)
    camera = centred_camera()
    assert Bullet(10, 300.0, 300.0).collides(level, camera, Gui(), 50) is False
    assert Bullet(10, 10 * TILE_SIZE + 5.0, 5 * TILE_SIZE + 5.0).collides(level, camera, Gui(), 50) is False


def test_wall_tile_stops_bullet():
    grid = open_grid()
    grid[5][10] = 2
    level = FakeLevel(grid)
    bullet = Bullet(10, 10 * TILE_SIZE + 5.0, 5 * TILE_SIZE + 5.0)
    assert bullet.collides(level, centred_camera(), Gui(), 50) is True