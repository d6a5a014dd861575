from types import SimpleNamespace

from spaceshooter.camera import Camera
from spaceshooter.resources import WINDOW_HEIGHT, WINDOW_WIDTH


def big_level():
    return SimpleNamespace(grid=[[0] * 50 for _ in range(50)])


def test_starts_on_player():
    player = SimpleNamespace(position=(1000.0, 900.0))
    assert Camera(player).position == (1000.0, 900.0)


def test_stays_inside_free_zone():
    player = SimpleNamespace(position=(1000.0, 1000.0))
    camera = Camera(player)
    player.position = (1000.0 + Camera.FREEPLACE_X - 1, 1000.0)
    assert camera.follow(player, big_level()) == (1000.0, 1000.0)
    assert not (camera.go_left or camera.go_right or camera.go_up or camera.go_down)


def test_follows_to_the_right():
    player = SimpleNamespace(position=(1000.0, 1000.0))
    camera = Camera(player)
    player.position = (1300.0, 1000.0)
    camera.follow(player, big_level())
    assert camera.x == 1300.0 - Camera.FREEPLACE_X
    assert camera.go_left is True


def test_follows_downwards():
    player = SimpleNamespace(position=(1000.0, 1000.0))
    camera = Camera(player)
    player.position = (1000.0, 1150.0)
    camera.follow(player, big_level())
    assert camera.y == 1150.0 - Camera.FREEPLACE_Y
    assert camera.go_up is True


def test_does_not_pass_left_edge():
    player = SimpleNamespace(position=(300.0, 1000.0))
    camera = Camera(player)
    player.position = (50.0, 1000.0)
    camera.follow(player, big_level())
    assert camera.x == 300.0
    assert camera.go_right is False


def test_to_screen_centre():
    camera = Camera(SimpleNamespace(position=(777.0, 555.0)))
    assert camera.to_screen(777.0, 555.0) == (WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2)


def test_to_screen_preserves_offsets():
    camera = Camera(SimpleNamespace(position=(500.0, 500.0)))
    ax, ay = camera.to_screen(510.0, 480.0)
    bx, by = camera.to_screen(500.0, 500.0)
    assert (ax - bx, ay - by) == (10.0, -20.0)