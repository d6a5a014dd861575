import random

import pytest

from spaceshooter.enemy import EnemyKind, Kamikaze, Sniper
from spaceshooter.level import Level
from spaceshooter.spawner import Spawner, make_enemy


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, n):
        return self.value


def _stats(enemy):
    return (enemy.health, enemy.speed, enemy.damage)


def test_pinned_stats():
    assert _stats(make_enemy(1, EnemyKind.SNIPER, (0, 0))) == (20, 4, 10)
    assert _stats(make_enemy(3, EnemyKind.KAMIKAZE, (0, 0))) == (30, 10, 50)


@pytest.mark.parametrize("kind", list(EnemyKind))
def test_stats_grow_with_difficulty(kind):
    stats = [_stats(make_enemy(d, kind, (0, 0))) for d in (1, 2, 3)]
    for lower, higher in zip(stats, stats[1:]):
        assert all(h > l for l, h in zip(lower, higher))


def test_make_enemy_class_and_position():
    sniper = make_enemy(2, EnemyKind.SNIPER, (12, 34))
    kamikaze = make_enemy(2, 0, (5, 6))
    assert isinstance(sniper, Sniper) and sniper.position == (12, 34)
    assert isinstance(kamikaze, Kamikaze) and kamikaze.kind is EnemyKind.KAMIKAZE


@pytest.mark.parametrize("difficulty", [0, 4])
def test_unknown_difficulty(difficulty):
    with pytest.raises(ValueError):
        make_enemy(difficulty, EnemyKind.KAMIKAZE, (0, 0))


@pytest.mark.parametrize("draw, cls", [(0, Sniper), (1, Sniper), (2, Kamikaze), (9, Kamikaze)])
def test_spawn_kind_depends_on_draw(draw, cls):
    level = Level(1)
    spawner = Spawner((96.0, 160.0))
    enemy = spawner.spawn(1, level, _FixedRng(draw))
    assert isinstance(enemy, cls)
    assert level.enemies == [enemy]
    assert enemy.position == spawner.position


def test_spawn_invalid_difficulty_adds_nothing():
    level = Level(9)
    with pytest.raises(ValueError):
        Spawner((0.0, 0.0)).spawn(9, level, _FixedRng(5))
    assert level.enemies == []


def test_spawn_with_random_source_yields_both_kinds():
    level = Level(1)
    spawner = Spawner((0.0, 0.0))
    rng = random.Random(1234)
    kinds = {spawner.spawn(1, level, rng).kind for _ in range(200)}
    assert kinds == set(EnemyKind)
    assert len(level.enemies) == len(level.paths) == 200