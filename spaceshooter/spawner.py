"""Spawn points that create enemies according to the difficulty."""

from __future__ import annotations

import random
from dataclasses import dataclass

from .enemy import EnemyKind, Kamikaze, Sniper

#: (health, speed, damage) per kind and difficulty.
_STATS = {
    EnemyKind.SNIPER: {1: (20, 4, 10), 2: (40, 6, 15), 3: (50, 8, 20)},
    EnemyKind.KAMIKAZE: {1: (10, 6, 10), 2: (20, 8, 25), 3: (30, 10, 50)},
}
_CLASSES = {EnemyKind.SNIPER: Sniper, EnemyKind.KAMIKAZE: Kamikaze}

#: A sniper spawns when a draw from 0..9 is below this.
SNIPER_ODDS = 2


def make_enemy(difficulty, kind, position):
    """Create an enemy of ``kind`` with the stats of ``difficulty`` at ``position``."""
    kind = EnemyKind(kind)
    try:
        health, speed, damage = _STATS[kind][difficulty]
    except KeyError:
        raise ValueError(f"unknown difficulty {difficulty!r}") from None
    return _CLASSES[kind](health, speed, damage, kind, position)


@dataclass
class Spawner:
    position: tuple[float, float]

    def spawn(self, difficulty, level, rng=None):
        """Add a random enemy to ``level`` at this spawner and return it."""
        rng = rng if rng is not None else random
        kind = EnemyKind.SNIPER if rng.randrange(10) < SNIPER_ODDS else EnemyKind.KAMIKAZE
        enemy = make_enemy(difficulty, kind, self.position)
        level.add_enemy(enemy)
        return enemy