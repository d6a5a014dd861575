"""A* search over the tile grid, producing a string of direction digits."""

from __future__ import annotations

import heapq
import itertools
import math
from dataclasses import dataclass

from .resources import COLLISION_BLOCK

#: Offsets for directions 0..7: right, down-right, down, down-left, left, up-left, up, up-right.
DIRECTIONS = ((1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1), (0, -1), (1, -1))
DIR_COUNT = len(DIRECTIONS)


@dataclass
class Node:
    """A search node: grid position, cost so far and priority (lower is better)."""

    x: int
    y: int
    level: int = 0
    priority: int = 0

    def estimate(self, x_dest, y_dest) -> int:
        """Truncated Euclidean distance to the destination."""
        return int(math.sqrt((x_dest - self.x) ** 2 + (y_dest - self.y) ** 2))

    def update_priority(self, x_dest, y_dest) -> None:
        self.priority = self.level + self.estimate(x_dest, y_dest) * 10

    def next_level(self, direction) -> None:
        """Add the cost of one step; straight steps are cheaper than diagonal ones."""
        self.level += 10 if direction % 2 == 0 else 14


def find_path(grid, x_start, y_start, x_finish, y_finish) -> str:
    """Return the moves from start to finish as direction digits, or "" if unreachable.

    Tiles above the collision block are impassable; the start tile is always allowed.
    """
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("empty grid")
    height, width = len(rows), len(rows[0])
    for label, (x, y) in (("start", (x_start, y_start)), ("finish", (x_finish, y_finish))):
        if not (0 <= x < width and 0 <= y < height):
            raise ValueError(f"{label} ({x}, {y}) is outside the {width}x{height} grid")

    blocked = [[tile > COLLISION_BLOCK for tile in row[:width]] for row in rows]
    closed = [[False] * width for _ in range(height)]
    open_priority = [[0] * width for _ in range(height)]
    parent_dir = [[0] * width for _ in range(height)]

    counter = itertools.count()
    start = Node(x_start, y_start)
    start.update_priority(x_finish, y_finish)
    open_priority[y_start][x_start] = start.priority
    heap = [(start.priority, next(counter), start)]

    while heap:
        priority, _, node = heapq.heappop(heap)
        x, y = node.x, node.y
        if closed[y][x] or priority != open_priority[y][x]:
            continue
        open_priority[y][x] = 0
        closed[y][x] = True

        if (x, y) == (x_finish, y_finish):
            return _trace(parent_dir, x, y, x_start, y_start)

        for direction, (dx, dy) in enumerate(DIRECTIONS):
            nx, ny = x + dx, y + dy
            if not (0 <= nx < width and 0 <= ny < height):
                continue
            if blocked[ny][nx] or closed[ny][nx]:
                continue
            child = Node(nx, ny, node.level, node.priority)
            child.next_level(direction)
            child.update_priority(x_finish, y_finish)
            known = open_priority[ny][nx]
            if known == 0 or known > child.priority:
                open_priority[ny][nx] = child.priority
                parent_dir[ny][nx] = (direction + DIR_COUNT // 2) % DIR_COUNT
                heapq.heappush(heap, (child.priority, next(counter), child))
    return ""


def _trace(parent_dir, x, y, x_start, y_start) -> str:
    steps = []
    while (x, y) != (x_start, y_start):
        back = parent_dir[y][x]
        steps.append(str((back + DIR_COUNT // 2) % DIR_COUNT))
        x += DIRECTIONS[back][0]
        y += DIRECTIONS[back][1]
    return "".join(reversed(steps))