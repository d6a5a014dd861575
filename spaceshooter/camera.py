"""A camera that follows the player with a free zone around the centre."""

from __future__ import annotations

from .resources import TILE_SIZE, WINDOW_HEIGHT, WINDOW_WIDTH


class Camera:
    """Centre of the view in world coordinates, plus the direction it last moved."""

    FREEPLACE_X = 200
    FREEPLACE_Y = 100

    def __init__(self, player):
        self.x, self.y = player.position
        self.go_right = self.go_left = self.go_up = self.go_down = False

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def follow(self, player, level) -> tuple[float, float]:
        """Move towards the player when it leaves the free zone; return the new centre."""
        self.go_right = self.go_left = self.go_up = self.go_down = False
        px, py = player.position
        map_width = len(level.grid[0]) * TILE_SIZE
        map_height = len(level.grid) * TILE_SIZE
        half_w, half_h = WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2

        if px < self.x - self.FREEPLACE_X:
            if px + self.FREEPLACE_X - half_w > 0:
                self.x = px + self.FREEPLACE_X
                self.go_right = True
        elif px > self.x + self.FREEPLACE_X:
            if px - self.FREEPLACE_X + half_w < map_width:
                self.x = px - self.FREEPLACE_X
                self.go_left = True

        if py < self.y - self.FREEPLACE_Y:
            if py + self.FREEPLACE_Y - half_h > 0:
                self.y = py + self.FREEPLACE_Y
                self.go_down = True
        elif py > self.y + self.FREEPLACE_Y:
            if py - self.FREEPLACE_Y + half_h < map_height:
                self.y = py - self.FREEPLACE_Y
                self.go_up = True

        return self.position

    def to_screen(self, x, y) -> tuple[float, float]:
        """Convert world coordinates to window coordinates."""
        return (x - self.x + WINDOW_WIDTH // 2, y - self.y + WINDOW_HEIGHT // 2)