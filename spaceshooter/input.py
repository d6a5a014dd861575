"""Keyboard state for the player's controls."""

from __future__ import annotations

import pygame

AXIS_VALUE = 100.0


class Input:
    """Tracks the movement direction, the two buttons and quit requests."""

    def __init__(self):
        self.dir_x = 0.0
        self.dir_y = 0.0
        self.btn_a = False
        self.btn_b = False
        self.quit_requested = False

    @property
    def direction(self) -> tuple[float, float]:
        return (self.dir_x, self.dir_y)

    def process(self, events) -> bool:
        """Handle one frame of events; buttons only last one frame. Return quit state."""
        self.btn_a = self.btn_b = False
        for event in events:
            self.handle_event(event)
        return self.quit_requested

    def handle_event(self, event) -> None:
        if event.type == pygame.QUIT:
            self.quit_requested = True
        elif event.type == pygame.KEYDOWN:
            self._press(event.key)
        elif event.type == pygame.KEYUP:
            self._release(event.key)

    def _press(self, key) -> None:
        if key == pygame.K_a:
            self.dir_x = -AXIS_VALUE
        elif key == pygame.K_d:
            self.dir_x = AXIS_VALUE
        elif key == pygame.K_w:
            self.dir_y = -AXIS_VALUE
        elif key == pygame.K_s:
            self.dir_y = AXIS_VALUE
        elif key == pygame.K_SPACE:
            self.btn_a = True
        elif key == pygame.K_LSHIFT:
            self.btn_b = True
        elif key == pygame.K_ESCAPE:
            self.quit_requested = True

    def _release(self, key) -> None:
        if key == pygame.K_a:
            if self.dir_x < 0:
                self.dir_x = 0.0
        elif key == pygame.K_d:
            if self.dir_x > 0:
                self.dir_x = 0.0
        elif key == pygame.K_w:
            if self.dir_y < 0:
                self.dir_y = 0.0
        elif key == pygame.K_s:
            if self.dir_y > 0:
                self.dir_y = 0.0
        elif key == pygame.K_SPACE:
            self.btn_a = False
        elif key == pygame.K_LSHIFT:
            self.btn_b = False