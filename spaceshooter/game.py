"""The game loop tying the player, the level, the camera and the HUD together."""

from __future__ import annotations

import argparse
import enum
import random

import pygame

from .camera import Camera
from .gui import Gui
from .input import Input
from .level import Level
from .player import Player
from .resources import WINDOW_HEIGHT, WINDOW_WIDTH

FRAME_RATE = 60
BACKGROUND_COLOUR = (0, 0, 0)


class GameOutcome(enum.IntEnum):
    """Why a game stopped running."""

    CLOSED = 0
    MENU = 4
    GAME_OVER = 5


class Game:
    """One game session on one map at one difficulty."""

    def __init__(self, difficulty=1, map_number=1, volume=50, rng=None):
        self.difficulty = difficulty
        self.map_number = map_number
        self.volume = volume
        self.rng = rng if rng is not None else random.Random()
        self.gui = None
        self.input = None
        self.level = None
        self.player = None
        self.camera = None

    def load(self, difficulty, map_number, volume) -> None:
        """Prepare a new session on one of the bundled maps."""
        level = Level(difficulty)
        level.load(map_number)
        self.difficulty = difficulty
        self.map_number = map_number
        self._start(level, volume)

    def _start(self, level, volume) -> None:
        self.volume = volume
        self.difficulty = level.difficulty
        self.gui = Gui()
        self.input = Input()
        self.level = level
        self.player = Player(level)
        self.camera = Camera(self.player)
        level.place_background(self.player)
        self.gui.load()

    def step(self, events, surface):
        """Run one frame; return a GameOutcome when the session ends, else None."""
        if self.player is None:
            raise RuntimeError("the game is not loaded")
        level, player, camera, controls = self.level, self.player, self.camera, self.input

        surface.fill(BACKGROUND_COLOUR)
        controls.process(events)
        level.draw_background(surface, camera)
        level.draw_map(surface, camera)
        player.steer(controls)
        player.check_collisions(level, self.gui, self.volume, camera)
        player.move()
        player.fire(controls, level, camera, self.gui, self.volume)
        player.aim(controls)
        player.draw(surface, camera)
        level.tick_spawners(player, self.rng)
        level.draw_enemies(surface, camera)
        level.move_enemies(player)
        camera.follow(player, level)
        level.remove_dead(self.volume)
        self.gui.draw(surface, camera, level, player)

        if player.is_dead(self.volume):
            player.stop_speed_sound()
            self.reset()
            return GameOutcome.GAME_OVER
        if controls.btn_b:
            player.stop_speed_sound()
            return GameOutcome.MENU
        if controls.quit_requested:
            return GameOutcome.CLOSED
        return None

    def run(self, screen, clock) -> GameOutcome:
        """Play frames on ``screen`` until the session ends."""
        while True:
            outcome = self.step(pygame.event.get(), screen)
            if outcome is not None:
                return outcome
            pygame.display.flip()
            clock.tick(FRAME_RATE)

    def reset(self) -> None:
        self.gui = None
        self.input = None
        self.camera = None
        self.player = None
        self.level = None


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="spaceshooter", description="A top-down space shooter.")
    parser.add_argument("--difficulty", type=int, choices=(1, 2, 3), default=1)
    parser.add_argument("--map", dest="map_number", type=int, choices=(1, 2, 3), default=1)
    parser.add_argument("--volume", type=int, default=50)
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Space Shooter")
        game = Game()
        game.load(args.difficulty, args.map_number, args.volume)
        game.run(screen, pygame.time.Clock())
    finally:
        pygame.quit()
    return 0