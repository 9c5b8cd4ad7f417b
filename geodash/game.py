"""The game controller: menu, level loading and the main loop."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

import pygame
from pygame.math import Vector2

from . import obstacles  # noqa: F401  registers the static level objects
from .assets import default_object_images
from .config import SPEED, MenuAction
from .entities import MovingObject, StaticObject
from .factory import ObjectConfig, create
from .graphics import Background, Window
from .info import Info, ObjectInformation
from .menu import MenuManager
from .sound import MusicType, default_board

TILE_SIZE = 50.0
GAME_BACKGROUND_FILE = "bg.png"


def parse_level(text, images, player_type):
    """Build the objects of a level; return the moving and the static ones."""
    moving, static = [], []
    row = col = 0
    for char in text:
        config = ObjectConfig(Vector2(col * TILE_SIZE, row * TILE_SIZE), images, player_type)
        obj = create(char, config)
        if isinstance(obj, MovingObject):
            moving.append(obj)
        elif isinstance(obj, StaticObject):
            static.append(obj)
        col += 1
        if char == "\n":
            row += 1
            col = 0
    return moving, static


class GameController:
    """Runs the menu and the levels until the player exits."""

    def __init__(
        self,
        window=None,
        images=None,
        menu=None,
        sounds=None,
        background=None,
        level_dir=".",
        timer=time.perf_counter,
    ):
        self.window = window if window is not None else Window.create()
        self.images = images if images is not None else default_object_images()
        self._sounds = sounds
        self.menu = menu if menu is not None else MenuManager(object_images=self.images, sounds=sounds)
        self.background = background if background is not None else Background(GAME_BACKGROUND_FILE)
        self.level_dir = Path(level_dir)
        self._timer = timer
        self._last_tick = timer()
        self.info = Info(sounds=sounds)
        self.object_information = ObjectInformation()
        self.moving_objects = []
        self.static_objects = []
        self.level = 1
        self.need_to_exit = False

    def _board(self):
        return self._sounds if self._sounds is not None else default_board()

    def run(self):
        """Alternate between the menu and the levels until exit is chosen."""
        while not self.need_to_exit:
            self.window.reset_view()
            action = self.menu.run(self.info, self.window)
            self.window.reset_view()
            self._handle_menu(action)

    def _handle_menu(self, action):
        if action is MenuAction.START_LEVEL:
            self._load_level()
            self._board().play_music(MusicType.GAME_SOUND)
            self._main_loop()
            self.finish_level()
        elif action is MenuAction.EXIT_GAME:
            self.need_to_exit = True

    def _load_level(self):
        name = f"level{self.level}.txt"
        try:
            text = (self.level_dir / name).read_text()
        except OSError:
            print(f"Error: Failed to open file: Level{self.level}.txt", file=sys.stderr)
            return
        moving, static = parse_level(text, self.images, self.info.player_type)
        self.moving_objects.extend(moving)
        self.static_objects.extend(static)

    def _restart_clock(self):
        now = self._timer()
        elapsed = now - self._last_tick
        self._last_tick = now
        return elapsed

    def _main_loop(self):
        self._restart_clock()
        while self.window.is_open:
            for event in self.window.events():
                if event.type == pygame.QUIT:
                    # Closing during a level returns to the menu.
                    self.window.is_open = True
                    return
            self.update_information()
            self._advance()
            self.handle_collisions()
            self._draw()
            if self.object_information.next_level:
                self.object_information.next_level = False
                return

    def _advance(self):
        self.moving_objects = [obj for obj in self.moving_objects if not obj.dead]
        self.static_objects = [obj for obj in self.static_objects if not obj.dead]
        delta_time = self._restart_clock()
        for obj in self.moving_objects:
            obj.move(delta_time)
        self.window.view.move((delta_time * SPEED, 0.0))

    def handle_collisions(self):
        """Let every moving object react to what it touches."""
        for moving in self.moving_objects:
            for static in self.static_objects:
                if moving.collides_with(static):
                    moving.handle_collision(static)
            for other in self.moving_objects:
                if moving.collides_with(other) and moving.can_collide_with(other):
                    moving.handle_collision(other)

    def update_information(self):
        """Collect what every object reports for this frame."""
        for obj in self.moving_objects:
            obj.update_information(self.object_information)
        for obj in self.static_objects:
            obj.update_information(self.object_information)

    def _draw(self):
        self.window.clear()
        self.background.draw(self.window)
        for obj in self.static_objects:
            obj.draw(self.window)
        for obj in self.moving_objects:
            obj.draw(self.window)
        self.object_information.draw(self.window, self.level)
        self.window.display()

    def finish_level(self):
        """Advance to the next level, bank the coins and drop the level's objects."""
        self.level += 1
        self.info.add_money(self.object_information.take_coins())
        self.moving_objects.clear()
        self.static_objects.clear()


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="geodash",
        description="Side-scrolling platform game; run it from the directory holding its resources.",
    )
    parser.parse_args(argv)
    controller = GameController()
    try:
        controller.run()
    finally:
        pygame.quit()
    return 0