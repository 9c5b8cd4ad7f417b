"""The main menu."""

from __future__ import annotations

import pygame

from .buttons import Exit, GitHubLink, Help, Start, Watch
from .config import (
    BUTTON_SIZE,
    ICON_BUTTON_SIZE,
    LOC_EXIT,
    LOC_GIT_HUB,
    LOC_HELP,
    LOC_START,
    LOC_STORE,
    LOC_WATCH,
    MenuAction,
)
from .graphics import Background
from .sound import MusicType, default_board
from .store import GameStore, Store

MENU_BACKGROUND_FILE = "Background.png"


class MenuManager:
    """Draws the menu buttons and reports which action the player chose."""

    def __init__(self, images=None, object_images=None, sounds=None, background=None, opener=None):
        self.background = background if background is not None else Background(MENU_BACKGROUND_FILE)
        self._sounds = sounds
        self.buttons = [
            Start(LOC_START, BUTTON_SIZE, images, sounds),
            Exit(LOC_EXIT, BUTTON_SIZE, images, sounds),
            Help(LOC_HELP, BUTTON_SIZE, images, sounds),
            Store(
                LOC_STORE,
                BUTTON_SIZE,
                images,
                sounds,
                GameStore(images, object_images, sounds),
            ),
            Watch(LOC_WATCH, ICON_BUTTON_SIZE, images, sounds, opener=opener),
            GitHubLink(LOC_GIT_HUB, ICON_BUTTON_SIZE, images, sounds, opener=opener),
        ]

    def _board(self):
        return self._sounds if self._sounds is not None else default_board()

    def run(self, info, window):
        """Show the menu until an action is chosen; a closed window means exit."""
        self._board().play_music(MusicType.MENU_SOUND)
        while window.is_open:
            window.clear()
            self.background.draw(window)
            self.draw(window)
            result = self._process_events(info, window)
            window.display()
            if result is not MenuAction.NONE:
                return result
        return MenuAction.EXIT_GAME

    def _process_events(self, info, window):
        for event in window.events():
            if event.type != pygame.MOUSEBUTTONDOWN:
                continue
            result = self.handle_press(info, window, window.map_pixel_to_coords(event.pos))
            if result is not MenuAction.NONE:
                return result
        return MenuAction.NONE

    def handle_press(self, info, window, mouse_pos):
        """Run the first button under ``mouse_pos`` and return its action."""
        for button in self.buttons:
            if button.is_pressed(mouse_pos):
                return button.handle_click(info, window)
        return MenuAction.NONE

    def draw(self, window):
        for button in self.buttons:
            button.draw(window)