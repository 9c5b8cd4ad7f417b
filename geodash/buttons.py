"""Menu buttons and the flags that track which was pressed."""

from __future__ import annotations

import webbrowser
from abc import ABC, abstractmethod
from dataclasses import dataclass

import pygame
from pygame.math import Vector2

from .assets import default_menu_images
from .config import TEXT_SIZE, GameObjectType, MenuAction
from .graphics import get_font
from .sound import SoundType, default_board

WATCH_URL = "https://example.com/watch"
GITHUB_URL = "https://example.com/source"

INSTRUCTIONS = (
    "Welcome to Geometry Dash!\n"
    "\n"
    "Controls:\n"
    "- Press SPACE or click to jump.\n"
    "- Avoid spikes and gaps.\n"
    "- Reach the goal to win!\n"
    "\n"
    "Collect Coins:\n"
    "- Each level has coins to collect.\n"
    "- Coins add to your total score.\n"
    "\n"
    "Store:\n"
    "- Use coins to unlock new players.\n"
    "- Open the store from the main menu.\n"
    "\n"
    "Tips:\n"
    "- Timing is key.\n"
    "- Some jumps are trickier than others.\n"
    "- Practice makes perfect!\n"
    "\n"
    "Have fun and good luck!"
)
INSTRUCTIONS_POSITION = (50.0, 50.0)
INSTRUCTIONS_COLOR = (255, 255, 255)


class Button(ABC):
    """A clickable sprite placed at a fixed location."""

    def __init__(self, location, sprite, sounds=None):
        self.location = Vector2(location)
        self.sprite = sprite
        self.sprite.position = Vector2(self.location)
        self._sounds = sounds

    def _play(self, sound_type):
        board = self._sounds if self._sounds is not None else default_board()
        board.play_sound(sound_type)

    def is_pressed(self, mouse_pos):
        """Whether ``mouse_pos`` is on the button; a hit plays the click sound."""
        if self.sprite.global_bounds().contains(mouse_pos):
            self._play(SoundType.CLICK)
            return True
        return False

    @abstractmethod
    def handle_click(self, info, window):
        """Perform the button's action and report what the menu should do."""

    def draw(self, window):
        self.sprite.position = Vector2(self.location)
        window.draw(self.sprite)


class _ImageButton(Button):
    """A button drawn with one of the menu images."""

    IMAGE: GameObjectType

    def __init__(self, location, wanted_size, images=None, sounds=None):
        images = images if images is not None else default_menu_images()
        super().__init__(location, images.sprite(self.IMAGE, wanted_size), sounds)


class Start(_ImageButton):
    IMAGE = GameObjectType.START

    def handle_click(self, info, window):
        return MenuAction.START_LEVEL


class Exit(_ImageButton):
    IMAGE = GameObjectType.EXIT

    def handle_click(self, info, window):
        return MenuAction.EXIT_GAME


class Done(_ImageButton):
    IMAGE = GameObjectType.DONE

    def handle_click(self, info, window):
        return MenuAction.DONE


class Cancel(_ImageButton):
    IMAGE = GameObjectType.CANCEL

    def handle_click(self, info, window):
        return MenuAction.CANCEL


class _LinkButton(_ImageButton):
    """A button that opens a web page."""

    DEFAULT_URL = ""

    def __init__(self, location, wanted_size, images=None, sounds=None, url=None, opener=None):
        super().__init__(location, wanted_size, images, sounds)
        self.url = url if url is not None else self.DEFAULT_URL
        self._opener = opener if opener is not None else webbrowser.open

    def handle_click(self, info, window):
        self._opener(self.url)
        return MenuAction.NONE


class Watch(_LinkButton):
    IMAGE = GameObjectType.WATCH
    DEFAULT_URL = WATCH_URL

    def handle_click(self, info, window):
        return super().handle_click(info, window)


class GitHubLink(_LinkButton):
    IMAGE = GameObjectType.GITHUB
    DEFAULT_URL = GITHUB_URL

    def handle_click(self, info, window):
        return super().handle_click(info, window)


class Help(_ImageButton):
    """Shows the instructions until the window is asked to close."""

    IMAGE = GameObjectType.HELP

    def __init__(self, location, wanted_size, images=None, sounds=None):
        super().__init__(location, wanted_size, images, sounds)
        self.instructions = INSTRUCTIONS

    def _draw_instructions(self, window):
        line_height = get_font(TEXT_SIZE).get_linesize()
        x, y = INSTRUCTIONS_POSITION
        for number, line in enumerate(self.instructions.split("\n")):
            if line:
                window.draw_text(line, (x, y + number * line_height), INSTRUCTIONS_COLOR)

    def handle_click(self, info, window):
        clock = pygame.time.Clock()
        while True:
            for event in window.events():
                if event.type == pygame.QUIT:
                    # Closing the help screen returns to the menu; the window stays open.
                    window.is_open = True
                    return MenuAction.NONE
            window.clear()
            self._draw_instructions(window)
            window.display()
            clock.tick(60)


@dataclass
class State:
    """Which menu and store buttons have been pressed."""

    start: bool = False
    exit: bool = False
    help: bool = False
    store: bool = False
    watch: bool = False
    github: bool = False
    done_button: bool = False
    cancel_button: bool = False

    def reset(self):
        """Clear the main-menu flags."""
        self.start = False
        self.exit = False
        self.help = False
        self.store = False
        self.watch = False
        self.github = False

    def reset_store(self):
        """Clear the store flags."""
        self.done_button = False
        self.cancel_button = False