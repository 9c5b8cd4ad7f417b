"""The store where coins buy new characters."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from .assets import default_menu_images
from .buttons import Button, Cancel, Done
from .characters import (
    CharactersButton,
    PlayerAlpha,
    PlayerBeta,
    PlayerDelta,
    PlayerEpsilon,
    PlayerGamma,
    PlayerZeta,
)
from .config import (
    BUY_PLAYER_SIZE,
    ICON_BUTTON_SIZE,
    LOC_CANCEL,
    LOC_DONE,
    LOC_PLAYER_ALPHA,
    LOC_PLAYER_BETA,
    LOC_PLAYER_DELTA,
    LOC_PLAYER_EPSILON,
    LOC_PLAYER_GAMMA,
    LOC_PLAYER_ZETA,
    GameObjectType,
    MenuAction,
)
from .graphics import Background

STORE_BACKGROUND_FILE = "BackgroundStore.png"

CHARACTER_LAYOUT = [
    (PlayerAlpha, LOC_PLAYER_ALPHA),
    (PlayerBeta, LOC_PLAYER_BETA),
    (PlayerGamma, LOC_PLAYER_GAMMA),
    (PlayerDelta, LOC_PLAYER_DELTA),
    (PlayerEpsilon, LOC_PLAYER_EPSILON),
    (PlayerZeta, LOC_PLAYER_ZETA),
]


@dataclass
class CharacterSlot:
    """A character button and whether it has been bought."""

    button: CharactersButton
    bought: bool = False


class GameStore:
    """Screen listing the characters for sale with Done and Cancel buttons."""

    def __init__(self, images=None, object_images=None, sounds=None, background=None):
        self.background = background if background is not None else Background(STORE_BACKGROUND_FILE)
        self.characters = [
            CharacterSlot(cls(location, BUY_PLAYER_SIZE, object_images, sounds))
            for cls, location in CHARACTER_LAYOUT
        ]
        self.buttons = [
            Done(LOC_DONE, ICON_BUTTON_SIZE, images, sounds),
            Cancel(LOC_CANCEL, ICON_BUTTON_SIZE, images, sounds),
        ]
        self.running = False

    def run(self, info, window):
        """Show the store until Done or Cancel is clicked or the window closes."""
        self.running = True
        while self.running and window.is_open:
            window.clear()
            self.background.draw(window)
            self.draw(window)
            info.draw(window)
            self._process_events(info, window)
            window.display()

    def _process_events(self, info, window):
        for event in window.events():
            if event.type != pygame.MOUSEBUTTONDOWN:
                continue
            mouse_pos = window.map_pixel_to_coords(event.pos)
            action = self.handle_press(info, window, mouse_pos)
            if action in (MenuAction.DONE, MenuAction.CANCEL):
                self.running = False

    def handle_press(self, info, window, mouse_pos):
        """Handle a click at ``mouse_pos`` and return the resulting action."""
        action = MenuAction.NONE
        for slot in self.characters:
            if slot.button.is_pressed(mouse_pos):
                action = slot.button.handle_click(info, window)
                if action is not MenuAction.NONE:
                    slot.bought = True
        for button in self.buttons:
            if button.is_pressed(mouse_pos):
                action = button.handle_click(info, window)
        return action

    def draw(self, window):
        """Draw the characters, locking and pricing those not yet bought, then the buttons."""
        for slot in self.characters:
            slot.button.draw(window)
            if not slot.bought:
                slot.button.draw_cost(window)
                slot.button.draw_lock(window)
        for button in self.buttons:
            button.draw(window)


class Store(Button):
    """Menu button that opens the store."""

    def __init__(self, location, wanted_size, images=None, sounds=None, game_store=None):
        images = images if images is not None else default_menu_images()
        super().__init__(location, images.sprite(GameObjectType.STORE, wanted_size), sounds)
        self.game_store = game_store if game_store is not None else GameStore(images, sounds=sounds)

    def handle_click(self, info, window):
        self.game_store.run(info, window)
        return MenuAction.NONE