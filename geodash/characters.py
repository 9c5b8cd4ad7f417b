"""Store buttons that sell the playable characters."""

from __future__ import annotations

from pygame.math import Vector2

from .assets import default_object_images
from .buttons import Button
from .config import (
    COST_PLAYER_ALPHA,
    COST_PLAYER_BETA,
    COST_PLAYER_DELTA,
    COST_PLAYER_EPSILON,
    COST_PLAYER_GAMMA,
    COST_PLAYER_ZETA,
    TEXT_SIZE,
    MenuAction,
    TypeObject,
)
from .graphics import get_font

COST_COLOR = (255, 255, 255)
COST_GAP = 5.0


class CharactersButton(Button):
    """A character on sale: its picture, its price and a lock until it is bought."""

    PLAYER_TYPE: TypeObject
    COST: int

    def __init__(self, location, wanted_size, images=None, sounds=None):
        images = images if images is not None else default_object_images()
        super().__init__(location, images.player_sprite(self.PLAYER_TYPE), sounds)
        self.cost = self.COST
        self.cost_text = str(self.cost)
        self.lock = images.lock_sprite(wanted_size)
        self.lock.position = Vector2(self.location)
        self.scale_to(wanted_size)

    def scale_to(self, wanted_size):
        """Stretch the character picture to ``wanted_size``."""
        bounds = self.sprite.local_bounds()
        self.sprite.scale = Vector2(wanted_size[0] / bounds.width, wanted_size[1] / bounds.height)

    def draw_lock(self, window):
        window.draw(self.lock)

    def draw_cost(self, window):
        """Draw the price centred just above the character."""
        bounds = self.sprite.global_bounds()
        width, height = get_font(TEXT_SIZE).size(self.cost_text)
        position = (
            bounds.left + bounds.width / 2 - width / 2,
            bounds.top - height - COST_GAP,
        )
        window.draw_text(self.cost_text, position, COST_COLOR)

    def handle_click(self, info, window):
        """Try to buy the character with the player's money."""
        if info.buy_player(self.PLAYER_TYPE, self.cost):
            return MenuAction.BUY_SUCCEED
        return MenuAction.NONE


class PlayerAlpha(CharactersButton):
    PLAYER_TYPE = TypeObject.PLAYER_ALPHA
    COST = COST_PLAYER_ALPHA


class PlayerBeta(CharactersButton):
    PLAYER_TYPE = TypeObject.PLAYER_BETA
    COST = COST_PLAYER_BETA


class PlayerGamma(CharactersButton):
    PLAYER_TYPE = TypeObject.PLAYER_GAMMA
    COST = COST_PLAYER_GAMMA


class PlayerDelta(CharactersButton):
    PLAYER_TYPE = TypeObject.PLAYER_DELTA
    COST = COST_PLAYER_DELTA


class PlayerEpsilon(CharactersButton):
    PLAYER_TYPE = TypeObject.PLAYER_EPSILON
    COST = COST_PLAYER_EPSILON


class PlayerZeta(CharactersButton):
    PLAYER_TYPE = TypeObject.PLAYER_ZETA
    COST = COST_PLAYER_ZETA