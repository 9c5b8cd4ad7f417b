"""Player progress shown in the menus and the per-level status of objects."""

from __future__ import annotations

from dataclasses import dataclass, field

from pygame.math import Vector2

from .config import TEXT_SIZE, TypeObject
from .sound import SoundType, default_board

TEXT_COLOR = (0, 0, 0)
PADDING = 20.0


def _bottom_left(window):
    view = window.view
    return Vector2(
        view.center.x - view.size.x / 2 + PADDING,
        view.center.y + view.size.y / 2 - TEXT_SIZE - PADDING,
    )


@dataclass
class Info:
    """Money, current level and chosen character of the player."""

    level: int = 1
    player_type: TypeObject = TypeObject.PLAYER
    money: int = 0
    sounds: object = field(default=None, repr=False, compare=False)

    def _sound_board(self):
        return self.sounds if self.sounds is not None else default_board()

    def add_money(self, money):
        """Add earned coins to the player's money."""
        self.money += money

    def buy_player(self, player_type, price):
        """Buy ``player_type`` for ``price``; return whether the purchase succeeded."""
        if self.money >= price:
            self.player_type = player_type
            self.money -= price
            self._sound_board().play_sound(SoundType.UNLOCK)
            return True
        self._sound_board().play_sound(SoundType.NOTIFICATION)
        return False

    def draw(self, window):
        """Show the player's money in the bottom-left corner of the view."""
        window.draw_text(f"Money: {self.money}", _bottom_left(window), TEXT_COLOR)


@dataclass
class ObjectInformation:
    """What the objects of a running level report to the controller."""

    next_level: bool = False
    player_dead: bool = False
    coins: int = 0

    def add_coins(self, coins):
        self.coins += coins

    def take_coins(self):
        """Return the collected coins and reset the count."""
        coins, self.coins = self.coins, 0
        return coins

    def draw(self, window, level):
        """Show the level and coin count in the bottom-left corner of the view."""
        window.draw_text(
            f"Level: {level}    Coins: {self.coins}", _bottom_left(window), TEXT_COLOR
        )