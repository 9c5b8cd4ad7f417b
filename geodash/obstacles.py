"""Static level objects: exit door, gift, obstacle and platform."""

from __future__ import annotations

from .config import (
    NEAR,
    SYMBOL_EXIT_DOOR,
    SYMBOL_GIFT,
    SYMBOL_OBSTACLE,
    SYMBOL_PLATFORM,
    TypeObject,
)
from .entities import StaticObject
from .factory import register
from .sound import SoundType, default_board


class _SoundingObject(StaticObject):
    """A static object that plays effects on a sound board."""

    def __init__(self, location, sprite, sounds=None):
        super().__init__(location, sprite)
        self._sounds = sounds

    def _play(self, sound_type):
        board = self._sounds if self._sounds is not None else default_board()
        board.play_sound(sound_type)


class ExitDoor(_SoundingObject):
    """Touching the door finishes the level."""

    def __init__(self, location, sprite, sounds=None):
        super().__init__(location, sprite, sounds)
        self.next_level = False

    def handle_player_collision(self, player):
        self.next_level = True
        self._play(SoundType.FINISHED_LEVEL)

    def update_information(self, info):
        """Report whether the level was finished this frame, then reset."""
        info.next_level = self.next_level
        self.next_level = False


class Gift(_SoundingObject):
    """A coin that disappears when the player takes it."""

    def __init__(self, location, sprite, sounds=None):
        super().__init__(location, sprite, sounds)
        self.add_coin = False

    def handle_player_collision(self, player):
        self.add_coin = True
        self.dead = True
        self._play(SoundType.TOUCH_GIFT)

    def update_information(self, info):
        """Add one coin if the gift was taken since the last report."""
        if self.add_coin:
            info.add_coins(1)
        self.add_coin = False


class Obstacle(StaticObject):
    """A spike that kills the player."""

    def handle_player_collision(self, player):
        player.kill()


class Platform(StaticObject):
    """A block the player can stand on, bump into from below, or hit from the side."""

    def handle_player_collision(self, player):
        player_bounds = player.sprite.global_bounds()
        platform_bounds = self.sprite.global_bounds()

        player_bottom = player_bounds.bottom
        player_top = player_bounds.top
        platform_top = platform_bounds.top
        platform_bottom = platform_bounds.bottom

        if player_bottom <= platform_top + NEAR:
            player.on_ground = True
            player.location.y = platform_top - player_bounds.height
        elif player_top >= platform_bottom - NEAR:
            player.stuck = True
            player.location.y = platform_bottom + NEAR
        else:
            player.block_movement()


@register(SYMBOL_EXIT_DOOR)
def _create_exit_door(config):
    return ExitDoor(config.location, config.images.object_sprite(TypeObject.EXIT_DOOR))


@register(SYMBOL_GIFT)
def _create_gift(config):
    return Gift(config.location, config.images.object_sprite(TypeObject.GIFT))


@register(SYMBOL_OBSTACLE)
def _create_obstacle(config):
    return Obstacle(config.location, config.images.object_sprite(TypeObject.OBSTACLE))


@register(SYMBOL_PLATFORM)
def _create_platform(config):
    return Platform(config.location, config.images.object_sprite(TypeObject.PLATFORM))