"""Game objects: the common base, moving and static objects, and the player."""

from __future__ import annotations

import dataclasses

import pygame
from pygame.math import Vector2

from .config import PLAYER_VIEW_OFFSET_X, SAFE_X, SPEED, SYMBOL_PLAYER, VERY_NEAR
from .factory import register
from .physics import Move
from .sound import SoundType, default_board


class GameObject:
    """An object placed in the level, drawn with a sprite."""

    def __init__(self, location, sprite):
        self.location = Vector2(location)
        self.sprite = dataclasses.replace(sprite)
        self.sprite.position = Vector2(self.location)
        self.is_in_view = True
        self.dead = False
        self.last_contact = None

    def draw(self, window):
        """Draw the object if it is inside the window's view."""
        if self.in_view(window):
            self.sprite.position = Vector2(self.location)
            window.draw(self.sprite)

    def in_view(self, window):
        """Whether the object overlaps the window's view; also remembered in ``is_in_view``."""
        self.sprite.position = Vector2(self.location)
        self.is_in_view = window.view.rect().intersects(self.sprite.global_bounds())
        return self.is_in_view

    def can_collide_with(self, other):
        """An object never collides with itself."""
        return other is not self

    def collides_with(self, other):
        return self.sprite.global_bounds().intersects(other.sprite.global_bounds())

    def handle_collision(self, other):
        """React to touching ``other``; a player is passed on to ``handle_player_collision``.

        Remembers ``other`` as the latest contact and returns whether the object reacted.
        """
        self.last_contact = other
        if isinstance(other, Player):
            return self.handle_player_collision(other)
        return False

    def handle_player_collision(self, player):
        """React to being touched by ``player``; by default only the contact is remembered."""
        self.last_contact = player
        return False

    def update_information(self, info):
        """Report state to the controller and forget this frame's contact.

        A plain object has nothing to report, so this returns False.
        """
        self.last_contact = None
        return False

    def move_by_view(self, delta_time):
        """Advance along with the scrolling view."""
        self.location.x += delta_time * SPEED


class MovingObject(GameObject):
    """An object that scrolls with the view and falls under gravity."""

    def __init__(self, location, sprite):
        super().__init__(location, sprite)
        self.first_location = Vector2(self.location)
        self.motion = Move()
        self.on_ground = False
        self.stuck = False

    def move(self, delta_time):
        """Advance one frame; ground and stuck flags apply to this frame only."""
        self.move_by_view(delta_time)
        self.first_location = Vector2(self.location)
        if self.stuck:
            self.motion.reset_velocity_y()
            self.motion.on_ground = False
        self.motion.update(delta_time, self.location)
        self.motion.on_ground = self.on_ground
        self.stuck = False
        self.on_ground = False

    def block_movement(self):
        """Undo this frame's movement and step back slightly."""
        self.location.x = self.first_location.x - VERY_NEAR
        self.location.y = self.first_location.y


class StaticObject(GameObject):
    """An object that stays where the level placed it."""


def _space_pressed():
    if not pygame.display.get_init():
        return False
    try:
        return bool(pygame.key.get_pressed()[pygame.K_SPACE])
    except pygame.error:
        return False


class Player(MovingObject):
    """The character controlled by the user."""

    def __init__(self, location, sprite, sounds=None, jump_pressed=None):
        super().__init__(location, sprite)
        self.need_to_die = False
        self.safe_location = Vector2(self.location)
        self.start_location = Vector2(self.location)
        self._sounds = sounds
        self._jump_pressed = jump_pressed if jump_pressed is not None else _space_pressed

    def draw(self, window):
        """Draw the player, or send it back to the start when dead or out of view."""
        if self.in_view(window) and not self.need_to_die:
            self.sprite.position = Vector2(self.location)
            window.draw(self.sprite)
        else:
            self.return_to_start(window)

    def move(self, delta_time):
        """Advance one frame and jump while the jump key is held."""
        self._update_safe_location()
        super().move(delta_time)
        if self._jump_pressed():
            self.motion.start_jump()
            self.on_ground = False

    def handle_collision(self, other):
        """Let ``other`` decide what touching the player does."""
        self.last_contact = other
        other.handle_player_collision(self)
        return True

    def update_information(self, info):
        """Report whether the player died this frame, then reset that state."""
        info.player_dead = self.need_to_die or not self.is_in_view
        self.need_to_die = False
        self.is_in_view = True
        self.last_contact = None
        return True

    def kill(self):
        """Mark the player as dead and play the game-over sound."""
        self.need_to_die = True
        board = self._sounds if self._sounds is not None else default_board()
        board.play_sound(SoundType.GAME_OVER)

    def return_to_start(self, window):
        """Put the player back at its starting point and move the view to it."""
        self.motion.reset_velocity_y()
        self.location = Vector2(self.start_location)
        self._set_view(window)
        self.need_to_die = False

    def _update_safe_location(self):
        if self.on_ground:
            self.safe_location = Vector2(self.location.x - SAFE_X, self.location.y)

    def _set_view(self, window):
        self.sprite.position = Vector2(self.location)
        view = window.view
        center_x = self.location.x + view.size.x * (0.5 - PLAYER_VIEW_OFFSET_X)
        view.center = Vector2(center_x, view.center.y)


@register(SYMBOL_PLAYER)
def _create_player(config):
    return Player(config.location, config.images.player_sprite(config.player_type))