"""Textures for menu buttons, game objects and store characters."""

from __future__ import annotations

import sys
from functools import lru_cache
from pathlib import Path

import pygame
from pygame.math import Vector2

from .config import GameObjectType, TypeObject
from .graphics import Sprite

MENU_FILES = {
    GameObjectType.START: "Start.png",
    GameObjectType.STORE: "Store.png",
    GameObjectType.HELP: "Help.png",
    GameObjectType.EXIT: "Exit.png",
    GameObjectType.WATCH: "Watch.png",
    GameObjectType.GITHUB: "GitHub.png",
    GameObjectType.DONE: "Done.png",
    GameObjectType.CANCEL: "Cancel.png",
}

OBJECT_FILES = {
    TypeObject.SPRITE_SHEET: "GeometryDashSpriteSheet.png",
    TypeObject.PLAYER_CHARACTERS: "PlayerCharacters.png",
    TypeObject.LOCK: "Lock.png",
}

# Regions of the sprite sheet used by the level objects.
OBJECT_RECTS = {
    TypeObject.ENEMY: (100, 584, 50, 50),
    TypeObject.OBSTACLE: (440, 430, 50, 50),
    TypeObject.PLAYER: (639, 710, 50, 50),
    TypeObject.PLAYER_ALPHA: (490, 660, 32, 32),
    TypeObject.PLATFORM: (682, 513, 50, 50),
    TypeObject.EXIT_DOOR: (40, 836, 80, 80),
    TypeObject.GIFT: (879, 173, 50, 50),
}

# Regions of the character sheet; each is shown as a 50x50 square.
PLAYER_RECTS = {
    TypeObject.PLAYER: (269, 197, 295, 295),
    TypeObject.PLAYER_ALPHA: (269, 197, 295, 295),
    TypeObject.PLAYER_BETA: (603, 194, 300, 300),
    TypeObject.PLAYER_GAMMA: (603, 544, 300, 300),
    TypeObject.PLAYER_DELTA: (268, 544, 300, 300),
    TypeObject.PLAYER_EPSILON: (941, 544, 293, 300),
    TypeObject.PLAYER_ZETA: (939, 146, 300, 346),
}

PLAYER_SIZE = 50.0
LOCK_ALPHA = 191


def _load_textures(directory, files):
    directory = Path(directory)
    textures = {}
    for key, name in files.items():
        try:
            textures[key] = pygame.image.load(str(directory / name))
        except (OSError, pygame.error):
            print(f"Error: \n    Failed to load {name} image (file not found).", file=sys.stderr)
    return textures


def _fitted_sprite(texture, wanted_size, alpha=255):
    """A sprite showing ``texture`` stretched to ``wanted_size``.

    Without a texture the sprite is invisible but still covers ``wanted_size``.
    """
    width, height = wanted_size
    if texture is None:
        return Sprite(texture_rect=pygame.Rect(0, 0, int(width), int(height)), alpha=alpha)
    tex_width, tex_height = texture.get_size()
    return Sprite(
        texture=texture,
        scale=Vector2(width / tex_width, height / tex_height),
        alpha=alpha,
    )


class MenuImages:
    """Textures of the menu buttons."""

    def __init__(self, directory=".", textures=None):
        self._textures = dict(textures) if textures is not None else _load_textures(directory, MENU_FILES)

    def sprite(self, object_type, wanted_size):
        """A sprite of the button image ``object_type`` scaled to ``wanted_size``."""
        return _fitted_sprite(self._textures.get(object_type), wanted_size)


class ObjectImages:
    """Textures of the level objects, the store characters and the lock."""

    def __init__(self, directory=".", textures=None):
        self._textures = dict(textures) if textures is not None else _load_textures(directory, OBJECT_FILES)

    def object_sprite(self, object_type):
        """The sprite-sheet region for a level object; empty for unknown types."""
        rect = OBJECT_RECTS.get(object_type)
        if rect is None:
            return Sprite()
        return Sprite(texture=self._textures.get(TypeObject.SPRITE_SHEET), texture_rect=rect)

    def player_sprite(self, player_type):
        """The character ``player_type`` scaled to a 50x50 square; empty for unknown types."""
        rect = PLAYER_RECTS.get(player_type)
        if rect is None:
            return Sprite()
        _, _, width, height = rect
        return Sprite(
            texture=self._textures.get(TypeObject.PLAYER_CHARACTERS),
            texture_rect=rect,
            scale=Vector2(PLAYER_SIZE / width, PLAYER_SIZE / height),
        )

    def lock_sprite(self, wanted_size):
        """A translucent lock covering ``wanted_size``."""
        return _fitted_sprite(self._textures.get(TypeObject.LOCK), wanted_size, LOCK_ALPHA)


@lru_cache(maxsize=None)
def default_menu_images():
    """Menu textures loaded once from the working directory."""
    return MenuImages()


@lru_cache(maxsize=None)
def default_object_images():
    """Object textures loaded once from the working directory."""
    return ObjectImages()