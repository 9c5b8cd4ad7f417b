"""Rendering primitives: rectangles, views, sprites, windows and backgrounds."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

import pygame
from pygame.math import Vector2

from .config import TEXT_SIZE, WINDOW_SIZE

FONT_FILE = "Athelas.ttc"


@dataclass
class FloatRect:
    """Axis-aligned rectangle in world coordinates."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self):
        return self.left + self.width

    @property
    def bottom(self):
        return self.top + self.height

    def intersects(self, other):
        """True when the two rectangles overlap with a non-empty area."""
        left = max(min(self.left, self.right), min(other.left, other.right))
        right = min(max(self.left, self.right), max(other.left, other.right))
        top = max(min(self.top, self.bottom), min(other.top, other.bottom))
        bottom = min(max(self.top, self.bottom), max(other.top, other.bottom))
        return left < right and top < bottom

    def contains(self, point):
        """True when ``point`` lies inside; the right and bottom edges are excluded."""
        x, y = point
        min_x, max_x = sorted((self.left, self.right))
        min_y, max_y = sorted((self.top, self.bottom))
        return min_x <= x < max_x and min_y <= y < max_y


@dataclass
class View:
    """The part of the world that is shown in the window."""

    center: Vector2
    size: Vector2

    def __post_init__(self):
        self.center = Vector2(self.center)
        self.size = Vector2(self.size)

    def move(self, offset):
        """Shift the view by ``offset``."""
        self.center += Vector2(offset)

    def rect(self):
        """The world rectangle covered by the view."""
        return FloatRect(
            self.center.x - self.size.x / 2,
            self.center.y - self.size.y / 2,
            self.size.x,
            self.size.y,
        )


@dataclass
class Sprite:
    """A textured, positioned and scaled rectangle."""

    texture: pygame.Surface | None = None
    texture_rect: pygame.Rect | None = None
    position: Vector2 = field(default_factory=Vector2)
    scale: Vector2 = field(default_factory=lambda: Vector2(1, 1))
    alpha: int = 255

    def __post_init__(self):
        self.position = Vector2(self.position)
        self.scale = Vector2(self.scale)
        if self.texture_rect is not None:
            self.texture_rect = pygame.Rect(self.texture_rect)

    def _source_rect(self):
        if self.texture_rect is not None:
            return self.texture_rect
        if self.texture is not None:
            return self.texture.get_rect()
        return pygame.Rect(0, 0, 0, 0)

    def local_bounds(self):
        """Bounds of the untransformed sprite."""
        rect = self._source_rect()
        return FloatRect(0.0, 0.0, float(rect.width), float(rect.height))

    def global_bounds(self):
        """Bounds of the sprite in world coordinates."""
        rect = self._source_rect()
        width = rect.width * self.scale.x
        height = rect.height * self.scale.y
        left = min(self.position.x, self.position.x + width)
        top = min(self.position.y, self.position.y + height)
        return FloatRect(left, top, abs(width), abs(height))

    def _image(self, zoom):
        if self.texture is None:
            return None
        rect = self._source_rect().clip(self.texture.get_rect())
        if rect.width == 0 or rect.height == 0:
            return None
        width = round(abs(rect.width * self.scale.x * zoom.x))
        height = round(abs(rect.height * self.scale.y * zoom.y))
        if width == 0 or height == 0:
            return None
        image = pygame.transform.scale(self.texture.subsurface(rect), (width, height))
        if self.alpha < 255:
            image.set_alpha(self.alpha)
        return image


class Window:
    """A render target seen through a movable view."""

    def __init__(self, surface, view=None):
        self.surface = surface
        width, height = surface.get_size()
        self.view = view if view is not None else View((width / 2, height / 2), (width, height))
        self.is_open = True

    @classmethod
    def create(cls, size=WINDOW_SIZE, title="Geometry Dash"):
        """Open a display window of ``size``."""
        pygame.init()
        surface = pygame.display.set_mode((int(size[0]), int(size[1])))
        pygame.display.set_caption(title)
        return cls(surface)

    def _zoom(self):
        width, height = self.surface.get_size()
        return Vector2(width / self.view.size.x, height / self.view.size.y)

    def _to_screen(self, point):
        rect = self.view.rect()
        zoom = self._zoom()
        return ((point[0] - rect.left) * zoom.x, (point[1] - rect.top) * zoom.y)

    def reset_view(self):
        """Show the whole window-sized area starting at the origin."""
        width, height = self.surface.get_size()
        self.view = View((width / 2, height / 2), (width, height))

    def clear(self, color=(0, 0, 0)):
        self.surface.fill(color)

    def draw(self, sprite):
        """Draw ``sprite`` at its world position."""
        image = sprite._image(self._zoom())
        if image is None:
            return
        bounds = sprite.global_bounds()
        x, y = self._to_screen((bounds.left, bounds.top))
        self.surface.blit(image, (round(x), round(y)))

    def draw_text(self, text, position, color):
        """Draw ``text`` with its top-left corner at the world ``position``."""
        rendered = get_font(TEXT_SIZE).render(text, True, color)
        x, y = self._to_screen(position)
        self.surface.blit(rendered, (round(x), round(y)))

    def map_pixel_to_coords(self, pixel):
        """Convert a window pixel into world coordinates."""
        rect = self.view.rect()
        width, height = self.surface.get_size()
        return Vector2(
            rect.left + pixel[0] * self.view.size.x / width,
            rect.top + pixel[1] * self.view.size.y / height,
        )

    def events(self):
        """Pending input events; a quit event closes the window."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.is_open = False
            yield event

    def display(self):
        if pygame.display.get_init() and pygame.display.get_surface() is self.surface:
            pygame.display.flip()

    def close(self):
        self.is_open = False


@lru_cache(maxsize=None)
def get_font(size):
    """The game font at ``size`` points, falling back to the default font."""
    if not pygame.font.get_init():
        pygame.font.init()
    path = Path(FONT_FILE)
    if path.is_file():
        try:
            return pygame.font.Font(str(path), size)
        except (OSError, pygame.error):
            pass
    print("Loading the font file failed", file=sys.stderr)
    return pygame.font.Font(None, size)


class Background:
    """An image stretched to cover the visible window."""

    def __init__(self, file_name, size=WINDOW_SIZE):
        try:
            texture = pygame.image.load(file_name)
        except (OSError, pygame.error, FileNotFoundError):
            print(
                f"Error: \n    Failed to load Background {file_name} image (file not found).",
                file=sys.stderr,
            )
            texture = pygame.Surface((int(size[0]), int(size[1])))
        width, height = texture.get_size()
        self.sprite = Sprite(
            texture=texture,
            scale=Vector2(size[0] / width, size[1] / height),
        )

    def draw(self, window):
        """Draw the background anchored to the window's top-left corner."""
        self.sprite.position = window.map_pixel_to_coords((0, 0))
        window.draw(self.sprite)