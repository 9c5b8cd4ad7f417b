import pygame
import pytest
from pygame.math import Vector2

from geodash.graphics import Background, FloatRect, Sprite, View, Window, get_font


def _rgb(surface, point):
    return tuple(surface.get_at(point))[:3]


def _red_texture(size=(10, 10)):
    texture = pygame.Surface(size)
    texture.fill((255, 0, 0))
    return texture


def test_rects_overlap():
    a = FloatRect(0, 0, 10, 10)
    b = FloatRect(5, 5, 10, 10)
    assert a.intersects(b)
    assert b.intersects(a)


def test_touching_rects_do_not_intersect():
    a = FloatRect(0, 0, 10, 10)
    b = FloatRect(10, 0, 10, 10)
    assert not a.intersects(b)


def test_contains_excludes_far_edges():
    rect = FloatRect(0, 0, 10, 10)
    assert rect.contains((0, 0))
    assert rect.contains((9.9, 9.9))
    assert not rect.contains((10, 5))
    assert not rect.contains((5, 10))


def test_view_move_and_rect():
    view = View((400, 450), (800, 900))
    assert view.rect() == FloatRect(0, 0, 800, 900)
    view.move((150, 0))
    assert view.rect().left == 150
    assert view.rect().width == 800


def test_sprite_bounds_follow_scale_and_position():
    sprite = Sprite(texture=_red_texture((10, 20)), position=(3, 4), scale=(2, 0.5))
    assert sprite.local_bounds() == FloatRect(0, 0, 10, 20)
    assert sprite.global_bounds() == FloatRect(3, 4, 20, 10)


def test_sprite_texture_rect_defines_size():
    sprite = Sprite(texture=_red_texture((100, 100)), texture_rect=(10, 10, 30, 40))
    assert sprite.local_bounds() == FloatRect(0, 0, 30, 40)


def test_empty_sprite_has_no_size():
    sprite = Sprite()
    bounds = sprite.global_bounds()
    assert (bounds.width, bounds.height) == (0, 0)


def test_map_pixel_to_coords_follows_view():
    window = Window(pygame.Surface((100, 100)))
    assert window.map_pixel_to_coords((10, 20)) == Vector2(10, 20)
    window.view.move((50, 0))
    assert window.map_pixel_to_coords((10, 20)) == Vector2(60, 20)


def test_draw_blits_at_world_position():
    surface = pygame.Surface((100, 100))
    window = Window(surface)
    window.draw(Sprite(texture=_red_texture(), position=(20, 30)))
    assert _rgb(surface, (25, 35)) == (255, 0, 0)
    assert _rgb(surface, (5, 5)) == (0, 0, 0)


def test_draw_respects_moved_view():
    surface = pygame.Surface((100, 100))
    window = Window(surface)
    window.view.move((10, 0))
    window.draw(Sprite(texture=_red_texture(), position=(20, 30)))
    assert _rgb(surface, (12, 35)) == (255, 0, 0)
    assert _rgb(surface, (25, 35)) == (0, 0, 0)


def test_draw_text_changes_pixels():
    surface = pygame.Surface((200, 100))
    window = Window(surface)
    before = pygame.image.tostring(surface, "RGB")
    window.draw_text("Money: 0", (0, 0), (255, 255, 255))
    assert pygame.image.tostring(surface, "RGB") != before
    assert _rgb(surface, (199, 99)) == (0, 0, 0)


def test_get_font_is_cached_and_sized():
    assert get_font(30) is get_font(30)
    assert get_font(60).size("Money")[1] > get_font(30).size("Money")[1]


def test_background_stretches_to_size(tmp_path):
    path = tmp_path / "bg.bmp"
    pygame.image.save(_red_texture((40, 20)), str(path))
    background = Background(str(path), size=(80, 40))
    bounds = background.sprite.global_bounds()
    assert (bounds.width, bounds.height) == pytest.approx((80, 40))


def test_background_draws_at_view_corner(tmp_path):
    path = tmp_path / "bg.bmp"
    pygame.image.save(_red_texture((40, 20)), str(path))
    background = Background(str(path), size=(80, 40))
    surface = pygame.Surface((80, 40))
    window = Window(surface)
    window.view.move((500, 0))
    background.draw(window)
    assert background.sprite.position == Vector2(500, 0)
    assert _rgb(surface, (0, 0)) == (255, 0, 0)
    assert _rgb(surface, (79, 39)) == (255, 0, 0)


def test_missing_background_still_covers_window(tmp_path):
    background = Background(str(tmp_path / "missing.png"), size=(80, 40))
    bounds = background.sprite.global_bounds()
    assert (bounds.width, bounds.height) == pytest.approx((80, 40))