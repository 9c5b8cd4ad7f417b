import pygame
import pytest

from geodash.assets import MenuImages, ObjectImages
from geodash.config import GameObjectType, TypeObject


def _surface(width, height):
    return pygame.Surface((width, height))


def test_menu_sprite_is_scaled_to_wanted_size():
    images = MenuImages(textures={GameObjectType.START: _surface(50, 25)})
    sprite = images.sprite(GameObjectType.START, (100.0, 100.0))
    bounds = sprite.global_bounds()
    assert bounds.width == pytest.approx(100.0)
    assert bounds.height == pytest.approx(100.0)


def test_menu_sprite_without_texture_still_covers_wanted_size():
    images = MenuImages(textures={})
    sprite = images.sprite(GameObjectType.HELP, (70.0, 70.0))
    assert sprite.texture is None
    assert sprite.global_bounds().width == pytest.approx(70.0)
    assert sprite.global_bounds().height == pytest.approx(70.0)


def test_missing_files_report_error(tmp_path, capsys):
    images = MenuImages(directory=tmp_path)
    assert "Failed to load Start.png" in capsys.readouterr().err
    assert images.sprite(GameObjectType.START, (10.0, 10.0)).texture is None


def test_menu_images_load_from_directory(tmp_path):
    pygame.image.save(_surface(20, 40), str(tmp_path / "Exit.png"))
    images = MenuImages(directory=tmp_path)
    sprite = images.sprite(GameObjectType.EXIT, (100.0, 100.0))
    assert sprite.texture.get_size() == (20, 40)
    assert sprite.global_bounds().height == pytest.approx(100.0)


def test_object_sprite_uses_sheet_region():
    sheet = _surface(1000, 1000)
    images = ObjectImages(textures={TypeObject.SPRITE_SHEET: sheet})
    sprite = images.object_sprite(TypeObject.OBSTACLE)
    assert sprite.texture is sheet
    assert sprite.texture_rect == pygame.Rect(440, 430, 50, 50)


def test_object_sprite_exit_door_region():
    images = ObjectImages(textures={})
    sprite = images.object_sprite(TypeObject.EXIT_DOOR)
    assert sprite.texture_rect == pygame.Rect(40, 836, 80, 80)


def test_object_sprite_unknown_type_is_empty():
    images = ObjectImages(textures={})
    sprite = images.object_sprite(TypeObject.LOCK)
    assert sprite.texture_rect is None
    assert sprite.global_bounds().width == 0


@pytest.mark.parametrize(
    "player_type",
    [
        TypeObject.PLAYER,
        TypeObject.PLAYER_ALPHA,
        TypeObject.PLAYER_BETA,
        TypeObject.PLAYER_GAMMA,
        TypeObject.PLAYER_DELTA,
        TypeObject.PLAYER_EPSILON,
        TypeObject.PLAYER_ZETA,
    ],
)
def test_player_sprites_are_fifty_pixels(player_type):
    images = ObjectImages(textures={TypeObject.PLAYER_CHARACTERS: _surface(1300, 900)})
    bounds = images.player_sprite(player_type).global_bounds()
    assert bounds.width == pytest.approx(50.0)
    assert bounds.height == pytest.approx(50.0)


def test_player_sprite_zeta_region():
    images = ObjectImages(textures={})
    assert images.player_sprite(TypeObject.PLAYER_ZETA).texture_rect == pygame.Rect(939, 146, 300, 346)


def test_player_sprite_unknown_type_is_empty():
    images = ObjectImages(textures={})
    assert images.player_sprite(TypeObject.ENEMY).global_bounds().height == 0


def test_lock_sprite_is_translucent_and_fitted():
    images = ObjectImages(textures={TypeObject.LOCK: _surface(35, 70)})
    sprite = images.lock_sprite((140.0, 140.0))
    assert sprite.alpha == 191
    bounds = sprite.global_bounds()
    assert (bounds.width, bounds.height) == (pytest.approx(140.0), pytest.approx(140.0))