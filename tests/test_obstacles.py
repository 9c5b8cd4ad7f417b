import pygame
import pytest
from pygame.math import Vector2

from geodash.assets import ObjectImages
from geodash.config import (
    NEAR,
    SYMBOL_EXIT_DOOR,
    SYMBOL_GIFT,
    SYMBOL_OBSTACLE,
    SYMBOL_PLATFORM,
    VERY_NEAR,
)
from geodash.entities import Player
from geodash.factory import ObjectConfig, create
from geodash.graphics import Sprite
from geodash.info import ObjectInformation
from geodash.obstacles import ExitDoor, Gift, Obstacle, Platform
from geodash.sound import SoundType


class FakeBoard:
    def __init__(self):
        self.played = []

    def play_sound(self, sound_type, volume=75.0):
        self.played.append(sound_type)


def block():
    return Sprite(texture_rect=pygame.Rect(0, 0, 50, 50))


@pytest.fixture
def board():
    return FakeBoard()


def make_player(location, board):
    return Player(location, block(), sounds=board, jump_pressed=lambda: False)


def test_exit_door_reports_next_level_once(board):
    door = ExitDoor((100, 0), block(), sounds=board)
    player = make_player((100, 0), board)
    player.handle_collision(door)
    info = ObjectInformation()
    door.update_information(info)
    assert info.next_level is True
    assert board.played == [SoundType.FINISHED_LEVEL]
    door.update_information(info)
    assert info.next_level is False


def test_gift_adds_single_coin_and_dies(board):
    gift = Gift((0, 0), block(), sounds=board)
    player = make_player((0, 0), board)
    player.handle_collision(gift)
    assert gift.dead is True
    assert board.played == [SoundType.TOUCH_GIFT]
    info = ObjectInformation()
    gift.update_information(info)
    gift.update_information(info)
    assert info.coins == 1


def test_gift_untouched_adds_nothing(board):
    gift = Gift((0, 0), block(), sounds=board)
    info = ObjectInformation()
    gift.update_information(info)
    assert info.coins == 0
    assert gift.dead is False


def test_obstacle_kills_player(board):
    obstacle = Obstacle((0, 0), block())
    player = make_player((0, 0), board)
    player.handle_collision(obstacle)
    assert player.need_to_die is True
    assert board.played == [SoundType.GAME_OVER]


def test_platform_hit_from_above_lands_player(board):
    platform = Platform((0, 45), block())
    player = make_player((0, 0), board)
    platform.handle_player_collision(player)
    assert player.on_ground is True
    assert player.location.y == pytest.approx(45 - 50)


def test_platform_hit_from_below_pushes_down(board):
    platform = Platform((0, 20), block())
    player = make_player((0, 60), board)
    platform.handle_player_collision(player)
    assert player.stuck is True
    assert player.location.y == pytest.approx(20 + 50 + NEAR)


def test_platform_hit_from_side_blocks(board):
    platform = Platform((20, 30), block())
    player = make_player((0, 30), board)
    player.location = Vector2(5, 30)
    platform.handle_player_collision(player)
    assert player.location.x == pytest.approx(0 - VERY_NEAR)
    assert player.location.y == pytest.approx(30)
    assert player.on_ground is False


@pytest.mark.parametrize(
    "symbol, cls",
    [
        (SYMBOL_EXIT_DOOR, ExitDoor),
        (SYMBOL_GIFT, Gift),
        (SYMBOL_OBSTACLE, Obstacle),
        (SYMBOL_PLATFORM, Platform),
    ],
)
def test_factory_creates_objects(symbol, cls):
    config = ObjectConfig(location=(150.0, 50.0), images=ObjectImages(textures={}))
    obj = create(symbol, config)
    assert isinstance(obj, cls)
    assert obj.location == Vector2(150.0, 50.0)