import pytest

from geodash.config import TypeObject
from geodash.graphics import View
from geodash.info import Info, ObjectInformation
from geodash.sound import SoundType


class RecordingSounds:
    def __init__(self):
        self.played = []

    def play_sound(self, sound_type, volume=75.0):
        self.played.append(sound_type)


class RecordingWindow:
    def __init__(self):
        self.view = View((400, 450), (800, 900))
        self.texts = []

    def draw_text(self, text, position, color):
        self.texts.append((text, tuple(position), tuple(color)))


@pytest.fixture
def sounds():
    return RecordingSounds()


def test_defaults():
    info = Info()
    assert info.level == 1
    assert info.money == 0
    assert info.player_type is TypeObject.PLAYER


def test_add_money_accumulates():
    info = Info()
    info.add_money(30)
    info.add_money(12)
    assert info.money == 42


def test_buy_player_succeeds(sounds):
    info = Info(money=120, sounds=sounds)
    assert info.buy_player(TypeObject.PLAYER_BETA, 100) is True
    assert info.money == 20
    assert info.player_type is TypeObject.PLAYER_BETA
    assert sounds.played == [SoundType.UNLOCK]


def test_buy_player_with_exact_money(sounds):
    info = Info(money=50, sounds=sounds)
    assert info.buy_player(TypeObject.PLAYER_ALPHA, 50) is True
    assert info.money == 0


def test_buy_player_fails_without_money(sounds):
    info = Info(money=10, sounds=sounds)
    assert info.buy_player(TypeObject.PLAYER_ZETA, 300) is False
    assert info.money == 10
    assert info.player_type is TypeObject.PLAYER
    assert sounds.played == [SoundType.NOTIFICATION]


def test_info_draw_shows_money_bottom_left():
    window = RecordingWindow()
    Info(money=7).draw(window)
    assert window.texts == [("Money: 7", (20.0, 850.0), (0, 0, 0))]


def test_info_draw_follows_view():
    window = RecordingWindow()
    Info().draw(window)
    first = window.texts[-1][1]
    window.view.move((100, 0))
    Info().draw(window)
    second = window.texts[-1][1]
    assert second[0] - first[0] == 100
    assert second[1] == first[1]


def test_take_coins_resets():
    status = ObjectInformation()
    status.add_coins(1)
    status.add_coins(2)
    assert status.coins == 3
    assert status.take_coins() == 3
    assert status.coins == 0
    assert status.take_coins() == 0


def test_object_information_flags():
    status = ObjectInformation()
    assert (status.next_level, status.player_dead) == (False, False)
    status.next_level = True
    assert status.next_level is True


def test_object_information_draw():
    window = RecordingWindow()
    status = ObjectInformation(coins=4)
    status.draw(window, 2)
    text, position, color = window.texts[0]
    assert text == "Level: 2    Coins: 4"
    assert position == (20.0, 850.0)
    assert color == (0, 0, 0)