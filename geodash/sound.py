"""Background music and short sound effects."""

from __future__ import annotations

from enum import Enum, auto
from pathlib import Path

import pygame

MAX_SOUNDS = 20
DEFAULT_VOLUME = 75.0


class SoundType(Enum):
    """Short sound effects."""

    CLICK = auto()
    FINISHED_LEVEL = auto()
    GAME_OVER = auto()
    NOTIFICATION = auto()
    TOUCH_GIFT = auto()
    UNLOCK = auto()


class MusicType(Enum):
    """Looping background tracks."""

    MENU_SOUND = auto()
    GAME_SOUND = auto()


MUSIC_FILES = {
    MusicType.MENU_SOUND: "MenuSound.mp3",
    MusicType.GAME_SOUND: "GameSound.mp3",
}

SOUND_FILES = {
    SoundType.UNLOCK: "unlock.wav",
    SoundType.TOUCH_GIFT: "touchGift.wav",
    SoundType.NOTIFICATION: "notification.wav",
    SoundType.GAME_OVER: "gameOver.wav",
    SoundType.FINISHED_LEVEL: "finishedLevel.wav",
    SoundType.CLICK: "click.mp3",
}


class SoundError(RuntimeError):
    """Raised when audio cannot be loaded or an unknown sound is requested."""


class SoundBoard:
    """Loads all audio files from ``directory`` and plays them through ``mixer``."""

    def __init__(self, directory=".", mixer=None):
        if mixer is None:
            try:
                if not pygame.mixer.get_init():
                    pygame.mixer.init()
            except pygame.error as exc:
                raise SoundError(f"Failed to open audio device: {exc}") from exc
            mixer = pygame.mixer
        self._mixer = mixer
        directory = Path(directory)

        self._music = {}
        for music_type, name in MUSIC_FILES.items():
            path = directory / name
            if not path.is_file():
                raise SoundError(f"Failed to load {name}")
            self._music[music_type] = path

        self._sounds = {}
        for sound_type, name in SOUND_FILES.items():
            path = directory / name
            if not path.is_file():
                raise SoundError(f"Failed to load {name}")
            try:
                self._sounds[sound_type] = mixer.Sound(str(path))
            except (pygame.error, OSError) as exc:
                raise SoundError(f"Failed to load {name}") from exc

        self._channels = []

    def close_all_music(self):
        """Stop the background music if it is playing."""
        if self._mixer.music.get_busy():
            self._mixer.music.stop()

    def play_music(self, music_type, volume=DEFAULT_VOLUME):
        """Replace the current music with ``music_type`` playing in a loop."""
        self.close_all_music()
        path = self._music.get(music_type)
        if path is None:
            raise SoundError(f"Unknown music type: {music_type!r}")
        music = self._mixer.music
        music.load(str(path))
        music.set_volume(volume / 100.0)
        music.play(loops=-1)

    def play_sound(self, sound_type, volume=DEFAULT_VOLUME):
        """Play a short effect unless too many effects are already playing."""
        sound = self._sounds.get(sound_type)
        if sound is None:
            raise SoundError(f"Unknown sound type: {sound_type!r}")
        self._channels = [channel for channel in self._channels if channel.get_busy()]
        if len(self._channels) >= MAX_SOUNDS:
            return
        channel = sound.play()
        if channel is None:
            return
        channel.set_volume(volume / 100.0)
        self._channels.append(channel)


_board = None


def default_board():
    """The shared sound board, loaded from the working directory on first use."""
    global _board
    if _board is None:
        _board = SoundBoard()
    return _board


def set_default_board(board):
    """Replace the shared sound board and return the one it replaced.

    ``None`` makes the next use reload it. Anything else must be able to
    play music and sounds.
    """
    global _board
    if board is not None and not (
        callable(getattr(board, "play_sound", None))
        and callable(getattr(board, "play_music", None))
    ):
        raise TypeError(f"Not a sound board: {board!r}")
    previous, _board = _board, board
    return previous


def play_music(music_type, volume=DEFAULT_VOLUME):
    """Play looping music on the shared sound board."""
    default_board().play_music(music_type, volume)


def play_sound(sound_type, volume=DEFAULT_VOLUME):
    """Play an effect on the shared sound board."""
    default_board().play_sound(sound_type, volume)