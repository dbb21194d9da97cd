"""Flat functions over a default set of game services."""

from __future__ import annotations

from typing import Any

from .audio import AudioKind, AudioPlayer, Sound
from .messages import MessageBox
from .mouse import MouseButton, MouseState
from .objects import GameObject, ObjectRegistry
from .window import Window

objects = ObjectRegistry()
mouse = MouseState()
window = Window()
audio = AudioPlayer()
messages = MessageBox()


def object_add(sprite: Any = None, mask: Any = None) -> GameObject:
    return objects.add(sprite, mask)


def object_destroy(obj: GameObject) -> None:
    objects.destroy(obj)


def mouse_pressed(button: MouseButton) -> bool:
    return mouse.pressed(button)


def mouse_released(button: MouseButton) -> bool:
    return mouse.released(button)


def mouse_holding(button: MouseButton) -> bool:
    return mouse.holding(button)


def mouse_nothing(button: MouseButton) -> bool:
    return mouse.nothing(button)


def mouse_which() -> MouseButton:
    return mouse.which()


def window_set_size(width: int, height: int) -> None:
    window.set_size(width, height)


def window_set_pos(x: int, y: int) -> None:
    window.set_pos(x, y)


def window_get_width() -> int:
    return window.width


def window_get_height() -> int:
    return window.height


def window_get_size() -> tuple[int, int]:
    return window.get_size()


def window_get_pos() -> tuple[int, int]:
    return window.get_pos()


def window_set_title(title: str) -> None:
    window.set_title(title)


def window_set_icon(path: str) -> None:
    window.set_icon(path)


def audio_add(fname: str, kind: AudioKind = AudioKind.SOUND) -> Sound:
    return audio.add(fname, kind)


def audio_play(sound: Sound) -> None:
    audio.play(sound)


def audio_loop(sound: Sound, loops: int) -> None:
    audio.loop(sound, loops)


def audio_pause(sound: Sound) -> None:
    audio.pause(sound)


def audio_resume(sound: Sound) -> None:
    audio.resume(sound)


def audio_stop(sound: Sound) -> None:
    audio.stop(sound)


def audio_set_vol(sound: Sound, volume: float) -> None:
    audio.set_vol(sound, volume)


def audio_set_pos(sound: Sound, pos: float) -> None:
    audio.set_pos(sound, pos)


def audio_get_pos(sound: Sound) -> float:
    return audio.get_pos(sound)


def audio_get_length(sound: Sound) -> float:
    return audio.get_len(sound)


def audio_destroy(sound: Sound) -> None:
    audio.destroy(sound)


def show_message(title: str, text: str) -> None:
    messages.message(title, text)


def show_error(text: str, abort: bool = True) -> None:
    messages.error(text, abort)