"""Mouse button state tracked between frames."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum


class MouseButton(IntEnum):
    NONE = 0
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    ANY = 4


_PHYSICAL = (MouseButton.LEFT, MouseButton.MIDDLE, MouseButton.RIGHT)
_SLOTS = 4


class MouseState:
    """Button state of the current and the previous frame, plus the wheel."""

    def __init__(self) -> None:
        self._current = [False] * _SLOTS
        self._last = [False] * _SLOTS
        self.wheel_y = 0

    def update(self, buttons: Iterable[MouseButton]) -> None:
        """Start a new frame in which exactly ``buttons`` are held down."""
        held = [False] * _SLOTS
        for button in buttons:
            button = MouseButton(button)
            if button is MouseButton.ANY:
                raise ValueError("ANY is not a physical button")
            if button is not MouseButton.NONE:
                held[button] = True
        self._last = self._current
        self._current = held

    def set_wheel(self, y: int) -> None:
        self.wheel_y = y

    def _check(self, button: MouseButton, now: bool, before: bool) -> bool:
        button = MouseButton(button)
        if button is MouseButton.ANY:
            return any(self._current[b] == now and self._last[b] == before for b in _PHYSICAL)
        if button is MouseButton.NONE:
            return False
        return self._current[button] == now and self._last[button] == before

    def pressed(self, button: MouseButton) -> bool:
        """Went down this frame."""
        return self._check(button, True, False)

    def released(self, button: MouseButton) -> bool:
        """Went up this frame."""
        return self._check(button, False, True)

    def holding(self, button: MouseButton) -> bool:
        """Is down; for ANY, a button down in both this and the previous frame."""
        button = MouseButton(button)
        if button is MouseButton.ANY:
            return self._check(button, True, True)
        if button is MouseButton.NONE:
            return False
        return self._current[button]

    def nothing(self, button: MouseButton) -> bool:
        """Up in this and the previous frame."""
        return self._check(button, False, False)

    def which(self) -> MouseButton:
        """First button down now or in the previous frame, or NONE."""
        for index, (now, before) in enumerate(zip(self._current, self._last)):
            if now or before:
                return MouseButton(index)
        return MouseButton.NONE

    def wheel_up(self) -> bool:
        return self.wheel_y > 0

    def wheel_down(self) -> bool:
        return self.wheel_y < 0