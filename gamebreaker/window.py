"""Window state: title, icon, position, size and thread priority."""

from __future__ import annotations

from pathlib import Path

_PRIORITY_LEVELS = range(4)  # low, normal, high, time critical


class Window:
    """The game window's settings."""

    def __init__(self, title: str = "", width: int = 640, height: int = 480, x: int = 0, y: int = 0) -> None:
        self.title = title
        self.width = width
        self.height = height
        self.x = x
        self.y = y
        self.icon: Path | None = None
        self.priority = 1

    def set_icon(self, path: str | Path) -> None:
        icon = Path(path)
        if not icon.is_file():
            raise FileNotFoundError(f"icon not found: {icon}")
        self.icon = icon

    def set_title(self, title: str) -> None:
        self.title = title

    def set_size(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("window size must be positive")
        self.width = width
        self.height = height

    def set_pos(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def get_pos(self) -> tuple[int, int]:
        return (self.x, self.y)

    def get_size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def set_priority(self, level: int) -> None:
        """Set the thread priority: 0 low to 3 time critical."""
        if level not in _PRIORITY_LEVELS:
            raise ValueError(f"priority must be 0 to 3, got {level}")
        self.priority = level