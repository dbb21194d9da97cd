"""Game objects and the registry that hands out their ids."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

MAX_ALARMS = 12


class Event(Enum):
    CREATE = auto()
    STEP_BEGIN = auto()
    STEP = auto()
    STEP_END = auto()
    DRAW = auto()
    DESTROY = auto()


Handler = Callable[["GameObject"], None]


@dataclass(eq=False)
class GameObject:
    """A game object with motion, sprite and event handlers."""

    sprite: Any = None
    mask: Any = None
    id: int = -1
    x: float = 0.0
    y: float = 0.0
    xprevious: float = 0.0
    yprevious: float = 0.0
    direction: float = 0.0
    gravity: float = 0.0
    gravity_direction: float = 270.0
    friction: float = 0.0
    speed: float = 0.0
    hspeed: float = 0.0
    vspeed: float = 0.0
    depth: int = 0
    image_index: float = 0.0
    image_speed: float = 1.0
    alarms: list[int] = field(default_factory=lambda: [-1] * MAX_ALARMS)
    alarm_events: list[Handler | None] = field(default_factory=lambda: [None] * MAX_ALARMS)
    events: dict[Event, Handler] = field(default_factory=dict)
    initialized: bool = False
    inst_id: int | None = None

    def set_event(self, kind: Event, handler: Handler | None) -> None:
        """Attach ``handler`` to an event; None removes it."""
        kind = Event(kind)
        if handler is None:
            self.events.pop(kind, None)
        else:
            self.events[kind] = handler


class ObjectRegistry:
    """Creates objects with consecutive ids and tracks which are alive."""

    def __init__(self) -> None:
        self._slots: list[GameObject | None] = []

    def add(self, sprite: Any = None, mask: Any = None) -> GameObject:
        """Create an object; the mask defaults to the sprite."""
        obj = GameObject(
            sprite=sprite,
            mask=mask if mask is not None else sprite,
            id=len(self._slots),
        )
        self._slots.append(obj)
        return obj

    def destroy(self, obj: GameObject) -> None:
        """Reset an object's state and drop it from the registry."""
        if not 0 <= obj.id < len(self._slots) or self._slots[obj.id] is not obj:
            raise ValueError("object is not registered")
        self._slots[obj.id] = None
        obj.direction = 0.0
        obj.gravity_direction = 0.0
        obj.friction = 0.0
        obj.gravity = 0.0
        obj.hspeed = 0.0
        obj.vspeed = 0.0
        obj.speed = 0.0
        obj.mask = None
        obj.sprite = None
        obj.x = 0.0
        obj.y = 0.0

    def __iter__(self) -> Iterator[GameObject]:
        return (obj for obj in self._slots if obj is not None)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, obj: object) -> bool:
        return any(live is obj for live in self)