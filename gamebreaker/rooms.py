"""Rooms, their instances and cameras."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any

from .objects import GameObject

MAX_CAMERAS = 8
FIRST_INSTANCE_ID = 100000
DEFAULT_ROOM_SPEED = 60
BACKGROUND_GRAY = (128, 128, 128, 255)


@dataclass
class CameraSetup:
    x: float = 0
    y: float = 0
    w: float = 0
    h: float = 0
    angle: float = 0


@dataclass
class RoomInstance:
    obj_id: int
    instance_id: int
    object: GameObject
    x: float
    y: float
    on_create: Callable[[], None] | None = None


def _full_view(width: int, height: int) -> list[CameraSetup]:
    return [CameraSetup(0, 0, width, height, 0) for _ in range(MAX_CAMERAS)]


@dataclass(eq=False)
class Room:
    """A room: size, background, cameras and placed instances."""

    width: int
    height: int
    id: int = -1
    speed: int = DEFAULT_ROOM_SPEED
    background_visible: bool = True
    background_color: tuple[int, int, int, int] = BACKGROUND_GRAY
    background_image: Any = None
    view_current: int = 0
    view_enabled: list[bool] = field(default_factory=lambda: [False] * MAX_CAMERAS)
    views: list[CameraSetup] = field(init=False)
    ports: list[CameraSetup] = field(init=False)
    target_id: int | None = None
    target_setup: Any = None
    instances: list[RoomInstance] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.views = _full_view(self.width, self.height)
        self.ports = _full_view(self.width, self.height)

    def add_instance(
        self,
        obj: GameObject,
        x: float,
        y: float,
        on_create: Callable[[], None] | None = None,
    ) -> int:
        """Place ``obj`` at (x, y) and return its instance id."""
        instance = RoomInstance(
            obj_id=obj.id,
            instance_id=len(self.instances) + FIRST_INSTANCE_ID,
            object=obj,
            x=x,
            y=y,
            on_create=on_create,
        )
        self.instances.append(instance)
        obj.x = x
        obj.y = y
        obj.inst_id = instance.instance_id
        return instance.instance_id

    def remove_instance(self, instance_id: int) -> None:
        """Remove every instance with this id."""
        self.instances[:] = [i for i in self.instances if i.instance_id != instance_id]

    def camera_setup(
        self,
        camera_id: int,
        enabled: bool,
        view: CameraSetup,
        port: CameraSetup,
        target_inst_id: int | None = None,
        target: Any = None,
    ) -> None:
        """Configure one camera and the room's follow target."""
        if not 0 <= camera_id < MAX_CAMERAS:
            raise IndexError(f"camera {camera_id} out of range")
        self.view_enabled[camera_id] = bool(enabled)
        self.views[camera_id] = view
        self.ports[camera_id] = port
        self.target_id = target_inst_id
        self.target_setup = target


class RoomManager:
    """Owns the rooms and tracks the current one."""

    def __init__(self) -> None:
        self.rooms: list[Room] = []
        self.current: Room | None = None
        self.views: list[CameraSetup] = [CameraSetup() for _ in range(MAX_CAMERAS)]

    def add(self, width: int, height: int) -> Room:
        room = Room(width, height, id=len(self.rooms))
        self.rooms.append(room)
        return room

    def set_current(self, room: Room) -> None:
        """Make ``room`` current and take over its camera views."""
        self.current = room
        self.views = [replace(view) for view in room.views]

    def find_object(self, inst_id: int) -> GameObject | None:
        """Object of the current room with this instance id, or None."""
        if self.current is None:
            raise RuntimeError("no current room")
        return next(
            (i.object for i in self.current.instances if i.instance_id == inst_id),
            None,
        )