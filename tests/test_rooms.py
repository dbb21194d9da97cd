import pytest

from gamebreaker.objects import ObjectRegistry
from gamebreaker.rooms import (
    FIRST_INSTANCE_ID,
    MAX_CAMERAS,
    CameraSetup,
    RoomManager,
)


@pytest.fixture
def registry():
    return ObjectRegistry()


def test_add_room_defaults():
    manager = RoomManager()
    room = manager.add(320, 240)
    assert room.speed == 60
    assert room.id == 0
    assert room.background_visible is True
    assert room.view_enabled == [False] * MAX_CAMERAS
    assert room.views == [CameraSetup(0, 0, 320, 240, 0)] * MAX_CAMERAS
    assert manager.add(10, 10).id == room.id + 1


def test_add_instance(registry):
    room = RoomManager().add(100, 100)
    obj = registry.add()
    first = room.add_instance(obj, 5, 7)
    assert first == 100000
    assert (obj.x, obj.y) == (5, 7)
    assert obj.inst_id == first
    second = room.add_instance(registry.add(), 1, 2)
    assert second == FIRST_INSTANCE_ID + 1


def test_add_instance_keeps_callback(registry):
    room = RoomManager().add(100, 100)
    calls = []
    room.add_instance(registry.add(), 0, 0, lambda: calls.append(1))
    room.instances[0].on_create()
    assert calls == [1]


def test_remove_instance(registry):
    manager = RoomManager()
    room = manager.add(100, 100)
    a = registry.add()
    b = registry.add()
    ia = room.add_instance(a, 0, 0)
    ib = room.add_instance(b, 0, 0)
    room.remove_instance(ia)
    manager.set_current(room)
    assert manager.find_object(ia) is None
    assert manager.find_object(ib) is b
    assert len(room.instances) == 1


def test_camera_setup():
    room = RoomManager().add(100, 100)
    view = CameraSetup(1, 2, 50, 40, 0)
    port = CameraSetup(0, 0, 200, 160, 0)
    target = object()
    room.camera_setup(2, True, view, port, 100000, target)
    assert room.view_enabled[2] is True
    assert room.views[2] == view
    assert room.ports[2] == port
    assert room.target_id == 100000
    assert room.target_setup is target


@pytest.mark.parametrize("camera_id", [-1, MAX_CAMERAS])
def test_camera_setup_bad_id(camera_id):
    room = RoomManager().add(100, 100)
    with pytest.raises(IndexError):
        room.camera_setup(camera_id, True, CameraSetup(), CameraSetup())


def test_set_current_copies_views():
    manager = RoomManager()
    room = manager.add(64, 48)
    manager.set_current(room)
    assert manager.current is room
    assert manager.views == room.views
    room.views[0].x = 99
    assert manager.views[0].x == 0


def test_find_object_without_room():
    with pytest.raises(RuntimeError):
        RoomManager().find_object(FIRST_INSTANCE_ID)