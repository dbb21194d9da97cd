import pytest

from gamebreaker.window import Window


def test_size_roundtrip():
    win = Window()
    win.set_size(800, 600)
    assert win.get_size() == (800, 600)
    assert (win.width, win.height) == (800, 600)


@pytest.mark.parametrize("size", [(0, 10), (10, -1)])
def test_size_must_be_positive(size):
    win = Window()
    with pytest.raises(ValueError):
        win.set_size(*size)


def test_pos_roundtrip():
    win = Window()
    win.set_pos(12, 34)
    assert win.get_pos() == (12, 34)


def test_title():
    win = Window()
    win.set_title("My Game")
    assert win.title == "My Game"


def test_icon(tmp_path):
    win = Window()
    icon = tmp_path / "icon.png"
    icon.write_bytes(b"\x89PNG")
    win.set_icon(icon)
    assert win.icon == icon
    with pytest.raises(FileNotFoundError):
        win.set_icon(tmp_path / "missing.png")
    assert win.icon == icon


def test_priority():
    win = Window()
    win.set_priority(3)
    assert win.priority == 3
    with pytest.raises(ValueError):
        win.set_priority(4)
    assert win.priority == 3