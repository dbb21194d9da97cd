import pytest

from gamebreaker import api
from gamebreaker.audiofile import AudioError
from gamebreaker.mouse import MouseButton


@pytest.fixture
def clear_mouse():
    api.mouse.update([])
    api.mouse.update([])
    yield
    api.mouse.update([])
    api.mouse.update([])


def test_object_add_and_destroy():
    obj = api.object_add("spr")
    assert obj in api.objects
    assert obj.mask == "spr"
    api.object_destroy(obj)
    assert obj not in api.objects
    assert obj.sprite is None


def test_object_destroy_twice_raises():
    obj = api.object_add()
    api.object_destroy(obj)
    with pytest.raises(ValueError):
        api.object_destroy(obj)


def test_mouse_press_hold_release(clear_mouse):
    api.mouse.update([MouseButton.LEFT])
    assert api.mouse_pressed(MouseButton.LEFT)
    assert api.mouse_which() is MouseButton.LEFT
    api.mouse.update([MouseButton.LEFT])
    assert not api.mouse_pressed(MouseButton.LEFT)
    assert api.mouse_holding(MouseButton.ANY)
    api.mouse.update([])
    assert api.mouse_released(MouseButton.LEFT)
    api.mouse.update([])
    assert api.mouse_nothing(MouseButton.ANY)
    assert api.mouse_which() is MouseButton.NONE


def test_window_size_and_pos():
    api.window_set_size(800, 600)
    api.window_set_pos(10, 20)
    assert api.window_get_width() == 800
    assert api.window_get_height() == 600
    assert api.window_get_size() == (800, 600)
    assert api.window_get_pos() == (10, 20)


def test_window_title_and_icon(tmp_path):
    icon = tmp_path / "icon.png"
    icon.write_bytes(b"png")
    api.window_set_title("Game")
    api.window_set_icon(str(icon))
    assert api.window.title == "Game"
    assert api.window.icon == icon
    with pytest.raises(FileNotFoundError):
        api.window_set_icon(str(tmp_path / "none.png"))


def test_audio_round_trip(tmp_path):
    path = tmp_path / "s.wav"
    path.write_bytes(b"data")
    sound = api.audio_add(str(path))
    api.audio_play(sound)
    api.audio_set_pos(sound, 2.5)
    assert api.audio_get_pos(sound) == 2.5
    api.audio_pause(sound)
    assert api.audio.backend.is_paused(sound.handle)
    api.audio_resume(sound)
    assert not api.audio.backend.is_paused(sound.handle)
    api.audio_set_vol(sound, 0.3)
    assert sound.volume == 0.3
    api.audio_loop(sound, -1)
    assert sound.looping
    assert api.audio_get_length(sound) == -1
    handle = sound.handle
    api.audio_stop(sound)
    assert not api.audio.backend.is_valid(handle)
    api.audio_destroy(sound)
    assert sound.volume == 0.0


def test_audio_add_missing(tmp_path):
    with pytest.raises(AudioError):
        api.audio_add(str(tmp_path / "none.wav"))


def test_show_message(capsys):
    api.show_message("Hello", "World")
    err = capsys.readouterr().err
    assert "Hello" in err
    assert "World" in err


def test_show_error_without_abort(capsys):
    api.show_error("broken", False)
    err = capsys.readouterr().err
    assert "FATAL ERROR" in err
    assert "broken" in err


def test_show_error_aborts(capsys):
    with pytest.raises(SystemExit) as info:
        api.show_error("broken", True)
    assert info.value.code == 0xC01001
    assert "ERROR: broken" in capsys.readouterr().out