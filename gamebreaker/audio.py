"""Sounds and music: loading, playback control and an in-memory playback backend."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .audiofile import AudioError, DiskFile, ErrorCode, MemoryFile


class AudioKind(IntEnum):
    SOUND = 0
    MUSIC = 1


@dataclass(eq=False)
class Sound:
    """A loaded sound or music track and its playback settings."""

    fname: str
    kind: AudioKind = AudioKind.SOUND
    volume: float = 1.0
    pos: float = 0.0
    x: float = 0.0
    y: float = 0.0
    pan: float = 0.0
    loops: int = 0
    looping: bool = False
    length: float = -1.0
    handle: int | None = None
    data: bytes = b""
    tags: dict[str, str] = field(default_factory=dict)


@dataclass
class _Voice:
    sound: Sound
    volume: float
    looping: bool
    paused: bool = False
    position: float = 0.0


class MemoryBackend:
    """Keeps track of playing voices without producing sound."""

    def __init__(self) -> None:
        self._voices: dict[int, _Voice] = {}
        self._last_handle = 0

    def play(self, sound: Sound, volume: float = -1.0, looping: bool = False) -> int:
        """Start a voice and return its handle; a negative volume means the sound's own."""
        self._last_handle += 1
        self._voices[self._last_handle] = _Voice(
            sound, sound.volume if volume < 0 else volume, looping
        )
        return self._last_handle

    def _voice(self, handle: int) -> _Voice:
        voice = self._voices.get(handle)
        if voice is None:
            raise AudioError(ErrorCode.INVALID_PARAMETER, f"no voice with handle {handle}")
        return voice

    def seek(self, handle: int, pos: float) -> None:
        if pos < 0:
            raise ValueError("position must not be negative")
        self._voice(handle).position = pos

    def set_pause(self, handle: int, paused: bool) -> None:
        voice = self._voices.get(handle)
        if voice is not None:
            voice.paused = paused

    def stop(self, handle: int) -> None:
        self._voices.pop(handle, None)

    def position(self, handle: int) -> float:
        """Play position in seconds; 0 for a voice that no longer exists."""
        voice = self._voices.get(handle)
        return voice.position if voice is not None else 0.0

    def is_valid(self, handle: int) -> bool:
        return handle in self._voices

    def is_paused(self, handle: int) -> bool:
        voice = self._voices.get(handle)
        return voice is not None and voice.paused

    def is_looping(self, handle: int) -> bool:
        voice = self._voices.get(handle)
        return voice is not None and voice.looping

    def volume(self, handle: int) -> float:
        return self._voice(handle).volume

    def advance(self, seconds: float) -> None:
        """Let time pass for every voice that is not paused."""
        for voice in self._voices.values():
            if not voice.paused:
                voice.position += seconds


class AudioPlayer:
    """Loads sounds and controls their playback through a backend."""

    def __init__(self, backend: MemoryBackend | None = None, master_volume: float = 1.0) -> None:
        self.backend = backend if backend is not None else MemoryBackend()
        self.master_volume = master_volume
        self.current: Sound | None = None

    def add(self, fname: str, kind: AudioKind = AudioKind.SOUND) -> Sound:
        """Load a sound (into memory) or music (streamed from disk)."""
        kind = AudioKind(kind)
        sound = Sound(fname=str(fname), kind=kind, volume=1 * self.master_volume)
        if kind is AudioKind.MUSIC:
            with DiskFile() as disk:
                disk.open(sound.fname)
        else:
            mem = MemoryFile()
            mem.open_to_mem(sound.fname)
            sound.data = mem.data
        self.current = sound
        return sound

    @staticmethod
    def _handle(sound: Sound) -> int:
        if sound.handle is None:
            raise RuntimeError(f"{sound.fname} has not been played")
        return sound.handle

    def play(self, sound: Sound) -> None:
        sound.handle = self.backend.play(sound, 1 * self.master_volume, sound.looping)

    def loop(self, sound: Sound, loops: int) -> None:
        """Play repeatedly; any positive count or -1 turns looping on."""
        sound.loops = loops
        sound.looping = loops > 0 or loops == -1
        sound.handle = self.backend.play(sound, -1.0, sound.looping)

    def pause(self, sound: Sound) -> None:
        self.backend.set_pause(self._handle(sound), True)

    def resume(self, sound: Sound) -> None:
        self.backend.set_pause(self._handle(sound), False)

    def stop(self, sound: Sound) -> None:
        self.backend.stop(self._handle(sound))

    def set_vol(self, sound: Sound, volume: float) -> None:
        sound.volume = volume

    def set_pos(self, sound: Sound, pos: float) -> None:
        handle = self._handle(sound)
        sound.pos = pos
        self.backend.seek(handle, pos)

    def get_pos(self, sound: Sound) -> float:
        return self.backend.position(self._handle(sound))

    def get_len(self, sound: Sound) -> float:
        """Length in seconds, or -1 when unknown."""
        return sound.length

    def set_loops(self, sound: Sound, loops: int) -> None:
        sound.loops = loops

    def destroy(self, sound: Sound) -> None:
        """Reset a sound that will not be used again."""
        sound.x = 0.0
        sound.y = 0.0
        sound.pan = 0.0
        sound.pos = 0.0
        sound.kind = AudioKind.SOUND
        sound.volume = 0.0
        sound.data = b""
        if self.current is sound:
            self.current = None