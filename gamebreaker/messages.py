"""Message boxes for information and fatal errors."""

from __future__ import annotations

import sys
from collections.abc import Callable
from enum import IntEnum
from typing import TextIO

FATAL_TITLE = "FATAL ERROR"
EXIT_CODE = 0xC01001


class MessageKind(IntEnum):
    INFO = 0
    ERROR = 0x10


Presenter = Callable[[MessageKind, str, str], None]


class MessageBox:
    """Shows messages through a presenter; by default they go to a text stream."""

    def __init__(self, presenter: Presenter | None = None, stream: TextIO | None = None) -> None:
        self._presenter = presenter if presenter is not None else self._write
        self._stream = stream

    def _write(self, kind: MessageKind, title: str, text: str) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        label = "error" if kind is MessageKind.ERROR else "info"
        print(f"[{label}] {title}: {text}", file=stream)

    def message(self, title: str, text: str) -> None:
        self._presenter(MessageKind.INFO, title, text)

    def error(self, text: str, abort: bool = True) -> None:
        """Show a fatal error; when ``abort`` is set, print it and exit."""
        self._presenter(MessageKind.ERROR, FATAL_TITLE, text)
        if abort:
            print(f"ERROR: {text}\nExit code: 0x{EXIT_CODE:X}")
            raise SystemExit(EXIT_CODE)