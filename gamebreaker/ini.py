"""INI files: sections of key/value pairs with line tracking, and in-place editing."""

from __future__ import annotations

import copy
import math
import os
import re
import tempfile
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

_C_SPACE = " \t\n\v\f\r"
_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_FLOAT_RE = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_FALSE_WORDS = frozenset({"0", "false", "no"})
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _trim(text: str) -> str:
    return text.strip(_C_SPACE)


def _leading_int(text: str) -> int | None:
    match = _INT_RE.match(text)
    if match is None:
        return None
    number = int(match.group(1))
    if not _INT32_MIN <= number <= _INT32_MAX:
        return None
    return number


def _leading_float(text: str) -> float | None:
    match = _FLOAT_RE.match(text)
    if match is None:
        return None
    literal = match.group(1)
    number = float(literal)
    if math.isinf(number) and "inf" not in literal.lower():
        return None
    return number


def _stringify(value: object) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:f}"
    return str(value)


def _getline_lines(content: str) -> list[str]:
    """Lines as a read-until-end loop sees them: no empty line after a final newline."""
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


@dataclass(frozen=True)
class IniValue:
    """A raw value with conversions."""

    value: str

    def __str__(self) -> str:
        return self.value

    def as_int(self) -> int:
        """Leading integer of the value; ValueError if there is none."""
        number = _leading_int(self.value)
        if number is None:
            raise ValueError(f"not an integer: {self.value!r}")
        return number

    def as_float(self) -> float:
        """Leading number of the value; ValueError if there is none."""
        number = _leading_float(self.value)
        if number is None:
            raise ValueError(f"not a number: {self.value!r}")
        return number

    def as_bool(self) -> bool:
        """False for '0', 'false' and 'no'; True for anything else."""
        return self.value not in _FALSE_WORDS


@dataclass
class _Entry:
    value: str = ""
    line: int = -1


class Section:
    """A named group of keys, each remembering the line it was read from."""

    def __init__(self, name: str = "", line: int = -1) -> None:
        self.name = name
        self.line = line
        self._entries: dict[str, _Entry] = {}

    def __repr__(self) -> str:
        return f"Section(name={self.name!r}, keys={list(self)!r})"

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __getitem__(self, key: str) -> IniValue:
        if key not in self._entries:
            raise KeyError(f"Key not found: {key}")
        return IniValue(self._entries[key].value)

    def get_value(self, key: str) -> str:
        entry = self._entries.get(key)
        return entry.value if entry is not None else ""

    def set_value(self, key: str, value: str, line: int) -> None:
        self._entries[key] = _Entry(value, line)

    def append(self, other: Section) -> None:
        """Take over the keys of ``other`` that this section does not have yet."""
        for key, entry in other._entries.items():
            self._entries.setdefault(key, _Entry(entry.value, entry.line))

    def key_exists(self, key: str) -> bool:
        return key in self._entries

    def end_line(self) -> int:
        """Last line belonging to the section, or -1."""
        if not self._entries and self.name != "":
            return self.line
        return max((entry.line for entry in self._entries.values()), default=-1)

    def get_line(self, key: str) -> int:
        entry = self._entries.get(key)
        return entry.line if entry is not None else -1

    def clear(self) -> None:
        self.line = -1
        self.name = ""
        self._entries.clear()

    def is_empty(self) -> bool:
        return not self._entries

    def to_int(self, key: str) -> int:
        """Integer value of ``key``; 0 when missing or not a number."""
        entry = self._entries.get(key)
        if entry is None:
            return 0
        number = _leading_int(entry.value)
        return number if number is not None else 0

    def to_float(self, key: str) -> float:
        """Float value of ``key``; 0.0 when missing or not a number."""
        entry = self._entries.get(key)
        if entry is None:
            return 0.0
        number = _leading_float(entry.value)
        return number if number is not None else 0.0

    def to_string(self, key: str) -> str:
        return self.get_value(key)


class IniData:
    """Sections by name; a section added twice is merged."""

    def __init__(self) -> None:
        self._sections: dict[str, Section] = {}

    def __len__(self) -> int:
        return len(self._sections)

    def __contains__(self, name: object) -> bool:
        return name in self._sections

    def __getitem__(self, name: str) -> Section:
        """The named section; the unnamed section (or an empty one) if it is missing."""
        section = self._sections.get(name)
        if section is None:
            section = self._sections.get("")
        return section if section is not None else Section()

    def add_section(self, section: Section) -> None:
        existing = self._sections.get(section.name)
        if existing is not None:
            existing.append(section)
        else:
            self._sections[section.name] = copy.deepcopy(section)

    def remove_section(self, name: str) -> None:
        self._sections.pop(name, None)

    def section_exists(self, name: str) -> bool:
        return name in self._sections

    def sections(self) -> list[str]:
        """Section names in order; the unnamed section only if it holds keys."""
        return [
            name
            for name in sorted(self._sections)
            if not (name == "" and self._sections[name].is_empty())
        ]

    def get_value(self, section: str, key: str) -> str:
        """Value of ``key``; "" for a missing section, KeyError for a missing key."""
        found = self._sections.get(section)
        if found is None:
            return ""
        return found[key].value

    def get_line(self, section: str, key: str) -> int:
        found = self._sections.get(section)
        if found is None:
            return -1
        return found.get_line(key)

    def clear(self) -> None:
        self._sections.clear()


class IniManager:
    """An INI file on disk, read on creation and rewritten by ``modify``."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self._data = IniData()
        self.parse()

    def __getitem__(self, name: str) -> Section:
        return self._data[name]

    def _read(self) -> str | None:
        try:
            with open(self.path, "a+", encoding=_ENCODING, errors=_ERRORS, newline="") as handle:
                handle.seek(0)
                return handle.read()
        except OSError:
            pass
        try:
            with open(self.path, encoding=_ENCODING, errors=_ERRORS, newline="") as handle:
                return handle.read()
        except OSError:
            return None

    def parse(self) -> None:
        """(Re)read the file; the file is created if it does not exist."""
        content = self._read()
        if content is None:
            return
        self._data.clear()

        record = Section()
        section_name = ""
        for number, data in enumerate(content.split("\n"), start=1):
            if not data or data[0] in ";#":
                continue
            if data[0] == "[":
                if not record.is_empty() or record.name != "":
                    self._data.add_section(record)
                last = data.find("]")
                if last < 0:
                    continue
                section_name = data[1:last]
                record.clear()
                record.name = section_name
                record.line = number
            key, sep, value = data.partition("=")
            if sep:
                record.set_value(_trim(key), _trim(value), number)

        if not record.is_empty():
            record.name = section_name
            record.line = -1
            self._data.add_section(record)

    def modify(self, section: str, key: str, value: object, comment: str = "") -> bool:
        """Set ``key`` in ``section`` in the file, adding it where needed.

        Returns False if the key or value is empty or the file cannot be read.
        """
        self.parse()
        key = _trim(key)
        text = _stringify(value)
        if key == "" or text == "":
            return False

        entry = f"{key}={text}\n"
        if comment:
            entry = comment + "\n" + entry
            if comment[0] != ";":
                entry = ";" + entry

        try:
            with open(self.path, encoding=_ENCODING, errors=_ERRORS, newline="") as handle:
                lines = _getline_lines(handle.read())
        except OSError:
            return False

        output: list[str] = []
        mark = -1
        handled = False
        if self._data.section_exists(section):
            mark = self._data[section].get_line(key)
            if mark == -1:
                mark = self._data[section].end_line()
                written = False
                for number, line in enumerate(lines, start=1):
                    if number == mark + 1:
                        written = True
                        output.append(entry)
                    output.append(line + "\n")
                if not written:
                    output.append(entry)
                handled = True

        if not handled and mark <= 0:
            header = ""
            if section != "" and not any(ch in section for ch in "[]="):
                newline = "" if len(self._data) == 0 else "\n\n"
                header = f"{newline}[{section}]\n"
            body = [line + "\n" for line in lines]
            if self._data.section_exists(section) or section == "":
                output.append(header)
                output.append(entry)
                output.extend(body)
            else:
                output.extend(body)
                output.append(header)
                output.append(entry)
        elif not handled:
            for number, line in enumerate(lines, start=1):
                if number == mark - 1 and line.startswith(";") and comment:
                    continue
                output.append(entry if number == mark else line + "\n")

        self._write("".join(output))
        self.parse()
        return True

    def _write(self, content: str) -> None:
        directory = self.path.parent if str(self.path.parent) else Path(".")
        fd, temp_name = tempfile.mkstemp(dir=directory, prefix=".temp", suffix=".ini")
        try:
            with os.fdopen(fd, "w", encoding=_ENCODING, errors=_ERRORS, newline="") as handle:
                handle.write(content)
            os.replace(temp_name, self.path)
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise

    def modify_comment(self, section: str, key: str, comment: str) -> bool:
        """Set the comment above an existing key, keeping its value."""
        return self.modify(section, key, self._data[section].to_string(key), comment)

    def section_exists(self, name: str) -> bool:
        return self._data.section_exists(name)

    def sections(self) -> list[str]:
        return self._data.sections()