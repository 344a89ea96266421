"""Reads scenario commands line by line and hands them to registered handlers."""

from __future__ import annotations

import re
import sys
from dataclasses import fields
from typing import Any, Callable, Iterable, TextIO

UINT32_MAX = 0xFFFFFFFF

_INTEGER = re.compile(r"\s*([+-]?)(\d+)")
_WORD = re.compile(r"\s*(\S+)")


class _FieldReader:
    """Reads fields from the rest of a command line; after a failure it yields nothing."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._failed = False

    def read_uint(self) -> int | None:
        if self._failed:
            return None
        match = _INTEGER.match(self._text, self._pos)
        if match is None:
            self._failed = True
            return None
        self._pos = match.end()
        magnitude = int(match.group(2))
        if magnitude > UINT32_MAX:
            self._failed = True
            return UINT32_MAX
        if match.group(1) == "-":
            return -magnitude % (UINT32_MAX + 1)
        return magnitude

    def read_word(self) -> str | None:
        if self._failed:
            return None
        match = _WORD.match(self._text, self._pos)
        if match is None:
            self._failed = True
            return None
        self._pos = match.end()
        return match.group(1)


def _build(command_type: type, text: str) -> Any:
    reader = _FieldReader(text)
    values: dict[str, Any] = {}
    for f in fields(command_type):
        value = reader.read_word() if f.type in ("str", str) else reader.read_uint()
        if value is not None:
            values[f.name] = value
    return command_type(**values)


class CommandParser:
    """Maps command names to handlers and dispatches each line of a scenario."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._commands: dict[str, tuple[type, Callable[[Any], None]]] = {}

    def add(self, command_type: type, handler: Callable[[Any], None]) -> CommandParser:
        """Register a handler for a command type; a name may be registered once."""
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(f"Command added {command_type.NAME}\n")
        stream.flush()
        name = command_type.NAME
        if name in self._commands:
            raise ValueError(f"Command already exists: {name}")
        self._commands[name] = (command_type, handler)
        return self

    def parse(self, lines: Iterable[str] | str) -> None:
        """Run the handler of every command line; comments and blank lines are skipped."""
        if isinstance(lines, str):
            lines = lines.splitlines()
        for raw in lines:
            line = raw.rstrip("\n")
            if not line or line.startswith("//"):
                continue
            parts = line.split(maxsplit=1)
            if not parts:
                continue
            name = parts[0]
            rest = parts[1] if len(parts) > 1 else ""
            try:
                command_type, handler = self._commands[name]
            except KeyError:
                raise ValueError(f"Unknown command: {name}") from None
            handler(_build(command_type, rest))