"""Writes simulation events, one per line, tagged with their turn."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from battlesim.records import format_fields


class EventLog:
    """Prints ``[tick] NAME field=value ...`` lines to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def log(self, tick: int, event: Any) -> None:
        stream = self.stream
        stream.write(f"[{tick}] {event.NAME} {format_fields(event)}\n")
        stream.flush()