"""Output channel and notifications shown to the user."""

from __future__ import annotations

import sys
from typing import TextIO

BANNER = "=" * 60


class OutputChannel:
    """Append-only text log, optionally mirrored to a stream as lines arrive."""

    def __init__(self, name: str = "LeetCode", stream: TextIO | None = None) -> None:
        self.name = name
        self.lines: list[str] = []
        self._stream = stream

    def append_line(self, text: str = "") -> None:
        self.lines.append(text)
        if self._stream is not None:
            print(text, file=self._stream, flush=True)

    def text(self) -> str:
        return "\n".join(self.lines)


class Notifier:
    """Transient success/failure messages (the terminal's stand-in for a toast)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.messages: list[tuple[str, str]] = []
        self._stream = stream

    def info(self, message: str) -> None:
        self._emit("info", message)

    def error(self, message: str) -> None:
        self._emit("error", message)

    def _emit(self, level: str, message: str) -> None:
        self.messages.append((level, message))
        if self._stream is not None:
            prefix = "Error: " if level == "error" else ""
            print(f"{prefix}{message}", file=self._stream, flush=True)


def terminal_channel() -> OutputChannel:
    return OutputChannel(stream=sys.stdout)


def terminal_notifier() -> Notifier:
    return Notifier(stream=sys.stderr)
