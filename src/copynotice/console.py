# copynotice - source code notice writer
# Copyright (C) 2024-2026 copynotice Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import sys
from enum import Enum
from typing import Callable, Optional, TextIO

from .errors import PromptClosedError

RESET = "\x1b[0m"


class Tone(Enum):
    PLAIN = "plain"
    DETAIL = "detail"
    HIGHLIGHT = "highlight"
    QUESTION = "question"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    TITLE = "title"


ANSI_TONES = {
    Tone.PLAIN: "\x1b[0m",
    Tone.DETAIL: "\x1b[90m",
    Tone.HIGHLIGHT: "\x1b[33m",
    Tone.QUESTION: "\x1b[94m",
    Tone.SUCCESS: "\x1b[32;1m",
    Tone.WARNING: "\x1b[33m",
    Tone.ERROR: "\x1b[1;31m",
    Tone.TITLE: "\x1b[1;4;32m",
}


class Console:
    """
    Text sink for user-facing output.

    The pipeline only ever says *what kind* of message it is writing (a Tone);
    whether that turns into colour is up to the implementation.
    """

    def __init__(self, stream: Optional[TextIO] = None, reader: Optional[Callable[[], str]] = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._reader = reader or _read_stdin_line

    def write(self, text: str, tone: Tone = Tone.PLAIN) -> "Console":
        self._stream.write(text)
        self._stream.flush()
        return self

    def read(self) -> str:
        self.write("> ")
        line = self._reader()
        return line.rstrip("\r\n")

    def close(self) -> None:
        pass


class PlainConsole(Console):
    pass


class AnsiConsole(Console):
    def write(self, text: str, tone: Tone = Tone.PLAIN) -> "Console":
        return super().write(f"{ANSI_TONES[tone]}{text}{RESET}")

    def close(self) -> None:
        self._stream.write(RESET)
        self._stream.flush()


def _read_stdin_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise PromptClosedError("standard input closed while waiting for an answer")
    return line


def create_console(color: str = "auto", stream: Optional[TextIO] = None) -> Console:
    stream = stream if stream is not None else sys.stdout
    if color == "always":
        return AnsiConsole(stream)
    if color == "auto" and hasattr(stream, "isatty") and stream.isatty():
        return AnsiConsole(stream)
    return PlainConsole(stream)


def ask_yes_no(console: Console) -> bool:
    while True:
        answer = console.read().strip().lower()
        if answer in {"y", "yes"}:
            return True
        if answer in {"n", "no"}:
            return False
        console.write("Invalid input. Enter yes or no.\n")
