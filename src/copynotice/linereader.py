# copynotice - source code notice writer
# Copyright (C) 2024-2026 copynotice Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from typing import BinaryIO, Iterator, Optional

CRLF = b"\r\n"


class LineReader:
    """
    Single-pass CRLF line reader over a binary stream.

    The stream is read in ``chunk_size`` pieces; bytes read past the end of
    a line stay buffered, so ``remainder()`` picks up exactly where the last
    ``readline()`` stopped. Lines may be longer than ``chunk_size``.
    """

    def __init__(self, stream: BinaryIO, chunk_size: int = 64) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be >= 1")
        self._stream = stream
        self._chunk_size = chunk_size
        self._buffer = bytearray()
        self._eof = False

    def _fill(self) -> bool:
        chunk = self._stream.read(self._chunk_size)
        if not chunk:
            self._eof = True
            return False
        self._buffer += chunk
        return True

    def readline(self) -> Optional[bytes]:
        """Return the next line without its CRLF, or None at end of stream."""
        scanned = 0
        while True:
            # A CR at the end of the previous chunk may pair with an LF in the next one.
            end = self._buffer.find(CRLF, max(0, scanned - 1))
            if end != -1:
                line = bytes(self._buffer[:end])
                del self._buffer[: end + len(CRLF)]
                return line
            scanned = len(self._buffer)
            if self._eof or not self._fill():
                break

        if not self._buffer:
            return None
        line = bytes(self._buffer)
        self._buffer.clear()
        return line

    def __iter__(self) -> Iterator[bytes]:
        while True:
            line = self.readline()
            if line is None:
                return
            yield line

    def remainder(self, chunk_size: Optional[int] = None) -> Iterator[bytes]:
        """Yield every byte not yet returned as a line, buffered bytes first."""
        if self._buffer:
            pending = bytes(self._buffer)
            self._buffer.clear()
            yield pending
        if self._eof:
            return
        size = chunk_size or self._chunk_size
        while True:
            chunk = self._stream.read(size)
            if not chunk:
                self._eof = True
                return
            yield chunk
