# copynotice - source code notice writer
# Copyright (C) 2024-2026 copynotice Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import os
from typing import BinaryIO, List, Optional

from .console import Console, Tone
from .linereader import CRLF, LineReader
from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_SCAN_BUFFER_SIZE = 64
DEFAULT_COPY_CHUNK_SIZE = 64 * 1024


def split_notice(notice: bytes) -> List[bytes]:
    # The fragment after the last CRLF is always a line, even when empty.
    return notice.split(CRLF)


def write_notice(destination: BinaryIO, notice: bytes, comment_prefix: bytes) -> None:
    for line in split_notice(notice):
        destination.write(comment_prefix)
        destination.write(line)
        destination.write(CRLF)


def _first_code_line(reader: LineReader, comment_prefix: bytes, replace: bool) -> Optional[bytes]:
    line = reader.readline()
    if line is None:
        return None
    if replace and line.startswith(comment_prefix):
        while True:
            following = reader.readline()
            if following is None:
                # Every remaining line was a comment; the last one is kept.
                break
            line = following
            if not line.startswith(comment_prefix):
                break
    return line


def rewrite_stream(
    source: BinaryIO,
    destination: BinaryIO,
    notice: bytes,
    comment_prefix: bytes,
    replace: bool,
    scan_buffer_size: int = DEFAULT_SCAN_BUFFER_SIZE,
    copy_chunk_size: int = DEFAULT_COPY_CHUNK_SIZE,
) -> bool:
    """Write the notice, the first code line, then the rest of ``source``.

    Returns False when the source is empty, in which case nothing is written.
    """
    reader = LineReader(source, chunk_size=scan_buffer_size)
    first_line = _first_code_line(reader, comment_prefix, replace)
    if first_line is None:
        return False

    write_notice(destination, notice, comment_prefix)
    destination.write(first_line)
    destination.write(CRLF)

    for chunk in reader.remainder(copy_chunk_size):
        destination.write(chunk)
    return True


def rewrite(
    source_file: str,
    destination_file: str,
    notice: bytes,
    comment_prefix: bytes,
    replace: bool,
    console: Optional[Console] = None,
    verbose: bool = False,
    scan_buffer_size: int = DEFAULT_SCAN_BUFFER_SIZE,
    copy_chunk_size: int = DEFAULT_COPY_CHUNK_SIZE,
) -> bool:
    """
    Produce ``destination_file`` from ``source_file`` with the notice on top.

    The destination is created (or truncated) before the source is read, so an
    empty source still yields an empty destination file. Any OSError is left
    to propagate; a half-written destination is not cleaned up.
    """
    if verbose and console is not None:
        console.write(" Opening  ", Tone.DETAIL).write(f'"{source_file}"', Tone.HIGHLIGHT).write("... ", Tone.DETAIL)
    with open(source_file, "rb") as source:
        if verbose and console is not None:
            console.write("Done.\n", Tone.DETAIL)
            console.write(" Creating ", Tone.DETAIL).write(f'"{destination_file}"', Tone.HIGHLIGHT).write("... ", Tone.DETAIL)
        with open(destination_file, "wb") as destination:
            if verbose and console is not None:
                console.write("Done.\n", Tone.DETAIL)
            written = rewrite_stream(
                source,
                destination,
                notice,
                comment_prefix,
                replace,
                scan_buffer_size=scan_buffer_size,
                copy_chunk_size=copy_chunk_size,
            )

    if not written:
        logger.info(f"Source file {source_file} is empty")
        if console is not None:
            console.write(f"Source file {os.path.basename(source_file)} is empty.\n", Tone.ERROR)
    else:
        logger.debug(f"Wrote {destination_file}")
    return True
