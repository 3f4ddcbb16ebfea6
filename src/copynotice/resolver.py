# copynotice - source code notice writer
# Copyright (C) 2024-2026 copynotice Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import itertools
import os
import stat
from typing import Iterable, List, Optional

from .console import Console, Tone
from .errors import DirectoryListingError, OutputDirectoryError
from .logging_config import get_logger
from .models import DirectoryMapping

logger = get_logger(__name__)


def join_path(base: str, name: str) -> str:
    # An empty base means "relative to the current directory".
    if not base:
        return name
    return base + os.sep + name


def listing_path(path: str) -> str:
    return path or os.curdir


def is_hidden(entry: os.DirEntry) -> bool:
    if entry.name.startswith("."):
        return True
    if os.name == "nt":
        attributes = entry.stat(follow_symlinks=False).st_file_attributes
        return bool(attributes & stat.FILE_ATTRIBUTE_HIDDEN)
    return False


def _report_target(console: Optional[Console], mapping: DirectoryMapping) -> None:
    logger.debug(f"Target directory {mapping.source_path!r} -> {mapping.destination_path!r}")
    if console is None:
        return
    console.write("Target directory: ", Tone.DETAIL).write(f'"{mapping.source_path}"', Tone.HIGHLIGHT)
    console.write(". Output directory: ", Tone.DETAIL).write(f'"{mapping.destination_path}"', Tone.HIGHLIGHT)
    console.write("\n")


def _subdirectories(mapping: DirectoryMapping) -> List[DirectoryMapping]:
    path = listing_path(mapping.source_path)
    children = []
    try:
        with os.scandir(path) as entries:
            for entry in entries:
                if entry.name in (os.curdir, os.pardir):
                    continue
                if not entry.is_dir(follow_symlinks=False):
                    continue
                if is_hidden(entry):
                    continue
                children.append(
                    DirectoryMapping(
                        source_path=join_path(mapping.source_path, entry.name),
                        destination_path=mapping.destination_path + os.sep + entry.name,
                    )
                )
    except OSError as exc:
        raise DirectoryListingError(f"Could not list directory {path!r}: {exc}") from exc
    return children


def discover(mapping: DirectoryMapping, recurse: bool, console: Optional[Console] = None) -> List[DirectoryMapping]:
    """
    Return every subdirectory mapping below ``mapping`` in depth-first pre-order.

    The root itself is reported but not returned. Uses an explicit stack, so
    deep trees do not grow the call stack.
    """
    _report_target(console, mapping)
    if not recurse:
        return []

    discovered: List[DirectoryMapping] = []
    pending = list(reversed(_subdirectories(mapping)))
    while pending:
        current = pending.pop()
        discovered.append(current)
        _report_target(console, current)
        pending.extend(reversed(_subdirectories(current)))
    return discovered


def merge_mappings(
    configured: Iterable[DirectoryMapping],
    discovered: Iterable[DirectoryMapping],
    console: Optional[Console] = None,
) -> List[DirectoryMapping]:
    merged: List[DirectoryMapping] = []
    known = set()
    # Configured roots come first, so a root always wins over a discovered copy of itself.
    for mapping in itertools.chain(configured, discovered):
        if mapping.source_path in known:
            logger.warning(f"Directory {mapping.source_path!r} is already targeted; skipping duplicate")
            if console is not None:
                console.write("Directory ", Tone.DETAIL).write(f'"{mapping.source_path}"', Tone.WARNING)
                console.write(" is already targeted.\n", Tone.DETAIL)
            continue
        known.add(mapping.source_path)
        merged.append(mapping)
    return merged


def ensure_destination_directories(mappings: Iterable[DirectoryMapping], console: Optional[Console] = None) -> List[str]:
    created = []
    for mapping in mappings:
        try:
            os.mkdir(mapping.destination_path)
        except FileExistsError:
            continue
        except OSError as exc:
            raise OutputDirectoryError(
                f"Could not create output directory {mapping.destination_path!r}. "
                f"Ensure intermediate directories exist: {exc}"
            ) from exc
        created.append(mapping.destination_path)
        logger.info(f"Created output directory {mapping.destination_path}")
        if console is not None:
            console.write("Created output directory ", Tone.DETAIL).write(f'"{mapping.destination_path}"', Tone.HIGHLIGHT)
            console.write("\n")
    return created
