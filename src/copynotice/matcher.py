# copynotice - source code notice writer
# Copyright (C) 2024-2026 copynotice Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import fnmatch
import glob
import os
from typing import List, Optional

from .console import Console, Tone
from .errors import EnumerationError
from .logging_config import get_logger
from .models import DirectoryMapping
from .resolver import is_hidden, join_path, listing_path

logger = get_logger(__name__)


def target_pattern(mapping: DirectoryMapping, extension: str) -> str:
    return join_path(mapping.source_path, f"*.{extension}")


def enumerate_files(
    mapping: DirectoryMapping,
    extension: str,
    console: Optional[Console] = None,
    verbose: bool = False,
) -> List[str]:
    """Names of the visible, non-directory files in ``mapping`` matching ``*.<extension>``."""
    pattern = target_pattern(mapping, extension)
    # The extension is literal text; brackets must not become a character class.
    name_pattern = "*." + glob.escape(extension)
    if verbose and console is not None:
        console.write("\nExecuting for target: ", Tone.SUCCESS).write(f'"{pattern}"', Tone.HIGHLIGHT).write("\n")

    names = []
    try:
        with os.scandir(listing_path(mapping.source_path)) as entries:
            for entry in entries:
                if not fnmatch.fnmatch(entry.name, name_pattern):
                    continue
                if is_hidden(entry) or entry.is_dir():
                    continue
                names.append(entry.name)
    except OSError as exc:
        raise EnumerationError(f"Could not enumerate {pattern!r}: {exc}") from exc

    if not names:
        logger.info(f"No files found for target {pattern}")
        if console is not None:
            console.write("Could not find a target file for target: ", Tone.SUCCESS)
            console.write(f'"{pattern}"', Tone.HIGHLIGHT).write("\n")
    return names
