# copynotice - source code notice writer
# Copyright (C) 2024-2026 copynotice Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import os
from enum import Enum
from typing import Callable, Optional

from .console import Console, Tone, ask_yes_no
from .logging_config import get_logger

logger = get_logger(__name__)


class OverwriteDecision(Enum):
    NOT_YET_DECIDED = "not-yet-decided"
    ALWAYS_OVERWRITE = "always-overwrite"


class OverwritePolicy:
    """
    Run-scoped answer to "may an existing destination file be replaced?".

    A "yes" latches ALWAYS_OVERWRITE for the rest of the run. A "no" only
    skips the current file; the next conflict asks again.
    """

    def __init__(
        self,
        console: Console,
        ask: Optional[Callable[[Console], bool]] = None,
        exists: Callable[[str], bool] = os.path.exists,
    ) -> None:
        self._console = console
        self._ask = ask or ask_yes_no
        self._exists = exists
        self.decision = OverwriteDecision.NOT_YET_DECIDED

    def should_write(self, destination_path: str) -> bool:
        if self.decision is OverwriteDecision.ALWAYS_OVERWRITE:
            return True
        if not self._exists(destination_path):
            return True

        self._console.write("File ", Tone.QUESTION).write(f'"{destination_path}"', Tone.HIGHLIGHT)
        self._console.write(" already exists.\n", Tone.QUESTION)
        self._console.write("Do you want to overwrite this file and future files? (y/n)\n")
        if self._ask(self._console):
            logger.info(f"Overwrite approved at {destination_path}; not asking again this run")
            self.decision = OverwriteDecision.ALWAYS_OVERWRITE
            return True

        logger.info(f"Skipping existing file {destination_path}")
        return False
