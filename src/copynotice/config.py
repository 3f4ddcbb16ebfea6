# copynotice - source code notice writer
# Copyright (C) 2024-2026 copynotice Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

import os
from dataclasses import dataclass, field
from typing import Optional


def _get_bool(value: str, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}

def _get_color_mode(value: str) -> str:
    if os.getenv("NO_COLOR"):
        return "never"
    mode = (value or "auto").strip().lower()
    if mode not in {"auto", "always", "never"}:
        return "auto"
    return mode

def _get_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass
class Settings:
    # NOTE: use default_factory so env vars are read when Settings() is instantiated,
    # not at import time (important for tests and predictable runtime behavior).
    log_level: str = field(default_factory=lambda: os.getenv("COPYNOTICE_LOG_LEVEL", "WARNING"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("COPYNOTICE_LOG_FILE") or None)
    log_max_bytes: int = field(default_factory=lambda: _get_int("COPYNOTICE_LOG_MAX_BYTES", "10485760"))
    log_backup_count: int = field(default_factory=lambda: _get_int("COPYNOTICE_LOG_BACKUP_COUNT", "5"))
    log_json_format: bool = field(default_factory=lambda: _get_bool(os.getenv("COPYNOTICE_LOG_JSON"), False))

    # "auto" styles the console only when stdout is a terminal.
    color: str = field(default_factory=lambda: _get_color_mode(os.getenv("COPYNOTICE_COLOR")))

    # I/O sizing for the rewriter.
    # - scan_buffer_size is the size of each read while looking for line ends in the leading comment block.
    # - copy_chunk_size is the size of each read/write when copying the body of a file.
    scan_buffer_size: int = field(default_factory=lambda: _get_int("COPYNOTICE_SCAN_BUFFER_SIZE", "64"))
    copy_chunk_size: int = field(default_factory=lambda: _get_int("COPYNOTICE_COPY_CHUNK_SIZE", "65536"))

    # Encoding used for --note text and --syntax; file bodies are never transcoded.
    notice_encoding: str = field(default_factory=lambda: os.getenv("COPYNOTICE_NOTICE_ENCODING", "utf-8"))

    def __post_init__(self) -> None:
        if self.scan_buffer_size <= 0:
            raise ValueError("scan_buffer_size must be >= 1")
        if self.copy_chunk_size <= 0:
            raise ValueError("copy_chunk_size must be >= 1")
        if self.log_max_bytes < 0:
            raise ValueError("log_max_bytes must be >= 0")
        if self.log_backup_count < 0:
            raise ValueError("log_backup_count must be >= 0")
