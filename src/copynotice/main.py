# copynotice - source code notice writer
# Copyright (C) 2024-2026 copynotice Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

import sys
from typing import List, Optional, Sequence

from . import __version__
from .cli import ConfigurationError, build_parser, parse_options
from .config import Settings
from .console import Console, Tone, create_console
from .errors import CopyNoticeError
from .logging_config import get_logger, setup_logging
from .matcher import enumerate_files, target_pattern
from .models import DirectoryMapping, RunCounters, RunOptions
from .policy import OverwritePolicy
from .resolver import discover, ensure_destination_directories, join_path, merge_mappings
from .rewriter import rewrite

logger = get_logger(__name__)


def resolve_directories(options: RunOptions, console: Console) -> List[DirectoryMapping]:
    configured = options.mappings()
    discovered: List[DirectoryMapping] = []
    for mapping in configured:
        discovered.extend(discover(mapping, options.recurse, console))
    mappings = merge_mappings(configured, discovered, console)
    ensure_destination_directories(mappings, console)
    return mappings


def process_file(
    mapping: DirectoryMapping,
    name: str,
    options: RunOptions,
    policy: OverwritePolicy,
    console: Console,
    settings: Settings,
) -> bool:
    source_file = join_path(mapping.source_path, name)
    destination_file = join_path(mapping.destination_path, name)
    if not policy.should_write(destination_file):
        return False
    return rewrite(
        source_file,
        destination_file,
        options.notice,
        options.comment_prefix,
        options.replace,
        console=console,
        verbose=options.verbose,
        scan_buffer_size=settings.scan_buffer_size,
        copy_chunk_size=settings.copy_chunk_size,
    )


def execute(
    options: RunOptions,
    mappings: Sequence[DirectoryMapping],
    console: Console,
    policy: OverwritePolicy,
    settings: Settings,
) -> RunCounters:
    counters = RunCounters()
    for mapping in mappings:
        for extension in options.extensions:
            pattern = target_pattern(mapping, extension)
            created = 0
            for name in enumerate_files(mapping, extension, console, verbose=options.verbose):
                if process_file(mapping, name, options, policy, console, settings):
                    created += 1
            counters.record(pattern, created)
            console.write(f'Finished target "{pattern}": Created {created} file(s)\n', Tone.SUCCESS)
    console.write(f"Done. Created {counters.files_created} file(s)\n", Tone.SUCCESS)
    logger.info(f"Run complete: {counters.files_created} file(s) created")
    return counters


def run(
    options: RunOptions,
    console: Console,
    settings: Optional[Settings] = None,
    policy: Optional[OverwritePolicy] = None,
) -> RunCounters:
    settings = settings or Settings()
    policy = policy or OverwritePolicy(console)
    mappings = resolve_directories(options, console)
    return execute(options, mappings, console, policy, settings)


def echo_command_line(console: Console, argv: Sequence[str]) -> None:
    for index, arg in enumerate(argv):
        console.write(f'Argument {index}: "{arg}"\n', Tone.DETAIL)


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    prog = sys.argv[0] if sys.argv and sys.argv[0] else "copynotice"
    argv = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = Settings()
        setup_logging(
            level=settings.log_level,
            log_file=settings.log_file,
            max_bytes=settings.log_max_bytes,
            backup_count=settings.log_backup_count,
            json_format=settings.log_json_format,
        )
    except (ValueError, OSError) as exc:
        console = console or create_console()
        console.write(f"Error: invalid environment setting: {exc}\n", Tone.ERROR)
        console.close()
        return 1
    console = console or create_console(settings.color)
    console.write(f"copynotice (Source Code Notice Writer) v{__version__}\n", Tone.TITLE)

    try:
        if not argv:
            console.write("No arguments specified.\n\n", Tone.ERROR)
            console.write(build_parser().format_help())
            return 1

        try:
            options = parse_options(argv, settings)
        except ConfigurationError as exc:
            console.write(f"Error: {exc}\n", Tone.ERROR)
            return 1

        if options.verbose:
            echo_command_line(console, [prog, *argv])

        try:
            run(options, console, settings=settings)
        except (CopyNoticeError, OSError) as exc:
            logger.debug("Run aborted", exc_info=True)
            console.write(f"{exc}\n", Tone.ERROR)
            return 1
        return 0
    finally:
        console.close()
