# copynotice - source code notice writer
# Copyright (C) 2024-2026 copynotice Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import argparse
from typing import List, Optional, Sequence

from pydantic import ValidationError

from .config import Settings
from .models import DirectoryArgument, RunOptions

EXAMPLE = 'copynotice --dir "program/code" "temp" --note "Written by John Doe." --ext h --ext c --verbose'


class ConfigurationError(ValueError):
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        raise ConfigurationError(message)


class _StoreOnce(argparse.Action):
    def __call__(self, parser, namespace, values, option_string=None):
        if getattr(namespace, self.dest) is not None:
            parser.error(f"argument {option_string}: already supplied")
        setattr(namespace, self.dest, values)


class _FlagOnce(argparse.Action):
    def __init__(self, option_strings, dest, default=False, required=False, help=None):
        super().__init__(option_strings, dest, nargs=0, default=default, required=required, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        if getattr(namespace, self.dest):
            parser.error(f"argument {option_string}: already set")
        setattr(namespace, self.dest, True)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="copynotice",
        description="Copies source files into an output tree with a notice comment written at the top.",
        epilog=f"Example: {EXAMPLE}",
    )
    parser.add_argument(
        "--dir", nargs=2, action="append", default=[], metavar=("SRC", "DST"),
        help="A directory to search and a directory to place output files. May be repeated.",
    )
    parser.add_argument(
        "--ext", action="append", default=[], metavar="NAME",
        help="A target file extension, without the dot. May be repeated.",
    )
    notice = parser.add_mutually_exclusive_group()
    notice.add_argument("--note", action=_StoreOnce, metavar="STR", help="The notice to write into the output files.")
    notice.add_argument(
        "--notef", action=_StoreOnce, metavar="NAME",
        help="A text file containing the notice to write into the output files.",
    )
    parser.add_argument("--recurse", action=_FlagOnce, help="Search through subdirectories.")
    parser.add_argument("--verbose", action=_FlagOnce, help="Log extended information.")
    parser.add_argument(
        "--syntax", action=_StoreOnce, metavar="PREFIX",
        help='The prefix that marks a comment line. Defaults to "// ".',
    )
    parser.add_argument(
        "--replace", action=_FlagOnce,
        help="Replace a comment already present at the beginning of a source file.",
    )
    return parser


def _read_notice_file(path: str) -> bytes:
    try:
        with open(path, "rb") as handle:
            return handle.read()
    except OSError as exc:
        raise ConfigurationError(f"argument --notef: could not read {path!r}: {exc.strerror or exc}") from exc


def _encode(value: str, encoding: str, option: str) -> bytes:
    try:
        return value.encode(encoding)
    except (UnicodeEncodeError, LookupError) as exc:
        raise ConfigurationError(f"argument {option}: cannot encode with {encoding!r}: {exc}") from exc


def _format_validation_error(exc: ValidationError) -> str:
    messages = []
    for error in exc.errors():
        message = error["msg"]
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        location = ".".join(str(part) for part in error["loc"] if not isinstance(part, int))
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages)


def parse_options(argv: Sequence[str], settings: Optional[Settings] = None) -> RunOptions:
    settings = settings or Settings()
    args = build_parser().parse_args(list(argv))

    if args.notef is not None:
        notice = _read_notice_file(args.notef)
    elif args.note is not None:
        notice = _encode(args.note, settings.notice_encoding, "--note")
    else:
        notice = b""

    fields = dict(
        extensions=args.ext,
        notice=notice,
        recurse=args.recurse,
        verbose=args.verbose,
        replace=args.replace,
    )
    if args.syntax is not None:
        fields["comment_prefix"] = _encode(args.syntax, settings.notice_encoding, "--syntax")

    try:
        directories: List[DirectoryArgument] = [DirectoryArgument(src=src, dst=dst) for src, dst in args.dir]
        return RunOptions(directories=directories, **fields)
    except ValidationError as exc:
        raise ConfigurationError(_format_validation_error(exc)) from exc
