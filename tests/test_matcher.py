# copynotice - source code notice writer
# Copyright (C) 2024-2026 copynotice Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

import io
import os

import pytest

from copynotice.console import PlainConsole
from copynotice.errors import EnumerationError
from copynotice.matcher import enumerate_files, target_pattern
from copynotice.models import DirectoryMapping


def test_target_pattern():
    assert target_pattern(DirectoryMapping("src", "out"), "h") == "src" + os.sep + "*.h"
    assert target_pattern(DirectoryMapping("", "out"), "h") == "*.h"


def test_enumerate_only_visible_regular_files(tmp_path):
    for name in ["a.h", "b.h", "c.hpp", "d.c", ".hidden.h", "noext"]:
        (tmp_path / name).write_text("x")
    (tmp_path / "folder.h").mkdir()

    names = enumerate_files(DirectoryMapping(str(tmp_path), "out"), "h")

    assert sorted(names) == ["a.h", "b.h"]


def test_enumerate_no_matches_is_reported(tmp_path):
    (tmp_path / "a.c").write_text("x")
    stream = io.StringIO()
    names = enumerate_files(DirectoryMapping(str(tmp_path), "out"), "h", PlainConsole(stream))
    assert names == []
    assert "Could not find a target file" in stream.getvalue()


def test_enumerate_current_directory(tmp_path, monkeypatch):
    (tmp_path / "main.c").write_text("x")
    monkeypatch.chdir(tmp_path)
    assert enumerate_files(DirectoryMapping("", "out"), "c") == ["main.c"]


def test_enumerate_missing_directory_is_fatal(tmp_path):
    with pytest.raises(EnumerationError):
        enumerate_files(DirectoryMapping(str(tmp_path / "missing"), "out"), "c")


def test_enumerate_verbose_reports_target(tmp_path):
    (tmp_path / "a.c").write_text("x")
    stream = io.StringIO()
    enumerate_files(DirectoryMapping(str(tmp_path), "out"), "c", PlainConsole(stream), verbose=True)
    assert "Executing for target" in stream.getvalue()


def test_extension_brackets_are_literal(tmp_path):
    (tmp_path / "a.c").write_text("x")
    (tmp_path / "b.[c]").write_text("x")
    assert enumerate_files(DirectoryMapping(str(tmp_path), "out"), "[c]") == ["b.[c]"]
