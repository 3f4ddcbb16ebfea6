# copynotice - source code notice writer
# Copyright (C) 2024-2026 copynotice Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

import io
import json
import logging

import pytest

from copynotice.config import Settings, _get_bool
from copynotice.console import AnsiConsole, PlainConsole, Tone, create_console
from copynotice.logging_config import JsonFormatter, get_logger, setup_logging


class TtyStream(io.StringIO):
    def isatty(self):
        return True


def test_setup_logging_creates_logger():
    logger = setup_logging(level="DEBUG")
    assert logger is not None
    assert logger.name == "copynotice"
    assert logger.level == 10


def test_setup_logging_with_file(tmp_path):
    log_file = tmp_path / "test.log"
    logger = setup_logging(level="INFO", log_file=str(log_file))
    logger.info("Test message")

    assert log_file.exists()
    content = log_file.read_text()
    assert "Test message" in content


def test_setup_logging_replaces_handlers():
    setup_logging(level="INFO")
    logger = setup_logging(level="INFO")
    assert len(logger.handlers) == 1


def test_module_loggers_reach_file(tmp_path):
    log_file = tmp_path / "run.log"
    setup_logging(level="DEBUG", log_file=str(log_file), json_format=True)
    get_logger("copynotice.resolver").warning("duplicate directory")

    lines = log_file.read_text().splitlines()
    data = json.loads(lines[-1])
    assert data["logger"] == "copynotice.resolver"
    assert data["message"] == "duplicate directory"


def test_json_formatter():
    formatter = JsonFormatter()
    record = logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="test.py",
        lineno=1,
        msg="Test message",
        args=(),
        exc_info=None,
    )
    output = formatter.format(record)
    data = json.loads(output)
    assert data["level"] == "INFO"
    assert data["message"] == "Test message"


def test_get_logger():
    logger = get_logger("test.module")
    assert logger.name == "test.module"


def test_get_bool():
    assert _get_bool(None, True) is True
    assert _get_bool(" Yes ", False) is True
    assert _get_bool("off", True) is False


def test_config_defaults(monkeypatch):
    for name in [
        "COPYNOTICE_LOG_LEVEL", "COPYNOTICE_LOG_FILE", "COPYNOTICE_COLOR", "NO_COLOR",
        "COPYNOTICE_SCAN_BUFFER_SIZE", "COPYNOTICE_COPY_CHUNK_SIZE", "COPYNOTICE_NOTICE_ENCODING",
    ]:
        monkeypatch.delenv(name, raising=False)
    settings = Settings()
    assert settings.log_level == "WARNING"
    assert settings.log_file is None
    assert settings.color == "auto"
    assert settings.scan_buffer_size == 64
    assert settings.copy_chunk_size == 65536
    assert settings.notice_encoding == "utf-8"


def test_config_reads_env_at_instantiation(monkeypatch):
    monkeypatch.setenv("COPYNOTICE_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("COPYNOTICE_LOG_JSON", "true")
    monkeypatch.setenv("COPYNOTICE_SCAN_BUFFER_SIZE", "16")
    settings = Settings()
    assert settings.log_level == "DEBUG"
    assert settings.log_json_format is True
    assert settings.scan_buffer_size == 16


def test_config_color(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv("COPYNOTICE_COLOR", "ALWAYS")
    assert Settings().color == "always"
    monkeypatch.setenv("COPYNOTICE_COLOR", "rainbow")
    assert Settings().color == "auto"
    monkeypatch.setenv("NO_COLOR", "1")
    assert Settings().color == "never"


def test_create_console_selects_implementation():
    assert isinstance(create_console("always", io.StringIO()), AnsiConsole)
    assert isinstance(create_console("auto", io.StringIO()), PlainConsole)
    assert isinstance(create_console("auto", TtyStream()), AnsiConsole)
    assert isinstance(create_console("never", TtyStream()), PlainConsole)


def test_plain_console_ignores_tone():
    stream = io.StringIO()
    PlainConsole(stream).write("hello", Tone.ERROR)
    assert stream.getvalue() == "hello"


def test_ansi_console_styles_and_resets():
    stream = io.StringIO()
    console = AnsiConsole(stream)
    console.write("bad", Tone.ERROR)
    assert stream.getvalue() == "\x1b[1;31mbad\x1b[0m"
    console.close()
    assert stream.getvalue().endswith("\x1b[0m")


def test_console_read_strips_newline():
    stream = io.StringIO()
    console = PlainConsole(stream, reader=lambda: "yes\r\n")
    assert console.read() == "yes"
    assert stream.getvalue() == "> "


def test_config_rejects_non_positive_sizes():
    with pytest.raises(ValueError, match="scan_buffer_size"):
        Settings(scan_buffer_size=0)
    with pytest.raises(ValueError, match="copy_chunk_size"):
        Settings(copy_chunk_size=-1)


def test_config_rejects_non_integer_env(monkeypatch):
    monkeypatch.setenv("COPYNOTICE_SCAN_BUFFER_SIZE", "big")
    with pytest.raises(ValueError, match="COPYNOTICE_SCAN_BUFFER_SIZE must be an integer"):
        Settings()
