import re

import pytest

from okinawa import logger
from okinawa.logger import LogLevel


@pytest.mark.parametrize(
    "func, label, text, color",
    [
        (logger.info, "[INFO]", "Test info message", "\x1b[32m"),
        (logger.warning, "[WARNING]", "Test warning message", "\x1b[33m"),
        (logger.error, "[ERROR]", "Test error message", "\x1b[31m"),
    ],
)
def test_message_format(capsys, func, label, text, color):
    func(text)
    output = capsys.readouterr().err
    assert label in output
    assert text in output
    assert color in output


def test_timestamp_format(capsys):
    logger.info("Test message")
    output = capsys.readouterr().err
    match = re.fullmatch(
        r"\x1b\[32m(\d\d):(\d\d):(\d\d) \[INFO\]: Test message\x1b\[0m\n", output
    )
    assert match, output
    hours, minutes, seconds = (int(part) for part in match.groups())
    assert 0 <= hours < 24
    assert 0 <= minutes < 60
    assert 0 <= seconds < 61


def test_color_reset(capsys):
    logger.info("Test message")
    output = capsys.readouterr().err
    assert output.endswith("\x1b[0m\n")


def test_unknown_level(capsys):
    logger.log(999, "Test message")
    output = capsys.readouterr().err
    assert "[UNKNOWN]" in output
    assert "Test message" in output


def test_log_with_explicit_level(capsys):
    logger.log(LogLevel.WARNING, "careful")
    output = capsys.readouterr().err
    assert "[WARNING]: careful" in output