"""Tests for the structured logger and the diagnostic console."""

from __future__ import annotations

import json

from shared.console import ClassicConsole
from shared.logger import ClassicLogger


def _records(path) -> list[dict]:
    return [json.loads(line) for line in path.read_text().splitlines()]


def test_json_file_log_carries_context(tmp_path):
    path = tmp_path / "logs" / "classic.jsonl"
    logger = ClassicLogger(
        "caesar",
        log_level="DEBUG",
        log_file=path,
        json_logs=True,
        console_output=False,
    )
    with logger.operation("rotate"):
        logger.debug("Rotating %d strings", 2, numbers=True)
    logger.info("done")

    first, second = _records(path)
    assert first["logger"] == "classic.caesar"
    assert first["message"] == "Rotating 2 strings"
    assert first["operation"] == "rotate"
    assert first["extra"] == {"numbers": True}
    assert "operation" not in second


def test_timed_block_logs_at_debug(tmp_path):
    path = tmp_path / "timed.jsonl"
    logger = ClassicLogger(
        "tokenize", log_level="DEBUG", log_file=path, json_logs=True,
        console_output=False,
    )
    with logger.timed("tokenize"):
        pass

    [record] = _records(path)
    assert record["level"] == "DEBUG"
    assert record["message"].startswith("Completed: tokenize")


def test_level_filters_file_log(tmp_path):
    path = tmp_path / "quiet.log"
    logger = ClassicLogger("null", log_file=path, console_output=False)
    logger.debug("hidden")
    logger.info("hidden too")
    assert path.read_text() == ""


def test_console_prefixes_program_on_stderr(capsys):
    console = ClassicConsole("polybius-square")
    console.warning("character '[' could not be mapped to coordinates, skipping")
    console.error("key must be alphabetic")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.splitlines() == [
        "polybius-square: WARNING: character '[' could not be mapped to "
        "coordinates, skipping",
        "polybius-square: ERROR: key must be alphabetic",
    ]
