import json
import logging
from pathlib import Path

import pytest

from lengthparse.config import Settings
from lengthparse.parser import DistanceParseError, parse_distance
from lengthparse.utils.logging import (
    configure_json_logger,
    configure_logging,
    flush_handlers,
    generate_trace_id,
    log_event,
)


@pytest.fixture
def restore_package_logger():
    yield
    logger = configure_json_logger(None, level=logging.NOTSET)
    logger.propagate = True


def _read_jsonl(path: Path) -> list[dict]:
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines() if line.strip()]


def test_structured_logger_emits_jsonl(tmp_path: Path, restore_package_logger) -> None:
    log_file = tmp_path / "events.jsonl"
    logger = configure_json_logger(log_file)

    trace_id = generate_trace_id()
    assert log_event(logger, "test.start", trace_id=trace_id, input="5ft11in") == trace_id
    log_event(logger, "test.completed", trace_id=trace_id, terms=2)
    flush_handlers(logger)

    lines = _read_jsonl(log_file)

    assert len(lines) == 2
    assert all(line["trace_id"] == trace_id for line in lines)
    assert {line["event"] for line in lines} == {"test.start", "test.completed"}
    assert lines[0]["input"] == "5ft11in"
    assert lines[1]["terms"] == 2
    assert lines[0]["logger"] == "lengthparse"


def test_configure_logging_records_parse_failures(tmp_path: Path, restore_package_logger) -> None:
    log_file = tmp_path / "nested" / "lengthparse.jsonl"
    logger = configure_logging(Settings(log_path=log_file, log_level="DEBUG"))

    with pytest.raises(DistanceParseError):
        parse_distance("12")
    flush_handlers(logger)

    configured, line = _read_jsonl(log_file)
    assert configured["event"] == "logging.configured"
    assert configured["settings"]["log_level"] == "DEBUG"
    assert configured["settings"]["log_path"] == str(log_file)
    assert configured["settings"]["unit_system"] == "metric"

    assert line["event"] == "distance.parse_failed"
    assert line["level"] == "debug"
    assert line["logger"] == "lengthparse.parser"
    assert line["kind"] == "missing_unit"
    assert line["text"] == "12"
    assert "trace_id" not in line


def test_null_handler_without_path(restore_package_logger) -> None:
    logger = configure_logging(Settings())
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.NullHandler)
    assert logger.level == logging.WARNING


def test_events_without_trace_id_omit_it(tmp_path: Path, restore_package_logger) -> None:
    log_file = tmp_path / "events.jsonl"
    logger = configure_json_logger(log_file)

    assert log_event(logger, "test.single", value=1) is None
    flush_handlers(logger)

    (line,) = _read_jsonl(log_file)
    assert line["event"] == "test.single"
    assert "trace_id" not in line
