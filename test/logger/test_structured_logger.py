"""Tests for the structured logger and the timing decorator."""

import json
import logging
from typing import Any, List, Tuple

import pytest

from calculator_api.logger import Logger, StructuredLogger
from calculator_api.logger import decorators
from calculator_api.logger.decorators import log_execution_time


class RecordingLogger(Logger):
    """Logger that keeps (level, message, kwargs) tuples."""

    def __init__(self):
        self.records: List[Tuple[str, str, dict]] = []

    def _record(self, level: str, message: str, **kwargs: Any) -> None:
        self.records.append((level, message, kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._record("debug", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._record("info", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._record("warning", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._record("error", message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._record("critical", message, **kwargs)


class TestStructuredLogger:
    def test_text_format_appends_fields(self, capsys):
        logger = StructuredLogger(name="calc-test-text")
        logger.info("Server running", port=3000)

        out = capsys.readouterr().out
        assert "[INFO]" in out
        assert "Server running" in out
        assert "port=3000" in out
        assert f"[session:{logger.get_session_id()}]" in out

    def test_json_format(self, capsys):
        logger = StructuredLogger(name="calc-test-json", json_format=True)
        logger.warning("Rejected operands", path="/add")

        data = json.loads(capsys.readouterr().out.strip())
        assert data["level"] == "WARNING"
        assert data["message"] == "Rejected operands"
        assert data["path"] == "/add"
        assert data["session_id"] == logger.get_session_id()

    def test_level_filters(self, capsys):
        logger = StructuredLogger(name="calc-test-level", level=logging.WARNING)
        logger.info("hidden")
        logger.error("shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

    def test_reserved_keys_are_prefixed(self, capsys):
        logger = StructuredLogger(name="calc-test-reserved")
        logger.info("Reserved", name="clash", module="also")

        out = capsys.readouterr().out
        assert "_name=clash" in out
        assert "_module=also" in out

    def test_log_file(self, tmp_path, capsys):
        log_file = tmp_path / "calc.log"
        logger = StructuredLogger(name="calc-test-file", log_file=str(log_file))
        logger.info("to file")

        assert "to file" in log_file.read_text()

    def test_reinitializing_does_not_duplicate_handlers(self):
        StructuredLogger(name="calc-test-dup")
        StructuredLogger(name="calc-test-dup")
        assert len(logging.getLogger("calc-test-dup").handlers) == 1


class TestLogExecutionTime:
    @pytest.fixture
    def recorder(self, monkeypatch):
        recording = RecordingLogger()
        monkeypatch.setattr(decorators, "session_logger", recording)
        return recording

    def test_logs_start_and_completion(self, recorder):
        @log_execution_time
        def double(x):
            return x * 2

        assert double(21) == 42

        levels = [(level, message) for level, message, _ in recorder.records]
        assert levels == [("debug", "Starting double"), ("info", "Completed double")]
        assert recorder.records[0][2]["args"] == ["21"]
        assert recorder.records[1][2]["success"] is True

    def test_logs_and_reraises_failures(self, recorder):
        @log_execution_time
        def explode():
            raise ValueError("nope")

        with pytest.raises(ValueError, match="nope"):
            explode()

        level, message, fields = recorder.records[-1]
        assert (level, message) == ("error", "Failed explode")
        assert fields["error_type"] == "ValueError"
        assert fields["success"] is False

    def test_truncates_long_arguments(self, recorder):
        @log_execution_time
        def echo(value):
            return value

        echo("x" * 1000)
        logged = recorder.records[0][2]["args"][0]
        assert logged.endswith("...(truncated)")
        assert len(logged) < 1000

    def test_preserves_metadata(self):
        @log_execution_time
        def documented():
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."

    def test_engine_compute_is_timed(self, recorder, engine):
        engine.compute("add", 1.0, 2.0)
        assert ("info", "Completed compute") in [(lv, msg) for lv, msg, _ in recorder.records]
