"""Unit tests for logging utilities."""

import logging
from unittest.mock import MagicMock

import pytest

from pathbool.domain import BooleanOperation, Diagnostics
from pathbool.utils import OperationLogger, OperationStats, configure_logging


@pytest.fixture
def operation_logger() -> OperationLogger:
    return OperationLogger(MagicMock())


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_writes_log_file(self, tmp_path):
        log_file = tmp_path / "run.log"
        logger = configure_logging(log_file=log_file, quiet=True)
        logger.info("hello", answer=42)

        text = log_file.read_text(encoding="utf-8")
        assert "Logging initialized" in text
        assert '"answer": 42' in text

    def test_reconfigure_replaces_handlers(self, tmp_path):
        configure_logging(log_file=tmp_path / "first.log")
        count = len(logging.getLogger().handlers)
        configure_logging(log_file=tmp_path / "second.log")

        assert len(logging.getLogger().handlers) == count

    def test_no_file_without_log_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        configure_logging()
        assert list(tmp_path.iterdir()) == []

    def test_quiet_console_level(self):
        configure_logging(quiet=True)
        stream_handlers = [
            h for h in logging.getLogger().handlers if type(h) is logging.StreamHandler
        ]
        assert any(h.level == logging.ERROR for h in stream_handlers)


class TestOperationLogger:
    """Tests for OperationLogger statistics."""

    def test_complete_updates_stats(self, operation_logger):
        diagnostics = Diagnostics(operation=BooleanOperation.UNION, elapsed_ms=2.5)
        operation_logger.log_operation_complete(diagnostics)
        operation_logger.log_operation_complete(diagnostics)

        stats = operation_logger.stats
        assert stats.operation_count == 2
        assert stats.degraded_count == 0
        assert stats.total_ms == pytest.approx(5.0)

    def test_degraded_warns(self, operation_logger):
        diagnostics = Diagnostics(operation=BooleanOperation.XOR, open_contour_count=1)
        operation_logger.log_operation_complete(diagnostics)

        assert operation_logger.stats.degraded_count == 1
        operation_logger._logger.warning.assert_called_once()

    def test_intersections_counted(self, operation_logger):
        operation_logger.log_intersections("union", candidates=7, coincident_pairs=0, nodes_visited=40)
        assert operation_logger.stats.candidate_count == 7

    def test_errors_recorded(self, operation_logger):
        operation_logger.log_operation_error("intersect", ValueError("bad input"))

        stats = operation_logger.stats
        assert stats.error_count == 1
        assert stats.errors == [("intersect", "bad input")]

    def test_empty_stats(self):
        assert OperationStats().total_ms == 0
