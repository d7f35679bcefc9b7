"""Unit tests for logging functionality."""

import logging

import pytest

from ddnsync._logging import (
    Timer,
    get_logger,
    get_record_extra,
    reset_record,
    set_record,
)


class TestGetLogger:
    """Tests for the get_logger function."""

    def test_returns_logger_with_ddnsync_namespace(self) -> None:
        """Verify logger is under ddnsync namespace."""
        logger = get_logger("ddnsync.providers.dondominio")
        assert logger.name == "ddnsync.providers.dondominio"

    def test_logger_hierarchy(self) -> None:
        """Verify logger hierarchy is correct."""
        parent = logging.getLogger("ddnsync")
        child = get_logger("ddnsync.transport")
        assert child.parent is parent

    @pytest.mark.parametrize("name", ["__main__", "ddnsync_updater", "tools.sync"])
    def test_foreign_name_nested(self, name: str) -> None:
        """Verify names outside the namespace are nested under it."""
        assert get_logger(name).name == f"ddnsync.{name}"

    def test_package_logger(self) -> None:
        assert get_logger("ddnsync") is logging.getLogger("ddnsync")


class TestTimer:
    """Tests for the Timer context manager."""

    def test_measures_elapsed_time(self) -> None:
        """Verify Timer measures elapsed time in milliseconds."""
        import time

        with Timer() as t:
            time.sleep(0.01)

        assert t.elapsed_ms >= 9
        assert t.elapsed_ms < 1000

    def test_elapsed_starts_at_zero(self) -> None:
        """Verify elapsed_ms is 0 before the block is entered."""
        timer = Timer()
        assert timer.elapsed_ms == 0

    def test_elapsed_frozen_after_exit(self) -> None:
        import time

        with Timer() as t:
            pass
        first = t.elapsed_ms
        time.sleep(0.005)

        assert t.elapsed_ms == first

    def test_elapsed_running_inside_block(self) -> None:
        import time

        with Timer() as t:
            time.sleep(0.005)
            assert t.elapsed_ms >= 4

    def test_elapsed_recorded_on_error(self) -> None:
        import time

        timer = Timer()
        with pytest.raises(RuntimeError):
            with timer:
                time.sleep(0.002)
                raise RuntimeError("boom")

        first = timer.elapsed_ms
        assert first > 0
        assert timer.elapsed_ms == first


class TestNullHandler:
    """Tests for NullHandler setup."""

    def test_root_logger_has_null_handler(self) -> None:
        """Verify NullHandler is attached to root logger."""
        import ddnsync._logging  # noqa: F401

        root = logging.getLogger("ddnsync")
        handler_types = [type(h).__name__ for h in root.handlers]
        assert "NullHandler" in handler_types

    def test_library_silent_by_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Verify library is silent without consumer configuration."""
        logger = get_logger("ddnsync.test")
        logger.info("This should not appear")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""


class TestRecordContext:
    """Tests for record context variable functions."""

    def test_get_record_extra_returns_empty_when_no_context(self) -> None:
        """Verify get_record_extra returns empty dict when no context is set."""
        assert get_record_extra() == {}

    def test_set_record(self) -> None:
        """Verify provider and record are returned."""
        token = set_record("dondominio", "example.com")
        try:
            assert get_record_extra() == {"provider": "dondominio", "record": "example.com"}
        finally:
            reset_record(token)

    def test_reset_record_restores_previous_context(self) -> None:
        """Verify reset_record properly restores previous context."""
        outer_token = set_record("aliyun", "outer.com")
        try:
            inner_token = set_record("aliyun", "inner.com")
            assert get_record_extra()["record"] == "inner.com"

            reset_record(inner_token)
            assert get_record_extra()["record"] == "outer.com"
        finally:
            reset_record(outer_token)

        assert get_record_extra() == {}

    def test_extra_is_a_copy(self) -> None:
        """Mutating the returned extra must not change the context."""
        token = set_record("aliyun", "www.example.com")
        try:
            extra = get_record_extra()
            extra["record"] = "changed"
            assert get_record_extra()["record"] == "www.example.com"
        finally:
            reset_record(token)

    def test_record_context_in_log_extra(self, log_capture) -> None:
        """Verify record context integrates with log extra fields."""
        logger = get_logger("ddnsync.test")
        token = set_record("dondominio", "example.com")
        try:
            logger.info("Test message", extra={"ip": "192.0.2.1", **get_record_extra()})
        finally:
            reset_record(token)

        records = log_capture.get_records(logging.INFO)
        assert len(records) == 1
        assert records[0].record == "example.com"
        assert records[0].provider == "dondominio"
        assert records[0].ip == "192.0.2.1"
