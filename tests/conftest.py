"""Pytest fixtures for ddnsync test suite."""

import logging
import logging.handlers
from collections.abc import Generator

import httpx
import pytest

from ddnsync.models import IPVersion
from ddnsync.providers.aliyun import AliyunProvider
from ddnsync.providers.dondominio import DonDominioProvider


@pytest.fixture
def http_client() -> Generator[httpx.Client]:
    """Create an httpx client for provider calls (mocked with respx)."""
    client = httpx.Client()
    yield client
    client.close()


@pytest.fixture
def dondominio() -> DonDominioProvider:
    """DonDominio provider with valid settings."""
    return DonDominioProvider(
        domain="example.com",
        host="@",
        ip_version=IPVersion.IPV4,
        username="u",
        password="p",
        name="n",
    )


@pytest.fixture
def aliyun() -> AliyunProvider:
    """Aliyun provider for the www record of example.com."""
    return AliyunProvider(
        domain="example.com",
        host="www",
        ip_version=IPVersion.IPV4_OR_IPV6,
        access_key_id="key-id",
        access_secret="key-secret",
    )


class LogCapture:
    """Helper class to capture and inspect log records."""

    def __init__(self, handler: logging.handlers.MemoryHandler) -> None:
        self._handler = handler

    @property
    def records(self) -> list[logging.LogRecord]:
        """Get all captured log records."""
        return self._handler.buffer

    def get_records(
        self, level: int | None = None, name: str | None = None
    ) -> list[logging.LogRecord]:
        """Get log records filtered by level and/or logger name.

        Args:
            level: Filter by log level (e.g., logging.INFO).
            name: Filter by logger name prefix (e.g., "ddnsync.providers").

        Returns:
            List of matching log records.
        """
        records = self.records
        if level is not None:
            records = [r for r in records if r.levelno == level]
        if name is not None:
            records = [r for r in records if r.name.startswith(name)]
        return records

    def get_messages(self, level: int | None = None, name: str | None = None) -> list[str]:
        """Get log messages filtered by level and/or logger name."""
        return [r.getMessage() for r in self.get_records(level, name)]

    def clear(self) -> None:
        """Clear all captured log records."""
        self._handler.buffer.clear()


@pytest.fixture
def log_capture() -> Generator[LogCapture]:
    """Capture logs from the ddnsync library during a test.

    Usage:
        def test_something(log_capture):
            # do something that logs
            assert "Record updated" in log_capture.get_messages(logging.INFO)
    """
    handler = logging.handlers.MemoryHandler(capacity=1000)
    handler.setLevel(logging.DEBUG)

    ddnsync_logger = logging.getLogger("ddnsync")
    original_level = ddnsync_logger.level
    ddnsync_logger.setLevel(logging.DEBUG)
    ddnsync_logger.addHandler(handler)

    try:
        yield LogCapture(handler)
    finally:
        ddnsync_logger.removeHandler(handler)
        ddnsync_logger.setLevel(original_level)
        handler.close()
