"""Logging utilities for ddnsync library."""

import logging
import time
from contextvars import ContextVar, Token

LOGGER_NAME = "ddnsync"

# Silent unless the application configures logging
_root = logging.getLogger(LOGGER_NAME)
_root.addHandler(logging.NullHandler())

# Context variable for the record being updated
_current_record: ContextVar[dict[str, str] | None] = ContextVar("current_record", default=None)


def set_record(provider: str, record: str) -> Token[dict[str, str] | None]:
    """Set the record being updated for logging context.

    Args:
        provider: Provider identifier (e.g. "dondominio").
        record: Fully qualified record name.

    Returns:
        Token to reset the context.
    """
    return _current_record.set({"provider": provider, "record": record})


def reset_record(token: Token[dict[str, str] | None]) -> None:
    """Reset record context.

    Args:
        token: Token from set_record() call.
    """
    _current_record.reset(token)


def get_record_extra() -> dict[str, str]:
    """Get record info for log extra fields.

    Returns:
        Dict with 'provider' and 'record', or empty dict.
    """
    record = _current_record.get()
    if record is None:
        return {}
    return dict(record)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ddnsync namespace.

    Names outside the namespace (scripts, ``__main__``) are nested under it.

    Args:
        name: The module name (typically __name__).

    Returns:
        A logger instance for the module.
    """
    if name != LOGGER_NAME and not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


class Timer:
    """Context manager measuring the duration of a record update.

    ``elapsed_ms`` reads the running time inside the block and is frozen
    on exit, whether or not the block raised.

    Usage:
        with Timer() as t:
            response = client.send(request)
        logger.debug("Sent", extra={"duration_ms": t.elapsed_ms})
    """

    def __init__(self) -> None:
        self._start: float | None = None
        self._end: float | None = None

    @property
    def elapsed_ms(self) -> float:
        if self._start is None:
            return 0.0
        end = self._end if self._end is not None else time.perf_counter()
        return round((end - self._start) * 1000, 3)

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        self._end = None
        return self

    def __exit__(self, *args: object) -> None:
        self._end = time.perf_counter()
