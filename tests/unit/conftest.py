"""
Unit Test Fixtures.

Fixtures for unit tests - HTTP and terminal I/O are faked.
Unit tests should be fast and isolated, never touching a real API.
"""

import io
import threading
from unittest.mock import AsyncMock

import pytest
from rich.console import Console


# =============================================================================
# Output Fixtures
# =============================================================================


@pytest.fixture
def output() -> io.StringIO:
    """Captured console output."""
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> Console:
    """
    Plain-text Rich console writing to `output`.

    No color codes, no wrapping, so assertions can match whole lines.
    """
    return Console(file=output, force_terminal=False, color_system=None, soft_wrap=True, highlight=False, width=200)


# =============================================================================
# Input Fixtures
# =============================================================================


class BlockingInput:
    """
    Line source whose readline blocks until a line is fed or it is released.

    `reading` is set whenever a reader is blocked waiting.
    """

    def __init__(self, lines: list[str] | None = None) -> None:
        self._lines = list(lines or [])
        self._available = threading.Condition()
        self._released = False
        self.reading = threading.Event()
        self.reads = 0

    def feed(self, line: str) -> None:
        with self._available:
            self._lines.append(line)
            self._available.notify_all()

    def release(self) -> None:
        """Unblock readers; pending and future reads return end of input."""
        with self._available:
            self._released = True
            self._available.notify_all()

    def readline(self) -> str:
        with self._available:
            self.reads += 1
            while not self._lines and not self._released:
                self.reading.set()
                self._available.wait()
            self.reading.clear()
            if self._lines:
                return self._lines.pop(0)
            return ""


@pytest.fixture
def blocking_input():
    """Provide a BlockingInput that is always released at teardown."""
    source = BlockingInput()
    yield source
    source.release()


# =============================================================================
# HTTP Fixtures
# =============================================================================


@pytest.fixture
def mock_api_client(sample_dashboard: bytes) -> AsyncMock:
    """
    Mock APIClient returning the reference dashboard.

    Usage:
        mock_api_client.get_dashboard.side_effect = FetchFailure("boom")
    """
    client = AsyncMock()
    client.get_dashboard = AsyncMock(return_value=sample_dashboard)
    client.close = AsyncMock()
    return client
