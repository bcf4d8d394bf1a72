"""
Interactive Console Session.

Renders the dashboard report once, then runs a prompt loop that reads one
line at a time and echoes it back. Commands are not interpreted yet.

Two tasks run side by side:
- the session task, whose input reads block in an executor thread
- the interrupt watcher, which waits for SIGINT, prints the shutdown
  message and terminates the process without joining the blocked read
"""

import asyncio
import os
import signal
import sys
from collections.abc import Callable
from enum import Enum
from typing import TextIO

from rich.console import Console
from rich.text import Text

from modules.console.client import APIClient
from modules.console.decoder import decode
from modules.console.report import Report, format_report
from modules.core.exceptions import InputReadFailure
from modules.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

PROMPT = "mig> "
SHUTDOWN_MESSAGE = "\nGators are going back underwater. KThksBye."


class SessionState(str, Enum):
    REPORTING = "reporting"
    PROMPTING = "prompting"


class ConsoleSession:
    """
    Operator session against one API base URL.

    Usage:
        session = ConsoleSession("http://localhost:1664/api/v1/")
        await session.run()
    """

    def __init__(
        self,
        base_url: str,
        client: APIClient | None = None,
        console: Console | None = None,
        stdin: TextIO | None = None,
        terminate: Callable[[int], object] = os._exit,
        timeout: float | None = None,
    ) -> None:
        """
        Initialize the session.

        Args:
            base_url: API base URL, resolved once at startup.
            client: API client. Defaults to an APIClient for base_url.
            console: Output sink. Defaults to a Rich console on stdout.
            stdin: Input source. Defaults to sys.stdin.
            terminate: Called with the exit code on interrupt. Defaults to os._exit,
                which does not wait for the blocked input thread.
            timeout: Request timeout for the default client.
        """
        self.base_url = base_url
        self.client = client or APIClient(base_url, timeout=timeout)
        self.console = console or Console(soft_wrap=True, highlight=False)
        self.stdin = stdin or sys.stdin
        self.state = SessionState.REPORTING
        self._terminate = terminate
        self._interrupted = asyncio.Event()
        self._fallback_handler = False

    def interrupt(self) -> None:
        """Trigger the shutdown path, as SIGINT does."""
        self._interrupted.set()

    async def run(self) -> None:
        """
        Run the session until interrupted.

        Raises:
            FetchFailure, MalformedEnvelope, MalformedField: During startup.
            InputReadFailure: If operator input cannot be read.
        """
        loop = asyncio.get_running_loop()
        self._install_signal_handler(loop)

        watcher = asyncio.create_task(self._watch_interrupt())
        session = asyncio.create_task(self._run_session())

        try:
            done, _ = await asyncio.wait({watcher, session}, return_when=asyncio.FIRST_COMPLETED)
            for task in done:
                task.result()
        finally:
            pending = [task for task in (watcher, session) if not task.done()]
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)
            self._remove_signal_handler(loop)

    async def show_report(self) -> Report:
        """Fetch, decode, format and print the dashboard report."""
        try:
            raw = await self.client.get_dashboard()
        finally:
            await self.client.close()

        stats, actions = decode(raw)
        report = format_report(stats, actions)

        for line in report.render():
            self.console.print(line)

        log_with_source(logger, "console", "info", "Dashboard report rendered", actions=len(actions))
        return report

    async def _run_session(self) -> None:
        await self.show_report()

        self.state = SessionState.PROMPTING
        self.console.print(Text(f"\nConnected to {self.base_url}. Use ctrl+c to exit."))

        while True:
            self.console.print(Text(PROMPT), end="")
            line = await self._read_line()
            self.console.print(Text(line.rstrip("\r\n")))

    async def _read_line(self) -> str:
        """Read one line, including its terminator, without blocking the loop."""
        loop = asyncio.get_running_loop()
        try:
            line = await loop.run_in_executor(None, self.stdin.readline)
        except (OSError, ValueError) as e:
            raise InputReadFailure(f"Failed to read input: {e}") from e

        if not line:
            raise InputReadFailure("Failed to read input: end of input")
        return line

    async def _watch_interrupt(self) -> None:
        await self._interrupted.wait()

        log_with_source(logger, "console", "info", "Interrupt received", state=self.state.value)
        self.console.print(Text(SHUTDOWN_MESSAGE))
        self.console.file.flush()
        self._terminate(0)

    def _install_signal_handler(self, loop: asyncio.AbstractEventLoop) -> None:
        try:
            loop.add_signal_handler(signal.SIGINT, self.interrupt)
        except NotImplementedError:
            # Windows event loops have no add_signal_handler
            signal.signal(signal.SIGINT, lambda signum, frame: loop.call_soon_threadsafe(self.interrupt))
            self._fallback_handler = True

    def _remove_signal_handler(self, loop: asyncio.AbstractEventLoop) -> None:
        if self._fallback_handler:
            signal.signal(signal.SIGINT, signal.default_int_handler)
        else:
            loop.remove_signal_handler(signal.SIGINT)


async def run_console(base_url: str, timeout: float | None = None) -> None:
    """Run an interactive console session."""
    session = ConsoleSession(base_url, timeout=timeout)
    await session.run()
