"""
Progress reporting for front ends.

The engine only knows a plain ``on_progress(bytes_written, total_bytes)``
callback. ``ProgressReporter`` turns those calls into ``ProgressInfo``
events (message and percentage) that a CLI or GUI can render.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    ProgressListener = Callable[["ProgressInfo"], None]
    ProgressCallback = Callable[[int, int], None]

DEFAULT_COMPLETION_DELAY_SECONDS = 1.0


def calculate_percentage(current: int, total: int) -> float:
    """
    Completion in percent, clamped to [0, 100].

    A total of zero counts as complete: an empty file is finished as soon
    as it has been created.
    """
    if total <= 0:
        return 100.0
    value = 100.0 * current / total
    return min(max(value, 0.0), 100.0)


@dataclass(frozen=True)
class ProgressInfo:
    """One progress event as shown to the user."""

    message: str
    percentage: float
    is_failure: bool = False
    error: BaseException | None = None


class ProgressReporter:
    """
    Publishes ProgressInfo events to subscribed listeners.

    Listeners are called synchronously in subscription order.
    """

    def __init__(self, completion_delay_seconds: float = DEFAULT_COMPLETION_DELAY_SECONDS) -> None:
        """
        Args:
            completion_delay_seconds: Default time the completed or failed
                state is held before report_completed/report_failed return
        """
        if completion_delay_seconds < 0:
            raise ValueError(
                f"completion_delay_seconds must not be negative, got {completion_delay_seconds}"
            )
        self.completion_delay_seconds = completion_delay_seconds
        self._listeners: list[ProgressListener] = []
        self._last: ProgressInfo | None = None

    @property
    def last(self) -> ProgressInfo | None:
        """Most recently published event."""
        return self._last

    def subscribe(self, listener: ProgressListener) -> Callable[[], None]:
        """
        Register a listener.

        Returns:
            Callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def report(self, info: ProgressInfo) -> None:
        self._last = info
        for listener in list(self._listeners):
            listener(info)

    def report_clear(self) -> None:
        self.report(ProgressInfo("", 0.0))

    def report_starting(self, message: str) -> None:
        self.report(ProgressInfo(message, 0.0))

    async def report_completed(self, message: str, wait_seconds: float | None = None) -> None:
        """Publish 100% and hold it for ``wait_seconds``."""
        await self._report_and_wait(ProgressInfo(message, 100.0), wait_seconds)

    async def report_failed(
        self,
        message: str,
        error: BaseException | None = None,
        wait_seconds: float | None = None,
    ) -> None:
        """Publish a failure event and hold it for ``wait_seconds``."""
        await self._report_and_wait(
            ProgressInfo(message, 100.0, is_failure=True, error=error),
            wait_seconds,
        )

    def progress_callback(self, message: str) -> ProgressCallback:
        """
        Build an engine callback that reports under ``message``.

        Events are only published when the whole-number percentage changes,
        so a run with many small chunks does not flood the listeners.
        """
        last_percent: int | None = None

        def on_progress(bytes_written: int, total_bytes: int) -> None:
            nonlocal last_percent
            percentage = calculate_percentage(bytes_written, total_bytes)
            if int(percentage) == last_percent:
                return
            last_percent = int(percentage)
            self.report(ProgressInfo(message, percentage))

        return on_progress

    async def _report_and_wait(self, info: ProgressInfo, wait_seconds: float | None) -> None:
        self.report(info)
        delay = self.completion_delay_seconds if wait_seconds is None else wait_seconds
        if delay > 0:
            await asyncio.sleep(delay)
