"""Label-keyed performance timers with aggregated statistics.

A TimerRegistry is an explicit object: callers that want to share timings
pass the same registry around. Starting a label that is already running is
refused, so two overlapping operations under one label cannot clobber each
other's start time.

Example:
    ```python
    perf = TimerRegistry()
    perf.start("render")
    render()
    perf.end("render")

    data = await perf.measure("fetch", fetch_items)
    perf.get_metrics("render")
    ```
"""

import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

_logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class TimerMetrics:
    """Aggregated durations for one label, in milliseconds."""

    count: int
    total_time: float
    min_time: float
    max_time: float
    avg_time: float

    def record(self, duration: float) -> None:
        self.count += 1
        self.total_time += duration
        self.min_time = min(self.min_time, duration)
        self.max_time = max(self.max_time, duration)
        self.avg_time = self.total_time / self.count


class TimerRegistry:
    """Active timers and accumulated metrics keyed by label.

    Args:
        clock: Monotonic clock returning seconds (default: time.perf_counter).
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._active: dict[str, float] = {}
        self._metrics: dict[str, TimerMetrics] = {}

    def is_active(self, label: str) -> bool:
        return label in self._active

    def start(self, label: str) -> bool:
        """Start a timer for ``label``.

        Returns:
            True if started, False if a timer for the label is already
            running (the running timer is left untouched).
        """
        if label in self._active:
            _logger.warning(
                'Timer "%s" is already active. Call end() before starting again, '
                "or use a unique label for concurrent operations.",
                label,
            )
            return False
        self._active[label] = self._clock()
        return True

    def end(self, label: str) -> float:
        """Stop the timer for ``label`` and record its duration.

        Returns:
            Elapsed milliseconds, or 0.0 if no timer was running.
        """
        start = self._active.pop(label, None)
        if start is None:
            _logger.warning("No timer started for label: %s", label)
            return 0.0

        duration = (self._clock() - start) * 1000
        existing = self._metrics.get(label)
        if existing is None:
            self._metrics[label] = TimerMetrics(
                count=1,
                total_time=duration,
                min_time=duration,
                max_time=duration,
                avg_time=duration,
            )
        else:
            existing.record(duration)
        return duration

    async def measure(self, label: str, fn: Callable[[], Awaitable[T]]) -> T:
        """Await ``fn()`` between start and end; exceptions propagate.

        If ``label`` is already being timed, ``fn`` still runs but only the
        caller that started the timer ends it.
        """
        started = self.start(label)
        try:
            return await fn()
        finally:
            if started:
                self.end(label)

    def measure_sync(self, label: str, fn: Callable[[], T]) -> T:
        """Call ``fn()`` between start and end; exceptions propagate."""
        started = self.start(label)
        try:
            return fn()
        finally:
            if started:
                self.end(label)

    def get_metrics(self, label: str) -> TimerMetrics | None:
        return self._metrics.get(label)

    def get_all_metrics(self) -> dict[str, TimerMetrics]:
        return dict(self._metrics)

    def log_metrics(self) -> None:
        """Log one summary line per label at INFO level."""
        for label, metrics in self._metrics.items():
            _logger.info(
                "%s: count=%d, avg=%.2fms, min=%.2fms, max=%.2fms",
                label,
                metrics.count,
                metrics.avg_time,
                metrics.min_time,
                metrics.max_time,
            )

    def clear_metrics(self) -> None:
        """Forget all metrics and all running timers."""
        self._metrics.clear()
        self._active.clear()
