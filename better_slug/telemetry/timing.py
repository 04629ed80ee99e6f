"""Wall-clock timing for benchmark reporting.

Responsibilities:
- Measure named callables with a monotonic clock.
- Summarize recorded durations (count, total, average, min, max) in milliseconds.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
import time
from typing import TypeVar

_Measured = TypeVar("_Measured")


@dataclass(frozen=True, slots=True)
class TimingStats:
    """Summary of the durations recorded under one name, in milliseconds."""

    count: int
    total: float
    average: float
    minimum: float
    maximum: float

    def as_dict(self) -> dict[str, float]:
        """Return stats keyed for JSON output."""

        return {
            "count": self.count,
            "total_ms": self.total,
            "average_ms": self.average,
            "min_ms": self.minimum,
            "max_ms": self.maximum,
        }


@dataclass(slots=True)
class StepTimer:
    """Collect durations per name."""

    clock: Callable[[], float] = time.perf_counter
    _timings: dict[str, list[float]] = field(default_factory=dict)

    def measure(self, name: str, action: Callable[[], _Measured]) -> _Measured:
        """Run `action`, record its duration under `name` and return its result."""

        started = self.clock()
        result = action()
        self.record(name, (self.clock() - started) * 1000.0)
        return result

    def record(self, name: str, duration_ms: float) -> None:
        """Record one duration in milliseconds."""

        self._timings.setdefault(name, []).append(max(0.0, duration_ms))

    def stats(self, name: str) -> TimingStats | None:
        """Return stats for `name`, or `None` when nothing was recorded."""

        timings = self._timings.get(name)
        if not timings:
            return None
        total = sum(timings)
        return TimingStats(
            count=len(timings),
            total=total,
            average=total / len(timings),
            minimum=min(timings),
            maximum=max(timings),
        )

    def clear(self, name: str | None = None) -> None:
        """Drop recorded durations for `name`, or for every name."""

        if name is None:
            self._timings.clear()
        else:
            self._timings.pop(name, None)
