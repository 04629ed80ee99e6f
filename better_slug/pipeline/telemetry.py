"""Step telemetry helper methods for the slug pipeline.

Responsibilities:
- Provide step index/total metadata for diagnostics.
- Emit step start/complete/skipped/failure events.
- Wrap step actions with consistent telemetry hooks.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from ..telemetry.logger import RunLogger

_StepResult = TypeVar("_StepResult")


class PipelineTelemetryMixin:
    """Provide step-telemetry helper methods."""

    _STEP_SEQUENCE = (
        "detect",
        "transforms",
        "preserve",
        "emojis",
        "replacements",
        "transliterate",
        "stop_words",
        "mode",
        "whitespace",
        "remove",
        "case",
        "collapse",
        "trim",
        "restore",
        "truncate",
        "uniqueness",
    )

    _run_logger: RunLogger | None

    def _step_position(self, step_name: str) -> tuple[int, int] | None:
        """Return 1-based step index and total step count for known steps."""

        try:
            index = self._STEP_SEQUENCE.index(step_name) + 1
        except ValueError:
            return None
        return index, len(self._STEP_SEQUENCE)

    def _on_step_start(self, step_name: str) -> None:
        """Emit a step-start event to the structured logger."""

        if self._run_logger is not None:
            self._run_logger.log_step_start(step_name)

    def _on_step_complete(self, step_name: str) -> None:
        """Emit a step-complete event with the step position."""

        if self._run_logger is None:
            return
        position = self._step_position(step_name)
        if position is None:
            self._run_logger.log_step_complete(step_name)
        else:
            self._run_logger.log_step_complete(
                step_name, index=position[0], total=position[1]
            )

    def _on_step_skipped(self, step_name: str) -> None:
        """Emit an event for a step disabled by configuration."""

        if self._run_logger is not None:
            self._run_logger.log_step_skipped(step_name)

    def _on_step_failure(self, step_name: str, exc: Exception) -> None:
        """Emit a step-failure event with sanitized exception metadata."""

        if self._run_logger is not None:
            self._run_logger.log_step_failure(step_name, type(exc).__name__)

    def _run_step(
        self,
        step_name: str,
        action: Callable[[], _StepResult],
    ) -> _StepResult:
        """Run one named step and emit start/complete/failure telemetry events."""

        if self._run_logger is None:
            return action()

        self._on_step_start(step_name)
        try:
            result = action()
        except Exception as exc:
            self._on_step_failure(step_name, exc)
            raise
        self._on_step_complete(step_name)
        return result
