"""Structured run logging utilities.

Responsibilities:
- Emit concise, deterministic step-level logs for slug pipeline runs.
- Route every line through `loguru` with a plain message format.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger as _loguru_logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class RunLogger:
    """Emit deterministic step logs for CLI-observable pipeline activity."""

    def __init__(self, sink: TextIO | None = None, *, level: str = "INFO") -> None:
        """Initialize logger sink and configure deterministic formatting."""

        self._sink = sink or sys.stderr
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format="{message}", level=level, colorize=False)

    def _emit(self, level: str, event: str, step: str, **context: object) -> None:
        """Emit one structured runtime log line."""

        line = f"[step] level={level} step={step} event={event}{_format_context(context)}"
        _loguru_logger.log(level, line)

    def log_step_start(self, step: str) -> None:
        """Emit a step-start event."""

        self._emit("DEBUG", "start", step)

    def log_step_complete(self, step: str, **context: object) -> None:
        """Emit a step-complete event."""

        self._emit("DEBUG", "complete", step, **context)

    def log_step_skipped(self, step: str) -> None:
        """Emit an event for a step disabled by configuration."""

        self._emit("DEBUG", "skipped", step)

    def log_step_failure(self, step: str, error_type: str) -> None:
        """Emit a step-failure event without payload details."""

        self._emit("ERROR", "failure", step, error_type=error_type)

    def log_result(self, **context: object) -> None:
        """Emit a summary line for one finished slugify call."""

        self._emit("INFO", "result", "pipeline", **context)
