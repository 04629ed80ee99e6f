"""Unit tests for structured run logging, step telemetry and timing."""

from __future__ import annotations

import io

import pytest

from better_slug.pipeline.telemetry import PipelineTelemetryMixin
from better_slug.telemetry import RunLogger, StepTimer


class _Recorder(PipelineTelemetryMixin):
    """Minimal mixin host with an injectable logger."""

    def __init__(self, run_logger: RunLogger | None) -> None:
        self._run_logger = run_logger


def test_run_logger_emits_deterministic_lines() -> None:
    """Context keys should be sorted and values sanitized."""

    sink = io.StringIO()
    logger = RunLogger(sink, level="DEBUG")

    logger.log_step_complete("mode", total=16, index=8)
    logger.log_result(locale="fa", input_chars=9)

    lines = sink.getvalue().splitlines()
    assert lines[0] == "[step] level=DEBUG step=mode event=complete index=8 total=16"
    assert lines[1] == "[step] level=INFO step=pipeline event=result input_chars=9 locale=fa"


def test_run_logger_level_filters_debug_events() -> None:
    """At INFO level only result and failure events should be written."""

    sink = io.StringIO()
    logger = RunLogger(sink)

    logger.log_step_start("detect")
    logger.log_step_failure("detect", "ValueError")

    assert sink.getvalue().splitlines() == [
        "[step] level=ERROR step=detect event=failure error_type=ValueError"
    ]


def test_run_logger_sanitizes_context_values() -> None:
    """Unsafe characters should be replaced and blank values named `none`."""

    sink = io.StringIO()
    RunLogger(sink).log_result(note="a b;c", empty=" ")

    assert sink.getvalue().strip().endswith("empty=none note=a_b_c")


def test_run_step_without_logger_returns_action_result() -> None:
    """Without a logger the step should just run."""

    assert _Recorder(None)._run_step("mode", lambda: 42) == 42


def test_run_step_logs_failure_and_reraises() -> None:
    """A failing step should be logged and the exception propagated."""

    sink = io.StringIO()
    recorder = _Recorder(RunLogger(sink, level="DEBUG"))

    def explode() -> None:
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        recorder._run_step("uniqueness", explode)

    output = sink.getvalue()
    assert "step=uniqueness event=start" in output
    assert "step=uniqueness event=failure error_type=ValueError" in output
    assert "boom" not in output


def test_unknown_step_completes_without_position() -> None:
    """Steps outside the known sequence should log without index metadata."""

    sink = io.StringIO()
    _Recorder(RunLogger(sink, level="DEBUG"))._run_step("custom", lambda: None)

    assert "[step] level=DEBUG step=custom event=complete\n" in sink.getvalue()


def test_step_timer_summarizes_recorded_durations() -> None:
    """Stats should aggregate count, total, average, minimum and maximum."""

    ticks = iter([0.0, 0.002, 1.0, 1.004])
    timer = StepTimer(clock=lambda: next(ticks))

    assert timer.measure("slugify", lambda: "a") == "a"
    timer.measure("slugify", lambda: "b")
    stats = timer.stats("slugify")

    assert stats is not None
    assert stats.count == 2
    assert stats.total == pytest.approx(6.0)
    assert stats.average == pytest.approx(3.0)
    assert stats.minimum == pytest.approx(2.0)
    assert stats.maximum == pytest.approx(4.0)
    assert set(stats.as_dict()) == {"count", "total_ms", "average_ms", "min_ms", "max_ms"}


def test_step_timer_clear_and_missing_names() -> None:
    """Unknown or cleared names should have no stats."""

    timer = StepTimer()
    timer.record("a", 1.0)
    timer.record("b", 2.0)
    timer.clear("a")

    assert timer.stats("a") is None
    assert timer.stats("b") is not None

    timer.clear()

    assert timer.stats("b") is None
