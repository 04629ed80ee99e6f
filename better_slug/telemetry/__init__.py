"""Telemetry and observability helpers.

This package emits structured step logs and records benchmark timings.
"""

from .logger import RunLogger
from .timing import StepTimer, TimingStats

__all__ = ["RunLogger", "StepTimer", "TimingStats"]
