"""better-slug pipeline package.

This package contains the slug orchestrator and its step telemetry helpers.
"""

from .engine import SlugEngine, validate_input

__all__ = ["SlugEngine", "validate_input"]
