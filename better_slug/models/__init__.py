"""Shared typed data models for better-slug.

This package contains dataclasses used across pipeline modules to avoid
cross-module coupling and circular imports.
"""

from .datatypes import LanguageInfo, SlugResult, TruncationResult, UniqueSlug

__all__ = [
    "LanguageInfo",
    "SlugResult",
    "TruncationResult",
    "UniqueSlug",
]
