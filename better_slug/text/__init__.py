"""Text transformation building blocks used by the slug pipeline.

This package provides locale-independent primitives, mode filters, emoji and
stop-word handling, preserved-span tracking and script detection.
"""

from .detection import LanguageDetector, detect_language, is_rtl
from .emoji import transform_emojis
from .modes import apply_mode
from .preserve import PreservedSpans
from .primitives import (
    apply_case,
    collapse_separators,
    normalize_whitespace,
    remove_chars,
    trim_separators,
    truncate,
)
from .stopwords import remove_stop_words

__all__ = [
    "LanguageDetector",
    "PreservedSpans",
    "apply_case",
    "apply_mode",
    "collapse_separators",
    "detect_language",
    "is_rtl",
    "normalize_whitespace",
    "remove_chars",
    "remove_stop_words",
    "transform_emojis",
    "trim_separators",
    "truncate",
]
