"""Top-level package for better-slug.

This package turns arbitrary multilingual text into URL-, file- and
identifier-safe slugs. The function-style entry point is `slugify`; the
reusable orchestrator is `SlugEngine`.
"""

from .api import (
    create_engine,
    create_slugify,
    detect_language,
    is_rtl,
    remove_stop_words,
    reset_counters,
    slugify,
    slugify_arabic,
    slugify_batch,
    slugify_chinese,
    slugify_farsi,
    slugify_filename,
    slugify_greek,
    slugify_hindi,
    slugify_id,
    slugify_japanese,
    slugify_korean,
    slugify_pretty,
    slugify_russian,
    slugify_strict,
    slugify_url,
    slugify_with_metadata,
    transform_emojis,
)
from .config import ConfigLoader, SlugConfig, UniquenessOptions
from .errors import ValidationError
from .locales import (
    get_charmap,
    get_language_info,
    get_stop_words,
    is_rtl_locale,
    merge_charmaps,
    supported_locales,
)
from .models.datatypes import SlugResult
from .pipeline import SlugEngine
from .uniqueness import CounterStore

__all__ = [
    "ConfigLoader",
    "CounterStore",
    "SlugConfig",
    "SlugEngine",
    "SlugResult",
    "UniquenessOptions",
    "ValidationError",
    "__version__",
    "create_engine",
    "create_slugify",
    "detect_language",
    "get_charmap",
    "get_language_info",
    "get_stop_words",
    "is_rtl",
    "is_rtl_locale",
    "merge_charmaps",
    "remove_stop_words",
    "reset_counters",
    "slugify",
    "slugify_arabic",
    "slugify_batch",
    "slugify_chinese",
    "slugify_farsi",
    "slugify_filename",
    "slugify_greek",
    "slugify_hindi",
    "slugify_id",
    "slugify_japanese",
    "slugify_korean",
    "slugify_pretty",
    "slugify_russian",
    "slugify_strict",
    "slugify_url",
    "slugify_with_metadata",
    "supported_locales",
    "transform_emojis",
]

__version__ = "0.1.0"
