"""Public function-style entry points.

Responsibilities:
- Resolve a `SlugConfig` from an optional base config plus keyword overrides.
- Run one-shot, batch and reusable slugify calls through `SlugEngine`.
- Share one process-level counter table across facade calls.
- Provide presets for common modes and script locales.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from .config import SlugConfig
from .models.datatypes import SlugResult
from .pipeline.engine import ProgressCallback, SlugEngine
from .telemetry.logger import RunLogger
from .text.detection import detect_language, is_rtl
from .text.emoji import transform_emojis
from .text.stopwords import remove_stop_words
from .uniqueness import CounterStore

_PROCESS_COUNTERS = CounterStore()


def resolve_config(config: SlugConfig | None = None, **options: Any) -> SlugConfig:
    """Return `config` (or defaults) with validated option overrides applied."""

    base = config or SlugConfig()
    if not options:
        base.validate()
        return base
    return base.with_options(**options)


def create_engine(
    config: SlugConfig | None = None,
    *,
    run_logger: RunLogger | None = None,
    counters: CounterStore | None = None,
    **options: Any,
) -> SlugEngine:
    """Build a reusable engine; counters default to the process-level table."""

    return SlugEngine(
        resolve_config(config, **options),
        counters=counters if counters is not None else _PROCESS_COUNTERS,
        run_logger=run_logger,
    )


def slugify(text: str, config: SlugConfig | None = None, **options: Any) -> str:
    """Return the slug for `text`.

    Raises:
        ValidationError: On invalid options or input.
    """

    return create_engine(config, **options).slugify(text).slug


def slugify_with_metadata(
    text: str,
    config: SlugConfig | None = None,
    **options: Any,
) -> SlugResult:
    """Return the full `SlugResult` for `text`."""

    return create_engine(config, **options).slugify(text)


def slugify_batch(
    texts: Iterable[str],
    config: SlugConfig | None = None,
    *,
    progress: ProgressCallback | None = None,
    **options: Any,
) -> list[SlugResult]:
    """Slugify many inputs with one engine, in input order."""

    return create_engine(config, **options).slugify_batch(texts, progress=progress)


def create_slugify(config: SlugConfig | None = None, **options: Any) -> Callable[[str], str]:
    """Return a slugify function bound to one validated configuration."""

    engine = create_engine(config, **options)

    def bound_slugify(text: str) -> str:
        return engine.slugify(text).slug

    return bound_slugify


def reset_counters() -> None:
    """Forget every counter recorded by facade calls."""

    _PROCESS_COUNTERS.clear()


def _preset(description: str, **preset_options: Any) -> Callable[..., str]:
    """Build a preset slugify function whose options callers may still override."""

    def preset(text: str, **options: Any) -> str:
        return slugify(text, **{**preset_options, **options})

    preset.__doc__ = description
    return preset


slugify_strict = _preset("Slugify keeping only ASCII letters, digits and hyphens.", mode="strict")
slugify_pretty = _preset("Slugify keeping Unicode letters and digits.", mode="pretty")
slugify_filename = _preset(
    "Slugify for filesystem names, keeping the extension dot.",
    mode="filename",
    preserve=".",
)
slugify_id = _preset("Slugify into a valid HTML identifier.", mode="id")
slugify_url = _preset("Slugify into RFC 3986 unreserved characters.", mode="rfc3986")
slugify_farsi = _preset("Slugify Persian text.", locale="fa")
slugify_arabic = _preset("Slugify Arabic text.", locale="ar")
slugify_chinese = _preset("Slugify Chinese text into Pinyin.", locale="zh")
slugify_japanese = _preset("Slugify Japanese text.", locale="ja")
slugify_korean = _preset("Slugify Korean text.", locale="ko")
slugify_russian = _preset("Slugify Russian text.", locale="ru")
slugify_greek = _preset("Slugify Greek text.", locale="el")
slugify_hindi = _preset("Slugify Hindi text.", locale="hi")


__all__ = [
    "create_engine",
    "create_slugify",
    "detect_language",
    "is_rtl",
    "remove_stop_words",
    "reset_counters",
    "resolve_config",
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
    "transform_emojis",
]
