"""Slug pipeline orchestrator.

Responsibilities:
- Validate configuration once and inputs on every call.
- Run the sixteen pipeline steps in their fixed order.
- Slugify batches sequentially or on a thread pool, in input order.

Key types:
- `SlugEngine`: reusable, thread-safe slug generator bound to one `SlugConfig`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
import threading

from ..config import MAX_BATCH_SIZE, MAX_INPUT_LENGTH, SlugConfig
from ..errors import ValidationError
from ..models.datatypes import SlugResult
from ..telemetry.logger import RunLogger
from ..text.detection import LanguageDetector
from ..text.emoji import transform_emojis
from ..text.modes import apply_mode
from ..text.preserve import PreservedSpans
from ..text.primitives import (
    apply_case,
    collapse_separators,
    normalize_whitespace,
    remove_chars,
    trim_separators,
    truncate,
)
from ..text.stopwords import remove_stop_words
from ..transliteration import Transliterator, build_transliterator
from ..uniqueness import CounterStore, UniquenessGenerator
from .telemetry import PipelineTelemetryMixin

ProgressCallback = Callable[[int, int], None]

_FALLBACK_LOCALE = "en"


def validate_input(text: object) -> str:
    """Return `text` when it is a string within the input length limit.

    Raises:
        ValidationError: If `text` is not a string or is too long.
    """

    if not isinstance(text, str):
        raise ValidationError(
            field="input",
            value=text,
            detail=f"Expected string input, got {type(text).__name__}",
        )
    if len(text) > MAX_INPUT_LENGTH:
        raise ValidationError(
            field="input",
            value=len(text),
            detail=f"Input exceeds maximum length of {MAX_INPUT_LENGTH}",
        )
    return text


@dataclass(frozen=True, slots=True)
class _EngineState:
    """Config and the transliterator built for it, swapped atomically."""

    config: SlugConfig
    transliterator: Transliterator | None


class SlugEngine(PipelineTelemetryMixin):
    """Turn text into slugs according to one validated configuration.

    Args:
        config: Options to apply; defaults are used when omitted.
        counters: Counter table for the counter strategy without a caller store.
        run_logger: Optional structured step logger.
        detector: Language detector used by `auto` locale and detection.
    """

    def __init__(
        self,
        config: SlugConfig | None = None,
        *,
        counters: CounterStore | None = None,
        run_logger: RunLogger | None = None,
        detector: LanguageDetector | None = None,
    ) -> None:
        resolved = config or SlugConfig()
        resolved.validate()
        self._run_logger = run_logger
        self._detector = detector or LanguageDetector()
        self._uniqueness = UniquenessGenerator(
            counters if counters is not None else CounterStore()
        )
        self._auto_transliterators: dict[str, Transliterator] = {}
        self._auto_lock = threading.Lock()
        self._state = self._build_state(resolved)

    @property
    def config(self) -> SlugConfig:
        """Return the active configuration."""

        return self._state.config

    def update_options(self, **options: object) -> None:
        """Apply validated option overrides and rebuild locale-dependent state."""

        self._state = self._build_state(self._state.config.with_options(**options))

    def reset(self) -> None:
        """Return to the default configuration."""

        self._state = self._build_state(SlugConfig())

    def slugify(self, text: str) -> SlugResult:
        """Slugify one input.

        Raises:
            ValidationError: If `text` is not a string or exceeds the length limit.
        """

        validate_input(text)
        if not text.strip():
            return SlugResult(slug="", original=text)

        result = self._execute(text, self._state)
        if self._run_logger is not None:
            self._run_logger.log_result(
                input_chars=len(text),
                slug_chars=len(result.slug),
                locale=result.locale or "none",
                truncated=bool(result.truncated),
            )
        return result

    def slugify_batch(
        self,
        texts: Iterable[str],
        *,
        progress: ProgressCallback | None = None,
        max_workers: int | None = None,
    ) -> list[SlugResult]:
        """Slugify many inputs, preserving input order.

        The whole batch is validated before any item is processed; the first
        invalid item is reported with its index.

        Args:
            texts: Inputs to slugify.
            progress: Called as `progress(done, total)` after each item.
            max_workers: Thread count; sequential when `None` or 1.
        """

        if isinstance(texts, str):
            raise ValidationError(
                field="inputs",
                value=texts,
                detail="Batch input must be a sequence of strings, not a string",
            )
        items = list(texts)
        if len(items) > MAX_BATCH_SIZE:
            raise ValidationError(
                field="inputs",
                value=len(items),
                detail=f"Batch size exceeds maximum of {MAX_BATCH_SIZE}",
            )
        for index, item in enumerate(items):
            try:
                validate_input(item)
            except ValidationError as exc:
                raise exc.at_index(index) from exc

        total = len(items)
        results: list[SlugResult] = []
        if max_workers is None or max_workers <= 1 or total <= 1:
            for done, item in enumerate(items, start=1):
                results.append(self.slugify(item))
                if progress is not None:
                    progress(done, total)
            return results

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [executor.submit(self.slugify, item) for item in items]
            for done, future in enumerate(futures, start=1):
                results.append(future.result())
                if progress is not None:
                    progress(done, total)
        return results

    def _build_state(self, config: SlugConfig) -> _EngineState:
        """Build the transliterator matching `config`."""

        with self._auto_lock:
            self._auto_transliterators.clear()
        if config.locale == "preserve" or not config.transliterate:
            return _EngineState(config=config, transliterator=None)
        locale = _FALLBACK_LOCALE if config.locale == "auto" else config.locale
        return _EngineState(
            config=config,
            transliterator=build_transliterator(locale, config.custom_charmap),
        )

    def _transliterator_for(self, locale: str, config: SlugConfig) -> Transliterator:
        """Return a cached transliterator for a detected locale."""

        with self._auto_lock:
            cached = self._auto_transliterators.get(locale)
            if cached is None:
                cached = build_transliterator(locale, config.custom_charmap)
                self._auto_transliterators[locale] = cached
            return cached

    def _execute(self, text: str, state: _EngineState) -> SlugResult:
        """Run every pipeline step over one validated, non-blank input."""

        config = state.config
        separator = config.separator

        detected: str | None = None
        if config.locale == "auto" or config.detect_language:
            detected = self._run_step("detect", lambda: self._detector.detect(text))
        else:
            self._on_step_skipped("detect")

        transliterator = state.transliterator
        if config.locale == "auto" and transliterator is not None and detected:
            transliterator = self._transliterator_for(detected, config)

        working = text
        if config.transforms:
            working = self._run_step("transforms", lambda: _apply_transforms(working, config))

        working, spans = self._run_step(
            "preserve", lambda: PreservedSpans.extract(working, config.preserve)
        )
        keep = spans.placeholders

        working = self._run_step("emojis", lambda: transform_emojis(working, config.emojis))

        if config.replacements:
            working = self._run_step(
                "replacements", lambda: _apply_replacements(working, config.replacements)
            )

        if transliterator is not None:
            working = self._run_step("transliterate", lambda: transliterator.transliterate(working))
        else:
            self._on_step_skipped("transliterate")

        if config.remove_stop_words is not False:
            locales = config.stop_word_locales(detected)
            working = self._run_step("stop_words", lambda: remove_stop_words(working, locales))

        working = self._run_step("mode", lambda: apply_mode(working, config.mode, keep))
        working = self._run_step(
            "whitespace", lambda: normalize_whitespace(working, separator)
        )
        if config.remove:
            working = self._run_step(
                "remove", lambda: remove_chars(working, config.remove, keep)
            )
        working = self._run_step(
            "case", lambda: apply_case(working, config.case_style, separator)
        )
        working = self._run_step("collapse", lambda: collapse_separators(working, separator))
        if config.trim:
            working = self._run_step("trim", lambda: trim_separators(working, separator))
        working = self._run_step("restore", lambda: spans.restore(working))

        truncated: bool | None = None
        if config.max_length is not None:
            max_length = config.max_length
            truncation = self._run_step(
                "truncate", lambda: truncate(working, max_length, config.truncate, separator)
            )
            working, truncated = truncation.text, truncation.truncated
            if truncated and config.trim:
                working = trim_separators(working, separator)

        unique_id: int | str | None = None
        uniqueness = config.uniqueness
        if uniqueness is not None and uniqueness.strategy != "none":
            unique = self._run_step(
                "uniqueness",
                lambda: self._uniqueness.generate(
                    working,
                    uniqueness,
                    separator=separator,
                    max_length=config.max_length,
                ),
            )
            working, unique_id = unique.slug, unique.unique_id

        return SlugResult(
            slug=working,
            original=text,
            locale=detected,
            truncated=truncated,
            unique_id=unique_id,
        )


def _apply_transforms(text: str, config: SlugConfig) -> str:
    """Run caller transforms in order."""

    for transform in config.transforms:
        text = transform(text, config)
    return text


def _apply_replacements(text: str, replacements: tuple[tuple[str, str], ...]) -> str:
    """Apply literal replacements in order, each one globally."""

    for old, new in replacements:
        if old:
            text = text.replace(old, new)
    return text
