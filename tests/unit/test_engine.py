"""Unit tests for the slug pipeline orchestrator."""

from __future__ import annotations

import io
import re

import pytest

from better_slug.config import SlugConfig, UniquenessOptions
from better_slug.errors import ValidationError
from better_slug.pipeline import SlugEngine
from better_slug.telemetry.logger import RunLogger
from better_slug.uniqueness import CounterStore

RFC3986_ALLOWED = set("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~")


def _slug(text: str, **options: object) -> str:
    """Slugify `text` with a fresh engine built from `options`."""

    return SlugEngine(SlugConfig.from_options(**options)).slugify(text).slug


def test_default_options_produce_lower_hyphenated_slug() -> None:
    """Punctuation should vanish and words should be joined by hyphens."""

    result = SlugEngine().slugify("Hello World!")

    assert result.slug == "hello-world"
    assert result.original == "Hello World!"
    assert result.truncated is False
    assert result.locale is None


def test_persian_input_uses_word_overrides() -> None:
    """Persian words in the override table should romanize exactly."""

    assert _slug("سلام دنیا", locale="fa") == "salam-donya"


def test_preserve_locale_keeps_script() -> None:
    """The preserve locale should skip transliteration entirely."""

    assert _slug("你好世界", locale="preserve") == "你好世界"


def test_word_truncation_respects_limit() -> None:
    """Word truncation should keep the slug within the limit and flag it."""

    result = SlugEngine(SlugConfig(max_length=5, truncate="word")).slugify("Test String")

    assert len(result.slug) <= 5
    assert result.truncated is True
    assert result.slug == "test"


def test_filename_mode_preserves_extension_dot() -> None:
    """A preserved dot should survive filename mode verbatim."""

    assert _slug("My File.pdf", mode="filename", preserve=".") == "my-file.pdf"


def test_rfc3986_mode_emits_only_unreserved_characters() -> None:
    """RFC 3986 output should contain unreserved characters only."""

    slug = _slug("Hello World! Ünïcödé & more", mode="rfc3986")

    assert slug
    assert set(slug) <= RFC3986_ALLOWED


def test_preserved_span_survives_strict_mode() -> None:
    """Preserved spans should appear verbatim even when strict mode would drop them."""

    assert _slug("C++ rocks", mode="strict", preserve="C++") == "C++-rocks"


@pytest.mark.parametrize(
    ("text", "locale", "expected"),
    [
        ("中国", "zh", "zhong-guo"),
        ("한국", "ko", "hanguk"),
        ("Привет мир", "ru", "privet-mir"),
        ("Über Größe", "de", "ueber-groesse"),
        ("Crème Brûlée", "fr", "creme-brulee"),
    ],
)
def test_locale_scenarios(text: str, locale: str, expected: str) -> None:
    """Script locales should romanize into hyphenated lower-case slugs."""

    assert _slug(text, locale=locale) == expected


def test_auto_locale_detects_and_reports_language() -> None:
    """The auto locale should detect the script and use its charmap."""

    result = SlugEngine(SlugConfig(locale="auto")).slugify("Привет мир")

    assert result.locale == "ru"
    assert result.slug == "privet-mir"


def test_detect_language_flag_reports_locale_without_switching_charmap() -> None:
    """Detection alone should populate the result locale."""

    result = SlugEngine(SlugConfig(detect_language=True)).slugify("Hello")

    assert result.locale == "en"
    assert result.slug == "hello"


def test_emoji_name_strategy_adds_words() -> None:
    """Named emojis should become their own words."""

    heart = chr(0x2764) + chr(0xFE0F)

    assert _slug(f"I {heart} Python", emojis="name") == "i-heart-python"
    assert _slug(f"I {heart} Python") == "i-python"


def test_strict_mode_is_authoritative_over_preserved_emojis() -> None:
    """Strict filtering should still drop emojis kept by the preserve strategy."""

    assert _slug(f"Launch {chr(0x1F680)}", emojis="preserve", mode="strict") == "launch"


def test_stop_words_are_removed_after_transliteration() -> None:
    """Stop-word removal should apply to the active locale."""

    assert _slug("The Quick Brown Fox", remove_stop_words=True) == "quick-brown-fox"
    assert _slug("در خانه", locale="fa", remove_stop_words=True) == "khane"


def test_custom_charmap_and_replacements() -> None:
    """Caller charmap entries and literal replacements should apply in order."""

    assert _slug("me@home", custom_charmap={"@": " at "}) == "me-at-home"
    assert _slug("I love C#", replacements=[("C#", "csharp")]) == "i-love-csharp"


def test_separator_and_case_options() -> None:
    """Separator and case style should shape the output."""

    assert _slug("Hello World", separator="_") == "hello_world"
    assert _slug("hello big world", case_style="camel") == "helloBigWorld"
    assert _slug("Hello World", separator="") == "helloworld"


def test_disabled_transliteration_keeps_accents() -> None:
    """Turning transliteration off should leave letters as they are."""

    assert _slug("Café Olé", transliterate=False) == "café-olé"


def test_remove_option_drops_literals() -> None:
    """The remove option should delete literal substrings after whitespace handling."""

    assert _slug("draft version two", remove="draft") == "version-two"


def test_remove_regex_keeps_preserved_spans() -> None:
    """A removal regex should not delete spans that were preserved."""

    slug = _slug("keep THIS ok", preserve="THIS", remove=re.compile(r"[^a-z-]"))

    assert slug == "keep-THIS-ok"


def test_disabled_trim_keeps_edge_separators() -> None:
    """With trim off, separators at the edges should remain."""

    assert _slug("-a-", trim=False) == "-a-"
    assert _slug("-a-") == "a"


def test_transforms_run_first_with_config() -> None:
    """Caller transforms should receive the text and the active config."""

    def shout(text: str, config: SlugConfig) -> str:
        return f"{text} {config.locale}"

    assert _slug("hi", transforms=[shout]) == "hi-en"


def test_counter_uniqueness_with_fresh_map() -> None:
    """A fresh map store should yield base, base-2, base-3."""

    engine = SlugEngine(SlugConfig(uniqueness=UniquenessOptions(store={})))

    assert [engine.slugify("Post").slug for _ in range(3)] == ["post", "post-2", "post-3"]
    assert engine.slugify("Post").unique_id == 4


def test_counter_uniqueness_without_store_uses_engine_counters() -> None:
    """Engines sharing a counter table should continue each other's counts."""

    counters = CounterStore()
    config = SlugConfig(uniqueness=UniquenessOptions())

    assert SlugEngine(config, counters=counters).slugify("a").slug == "a"
    assert SlugEngine(config, counters=counters).slugify("a").slug == "a-2"
    assert counters.get("a") == 2


def test_uniqueness_suffix_stays_within_max_length() -> None:
    """Suffixes should never push a slug over the limit."""

    engine = SlugEngine(SlugConfig(max_length=12, uniqueness=UniquenessOptions(store={})))
    engine.slugify("Hello World")

    second = engine.slugify("Hello World").slug

    assert second == "hello-worl-2"
    assert len(second) <= 12


@pytest.mark.parametrize(
    "text",
    ["Hello World!", "  multiple   spaces  ", "Crème Brûlée & Co.", "a--b__c", "Привет мир"],
)
def test_slugify_is_idempotent(text: str) -> None:
    """Re-slugifying a slug should not change it."""

    engine = SlugEngine()
    once = engine.slugify(text).slug

    assert engine.slugify(once).slug == once


@pytest.mark.parametrize("text", ["a - - b", "--x--y--", "one,,two", "  tail -  "])
def test_output_has_no_doubled_or_edge_separators(text: str) -> None:
    """Separators should be collapsed and trimmed."""

    slug = SlugEngine().slugify(text).slug

    assert "--" not in slug
    assert not slug.startswith("-")
    assert not slug.endswith("-")


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_blank_input_short_circuits(text: str) -> None:
    """Blank input should return an empty slug without running any step."""

    sink = io.StringIO()
    engine = SlugEngine(run_logger=RunLogger(sink, level="DEBUG"))

    result = engine.slugify(text)

    assert result.slug == ""
    assert result.original == text
    assert sink.getvalue() == ""


def test_invalid_input_is_rejected() -> None:
    """Non-string and oversized inputs should raise validation errors."""

    engine = SlugEngine()

    with pytest.raises(ValidationError) as non_string:
        engine.slugify(42)  # type: ignore[arg-type]
    with pytest.raises(ValidationError, match="maximum length"):
        engine.slugify("a" * 10_001)

    assert non_string.value.field == "input"


def test_invalid_config_is_rejected_before_running() -> None:
    """Constructing an engine with an invalid config should fail immediately."""

    with pytest.raises(ValidationError):
        SlugEngine(SlugConfig(mode="loose"))


def test_update_options_and_reset() -> None:
    """Engines should rebuild locale state on update and return to defaults on reset."""

    engine = SlugEngine()
    engine.update_options(locale="ru", separator="_")

    assert engine.slugify("Привет мир").slug == "privet_mir"

    engine.reset()

    assert engine.config == SlugConfig()


def test_verbose_logger_records_steps() -> None:
    """A supplied run logger should receive step and result events."""

    sink = io.StringIO()
    engine = SlugEngine(run_logger=RunLogger(sink, level="DEBUG"))

    engine.slugify("Hello")
    output = sink.getvalue()

    assert "[step] level=DEBUG step=detect event=skipped" in output
    assert "step=transliterate event=complete index=6 total=16" in output
    assert "step=pipeline event=result" in output


def test_batch_preserves_order_and_reports_progress() -> None:
    """Batch results should follow input order and report each item."""

    calls: list[tuple[int, int]] = []
    results = SlugEngine().slugify_batch(
        ["Hello World", "Foo Bar"],
        progress=lambda done, total: calls.append((done, total)),
    )

    assert [result.slug for result in results] == ["hello-world", "foo-bar"]
    assert calls == [(1, 2), (2, 2)]


def test_threaded_batch_matches_sequential_batch() -> None:
    """A threaded batch should return the same results in the same order."""

    texts = [f"Item number {index}" for index in range(50)]
    engine = SlugEngine()

    sequential = engine.slugify_batch(texts)
    threaded = engine.slugify_batch(texts, max_workers=4)

    assert threaded == sequential


def test_batch_reports_invalid_item_index() -> None:
    """An invalid item should be reported with its position before any work runs."""

    calls: list[tuple[int, int]] = []

    with pytest.raises(ValidationError) as exc_info:
        SlugEngine().slugify_batch(
            ["ok", None],  # type: ignore[list-item]
            progress=lambda done, total: calls.append((done, total)),
        )

    assert exc_info.value.field == "inputs[1]"
    assert exc_info.value.index == 1
    assert calls == []


def test_batch_rejects_plain_string() -> None:
    """A bare string should not be iterated as a batch of characters."""

    with pytest.raises(ValidationError):
        SlugEngine().slugify_batch("abc")
