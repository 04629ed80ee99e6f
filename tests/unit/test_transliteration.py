"""Unit tests for the transliteration engine and the Persian rule set."""

from __future__ import annotations

import re

from better_slug.transliteration import (
    PERSIAN_RULES,
    TransliterationRule,
    Transliterator,
    build_transliterator,
    normalize_persian_word,
    sort_rules,
)


def test_charmap_lookup_prefers_longer_keys() -> None:
    """Digraph keys should win over their single-character prefixes."""

    transliterator = Transliterator({"a": "1", "ab": "X", "b": "2"})

    assert transliterator.transliterate("abab a b") == "XX 1 2"


def test_unmapped_characters_pass_through() -> None:
    """Characters without an entry should be kept as they are."""

    assert Transliterator({"x": "y"}).transliterate("x?z") == "y?z"


def test_word_overrides_win_over_rules() -> None:
    """A whole-word override should bypass rules and the charmap."""

    rule = TransliterationRule("upper-a", re.compile("a"), "A", priority=1)
    transliterator = Transliterator({}, rules=(rule,), word_overrides={"cat": "feline"})

    assert transliterator.transliterate("cat bat") == "feline bAt"


def test_overrides_match_the_word_core_inside_punctuation() -> None:
    """Overrides should apply to a word even when punctuation wraps it."""

    transliterator = Transliterator({"!": ""}, word_overrides={"cat": "feline"})

    assert transliterator.transliterate("(cat!)") == "(feline)"


def test_sort_rules_is_stable_by_descending_priority() -> None:
    """Higher priorities should run first; ties keep declaration order."""

    low = TransliterationRule("low", re.compile("x"), "y", priority=1)
    first = TransliterationRule("first", re.compile("x"), "y", priority=5)
    second = TransliterationRule("second", re.compile("x"), "y", priority=5)

    assert [rule.name for rule in sort_rules((low, first, second))] == ["first", "second", "low"]


def test_persian_rules_are_ordered_by_priority() -> None:
    """The Persian rule set should be applied highest priority first."""

    transliterator = build_transliterator("fa")
    priorities = [rule.priority for rule in transliterator.rules]

    assert priorities == sorted(priorities, reverse=True)
    assert len(transliterator.rules) == len(PERSIAN_RULES)


def test_persian_overrides_produce_known_words() -> None:
    """Frequent Persian words should come from the override table."""

    transliterator = build_transliterator("fa")

    assert transliterator.transliterate("سلام دنیا") == "salam donya"
    assert transliterator.transliterate("کتاب") == "ketab"


def test_persian_contextual_rules_pick_vowel_readings() -> None:
    """Vav and yeh should read as vowels between consonants and at word ends."""

    transliterator = build_transliterator("fa")

    assert transliterator.transliterate("خواب") == "khab"
    assert transliterator.transliterate("دوست") == "dust"
    assert transliterator.transliterate("بازی") == "bazi"


def test_persian_normalizer_folds_arabic_variants() -> None:
    """Arabic yeh and kaf should fold into their Persian forms."""

    assert normalize_persian_word("كي") == "کی"
    assert normalize_persian_word("می" + chr(0x200C) + "روم") == "میروم"


def test_persian_transliterator_keeps_latin_words() -> None:
    """Latin words mixed into Persian text should not be mapped again."""

    assert build_transliterator("fa").transliterate("iPhone سلام") == "iPhone salam"


def test_custom_charmap_overrides_locale_entries() -> None:
    """Caller entries should win over locale entries."""

    transliterator = build_transliterator("de", {"ä": "a"})

    assert transliterator.transliterate("Bär") == "Bar"


def test_locale_transliterators_cover_scripts() -> None:
    """Each script locale should romanize its sample words."""

    assert build_transliterator("ru").transliterate("Привет мир") == "Privet mir"
    assert build_transliterator("ko").transliterate("한국") == "hanguk"
    assert build_transliterator("zh").transliterate("中国").split() == ["zhong", "guo"]
    assert build_transliterator("de").transliterate("Größe") == "Groesse"
