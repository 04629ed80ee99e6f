"""Transliteration engine and locale rule sets."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from ..locales import charmap_view, get_word_overrides, merge_charmaps
from .engine import Transliterator
from .persian import PERSIAN_RULES, build_persian_transliterator, normalize_persian_word
from .rules import TransliterationRule, sort_rules

_RULE_SET_BUILDERS: Mapping[str, Callable[[Mapping[str, str]], Transliterator]] = {
    "fa": build_persian_transliterator,
}


def build_transliterator(
    locale: str,
    custom_charmap: Mapping[str, str] | None = None,
) -> Transliterator:
    """Build the transliterator for `locale`, overlaying caller charmap entries."""

    charmap: Mapping[str, str] = charmap_view(locale)
    if custom_charmap:
        charmap = merge_charmaps(charmap, custom_charmap)

    builder = _RULE_SET_BUILDERS.get(locale)
    if builder is not None:
        return builder(charmap)
    return Transliterator(charmap, word_overrides=get_word_overrides(locale) or None)


__all__ = [
    "PERSIAN_RULES",
    "TransliterationRule",
    "Transliterator",
    "build_persian_transliterator",
    "build_transliterator",
    "normalize_persian_word",
    "sort_rules",
]
