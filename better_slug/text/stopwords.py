"""Stop-word elision on whitespace-delimited tokens."""

from __future__ import annotations

from collections.abc import Iterable
import re

from ..locales import get_stop_words

_WHITESPACE_RE = re.compile(r"\s+")


def remove_stop_words(text: str, locales: Iterable[str]) -> str:
    """Drop tokens whose case-folded form is a stop word of any given locale.

    Tokens are split on whitespace runs and rejoined with single spaces.
    Locales without registered stop words are ignored.
    """

    stop_words: set[str] = set()
    for locale in locales:
        stop_words.update(get_stop_words(locale))
    if not stop_words:
        return text

    tokens = [token for token in _WHITESPACE_RE.split(text) if token]
    kept = [token for token in tokens if token.casefold() not in stop_words]
    return " ".join(kept)
