"""Locale-independent string primitives used by the slug pipeline.

Responsibilities:
- Collapse and trim separators with literal linear scans.
- Normalize whitespace runs into a separator.
- Apply case styles and truncation strategies.

Every function returns a new string and leaves its input untouched.
"""

from __future__ import annotations

from collections.abc import Sequence
import re

from ..models.datatypes import TruncationResult

CASE_STYLES = ("lower", "upper", "title", "sentence", "camel", "pascal", "preserve")
TRUNCATE_STRATEGIES = ("word", "char", "smart")

_TITLE_WORD_START_RE = re.compile(r"\b\w")


def collapse_separators(text: str, separator: str) -> str:
    """Replace every run of consecutive separators with a single separator."""

    if not text or not separator:
        return text

    width = len(separator)
    pieces: list[str] = []
    index = 0
    last_was_separator = False
    while index < len(text):
        if text.startswith(separator, index):
            if not last_was_separator:
                pieces.append(separator)
            last_was_separator = True
            index += width
            continue
        pieces.append(text[index])
        last_was_separator = False
        index += 1
    return "".join(pieces)


def trim_separators(text: str, separator: str) -> str:
    """Strip leading and trailing separators."""

    if not text or not separator:
        return text

    width = len(separator)
    start = 0
    end = len(text)
    while start < end and text.startswith(separator, start):
        start += width
    while end - width >= start and text.endswith(separator, start, end):
        end -= width
    return text[start:end]


def normalize_whitespace(text: str, replacement: str = " ") -> str:
    """Trim surrounding whitespace and turn each inner whitespace run into `replacement`."""

    pieces: list[str] = []
    last_was_space = False
    for character in text.strip():
        if character.isspace():
            if not last_was_space:
                pieces.append(replacement)
            last_was_space = True
            continue
        pieces.append(character)
        last_was_space = False
    return "".join(pieces)


def _split_words(text: str, separator: str) -> list[str]:
    """Split on the separator, hyphens, underscores and whitespace."""

    boundary = r"[-_\s]+"
    if separator:
        boundary = rf"(?:{re.escape(separator)}|[-_\s])+"
    return [word for word in re.split(boundary, text) if word]


def apply_case(text: str, case_style: str, separator: str = "-") -> str:
    """Apply one of the supported case styles.

    `camel` and `pascal` join separator-delimited words; the other styles keep
    separators in place.
    """

    if case_style == "lower":
        return text.lower()
    if case_style == "upper":
        return text.upper()
    if case_style == "title":
        return _TITLE_WORD_START_RE.sub(lambda match: match.group(0).upper(), text)
    if case_style == "sentence":
        return text[:1].upper() + text[1:].lower()
    if case_style in {"camel", "pascal"}:
        words = _split_words(text, separator)
        joined = "".join(word[:1].upper() + word[1:].lower() for word in words)
        if case_style == "camel":
            return joined[:1].lower() + joined[1:]
        return joined
    return text


def truncate(
    text: str,
    max_length: int,
    strategy: str,
    separator: str = "-",
) -> TruncationResult:
    """Shorten text to `max_length` using the `char`, `word` or `smart` strategy."""

    if len(text) <= max_length:
        return TruncationResult(text=text, truncated=False)

    hard_cut = text[:max_length]
    if strategy == "char" or not separator:
        return TruncationResult(text=hard_cut, truncated=True)

    if strategy == "word":
        last_separator = hard_cut.rfind(separator)
        if last_separator > 0:
            return TruncationResult(text=hard_cut[:last_separator], truncated=True)
        return TruncationResult(text=hard_cut, truncated=True)

    kept: list[str] = []
    current_length = 0
    for segment in text.split(separator):
        next_length = current_length + len(segment) + (len(separator) if kept else 0)
        if next_length > max_length:
            break
        kept.append(segment)
        current_length = next_length
    rebuilt = separator.join(kept)
    return TruncationResult(text=rebuilt or hard_cut, truncated=True)


def remove_chars(
    text: str,
    pattern: str | Sequence[str] | re.Pattern[str] | None,
    keep: str = "",
) -> str:
    """Delete every match of a regex, a literal substring, or each of several literals.

    Characters listed in `keep` are never deleted: the text is split around
    them and only the pieces in between are filtered.
    """

    if not pattern:
        return text
    if keep:
        pieces = re.split(f"([{re.escape(keep)}])", text)
        return "".join(
            piece if index % 2 else _remove_matches(piece, pattern)
            for index, piece in enumerate(pieces)
        )
    return _remove_matches(text, pattern)


def _remove_matches(text: str, pattern: str | Sequence[str] | re.Pattern[str]) -> str:
    """Delete matches of one removal pattern from text."""

    if isinstance(pattern, re.Pattern):
        return pattern.sub("", text)
    if isinstance(pattern, str):
        return text.replace(pattern, "")

    result = text
    for literal in pattern:
        if literal:
            result = result.replace(literal, "")
    return result
