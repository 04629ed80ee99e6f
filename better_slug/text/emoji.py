"""Emoji handling strategies.

Responsibilities:
- Recognize emoji sequences (pictographs, variation selectors, skin tones,
  zero-width-joiner chains, keycaps and flags).
- Remove them, replace them with a readable name, or with their code points.
"""

from __future__ import annotations

import unicodedata

import regex

EMOJI_STRATEGIES = ("remove", "name", "unicode", "preserve")

_MODIFIERS = r"[\uFE0E\uFE0F\U0001F3FB-\U0001F3FF]"
_KEYCAP_RE = r"[0-9#*]\uFE0F?\u20E3"
_FLAG_RE = r"[\U0001F1E6-\U0001F1FF]{2}"
_SEQUENCE_RE = (
    rf"\p{{Extended_Pictographic}}{_MODIFIERS}*"
    rf"(?:\u200D\p{{Extended_Pictographic}}{_MODIFIERS}*)*"
)
EMOJI_RE = regex.compile(rf"{_FLAG_RE}|{_KEYCAP_RE}|{_SEQUENCE_RE}")

_IGNORED_CODE_POINTS = frozenset({0xFE0F, 0xFE0E, 0x200D, 0x20E3})

_EMOJI_NAMES = {
    "\u2764": "heart",
    "\U0001f600": "grinning",
    "\U0001f602": "joy",
    "\U0001f603": "smile",
    "\U0001f604": "smile",
    "\U0001f60a": "blush",
    "\U0001f60d": "heart-eyes",
    "\U0001f622": "cry",
    "\U0001f60e": "cool",
    "\U0001f914": "thinking",
    "\U0001f44d": "thumbs-up",
    "\U0001f44e": "thumbs-down",
    "\U0001f44b": "wave",
    "\U0001f64f": "pray",
    "\U0001f525": "fire",
    "\U0001f680": "rocket",
    "\U0001f389": "party",
    "\U0001f4a1": "idea",
    "\U0001f4af": "hundred",
    "\u2b50": "star",
    "\U0001f31f": "star",
    "\u2705": "check",
    "\u274c": "cross",
    "\u26a0": "warning",
    "\u2600": "sun",
    "\U0001f319": "moon",
    "\U0001f30d": "earth",
    "\U0001f30e": "earth",
    "\U0001f30f": "earth",
    "\U0001f34e": "apple",
    "\U0001f355": "pizza",
    "\u2615": "coffee",
    "\U0001f37a": "beer",
    "\U0001f431": "cat",
    "\U0001f436": "dog",
    "\U0001f40d": "snake",
    "\U0001f4bb": "laptop",
    "\U0001f4f1": "phone",
    "\U0001f4e7": "email",
    "\U0001f3b5": "music",
    "\U0001f3c6": "trophy",
    "\U0001f381": "gift",
    "\U0001f4b0": "money",
    "\U0001f6a8": "alert",
}


def _code_points(sequence: str) -> list[int]:
    """Return meaningful code points of an emoji sequence."""

    return [ord(character) for character in sequence if ord(character) not in _IGNORED_CODE_POINTS]


def emoji_name(sequence: str) -> str:
    """Return a short lower-case name for an emoji sequence."""

    points = _code_points(sequence)
    if not points:
        return ""
    if all(0x1F1E6 <= point <= 0x1F1FF for point in points):
        return "flag-" + "".join(chr(point - 0x1F1E6 + ord("a")) for point in points)

    first = chr(points[0])
    if first in _EMOJI_NAMES:
        return _EMOJI_NAMES[first]
    if first.isdigit() or first in "#*":
        return {"#": "hash", "*": "asterisk"}.get(first, first)
    name = unicodedata.name(first, "")
    return name.lower().replace(" ", "-") if name else format(points[0], "x")


def emoji_code(sequence: str) -> str:
    """Return lower-case hex code points of an emoji sequence joined with `-`."""

    return "-".join(format(point, "x") for point in _code_points(sequence))


def transform_emojis(text: str, strategy: str) -> str:
    """Apply an emoji strategy (`remove`, `name`, `unicode`, `preserve`) to text."""

    if strategy == "preserve":
        return text
    if strategy == "name":
        return EMOJI_RE.sub(lambda match: f" {emoji_name(match.group(0))} ", text)
    if strategy == "unicode":
        return EMOJI_RE.sub(lambda match: f" {emoji_code(match.group(0))} ", text)
    return EMOJI_RE.sub("", text)
