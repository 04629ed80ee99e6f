"""Korean romanization map.

Precomposed Hangul syllables are decomposed arithmetically into initial,
medial and final jamo and romanized with a simplified Revised Romanization.
"""

from __future__ import annotations

_SYLLABLE_BASE = 0xAC00
_SYLLABLE_COUNT = 11172
_MEDIAL_COUNT = 21
_FINAL_COUNT = 28

_INITIALS = (
    "g", "kk", "n", "d", "tt", "r", "m", "b", "pp", "s",
    "ss", "", "j", "jj", "ch", "k", "t", "p", "h",
)
_MEDIALS = (
    "a", "ae", "ya", "yae", "eo", "e", "yeo", "ye", "o", "wa", "wae",
    "oe", "yo", "u", "wo", "we", "wi", "yu", "eu", "ui", "i",
)
_FINALS = (
    "", "k", "k", "k", "n", "n", "n", "t", "l", "k", "m", "l", "l", "l",
    "p", "l", "m", "p", "p", "t", "t", "ng", "t", "t", "k", "t", "p", "t",
)

_COMPATIBILITY_JAMO = {
    "ㄱ": "g", "ㄲ": "kk", "ㄴ": "n", "ㄷ": "d", "ㄸ": "tt", "ㄹ": "r",
    "ㅁ": "m", "ㅂ": "b", "ㅃ": "pp", "ㅅ": "s", "ㅆ": "ss", "ㅇ": "",
    "ㅈ": "j", "ㅉ": "jj", "ㅊ": "ch", "ㅋ": "k", "ㅌ": "t", "ㅍ": "p",
    "ㅎ": "h", "ㅏ": "a", "ㅐ": "ae", "ㅑ": "ya", "ㅒ": "yae", "ㅓ": "eo",
    "ㅔ": "e", "ㅕ": "yeo", "ㅖ": "ye", "ㅗ": "o", "ㅘ": "wa", "ㅙ": "wae",
    "ㅚ": "oe", "ㅛ": "yo", "ㅜ": "u", "ㅝ": "wo", "ㅞ": "we", "ㅟ": "wi",
    "ㅠ": "yu", "ㅡ": "eu", "ㅢ": "ui", "ㅣ": "i",
}


def romanize_syllable(syllable: str) -> str:
    """Romanize one precomposed Hangul syllable."""

    index = ord(syllable) - _SYLLABLE_BASE
    if not 0 <= index < _SYLLABLE_COUNT:
        raise ValueError(f"Not a precomposed Hangul syllable: {syllable!r}")
    initial, rest = divmod(index, _MEDIAL_COUNT * _FINAL_COUNT)
    medial, final = divmod(rest, _FINAL_COUNT)
    return _INITIALS[initial] + _MEDIALS[medial] + _FINALS[final]


def build_charmap() -> dict[str, str]:
    """Build the complete syllable and jamo map."""

    charmap = {
        chr(_SYLLABLE_BASE + offset): romanize_syllable(chr(_SYLLABLE_BASE + offset))
        for offset in range(_SYLLABLE_COUNT)
    }
    charmap.update(_COMPATIBILITY_JAMO)
    return charmap
