"""Common Latin character map shared by every locale.

Responsibilities:
- Fold accented Latin letters and full-width forms to ASCII via NFKD.
- Spell out ligatures and letters that have no decomposition.
- Turn punctuation into word breaks, or drop it when it sits inside words.
"""

from __future__ import annotations

import unicodedata

_DECOMPOSABLE_RANGES = (
    range(0x00C0, 0x0250),
    range(0x1E00, 0x1F00),
    range(0xFF01, 0xFF5F),
)

_SPECIAL_LETTERS = {
    "ß": "ss",
    "ẞ": "SS",
    "Æ": "AE",
    "æ": "ae",
    "Œ": "OE",
    "œ": "oe",
    "Ø": "O",
    "ø": "o",
    "Đ": "D",
    "đ": "d",
    "Ł": "L",
    "ł": "l",
    "Þ": "TH",
    "þ": "th",
    "Ð": "D",
    "ð": "d",
    "ı": "i",
    "Ŋ": "NG",
    "ŋ": "ng",
    "Ħ": "H",
    "ħ": "h",
    "ƒ": "f",
}

# Characters that separate words.
WORD_BREAKS = (
    ".,/\\_:;|+=()[]{}<>*^%$#@~"
    "…–—•·«»‹›"
    "、。「」『』【】《》・〜"
)

# Characters that vanish without breaking the surrounding word.
DROPPED = "!?¡¿'\"`´‘’‚“”„"


def _punctuation_replacement(character: str) -> str | None:
    """Return the replacement for ASCII-range punctuation, or `None` if unhandled."""

    if character == "&":
        return " and "
    if character == "-":
        return "-"
    if character in WORD_BREAKS:
        return " "
    if character in DROPPED:
        return ""
    return None


def build_charmap() -> dict[str, str]:
    """Build the shared Latin map."""

    charmap: dict[str, str] = {}
    for block in _DECOMPOSABLE_RANGES:
        for code_point in block:
            character = chr(code_point)
            folded = (
                unicodedata.normalize("NFKD", character)
                .encode("ascii", "ignore")
                .decode("ascii")
            )
            if not folded:
                continue
            if folded.isalnum():
                charmap[character] = folded
                continue
            replacement = _punctuation_replacement(folded)
            if replacement is not None:
                charmap[character] = replacement

    charmap.update(_SPECIAL_LETTERS)
    for character in WORD_BREAKS + DROPPED + "&":
        replacement = _punctuation_replacement(character)
        if replacement is not None:
            charmap[character] = replacement
    return charmap


GERMAN_CHARMAP = {
    "ä": "ae",
    "ö": "oe",
    "ü": "ue",
    "Ä": "Ae",
    "Ö": "Oe",
    "Ü": "Ue",
}
