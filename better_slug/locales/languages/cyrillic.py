"""Cyrillic romanization maps for Russian and related locales.

Only lower-case tables are written out; capitals are derived from them.
"""

from __future__ import annotations

_RUSSIAN = {
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "е": "e",
    "ё": "yo", "ж": "zh", "з": "z", "и": "i", "й": "y", "к": "k",
    "л": "l", "м": "m", "н": "n", "о": "o", "п": "p", "р": "r",
    "с": "s", "т": "t", "у": "u", "ф": "f", "х": "kh", "ц": "ts",
    "ч": "ch", "ш": "sh", "щ": "shch", "ъ": "", "ы": "y", "ь": "",
    "э": "e", "ю": "yu", "я": "ya",
    # Ukrainian and Belarusian letters.
    "ґ": "g", "є": "ye", "і": "i", "ї": "yi", "ў": "u",
    # Serbian and Macedonian letters.
    "ђ": "dj", "ј": "j", "љ": "lj", "њ": "nj", "ћ": "c", "џ": "dz",
    "ѓ": "gj", "ќ": "kj", "ѕ": "dz",
}

_UKRAINIAN = {"г": "h", "и": "y", "й": "i"}
_BULGARIAN = {"щ": "sht", "ъ": "a", "ю": "yu", "я": "ya"}
_SERBIAN = {"ц": "c", "ч": "c", "ш": "s", "ж": "z", "х": "h"}


def _with_capitals(lower: dict[str, str]) -> dict[str, str]:
    """Add capitalized keys mirroring a lower-case table."""

    charmap = dict(lower)
    for letter, latin in lower.items():
        charmap[letter.upper()] = latin.capitalize()
    return charmap


CHARMAP = _with_capitals(_RUSSIAN)
UKRAINIAN_CHARMAP = _with_capitals({**_RUSSIAN, **_UKRAINIAN})
BULGARIAN_CHARMAP = _with_capitals({**_RUSSIAN, **_BULGARIAN})
SERBIAN_CHARMAP = _with_capitals({**_RUSSIAN, **_SERBIAN})

STOP_WORDS = frozenset(
    {
        "и", "в", "во", "не", "что", "он", "на", "я", "с", "со", "как",
        "а", "то", "все", "она", "так", "его", "но", "да", "ты", "к", "у",
        "же", "вы", "за", "бы", "по", "только", "ее", "мне", "было", "вот",
        "от", "меня", "еще", "нет", "о", "из", "ему", "теперь", "когда",
        "даже", "ну", "вдруг", "ли", "если", "уже", "или", "ни", "быть",
        "был", "него", "до", "вас", "нибудь", "опять", "уж", "вам", "ведь",
    }
)
