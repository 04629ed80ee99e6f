"""Arabic-script character maps and stop words."""

from __future__ import annotations

# Digits and punctuation shared by every Arabic-script locale.
ARABIC_SCRIPT_COMMON = {
    **{chr(0x0660 + digit): str(digit) for digit in range(10)},
    **{chr(0x06F0 + digit): str(digit) for digit in range(10)},
    "،": " ",
    "؛": " ",
    "؟": "",
    "٪": " ",
    "٬": " ",
    "٫": " ",
    "ـ": "",
    "\u200c": "",
    "ء": "",
}

CHARMAP = {
    **ARABIC_SCRIPT_COMMON,
    "ا": "a",
    "أ": "a",
    "إ": "i",
    "آ": "aa",
    "ب": "b",
    "ت": "t",
    "ث": "th",
    "ج": "j",
    "ح": "h",
    "خ": "kh",
    "د": "d",
    "ذ": "dh",
    "ر": "r",
    "ز": "z",
    "س": "s",
    "ش": "sh",
    "ص": "s",
    "ض": "d",
    "ط": "t",
    "ظ": "dh",
    "ع": "a",
    "غ": "gh",
    "ف": "f",
    "ق": "q",
    "ك": "k",
    "ل": "l",
    "م": "m",
    "ن": "n",
    "ه": "h",
    "و": "w",
    "ي": "y",
    "ى": "a",
    "ة": "h",
    "ؤ": "w",
    "ئ": "y",
    "َ": "a",
    "ُ": "u",
    "ِ": "i",
    "ً": "an",
    "ٌ": "un",
    "ٍ": "in",
    "ّ": "",
    "ْ": "",
}

URDU_CHARMAP = {
    **CHARMAP,
    "ٹ": "t",
    "ڈ": "d",
    "ڑ": "r",
    "ں": "n",
    "ھ": "h",
    "ہ": "h",
    "ے": "e",
    "ی": "i",
    "پ": "p",
    "چ": "ch",
    "ژ": "zh",
    "ک": "k",
    "گ": "g",
}

STOP_WORDS = frozenset(
    {
        "في", "من", "إلى", "على", "هذا", "ذلك", "التي", "الذي", "كان", "قد",
        "مع", "أن", "لم", "ما", "هو", "هي", "نحن", "أنت", "أنتم", "هم",
        "عن", "بعد", "قبل", "عند", "ليس", "كل", "بعض", "أي", "أو", "و",
    }
)
