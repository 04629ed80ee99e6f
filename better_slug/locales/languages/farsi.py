"""Persian (Finglish) character map, word overrides and stop words.

Letter values are consonant-first: short vowels are not written in Persian
script, so vowel quality comes from the contextual rules in
`better_slug.transliteration.persian` and from the word overrides below.
"""

from __future__ import annotations

from .arabic import ARABIC_SCRIPT_COMMON

CHARMAP = {
    **ARABIC_SCRIPT_COMMON,
    "ا": "a",
    "آ": "a",
    "ب": "b",
    "پ": "p",
    "ت": "t",
    "ث": "s",
    "ج": "j",
    "چ": "ch",
    "ح": "h",
    "خ": "kh",
    "د": "d",
    "ذ": "z",
    "ر": "r",
    "ز": "z",
    "ژ": "zh",
    "س": "s",
    "ش": "sh",
    "ص": "s",
    "ض": "z",
    "ط": "t",
    "ظ": "z",
    "ع": "a",
    "غ": "gh",
    "ف": "f",
    "ق": "gh",
    "ک": "k",
    "گ": "g",
    "ل": "l",
    "م": "m",
    "ن": "n",
    "و": "v",
    "ه": "h",
    "ی": "y",
    "ئ": "y",
    "أ": "a",
    "إ": "e",
    "ؤ": "o",
    "ة": "h",
    "ۀ": "e",
    "ى": "a",
    "ي": "y",
    "ك": "k",
    "َ": "a",
    "ِ": "e",
    "ُ": "o",
    "ً": "an",
    "ٍ": "en",
    "ٌ": "on",
    "ّ": "",
    "ْ": "",
}

# Whole words whose pronunciation the letter rules cannot recover.
WORD_OVERRIDES = {
    "سلام": "salam",
    "دنیا": "donya",
    "و": "va",
    "است": "ast",
    "این": "in",
    "آن": "an",
    "که": "ke",
    "به": "be",
    "از": "az",
    "با": "ba",
    "را": "ra",
    "در": "dar",
    "بر": "bar",
    "برای": "baraye",
    "اگر": "agar",
    "اما": "amma",
    "یا": "ya",
    "نه": "na",
    "هم": "ham",
    "خود": "khod",
    "شد": "shod",
    "شود": "shavad",
    "شده": "shode",
    "کرد": "kard",
    "کند": "konad",
    "کرده": "karde",
    "بود": "bood",
    "باشد": "bashad",
    "بوده": "boode",
    "دارد": "darad",
    "داشت": "dasht",
    "داشته": "dashte",
    "خواهد": "khahad",
    "خواست": "khast",
    "خواسته": "khaste",
    "توان": "tavan",
    "توانست": "tavanest",
    "توانسته": "tavaneste",
    "رفت": "raft",
    "رود": "ravad",
    "رفته": "rafte",
    "آمد": "amad",
    "آید": "ayad",
    "آمده": "amade",
    "گفت": "goft",
    "گوید": "goyad",
    "گفته": "gofte",
    "دید": "did",
    "بیند": "binad",
    "دیده": "dide",
    "خورد": "khord",
    "خورده": "khorde",
    "نوشت": "nevesht",
    "نویسد": "nevisad",
    "نوشته": "neveshte",
    "من": "man",
    "تو": "to",
    "او": "oo",
    "ما": "ma",
    "شما": "shoma",
    "آنها": "anha",
    "ایران": "iran",
    "تهران": "tehran",
    "کتاب": "ketab",
    "خانه": "khane",
    "فارسی": "farsi",
}

_SCRIPT_STOP_WORDS = {
    "و", "در", "به", "از", "که", "این", "را", "با", "است", "آن",
    "برای", "یک", "بر", "تا", "هم", "می", "یا", "اما", "اگر", "نه",
    "همه", "ما", "من", "او", "شما", "آنها", "اینها", "آنان",
}

# Finglish forms, so the set still matches after transliteration.
_FINGLISH_STOP_WORDS = {
    "va", "dar", "be", "az", "ke", "in", "ra", "ba", "ast", "an",
    "baraye", "yek", "bar", "ta", "ham", "mi", "ya", "amma", "agar", "na",
    "hame", "ma", "man", "oo", "shoma", "anha", "inha", "anan",
}

STOP_WORDS = frozenset(_SCRIPT_STOP_WORDS | _FINGLISH_STOP_WORDS)
