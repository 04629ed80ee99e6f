"""Persian to Finglish rule set.

Persian script omits short vowels and writes `و` and `ی` both as consonants
(v, y) and as long vowels (u/o, i). The rules below pick a reading from the
letter position and its neighbours; whole-word overrides cover frequent words
the rules would get wrong.
"""

from __future__ import annotations

from collections.abc import Mapping
import re

from ..locales import get_word_overrides
from .engine import Transliterator
from .rules import TransliterationRule

_PERSIAN_CONSONANTS = "بپتثجچحخدذرزژسشصضطظغفقکگلمنعه"
_LATIN_CONSONANTS = "bcdfghjklmnpqrstvxz"
_CONSONANT = f"[{_PERSIAN_CONSONANTS}{_LATIN_CONSONANTS}]"

_SCRIPT_VARIANTS = str.maketrans(
    {
        "ي": "ی",
        "ى": "ی",
        "ك": "ک",
        "ة": "ه",
        "أ": "ا",
        "إ": "ا",
        "ؤ": "و",
        chr(0x200C): None,
        "ـ": None,
    }
)


def normalize_persian_word(word: str) -> str:
    """Fold Arabic letter variants into Persian forms and drop ZWNJ and tatweel."""

    return word.translate(_SCRIPT_VARIANTS)


PERSIAN_RULES = (
    TransliterationRule("kha-cluster", re.compile("خوا"), "kha", priority=100),
    TransliterationRule("initial-ey", re.compile("^ای"), "i", priority=90),
    TransliterationRule("initial-ow", re.compile("^او"), "o", priority=90),
    TransliterationRule("vav-before-alef", re.compile("و(?=ا)"), "v", priority=80),
    TransliterationRule("yeh-before-alef", re.compile("ی(?=ا)"), "y", priority=80),
    TransliterationRule("initial-vav", re.compile("^و"), "v", priority=70),
    TransliterationRule("initial-yeh", re.compile("^ی"), "y", priority=70),
    TransliterationRule(
        "medial-vav",
        re.compile(f"(?<={_CONSONANT})و(?={_CONSONANT})"),
        "u",
        priority=60,
    ),
    TransliterationRule(
        "medial-yeh",
        re.compile(f"(?<={_CONSONANT})ی(?={_CONSONANT})"),
        "i",
        priority=60,
    ),
    TransliterationRule("final-vav", re.compile(f"(?<={_CONSONANT})و$"), "o", priority=50),
    TransliterationRule("final-yeh", re.compile(f"(?<={_CONSONANT})ی$"), "i", priority=50),
    TransliterationRule("final-heh", re.compile(f"(?<={_CONSONANT})ه$"), "e", priority=50),
)


def build_persian_transliterator(charmap: Mapping[str, str]) -> Transliterator:
    """Return a transliterator wired with Persian rules, overrides and normalization."""

    return Transliterator(
        charmap,
        rules=PERSIAN_RULES,
        word_overrides=get_word_overrides("fa"),
        normalizer=normalize_persian_word,
    )
