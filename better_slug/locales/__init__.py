"""Read-only locale registry.

Responsibilities:
- Map locale codes to language metadata, character maps and stop words.
- Layer every locale character map over the common Latin map.
- Build each layered map once and hand out immutable views or fresh copies.

Key types:
- `LanguageInfo` records keyed by locale code in `LANGUAGES`.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from functools import lru_cache
from types import MappingProxyType

from ..models.datatypes import LanguageInfo
from .languages import (
    arabic,
    chinese,
    common,
    cyrillic,
    farsi,
    greek,
    hebrew,
    hindi,
    japanese,
    korean,
    stopwords,
    thai,
)

RTL_LOCALES = frozenset({"ar", "fa", "he", "ur"})

_LANGUAGE_NAMES = (
    ("en", "English", "English"),
    ("fa", "Persian", "فارسی"),
    ("ar", "Arabic", "العربية"),
    ("zh", "Chinese", "中文"),
    ("ja", "Japanese", "日本語"),
    ("ko", "Korean", "한국어"),
    ("ru", "Russian", "Русский"),
    ("de", "German", "Deutsch"),
    ("fr", "French", "Français"),
    ("es", "Spanish", "Español"),
    ("it", "Italian", "Italiano"),
    ("pt", "Portuguese", "Português"),
    ("nl", "Dutch", "Nederlands"),
    ("sv", "Swedish", "Svenska"),
    ("no", "Norwegian", "Norsk"),
    ("da", "Danish", "Dansk"),
    ("fi", "Finnish", "Suomi"),
    ("is", "Icelandic", "Íslenska"),
    ("pl", "Polish", "Polski"),
    ("cs", "Czech", "Čeština"),
    ("sk", "Slovak", "Slovenčina"),
    ("hu", "Hungarian", "Magyar"),
    ("ro", "Romanian", "Română"),
    ("bg", "Bulgarian", "Български"),
    ("hr", "Croatian", "Hrvatski"),
    ("sr", "Serbian", "Српски"),
    ("uk", "Ukrainian", "Українська"),
    ("be", "Belarusian", "Беларуская"),
    ("el", "Greek", "Ελληνικά"),
    ("tr", "Turkish", "Türkçe"),
    ("he", "Hebrew", "עברית"),
    ("hi", "Hindi", "हिन्दी"),
    ("bn", "Bengali", "বাংলা"),
    ("ta", "Tamil", "தமிழ்"),
    ("te", "Telugu", "తెలుగు"),
    ("th", "Thai", "ไทย"),
    ("vi", "Vietnamese", "Tiếng Việt"),
    ("id", "Indonesian", "Bahasa Indonesia"),
    ("ms", "Malay", "Bahasa Melayu"),
    ("tl", "Tagalog", "Tagalog"),
    ("ur", "Urdu", "اردو"),
    ("gu", "Gujarati", "ગુજરાતી"),
    ("kn", "Kannada", "ಕನ್ನಡ"),
    ("ml", "Malayalam", "മലയാളം"),
    ("si", "Sinhala", "සිංහල"),
    ("my", "Burmese", "မြန်မာ"),
    ("ka", "Georgian", "ქართული"),
    ("am", "Amharic", "አማርኛ"),
    ("km", "Khmer", "ខ្មែរ"),
    ("lo", "Lao", "ລາວ"),
)

LANGUAGES: Mapping[str, LanguageInfo] = MappingProxyType(
    {
        code: LanguageInfo(
            code=code,
            name=name,
            native_name=native_name,
            direction="rtl" if code in RTL_LOCALES else "ltr",
        )
        for code, name, native_name in _LANGUAGE_NAMES
    }
)

SUPPORTED_LOCALES: tuple[str, ...] = tuple(LANGUAGES)

_CHARMAP_LOADERS: Mapping[str, Callable[[], Mapping[str, str]]] = MappingProxyType(
    {
        "de": lambda: common.GERMAN_CHARMAP,
        "fa": lambda: farsi.CHARMAP,
        "ar": lambda: arabic.CHARMAP,
        "ur": lambda: arabic.URDU_CHARMAP,
        "zh": lambda: chinese.CHARMAP,
        "ja": lambda: japanese.CHARMAP,
        "ko": korean.build_charmap,
        "ru": lambda: cyrillic.CHARMAP,
        "be": lambda: cyrillic.CHARMAP,
        "uk": lambda: cyrillic.UKRAINIAN_CHARMAP,
        "bg": lambda: cyrillic.BULGARIAN_CHARMAP,
        "sr": lambda: cyrillic.SERBIAN_CHARMAP,
        "el": lambda: greek.CHARMAP,
        "he": lambda: hebrew.CHARMAP,
        "hi": lambda: hindi.CHARMAP,
        "th": lambda: thai.CHARMAP,
    }
)

_STOP_WORDS: Mapping[str, frozenset[str]] = MappingProxyType(
    {
        "en": stopwords.ENGLISH,
        "de": stopwords.GERMAN,
        "fr": stopwords.FRENCH,
        "es": stopwords.SPANISH,
        "it": stopwords.ITALIAN,
        "pt": stopwords.PORTUGUESE,
        "ru": cyrillic.STOP_WORDS,
        "fa": farsi.STOP_WORDS,
        "ar": arabic.STOP_WORDS,
        "zh": chinese.STOP_WORDS,
        "ja": japanese.STOP_WORDS,
    }
)

_WORD_OVERRIDES: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {"fa": MappingProxyType(farsi.WORD_OVERRIDES)}
)

_EMPTY_MAPPING: Mapping[str, str] = MappingProxyType({})


def merge_charmaps(*charmaps: Mapping[str, str]) -> dict[str, str]:
    """Merge character maps left to right; later maps win on shared keys."""

    merged: dict[str, str] = {}
    for charmap in charmaps:
        merged.update(charmap)
    return merged


@lru_cache(maxsize=1)
def _common_view() -> Mapping[str, str]:
    """Return the shared Latin map, built on first use."""

    return MappingProxyType(common.build_charmap())


@lru_cache(maxsize=None)
def charmap_view(locale: str) -> Mapping[str, str]:
    """Return a read-only layered character map for `locale`.

    Unknown locales and locales without a dedicated table get the common map.
    """

    loader = _CHARMAP_LOADERS.get(locale)
    if loader is None:
        return _common_view()
    return MappingProxyType(merge_charmaps(_common_view(), loader()))


def get_charmap(locale: str) -> dict[str, str]:
    """Return a mutable copy of the layered character map for `locale`."""

    return dict(charmap_view(locale))


def has_charmap(locale: str) -> bool:
    """Return whether `locale` ships a dedicated table beyond the common map."""

    return locale in _CHARMAP_LOADERS


def get_stop_words(locale: str) -> frozenset[str]:
    """Return lower-case stop words for `locale`, empty when none are registered."""

    return _STOP_WORDS.get(locale, frozenset())


def get_word_overrides(locale: str) -> Mapping[str, str]:
    """Return whole-word overrides for `locale`, empty when none are registered."""

    return _WORD_OVERRIDES.get(locale, _EMPTY_MAPPING)


def get_language_info(locale: str) -> LanguageInfo | None:
    """Return metadata for a supported locale, or `None`."""

    return LANGUAGES.get(locale)


def supported_locales() -> tuple[str, ...]:
    """Return every supported locale code in registration order."""

    return SUPPORTED_LOCALES


def is_supported_locale(locale: str) -> bool:
    """Return whether `locale` is a registered locale code."""

    return locale in LANGUAGES


def is_rtl_locale(locale: str) -> bool:
    """Return whether `locale` is written right to left."""

    return locale in RTL_LOCALES


__all__ = [
    "LANGUAGES",
    "RTL_LOCALES",
    "SUPPORTED_LOCALES",
    "charmap_view",
    "get_charmap",
    "get_language_info",
    "get_stop_words",
    "get_word_overrides",
    "has_charmap",
    "is_rtl_locale",
    "is_supported_locale",
    "merge_charmaps",
    "supported_locales",
]
