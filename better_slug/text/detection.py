"""Script-histogram language detection.

Responsibilities:
- Count code points per known script range and pick the dominant one.
- Map the winning range to its first registered language.
- Report right-to-left direction for detected text.
"""

from __future__ import annotations

from dataclasses import dataclass

import regex

from ..locales import is_rtl_locale

_LATIN_RE = regex.compile(r"\p{Latin}")


@dataclass(frozen=True, slots=True)
class ScriptRange:
    """Code-point range associated with the languages written in it.

    Attributes:
        name: Script name, used only for diagnostics.
        pattern: Compiled character class matching the range.
        languages: Locale codes written in this script; the first one wins.
    """

    name: str
    pattern: regex.Pattern[str]
    languages: tuple[str, ...]


def _block(first: int, last: int) -> regex.Pattern[str]:
    """Compile a character class spanning one code-point block."""

    return regex.compile(f"[{chr(first)}-{chr(last)}]")


DEFAULT_SCRIPT_RANGES = (
    ScriptRange("arabic", _block(0x0600, 0x06FF), ("ar", "fa", "ur")),
    ScriptRange("cjk", _block(0x4E00, 0x9FFF), ("zh",)),
    ScriptRange("kana", _block(0x3040, 0x30FF), ("ja",)),
    ScriptRange("hangul", _block(0xAC00, 0xD7AF), ("ko",)),
    ScriptRange("cyrillic", _block(0x0400, 0x04FF), ("ru", "uk", "bg", "sr", "be")),
    ScriptRange("hebrew", _block(0x0590, 0x05FF), ("he",)),
    ScriptRange("devanagari", _block(0x0900, 0x097F), ("hi",)),
    ScriptRange("thai", _block(0x0E00, 0x0E7F), ("th",)),
)


class LanguageDetector:
    """Classify text by the script range holding the most code points."""

    def __init__(self, ranges: tuple[ScriptRange, ...] = DEFAULT_SCRIPT_RANGES) -> None:
        """Initialize detector with ranges in tie-break order."""

        self._ranges = ranges

    def detect(self, text: str) -> str | None:
        """Return a locale code for `text`, or `None` when nothing matches.

        Ties between ranges go to the range registered first. Text with no
        scripted characters but at least one Latin letter is reported as `en`.
        """

        best_language: str | None = None
        best_count = 0
        for script_range in self._ranges:
            count = len(script_range.pattern.findall(text))
            if count > best_count:
                best_count = count
                best_language = script_range.languages[0]
        if best_language is not None:
            return best_language
        if _LATIN_RE.search(text):
            return "en"
        return None

    def is_rtl(self, text: str) -> bool:
        """Return whether the detected language of `text` is written right to left."""

        detected = self.detect(text)
        return detected is not None and is_rtl_locale(detected)


_DEFAULT_DETECTOR = LanguageDetector()


def detect_language(text: str) -> str | None:
    """Detect the language of `text` with the default script ranges."""

    return _DEFAULT_DETECTOR.detect(text)


def is_rtl(text: str) -> bool:
    """Return whether `text` is detected as a right-to-left language."""

    return _DEFAULT_DETECTOR.is_rtl(text)
