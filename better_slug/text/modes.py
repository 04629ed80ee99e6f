"""Mode-specific character filters.

Responsibilities:
- Provide one composable filter per output mode.
- Keep preserved-span placeholders intact regardless of the mode policy.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Protocol

import regex

SLUG_MODES = ("normal", "strict", "pretty", "rfc3986", "filename", "id")

_ID_PREFIX = "id-"
_ID_START_RE = regex.compile(r"[a-zA-Z]")


@lru_cache(maxsize=128)
def _drop_pattern(template: str, keep: str) -> regex.Pattern[str]:
    """Compile a negated character class extended with placeholder characters."""

    return regex.compile(template.format(keep=regex.escape(keep)))


class ModeFilter(Protocol):
    """Protocol for mode filters."""

    def apply(self, text: str, keep: str = "") -> str:
        """Drop characters the mode does not allow, except those in `keep`."""


class NormalModeFilter:
    """Leave text untouched."""

    def apply(self, text: str, keep: str = "") -> str:
        """Return text unchanged."""

        return text


class StrictModeFilter:
    """Keep ASCII letters, digits, whitespace and hyphens."""

    def apply(self, text: str, keep: str = "") -> str:
        """Apply strict filtering."""

        return _drop_pattern(r"[^a-zA-Z0-9\s\-{keep}]", keep).sub("", text)


class PrettyModeFilter:
    """Keep Unicode letters and digits, whitespace and `-._~`."""

    def apply(self, text: str, keep: str = "") -> str:
        """Apply pretty filtering."""

        return _drop_pattern(r"[^\p{{L}}\p{{N}}\s\-._~{keep}]", keep).sub("", text)


class Rfc3986ModeFilter:
    """Keep RFC 3986 unreserved characters; whitespace waits for normalization."""

    def apply(self, text: str, keep: str = "") -> str:
        """Apply unreserved-set filtering."""

        return _drop_pattern(r"[^A-Za-z0-9\-._~\s{keep}]", keep).sub("", text)


class FilenameModeFilter:
    """Drop characters rejected by common filesystems."""

    def apply(self, text: str, keep: str = "") -> str:
        """Remove reserved filename characters and control characters."""

        return _drop_pattern(r'[<>:"/\\|?*\x00-\x1F]', keep).sub("", text)


class IdModeFilter:
    """Produce a valid HTML identifier body."""

    def apply(self, text: str, keep: str = "") -> str:
        """Keep letters, digits, hyphens and underscores; prefix when not starting with a letter."""

        identifier = _drop_pattern(r"[^\p{{L}}\p{{N}}\-_{keep}]", keep).sub("", text)
        if identifier and not _ID_START_RE.match(identifier):
            identifier = _ID_PREFIX + identifier
        return identifier


_MODE_FILTERS: dict[str, ModeFilter] = {
    "normal": NormalModeFilter(),
    "strict": StrictModeFilter(),
    "pretty": PrettyModeFilter(),
    "rfc3986": Rfc3986ModeFilter(),
    "filename": FilenameModeFilter(),
    "id": IdModeFilter(),
}


def apply_mode(text: str, mode: str, keep: str = "") -> str:
    """Filter text according to `mode`; unknown modes behave like `normal`."""

    return _MODE_FILTERS.get(mode, _MODE_FILTERS["normal"]).apply(text, keep)
