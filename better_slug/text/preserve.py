"""Placeholder tracking for spans that must survive the pipeline verbatim.

Responsibilities:
- Swap preserve-pattern matches for single private-use placeholder code points.
- Expose the placeholder set so filtering steps can keep them.
- Restore the original spans in one pass after destructive steps ran.

Placeholders are picked from the supplementary private-use planes and skip any
code point already present in the text, so they never collide with input or
with characters produced by other steps.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
import re

PreservePattern = str | Sequence[str] | re.Pattern[str]

_PLACEHOLDER_BLOCKS = (
    range(0xF0000, 0xFFFFE),
    range(0x100000, 0x10FFFE),
)


def _placeholder_code_points(text: str) -> Iterator[int]:
    """Yield private-use code points that do not occur in `text`."""

    occupied = {ord(character) for character in text}
    for block in _PLACEHOLDER_BLOCKS:
        for code_point in block:
            if code_point not in occupied:
                yield code_point


class PreservedSpans:
    """Ordered `(placeholder, original)` pairs created by one extraction."""

    def __init__(self) -> None:
        """Initialize an empty span tracker."""

        self._pairs: list[tuple[str, str]] = []

    def __len__(self) -> int:
        """Return the number of tracked spans."""

        return len(self._pairs)

    def __bool__(self) -> bool:
        """Return whether any span was extracted."""

        return bool(self._pairs)

    @property
    def pairs(self) -> tuple[tuple[str, str], ...]:
        """Return tracked `(placeholder, original)` pairs in extraction order."""

        return tuple(self._pairs)

    @property
    def placeholders(self) -> str:
        """Return all placeholder characters concatenated, for use in character classes."""

        return "".join(placeholder for placeholder, _ in self._pairs)

    def restore(self, text: str) -> str:
        """Replace every placeholder with its original span."""

        if not self._pairs:
            return text
        table = {ord(placeholder): original for placeholder, original in self._pairs}
        return text.translate(table)

    @classmethod
    def extract(
        cls,
        text: str,
        patterns: PreservePattern | None,
    ) -> tuple[str, PreservedSpans]:
        """Swap preserved spans in `text` for placeholders.

        Args:
            text: Current pipeline text.
            patterns: A literal substring, several literals, or one compiled regex.

        Returns:
            The rewritten text and the span tracker needed to restore it.
        """

        spans = cls()
        if not patterns or not text:
            return text, spans

        code_points = _placeholder_code_points(text)
        by_original: dict[str, str] = {}

        def placeholder_for(original: str) -> str:
            if original not in by_original:
                placeholder = chr(next(code_points))
                by_original[original] = placeholder
                spans._pairs.append((placeholder, original))
            return by_original[original]

        if isinstance(patterns, re.Pattern):

            def swap(match: re.Match[str]) -> str:
                matched = match.group(0)
                if not matched:
                    return matched
                return placeholder_for(matched)

            return patterns.sub(swap, text), spans

        literals = [patterns] if isinstance(patterns, str) else list(patterns)
        result = text
        for literal in literals:
            if literal and literal in result:
                result = result.replace(literal, placeholder_for(literal))
        return result, spans
