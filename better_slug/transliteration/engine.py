"""Charmap and rule driven transliteration.

Responsibilities:
- Walk text word by word, keeping whitespace runs untouched.
- Resolve whole-word overrides before any rule runs.
- Apply prioritized rules, then fall back to longest-key charmap lookups.

Characters without a mapping pass through unchanged; a later mode filter
decides whether they survive.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
import re

from .rules import TransliterationRule, sort_rules

WordNormalizer = Callable[[str], str]

_WHITESPACE_SPLIT_RE = re.compile(r"(\s+)")
_WORD_EDGES_RE = re.compile(r"^(\W*)(.*?)(\W*)$", re.DOTALL)


def _is_ascii_letter(character: str) -> bool:
    """Return whether `character` is an ASCII Latin letter."""

    return ("a" <= character <= "z") or ("A" <= character <= "Z")


class Transliterator:
    """Convert text to Latin script with a character map and optional rules.

    Args:
        charmap: Key (one or more characters) to replacement mapping.
        rules: Contextual rules; sorted once by descending priority.
        word_overrides: Whole-word replacements consulted before rules.
        normalizer: Per-word script-variant normalization run first.
    """

    def __init__(
        self,
        charmap: Mapping[str, str],
        *,
        rules: Iterable[TransliterationRule] = (),
        word_overrides: Mapping[str, str] | None = None,
        normalizer: WordNormalizer | None = None,
    ) -> None:
        self._charmap = charmap
        self._max_key_length = max((len(key) for key in charmap), default=1)
        self._rules = sort_rules(rules)
        self._word_overrides: Mapping[str, str] = word_overrides or {}
        self._normalizer = normalizer

    @property
    def rules(self) -> tuple[TransliterationRule, ...]:
        """Return rules in application order."""

        return self._rules

    def transliterate(self, text: str) -> str:
        """Transliterate `text`, preserving its whitespace layout."""

        if not text:
            return text
        if not self._rules and not self._word_overrides and self._normalizer is None:
            return self._map_characters(text, skip_latin=False)

        return "".join(
            piece if not piece or piece.isspace() else self._transliterate_word(piece)
            for piece in _WHITESPACE_SPLIT_RE.split(text)
        )

    def _transliterate_word(self, word: str) -> str:
        """Run normalization, override lookup, rules and charmap on one word."""

        if self._normalizer is not None:
            word = self._normalizer(word)

        edges = _WORD_EDGES_RE.match(word)
        prefix, core, suffix = edges.groups() if edges else ("", word, "")
        skip_latin = bool(self._rules)

        override = self._word_overrides.get(core)
        if override is None:
            for rule in self._rules:
                core = rule.apply(core)
            converted = self._map_characters(core, skip_latin=skip_latin)
        else:
            converted = override

        return (
            self._map_characters(prefix, skip_latin=skip_latin)
            + converted
            + self._map_characters(suffix, skip_latin=skip_latin)
        )

    def _map_characters(self, text: str, *, skip_latin: bool) -> str:
        """Replace characters through the charmap, trying longer keys first.

        With `skip_latin`, ASCII letters already produced by rules are kept
        as they are instead of being looked up again.
        """

        pieces: list[str] = []
        index = 0
        length = len(text)
        while index < length:
            character = text[index]
            if skip_latin and _is_ascii_letter(character):
                pieces.append(character)
                index += 1
                continue

            for width in range(min(self._max_key_length, length - index), 0, -1):
                replacement = self._charmap.get(text[index : index + width])
                if replacement is not None:
                    pieces.append(replacement)
                    index += width
                    break
            else:
                pieces.append(character)
                index += 1
        return "".join(pieces)
