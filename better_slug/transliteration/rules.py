"""Contextual transliteration rules.

Rules are regex substitutions applied to one word at a time. Each rule runs as
a single `sub` pass and sees the output of every higher-priority rule.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
import re

RuleReplacement = str | Callable[[re.Match[str]], str]


@dataclass(frozen=True, slots=True)
class TransliterationRule:
    """One prioritized rewrite rule.

    Attributes:
        name: Short identifier used in diagnostics and tests.
        pattern: Compiled pattern matched against the current word state.
        replacement: Replacement text or a callable receiving the match.
        priority: Higher priorities run first.
    """

    name: str
    pattern: re.Pattern[str]
    replacement: RuleReplacement
    priority: int = 0

    def apply(self, word: str) -> str:
        """Rewrite every match of this rule in `word`."""

        return self.pattern.sub(self.replacement, word)


def sort_rules(rules: Iterable[TransliterationRule]) -> tuple[TransliterationRule, ...]:
    """Order rules by descending priority, keeping declaration order on ties."""

    return tuple(sorted(rules, key=lambda rule: -rule.priority))
