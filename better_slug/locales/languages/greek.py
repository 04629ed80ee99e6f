"""Greek romanization map."""

from __future__ import annotations

_LOWER = {
    "α": "a", "β": "v", "γ": "g", "δ": "d", "ε": "e", "ζ": "z",
    "η": "i", "θ": "th", "ι": "i", "κ": "k", "λ": "l", "μ": "m",
    "ν": "n", "ξ": "x", "ο": "o", "π": "p", "ρ": "r", "σ": "s",
    "ς": "s", "τ": "t", "υ": "y", "φ": "f", "χ": "ch", "ψ": "ps",
    "ω": "o",
    "ά": "a", "έ": "e", "ή": "i", "ί": "i", "ό": "o", "ύ": "y",
    "ώ": "o", "ϊ": "i", "ϋ": "y", "ΐ": "i", "ΰ": "y",
    # Digraphs.
    "ου": "ou", "αι": "ai", "ει": "ei", "οι": "oi", "μπ": "b", "ντ": "d",
}


def _with_capitals(lower: dict[str, str]) -> dict[str, str]:
    """Add capitalized single-letter keys mirroring a lower-case table."""

    charmap = dict(lower)
    for letter, latin in lower.items():
        if len(letter) == 1 and len(letter.upper()) == 1 and letter != "ς":
            charmap[letter.upper()] = latin.capitalize()
    return charmap


CHARMAP = _with_capitals(_LOWER)
