"""Core datatypes shared across better-slug modules.

Responsibilities:
- Represent immutable records returned by pipeline steps and the engine.
- Provide explicit typing and JSON-ready serialization for results.

Key types:
- `SlugResult`, `TruncationResult`, `UniqueSlug`, and `LanguageInfo`.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SlugResult:
    """Outcome of one slugify call.

    Attributes:
        slug: Final slug text.
        original: Input text exactly as received.
        locale: Detected locale code, set only when detection ran and matched.
        truncated: Whether truncation shortened the slug, set only when a max length applies.
        unique_id: Disambiguation value appended by the uniqueness step, if any.
    """

    slug: str
    original: str
    locale: str | None = None
    truncated: bool | None = None
    unique_id: int | str | None = None

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-ready mapping that omits fields which do not apply."""

        payload: dict[str, object] = {"slug": self.slug, "original": self.original}
        if self.locale is not None:
            payload["locale"] = self.locale
        if self.truncated is not None:
            payload["truncated"] = self.truncated
        if self.unique_id is not None:
            payload["unique_id"] = self.unique_id
        return payload


@dataclass(frozen=True, slots=True)
class TruncationResult:
    """Text after applying a length limit.

    Attributes:
        text: Possibly shortened text.
        truncated: Whether the input exceeded the limit.
    """

    text: str
    truncated: bool


@dataclass(frozen=True, slots=True)
class UniqueSlug:
    """Slug after a uniqueness suffix has been applied.

    Attributes:
        slug: Disambiguated slug.
        unique_id: Counter value, hash digest, timestamp or random token; `None`
            when the slug was emitted without a suffix.
    """

    slug: str
    unique_id: int | str | None = None


@dataclass(frozen=True, slots=True)
class LanguageInfo:
    """Static metadata for a registered locale.

    Attributes:
        code: Locale code, for example `fa`.
        name: English language name.
        native_name: Language name in its own script.
        direction: Writing direction, `ltr` or `rtl`.
    """

    code: str
    name: str
    native_name: str
    direction: str = "ltr"
