"""Configuration model and loaders for better-slug.

Responsibilities:
- Define slug options as an immutable, validated dataclass.
- Normalize loosely typed option values (mappings, lists, strategy names).
- Provide loader entry points for YAML-, mapping- and environment-based options.

Key types:
- `SlugConfig`: validated options for one slugify invocation.
- `UniquenessOptions`: de-duplication strategy descriptor.
- `ConfigLoader`: static construction helpers for `SlugConfig`.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, MutableMapping, MutableSet
from dataclasses import dataclass, field, fields, replace
import os
from pathlib import Path
import re
from typing import Any

import yaml

from .errors import ValidationError
from .locales import is_supported_locale
from .parsing import (
    normalize_optional_string,
    parse_permissive_boolean,
    parse_required_boolean,
    parse_string_list,
)
from .text.emoji import EMOJI_STRATEGIES
from .text.modes import SLUG_MODES
from .text.primitives import CASE_STYLES, TRUNCATE_STRATEGIES

MAX_INPUT_LENGTH = 10_000
MAX_BATCH_SIZE = 10_000
MAX_SEPARATOR_LENGTH = 10
MAX_HASH_LENGTH = 64

LOCALE_SELECTORS = ("preserve", "auto")
UNIQUENESS_STRATEGIES = ("none", "counter", "hash", "timestamp", "random")

TextPattern = str | tuple[str, ...] | re.Pattern[str]
SlugTransform = Callable[[str, "SlugConfig"], str]
UniquenessStore = MutableSet[str] | MutableMapping[str, int]


@dataclass(frozen=True, slots=True)
class UniquenessOptions:
    """De-duplication strategy descriptor.

    Attributes:
        strategy: One of `none`, `counter`, `hash`, `timestamp`, `random`.
        store: Caller-owned set of used slugs or mapping of emission counts.
        hash_length: Number of hex digits kept by the hash strategy.
    """

    strategy: str = "counter"
    store: UniquenessStore | None = field(default=None, compare=False)
    hash_length: int = 6

    @classmethod
    def coerce(cls, value: object) -> UniquenessOptions | None:
        """Normalize a strategy name, mapping or options instance."""

        if value is None or isinstance(value, UniquenessOptions):
            return value
        if isinstance(value, str):
            return cls(strategy=value.strip().lower())
        if isinstance(value, Mapping):
            unknown = sorted(set(value).difference({"strategy", "store", "hash_length"}))
            if unknown:
                raise ValidationError(
                    field="uniqueness",
                    value=value,
                    detail=f"Unsupported uniqueness key(s): {', '.join(unknown)}.",
                )
            return cls(
                strategy=str(value.get("strategy", "counter")).strip().lower(),
                store=value.get("store"),
                hash_length=value.get("hash_length", 6),
            )
        raise ValidationError(
            field="uniqueness",
            value=value,
            detail="`uniqueness` must be a strategy name or a mapping.",
        )

    def validate(self) -> None:
        """Validate strategy, store type and hash length."""

        if self.strategy not in UNIQUENESS_STRATEGIES:
            raise ValidationError(
                field="uniqueness",
                value=self.strategy,
                detail=f"Invalid uniqueness strategy: {self.strategy}",
            )
        if self.store is not None and not isinstance(self.store, (MutableSet, MutableMapping)):
            raise ValidationError(
                field="uniqueness.store",
                value=self.store,
                detail="Uniqueness store must be a mutable set or mapping.",
            )
        if (
            isinstance(self.hash_length, bool)
            or not isinstance(self.hash_length, int)
            or not 1 <= self.hash_length <= MAX_HASH_LENGTH
        ):
            raise ValidationError(
                field="uniqueness.hash_length",
                value=self.hash_length,
                detail=f"Hash length must be an integer between 1 and {MAX_HASH_LENGTH}",
            )


@dataclass(frozen=True, slots=True)
class SlugConfig:
    """Options for one slugify invocation.

    Attributes:
        locale: `preserve`, `auto`, or a supported locale code.
        separator: Word separator, at most ten characters.
        case_style: Case style applied after filtering.
        mode: Output character policy.
        max_length: Upper bound on slug length, or `None` for no limit.
        truncate: Truncation strategy used when `max_length` applies.
        preserve: Literal substrings or one regex shielded from every transformation.
        remove: Literal substrings or one regex deleted after normalization.
        replacements: Ordered literal substitutions applied before transliteration.
        custom_charmap: Entries overlaid on the locale character map.
        transliterate: Whether to convert text to Latin script.
        emojis: Emoji strategy.
        remove_stop_words: `True` for the active locale, or explicit locale codes.
        trim: Whether to strip leading and trailing separators.
        detect_language: Whether to run detection even with a fixed locale.
        uniqueness: Optional de-duplication strategy.
        transforms: Callables `transform(text, config)` run before any built-in step.
    """

    locale: str = "en"
    separator: str = "-"
    case_style: str = "lower"
    mode: str = "normal"
    max_length: int | None = 200
    truncate: str = "word"
    preserve: TextPattern | None = None
    remove: TextPattern | None = None
    replacements: tuple[tuple[str, str], ...] = ()
    custom_charmap: Mapping[str, str] = field(default_factory=dict)
    transliterate: bool = True
    emojis: str = "remove"
    remove_stop_words: bool | tuple[str, ...] = False
    trim: bool = True
    detect_language: bool = False
    uniqueness: UniquenessOptions | None = None
    transforms: tuple[SlugTransform, ...] = ()

    @classmethod
    def from_options(cls, **options: Any) -> SlugConfig:
        """Build a validated config from keyword options, normalizing loose values.

        Raises:
            ValidationError: On unknown option names or invalid values.
        """

        return cls().with_options(**options)

    def with_options(self, **options: Any) -> SlugConfig:
        """Return a validated copy with `options` applied over this config."""

        known = {config_field.name for config_field in fields(SlugConfig)}
        unknown = sorted(set(options).difference(known))
        if unknown:
            raise ValidationError(
                field=unknown[0],
                value=options[unknown[0]],
                detail=f"Unknown option(s): {', '.join(unknown)}.",
            )

        normalized = {name: _normalize_option(name, value) for name, value in options.items()}
        config = replace(self, **normalized)
        config.validate()
        return config

    def validate(self) -> None:
        """Validate every enum and bound before any pipeline step runs."""

        if self.locale not in LOCALE_SELECTORS and not is_supported_locale(self.locale):
            raise ValidationError(
                field="locale",
                value=self.locale,
                detail=f"Invalid locale: {self.locale}",
            )
        if not isinstance(self.separator, str):
            raise ValidationError(
                field="separator",
                value=self.separator,
                detail="Separator must be a string",
            )
        if len(self.separator) > MAX_SEPARATOR_LENGTH:
            raise ValidationError(
                field="separator",
                value=self.separator,
                detail=f"Separator exceeds maximum length of {MAX_SEPARATOR_LENGTH}",
            )
        _require_choice("case_style", self.case_style, CASE_STYLES)
        _require_choice("mode", self.mode, SLUG_MODES)
        _require_choice("truncate", self.truncate, TRUNCATE_STRATEGIES)
        _require_choice("emojis", self.emojis, EMOJI_STRATEGIES)
        if self.max_length is not None:
            if isinstance(self.max_length, bool) or not isinstance(self.max_length, int):
                raise ValidationError(
                    field="max_length",
                    value=self.max_length,
                    detail="Max length must be a positive integer",
                )
            if self.max_length < 1:
                raise ValidationError(
                    field="max_length",
                    value=self.max_length,
                    detail="Max length must be a positive integer",
                )
            if self.max_length > MAX_INPUT_LENGTH:
                raise ValidationError(
                    field="max_length",
                    value=self.max_length,
                    detail=f"Max length exceeds maximum of {MAX_INPUT_LENGTH}",
                )
        _require_pattern("preserve", self.preserve)
        _require_pattern("remove", self.remove)
        for pair in self.replacements:
            if len(pair) != 2 or not all(isinstance(part, str) for part in pair):
                raise ValidationError(
                    field="replacements",
                    value=pair,
                    detail="Replacements must be pairs of strings",
                )
        for key, value in self.custom_charmap.items():
            if not isinstance(key, str) or not key or not isinstance(value, str):
                raise ValidationError(
                    field="custom_charmap",
                    value=key,
                    detail="Custom charmap entries must map non-empty strings to strings",
                )
        if not isinstance(self.remove_stop_words, bool):
            for locale in self.remove_stop_words:
                if not is_supported_locale(locale):
                    raise ValidationError(
                        field="remove_stop_words",
                        value=locale,
                        detail=f"Invalid stop-word locale: {locale}",
                    )
        if self.uniqueness is not None:
            self.uniqueness.validate()
        for transform in self.transforms:
            if not callable(transform):
                raise ValidationError(
                    field="transforms",
                    value=transform,
                    detail="Transforms must be callables",
                )

    def stop_word_locales(self, detected: str | None) -> tuple[str, ...]:
        """Return the stop-word locales: explicit list, else detected, else `en`."""

        if self.remove_stop_words is False:
            return ()
        if isinstance(self.remove_stop_words, tuple) and self.remove_stop_words:
            return self.remove_stop_words
        if detected:
            return (detected,)
        if self.locale not in LOCALE_SELECTORS:
            return (self.locale,)
        return ("en",)


def _require_choice(field_name: str, value: object, choices: tuple[str, ...]) -> None:
    """Raise when `value` is not one of `choices`."""

    if value not in choices:
        label = field_name.replace("_", " ")
        raise ValidationError(
            field=field_name,
            value=value,
            detail=f"Invalid {label}: {value}",
        )


def _require_pattern(field_name: str, value: object) -> None:
    """Raise when `value` is not a literal, a tuple of literals or a compiled regex."""

    if value is None or isinstance(value, (str, re.Pattern)):
        return
    if isinstance(value, tuple) and all(isinstance(item, str) for item in value):
        return
    raise ValidationError(
        field=field_name,
        value=value,
        detail=f"`{field_name}` must be a string, a list of strings or a compiled regex",
    )


def _normalize_option(name: str, value: Any) -> Any:
    """Coerce loosely typed option values into the dataclass field types."""

    if name in {"preserve", "remove"}:
        if isinstance(value, (list, set, frozenset)):
            return tuple(value)
        return value
    if name == "replacements":
        if value is None:
            return ()
        items = value.items() if isinstance(value, Mapping) else value
        return tuple(tuple(pair) for pair in items)
    if name == "custom_charmap":
        return dict(value) if value else {}
    if name == "remove_stop_words":
        if isinstance(value, bool) or value is None:
            return bool(value)
        return parse_string_list(value)
    if name == "uniqueness":
        return UniquenessOptions.coerce(value)
    if name == "transforms":
        if value is None:
            return ()
        if callable(value):
            return (value,)
        return tuple(value)
    return value


class ConfigLoader:
    """Factory methods for creating `SlugConfig` from external sources."""

    _SUPPORTED_KEYS = frozenset(
        {
            "locale",
            "separator",
            "case_style",
            "mode",
            "max_length",
            "truncate",
            "preserve",
            "preserve_regex",
            "remove",
            "remove_regex",
            "replacements",
            "custom_charmap",
            "transliterate",
            "emojis",
            "remove_stop_words",
            "trim",
            "detect_language",
            "uniqueness",
        }
    )
    _STRING_KEYS = ("locale", "case_style", "mode", "truncate", "emojis")
    _BOOLEAN_KEYS = ("transliterate", "trim", "detect_language")
    _ENV_PREFIX = "BETTER_SLUG_"

    @staticmethod
    def from_yaml(path: Path) -> SlugConfig:
        """Create a validated config from a YAML file."""

        return SlugConfig.from_options(**ConfigLoader.options_from_yaml(path))

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> SlugConfig:
        """Create a validated config from `BETTER_SLUG_*` environment variables."""

        return SlugConfig.from_options(**ConfigLoader.options_from_env(env))

    @staticmethod
    def from_mapping(payload: Mapping[str, Any], source_label: str = "config") -> SlugConfig:
        """Create a validated config from an in-memory mapping."""

        return SlugConfig.from_options(
            **ConfigLoader._options_from_mapping(payload, source_label)
        )

    @staticmethod
    def options_from_yaml(path: Path) -> dict[str, Any]:
        """Read option overrides from a YAML file without applying defaults."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)
        return ConfigLoader._options_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def options_from_mapping(
        payload: Mapping[str, Any], source_label: str = "config"
    ) -> dict[str, Any]:
        """Read option overrides from a mapping without applying defaults."""

        return ConfigLoader._options_from_mapping(payload, source_label)

    @staticmethod
    def options_from_env(env: Mapping[str, str] | None = None) -> dict[str, Any]:
        """Read option overrides from environment variables without applying defaults."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        prefix = ConfigLoader._ENV_PREFIX
        options: dict[str, Any] = {}

        for key in ConfigLoader._STRING_KEYS:
            value = ConfigLoader._optional_env_string(env_map, prefix + key.upper())
            if value is not None:
                options[key] = value.lower()

        separator_key = prefix + "SEPARATOR"
        if separator_key in env_map and env_map[separator_key] != "":
            options["separator"] = env_map[separator_key]

        max_length_key = prefix + "MAX_LENGTH"
        raw_max_length = ConfigLoader._optional_env_string(env_map, max_length_key)
        if raw_max_length is not None:
            options["max_length"] = ConfigLoader._parse_max_length(
                raw_max_length, f"Environment variable `{max_length_key}`"
            )

        for key in ConfigLoader._BOOLEAN_KEYS:
            parsed = ConfigLoader._optional_env_boolean(env_map, prefix + key.upper())
            if parsed is not None:
                options[key] = parsed

        stop_words = ConfigLoader._optional_env_string(env_map, prefix + "REMOVE_STOP_WORDS")
        if stop_words is not None:
            as_boolean = parse_permissive_boolean(stop_words)
            options["remove_stop_words"] = (
                as_boolean if as_boolean is not None else parse_string_list(stop_words)
            )

        for key in ("preserve", "remove"):
            raw_list = ConfigLoader._optional_env_string(env_map, prefix + key.upper())
            if raw_list is not None:
                options[key] = parse_string_list(raw_list)

        uniqueness = ConfigLoader._optional_env_string(env_map, prefix + "UNIQUENESS")
        if uniqueness is not None:
            options["uniqueness"] = uniqueness.lower()
        return options

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` could not be parsed: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _options_from_mapping(payload: Mapping[str, Any], source_label: str) -> dict[str, Any]:
        """Translate a raw mapping payload into normalized option overrides."""

        ConfigLoader._validate_keys(payload, source_label)
        options: dict[str, Any] = {}

        for key in ConfigLoader._STRING_KEYS:
            value = ConfigLoader._optional_non_empty_string(payload, key)
            if value is not None:
                options[key] = value.lower()

        if "separator" in payload:
            separator = payload["separator"]
            if separator is None:
                separator = ""
            if not isinstance(separator, str):
                raise ValueError(f"{source_label} field `separator` must be a string.")
            options["separator"] = separator

        if "max_length" in payload:
            raw_max_length = payload["max_length"]
            options["max_length"] = (
                None
                if raw_max_length is None
                else ConfigLoader._parse_max_length(
                    raw_max_length, f"{source_label} field `max_length`"
                )
            )

        for key in ConfigLoader._BOOLEAN_KEYS:
            if key in payload:
                options[key] = ConfigLoader._required_boolean(payload, key, source_label)

        if "remove_stop_words" in payload:
            raw_stop_words = payload["remove_stop_words"]
            as_boolean = parse_permissive_boolean(raw_stop_words)
            options["remove_stop_words"] = (
                as_boolean if as_boolean is not None else parse_string_list(raw_stop_words)
            )

        for key in ("preserve", "remove"):
            regex_key = f"{key}_regex"
            if key in payload and regex_key in payload:
                raise ValueError(
                    f"{source_label} sets both `{key}` and `{regex_key}`; use one of them."
                )
            if key in payload:
                literals = parse_string_list(payload[key])
                if literals:
                    options[key] = literals
            elif regex_key in payload:
                options[key] = ConfigLoader._compiled_regex(payload, regex_key, source_label)

        for key in ("replacements", "custom_charmap"):
            mapping = ConfigLoader._optional_string_map(payload, key, source_label)
            if mapping:
                options[key] = mapping

        if "uniqueness" in payload and payload["uniqueness"] is not None:
            options["uniqueness"] = payload["uniqueness"]
        return options

    @staticmethod
    def _validate_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Reject keys the loader does not understand."""

        unknown = sorted(str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_KEYS))
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

    @staticmethod
    def _optional_non_empty_string(payload: Mapping[str, Any], key: str) -> str | None:
        """Read an optional string field and normalize blank values to `None`."""

        if key not in payload:
            return None
        return normalize_optional_string(payload[key])

    @staticmethod
    def _parse_max_length(raw_value: object, label: str) -> int | None:
        """Parse a positive integer, or `none`/`0` for no limit."""

        if isinstance(raw_value, bool):
            raise ValueError(f"{label} must be a positive integer or `none`.")
        if isinstance(raw_value, int):
            parsed = raw_value
        else:
            normalized = normalize_optional_string(raw_value)
            if normalized is None or normalized.lower() == "none":
                return None
            try:
                parsed = int(normalized)
            except ValueError as exc:
                raise ValueError(f"{label} must be a positive integer or `none`.") from exc

        if parsed == 0:
            return None
        if parsed < 0:
            raise ValueError(f"{label} must be a positive integer or `none`.")
        return parsed

    @staticmethod
    def _required_boolean(payload: Mapping[str, Any], key: str, source_label: str) -> bool:
        """Read and validate a boolean field from a payload."""

        return parse_required_boolean(payload[key], f"{source_label} field `{key}`")

    @staticmethod
    def _compiled_regex(payload: Mapping[str, Any], key: str, source_label: str) -> re.Pattern[str]:
        """Compile a regex field, reporting syntax errors against the source."""

        raw = normalize_optional_string(payload[key])
        if raw is None:
            raise ValueError(f"{source_label} field `{key}` must be a non-empty pattern.")
        try:
            return re.compile(raw)
        except re.error as exc:
            raise ValueError(f"{source_label} field `{key}` is not a valid regex: {exc}") from exc

    @staticmethod
    def _optional_string_map(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> dict[str, str]:
        """Read an optional mapping with non-empty string keys and string values."""

        if key not in payload:
            return {}

        raw = payload[key]
        if raw is None:
            return {}
        if not isinstance(raw, Mapping):
            raise ValueError(f"{source_label} field `{key}` must be a mapping/object.")

        normalized: dict[str, str] = {}
        for raw_key, raw_value in raw.items():
            if raw_key is None or str(raw_key) == "":
                raise ValueError(f"{source_label} field `{key}` contains a blank key.")
            normalized[str(raw_key)] = "" if raw_value is None else str(raw_value)
        return normalized

    @staticmethod
    def _optional_env_string(env: Mapping[str, str], key: str) -> str | None:
        """Read and normalize optional string environment variable values."""

        if key not in env:
            return None
        return normalize_optional_string(env.get(key))

    @staticmethod
    def _optional_env_boolean(env: Mapping[str, str], key: str) -> bool | None:
        """Read an optional boolean from environment mapping."""

        if key not in env:
            return None
        return parse_required_boolean(env.get(key), f"Environment variable `{key}`")


def merge_option_layers(*layers: Mapping[str, Any]) -> dict[str, Any]:
    """Merge option mappings left to right; later layers win."""

    merged: dict[str, Any] = {}
    for layer in layers:
        merged.update(layer)
    return merged
