"""Unit tests for option validation and YAML/environment configuration loading."""

from __future__ import annotations

from pathlib import Path
import re

import pytest

from better_slug.config import (
    ConfigLoader,
    SlugConfig,
    UniquenessOptions,
    merge_option_layers,
)
from better_slug.errors import ValidationError


def test_defaults_are_valid() -> None:
    """The default configuration should pass validation."""

    config = SlugConfig()
    config.validate()

    assert config.locale == "en"
    assert config.separator == "-"
    assert config.max_length == 200
    assert config.uniqueness is None


@pytest.mark.parametrize(
    ("options", "field"),
    [
        ({"locale": "xx"}, "locale"),
        ({"case_style": "shouty"}, "case_style"),
        ({"mode": "loose"}, "mode"),
        ({"truncate": "middle"}, "truncate"),
        ({"emojis": "sparkle"}, "emojis"),
        ({"separator": "-" * 11}, "separator"),
        ({"max_length": 0}, "max_length"),
        ({"max_length": 10_001}, "max_length"),
        ({"uniqueness": "sequential"}, "uniqueness"),
        ({"remove_stop_words": ["xx"]}, "remove_stop_words"),
        ({"colour": "red"}, "colour"),
    ],
)
def test_from_options_rejects_invalid_values(options: dict[str, object], field: str) -> None:
    """Invalid option values should raise a field-scoped validation error."""

    with pytest.raises(ValidationError) as exc_info:
        SlugConfig.from_options(**options)

    assert exc_info.value.field == field


def test_invalid_case_style_message_names_value() -> None:
    """The error detail should name the rejected value."""

    with pytest.raises(ValidationError, match="Invalid case style: shouty"):
        SlugConfig.from_options(case_style="shouty")


def test_from_options_normalizes_loose_values() -> None:
    """Lists, mappings and strategy names should be coerced into field types."""

    config = SlugConfig.from_options(
        preserve=["C++", "C#"],
        replacements={"&": "and"},
        remove_stop_words="en, de",
        uniqueness={"strategy": "hash", "hash_length": 10},
    )

    assert config.preserve == ("C++", "C#")
    assert config.replacements == (("&", "and"),)
    assert config.remove_stop_words == ("en", "de")
    assert config.uniqueness == UniquenessOptions(strategy="hash", hash_length=10)


def test_with_options_returns_new_config() -> None:
    """Overrides should produce a copy and leave the original untouched."""

    base = SlugConfig()
    updated = base.with_options(separator="_")

    assert updated.separator == "_"
    assert base.separator == "-"


def test_stop_word_locales_resolution_order() -> None:
    """Explicit locales beat the detected locale, which beats the fixed locale."""

    assert SlugConfig(remove_stop_words=("de",)).stop_word_locales("ru") == ("de",)
    assert SlugConfig(remove_stop_words=True).stop_word_locales("ru") == ("ru",)
    assert SlugConfig(locale="fr", remove_stop_words=True).stop_word_locales(None) == ("fr",)
    assert SlugConfig(locale="auto", remove_stop_words=True).stop_word_locales(None) == ("en",)
    assert SlugConfig().stop_word_locales("en") == ()


def test_config_loader_from_yaml_loads_and_normalizes_values(tmp_path: Path) -> None:
    """YAML loader should parse valid payloads and normalize typed values."""

    config_path = tmp_path / "better-slug.yml"
    config_path.write_text(
        """
locale: " FA "
separator: "_"
case_style: upper
max_length: "none"
transliterate: " yes "
remove_stop_words: "fa,en"
preserve: ["C++", "C#"]
remove_regex: "\\\\d+"
custom_charmap:
  "@": " at "
uniqueness:
  strategy: counter
""".strip(),
        encoding="utf-8",
    )

    config = ConfigLoader.from_yaml(config_path)

    assert config.locale == "fa"
    assert config.separator == "_"
    assert config.case_style == "upper"
    assert config.max_length is None
    assert config.transliterate is True
    assert config.remove_stop_words == ("fa", "en")
    assert config.preserve == ("C++", "C#")
    assert isinstance(config.remove, re.Pattern)
    assert config.remove.pattern == "\\d+"
    assert config.custom_charmap == {"@": " at "}
    assert config.uniqueness == UniquenessOptions(strategy="counter")


def test_config_loader_from_yaml_rejects_unknown_keys(tmp_path: Path) -> None:
    """YAML loader should fail clearly on unknown fields."""

    config_path = tmp_path / "unknown.yml"
    config_path.write_text("locale: en\ncolour: red\n", encoding="utf-8")

    with pytest.raises(ValueError, match=r"unsupported key\(s\): colour"):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_from_yaml_rejects_non_mapping_and_bad_syntax(tmp_path: Path) -> None:
    """YAML loader should reject list roots and unparsable documents."""

    list_path = tmp_path / "list.yml"
    list_path.write_text("- en\n- fa\n", encoding="utf-8")
    broken_path = tmp_path / "broken.yml"
    broken_path.write_text("locale: [en\n", encoding="utf-8")

    with pytest.raises(ValueError, match="top-level mapping"):
        ConfigLoader.from_yaml(list_path)
    with pytest.raises(ValueError, match="could not be parsed"):
        ConfigLoader.from_yaml(broken_path)


def test_config_loader_rejects_invalid_boolean_and_conflicting_patterns() -> None:
    """Mapping loader should reject bad booleans and literal/regex conflicts."""

    with pytest.raises(ValueError, match="`trim` must be a boolean value"):
        ConfigLoader.from_mapping({"trim": "maybe"})
    with pytest.raises(ValueError, match="sets both `preserve` and `preserve_regex`"):
        ConfigLoader.from_mapping({"preserve": ".", "preserve_regex": "x"})
    with pytest.raises(ValueError, match="not a valid regex"):
        ConfigLoader.from_mapping({"remove_regex": "("})


def test_config_loader_empty_yaml_yields_defaults(tmp_path: Path) -> None:
    """An empty YAML document should produce the default configuration."""

    config_path = tmp_path / "empty.yml"
    config_path.write_text("", encoding="utf-8")

    assert ConfigLoader.from_yaml(config_path) == SlugConfig()


def test_config_loader_from_env_reads_prefixed_variables() -> None:
    """Environment loader should read `BETTER_SLUG_*` values and ignore others."""

    config = ConfigLoader.from_env(
        {
            "BETTER_SLUG_LOCALE": "ru",
            "BETTER_SLUG_SEPARATOR": " ",
            "BETTER_SLUG_MAX_LENGTH": "0",
            "BETTER_SLUG_TRIM": "off",
            "BETTER_SLUG_REMOVE_STOP_WORDS": "yes",
            "BETTER_SLUG_UNIQUENESS": "Random",
            "UNRELATED": "value",
        }
    )

    assert config.locale == "ru"
    assert config.separator == " "
    assert config.max_length is None
    assert config.trim is False
    assert config.remove_stop_words is True
    assert config.uniqueness == UniquenessOptions(strategy="random")


def test_config_loader_from_env_rejects_invalid_boolean() -> None:
    """Environment loader should reject unknown boolean tokens."""

    with pytest.raises(ValueError, match="BETTER_SLUG_TRANSLITERATE"):
        ConfigLoader.from_env({"BETTER_SLUG_TRANSLITERATE": "maybe"})


def test_merge_option_layers_later_layers_win() -> None:
    """Later layers should override earlier ones key by key."""

    merged = merge_option_layers({"locale": "ru", "mode": "strict"}, {"locale": "fa"})

    assert merged == {"locale": "fa", "mode": "strict"}
