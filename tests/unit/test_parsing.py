"""Unit tests for shared option and environment parsing helpers."""

import pytest

from better_slug.parsing import (
    normalize_optional_string,
    parse_permissive_boolean,
    parse_required_boolean,
    parse_string_list,
)


def test_normalize_optional_string_handles_blank_values() -> None:
    """Normalization should return `None` for `None` and blank textual values."""

    assert normalize_optional_string(None) is None
    assert normalize_optional_string("") is None
    assert normalize_optional_string("   ") is None
    assert normalize_optional_string("  value  ") == "value"


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("TrUe", True),
        ("  ON ", True),
        ("1", True),
        ("FALSE", False),
        (" oFf ", False),
        ("nO", False),
    ],
)
def test_parse_permissive_boolean_accepts_mixed_case_tokens(token: str, expected: bool) -> None:
    """Permissive parsing should accept valid tokens case-insensitively."""

    assert parse_permissive_boolean(token) is expected


@pytest.mark.parametrize("value", ["", "   ", "maybe", "2", object()])
def test_parse_permissive_boolean_returns_none_for_invalid_tokens(value: object) -> None:
    """Permissive parsing should return `None` for invalid or blank inputs."""

    assert parse_permissive_boolean(value) is None


def test_parse_required_boolean_raises_for_invalid_token() -> None:
    """Strict boolean parsing should name the field in its message."""

    with pytest.raises(ValueError, match=r"`trim` must be a boolean value"):
        parse_required_boolean("maybe", "`trim`")


def test_parse_string_list_accepts_strings_and_iterables() -> None:
    """Comma-separated strings and iterables should become stripped tuples."""

    assert parse_string_list(" en, de ,,fa ") == ("en", "de", "fa")
    assert parse_string_list(["a", " ", "b"]) == ("a", "b")
    assert parse_string_list(None) == ()
