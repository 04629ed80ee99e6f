"""Unit tests for preserved-span placeholders and mode filters."""

from __future__ import annotations

import re

import pytest

from better_slug.text.modes import SLUG_MODES, apply_mode
from better_slug.text.preserve import PreservedSpans


def test_extract_swaps_literals_for_placeholders_and_restores_them() -> None:
    """Literal spans should be swapped out and restored verbatim."""

    text, spans = PreservedSpans.extract("C++ and C# rock", ("C++", "C#"))

    assert "C++" not in text
    assert "C#" not in text
    assert len(spans) == 2
    assert spans.restore(text) == "C++ and C# rock"


def test_extract_reuses_placeholder_for_repeated_span() -> None:
    """The same literal occurring twice should map to one placeholder."""

    text, spans = PreservedSpans.extract("v1.0 and v1.0", "v1.0")

    assert len(spans) == 1
    assert text.count(spans.placeholders) == 2


def test_extract_supports_compiled_regex() -> None:
    """A compiled pattern should preserve each distinct match."""

    text, spans = PreservedSpans.extract("ticket 42 and 7", re.compile(r"\d+"))

    assert len(spans) == 2
    assert spans.restore(text) == "ticket 42 and 7"


def test_placeholders_avoid_code_points_already_in_text() -> None:
    """Placeholders should never collide with characters present in the input."""

    occupied = chr(0xF0000)
    text, spans = PreservedSpans.extract(f"{occupied} keep", "keep")

    assert occupied not in spans.placeholders
    assert spans.restore(text) == f"{occupied} keep"


def test_extract_without_patterns_is_identity() -> None:
    """No patterns should yield untouched text and an empty tracker."""

    text, spans = PreservedSpans.extract("Hello", None)

    assert text == "Hello"
    assert not spans


def test_strict_mode_keeps_ascii_alphanumerics_and_placeholders() -> None:
    """Strict mode should drop non-ASCII letters but keep listed placeholders."""

    placeholder = chr(0xF0001)

    assert apply_mode("héllo wörld!", "strict") == "hllo wrld"
    assert apply_mode(f"a{placeholder}b!", "strict", placeholder) == f"a{placeholder}b"


def test_pretty_mode_keeps_unicode_letters() -> None:
    """Pretty mode should keep Unicode letters and the unreserved marks."""

    assert apply_mode("héllo.wörld~ (x)!", "pretty") == "héllo.wörld~ x"


def test_rfc3986_mode_keeps_unreserved_characters() -> None:
    """RFC 3986 mode should keep only unreserved characters and whitespace."""

    assert apply_mode("Hello World!~é", "rfc3986") == "Hello World~"


def test_filename_mode_drops_reserved_characters() -> None:
    """Filename mode should drop characters rejected by common filesystems."""

    assert apply_mode('my<file>:name?.txt', "filename") == "myfilename.txt"


def test_id_mode_prefixes_non_letter_start() -> None:
    """Id mode should drop punctuation and prefix identifiers that start with a digit."""

    assert apply_mode("123 abc!", "id") == "id-123abc"
    assert apply_mode("abc_1-2", "id") == "abc_1-2"


def test_normal_mode_is_identity() -> None:
    """Normal mode should leave the text as it is."""

    assert apply_mode("Hello, World!", "normal") == "Hello, World!"
    assert "normal" in SLUG_MODES


@pytest.mark.parametrize("mode", ["strict", "pretty", "rfc3986", "filename", "id"])
def test_every_mode_keeps_placeholders(mode: str) -> None:
    """Placeholders listed in `keep` should survive every mode."""

    placeholder = chr(0xF0002)

    assert placeholder in apply_mode(f"x{placeholder}y", mode, placeholder)
