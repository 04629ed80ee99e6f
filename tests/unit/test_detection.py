"""Unit tests for script-histogram language detection."""

from __future__ import annotations

import pytest

from better_slug.text.detection import LanguageDetector, detect_language, is_rtl


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("سلام دنیا", "ar"),
        ("你好世界", "zh"),
        ("こんにちは", "ja"),
        ("안녕하세요", "ko"),
        ("Привет мир", "ru"),
        ("שלום", "he"),
        ("नमस्ते", "hi"),
        ("สวัสดี", "th"),
        ("Hello World", "en"),
        ("Crème brûlée", "en"),
    ],
)
def test_detect_language_picks_dominant_script(text: str, expected: str) -> None:
    """Detection should map the dominant script to its first registered locale."""

    assert detect_language(text) == expected


def test_detect_language_returns_none_without_letters() -> None:
    """Digits and punctuation alone should not be attributed to any language."""

    assert detect_language("123 !?") is None
    assert detect_language("") is None


def test_detect_language_prefers_majority_script() -> None:
    """Mixed text should resolve to the script with the most code points."""

    assert detect_language("Москва 北京") == "ru"
    assert detect_language("Hello 你好") == "zh"


def test_detect_language_breaks_ties_by_registration_order() -> None:
    """Equal counts should go to the range registered first."""

    assert LanguageDetector().detect("中한") == "zh"


def test_is_rtl_reports_right_to_left_scripts() -> None:
    """Arabic-script and Hebrew text should be right to left."""

    assert is_rtl("سلام") is True
    assert is_rtl("שלום") is True
    assert is_rtl("Hello") is False
    assert is_rtl("") is False
