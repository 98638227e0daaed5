"""Tests for derive_term_code (semester label -> 3-character term code)."""

import pytest

from app.application.services.term_code import FALLBACK_TERM_CODE, derive_term_code


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("Fall 2024", "241"),
        ("Spring 2023", "232"),
        ("Summer 2025", "253"),
        ("fall2022", "221"),
        ("SPRING 2026", "262"),
    ],
)
def test_year_and_season(label: str, expected: str) -> None:
    assert derive_term_code(label) == expected


def test_explicit_three_digit_code_wins() -> None:
    assert derive_term_code("Trimester 233") == "233"
    assert derive_term_code("Spring 2024 (243)") == "243"


def test_four_digit_year_is_not_an_explicit_code() -> None:
    assert derive_term_code("2023") == "231"


def test_missing_year_defaults_to_2024() -> None:
    assert derive_term_code("Spring") == "242"
    assert derive_term_code("Summer term") == "243"


def test_unrecognised_text_defaults_to_fall_2024() -> None:
    assert derive_term_code("Trimester A") == "241"


@pytest.mark.parametrize("label", [None, "", "   "])
def test_blank_label_uses_fallback(label: str | None) -> None:
    assert derive_term_code(label) == FALLBACK_TERM_CODE
