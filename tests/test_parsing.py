from __future__ import annotations

from decimal import Decimal
from fractions import Fraction

import pytest

from price_slice.pricing.parsing import clamp_non_negative, normalize_quantity, parse_number


@pytest.mark.parametrize(
  ("text", "expected"),
  [
    ("$49.99", 49.99),
    ("25%", 25.0),
    ("7,25", 7.25),
    ("1,234.50", 1234.5),
    ("1.234,50", 1234.5),
    ("1,234", 1234.0),
    ("1,234,567", 1234567.0),
    ("1,5", 1.5),
    ("  $ 1 200 . 5 ", 1200.5),
    ("-12.5", -12.5),
    ("+3", 3.0),
    (".5", 0.5),
    ("5.", 5.0),
    ("USD 19.99", 19.99),
  ],
)
def test_parse_number_handles_formatted_text(text: str, expected: float) -> None:
  assert parse_number(text) == expected


@pytest.mark.parametrize(
  "text",
  ["", "   ", "abc", "$", "%", "-", "+", ".", "-.", "1.2.3", "5-", "+-3", "$-", "1,2.3.4"],
)
def test_parse_number_returns_zero_for_garbage(text: str) -> None:
  assert parse_number(text) == 0.0


def test_parse_number_trailing_comma_is_thousands_separator() -> None:
  # "12," has nothing after the comma, so it cannot be a decimal comma.
  assert parse_number("12,") == 12.0
  assert parse_number("1,234") == 1234.0


@pytest.mark.parametrize(
  ("value", "expected"),
  [
    (12, 12.0),
    (-3.5, -3.5),
    (Decimal("7.25"), 7.25),
    (Fraction(1, 2), 0.5),
    (Fraction(-3, 4), -0.75),
  ],
)
def test_parse_number_passes_through_finite_numbers(value: object, expected: float) -> None:
  assert parse_number(value) == expected


@pytest.mark.parametrize(
  "value",
  [None, float("nan"), float("inf"), float("-inf"), Decimal("NaN"), 10**400, True, False],
)
def test_parse_number_never_returns_non_finite(value: object) -> None:
  assert parse_number(value) == 0.0


def test_parse_number_overflowing_text_is_zero() -> None:
  assert parse_number("9" * 400) == 0.0


def test_parse_number_reads_other_objects_as_text() -> None:
  class _Price:
    def __str__(self) -> str:
      return "$5.25"

  assert parse_number(_Price()) == 5.25


def test_clamp_non_negative() -> None:
  assert clamp_non_negative("-10") == 0.0
  assert clamp_non_negative("-0") == 0.0
  assert clamp_non_negative("12.5%") == 12.5


@pytest.mark.parametrize(
  ("value", "expected"),
  [("0", 1), ("-4", 1), ("0.9", 1), ("2.9", 2), ("3", 3), ("", 1), (None, 1), ("1,000", 1000)],
)
def test_normalize_quantity(value: object, expected: int) -> None:
  result = normalize_quantity(value)
  assert result == expected
  assert isinstance(result, int)
