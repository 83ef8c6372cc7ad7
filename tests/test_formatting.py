from __future__ import annotations

from datetime import datetime

import pytest

from price_slice.formatting import (
  build_breakdown_text,
  format_percent,
  format_rate,
  format_timestamp_local,
  format_usd,
)
from price_slice.pricing import compute_breakdown, sanitize, sanitize_stacked

WHEN = datetime(2024, 1, 2, 15, 4)


@pytest.mark.parametrize(
  ("value", "expected"),
  [
    (0, "$0.00"),
    (1234.5, "$1,234.50"),
    (1234567.891, "$1,234,567.89"),
    (-5, "-$5.00"),
    (1.005, "$1.01"),
    (24.995, "$25.00"),
    (29.995000000000005, "$30.00"),
    (-0.0, "$0.00"),
    (float("nan"), "$0.00"),
    (float("inf"), "$0.00"),
  ],
)
def test_format_usd(value: float, expected: str) -> None:
  assert format_usd(value) == expected


@pytest.mark.parametrize(
  ("value", "digits", "expected"),
  [
    (30.00100020004001, 2, "30.00%"),
    (20, 2, "20.00%"),
    (0.125, 2, "0.13%"),
    (12.345, 1, "12.3%"),
    (99.5, 0, "100%"),
    (float("-inf"), 2, "0.00%"),
  ],
)
def test_format_percent(value: float, digits: int, expected: str) -> None:
  assert format_percent(value, digits) == expected


@pytest.mark.parametrize(
  ("value", "expected"),
  [(8.0, "8%"), (0, "0%"), (7.25, "7.25%"), (33.333, "33.33%"), (float("nan"), "0%")],
)
def test_format_rate(value: float, expected: str) -> None:
  assert format_rate(value) == expected


@pytest.mark.parametrize(
  ("when", "expected"),
  [
    (datetime(2024, 3, 5, 0, 7), "2024-03-05 12:07 AM"),
    (datetime(2024, 3, 5, 12, 0), "2024-03-05 12:00 PM"),
    (datetime(2024, 11, 25, 13, 30), "2024-11-25 1:30 PM"),
    (datetime(2024, 11, 25, 9, 5), "2024-11-25 9:05 AM"),
  ],
)
def test_format_timestamp_local(when: datetime, expected: str) -> None:
  assert format_timestamp_local(when) == expected


def test_breakdown_text_with_flat_coupon() -> None:
  inputs = sanitize(
    {
      "price": 49.99,
      "discountPercent": 25,
      "quantity": 2,
      "includeTax": True,
      "taxRate": 7.25,
      "couponType": "$off",
      "couponAmount": 5,
    }
  )

  text = build_breakdown_text(inputs, compute_breakdown(inputs), when=WHEN)

  assert text.splitlines() == [
    "Price Slice — 2024-01-02 3:04 PM",
    "Original price: $49.99",
    "Quantity: 2",
    "Subtotal: $99.98",
    "Discount: 25% (-$25.00)",
    "After discount: $74.99",
    "Coupon: -$5.00",
    "Tax: 7.25% (+$5.07)",
    "Total: $75.06",
    "You save: $30.00 (30.00%)",
  ]


def test_breakdown_text_with_percent_coupon_and_no_tax() -> None:
  inputs = sanitize(
    {"price": 200, "discountPercent": 25, "couponType": "%off", "couponPercent": 10}
  )

  lines = build_breakdown_text(inputs, compute_breakdown(inputs), when=WHEN).splitlines()

  assert "Coupon: 10% (-$15.00)" in lines
  assert not any(line.startswith("Tax:") for line in lines)
  assert lines[-1] == "You save: $65.00 (32.50%)"


def test_breakdown_text_omits_coupon_when_none() -> None:
  inputs = sanitize({"price": 10, "couponType": "none", "couponAmount": 3})
  text = build_breakdown_text(inputs, compute_breakdown(inputs), when=WHEN)
  assert "Coupon" not in text


def test_breakdown_text_for_stacked_model() -> None:
  inputs = sanitize_stacked(
    {
      "price": 1500,
      "discountPercent": 40,
      "includeTax": True,
      "taxRate": 8,
      "additionalDiscountPercent": 10,
      "couponAmount": 25,
    }
  )

  lines = build_breakdown_text(inputs, compute_breakdown(inputs), when=WHEN).splitlines()

  assert lines[4:] == [
    "Discount: 40% (-$600.00)",
    "After discount: $900.00",
    "Additional discount: 10% (-$90.00)",
    "Coupon: -$25.00",
    "Tax: 8% (+$62.80)",
    "Total: $847.80",
    "You save: $715.00 (47.67%)",
  ]


def test_breakdown_text_for_stacked_model_skips_empty_stages() -> None:
  inputs = sanitize_stacked({"price": 20})
  text = build_breakdown_text(inputs, compute_breakdown(inputs), when=WHEN)
  assert "Additional discount" not in text
  assert "Coupon" not in text
