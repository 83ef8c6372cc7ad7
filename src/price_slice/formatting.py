"""Display formatting for breakdowns: USD amounts, percentages and a plain-text summary."""

from __future__ import annotations

import math
from datetime import datetime
from decimal import ROUND_HALF_UP, Context, Decimal

from price_slice.pricing.types import (
  Breakdown,
  CouponType,
  SanitizedInput,
  StackedSanitizedInput,
)

BREAKDOWN_TITLE = "Price Slice"

# Wide enough for any finite float quantized to a handful of places.
_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def _finite_or_zero(value: float) -> float:
  if not math.isfinite(value) or value == 0:
    return 0.0
  return float(value)


def format_usd(value: float) -> str:
  """Format as en-US dollars, e.g. '$1,234.50' or '-$5.00'."""

  safe = _finite_or_zero(value)
  # repr() gives the shortest round-tripping decimal, so 1.005 rounds up to 1.01.
  cents = Decimal(repr(safe)).quantize(Decimal("0.01"), context=_CONTEXT)
  sign = "-" if cents < 0 else ""
  return f"{sign}${abs(cents):,.2f}"


def format_percent(value: float, digits: int = 2) -> str:
  safe = _finite_or_zero(value)
  quantum = Decimal(1).scaleb(-digits)
  rounded = Decimal(safe).quantize(quantum, context=_CONTEXT)
  return f"{rounded:f}%"


def format_rate(value: float) -> str:
  """Rates print bare when whole ('8%') and with two decimals otherwise ('7.25%')."""
  safe = _finite_or_zero(value)
  if safe.is_integer():
    return f"{int(safe)}%"
  return format_percent(safe, 2)


def format_timestamp_local(when: datetime | None = None) -> str:
  moment = when or datetime.now()
  period = "PM" if moment.hour >= 12 else "AM"
  hours = moment.hour % 12 or 12
  return f"{moment.year}-{moment.month:02d}-{moment.day:02d} {hours}:{moment.minute:02d} {period}"


def build_breakdown_text(
  inputs: SanitizedInput | StackedSanitizedInput,
  breakdown: Breakdown,
  when: datetime | None = None,
) -> str:
  """Render a breakdown as plain text suitable for pasting into a message."""

  lines = [
    f"{BREAKDOWN_TITLE} — {format_timestamp_local(when)}",
    f"Original price: {format_usd(inputs.price)}",
    f"Quantity: {inputs.quantity}",
    f"Subtotal: {format_usd(breakdown.subtotal)}",
    (
      f"Discount: {format_rate(inputs.discount_percent)} "
      f"(-{format_usd(breakdown.discount_amount)})"
    ),
    f"After discount: {format_usd(breakdown.after_discount)}",
  ]

  if isinstance(inputs, StackedSanitizedInput):
    if inputs.additional_discount_percent > 0:
      lines.append(
        f"Additional discount: {format_rate(inputs.additional_discount_percent)} "
        f"(-{format_usd(breakdown.additional_discount_amount)})"
      )
    if inputs.coupon_amount > 0:
      lines.append(f"Coupon: -{format_usd(breakdown.coupon_applied)}")
  elif inputs.coupon_type == CouponType.AMOUNT_OFF:
    lines.append(f"Coupon: -{format_usd(breakdown.coupon_applied)}")
  elif inputs.coupon_type == CouponType.PERCENT_OFF:
    lines.append(
      f"Coupon: {format_rate(inputs.coupon_percent)} (-{format_usd(breakdown.coupon_applied)})"
    )

  if inputs.include_tax:
    lines.append(f"Tax: {format_rate(inputs.tax_rate)} (+{format_usd(breakdown.tax_amount)})")

  lines.append(f"Total: {format_usd(breakdown.total)}")
  lines.append(
    f"You save: {format_usd(breakdown.savings)} ({format_percent(breakdown.savings_percent)})"
  )
  return "\n".join(lines)


__all__ = [
  "BREAKDOWN_TITLE",
  "build_breakdown_text",
  "format_percent",
  "format_rate",
  "format_timestamp_local",
  "format_usd",
]
