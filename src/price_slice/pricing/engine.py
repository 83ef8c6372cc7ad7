from __future__ import annotations

from .sanitize import sanitize_for
from .types import (
  Breakdown,
  CouponModel,
  CouponType,
  SanitizedInput,
  StackedSanitizedInput,
)


def _coupon_for_mode(inputs: SanitizedInput, after_discount: float) -> float:
  if inputs.coupon_type == CouponType.AMOUNT_OFF:
    return inputs.coupon_amount
  if inputs.coupon_type == CouponType.PERCENT_OFF:
    return after_discount * (inputs.coupon_percent / 100)
  return 0.0


def compute_breakdown(inputs: SanitizedInput | StackedSanitizedInput) -> Breakdown:
  """Run sanitized input through the fixed discount, coupon and tax pipeline.

  Stages apply in order: percent discount, additional percent discount
  (stacked model only, compounded on the discounted amount), coupon, tax.
  The running amount is floored at zero after the coupon so tax is never
  charged on a negative base. No rounding happens here.
  """

  subtotal = inputs.price * inputs.quantity
  discount_amount = subtotal * (inputs.discount_percent / 100)
  after_discount = subtotal - discount_amount

  if isinstance(inputs, StackedSanitizedInput):
    additional_discount_amount = after_discount * (inputs.additional_discount_percent / 100)
    after_additional_discount = after_discount - additional_discount_amount
    coupon_applied = inputs.coupon_amount
  else:
    additional_discount_amount = 0.0
    after_additional_discount = after_discount
    coupon_applied = _coupon_for_mode(inputs, after_discount)

  after_coupon = max(0.0, after_additional_discount - coupon_applied)
  tax_amount = after_coupon * (inputs.tax_rate / 100) if inputs.include_tax else 0.0
  total = after_coupon + tax_amount
  # Tax is not a saving; measure against the pre-tax amount.
  savings = subtotal - after_coupon
  savings_percent = (savings / subtotal) * 100 if subtotal > 0 else 0.0

  return Breakdown(
    subtotal=subtotal,
    discount_amount=discount_amount,
    after_discount=after_discount,
    additional_discount_amount=additional_discount_amount,
    after_additional_discount=after_additional_discount,
    coupon_applied=coupon_applied,
    after_coupon=after_coupon,
    tax_amount=tax_amount,
    total=total,
    savings=savings,
    savings_percent=savings_percent,
  )


def calculate(raw: object, model: CouponModel = CouponModel.MODE) -> Breakdown:
  if isinstance(raw, (SanitizedInput, StackedSanitizedInput)):
    return compute_breakdown(raw)
  return compute_breakdown(sanitize_for(model, raw))


__all__ = ["calculate", "compute_breakdown"]
