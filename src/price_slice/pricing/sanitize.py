from __future__ import annotations

import math
from decimal import Decimal

from .parsing import clamp_non_negative, normalize_quantity
from .types import CouponModel, CouponType, RawInput, SanitizedInput, StackedSanitizedInput


def _truthy(value: object) -> bool:
  # NaN is falsy, the same as an empty value.
  if isinstance(value, float) and math.isnan(value):
    return False
  if isinstance(value, Decimal) and value.is_nan():
    return False
  return bool(value)


def _coupon_type(value: object) -> CouponType:
  if not isinstance(value, str):
    return CouponType.NONE
  try:
    return CouponType(value)
  except ValueError:
    return CouponType.NONE


def sanitize(raw: object) -> SanitizedInput:
  """Clamp raw input into a SanitizedInput for the mode-based coupon model.

  Only the coupon field matching ``coupon_type`` survives; the other one is
  forced to zero.
  """

  source = RawInput.coerce(raw)
  coupon_type = _coupon_type(source.coupon_type)
  return SanitizedInput(
    price=clamp_non_negative(source.price),
    discount_percent=clamp_non_negative(source.discount_percent),
    quantity=normalize_quantity(source.quantity),
    include_tax=_truthy(source.include_tax),
    tax_rate=clamp_non_negative(source.tax_rate),
    coupon_type=coupon_type,
    coupon_amount=(
      clamp_non_negative(source.coupon_amount) if coupon_type == CouponType.AMOUNT_OFF else 0.0
    ),
    coupon_percent=(
      clamp_non_negative(source.coupon_percent) if coupon_type == CouponType.PERCENT_OFF else 0.0
    ),
  )


def sanitize_stacked(raw: object) -> StackedSanitizedInput:
  """Clamp raw input for the dual-stage model, where both extra stages always apply."""

  source = RawInput.coerce(raw)
  return StackedSanitizedInput(
    price=clamp_non_negative(source.price),
    discount_percent=clamp_non_negative(source.discount_percent),
    quantity=normalize_quantity(source.quantity),
    include_tax=_truthy(source.include_tax),
    tax_rate=clamp_non_negative(source.tax_rate),
    additional_discount_percent=clamp_non_negative(source.additional_discount_percent),
    coupon_amount=clamp_non_negative(source.coupon_amount),
  )


def sanitize_for(model: CouponModel, raw: object) -> SanitizedInput | StackedSanitizedInput:
  if model == CouponModel.STACKED:
    return sanitize_stacked(raw)
  return sanitize(raw)


__all__ = ["sanitize", "sanitize_for", "sanitize_stacked"]
