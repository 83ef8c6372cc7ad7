from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel
from typing_extensions import TypeAliasType

NonNegativeFloat = TypeAliasType("NonNegativeFloat", Annotated[float, Field(ge=0)])


class CouponType(StrEnum):
  NONE = "none"
  AMOUNT_OFF = "$off"
  PERCENT_OFF = "%off"


class CouponModel(StrEnum):
  """Which coupon pipeline a calculation runs through."""

  MODE = "mode"
  STACKED = "stacked"


class RawInput(BaseModel):
  """Untrusted calculator input, as typed by the user.

  Fields stay untyped; the sanitizer decides what each value
  means. Keys may be given in snake_case or camelCase (``discountPercent``).
  """

  model_config = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="ignore",
    frozen=True,
  )

  price: Any = None
  discount_percent: Any = None
  quantity: Any = None
  include_tax: Any = None
  tax_rate: Any = None
  coupon_type: Any = None
  coupon_amount: Any = None
  coupon_percent: Any = None
  additional_discount_percent: Any = None

  @classmethod
  def coerce(cls, raw: object) -> RawInput:
    if raw is None:
      return cls()
    if isinstance(raw, RawInput):
      return raw
    if isinstance(raw, BaseModel):
      return cls.model_validate(raw.model_dump())
    if isinstance(raw, Mapping):
      return cls.model_validate({key: value for key, value in raw.items() if isinstance(key, str)})
    # Anything else carries no readable fields.
    return cls()


class _SanitizedBase(BaseModel):
  model_config = ConfigDict(frozen=True, allow_inf_nan=False)

  price: NonNegativeFloat = 0.0
  discount_percent: NonNegativeFloat = 0.0
  quantity: int = Field(default=1, ge=1)
  include_tax: bool = False
  tax_rate: NonNegativeFloat = 0.0


class SanitizedInput(_SanitizedBase):
  """Validated input for the mode-based coupon model."""

  coupon_type: CouponType = CouponType.NONE
  coupon_amount: NonNegativeFloat = 0.0
  coupon_percent: NonNegativeFloat = 0.0

  @model_validator(mode="after")
  def _inactive_coupon_fields_are_zero(self) -> SanitizedInput:
    if self.coupon_type != CouponType.AMOUNT_OFF and self.coupon_amount != 0:
      raise ValueError("coupon_amount must be 0 unless coupon_type is '$off'")
    if self.coupon_type != CouponType.PERCENT_OFF and self.coupon_percent != 0:
      raise ValueError("coupon_percent must be 0 unless coupon_type is '%off'")
    return self


class StackedSanitizedInput(_SanitizedBase):
  """Validated input for the dual-stage model: extra percent off, then a flat coupon."""

  additional_discount_percent: NonNegativeFloat = 0.0
  coupon_amount: NonNegativeFloat = 0.0


class Breakdown(BaseModel):
  model_config = ConfigDict(frozen=True)

  subtotal: float
  discount_amount: float
  after_discount: float
  additional_discount_amount: float
  after_additional_discount: float
  coupon_applied: float
  after_coupon: float
  tax_amount: float
  total: float
  savings: float
  savings_percent: float


__all__ = [
  "Breakdown",
  "CouponModel",
  "CouponType",
  "NonNegativeFloat",
  "RawInput",
  "SanitizedInput",
  "StackedSanitizedInput",
]
