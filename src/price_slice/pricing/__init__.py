from __future__ import annotations

from .engine import calculate, compute_breakdown
from .parsing import clamp_non_negative, normalize_quantity, parse_number
from .sanitize import sanitize, sanitize_for, sanitize_stacked
from .types import (
  Breakdown,
  CouponModel,
  CouponType,
  RawInput,
  SanitizedInput,
  StackedSanitizedInput,
)

__all__ = [
  # engine
  "calculate",
  "compute_breakdown",
  # parsing
  "clamp_non_negative",
  "normalize_quantity",
  "parse_number",
  # sanitize
  "sanitize",
  "sanitize_for",
  "sanitize_stacked",
  # types
  "Breakdown",
  "CouponModel",
  "CouponType",
  "RawInput",
  "SanitizedInput",
  "StackedSanitizedInput",
]
