"""Utilities for turning loosely formatted numeric text into floats."""

from __future__ import annotations

import math
import numbers
import re
from decimal import Decimal

_DISALLOWED = re.compile(r"[^0-9.+\-]")
_DEGENERATE = frozenset({"", "+", "-", ".", "-."})


def _normalize_number_text(text: str) -> str:
  """Strip currency fluff and settle which separator is the decimal point."""

  normalized = "".join(text.strip().split())
  normalized = normalized.replace("$", "").replace("%", "")

  has_dot = "." in normalized
  has_comma = "," in normalized
  if has_comma and has_dot:
    if normalized.rfind(",") > normalized.rfind("."):
      # 1.234,50
      normalized = normalized.replace(".", "").replace(",", ".", 1)
    else:
      normalized = normalized.replace(",", "")
  elif has_comma:
    parts = normalized.split(",")
    if len(parts) == 2 and parts[1] != "" and len(parts[1]) <= 2:
      # A single trailing comma group of 1-2 chars reads as a decimal comma.
      normalized = f"{parts[0]}.{parts[1]}"
    else:
      normalized = normalized.replace(",", "")

  return _DISALLOWED.sub("", normalized)


def parse_number(value: object) -> float:
  """Parse user-typed numeric text like '$1,234.50', '7,25' or '25%'.

  Never raises: anything unparseable or non-finite comes back as 0.0.
  """

  if value is None:
    return 0.0

  if isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, bool):
    try:
      number = float(value)
    except (OverflowError, ValueError):
      return 0.0
    return number if math.isfinite(number) else 0.0

  text = str(value)
  if not text.strip():
    return 0.0

  normalized = _normalize_number_text(text)
  if normalized in _DEGENERATE:
    return 0.0
  try:
    parsed = float(normalized)
  except (OverflowError, ValueError):
    return 0.0
  return parsed if math.isfinite(parsed) else 0.0


def clamp_non_negative(value: object) -> float:
  return max(0.0, parse_number(value))


def normalize_quantity(value: object) -> int:
  """Whole item count, never below one."""
  quantity = math.floor(clamp_non_negative(value))
  return quantity if quantity >= 1 else 1


__all__ = ["clamp_non_negative", "normalize_quantity", "parse_number"]
