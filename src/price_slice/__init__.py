from __future__ import annotations

# config.py exports
from price_slice.config import (
  DEFAULT_CONFIG_PATH,
  DEFAULT_PREFERENCES_PATH,
  AppConfig,
  load_config,
)

# formatting.py exports
from price_slice.formatting import (
  build_breakdown_text,
  format_percent,
  format_rate,
  format_timestamp_local,
  format_usd,
)

# log.py exports
from price_slice.log import setup_logging

# pricing exports
from price_slice.pricing import (
  Breakdown,
  CouponModel,
  CouponType,
  RawInput,
  SanitizedInput,
  StackedSanitizedInput,
  calculate,
  compute_breakdown,
  parse_number,
  sanitize,
  sanitize_stacked,
)

__all__ = [
  # config.py
  "DEFAULT_CONFIG_PATH",
  "DEFAULT_PREFERENCES_PATH",
  "AppConfig",
  "load_config",
  # formatting.py
  "build_breakdown_text",
  "format_percent",
  "format_rate",
  "format_timestamp_local",
  "format_usd",
  # log.py
  "setup_logging",
  # pricing
  "Breakdown",
  "CouponModel",
  "CouponType",
  "RawInput",
  "SanitizedInput",
  "StackedSanitizedInput",
  "calculate",
  "compute_breakdown",
  "parse_number",
  "sanitize",
  "sanitize_stacked",
]
