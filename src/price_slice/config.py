from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from price_slice.pricing.types import CouponModel

DEFAULT_CONFIG_PATH = Path("~/.config/price-slice/config.yaml").expanduser()
DEFAULT_PREFERENCES_PATH = Path("~/.config/price-slice/preferences.yaml").expanduser()


def parse_coupon_model(raw: str) -> CouponModel:
  """Parse a coupon model name ('mode' or 'stacked'), ignoring case and padding."""
  trimmed = raw.strip().lower()
  try:
    return CouponModel(trimmed)
  except ValueError as exc:
    raise ValueError("coupon_model must be 'mode' or 'stacked'") from exc


class AppConfig(BaseModel):
  model_config = ConfigDict(extra="forbid")

  coupon_model: CouponModel = CouponModel.MODE
  preferences_file: Path = Field(default=DEFAULT_PREFERENCES_PATH)
  default_tax_rate: float = Field(default=0.0, ge=0, allow_inf_nan=False)

  @field_validator("coupon_model", mode="before")
  @classmethod
  def _coerce_coupon_model(cls, value: object) -> object:
    if isinstance(value, str):
      return parse_coupon_model(value)
    return value

  @field_validator("preferences_file", mode="after")
  @classmethod
  def _expand_preferences_file(cls, value: Path) -> Path:
    return value.expanduser()


def load_config(path: Path | None) -> AppConfig:
  """Load config YAML; without an explicit path a missing default file means defaults."""
  if path is None and not DEFAULT_CONFIG_PATH.exists():
    return AppConfig()
  p = (path or DEFAULT_CONFIG_PATH).expanduser()
  if not p.exists():
    raise FileNotFoundError(f"Config file not found: {p}")

  try:
    raw = p.read_text(encoding="utf-8")
  except Exception as exc:
    raise ValueError(f"Failed to read configuration from {p}") from exc

  try:
    data = yaml.safe_load(raw)
  except Exception as exc:
    raise ValueError(f"Failed to parse YAML from {p}") from exc

  if data is None:
    return AppConfig()
  if not isinstance(data, dict):
    raise ValueError(f"Configuration file {p} must contain a mapping at the top level")

  try:
    return AppConfig.model_validate(data)
  except ValidationError as e:
    raise ValueError(f"Invalid configuration in {p}: {e}") from e
