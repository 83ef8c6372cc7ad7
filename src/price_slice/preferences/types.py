from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Final

from pydantic import BaseModel, ConfigDict

from .exceptions import UnknownPreferenceError


class Theme(StrEnum):
  LIGHT = "light"
  DARK = "dark"


PREFERENCE_KEYS: Final[dict[str, str]] = {
  "theme": "priceSlice.theme",
  "include_tax": "priceSlice.includeTax",
  "tax_rate": "priceSlice.taxRate",
  "advanced_open": "priceSlice.advancedOpen",
}
_BOOLEAN_FIELDS: Final = frozenset({"include_tax", "advanced_open"})


def storage_key(name: str) -> str:
  """Resolve a field name ('tax_rate') or storage key ('priceSlice.taxRate')."""
  if name in PREFERENCE_KEYS:
    return PREFERENCE_KEYS[name]
  if name in PREFERENCE_KEYS.values():
    return name
  raise UnknownPreferenceError(name)


def encode_preference(key: str, value: str) -> str:
  """Validate and normalize a value before it is written under ``key``."""

  field_name = next(name for name, stored in PREFERENCE_KEYS.items() if stored == key)
  trimmed = value.strip()
  if field_name in _BOOLEAN_FIELDS:
    lowered = trimmed.lower()
    if lowered not in ("true", "false"):
      raise ValueError(f"{field_name} must be 'true' or 'false', got {value!r}")
    return lowered
  if field_name == "theme":
    try:
      return Theme(trimmed.lower()).value
    except ValueError as exc:
      raise ValueError(f"theme must be 'light' or 'dark', got {value!r}") from exc
  return trimmed


class UiPreferences(BaseModel):
  """Settings the calculator front end remembers between runs.

  ``tax_rate`` is kept as the text the user typed; it only becomes a number
  when it goes through the sanitizer.
  """

  model_config = ConfigDict(frozen=True)

  theme: Theme = Theme.LIGHT
  include_tax: bool = False
  tax_rate: str = "0"
  advanced_open: bool = False

  @classmethod
  def from_stored(cls, stored: Mapping[str, str]) -> UiPreferences:
    theme_text = stored.get(PREFERENCE_KEYS["theme"])
    theme = Theme(theme_text) if theme_text in (Theme.LIGHT, Theme.DARK) else Theme.LIGHT
    tax_rate = stored.get(PREFERENCE_KEYS["tax_rate"])
    return cls(
      theme=theme,
      include_tax=stored.get(PREFERENCE_KEYS["include_tax"]) == "true",
      tax_rate=tax_rate if tax_rate else "0",
      advanced_open=stored.get(PREFERENCE_KEYS["advanced_open"]) == "true",
    )

  def to_stored(self) -> dict[str, str]:
    return {
      PREFERENCE_KEYS["theme"]: self.theme.value,
      PREFERENCE_KEYS["include_tax"]: "true" if self.include_tax else "false",
      PREFERENCE_KEYS["tax_rate"]: self.tax_rate,
      PREFERENCE_KEYS["advanced_open"]: "true" if self.advanced_open else "false",
    }
