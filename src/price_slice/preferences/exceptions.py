from __future__ import annotations


class UnknownPreferenceError(KeyError):
  """Raised when a preference key is not one the calculator persists."""

  def __init__(self, key: str) -> None:
    super().__init__(key)
    self.key = key

  def __str__(self) -> str:
    return f"unknown preference: {self.key!r}"
