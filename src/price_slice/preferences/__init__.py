from __future__ import annotations

from .exceptions import UnknownPreferenceError
from .store import PreferenceStore
from .types import PREFERENCE_KEYS, Theme, UiPreferences, encode_preference, storage_key

__all__ = [
  # exceptions
  "UnknownPreferenceError",
  # store
  "PreferenceStore",
  # types
  "PREFERENCE_KEYS",
  "Theme",
  "UiPreferences",
  "encode_preference",
  "storage_key",
]
