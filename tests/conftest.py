"""Shared pytest fixtures and configuration for all tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from price_slice.preferences import PreferenceStore


@pytest.fixture(autouse=True)
def isolate_default_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
  """Keep every test away from the real ~/.config/price-slice directory."""
  monkeypatch.setattr(
    "price_slice.config.DEFAULT_CONFIG_PATH", tmp_path / "missing" / "config.yaml"
  )


@pytest.fixture
def preferences_path(tmp_path: Path) -> Path:
  return tmp_path / "prefs" / "preferences.yaml"


@pytest.fixture
def preference_store(preferences_path: Path) -> PreferenceStore:
  return PreferenceStore(preferences_path)
