from __future__ import annotations

import asyncio
from collections.abc import Mapping
from pathlib import Path
from typing import Any, cast

import structlog
import yaml  # type: ignore[reportMissingImports]

from .types import UiPreferences, encode_preference, storage_key

logger = structlog.get_logger(__name__)


class PreferenceStore:
  """YAML-backed key-value store for calculator UI preferences."""

  def __init__(self, path: Path) -> None:
    self._path = path.expanduser()
    self._lock = asyncio.Lock()

  @property
  def path(self) -> Path:
    return self._path

  async def get(self, key: str) -> str | None:
    data = await self._read()
    return data.get(storage_key(key))

  async def set(self, key: str, value: str) -> None:
    resolved = storage_key(key)
    encoded = encode_preference(resolved, value)
    async with self._lock:
      data = await self._read()
      data[resolved] = encoded
      await self._write(data)
    logger.debug("preference saved", key=resolved, value=encoded)

  async def load(self) -> UiPreferences:
    return UiPreferences.from_stored(await self._read())

  async def save(self, preferences: UiPreferences) -> None:
    async with self._lock:
      data = await self._read()
      data.update(preferences.to_stored())
      await self._write(data)

  async def _read(self) -> dict[str, str]:
    if not self._path.exists():
      return {}
    raw_text = self._path.read_text(encoding="utf-8")
    try:
      loaded_raw: object = yaml.safe_load(raw_text)
    except yaml.YAMLError:
      logger.warning("ignoring unreadable preferences file", path=str(self._path))
      return {}
    if loaded_raw is None:
      return {}
    if not isinstance(loaded_raw, Mapping):
      logger.warning("ignoring preferences file without a top-level mapping", path=str(self._path))
      return {}
    loaded_mapping = cast(Mapping[Any, Any], loaded_raw)
    result: dict[str, str] = {}
    for key_obj, value_obj in loaded_mapping.items():
      if not isinstance(key_obj, str) or not isinstance(value_obj, str):
        logger.warning("skipping malformed preference entry", key=str(key_obj))
        continue
      result[key_obj] = value_obj
    return result

  async def _write(self, data: Mapping[str, str]) -> None:
    self._path.parent.mkdir(parents=True, exist_ok=True)
    with self._path.open("w", encoding="utf-8") as handle:
      yaml.safe_dump(dict(data), handle, sort_keys=True, allow_unicode=True)
