"""
autotitle - Automatic title generation for content records
Copyright © 2025 Ilona Tag

This file is part of autotitle.

autotitle is free software: you can redistribute it and/or modify
it under the terms of the GNU Affero General Public License as
published by the Free Software Foundation, either version 3 of
the License, or (at your option) any later version.

autotitle is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU Affero General Public License for more details.

You should have received a copy of the GNU Affero General Public License
along with autotitle. If not, see <https://www.gnu.org/licenses/>.
"""

from __future__ import annotations

import enum
import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from autotitle.constants import CONFIG_KEY_DYNAMIC_CODE, CONFIG_KEY_PATTERN, CONFIG_KEY_STATUS

logger = logging.getLogger(__name__)

CacheKey = Tuple[str, str]

FLAG_TRUE_VALUES = ("1", "true", "yes", "on")
FLAG_FALSE_VALUES = ("0", "false", "no", "off")


class Status(enum.IntEnum):
  """When an automatic title applies to a bundle."""
  DISABLED = 0
  ENABLED = 1   # always generated, user input is overwritten
  OPTIONAL = 2  # generated only if the title is empty


def parse_status(value: Any) -> Status:
  """
  Coerce a configured status into a Status.
  Accepts Status members, ints, numeric strings and case-insensitive names.
  Unknown values fall back to DISABLED.
  """
  if value is None or value == "":
    return Status.DISABLED
  if isinstance(value, Status):
    return value
  if isinstance(value, bool):
    # True/False would otherwise sneak in as 1/0
    return Status.ENABLED if value else Status.DISABLED

  raw = value.strip() if isinstance(value, str) else value
  try:
    return Status(int(raw))
  except (TypeError, ValueError):
    pass
  if isinstance(raw, str) and raw.upper() in Status.__members__:
    return Status[raw.upper()]

  logger.warning("Unknown auto title status %r; treating as disabled.", value)
  return Status.DISABLED


def parse_flag(value: Any, name: str = CONFIG_KEY_DYNAMIC_CODE) -> bool:
  """
  Strict boolean for configured switches.
  Only True, 1 and the strings in FLAG_TRUE_VALUES turn a flag on;
  anything else other than an explicit "off" value is logged.
  """
  if isinstance(value, bool):
    return value
  if value is None or value == "":
    return False
  if isinstance(value, int):
    if value in (0, 1):
      return bool(value)
  elif isinstance(value, str):
    raw = value.strip().lower()
    if raw in FLAG_TRUE_VALUES:
      return True
    if raw in FLAG_FALSE_VALUES:
      return False

  logger.warning("Unknown auto title %s value %r; treating as off.", name, value)
  return False


@dataclass(frozen=True)
class BundleConfig:
  status: Status = Status.DISABLED
  pattern: str = ""
  dynamic_code_enabled: bool = False

  @classmethod
  def disabled(cls) -> "BundleConfig":
    return cls()

  @classmethod
  def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "BundleConfig":
    """Build a config from a provider mapping; None means disabled."""
    if data is None:
      return cls.disabled()
    if isinstance(data, BundleConfig):
      return data
    return cls(
      status=parse_status(data.get(CONFIG_KEY_STATUS)),
      pattern=str(data.get(CONFIG_KEY_PATTERN) or ""),
      dynamic_code_enabled=parse_flag(data.get(CONFIG_KEY_DYNAMIC_CODE)),
    )

  @property
  def effective_pattern(self) -> str:
    return self.pattern.strip()


class BundleConfigCache:
  """
  Read-through cache for BundleConfig keyed by (entity_type, bundle).

  First population is compute-then-publish: the loader runs outside the
  lock, and if another caller published the same key in the meantime the
  freshly computed value is discarded in favour of the published one.
  """

  def __init__(self) -> None:
    self._entries: Dict[CacheKey, BundleConfig] = {}
    self._lock = threading.Lock()

  def get(self, key: CacheKey, loader: Callable[[], BundleConfig]) -> BundleConfig:
    cached = self._entries.get(key)
    if cached is not None:
      return cached

    computed = loader()
    with self._lock:
      published = self._entries.setdefault(key, computed)
    if published is not computed:
      logger.debug("Discarding concurrently loaded auto title config for %s.%s", *key)
    return published

  def invalidate(self, entity_type: str | None = None, bundle: str | None = None) -> None:
    """
    Drop cached entries.
    No arguments: everything. entity_type only: every bundle of that type.
    Both: exactly one entry.
    """
    with self._lock:
      if entity_type is None:
        self._entries.clear()
        return
      if bundle is not None:
        self._entries.pop((entity_type, bundle), None)
        return
      for key in [k for k in self._entries if k[0] == entity_type]:
        del self._entries[key]

  def __contains__(self, key: CacheKey) -> bool:
    return key in self._entries

  def __len__(self) -> int:
    return len(self._entries)
