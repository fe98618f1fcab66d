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

"""
Environment variable helpers used by the settings module.

Malformed values never crash settings import: they fall back to the
default and log a warning naming the variable.
"""

import json
import logging
import os
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

TRUE_VALUES = ("1", "true", "yes", "on")


def env_str(key: str, default: Optional[str] = None) -> Optional[str]:
  """Get env var as string with default."""
  val = os.getenv(key)
  return val if val not in (None, "") else default

def env_bool(key: str, default: bool = False) -> bool:
  """Get env var as boolean."""
  val = os.getenv(key)
  return default if val is None else val.strip().lower() in TRUE_VALUES

def env_int(key: str, default: int = 0) -> int:
  """Get env var as int."""
  val = os.getenv(key)
  if val is None or not val.strip():
    return default
  try:
    return int(val)
  except ValueError:
    logger.warning("%s=%r is not an integer; using %r.", key, val, default)
    return default

def env_list(key: str, default: Optional[List[str]] = None, sep: str = ",") -> List[str]:
  """Get comma-separated list env var."""
  val = os.getenv(key)
  if not val:
    return default or []
  return [x.strip() for x in val.split(sep) if x.strip()]

def env_json(key: str, default, transform: Optional[Callable] = None):
  """
  Get env var parsed as JSON.
  The parsed value must have the same type as the default (when the
  default is a dict or list), otherwise the default is returned.
  """
  val = os.getenv(key)
  if not val:
    return default
  try:
    data = json.loads(val)
  except json.JSONDecodeError as exc:
    logger.warning("%s is not valid JSON (%s); using default.", key, exc)
    return default
  if isinstance(default, (dict, list)) and not isinstance(data, type(default)):
    logger.warning("%s must be a JSON %s; using default.", key, type(default).__name__)
    return default
  return transform(data) if transform else data
