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

import re

from django.utils.html import strip_tags

from autotitle.constants import TITLE_MAX_LENGTH, TRUNCATE_UNIT_BYTES, TRUNCATE_UNIT_CHARS
from autotitle.errors import ConfigurationError

CONTROL_CHARS_RE = re.compile(r"[\t\n\r\0\x0B]")


def strip_control_and_tags(value: str) -> str:
  """
  Make a generated title safe for single-line display.
  Steps:
  1. Remove tab, newline, carriage return, NUL and vertical tab
  2. Strip markup tags, keeping the text they enclose
  """
  if not value:
    return ""
  cleaned = CONTROL_CHARS_RE.sub("", value)
  return strip_tags(cleaned)


def truncate_title(value: str, limit: int = TITLE_MAX_LENGTH, unit: str = TRUNCATE_UNIT_CHARS) -> str:
  """
  Cut a title to at most `limit` units.

  unit='chars' counts code points (the default; never splits a character).
  unit='bytes' counts UTF-8 bytes and drops a trailing partial character.
  """
  if not value:
    return ""

  if unit == TRUNCATE_UNIT_CHARS:
    return value[:limit]

  if unit == TRUNCATE_UNIT_BYTES:
    encoded = value.encode("utf-8")
    if len(encoded) <= limit:
      return value
    return encoded[:limit].decode("utf-8", errors="ignore")

  raise ConfigurationError(
    f"Unknown truncate unit '{unit}'. Expected '{TRUNCATE_UNIT_CHARS}' or '{TRUNCATE_UNIT_BYTES}'."
  )
