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

# Hard limit of the title column in most content models.
TITLE_MAX_LENGTH = 255

TRUNCATE_UNIT_CHARS = "chars"
TRUNCATE_UNIT_BYTES = "bytes"
TRUNCATE_UNITS = (TRUNCATE_UNIT_CHARS, TRUNCATE_UNIT_BYTES)

STATUS_CHOICES = [
  (0, "Disabled"),
  (1, "Enabled (always generate)"),
  (2, "Optional (generate if empty)"),
]

# Context name every pattern can use, in addition to the model name.
ENTITY_CONTEXT_NAME = "entity"

# Config keys inside an AUTOTITLE_BUNDLES entry.
CONFIG_KEY_STATUS = "status"
CONFIG_KEY_PATTERN = "pattern"
CONFIG_KEY_DYNAMIC_CODE = "dynamic_code"

# Registry keys inside an AUTOTITLE_MODELS entry.
MODEL_KEY_TITLE_FIELD = "title_field"
MODEL_KEY_BUNDLE_FIELD = "bundle_field"
