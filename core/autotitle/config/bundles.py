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
Bundle configuration providers.

Settings layout (nested by entity type, then bundle):

  AUTOTITLE_BUNDLES = {
    "news.article": {
      "story": {"status": 1, "pattern": "{{ article.headline }}"},
      "brief": {"status": "optional", "pattern": ""},
    },
    "library.book": {
      "library.book": {"status": 2, "pattern": "{{ book.isbn }}"},
    },
  }

A missing entry is not an error: the engine treats it as disabled.
"""

import logging
from typing import Any, Mapping, Optional

from django.conf import settings

from autotitle.errors import ConfigurationError

logger = logging.getLogger(__name__)


class MappingConfigProvider:
  """Serves bundle settings from an in-memory nested mapping."""

  def __init__(self, bundles: Optional[Mapping[str, Mapping[str, Any]]] = None):
    self._bundles = bundles or {}

  def bundles(self) -> Mapping[str, Mapping[str, Any]]:
    return self._bundles

  def get(self, entity_type: str, bundle: str) -> Optional[Mapping[str, Any]]:
    by_bundle = self.bundles().get(entity_type)
    if by_bundle is None:
      return None
    if not isinstance(by_bundle, Mapping):
      raise ConfigurationError(f"Auto title settings for '{entity_type}' must be a mapping of bundles.")
    entry = by_bundle.get(bundle)
    if entry is not None and not isinstance(entry, Mapping):
      raise ConfigurationError(f"Auto title settings for '{entity_type}.{bundle}' must be a mapping.")
    return entry


class SettingsConfigProvider(MappingConfigProvider):
  """Serves bundle settings from settings.AUTOTITLE_BUNDLES (read on every lookup)."""

  def __init__(self, setting_name: str = "AUTOTITLE_BUNDLES"):
    super().__init__()
    self.setting_name = setting_name

  def bundles(self) -> Mapping[str, Mapping[str, Any]]:
    value = getattr(settings, self.setting_name, None) or {}
    if not isinstance(value, Mapping):
      raise ConfigurationError(f"{self.setting_name} must be a dict.")
    return value
