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

import pytest

from autotitle.config.bundles import MappingConfigProvider, SettingsConfigProvider
from autotitle.errors import ConfigurationError
from autotitle.generation.ports import ConfigProvider


def test_mapping_provider_lookup():
  provider = MappingConfigProvider({"node": {"article": {"status": 1}}})

  assert isinstance(provider, ConfigProvider)
  assert provider.get("node", "article") == {"status": 1}
  assert provider.get("node", "page") is None
  assert provider.get("user", "user") is None


def test_mapping_provider_rejects_malformed_entries():
  provider = MappingConfigProvider({"node": ["article"], "user": {"user": "enabled"}})

  with pytest.raises(ConfigurationError):
    provider.get("node", "article")
  with pytest.raises(ConfigurationError):
    provider.get("user", "user")


def test_settings_provider_reads_current_settings(settings):
  settings.AUTOTITLE_BUNDLES = {"news.article": {"story": {"status": 2, "pattern": "x"}}}
  provider = SettingsConfigProvider()

  assert provider.get("news.article", "story") == {"status": 2, "pattern": "x"}

  settings.AUTOTITLE_BUNDLES = {}
  assert provider.get("news.article", "story") is None


def test_settings_provider_missing_setting(settings):
  del settings.AUTOTITLE_BUNDLES
  assert SettingsConfigProvider().get("news.article", "story") is None


def test_settings_provider_rejects_non_mapping(settings):
  settings.AUTOTITLE_BUNDLES = ["news.article"]
  with pytest.raises(ConfigurationError):
    SettingsConfigProvider().get("news.article", "story")
