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

from autotitle.services.engine_factory import reset_engine


AUTOTITLE_MODELS = {
  "news.article": {"title_field": "title", "bundle_field": "kind"},
  "news.tag": {"title_field": "missing_field"},
}


@pytest.fixture(autouse=True)
def fresh_engine():
  """Every test starts (and ends) without a cached engine."""
  reset_engine()
  yield
  reset_engine()


@pytest.fixture
def autotitle_settings(settings):
  """
  Register the dummy news models.
  news.tag points at a field that does not exist, i.e. it has no title attribute.
  """
  settings.AUTOTITLE_MODELS = AUTOTITLE_MODELS
  settings.AUTOTITLE_BUNDLES = {}
  settings.AUTOTITLE_BUNDLE_LABELS = {}
  settings.AUTOTITLE_EVALUATOR = None
  settings.AUTOTITLE_TRUNCATE_UNIT = "chars"
  return settings
