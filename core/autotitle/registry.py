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
Which Django models carry automatic titles.

Configured through settings.AUTOTITLE_MODELS:

  AUTOTITLE_MODELS = {
    "news.article": {"title_field": "title", "bundle_field": "kind"},
    "library.book": {"title_field": "name"},
  }

Keys are model labels (app_label.model_name, lowercase). bundle_field is
optional; without it every instance belongs to a single bundle named like
the entity type.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from django.conf import settings

from autotitle.constants import MODEL_KEY_BUNDLE_FIELD, MODEL_KEY_TITLE_FIELD
from autotitle.errors import ConfigurationError


@dataclass(frozen=True)
class ModelOptions:
  entity_type: str
  title_field: str = ""
  bundle_field: str = ""


def _configured_models() -> Dict[str, dict]:
  cfg = getattr(settings, "AUTOTITLE_MODELS", None) or {}
  if not isinstance(cfg, dict):
    raise ConfigurationError("AUTOTITLE_MODELS must be a dict of model label -> options.")
  return cfg


def model_options(entity_type: str) -> Optional[ModelOptions]:
  """Options for a model label, or None if the model is not registered."""
  key = (entity_type or "").lower()
  entry = _configured_models().get(key)
  if entry is None:
    return None
  if not isinstance(entry, dict):
    raise ConfigurationError(f"AUTOTITLE_MODELS['{key}'] must be a dict.")
  return ModelOptions(
    entity_type=key,
    title_field=(entry.get(MODEL_KEY_TITLE_FIELD) or "").strip(),
    bundle_field=(entry.get(MODEL_KEY_BUNDLE_FIELD) or "").strip(),
  )


def entity_type_for(model_or_instance) -> str:
  return model_or_instance._meta.label_lower


def is_registered(model_or_instance) -> bool:
  meta = getattr(model_or_instance, "_meta", None)
  if meta is None:
    return False
  return meta.label_lower in _configured_models()


def registered_entity_types() -> list[str]:
  return sorted(_configured_models().keys())
