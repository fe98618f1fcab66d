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

from typing import Any, Optional

from django.apps import apps
from django.conf import settings
from django.core.exceptions import FieldDoesNotExist
from django.utils.text import capfirst

from autotitle.errors import UnsupportedEntityError
from autotitle.registry import ModelOptions, entity_type_for, model_options


class ModelRecord:
  """
  Record adapter around a Django model instance.

  The title attribute and optional bundle field come from the model
  registry (settings.AUTOTITLE_MODELS).
  """

  def __init__(self, instance, options: Optional[ModelOptions] = None):
    self.subject = instance
    self._entity_type = entity_type_for(instance)
    self.options = options if options is not None else model_options(self._entity_type)

  def __repr__(self) -> str:
    return f"<ModelRecord {self._entity_type} pk={self.entity_id()!r}>"

  def entity_type(self) -> str:
    return self._entity_type

  def bundle(self) -> str:
    field = self.options.bundle_field if self.options else ""
    if not field:
      return self._entity_type
    value = getattr(self.subject, field, None)
    # FK bundles (e.g. a "type" relation) are keyed by the related pk
    if getattr(value, "_meta", None) is not None:
      value = value.pk
    if value is None or value == "":
      return self._entity_type
    return str(value)

  def has_title_attribute(self) -> bool:
    if not self.options or not self.options.title_field:
      return False
    try:
      self.subject._meta.get_field(self.options.title_field)
    except FieldDoesNotExist:
      return False
    return True

  def title_attribute_name(self) -> str:
    return self.options.title_field if self.has_title_attribute() else ""

  def entity_id(self) -> Optional[Any]:
    """Persisted primary key; None while the instance is still being added."""
    state = getattr(self.subject, "_state", None)
    if state is not None and getattr(state, "adding", False):
      return None
    return self.subject.pk

  def get_title(self) -> str:
    name = self.title_attribute_name()
    if not name:
      return ""
    return getattr(self.subject, name, "") or ""

  def set_title(self, value: str) -> None:
    name = self.title_attribute_name()
    if not name:
      raise UnsupportedEntityError(self._entity_type)
    setattr(self.subject, name, value)


class ModelBundleLabelResolver:
  """
  Human readable bundle labels for registered models.

  Lookup order for a bundle different from the entity type:
    1. settings.AUTOTITLE_BUNDLE_LABELS[entity_type][bundle]
    2. choices of the registered bundle field
    3. the bundle key, humanized
  A bundle equal to the entity type uses the model's verbose_name.
  """

  def label(self, entity_type: str, bundle: str) -> str:
    model = apps.get_model(entity_type)

    if bundle == entity_type:
      return str(capfirst(model._meta.verbose_name))

    overrides = (getattr(settings, "AUTOTITLE_BUNDLE_LABELS", None) or {}).get(entity_type, {})
    if bundle in overrides:
      return str(overrides[bundle])

    choice_label = self._choice_label(model, entity_type, bundle)
    if choice_label:
      return choice_label

    return str(capfirst(bundle.replace("_", " ")))

  def _choice_label(self, model, entity_type: str, bundle: str) -> str:
    options = model_options(entity_type)
    if not options or not options.bundle_field:
      return ""
    try:
      field = model._meta.get_field(options.bundle_field)
    except FieldDoesNotExist:
      return ""
    for value, label in getattr(field, "flatchoices", None) or []:
      if str(value) == bundle:
        return str(label)
    return ""
