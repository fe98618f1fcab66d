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

from django.db.models.signals import pre_save
from django.dispatch import receiver

from autotitle.generation.guard import ensure_generation_pass
from autotitle.records import ModelRecord
from autotitle.registry import is_registered
from autotitle.services.engine_factory import get_engine


@receiver(pre_save)
def apply_automatic_title(sender, instance, raw: bool = False, **kwargs) -> None:
  """
  Generate the title of a registered model right before it is saved.

  Fixture loading (raw=True) stores data as-is. Errors (e.g. a failing
  dynamic evaluation) propagate and abort the save.
  """
  if raw or not is_registered(sender):
    return

  engine = get_engine()
  record = ModelRecord(instance)

  with ensure_generation_pass() as guard:
    if engine.needs_generation(record, guard):
      engine.generate(record, guard)
