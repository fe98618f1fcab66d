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
Bulk "update automatic titles" service.

Shared by the admin action and the autotitle_regenerate management
command. For each instance: ask the engine whether a title is needed,
generate it, and save only if the title actually changed. The whole run
is one generation pass, so the pre-save hook fired by save() does not
generate the same title a second time.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from autotitle.errors import AutoTitleError
from autotitle.generation.engine import TitleGenerationEngine
from autotitle.generation.guard import ensure_generation_pass
from autotitle.records import ModelRecord
from autotitle.services.engine_factory import get_engine

logger = logging.getLogger(__name__)


@dataclass
class RegenerationSummary:
  processed: int = 0
  updated: int = 0
  unchanged: int = 0
  skipped: int = 0
  failed: List[Tuple[object, str]] = field(default_factory=list)

  @property
  def failed_count(self) -> int:
    return len(self.failed)

  def as_message(self) -> str:
    msg = (
      f"{self.updated} title(s) updated, {self.unchanged} unchanged, "
      f"{self.skipped} skipped"
    )
    if self.failed:
      msg += f", {self.failed_count} failed"
    return msg + "."


def regenerate_titles(
  instances: Iterable,
  *,
  engine: Optional[TitleGenerationEngine] = None,
  dry_run: bool = False,
) -> RegenerationSummary:
  engine = engine or get_engine()
  summary = RegenerationSummary()

  with ensure_generation_pass() as guard:
    for instance in instances:
      summary.processed += 1
      record = ModelRecord(instance)

      try:
        if not engine.needs_generation(record, guard):
          summary.skipped += 1
          continue

        previous = record.get_title()
        engine.generate(record, guard)
      except AutoTitleError as exc:
        logger.warning("Auto title failed for %r: %s", record, exc)
        summary.failed.append((instance.pk, str(exc)))
        continue

      if record.get_title() == previous:
        summary.unchanged += 1
        continue

      summary.updated += 1
      if dry_run:
        logger.debug("Dry run: not saving %r", record)
        continue
      instance.save()

  logger.info("Auto title regeneration finished: %s", summary.as_message())
  return summary
