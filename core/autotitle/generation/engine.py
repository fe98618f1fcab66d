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

import logging
from typing import Any, Dict, Optional

from django.utils.translation import gettext

from autotitle.constants import ENTITY_CONTEXT_NAME, TITLE_MAX_LENGTH, TRUNCATE_UNIT_CHARS
from autotitle.errors import AutoTitleError, DynamicEvaluationError, UnsupportedEntityError
from autotitle.generation.config import BundleConfig, BundleConfigCache, Status
from autotitle.generation.evaluation import DisabledEvaluator
from autotitle.generation.guard import ApplicationGuard, current_guard
from autotitle.generation.ports import (
  BundleLabelResolver,
  ConfigProvider,
  Evaluator,
  Record,
  TokenOptions,
  TokenResolver,
)
from autotitle.generation.sanitize import strip_control_and_tags, truncate_title

logger = logging.getLogger(__name__)

PATTERN_TOKEN_OPTIONS = TokenOptions(sanitize=False, clear_unresolved=True)


class TitleGenerationEngine:
  """
  Derives record titles from per-bundle configuration.

  Typical caller sequence (pre-save hook or bulk action):

    if engine.needs_generation(record):
      engine.generate(record)
      # caller decides whether to persist

  Both calls accept an explicit ApplicationGuard; without one they use the
  guard of the active generation pass (see autotitle.generation.guard).
  """

  def __init__(
    self,
    *,
    config_provider: ConfigProvider,
    token_resolver: TokenResolver,
    label_resolver: BundleLabelResolver,
    evaluator: Optional[Evaluator] = None,
    cache: Optional[BundleConfigCache] = None,
    max_length: int = TITLE_MAX_LENGTH,
    truncate_unit: str = TRUNCATE_UNIT_CHARS,
  ):
    self.config_provider = config_provider
    self.token_resolver = token_resolver
    self.label_resolver = label_resolver
    self.evaluator = evaluator if evaluator is not None else DisabledEvaluator()
    self.cache = cache if cache is not None else BundleConfigCache()
    self.max_length = max_length
    self.truncate_unit = truncate_unit

  # ------------------------------------------------------------------
  # Configuration / status policy
  # ------------------------------------------------------------------
  def bundle_config(self, entity_type: str, bundle: str) -> BundleConfig:
    def _load() -> BundleConfig:
      logger.debug("Loading auto title config for %s.%s", entity_type, bundle)
      return BundleConfig.from_mapping(self.config_provider.get(entity_type, bundle))

    return self.cache.get((entity_type, bundle), _load)

  def invalidate(self, entity_type: str | None = None, bundle: str | None = None) -> None:
    self.cache.invalidate(entity_type, bundle)

  def config_for(self, record: Record) -> BundleConfig:
    return self.bundle_config(record.entity_type(), record.bundle())

  def status_for(self, record: Record) -> Status:
    return self.config_for(record).status

  def has_auto_title(self, record: Record) -> bool:
    return self.status_for(record) == Status.ENABLED

  def has_optional_auto_title(self, record: Record) -> bool:
    return self.status_for(record) == Status.OPTIONAL

  # ------------------------------------------------------------------
  # Public operations
  # ------------------------------------------------------------------
  def needs_generation(self, record: Record, guard: Optional[ApplicationGuard] = None) -> bool:
    """
    True if the record is not applied yet in this pass and either
    the bundle is ENABLED, or it is OPTIONAL and the title is empty.
    """
    guard = self._resolve_guard(guard)
    if guard.is_applied(record):
      return False

    status = self.status_for(record)
    if status == Status.ENABLED:
      return True
    if status == Status.OPTIONAL:
      return not (record.get_title() or "")
    return False

  def generate(self, record: Record, guard: Optional[ApplicationGuard] = None) -> str:
    """
    Generate, sanitize, truncate and assign the title of a record.
    Returns the assigned title and marks the record as applied.
    """
    if not record.has_title_attribute():
      raise UnsupportedEntityError(record.entity_type())

    guard = self._resolve_guard(guard)
    config = self.config_for(record)

    pattern = config.effective_pattern
    if pattern:
      title = self._title_from_pattern(pattern, record, config)
    else:
      title = self._fallback_title(record)

    title = strip_control_and_tags(title)
    title = truncate_title(title, self.max_length, self.truncate_unit)

    record.set_title(title)
    guard.mark_applied(record)
    logger.debug(
      "Applied auto title for %s.%s (id=%s): %r",
      record.entity_type(), record.bundle(), record.entity_id(), title,
    )
    return title

  # ------------------------------------------------------------------
  # Internals
  # ------------------------------------------------------------------
  def _resolve_guard(self, guard: Optional[ApplicationGuard]) -> ApplicationGuard:
    if guard is not None:
      return guard
    active = current_guard()
    if active is not None:
      return active
    # Single call outside of any pass: nothing to remember afterwards.
    return ApplicationGuard()

  def _token_context(self, record: Record) -> Dict[str, Any]:
    entity_type = record.entity_type()
    context = {ENTITY_CONTEXT_NAME: record.subject}
    short_name = entity_type.rsplit(".", 1)[-1]
    if short_name:
      context[short_name] = record.subject
    return context

  def _title_from_pattern(self, pattern: str, record: Record, config: BundleConfig) -> str:
    output = self.token_resolver.replace(pattern, self._token_context(record), PATTERN_TOKEN_OPTIONS)
    output = output or ""

    if config.dynamic_code_enabled:
      output = self._evaluate(output, record)

    return output

  def _evaluate(self, code: str, record: Record) -> str:
    try:
      result = self.evaluator.run(code, record)
    except DynamicEvaluationError as exc:
      if isinstance(self.evaluator, DisabledEvaluator):
        logger.error(
          "Dynamic title evaluation refused for %s.%s", record.entity_type(), record.bundle()
        )
      else:
        logger.error(
          "Dynamic title evaluation failed for %s.%s (id=%s): %s",
          record.entity_type(), record.bundle(), record.entity_id(), exc,
        )
      raise
    except AutoTitleError:
      raise
    except Exception as exc:
      logger.error(
        "Dynamic title evaluation failed for %s.%s (id=%s): %s",
        record.entity_type(), record.bundle(), record.entity_id(), exc,
      )
      raise DynamicEvaluationError(record.entity_type(), record.bundle(), str(exc)) from exc
    return "" if result is None else str(result)

  def _fallback_title(self, record: Record) -> str:
    label = str(self.label_resolver.label(record.entity_type(), record.bundle()))
    entity_id = record.entity_id()
    if not entity_id:
      return label
    return gettext("%(type)s %(id)s") % {"type": label, "id": entity_id}
