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
from functools import lru_cache

from django.conf import settings
from django.core.signals import setting_changed
from django.dispatch import receiver
from django.utils.module_loading import import_string

from autotitle.config.bundles import SettingsConfigProvider
from autotitle.constants import TITLE_MAX_LENGTH, TRUNCATE_UNIT_CHARS, TRUNCATE_UNITS
from autotitle.errors import ConfigurationError
from autotitle.generation.engine import TitleGenerationEngine
from autotitle.generation.evaluation import DisabledEvaluator
from autotitle.records import ModelBundleLabelResolver
from autotitle.rendering.tokens import TemplateTokenResolver

logger = logging.getLogger(__name__)


def _load_component(setting_name: str, default_cls):
  path = getattr(settings, setting_name, None)
  if not path:
    return default_cls()
  try:
    cls = import_string(path)
  except ImportError as exc:
    raise ConfigurationError(f"{setting_name}: cannot import '{path}': {exc}") from exc
  return cls()


def build_engine() -> TitleGenerationEngine:
  """Wire a TitleGenerationEngine from AUTOTITLE_* settings."""
  unit = getattr(settings, "AUTOTITLE_TRUNCATE_UNIT", TRUNCATE_UNIT_CHARS) or TRUNCATE_UNIT_CHARS
  if unit not in TRUNCATE_UNITS:
    raise ConfigurationError(f"AUTOTITLE_TRUNCATE_UNIT must be one of {TRUNCATE_UNITS}, got '{unit}'.")

  evaluator = _load_component("AUTOTITLE_EVALUATOR", DisabledEvaluator)
  if not isinstance(evaluator, DisabledEvaluator):
    logger.warning(
      "Dynamic title evaluator %s is active: bundles with dynamic_code run their pattern as code. "
      "Only superusers may be allowed to change AUTOTITLE_BUNDLES.",
      type(evaluator).__name__,
    )

  return TitleGenerationEngine(
    config_provider=_load_component("AUTOTITLE_CONFIG_PROVIDER", SettingsConfigProvider),
    token_resolver=_load_component("AUTOTITLE_TOKEN_RESOLVER", TemplateTokenResolver),
    label_resolver=_load_component("AUTOTITLE_LABEL_RESOLVER", ModelBundleLabelResolver),
    evaluator=evaluator,
    max_length=int(getattr(settings, "AUTOTITLE_MAX_LENGTH", TITLE_MAX_LENGTH)),
    truncate_unit=unit,
  )


@lru_cache(maxsize=1)
def get_engine() -> TitleGenerationEngine:
  """Process-wide engine; its bundle config cache lives as long as it does."""
  return build_engine()


def reset_engine() -> None:
  get_engine.cache_clear()


@receiver(setting_changed)
def _reset_on_setting_change(sender, setting: str, **kwargs) -> None:
  if setting.startswith("AUTOTITLE_"):
    reset_engine()
