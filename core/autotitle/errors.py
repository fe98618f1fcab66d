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
Exception hierarchy for automatic title generation.

Missing bundle configuration is not an error (it means "disabled"), and an
overlong title is silently truncated. Everything else surfaces as one of
the exceptions below, raised synchronously from the engine.
"""


class AutoTitleError(Exception):
  """Base class for all automatic title errors."""


class UnsupportedEntityError(AutoTitleError):
  """The record has no title-capable attribute."""

  def __init__(self, entity_type: str, message: str | None = None):
    self.entity_type = entity_type
    super().__init__(message or f"Entity type '{entity_type}' has no title attribute.")


class DynamicEvaluationError(AutoTitleError):
  """The evaluator failed while running an expanded title pattern."""

  def __init__(self, entity_type: str, bundle: str, message: str):
    self.entity_type = entity_type
    self.bundle = bundle
    super().__init__(f"[{entity_type}.{bundle}] {message}")


class TokenResolutionError(AutoTitleError):
  """The token resolver could not expand a title pattern."""


class ConfigurationError(AutoTitleError):
  """An AUTOTITLE_* setting is invalid."""
