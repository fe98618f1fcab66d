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
Ports (interfaces) between the title engine and its host.

The engine only talks to these small, capability-oriented protocols so it
stays independent of any concrete record, configuration store or token
language. Django implementations live in autotitle.records,
autotitle.config and autotitle.rendering.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class TokenOptions:
  # sanitize: escape token values for markup output
  # clear_unresolved: replace unknown tokens with an empty string
  sanitize: bool = False
  clear_unresolved: bool = True


@runtime_checkable
class Record(Protocol):
  """A content record whose title may be generated."""

  subject: Any

  def has_title_attribute(self) -> bool:
    """True if the record type carries a title attribute."""

  def title_attribute_name(self) -> str:
    """Name of the title attribute, empty if there is none."""

  def entity_id(self) -> Optional[Any]:
    """Persisted identifier, or None for a record not saved yet."""

  def get_title(self) -> str:
    """Current title value."""

  def set_title(self, value: str) -> None:
    """Assign a new title value (without persisting)."""

  def entity_type(self) -> str:
    """Entity type key, e.g. 'news.article'."""

  def bundle(self) -> str:
    """Bundle key; equals entity_type() when the type has no bundles."""


@runtime_checkable
class ConfigProvider(Protocol):
  """Supplies the per (entity type, bundle) auto title settings."""

  def get(self, entity_type: str, bundle: str) -> Optional[Mapping[str, Any]]:
    """Return the raw settings mapping, or None when nothing is configured."""


@runtime_checkable
class TokenResolver(Protocol):
  """Expands a title pattern against a record context."""

  def replace(self, pattern: str, context: Mapping[str, Any], options: TokenOptions) -> str:
    """Return the pattern with all tokens substituted."""


@runtime_checkable
class BundleLabelResolver(Protocol):
  """Resolves a human readable label for an entity type / bundle."""

  def label(self, entity_type: str, bundle: str) -> str:
    """Return the bundle label (or the entity type label)."""


@runtime_checkable
class Evaluator(Protocol):
  """Executes an expanded title pattern as code and returns its output."""

  def run(self, code: str, record: Record) -> str:
    """Run code with the record in scope and return the captured output."""
