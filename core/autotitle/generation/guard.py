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
Per-pass application guard.

A record must not get its title generated twice within one processing
pass, e.g. when a bulk action generates the title and the save it
triggers runs the pre-save hook again. The guard replaces an "applied"
attribute on the model instance: it lives in a context variable for the
duration of a pass and is thrown away afterwards, so nothing of it is
ever persisted.
"""

import contextvars
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional, Set, Tuple

_current_guard: contextvars.ContextVar[Optional["ApplicationGuard"]] = contextvars.ContextVar(
  "autotitle_guard", default=None
)


class ApplicationGuard:
  """
  Remembers which records got their title applied in this pass.

  Persisted records are keyed by (entity_type, entity_id) so a long bulk
  pass does not keep processed instances alive. Records without an id yet
  are keyed by the identity of their subject, which is held until the pass
  ends so the id cannot be reused.
  """

  def __init__(self) -> None:
    self._persisted: Set[Tuple[str, str]] = set()
    self._unsaved: Dict[int, Any] = {}

  @staticmethod
  def _persisted_key(record) -> Optional[Tuple[str, str]]:
    entity_id = record.entity_id()
    if entity_id is None or entity_id == "":
      return None
    return (record.entity_type(), str(entity_id))

  def is_applied(self, record) -> bool:
    key = self._persisted_key(record)
    if key is not None and key in self._persisted:
      return True
    # an instance marked while unsaved may have been saved since
    return id(record.subject) in self._unsaved

  def mark_applied(self, record) -> None:
    key = self._persisted_key(record)
    if key is None:
      self._unsaved.setdefault(id(record.subject), record.subject)
    else:
      self._persisted.add(key)

  def __len__(self) -> int:
    return len(self._persisted) + len(self._unsaved)


def current_guard() -> Optional[ApplicationGuard]:
  """Guard of the active generation pass, or None outside of any pass."""
  return _current_guard.get()


@contextmanager
def generation_pass(guard: Optional[ApplicationGuard] = None) -> Iterator[ApplicationGuard]:
  """
  Run a block as one generation pass.
  A fresh guard is installed unless one is given; the previous guard
  (if any) is restored on exit.
  """
  active = guard if guard is not None else ApplicationGuard()
  token = _current_guard.set(active)
  try:
    yield active
  finally:
    _current_guard.reset(token)


@contextmanager
def ensure_generation_pass() -> Iterator[ApplicationGuard]:
  """Join the active pass, or open a new one if there is none."""
  active = current_guard()
  if active is not None:
    yield active
    return
  with generation_pass() as fresh:
    yield fresh
