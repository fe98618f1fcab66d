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
Dynamic title evaluation.

When a bundle sets ``dynamic_code``, the token-expanded pattern is handed
to an Evaluator and its output becomes the title. This is a trust
boundary: whoever can edit AUTOTITLE_BUNDLES and wire a concrete evaluator
via AUTOTITLE_EVALUATOR can run arbitrary code inside the process. Keep
both settings restricted to the most privileged role of the deployment
(whoever may change settings / environment, i.e. superusers).

The default wiring is DisabledEvaluator, which refuses to run anything.
"""

import contextlib
import io
import logging

from crum import get_current_user

from autotitle.errors import DynamicEvaluationError

logger = logging.getLogger(__name__)


def _actor() -> str:
  user = get_current_user()
  if user is None or getattr(user, "is_anonymous", False):
    return "<system>"
  return str(getattr(user, "username", user))


class DisabledEvaluator:
  """Evaluator used when no concrete evaluator is configured."""

  def run(self, code: str, record) -> str:
    raise DynamicEvaluationError(
      record.entity_type(),
      record.bundle(),
      "Dynamic code is enabled for this bundle but no evaluator is configured "
      "(set AUTOTITLE_EVALUATOR).",
    )


class PythonEvaluator:
  """
  Executes the expanded pattern as Python source and returns what it prints.

  The code sees two names:
    - entity: the wrapped model instance
    - record: the record adapter
  Example pattern: print(entity.author.get_full_name(), "on", entity.pk)
  """

  def run(self, code: str, record) -> str:
    logger.info(
      "Evaluating dynamic title for %s.%s (id=%s, actor=%s)",
      record.entity_type(), record.bundle(), record.entity_id(), _actor(),
    )
    scope = {"entity": record.subject, "record": record}
    buffer = io.StringIO()
    with contextlib.redirect_stdout(buffer):
      exec(compile(code, "<autotitle>", "exec"), scope)
    return buffer.getvalue()
