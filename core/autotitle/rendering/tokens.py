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
Token resolver backed by the Django template language.

Patterns use plain template variables and filters, e.g.

  "{{ article.author.last_name }}: {{ entity.created_at|date:'Y-m-d' }}"

The resolver uses its own template Engine so project-wide TEMPLATES
options (notably string_if_invalid) never leak into titles.
"""

from functools import lru_cache
from typing import Any, Mapping

from django.template import Context, Engine, TemplateSyntaxError

from autotitle.errors import TokenResolutionError
from autotitle.generation.ports import TokenOptions

# Rendered in place of an unresolved token when clear_unresolved is off.
UNRESOLVED_MARKER = "{{ %s }}"


@lru_cache(maxsize=4)
def _engine(clear_unresolved: bool, autoescape: bool) -> Engine:
  return Engine(
    string_if_invalid="" if clear_unresolved else UNRESOLVED_MARKER,
    autoescape=autoescape,
  )


class TemplateTokenResolver:
  def replace(self, pattern: str, context: Mapping[str, Any], options: TokenOptions) -> str:
    if not pattern:
      return ""
    engine = _engine(options.clear_unresolved, options.sanitize)
    try:
      template = engine.from_string(pattern)
    except TemplateSyntaxError as exc:
      raise TokenResolutionError(f"Invalid title pattern {pattern!r}: {exc}") from exc
    return template.render(Context(dict(context), autoescape=options.sanitize))
