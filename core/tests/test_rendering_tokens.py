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

from types import SimpleNamespace

import pytest

from autotitle.errors import TokenResolutionError
from autotitle.generation.ports import TokenOptions
from autotitle.rendering.tokens import TemplateTokenResolver


@pytest.fixture
def resolver():
  return TemplateTokenResolver()


@pytest.fixture
def article():
  return SimpleNamespace(pk=42, headline="Fish & Chips", author=SimpleNamespace(name="Ada"))


def test_replaces_tokens(resolver, article):
  out = resolver.replace("P-{{ article.pk }}", {"article": article}, TokenOptions())
  assert out == "P-42"


def test_nested_attributes_and_filters(resolver, article):
  out = resolver.replace(
    "{{ entity.headline|upper }} by {{ entity.author.name }}",
    {"entity": article},
    TokenOptions(),
  )
  assert out == "FISH & CHIPS by Ada"


def test_unresolved_tokens_are_cleared(resolver, article):
  out = resolver.replace("A{{ article.nope }}B", {"article": article}, TokenOptions(clear_unresolved=True))
  assert out == "AB"


def test_unresolved_tokens_are_kept_when_not_clearing(resolver, article):
  out = resolver.replace("A{{ article.nope }}B", {"article": article}, TokenOptions(clear_unresolved=False))
  assert out == "A{{ article.nope }}B"


def test_sanitize_escapes_values(resolver, article):
  out = resolver.replace("{{ article.headline }}", {"article": article}, TokenOptions(sanitize=True))
  assert out == "Fish &amp; Chips"


def test_invalid_pattern_raises(resolver):
  with pytest.raises(TokenResolutionError):
    resolver.replace("{% if %}", {}, TokenOptions())


def test_empty_pattern(resolver):
  assert resolver.replace("", {}, TokenOptions()) == ""
