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

import logging

from autotitle.generation.guard import current_guard
from autotitle_site.middleware import GenerationPassMiddleware
from utils.env import env_bool, env_int, env_json, env_list, env_str


def test_middleware_wraps_request_in_generation_pass():
  seen = []

  def get_response(request):
    seen.append(current_guard())
    return "response"

  middleware = GenerationPassMiddleware(get_response)

  assert middleware(object()) == "response"
  assert middleware(object()) == "response"
  assert seen[0] is not None
  assert seen[1] is not None
  assert seen[0] is not seen[1]
  assert current_guard() is None


def test_env_helpers(monkeypatch):
  monkeypatch.setenv("AT_STR", "x")
  monkeypatch.setenv("AT_EMPTY", "")
  monkeypatch.setenv("AT_BOOL", " Yes ")
  monkeypatch.setenv("AT_INT", "12")
  monkeypatch.setenv("AT_LIST", "a, b,,c")

  assert env_str("AT_STR") == "x"
  assert env_str("AT_EMPTY", "d") == "d"
  assert env_bool("AT_BOOL") is True
  assert env_bool("AT_MISSING", True) is True
  assert env_int("AT_INT") == 12
  assert env_list("AT_LIST") == ["a", "b", "c"]


def test_env_int_invalid_falls_back(monkeypatch, caplog):
  monkeypatch.setenv("AT_INT", "twelve")
  with caplog.at_level(logging.WARNING, logger="utils.env"):
    assert env_int("AT_INT", 3) == 3
  assert "AT_INT" in caplog.text


def test_env_json(monkeypatch, caplog):
  monkeypatch.setenv("AUTOTITLE_MODELS", '{"news.article": {"title_field": "title"}}')
  assert env_json("AUTOTITLE_MODELS", {}) == {"news.article": {"title_field": "title"}}

  monkeypatch.setenv("AUTOTITLE_MODELS", "[1, 2]")
  with caplog.at_level(logging.WARNING, logger="utils.env"):
    assert env_json("AUTOTITLE_MODELS", {}) == {}

  monkeypatch.setenv("AUTOTITLE_MODELS", "{not json")
  with caplog.at_level(logging.WARNING, logger="utils.env"):
    assert env_json("AUTOTITLE_MODELS", {}) == {}
  assert "not valid JSON" in caplog.text
