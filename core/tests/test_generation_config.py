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
import threading

import pytest

from autotitle.generation.config import (
  BundleConfig,
  BundleConfigCache,
  Status,
  parse_flag,
  parse_status,
)


@pytest.mark.parametrize(
  "raw,expected",
  [
    (None, Status.DISABLED),
    ("", Status.DISABLED),
    (0, Status.DISABLED),
    (1, Status.ENABLED),
    (2, Status.OPTIONAL),
    ("1", Status.ENABLED),
    (" 2 ", Status.OPTIONAL),
    ("optional", Status.OPTIONAL),
    ("Enabled", Status.ENABLED),
    (Status.OPTIONAL, Status.OPTIONAL),
    (True, Status.ENABLED),
    (False, Status.DISABLED),
  ],
)
def test_parse_status(raw, expected):
  assert parse_status(raw) is expected


@pytest.mark.parametrize("raw", [7, "sometimes", -1])
def test_parse_status_unknown_values_are_disabled(raw, caplog):
  with caplog.at_level(logging.WARNING, logger="autotitle.generation.config"):
    assert parse_status(raw) is Status.DISABLED
  assert "Unknown auto title status" in caplog.text


def test_bundle_config_from_mapping():
  cfg = BundleConfig.from_mapping({"status": "1", "pattern": " [id] ", "dynamic_code": 1})

  assert cfg.status is Status.ENABLED
  assert cfg.pattern == " [id] "
  assert cfg.effective_pattern == "[id]"
  assert cfg.dynamic_code_enabled is True


def test_bundle_config_missing_is_disabled():
  cfg = BundleConfig.from_mapping(None)
  assert cfg == BundleConfig.disabled()
  assert cfg.status is Status.DISABLED
  assert cfg.pattern == ""
  assert cfg.dynamic_code_enabled is False


def test_bundle_config_from_partial_mapping():
  cfg = BundleConfig.from_mapping({"status": 2})
  assert cfg.status is Status.OPTIONAL
  assert cfg.effective_pattern == ""
  assert cfg.dynamic_code_enabled is False


@pytest.mark.parametrize(
  "raw,expected",
  [
    (True, True),
    (False, False),
    (1, True),
    (0, False),
    (None, False),
    ("", False),
    ("true", True),
    (" Yes ", True),
    ("ON", True),
    ("1", True),
    ("false", False),
    ("0", False),
    ("no", False),
    ("off", False),
  ],
)
def test_dynamic_code_flag_is_parsed_strictly(raw, expected):
  cfg = BundleConfig.from_mapping({"status": 1, "pattern": "x", "dynamic_code": raw})
  assert cfg.dynamic_code_enabled is expected


@pytest.mark.parametrize("raw", ["enabled please", 2, -1, 1.0, ["yes"]])
def test_unknown_dynamic_code_values_stay_off(raw, caplog):
  with caplog.at_level(logging.WARNING, logger="autotitle.generation.config"):
    assert parse_flag(raw) is False
  assert "Unknown auto title dynamic_code value" in caplog.text


# ---------------------------------------------------------------------
# Cache
# ---------------------------------------------------------------------

def test_cache_loads_once_per_key():
  cache = BundleConfigCache()
  calls = []

  def loader():
    calls.append(1)
    return BundleConfig(status=Status.ENABLED)

  first = cache.get(("node", "article"), loader)
  second = cache.get(("node", "article"), loader)

  assert first is second
  assert len(calls) == 1
  assert ("node", "article") in cache


def test_cache_first_published_value_wins():
  cache = BundleConfigCache()
  key = ("node", "article")
  winner = BundleConfig(status=Status.ENABLED, pattern="winner")
  loser = BundleConfig(status=Status.OPTIONAL, pattern="loser")

  def racing_loader():
    # Another caller publishes while this loader is still computing.
    cache.get(key, lambda: winner)
    return loser

  assert cache.get(key, racing_loader) is winner
  assert cache.get(key, lambda: loser) is winner


def test_cache_concurrent_population_is_consistent():
  cache = BundleConfigCache()
  key = ("node", "article")
  barrier = threading.Barrier(8)
  results = []

  def loader():
    barrier.wait(timeout=5)
    return BundleConfig(status=Status.ENABLED, pattern=str(threading.get_ident()))

  def worker():
    results.append(cache.get(key, loader))

  threads = [threading.Thread(target=worker) for _ in range(8)]
  for t in threads:
    t.start()
  for t in threads:
    t.join()

  assert len(results) == 8
  assert all(r is results[0] for r in results)


def test_cache_invalidate_scopes():
  cache = BundleConfigCache()
  for key in [("node", "article"), ("node", "page"), ("user", "user")]:
    cache.get(key, BundleConfig.disabled)

  cache.invalidate("node", "page")
  assert ("node", "page") not in cache
  assert len(cache) == 2

  cache.invalidate("node")
  assert ("node", "article") not in cache
  assert ("user", "user") in cache

  cache.invalidate()
  assert len(cache) == 0
