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

import os
import sys
from pathlib import Path

import pytest


def main():
  """Configure Django and run pytest."""
  root = Path(__file__).resolve().parent

  # Repository root for 'utils', core/ for 'autotitle' and 'autotitle_site'
  for path in (root, root / "core"):
    if str(path) not in sys.path:
      sys.path.insert(0, str(path))

  os.environ.setdefault("DJANGO_SETTINGS_MODULE", "autotitle_site.settings")

  # Run tests in core/tests
  return pytest.main([str(root / "core" / "tests"), *sys.argv[1:]])


if __name__ == "__main__":
  raise SystemExit(main())
