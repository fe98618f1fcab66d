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

from autotitle.generation.guard import generation_pass


class GenerationPassMiddleware:
  """
  Run every request as one auto title generation pass, so a record
  touched by both a bulk action and the pre-save hook within the same
  request gets its title generated only once.
  """

  def __init__(self, get_response):
    self.get_response = get_response

  def __call__(self, request):
    with generation_pass():
      return self.get_response(request)
