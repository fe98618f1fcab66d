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
Management command to (re)generate automatic titles for a registered model.

It reuses regenerate_titles() so that the same logic can be triggered
from CLI, CI/CD, or the admin action.
"""

from django.apps import apps
from django.core.management.base import BaseCommand, CommandError

from autotitle.errors import AutoTitleError
from autotitle.registry import model_options, registered_entity_types
from autotitle.services.regenerate import regenerate_titles


class Command(BaseCommand):
  help = "Update automatic titles of all instances of a registered model."

  def add_arguments(self, parser):
    parser.add_argument(
      "model",
      help="Model label, e.g. 'news.article'. Must be listed in AUTOTITLE_MODELS.",
    )
    parser.add_argument(
      "--bundle",
      "-b",
      dest="bundle",
      help="Only process instances whose bundle field equals this value.",
    )
    parser.add_argument(
      "--dry-run",
      action="store_true",
      dest="dry_run",
      help="Generate titles but do not save any instance.",
    )

  def handle(self, *args, **options):
    entity_type = (options.get("model") or "").lower()
    bundle = options.get("bundle")
    dry_run = options.get("dry_run", False)

    opts = model_options(entity_type)
    if opts is None:
      registered = ", ".join(registered_entity_types()) or "<none>"
      raise CommandError(f"Model '{entity_type}' is not in AUTOTITLE_MODELS (registered: {registered}).")

    try:
      model = apps.get_model(entity_type)
    except (LookupError, ValueError) as exc:
      raise CommandError(str(exc))

    qs = model._default_manager.all().order_by("pk")
    if bundle:
      if not opts.bundle_field:
        raise CommandError(f"Model '{entity_type}' has no bundle_field; --bundle is not supported.")
      qs = qs.filter(**{opts.bundle_field: bundle})

    try:
      summary = regenerate_titles(qs.iterator(), dry_run=dry_run)
    except AutoTitleError as exc:
      raise CommandError(str(exc))

    prefix = "[dry-run] " if dry_run else ""
    self.stdout.write(f"{prefix}Processed {summary.processed} {entity_type} instance(s).")
    style = self.style.WARNING if summary.failed else self.style.SUCCESS
    self.stdout.write(style(f"{prefix}{summary.as_message()}"))
    for pk, error in summary.failed:
      self.stdout.write(self.style.ERROR(f"  - [{pk}] {error}"))
