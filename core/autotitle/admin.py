from django.contrib import admin, messages

from autotitle.services.regenerate import regenerate_titles


@admin.action(description="Update automatic titles", permissions=["change"])
def update_automatic_titles(modeladmin, request, queryset):
  summary = regenerate_titles(queryset)

  level = messages.WARNING if summary.failed else messages.SUCCESS
  modeladmin.message_user(request, summary.as_message(), level=level)
  for pk, error in summary.failed:
    modeladmin.message_user(request, f"[{pk}] {error}", level=messages.ERROR)


class AutoTitleAdminMixin:
  """Adds the "Update automatic titles" action to a ModelAdmin."""

  def get_actions(self, request):
    actions = super().get_actions(request)
    name = update_automatic_titles.__name__
    if name not in actions and self.has_change_permission(request):
      actions[name] = (update_automatic_titles, name, update_automatic_titles.short_description)
    return actions
