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
Django settings for the autotitle site.

Auto title settings can be provided through the environment:
  AUTOTITLE_MODELS        JSON: {"app.model": {"title_field": "...", "bundle_field": "..."}}
  AUTOTITLE_BUNDLES       JSON: {"app.model": {"bundle": {"status": 1, "pattern": "..."}}}
  AUTOTITLE_EVALUATOR     dotted path; leave empty to keep dynamic evaluation disabled
  AUTOTITLE_TRUNCATE_UNIT "chars" (default) or "bytes"
"""

from pathlib import Path

from utils.env import env_bool, env_int, env_json, env_list, env_str

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = env_str("DJANGO_SECRET_KEY", "autotitle-insecure-dev-key")
DEBUG = env_bool("DJANGO_DEBUG", False)
ALLOWED_HOSTS = env_list("DJANGO_ALLOWED_HOSTS", ["localhost", "127.0.0.1"])

INSTALLED_APPS = [
  "django.contrib.admin",
  "django.contrib.auth",
  "django.contrib.contenttypes",
  "django.contrib.sessions",
  "django.contrib.messages",
  "autotitle",
]

MIDDLEWARE = [
  "django.middleware.security.SecurityMiddleware",
  "django.contrib.sessions.middleware.SessionMiddleware",
  "django.middleware.common.CommonMiddleware",
  "django.middleware.csrf.CsrfViewMiddleware",
  "django.contrib.auth.middleware.AuthenticationMiddleware",
  "django.contrib.messages.middleware.MessageMiddleware",
  "crum.CurrentRequestUserMiddleware",
  "autotitle_site.middleware.GenerationPassMiddleware",
]

ROOT_URLCONF = "autotitle_site.urls"

TEMPLATES = [
  {
    "BACKEND": "django.template.backends.django.DjangoTemplates",
    "DIRS": [],
    "APP_DIRS": True,
    "OPTIONS": {
      "context_processors": [
        "django.template.context_processors.request",
        "django.contrib.auth.context_processors.auth",
        "django.contrib.messages.context_processors.messages",
      ],
    },
  },
]

DATABASES = {
  "default": {
    "ENGINE": "django.db.backends.sqlite3",
    "NAME": env_str("DJANGO_DB_PATH", str(BASE_DIR / "db.sqlite3")),
  }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
USE_I18N = True
USE_TZ = True
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
STATIC_URL = "static/"

# -------------------------------------------------------------------
# Automatic titles
# -------------------------------------------------------------------
AUTOTITLE_MODELS = env_json("AUTOTITLE_MODELS", {})
AUTOTITLE_BUNDLES = env_json("AUTOTITLE_BUNDLES", {})
AUTOTITLE_BUNDLE_LABELS = env_json("AUTOTITLE_BUNDLE_LABELS", {})
AUTOTITLE_EVALUATOR = env_str("AUTOTITLE_EVALUATOR", None)
AUTOTITLE_TRUNCATE_UNIT = env_str("AUTOTITLE_TRUNCATE_UNIT", "chars")
AUTOTITLE_MAX_LENGTH = env_int("AUTOTITLE_MAX_LENGTH", 255)

LOGGING = {
  "version": 1,
  "disable_existing_loggers": False,
  "handlers": {
    "console": {"class": "logging.StreamHandler"},
  },
  "loggers": {
    "autotitle": {
      "handlers": ["console"],
      "level": env_str("AUTOTITLE_LOG_LEVEL", "INFO"),
    },
  },
}
