"""
Automatic title generation for content records.

Django app: add "autotitle" to INSTALLED_APPS, register models in
AUTOTITLE_MODELS and configure bundles in AUTOTITLE_BUNDLES.
"""
