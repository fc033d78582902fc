"""Unit tests for the Django pagefindex adapter.

This module ensures Django is configured before any test modules are imported.
"""

import os

# Set Django settings module before any Django imports
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "django.conf.global_settings")
