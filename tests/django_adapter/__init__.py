"""Tests for the Django pagefindex adapter.

Django settings are configured by the session fixture in unit/conftest.py.
"""
