"""Django integration for pagefindex.

Add ``"pagefindex_django"`` to ``INSTALLED_APPS`` and configure it through the
``PAGEFIND`` settings dict:

    PAGEFIND = {
        "SITE": BASE_DIR / "_site",
        "RUN_WITH": "local",
        "VERSION": "1.4.0",
        "ENABLED": True,
        "ON_ERROR": "fail",
    }

``python manage.py pagefind`` indexes the site once; with ``ENABLED`` set, each
``site_built`` signal indexes the builder's output directory.
"""

__version__ = "0.1.0"
