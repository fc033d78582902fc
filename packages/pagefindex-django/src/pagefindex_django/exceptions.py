"""Django adapter exceptions.

Relationship to domain exceptions:
- Domain exceptions (PagefindError and subclasses) are raised by the core
  when pagefind cannot be configured, resolved or installed.
- PagefindIndexError is raised by the site-build hook when indexing fails
  and ``ON_ERROR`` is ``"fail"``, so the build that sent the signal aborts.
"""

from pagefindex.domain.exceptions import PagefindError


class PagefindIndexError(PagefindError):
    """Raised by the site-build hook when indexing fails in ``fail`` mode.

    The message is the formatted error report (exit code, command line and
    pagefind output) or the resolution error text.
    """

    pass
