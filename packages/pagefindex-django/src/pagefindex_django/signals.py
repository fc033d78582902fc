"""Django signals for static site builds.

A site builder (a management command, a django-distill or django-bakery
post-build step, a dev-server reloader) sends ``site_built`` after writing
its output. pagefindex listens for it and indexes the output directory:

    from pagefindex_django.signals import site_built

    def build(out_dir):
        ...  # render pages into out_dir
        site_built.send(sender=build, out_dir=out_dir)

Pass ``server=True`` from a long-running dev server so that ``on_error:
fail`` logs instead of raising.
"""

from django.dispatch import Signal

# Sent after a site build finishes.
# Provides out_dir (str or Path) and optionally server (bool).
site_built: Signal = Signal()
