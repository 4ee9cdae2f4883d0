"""
views package
~~~~~~~~~~~~~
Convenience re‑exports so other modules can write:

    from views import GridView, ApplicationWindow
"""
from .grid_view import GridView  # noqa: F401
from .about_panel import AboutPanel  # noqa: F401
from .application_window import ApplicationWindow  # noqa: F401
