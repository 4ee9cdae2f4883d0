"""
models package
~~~~~~~~~~~~~~
Exposes the application state machine and the image listing for easy import:
    from models import AppState, ImageEntry, update
"""
from .svg_model import ImageEntry, list_images  # noqa: F401
from .app_state import (  # noqa: F401
    AppState, OverlayId, MenuAction, ResizeEvent,
    RequestOpenLink, ToggleOverlay, SetRowCapacity,
    SetWindowTitle, SetContextTitle, MeasureViewport, OpenUrl,
    init, update, resize_message, grid_rows,
)
