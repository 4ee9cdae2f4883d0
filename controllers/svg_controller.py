from __future__ import annotations
from pathlib import Path
from typing import List, Optional, Union

from PyQt5.QtCore import QObject, QSettings, QTimer, QUrl, QByteArray, pyqtSlot
from PyQt5.QtGui import QDesktopServices

from models.app_state import (
    Effect, Message, ResizeEvent, SetRowCapacity,
    SetWindowTitle, SetContextTitle, MeasureViewport, OpenUrl,
    init, update, resize_message,
)
from utils.config import ORG_NAME, APP_NAME, SETTINGS_GEOMETRY, SVG_DIR, MAIN_WINDOW_ID
from utils.ui import compute_row_capacity
from views.application_window import ApplicationWindow


class SvgController(QObject):
    """
    Hosts the state machine inside the Qt event loop.

    Messages from the window go through dispatch(), which runs the reducer,
    carries out the returned effects and re-renders. Qt delivers signals one
    at a time on the GUI thread, so the reducer is never re-entered.
    """

    def __init__(self, directory: Optional[Union[str, Path]] = SVG_DIR,
                 settings: Optional[QSettings] = None, show: bool = True):
        super().__init__()
        self.settings = settings if settings is not None else QSettings(ORG_NAME, APP_NAME)

        self.window = ApplicationWindow()
        self._restore_geometry()

        self.state, effects = init(directory)
        print(f"[INFO] Loaded {len(self.state.items)} images from '{directory}'")

        self._wire_signals()
        self.window.render(self.state)
        self._run_effects(effects)

        if show:
            self.window.show()

    def _wire_signals(self):
        self.window.message_requested.connect(self.dispatch)
        self.window.resized.connect(self._on_window_resized)
        self.window.closing.connect(self._on_window_close)

    @pyqtSlot(object)
    def dispatch(self, message: Message):
        previous = self.state
        self.state, effects = update(self.state, message)
        if self.state.row_capacity != previous.row_capacity:
            print(f"[INFO] Row capacity: {previous.row_capacity} -> {self.state.row_capacity}")
        self._run_effects(effects)
        self.window.render(self.state)

    def _run_effects(self, effects: List[Effect]):
        for effect in effects:
            if isinstance(effect, SetWindowTitle):
                self.window.setWindowTitle(effect.title)
            elif isinstance(effect, SetContextTitle):
                self.window.set_context_title(effect.title)
            elif isinstance(effect, MeasureViewport):
                self._measure_viewport(effect.window_id)
            elif isinstance(effect, OpenUrl):
                self._open_url(effect.url)
            else:
                raise TypeError(f"Unknown effect: {effect!r}")

    def _measure_viewport(self, window_id: str):
        # Deferred so the window is realized before its width is read.
        if window_id != MAIN_WINDOW_ID:
            return
        QTimer.singleShot(0, lambda: self.dispatch(
            SetRowCapacity(compute_row_capacity(self.window.viewport_width()))
        ))

    def _open_url(self, url: str):
        if not QDesktopServices.openUrl(QUrl(url)):
            print(f"[WARN] Could not open {url}")

    @pyqtSlot(str, int, int)
    def _on_window_resized(self, window_id: str, width: int, height: int):
        message = resize_message(ResizeEvent(window_id, width, height))
        if message is not None:
            self.dispatch(message)

    def _on_window_close(self):
        self.settings.setValue(SETTINGS_GEOMETRY, self.window.saveGeometry())

    def _restore_geometry(self):
        geometry = self.settings.value(SETTINGS_GEOMETRY, QByteArray(), type=QByteArray)
        if not geometry.isEmpty():
            self.window.restoreGeometry(geometry)
