from PyQt5.QtCore import pyqtSignal, Qt
from PyQt5.QtWidgets import QMainWindow, QAction, QDockWidget
from PyQt5.QtGui import QGuiApplication

from models.app_state import AppState, MenuAction, OverlayId, RequestOpenLink, grid_rows
from utils.config import DEFAULT_WINDOW_SIZE, MAIN_WINDOW_ID
from utils.strings import tr

from .about_panel import AboutPanel
from .grid_view import GridView


class ApplicationWindow(QMainWindow):
    message_requested = pyqtSignal(object)
    resized = pyqtSignal(str, int, int)  # window_id, width, height
    closing = pyqtSignal()

    def __init__(self) -> None:
        super().__init__()

        # Default size, will be overridden by saved geometry
        self.resize(*DEFAULT_WINDOW_SIZE)
        self.center()

        self._create_actions()
        self._create_menu()

        self.grid_view = GridView()
        self.setCentralWidget(self.grid_view)

        self.about_panel = AboutPanel()
        self.about_panel.link_requested.connect(
            lambda url: self.message_requested.emit(RequestOpenLink(url))
        )

        self.context_drawer = QDockWidget(self)
        self.context_drawer.setObjectName("contextDrawer")
        self.context_drawer.setFeatures(QDockWidget.NoDockWidgetFeatures)
        self.context_drawer.setAllowedAreas(Qt.RightDockWidgetArea)
        self.addDockWidget(Qt.RightDockWidgetArea, self.context_drawer)
        self.context_drawer.hide()

    def _create_actions(self):
        self.about_action = QAction(tr("about"), self)
        self.about_action.triggered.connect(
            lambda: self.message_requested.emit(MenuAction.ABOUT.message())
        )

    def _create_menu(self):
        menu_bar = self.menuBar()
        view_menu = menu_bar.addMenu(tr("view"))
        view_menu.addAction(self.about_action)

    def center(self):
        qr = self.frameGeometry()
        cp = QGuiApplication.primaryScreen().availableGeometry().center()
        qr.moveCenter(cp)
        self.move(qr.topLeft())

    def render(self, state: AppState):
        """Brings the widgets in line with *state*."""
        self.grid_view.set_rows(grid_rows(state))

        if state.overlay is None:
            self.context_drawer.hide()
            return

        if state.overlay is OverlayId.ABOUT:
            if self.context_drawer.widget() is not self.about_panel:
                self.context_drawer.setWidget(self.about_panel)
        self.context_drawer.show()

    def set_context_title(self, title: str):
        self.context_drawer.setWindowTitle(title)

    def viewport_width(self) -> int:
        return self.width()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        size = event.size()
        self.resized.emit(MAIN_WINDOW_ID, size.width(), size.height())

    def closeEvent(self, event):
        self.closing.emit()
        super().closeEvent(event)
