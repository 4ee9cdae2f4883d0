from __future__ import annotations
from typing import List, Optional

from PyQt5.QtCore import Qt, QSize
from PyQt5.QtGui import QFontMetrics
from PyQt5.QtSvg import QSvgWidget
from PyQt5.QtWidgets import (
    QWidget, QLabel, QVBoxLayout, QGridLayout, QScrollArea, QFrame
)

from models.svg_model import ImageEntry
from utils.config import (
    GRID_ITEM_WIDTH, ICON_SIZE, CAPTION_SPACING, ROW_SPACING, COLUMN_SPACING
)
from utils.strings import tr


class _GridItem(QWidget):
    def __init__(self, entry: ImageEntry):
        super().__init__()
        self.entry = entry

        lay = QVBoxLayout(self)
        lay.setContentsMargins(0, 0, 0, 0)
        lay.setSpacing(CAPTION_SPACING)

        self.icon = QSvgWidget(str(entry.path))
        self.icon.setFixedSize(QSize(ICON_SIZE, ICON_SIZE))

        fm = QFontMetrics(self.font())
        elided_name = fm.elidedText(entry.label, Qt.ElideRight, GRID_ITEM_WIDTH - 2 * COLUMN_SPACING)
        self.caption = QLabel(elided_name)
        self.caption.setToolTip(entry.path.name)
        self.caption.setAlignment(Qt.AlignCenter)

        lay.addWidget(self.icon, 0, Qt.AlignCenter)
        lay.addWidget(self.caption, 0, Qt.AlignCenter)


class GridView(QWidget):
    """Scrollable grid of SVG previews, or a welcome caption before the first layout."""

    def __init__(self):
        super().__init__()
        self._rows: Optional[List[List[ImageEntry]]] = None
        self.grid_item_widgets: List[_GridItem] = []

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setFrameShape(QFrame.NoFrame)
        self.scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.addWidget(self.scroll_area)
        self._render_items()

    def set_rows(self, rows: Optional[List[List[ImageEntry]]]):
        if rows == self._rows:
            return
        self._rows = rows
        self._render_items()

    def _render_items(self):
        if self.scroll_area.widget():
            self.scroll_area.widget().deleteLater()
        self.grid_item_widgets.clear()

        self.content_widget = QWidget()
        self.scroll_area.setWidget(self.content_widget)

        if self._rows is None:
            layout = QVBoxLayout(self.content_widget)
            welcome = QLabel(tr("welcome"))
            welcome.setObjectName("welcomeLabel")
            welcome.setAlignment(Qt.AlignCenter)
            layout.addWidget(welcome)
            return

        layout = QGridLayout(self.content_widget)
        layout.setAlignment(Qt.AlignTop | Qt.AlignHCenter)
        layout.setVerticalSpacing(ROW_SPACING)
        layout.setHorizontalSpacing(COLUMN_SPACING)

        for row, entries in enumerate(self._rows):
            for col, entry in enumerate(entries):
                widget = _GridItem(entry)
                layout.addWidget(widget, row, col, Qt.AlignCenter)
                self.grid_item_widgets.append(widget)

