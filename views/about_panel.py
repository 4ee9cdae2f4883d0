from PyQt5.QtCore import Qt, QByteArray, QSize, pyqtSignal
from PyQt5.QtSvg import QSvgWidget
from PyQt5.QtWidgets import QWidget, QLabel, QPushButton, QVBoxLayout

from utils.config import REPOSITORY
from utils.strings import tr

APP_ICON_SVG = """
<svg xmlns="http://www.w3.org/2000/svg" width="128" height="128" viewBox="0 0 24 24" fill="none" stroke="#3584e4" stroke-width="1.5" stroke-linecap="round" stroke-linejoin="round">
  <rect x="3" y="3" width="7" height="7" rx="1"/>
  <rect x="14" y="3" width="7" height="7" rx="1"/>
  <rect x="3" y="14" width="7" height="7" rx="1"/>
  <circle cx="17.5" cy="17.5" r="3.5"/>
</svg>
"""


class AboutPanel(QWidget):
    """Icon, application title and a link to the project repository."""
    link_requested = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)

        self.icon = QSvgWidget()
        self.icon.load(QByteArray(APP_ICON_SVG.encode("utf-8")))
        self.icon.setFixedSize(QSize(128, 128))

        self.title_lbl = QLabel(tr("app-title"))
        self.title_lbl.setObjectName("aboutTitle")
        self.title_lbl.setAlignment(Qt.AlignCenter)
        self.title_lbl.setStyleSheet("font-size: 20px; font-weight: bold;")

        self.link_btn = QPushButton(REPOSITORY)
        self.link_btn.setFlat(True)
        self.link_btn.setCursor(Qt.PointingHandCursor)
        self.link_btn.setStyleSheet("color: #3584e4; text-decoration: underline; padding: 0;")
        self.link_btn.clicked.connect(lambda: self.link_requested.emit(REPOSITORY))

        lay = QVBoxLayout(self)
        lay.setSpacing(4)
        lay.addWidget(self.icon, 0, Qt.AlignCenter)
        lay.addWidget(self.title_lbl, 0, Qt.AlignCenter)
        lay.addWidget(self.link_btn, 0, Qt.AlignCenter)
        lay.addStretch(1)
