"""
List Row Widget
Thumbnail on the left, bold title and gray subtitle stacked on the right.
"""
from __future__ import annotations

from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from listcarousel import config


def item_subtitle(item: str) -> str:
    """Secondary line shown under each list item."""
    return f"Length: {len(item)} characters"


class ItemRow(QWidget):
    def __init__(self, title: str, subtitle: str, thumbnail: QPixmap, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(10)

        self.lbl_image = QLabel()
        self.lbl_image.setFixedSize(config.THUMBNAIL_SIZE, config.THUMBNAIL_SIZE)
        self.lbl_image.setPixmap(thumbnail)
        self.lbl_image.setScaledContents(True)
        layout.addWidget(self.lbl_image)

        text_layout = QVBoxLayout()
        text_layout.setSpacing(4)

        self.lbl_title = QLabel(title)
        self.lbl_title.setStyleSheet("font-weight: bold; font-size: 16px;")
        text_layout.addWidget(self.lbl_title)

        self.lbl_subtitle = QLabel(subtitle)
        self.lbl_subtitle.setStyleSheet("color: gray; font-size: 14px;")
        text_layout.addWidget(self.lbl_subtitle)

        layout.addLayout(text_layout)
        layout.addStretch()

    @property
    def title(self) -> str:
        return self.lbl_title.text()

    @property
    def subtitle(self) -> str:
        return self.lbl_subtitle.text()
