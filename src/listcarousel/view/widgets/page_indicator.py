"""
Page Indicator
Row of dots under the carousel; the current page is drawn darker.
"""
from __future__ import annotations

from PySide6.QtCore import Qt, QPointF, QSize, Signal
from PySide6.QtGui import QColor, QMouseEvent, QPainter, QPaintEvent
from PySide6.QtWidgets import QSizePolicy, QWidget


class PageIndicator(QWidget):
    # Emitted with the page index when the user clicks a dot
    page_selected = Signal(int)

    DOT_DIAMETER = 8
    DOT_SPACING = 16
    CURRENT_COLOR = QColor("black")
    OTHER_COLOR = QColor("lightgray")

    def __init__(self, count: int = 0, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._count = count
        self._current = 0
        self.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
        self.setCursor(Qt.PointingHandCursor)

    # --- PROPERTIES ---

    @property
    def current(self) -> int:
        return self._current

    def set_current(self, index: int) -> None:
        if index != self._current:
            self._current = index
            self.update()

    # --- GEOMETRY ---

    def sizeHint(self) -> QSize:
        return QSize(max(self._count, 1) * self.DOT_SPACING + self.DOT_SPACING, self.DOT_SPACING + 4)

    def dot_center(self, index: int) -> QPointF:
        """Center of dot `index` in widget coordinates."""
        row_width = self._count * self.DOT_SPACING
        left = (self.width() - row_width) / 2
        return QPointF(left + (index + 0.5) * self.DOT_SPACING, self.height() / 2)

    def dot_at(self, x: float) -> int | None:
        """Index of the dot slot under horizontal position `x`, if any."""
        left = (self.width() - self._count * self.DOT_SPACING) / 2
        index = int((x - left) // self.DOT_SPACING)
        if 0 <= index < self._count:
            return index
        return None

    # --- EVENTS ---

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.setPen(Qt.NoPen)
        radius = self.DOT_DIAMETER / 2
        for i in range(self._count):
            painter.setBrush(self.CURRENT_COLOR if i == self._current else self.OTHER_COLOR)
            painter.drawEllipse(self.dot_center(i), radius, radius)
        painter.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        index = self.dot_at(event.position().x())
        if index is not None:
            self.set_current(index)
            self.page_selected.emit(index)
        super().mousePressEvent(event)
