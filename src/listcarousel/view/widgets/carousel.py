"""
Image Carousel
==============
Horizontal, paged strip of group images.

A page becomes current either when the user clicks it or when a scroll
gesture comes to rest; in both cases the strip snaps to that page and
`page_changed` is emitted once.
"""
from __future__ import annotations

import logging
from typing import Sequence

from PySide6.QtCore import Qt, QSize, QTimer, Signal
from PySide6.QtGui import QIcon, QResizeEvent
from PySide6.QtWidgets import QAbstractItemView, QFrame, QListView, QListWidget, QListWidgetItem, QWidget

from listcarousel import config
from listcarousel.view.widgets.image_utils import load_pixmap, rounded_pixmap

logger = logging.getLogger(__name__)


class ImageCarousel(QListWidget):
    page_changed = Signal(int)

    SPACING = 10
    CORNER_RADIUS = 15
    # Images are rendered once at this size and scaled by the view
    SOURCE_SIZE = QSize(640, config.CAROUSEL_HEIGHT)

    def __init__(self, labels: Sequence[str], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.labels = list(labels)
        self._current_page = 0

        self.setFlow(QListView.LeftToRight)
        self.setWrapping(False)
        self.setMovement(QListView.Static)
        self.setUniformItemSizes(True)
        self.setSpacing(self.SPACING // 2)
        self.setHorizontalScrollMode(QAbstractItemView.ScrollPerPixel)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setSelectionMode(QAbstractItemView.SingleSelection)
        self.setFrameShape(QFrame.NoFrame)
        self.setFixedHeight(config.CAROUSEL_HEIGHT + self.SPACING)

        for label in self.labels:
            pixmap = rounded_pixmap(load_pixmap(label, self.SOURCE_SIZE), self.CORNER_RADIUS)
            item = QListWidgetItem(QIcon(pixmap), "")
            item.setToolTip(label.replace("_", " "))
            self.addItem(item)

        self._update_page_size()
        if self.count():
            self.setCurrentRow(0)

        # Scroll settling
        self._settle_timer = QTimer(self)
        self._settle_timer.setSingleShot(True)
        self._settle_timer.setInterval(config.SCROLL_SETTLE_MS)
        self._settle_timer.timeout.connect(self._on_scroll_settled)
        self.horizontalScrollBar().valueChanged.connect(lambda _value: self._settle_timer.start())

        self.itemClicked.connect(self._on_item_clicked)

    # --- PROPERTIES ---

    @property
    def current_page(self) -> int:
        return self._current_page

    def page_width(self) -> int:
        return max(int(self.viewport().width() * config.CAROUSEL_PAGE_RATIO), 1)

    # --- PAGING ---

    def scroll_to_page(self, index: int) -> None:
        """Snap to page `index`; emits page_changed if the page differs."""
        item = self.item(index)
        if item is None:
            logger.warning(f"Carousel has no page {index}")
            return

        # Snapping moves the scroll bar; don't treat that as a user gesture
        self._settle_timer.stop()
        self.scrollToItem(item, QAbstractItemView.PositionAtCenter)
        self.setCurrentRow(index)
        self._settle_timer.stop()

        if index != self._current_page:
            self._current_page = index
            self.page_changed.emit(index)

    def page_at_offset(self, offset: int) -> int:
        """Page whose slot is closest to horizontal scroll offset `offset`."""
        stride = self.page_width() + self.SPACING
        page = int((offset + stride / 2) // stride)
        return min(max(page, 0), max(self.count() - 1, 0))

    # --- SLOTS ---

    def _on_item_clicked(self, item: QListWidgetItem) -> None:
        self.scroll_to_page(self.row(item))

    def _on_scroll_settled(self) -> None:
        if self.count():
            self.scroll_to_page(self.page_at_offset(self.horizontalScrollBar().value()))

    # --- EVENTS ---

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self._update_page_size()
        if self.count():
            self.scrollToItem(self.item(self._current_page), QAbstractItemView.PositionAtCenter)

    def _update_page_size(self) -> None:
        size = QSize(self.page_width(), config.CAROUSEL_HEIGHT)
        self.setIconSize(size)
        for i in range(self.count()):
            self.item(i).setSizeHint(size)
