"""
Main Application Window
=======================
The single screen: image carousel, page indicator, search box, filtered
list and the floating statistics button.

Why is this file needed?
------------------------
1. Layout: It organizes the visual structure of the screen.
2. Routing: It translates widget events into calls on the SelectionStore
   (carousel page -> select_group, search text -> set_query,
   floating button -> statistics_summary) and refreshes the list afterwards.
"""
from __future__ import annotations

import logging
from typing import Sequence

from PySide6.QtCore import Qt, QEvent, QObject, QSize
from PySide6.QtGui import QCloseEvent, QColor, QIcon, QPixmap
from PySide6.QtWidgets import (
    QApplication, QHBoxLayout, QLineEdit, QListWidget, QListWidgetItem, QMainWindow, QPushButton,
    QVBoxLayout, QWidget
)

from listcarousel import config
from listcarousel.model.state import SelectionStore
from listcarousel.view.dialogs.statistics_dialog import StatisticsDialog
from listcarousel.view.widgets.carousel import ImageCarousel
from listcarousel.view.widgets.image_utils import ellipsis_pixmap, load_pixmap, rotated_pixmap, rounded_pixmap
from listcarousel.view.widgets.item_row import ItemRow, item_subtitle
from listcarousel.view.widgets.page_indicator import PageIndicator

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    FAB_MARGIN = 20

    def __init__(self, store: SelectionStore, labels: Sequence[str]) -> None:
        super().__init__()
        if len(labels) != store.group_count:
            raise ValueError(
                f"Expected {store.group_count} carousel labels, got {len(labels)}."
            )

        self.store = store
        self.labels = list(labels)
        self._thumbnails: dict[int, QPixmap] = {}

        self.setWindowTitle(config.APP_NAME)
        self.resize(420, 800)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)

        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(10, 10, 10, 0)
        main_layout.setSpacing(10)

        # --- 1. CAROUSEL + INDICATOR ---
        self.carousel = ImageCarousel(self.labels)
        main_layout.addWidget(self.carousel)

        self.page_indicator = PageIndicator(len(self.labels))
        indicator_row = QHBoxLayout()
        indicator_row.addStretch()
        indicator_row.addWidget(self.page_indicator)
        indicator_row.addStretch()
        main_layout.addLayout(indicator_row)

        # --- 2. SEARCH ---
        self.search_edit = QLineEdit()
        self.search_edit.setPlaceholderText("Search")
        self.search_edit.setClearButtonEnabled(True)
        main_layout.addWidget(self.search_edit)

        # --- 3. FILTERED LIST ---
        self.item_list = QListWidget()
        self.item_list.setSelectionMode(QListWidget.NoSelection)
        self.item_list.setFocusPolicy(Qt.NoFocus)
        main_layout.addWidget(self.item_list, stretch=1)

        # --- 4. FLOATING BUTTON (overlays the list, kept in the bottom-right corner) ---
        self.floating_button = QPushButton(main_widget)
        self.floating_button.setFixedSize(config.FLOATING_BUTTON_SIZE, config.FLOATING_BUTTON_SIZE)
        self.floating_button.setIcon(QIcon(rotated_pixmap(ellipsis_pixmap(24, QColor("white")), 90)))
        self.floating_button.setIconSize(QSize(24, 24))
        self.floating_button.setToolTip("Statistics")
        self.floating_button.setCursor(Qt.PointingHandCursor)
        radius = config.FLOATING_BUTTON_SIZE // 2
        self.floating_button.setStyleSheet(
            f"QPushButton {{ background-color: blue; border-radius: {radius}px; }}"
            f"QPushButton:pressed {{ background-color: #0000aa; }}"
        )
        self.floating_button.raise_()
        main_widget.installEventFilter(self)
        QApplication.instance().installEventFilter(self)

        # --- SIGNAL CONNECTIONS ---
        self.carousel.page_changed.connect(self.on_page_changed)
        self.page_indicator.page_selected.connect(self.carousel.scroll_to_page)
        self.search_edit.textChanged.connect(self.on_search_changed)
        self.floating_button.clicked.connect(self.show_statistics)

        # Initial Render
        self.page_indicator.set_current(self.store.selected_index)
        self.refresh_list()

    # --- SLOTS ---

    def on_page_changed(self, index: int) -> None:
        """Carousel settled on (or was tapped at) page `index`."""
        self.store.select_group(index)
        self.page_indicator.set_current(index)
        self.refresh_list()

    def on_search_changed(self, text: str) -> None:
        self.store.set_query(text)
        self.refresh_list()

    def show_statistics(self) -> None:
        dialog = self.create_statistics_dialog()
        logger.info(f"Showing statistics for group {self.store.selected_index + 1}")
        dialog.exec()

    def create_statistics_dialog(self) -> StatisticsDialog:
        return StatisticsDialog(
            self.store.statistics_summary(config.TOP_CHARACTERS),
            self.store.character_frequencies(config.TOP_CHARACTERS),
            parent=self,
        )

    # --- HELPER METHODS ---

    def refresh_list(self) -> None:
        """Rebuild the list rows from the store's filtered view."""
        thumbnail = self._thumbnail(self.store.selected_index)

        self.item_list.clear()
        for title in self.store.filtered_view:
            row = ItemRow(title, item_subtitle(title), thumbnail)
            item = QListWidgetItem()
            item.setData(Qt.UserRole, title)
            item.setSizeHint(row.sizeHint())
            self.item_list.addItem(item)
            self.item_list.setItemWidget(item, row)

    def visible_items(self) -> list[str]:
        """Titles currently shown in the list, top to bottom."""
        return [self.item_list.item(i).data(Qt.UserRole) for i in range(self.item_list.count())]

    def _thumbnail(self, index: int) -> QPixmap:
        if index not in self._thumbnails:
            size = QSize(config.THUMBNAIL_SIZE, config.THUMBNAIL_SIZE)
            self._thumbnails[index] = rounded_pixmap(load_pixmap(self.labels[index], size), 10)
        return self._thumbnails[index]

    def _place_floating_button(self) -> None:
        parent = self.centralWidget()
        x = parent.width() - self.floating_button.width() - self.FAB_MARGIN
        y = parent.height() - self.floating_button.height() - self.FAB_MARGIN
        self.floating_button.move(x, y)
        self.floating_button.raise_()

    # --- EVENTS ---

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if event.type() == QEvent.MouseButtonPress and isinstance(watched, QWidget):
            self._end_search_editing(watched)
        elif watched is self.centralWidget() and event.type() == QEvent.Resize:
            self._place_floating_button()
        return super().eventFilter(watched, event)

    def _end_search_editing(self, clicked: QWidget) -> None:
        # Any click in this window outside the search box ends editing;
        # the click itself still reaches its target
        if clicked.window() is not self:
            return
        if clicked is self.search_edit or self.search_edit.isAncestorOf(clicked):
            return
        self.search_edit.clearFocus()

    def closeEvent(self, event: QCloseEvent) -> None:
        QApplication.instance().removeEventFilter(self)
        super().closeEvent(event)
