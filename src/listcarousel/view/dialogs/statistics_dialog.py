"""Modal dialog showing the statistics of the selected group."""
from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
import pyqtgraph as pg
from PySide6.QtWidgets import QDialog, QDialogButtonBox, QLabel, QVBoxLayout, QWidget
from PySide6.QtCore import Qt


logger = logging.getLogger(__name__)


class StatisticsDialog(QDialog):
    """Summary text on top, bar chart of the most frequent characters below."""

    BAR_COLOR = '#1f77b4'
    BAR_WIDTH = 0.6

    def __init__(
        self,
        summary: str,
        frequencies: Sequence[tuple[str, int]],
        parent: QWidget | None = None
    ) -> None:
        """Initialize the statistics dialog.

        Args:
            summary: Text produced by SelectionStore.statistics_summary()
            frequencies: (character, count) pairs to chart, most frequent first
            parent: Parent widget
        """
        super().__init__(parent)
        self.summary = summary
        self.frequencies = list(frequencies)

        self.setWindowTitle("Statistics")
        self.setModal(True)
        self.resize(420, 420)

        self._build_ui()
        self._update_plot()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)

        self.lbl_summary = QLabel(self.summary.rstrip("\n"))
        self.lbl_summary.setAlignment(Qt.AlignCenter)
        self.lbl_summary.setWordWrap(True)
        self.lbl_summary.setStyleSheet("font-size: 15px;")
        layout.addWidget(self.lbl_summary)

        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setBackground('w')
        self.plot_widget.setMenuEnabled(False)
        self.plot_widget.setMouseEnabled(x=False, y=False)
        self.plot_widget.hideButtons()
        self.plot_widget.setLabel('left', 'Count', color='black')
        self.plot_widget.getAxis('bottom').setPen('k')
        self.plot_widget.getAxis('left').setPen('k')
        self.plot_widget.getAxis('bottom').setTextPen('k')
        self.plot_widget.getAxis('left').setTextPen('k')
        layout.addWidget(self.plot_widget, stretch=1)

        buttons = QDialogButtonBox(QDialogButtonBox.Close)
        buttons.rejected.connect(self.reject)
        buttons.accepted.connect(self.accept)
        layout.addWidget(buttons)

    def _update_plot(self) -> None:
        self.plot_widget.clear()

        if not self.frequencies:
            text_item = pg.TextItem('No characters to show', color='gray', anchor=(0.5, 0.5))
            text_item.setPos(0.5, 0.5)
            self.plot_widget.addItem(text_item)
            self.plot_widget.setXRange(0, 1)
            self.plot_widget.setYRange(0, 1)
            return

        x = np.arange(len(self.frequencies))
        heights = np.array([count for _, count in self.frequencies], dtype=float)

        self.bars = pg.BarGraphItem(x=x, height=heights, width=self.BAR_WIDTH, brush=self.BAR_COLOR)
        self.plot_widget.addItem(self.bars)

        ticks = [(float(i), char) for i, (char, _) in enumerate(self.frequencies)]
        self.plot_widget.getAxis('bottom').setTicks([ticks])
        self.plot_widget.setXRange(-0.5, len(self.frequencies) - 0.5)
        self.plot_widget.setYRange(0, float(heights.max()) * 1.1)

        logger.debug(f"Charted {len(self.frequencies)} characters")
