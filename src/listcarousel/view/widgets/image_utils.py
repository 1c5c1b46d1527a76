"""Pixmap helpers: loading carousel images, placeholders, rotation and rounding."""
from __future__ import annotations

import logging
import os

from PySide6.QtCore import Qt, QRectF, QSize
from PySide6.QtGui import QColor, QPainter, QPainterPath, QPixmap, QTransform

from listcarousel import config

logger = logging.getLogger(__name__)


def image_path(label: str) -> str:
    """Path of the image file for a carousel label."""
    return os.path.join(config.IMAGES_PATH, f"{label}{config.IMAGE_EXTENSION}")


def placeholder_pixmap(size: QSize) -> QPixmap:
    """Neutral stand-in for a missing image: light frame with a simple landscape glyph."""
    pixmap = QPixmap(size)
    pixmap.fill(QColor("#e6e6e6"))

    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.Antialiasing)
    w, h = size.width(), size.height()

    painter.setPen(Qt.NoPen)
    painter.setBrush(QColor("#b0b0b0"))
    # Sun
    r = min(w, h) * 0.1
    painter.drawEllipse(QRectF(w * 0.7 - r, h * 0.3 - r, 2 * r, 2 * r))
    # Hill
    hill = QPainterPath()
    hill.moveTo(0, h)
    hill.lineTo(w * 0.35, h * 0.45)
    hill.lineTo(w * 0.6, h * 0.75)
    hill.lineTo(w * 0.75, h * 0.6)
    hill.lineTo(w, h)
    hill.closeSubpath()
    painter.drawPath(hill)
    painter.end()

    return pixmap


def load_pixmap(label: str, size: QSize) -> QPixmap:
    """
    Load the image for `label` scaled to fill `size` (cropping the overflow).
    Falls back to a placeholder when the file is missing or unreadable.
    """
    pixmap = QPixmap(image_path(label))
    if pixmap.isNull():
        logger.debug(f"No image for '{label}', using placeholder")
        return placeholder_pixmap(size)

    scaled = pixmap.scaled(size, Qt.KeepAspectRatioByExpanding, Qt.SmoothTransformation)
    x = (scaled.width() - size.width()) // 2
    y = (scaled.height() - size.height()) // 2
    return scaled.copy(x, y, size.width(), size.height())


def rotated_pixmap(pixmap: QPixmap, degrees: float) -> QPixmap:
    """
    Rotate a pixmap about its center.

    The result is sized to the integral bounding box of the rotated source,
    so nothing is clipped; uncovered corners stay transparent.
    """
    transform = QTransform().rotate(degrees)
    bounds = transform.mapRect(QRectF(pixmap.rect())).toAlignedRect()

    result = QPixmap(bounds.size())
    result.fill(Qt.transparent)

    painter = QPainter(result)
    painter.setRenderHint(QPainter.SmoothPixmapTransform)
    painter.translate(bounds.width() / 2, bounds.height() / 2)
    painter.rotate(degrees)
    painter.drawPixmap(-pixmap.width() // 2, -pixmap.height() // 2, pixmap)
    painter.end()

    return result


def rounded_pixmap(pixmap: QPixmap, radius: float) -> QPixmap:
    """Clip a pixmap to a rounded rectangle."""
    result = QPixmap(pixmap.size())
    result.fill(Qt.transparent)

    path = QPainterPath()
    path.addRoundedRect(QRectF(pixmap.rect()), radius, radius)

    painter = QPainter(result)
    painter.setRenderHint(QPainter.Antialiasing)
    painter.setClipPath(path)
    painter.drawPixmap(0, 0, pixmap)
    painter.end()

    return result


def ellipsis_pixmap(size: int, color: QColor) -> QPixmap:
    """Three horizontal dots centered in a square pixmap."""
    pixmap = QPixmap(size, size)
    pixmap.fill(Qt.transparent)

    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.Antialiasing)
    painter.setPen(Qt.NoPen)
    painter.setBrush(color)
    dot = size / 6
    for i in (-1, 0, 1):
        cx = size / 2 + i * dot * 1.8
        painter.drawEllipse(QRectF(cx - dot / 2, size / 2 - dot / 2, dot, dot))
    painter.end()

    return pixmap
