"""Tests for the pixmap helpers."""
import pytest
from PySide6.QtCore import QSize
from PySide6.QtGui import QColor, QPixmap

from listcarousel import config
from listcarousel.view.widgets import image_utils


@pytest.fixture(autouse=True)
def _app(qapp):
    return qapp


@pytest.mark.parametrize("degrees", [90, -90, 270])
def test_quarter_turn_swaps_dimensions(degrees):
    source = QPixmap(40, 20)
    rotated = image_utils.rotated_pixmap(source, degrees)
    assert (rotated.width(), rotated.height()) == (20, 40)


def test_half_turn_keeps_dimensions():
    rotated = image_utils.rotated_pixmap(QPixmap(40, 20), 180)
    assert (rotated.width(), rotated.height()) == (40, 20)


def test_diagonal_rotation_grows_to_bounding_box():
    rotated = image_utils.rotated_pixmap(QPixmap(10, 10), 45)
    # Diagonal of a 10x10 square is ~14.14
    assert rotated.width() >= 15
    assert rotated.height() >= 15


def test_rotation_moves_content():
    source = QPixmap(40, 20)
    source.fill(QColor("red"))
    rotated = image_utils.rotated_pixmap(source, 90).toImage()
    assert rotated.pixelColor(10, 20) == QColor("red")


def test_missing_image_gives_placeholder(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "IMAGES_PATH", str(tmp_path))
    pixmap = image_utils.load_pixmap("does_not_exist", QSize(60, 30))
    assert not pixmap.isNull()
    assert pixmap.size() == QSize(60, 30)


def test_existing_image_is_scaled_and_cropped(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "IMAGES_PATH", str(tmp_path))
    source = QPixmap(200, 100)
    source.fill(QColor("red"))
    assert source.save(str(tmp_path / "sunset.png"))

    pixmap = image_utils.load_pixmap("sunset", QSize(40, 40))
    assert pixmap.size() == QSize(40, 40)
    assert pixmap.toImage().pixelColor(20, 20) == QColor("red")


def test_image_path_uses_label_and_extension(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "IMAGES_PATH", str(tmp_path))
    assert image_utils.image_path("forest") == str(tmp_path / f"forest{config.IMAGE_EXTENSION}")


def test_rounded_pixmap_keeps_size_and_clears_corners():
    source = QPixmap(50, 50)
    source.fill(QColor("blue"))
    rounded = image_utils.rounded_pixmap(source, 10).toImage()
    assert rounded.size() == source.size()
    assert rounded.pixelColor(0, 0).alpha() == 0
    assert rounded.pixelColor(25, 25) == QColor("blue")


def test_ellipsis_is_square():
    pixmap = image_utils.ellipsis_pixmap(24, QColor("white"))
    assert pixmap.size() == QSize(24, 24)
