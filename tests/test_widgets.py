"""Tests for the carousel, page indicator and list row widgets."""
import pytest
from PySide6.QtCore import Qt
from PySide6.QtTest import QTest

from listcarousel import config
from listcarousel.model.catalog import DEFAULT_CATALOG
from listcarousel.view.widgets.carousel import ImageCarousel
from listcarousel.view.widgets.item_row import ItemRow, item_subtitle
from listcarousel.view.widgets.page_indicator import PageIndicator


@pytest.fixture(autouse=True)
def _app(qapp):
    return qapp


@pytest.fixture
def carousel():
    widget = ImageCarousel(DEFAULT_CATALOG.labels)
    widget.resize(400, 220)
    yield widget
    widget.close()


# --- carousel ---

def test_carousel_has_one_page_per_label(carousel):
    assert carousel.count() == len(DEFAULT_CATALOG.labels)
    assert carousel.current_page == 0


def test_scroll_to_page_emits_once(carousel):
    pages = []
    carousel.page_changed.connect(pages.append)

    carousel.scroll_to_page(2)
    carousel.scroll_to_page(2)

    assert pages == [2]
    assert carousel.current_page == 2
    assert carousel.currentRow() == 2


def test_clicking_a_page_selects_it(carousel):
    pages = []
    carousel.page_changed.connect(pages.append)

    carousel.itemClicked.emit(carousel.item(3))

    assert pages == [3]


def test_scroll_to_missing_page_is_ignored(carousel):
    pages = []
    carousel.page_changed.connect(pages.append)
    carousel.scroll_to_page(10)
    assert pages == []
    assert carousel.current_page == 0


def test_page_at_offset(carousel):
    stride = carousel.page_width() + carousel.SPACING
    assert carousel.page_at_offset(0) == 0
    assert carousel.page_at_offset(stride) == 1
    assert carousel.page_at_offset(int(stride * 1.4)) == 1
    assert carousel.page_at_offset(int(stride * 1.6)) == 2
    assert carousel.page_at_offset(stride * 50) == carousel.count() - 1
    assert carousel.page_at_offset(-stride) == 0


def _settle() -> None:
    QTest.qWait(config.SCROLL_SETTLE_MS + 100)


def test_scroll_coming_to_rest_selects_page(carousel):
    carousel.show()
    _settle()
    pages = []
    carousel.page_changed.connect(pages.append)

    stride = carousel.page_width() + carousel.SPACING
    scroll_bar = carousel.horizontalScrollBar()
    assert scroll_bar.maximum() >= 2 * stride
    scroll_bar.setValue(2 * stride)

    # Nothing is reported while the scroll is still moving
    assert pages == []
    _settle()

    assert pages == [2]
    assert carousel.current_page == 2
    assert carousel.currentRow() == 2


def test_scroll_to_the_end_selects_last_page(carousel):
    carousel.show()
    _settle()
    pages = []
    carousel.page_changed.connect(pages.append)

    scroll_bar = carousel.horizontalScrollBar()
    scroll_bar.setValue(scroll_bar.maximum())
    _settle()

    assert pages == [carousel.count() - 1]


def test_small_scroll_snaps_back_without_emitting(carousel):
    carousel.show()
    _settle()
    pages = []
    carousel.page_changed.connect(pages.append)

    stride = carousel.page_width() + carousel.SPACING
    carousel.horizontalScrollBar().setValue(stride // 4)
    _settle()

    assert pages == []
    assert carousel.current_page == 0


# --- page indicator ---

def test_indicator_click_selects_dot():
    indicator = PageIndicator(4)
    indicator.resize(indicator.sizeHint())
    indicator.show()
    selected = []
    indicator.page_selected.connect(selected.append)

    QTest.mouseClick(indicator, Qt.LeftButton, Qt.NoModifier, indicator.dot_center(2).toPoint())

    assert selected == [2]
    assert indicator.current == 2
    indicator.close()


def test_indicator_ignores_clicks_outside_dots():
    indicator = PageIndicator(2)
    indicator.resize(200, 20)
    assert indicator.dot_at(0) is None
    assert indicator.dot_at(199) is None
    assert indicator.dot_at(indicator.dot_center(1).x()) == 1


# --- list row ---

def test_item_subtitle():
    assert item_subtitle("banana") == "Length: 6 characters"
    assert item_subtitle("") == "Length: 0 characters"


def test_item_row_labels():
    from PySide6.QtGui import QPixmap

    row = ItemRow("kiwi", item_subtitle("kiwi"), QPixmap(50, 50))
    assert row.title == "kiwi"
    assert row.subtitle == "Length: 4 characters"
