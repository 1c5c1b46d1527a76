"""Pytest configuration: Qt runs headless for the view tests."""
import os

import pytest

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """The process-wide QApplication."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if not app:
        app = QApplication([])
    yield app


@pytest.fixture
def fruit_groups():
    return [
        ["apple", "banana", "orange", "blueberry"],
        ["grape", "melon", "kiwi", "strawberry"],
        ["pear", "pineapple", "mango", "cherry"],
        ["fig", "date", "plum", "papaya"],
    ]
