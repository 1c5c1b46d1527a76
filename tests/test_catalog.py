"""Tests for the group catalog."""
import dataclasses

import pytest

from listcarousel.model.catalog import Catalog, DEFAULT_CATALOG
from listcarousel.model.state import SelectionStore


def test_default_catalog_is_aligned():
    assert len(DEFAULT_CATALOG.labels) == len(DEFAULT_CATALOG.groups) == 4


def test_default_catalog_content():
    assert DEFAULT_CATALOG.groups[0] == ("apple", "banana", "orange", "blueberry")
    assert DEFAULT_CATALOG.groups[2] == ("pear", "pineapple", "mango", "cherry")
    assert all(len(group) == 4 for group in DEFAULT_CATALOG.groups)


def test_mismatched_labels_rejected():
    with pytest.raises(ValueError, match="one label per group"):
        Catalog.from_lists(labels=["only"], groups=[["a"], ["b"]])


def test_catalog_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CATALOG.labels = ()


def test_from_lists_copies_into_tuples():
    groups = [["x", "y"]]
    catalog = Catalog.from_lists(["label"], groups)
    groups[0].append("z")
    assert catalog.groups == (("x", "y"),)


def test_store_built_from_catalog():
    store = SelectionStore(DEFAULT_CATALOG.groups)
    assert store.group_table == DEFAULT_CATALOG.groups
