"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt). It deals with the grouped item
table, the current selection and search query, and the statistics.
"""
from listcarousel.model.catalog import Catalog, DEFAULT_CATALOG
from listcarousel.model.state import SelectionStore, character_frequency

__all__ = ["Catalog", "DEFAULT_CATALOG", "SelectionStore", "character_frequency"]
