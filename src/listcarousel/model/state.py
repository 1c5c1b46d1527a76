"""
Selection State (Data Model)
============================
This module defines the central state holder for the running screen.

Why is this file needed?
------------------------
1. State Management: It holds the selected group, the search query and the
   filtered items in one place. The window owns one instance and passes it
   to whatever needs it; there is no module-level instance.
2. Decoupling: Views read from this object and translate widget events into
   calls to select_group(), set_query() and statistics_summary().

Classes:
    SelectionStore: The state holder.

Functions:
    character_frequency: Character tally over a list of strings.
"""
from __future__ import annotations

from collections import Counter
import logging
from typing import Iterable, Optional, Sequence

logger = logging.getLogger(__name__)


def character_frequency(items: Iterable[str]) -> list[tuple[str, int]]:
    """
    Count every character of every string.

    Returns (character, count) pairs sorted by count, highest first.
    Characters with equal counts stay in the order they were first seen.
    """
    counts: Counter[str] = Counter()
    for item in items:
        counts.update(item)
    # most_common() keeps first-encountered order among equal counts
    return counts.most_common()


class SelectionStore:
    """
    Holds the immutable group table, the selected group index, the raw search
    query and the filtered view derived from both.
    """

    def __init__(self, group_table: Iterable[Sequence[str]]) -> None:
        self._group_table: tuple[tuple[str, ...], ...] = tuple(tuple(group) for group in group_table)
        if not self._group_table:
            raise ValueError("SelectionStore needs at least one group.")

        self._selected_index: int = 0
        self._query: str = ""
        self._filtered_view: tuple[str, ...] = self._group_table[0]

    # --- READ ACCESS ---

    @property
    def group_table(self) -> tuple[tuple[str, ...], ...]:
        return self._group_table

    @property
    def group_count(self) -> int:
        return len(self._group_table)

    @property
    def selected_index(self) -> int:
        return self._selected_index

    @property
    def selected_group(self) -> tuple[str, ...]:
        return self._group_table[self._selected_index]

    @property
    def query(self) -> str:
        return self._query

    @property
    def filtered_view(self) -> tuple[str, ...]:
        return self._filtered_view

    # --- OPERATIONS ---

    def select_group(self, index: int) -> None:
        """
        Select the group at `index` and re-apply the current query to it.

        Raises:
            TypeError: If index is not an int.
            IndexError: If index is outside [0, group_count). Negative
                indices are rejected rather than counted from the end.
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"Group index must be an int, got {type(index).__name__}.")
        if not 0 <= index < self.group_count:
            raise IndexError(
                f"Group index {index} out of range for {self.group_count} groups."
            )

        self._selected_index = index
        logger.debug(f"Selected group {index}")
        self.set_query(self._query)

    def set_query(self, text: str) -> None:
        """Store the raw search text and recompute the filtered view."""
        self._query = text
        group = self.selected_group

        if not text:
            self._filtered_view = group
        else:
            needle = text.casefold()
            self._filtered_view = tuple(item for item in group if needle in item.casefold())

        logger.debug(
            f"Query {text!r} on group {self._selected_index}: "
            f"{len(self._filtered_view)}/{len(group)} items"
        )

    def character_frequencies(self, limit: Optional[int] = None) -> list[tuple[str, int]]:
        """Frequency table of the selected group, ignoring the search query."""
        frequencies = character_frequency(self.selected_group)
        if limit is not None:
            return frequencies[:limit]
        return frequencies

    def statistics_summary(self, top: int = 3) -> str:
        """
        Summary of the selected (unfiltered) group:

            List <n> (<item count> items)
            <char> = <count>
            ...

        with up to `top` character lines, each ending in a newline.
        """
        group = self.selected_group
        lines = [f"List {self._selected_index + 1} ({len(group)} items)"]
        lines.extend(f"{char} = {count}" for char, count in self.character_frequencies(top))
        return "".join(f"{line}\n" for line in lines)
