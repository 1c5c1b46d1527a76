"""
Group Catalog
=============
The static content shown by the screen: one label (the carousel image name)
per group, and the items belonging to each group.

Classes:
    Catalog: Immutable pairing of group labels and group items.

Exports:
    DEFAULT_CATALOG: The four fruit groups shipped with the application.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Catalog:
    """
    Labels and groups, index-aligned.
    labels[i] names the image of the carousel page that selects groups[i].
    """
    labels: tuple[str, ...]
    groups: tuple[tuple[str, ...], ...]

    def __post_init__(self) -> None:
        if len(self.labels) != len(self.groups):
            raise ValueError(
                f"Catalog needs one label per group, got {len(self.labels)} labels "
                f"for {len(self.groups)} groups."
            )

    @classmethod
    def from_lists(cls, labels: Iterable[str], groups: Iterable[Sequence[str]]) -> Catalog:
        return cls(
            labels=tuple(labels),
            groups=tuple(tuple(group) for group in groups),
        )


DEFAULT_CATALOG = Catalog.from_lists(
    labels=[
        "A_breathtaking_nature_scene_featuring_a_serene_mou",
        "A_breathtaking_nature_scene_featuring_a_serene_wat",
        "A_scenic_coastal_view_with_waves_crashing_on_a_roc",
        "A_tranquil_forest_scene_with_a_winding_path_leadin",
    ],
    groups=[
        ["apple", "banana", "orange", "blueberry"],
        ["grape", "melon", "kiwi", "strawberry"],
        ["pear", "pineapple", "mango", "cherry"],
        ["fig", "date", "plum", "papaya"],
    ],
)
