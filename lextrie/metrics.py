"""Metrics snapshot for a prefix trie."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lextrie.trie import Trie


class MetricsReport:
    """Shape metrics of a trie, taken at one point in time."""

    __slots__ = (
        "total_characters", "total_words", "internal_nodes",
        "branching_nodes", "average_branching_factor",
    )

    def __init__(
        self,
        total_characters: int,
        total_words: int,
        internal_nodes: int,
        branching_nodes: int,
        average_branching_factor: float,
    ):
        self.total_characters = total_characters  # every inserted key, duplicates too
        self.total_words = total_words            # leaf nodes
        self.internal_nodes = internal_nodes      # root excluded
        self.branching_nodes = branching_nodes
        self.average_branching_factor = average_branching_factor

    @classmethod
    def from_trie(cls, trie: Trie) -> MetricsReport:
        return cls(
            total_characters=trie.total_characters,
            total_words=trie.total_words,
            internal_nodes=trie.internal_nodes,
            branching_nodes=trie.branching_nodes,
            average_branching_factor=trie.average_branching_factor,
        )

    def as_dict(self) -> dict[str, int | float]:
        return {name: getattr(self, name) for name in self.__slots__}

    def lines(self) -> list[str]:
        return [
            "Trie metrics:",
            f"1. Total characters: {self.total_characters}",
            f"2. Words (leaf nodes in the tree): {self.total_words}",
            f"3. Internal nodes: {self.internal_nodes}",
            f"4. Branching nodes (internal nodes with more than one path): {self.branching_nodes}",
            f"5. Average paths per branching node: {self.average_branching_factor:.2f}",
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MetricsReport):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self) -> str:
        return (
            f"MetricsReport(chars={self.total_characters}, words={self.total_words}, "
            f"internal={self.internal_nodes}, branching={self.branching_nodes}, "
            f"avg={self.average_branching_factor:.2f})"
        )

    def __str__(self) -> str:
        return "\n".join(self.lines())
