"""Prefix trie with terminal payloads, prefix search and shape metrics."""

from __future__ import annotations

from typing import Any, Iterator

from lextrie.metrics import MetricsReport

_MISSING = object()


class TrieNode:
    """Single node in the prefix trie.

    A node is terminal exactly when it carries a payload. Reading
    ``payload`` on a non-terminal node raises ``AttributeError``.
    """

    __slots__ = ("symbol", "children", "_payload")

    def __init__(self, symbol: str = ""):
        self.symbol = symbol
        self.children: dict[str, TrieNode] = {}
        self._payload: Any = _MISSING

    def __repr__(self) -> str:
        if self.is_terminal:
            return f"TrieNode({self.symbol!r}, payload={self._payload!r})"
        return f"TrieNode({self.symbol!r})"

    # terminal payload

    @property
    def is_terminal(self) -> bool:
        return self._payload is not _MISSING

    @property
    def payload(self) -> Any:
        if self._payload is _MISSING:
            raise AttributeError(f"node {self.symbol!r} is not terminal")
        return self._payload

    def mark_terminal(self, payload: Any) -> None:
        """Make this node the end of a key, replacing any previous payload."""
        self._payload = payload

    # children

    def has_child(self, ch: str) -> bool:
        return ch in self.children

    def get_child(self, ch: str) -> TrieNode | None:
        return self.children.get(ch)

    def add_child(self, ch: str) -> TrieNode:
        """Create a child for edge *ch*. The caller checks ``has_child`` first.

        Adding an existing label replaces that child and drops its subtree.
        """
        child = TrieNode(ch)
        self.children[ch] = child
        return child

    # traversal

    def _iter_descendants(self) -> Iterator[TrieNode]:
        # Explicit stack of child iterators; keys may be deeper than the recursion limit.
        stack = [iter(self.children.values())]
        while stack:
            child = next(stack[-1], None)
            if child is None:
                stack.pop()
                continue
            yield child
            if child.children:
                stack.append(iter(child.children.values()))

    def _iter_subtree(self) -> Iterator[TrieNode]:
        yield self
        yield from self._iter_descendants()

    def descendants(self) -> list[TrieNode]:
        """Every node below this one, each child followed by its own subtree."""
        return list(self._iter_descendants())

    def words(self, prefix: str = "") -> Iterator[str]:
        """Yield keys ending at terminal leaves below this node.

        Terminal nodes that still have children are not reported.
        """
        if not self.children:
            if self.is_terminal:
                yield prefix
            return
        stack = [(prefix, iter(self.children.items()))]
        while stack:
            parent_prefix, items = stack[-1]
            item = next(items, None)
            if item is None:
                stack.pop()
                continue
            ch, child = item
            word = parent_prefix + ch
            if child.children:
                stack.append((word, iter(child.children.items())))
            elif child.is_terminal:
                yield word

    # metrics

    def subtree_size(self) -> int:
        return sum(1 for _ in self._iter_subtree())

    def leaf_count(self) -> int:
        return sum(1 for node in self._iter_subtree() if not node.children)

    def internal_count(self, is_root: bool = True) -> int:
        if not self.children:
            return 0
        count = sum(1 for node in self._iter_subtree() if node.children)
        return count - 1 if is_root else count

    def branching_count(self) -> int:
        return sum(1 for node in self._iter_subtree() if len(node.children) > 1)

    def _branch_edges(self) -> int:
        """Outgoing edges summed over branching nodes in this subtree."""
        return sum(len(node.children) for node in self._iter_subtree() if len(node.children) > 1)

    def average_branching_factor(self) -> float:
        """Mean child count of branching nodes; 0.0 when there are none."""
        branching = self.branching_count()
        if branching == 0:
            return 0.0
        return self._branch_edges() / branching


class Trie:
    """Prefix trie mapping keys to payloads.

    Lookups that cannot be traced through the tree return ``None``.
    """

    def __init__(self):
        self.root = TrieNode()
        self.total_characters = 0

    def insert(self, key: str, payload: Any) -> TrieNode:
        # counts every call, duplicates included
        self.total_characters += len(key)
        node = self.root
        for ch in key:
            if node.has_child(ch):
                node = node.get_child(ch)
            else:
                node = node.add_child(ch)
        node.mark_terminal(payload)
        return node

    def lookup(self, key: str) -> TrieNode | None:
        node = self._walk(key)
        if node is None or not node.is_terminal:
            return None
        return node

    def search(self, key: str) -> list[TrieNode] | None:
        """Terminal nodes strictly below the node reached by *key*.

        Returns ``None`` if *key* is not a path in the trie and ``[]`` for
        the empty key.
        """
        if not key:
            return []
        node = self._walk(key)
        if node is None:
            return None
        return [d for d in node.descendants() if d.is_terminal]

    def search_words(self, key: str) -> list[str] | None:
        """Keys below *key* that end at leaves, in traversal order."""
        if not key:
            return []
        node = self._walk(key)
        if node is None:
            return None
        return list(node.words(key))

    def is_word(self, word: str) -> bool:
        return self.lookup(word) is not None

    def is_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.get_child(ch)
            if node is None:
                return None
        return node

    # metrics

    @property
    def total_words(self) -> int:
        """Leaf count of the tree, which is what the report calls words."""
        return self.root.leaf_count()

    @property
    def internal_nodes(self) -> int:
        return self.root.internal_count()

    @property
    def branching_nodes(self) -> int:
        return self.root.branching_count()

    @property
    def average_branching_factor(self) -> float:
        return self.root.average_branching_factor()

    @property
    def node_count(self) -> int:
        return self.root.subtree_size()

    def metrics(self) -> MetricsReport:
        return MetricsReport.from_trie(self)
