"""
Trie vertex.

Each node owns its children through a plain dict. The link back to the
parent is a weak reference: it is only followed while pruning after a
delete, and it never keeps a detached node alive.
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from typing import Any, Hashable


class _RootSymbol:
    """Placeholder symbol of the root node; equal only to itself."""

    def __repr__(self) -> str:
        return "<root>"


ROOT = _RootSymbol()


@dataclass(eq=False)
class _TrieNode:
    """Internal node of the trie."""

    symbol: Hashable = ROOT
    children: dict[Hashable, _TrieNode] = field(default_factory=dict)
    parent: weakref.ref[_TrieNode] | None = None
    value: Any = None
    has_value: bool = False
    # Valued nodes in this subtree, this one included.
    count: int = 0

    def set_value(self, value: Any) -> None:
        self.value, self.has_value = value, True

    def drop_value(self) -> None:
        self.value, self.has_value = None, False

    def get_child(self, symbol: Hashable) -> _TrieNode | None:
        return self.children.get(symbol)

    def add_child(self, symbol: Hashable) -> _TrieNode:
        child = _TrieNode(symbol=symbol, parent=weakref.ref(self))
        self.children[symbol] = child
        return child

    def del_child(self, symbol: Hashable) -> None:
        child = self.children.pop(symbol, None)
        if child is not None:
            child.parent = None

    def get_parent(self) -> _TrieNode | None:
        if self.parent is None:
            return None
        return self.parent()

    def is_empty(self) -> bool:
        """True when the node neither stores a value nor leads to one."""
        return not self.has_value and not self.children
