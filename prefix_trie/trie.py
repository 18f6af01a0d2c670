"""
Trie (Prefix Tree) over arbitrary symbol sequences.

Techniques used:
  - One node per symbol: no path compression, so every prefix of a stored
    key is a real node and branch points can be inspected directly.
  - Pruning on delete: nodes left without a value and without children are
    detached bottom-up by following weak parent references.
  - Per-node coverage counts: every node knows how many keys live in its
    subtree, which makes ``len()`` and the ranking step of ``common`` O(1)
    per node.
  - Iterative traversal: enumeration and prefix mining use an explicit
    stack, so the call stack stays constant regardless of key length.

Complexity (n = key length, m = nodes below the prefix):
  add / find / delete   — O(n)
  items / suggest       — O(n + m)
  common                — O(n + m + r log r), r = reported prefixes

The structure is not synchronized; guard the whole trie with one lock if
several threads share it.
"""

from __future__ import annotations

import copy
import enum
import logging
from typing import Any, Callable, Hashable, Iterable, Iterator

from prefix_trie.node import _TrieNode
from prefix_trie.render import render

logger = logging.getLogger(__name__)


class KeyStatus(enum.Enum):
    """Outcome of looking a key up."""

    FOUND = "found"
    # No node exists for the key.
    NOT_FOUND = "not_found"
    # The node exists only because a longer key passes through it.
    NO_VALUE = "no_value"


class Trie:
    """A prefix tree mapping sequences of hashable symbols to values.

    Keys may be any iterable of hashable symbols; keys handed back to the
    caller are tuples. With ``ordered=True`` siblings are visited in sorted
    symbol order, otherwise in the order they were first inserted.

    >>> t = Trie()
    >>> t.add([1, 2, 3], "a")
    >>> t.add([1, 2], "b")
    >>> t.find((1, 2, 3))
    ('a', True)
    >>> t.suggest([1])
    ([(1, 2), (1, 2, 3)], True)
    """

    def __init__(self, ordered: bool = False) -> None:
        self._root = _TrieNode()
        self._ordered = ordered

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def add(self, key: Iterable[Hashable], value: Any) -> None:
        """Store *value* under *key*, overwriting any previous value."""
        node = self._root
        trail = [node]
        for symbol in self._path_from_key(key):
            child = node.get_child(symbol)
            if child is None:
                child = node.add_child(symbol)
            node = child
            trail.append(node)
        if not node.has_value:
            for visited in trail:
                visited.count += 1
            logger.debug("Inserted key=%r", key)
        node.set_value(value)

    def find(self, key: Iterable[Hashable]) -> tuple[Any, bool]:
        """Return ``(value, True)`` for a stored key, ``(None, False)`` otherwise."""
        node = self._find_node(key)
        if node is None or not node.has_value:
            return None, False
        return node.value, True

    def status(self, key: Iterable[Hashable]) -> KeyStatus:
        """Tell a stored key apart from a missing path and a pass-through node."""
        node = self._find_node(key)
        if node is None:
            return KeyStatus.NOT_FOUND
        if not node.has_value:
            return KeyStatus.NO_VALUE
        return KeyStatus.FOUND

    def delete(self, key: Iterable[Hashable]) -> bool:
        """Remove *key* from the trie. Returns ``True`` if it was stored.

        Nodes that no longer hold a value and have no children are
        detached on the way up; the walk stops at the first node still
        used by another key, and never detaches the root.
        """
        node = self._find_node(key)
        if node is None or not node.has_value:
            return False
        node.drop_value()

        ancestor = node
        while ancestor is not None:
            ancestor.count -= 1
            ancestor = ancestor.get_parent()

        pruned = 0
        parent = node.get_parent()
        while parent is not None and node.is_empty():
            parent.del_child(node.symbol)
            pruned += 1
            node, parent = parent, parent.get_parent()

        logger.debug("Deleted key=%r, pruned %d node(s)", key, pruned)
        return True

    def items(self, prefix: Iterable[Hashable] | None = None) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` for every key starting with *prefix*, lazily.

        The prefix itself comes first when it is a stored key, followed by
        its descendants in pre-order. Do not mutate the trie while the
        generator is running.
        """
        path = self._prefix_path(prefix)
        node = self._find_path(path)
        if node is None:
            return
        # DFS with explicit stack: (node, accumulated path)
        stack: list[tuple[_TrieNode, tuple]] = [(node, path)]
        while stack:
            current, acc = stack.pop()
            if current.has_value:
                yield self._key_from_path(acc), current.value
            for symbol in reversed(self._child_symbols(current)):
                stack.append((current.children[symbol], acc + (symbol,)))

    def keys(self, prefix: Iterable[Hashable] | None = None) -> Iterator[Any]:
        """Yield every stored key starting with *prefix*."""
        for key, _ in self.items(prefix):
            yield key

    def iter(
        self,
        prefix: Iterable[Hashable] | None,
        visit: Callable[[Any, Any], None],
    ) -> None:
        """Call ``visit(key, value)`` for every key starting with *prefix*.

        Pass ``None`` (or an empty key) to walk the whole trie. A missing
        prefix simply results in no calls.
        """
        for key, value in self.items(prefix):
            visit(key, value)

    def suggest(self, prefix: Iterable[Hashable] | None = None) -> tuple[list[Any], bool]:
        """Return the keys starting with *prefix* and whether there were any."""
        found: list[Any] = []
        self.iter(prefix, lambda key, _: found.append(key))
        return found, len(found) > 0

    def common(self, prefix: Iterable[Hashable] | None, min_length: int) -> list[Any]:
        """Return the stems that summarize the keys below *prefix*.

        Below *prefix*, paths shorter than ``min_length - len(prefix)`` are
        descended unconditionally. Past that length the first node that
        either stores a value or branches is reported, and nothing under
        it is explored further. Results are ordered by the number of keys
        they cover, most first; ties keep traversal order.
        """
        path = self._prefix_path(prefix)
        node = self._find_path(path)
        if node is None:
            return []

        budget = min_length - len(path)
        reported: list[tuple[tuple, int]] = []
        stack: list[tuple[_TrieNode, tuple]] = [
            (node.children[symbol], path + (symbol,))
            for symbol in reversed(self._child_symbols(node))
        ]
        while stack:
            current, acc = stack.pop()
            if len(acc) >= budget and (current.has_value or len(current.children) > 1):
                reported.append((acc, current.count))
                continue
            for symbol in reversed(self._child_symbols(current)):
                stack.append((current.children[symbol], acc + (symbol,)))

        # list.sort is stable, also with reverse=True.
        reported.sort(key=lambda item: item[1], reverse=True)
        logger.debug(
            "Common prefixes below %r (min_length=%d): %d found",
            prefix, min_length, len(reported),
        )
        return [self._key_from_path(acc) for acc, _ in reported]

    def __len__(self) -> int:
        return self._root.count

    def __contains__(self, key: Iterable[Hashable]) -> bool:
        return self.status(key) is KeyStatus.FOUND

    def __iter__(self) -> Iterator[Any]:
        return self.keys()

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} keys)"

    def __copy__(self) -> Trie:
        return self._clone(lambda value: value)

    def __deepcopy__(self, memo: dict) -> Trie:
        return self._clone(lambda value: copy.deepcopy(value, memo), memo)

    def _clone(self, copy_value: Callable[[Any], Any], memo: dict | None = None) -> Trie:
        """Rebuild the node tree so parent links point into the new trie.

        Values go through *copy_value*; the tree itself is never shared,
        otherwise pruning in one trie would detach nodes of the other.
        """
        clone = type(self).__new__(type(self))
        if memo is not None:
            memo[id(self)] = clone
        clone.__dict__.update(self.__dict__)
        clone._root = _TrieNode()
        stack = [(self._root, clone._root)]
        while stack:
            source, target = stack.pop()
            if source.has_value:
                target.set_value(copy_value(source.value))
            target.count = source.count
            for symbol, child in source.children.items():
                stack.append((child, target.add_child(symbol)))
        return clone

    # ------------------------------------------------------------------
    # Key conversion hooks
    # ------------------------------------------------------------------

    def _path_from_key(self, key: Iterable[Hashable]) -> tuple:
        """Turn a caller's key into the tuple of symbols stored in the tree."""
        return tuple(key)

    def _key_from_path(self, path: tuple) -> Any:
        """Turn a tuple of symbols back into a caller-facing key."""
        return path

    def format_symbol(self, symbol: Hashable) -> str:
        """How a single symbol is shown by :func:`prefix_trie.render.render`."""
        return str(symbol)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _prefix_path(self, prefix: Iterable[Hashable] | None) -> tuple:
        if prefix is None:
            return ()
        return self._path_from_key(prefix)

    def _find_node(self, key: Iterable[Hashable]) -> _TrieNode | None:
        """Walk the trie following *key*; return the landing node or None."""
        return self._find_path(self._path_from_key(key))

    def _find_path(self, path: tuple) -> _TrieNode | None:
        node = self._root
        for symbol in path:
            node = node.get_child(symbol)
            if node is None:
                return None
        return node

    def _child_symbols(self, node: _TrieNode) -> list[Hashable]:
        if self._ordered:
            return sorted(node.children)
        return list(node.children)

    def walk_nodes(self) -> Iterator[tuple[_TrieNode, int]]:
        """Yield ``(node, depth)`` for every node, root first, in pre-order."""
        stack: list[tuple[_TrieNode, int]] = [(self._root, 0)]
        while stack:
            current, depth = stack.pop()
            yield current, depth
            for symbol in reversed(self._child_symbols(current)):
                stack.append((current.children[symbol], depth + 1))


class StringTrie(Trie):
    """Trie keyed by ``str``; each character is one symbol.

    >>> t = StringTrie()
    >>> t.add("apple", 1)
    >>> t.add("app", 2)
    >>> t.add("application", 3)
    >>> t.find("app")
    (2, True)
    >>> t.find("ap")
    (None, False)
    >>> t.suggest("app")
    (['app', 'apple', 'application'], True)
    >>> t.delete("app")
    True
    >>> t.suggest("app")
    (['apple', 'application'], True)
    """

    def __init__(self, ordered: bool = True) -> None:
        super().__init__(ordered=ordered)

    def _path_from_key(self, key: Iterable[Hashable]) -> tuple:
        if not isinstance(key, str):
            raise TypeError(f"StringTrie keys must be str, not {type(key).__name__}")
        return tuple(key)

    def _key_from_path(self, path: tuple) -> str:
        return "".join(path)


class BytesTrie(Trie):
    """Trie keyed by ``bytes``; each byte (an int 0-255) is one symbol.

    >>> t = BytesTrie()
    >>> t.add(b"foo", 1)
    >>> t.add(b"food", 2)
    >>> t.suggest(b"fo")
    ([b'foo', b'food'], True)
    """

    def __init__(self, ordered: bool = True) -> None:
        super().__init__(ordered=ordered)

    def _path_from_key(self, key: Iterable[Hashable]) -> tuple:
        if not isinstance(key, (bytes, bytearray)):
            raise TypeError(f"BytesTrie keys must be bytes, not {type(key).__name__}")
        return tuple(key)

    def _key_from_path(self, path: tuple) -> bytes:
        return bytes(path)

    def format_symbol(self, symbol: Hashable) -> str:
        return chr(symbol)
