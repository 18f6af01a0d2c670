"""Indented text dump of a trie, for debugging and tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prefix_trie.trie import Trie


def render(trie: Trie) -> str:
    """Return one line per node, indented by one tab per level of depth.

    The root is written as ``root``; every other node as ``key: 'c'``
    followed by ``value: 'v'`` when it stores one, or ``:`` when it is only
    a branch on the way to longer keys.
    """
    lines = []
    for node, depth in trie.walk_nodes():
        if depth == 0:
            line = "root"
        else:
            line = "\t" * depth + f"key: '{trie.format_symbol(node.symbol)}'"
        if node.has_value:
            line += f" value: '{node.value}'"
        elif depth > 0:
            line += ":"
        lines.append(line)
    return "\n".join(lines) + "\n"


def node_count(trie: Trie) -> int:
    """Number of nodes below the root."""
    return sum(1 for _ in trie.walk_nodes()) - 1
