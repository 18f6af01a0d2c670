"""Generic prefix tree with pruning deletes and common-prefix mining."""

import logging

from prefix_trie.render import node_count, render
from prefix_trie.trie import BytesTrie, KeyStatus, StringTrie, Trie

__all__ = ["BytesTrie", "KeyStatus", "StringTrie", "Trie", "node_count", "render"]
__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
