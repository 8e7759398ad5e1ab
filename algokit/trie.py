"""Prefix tree supporting insertion and prefix lookup."""

from __future__ import annotations


class Trie:
    """A character trie answering whether a string is a prefix of a stored word."""

    def __init__(self) -> None:
        self._root: dict[str, dict] = {}

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for ch in word:
            node = node.setdefault(ch, {})

    def has_prefix(self, word: str) -> bool:
        """Tell whether ``word`` is a prefix of some inserted word."""
        node = self._root
        for ch in word:
            child = node.get(ch)
            if child is None:
                return False
            node = child
        return True