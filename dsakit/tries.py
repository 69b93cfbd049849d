"""Prefix tree of strings and the problems it answers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from functools import lru_cache


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    end_of_word: bool = False
    count: int = 0


class Trie:
    """Prefix tree that also counts how many inserted keys pass through each node."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _Node()
        for word in words:
            self.insert(word)

    def insert(self, key: str) -> None:
        """Add ``key``; inserting it again counts it again along its path."""
        node = self._root
        for char in key:
            node = node.children.setdefault(char, _Node())
            node.count += 1
        node.end_of_word = True

    def _walk(self, key: str) -> Iterator[_Node]:
        node = self._root
        for char in key:
            child = node.children.get(char)
            if child is None:
                return
            node = child
            yield node

    def _find(self, key: str) -> _Node | None:
        node = self._root
        for char in key:
            child = node.children.get(char)
            if child is None:
                return None
            node = child
        return node

    def search(self, key: str) -> bool:
        """Return True if ``key`` was inserted as a whole word."""
        node = self._find(key)
        return node is not None and node.end_of_word

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.search(key)

    def starts_with(self, prefix: str) -> bool:
        """Return True if some inserted key begins with ``prefix``."""
        return self._find(prefix) is not None

    def longest_word_with_all_prefixes(self) -> str:
        """Return the longest word whose every prefix is also a word.

        Among words of equal length the lexicographically smallest wins;
        the empty string is returned if there is none.
        """
        best = ""

        def visit(node: _Node, prefix: str) -> None:
            nonlocal best
            for char, child in node.children.items():
                if not child.end_of_word:
                    continue
                word = prefix + char
                if len(word) > len(best) or (len(word) == len(best) and word < best):
                    best = word
                visit(child, word)

        visit(self._root, "")
        return best

    def unique_prefix(self, key: str) -> str:
        """Return the shortest prefix of ``key`` shared with no other inserted key.

        If no prefix is unique, the whole ``key`` is returned. Raises KeyError
        if ``key`` does not lie along a path of the trie.
        """
        prefix = []
        node = self._root
        for char in key:
            child = node.children.get(char)
            if child is None:
                raise KeyError(key)
            prefix.append(char)
            if child.count == 1:
                break
            node = child
        return "".join(prefix)


def longest_word(words: Iterable[str]) -> str:
    """Return the longest word all of whose prefixes are in ``words``."""
    return Trie(words).longest_word_with_all_prefixes()


def shortest_unique_prefixes(words: Iterable[str]) -> list[str]:
    """Return the shortest unique prefix of each word, in the order given."""
    word_list = list(words)
    trie = Trie(word_list)
    return [trie.unique_prefix(word) for word in word_list]


def word_break(words: Iterable[str], key: str) -> bool:
    """Return True if ``key`` splits into a sequence of words from ``words``."""
    trie = Trie(words)

    @lru_cache(maxsize=None)
    def splits(start: int) -> bool:
        if start == len(key):
            return True
        return any(
            trie.search(key[start:end]) and splits(end)
            for end in range(start + 1, len(key) + 1)
        )

    return splits(0)