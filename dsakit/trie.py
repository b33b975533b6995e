"""A trie of lower-case words."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    terminal: bool = False


def _validate(word: str) -> str:
    if not all("a" <= ch <= "z" for ch in word):
        raise ValueError(f"only lower-case letters a-z are allowed: {word!r}")
    return word


class Trie:
    """A set of words over the letters a-z, stored by shared prefixes."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _TrieNode()
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add ``word``."""
        node = self._root
        for ch in _validate(word):
            node = node.children.setdefault(ch, _TrieNode())
        node.terminal = True

    def remove(self, word: str) -> None:
        """Remove ``word`` and any nodes left without use; absent words are ignored."""
        path = [self._root]
        for ch in _validate(word):
            child = path[-1].children.get(ch)
            if child is None:
                return
            path.append(child)
        path[-1].terminal = False
        for parent, ch, child in reversed(list(zip(path, word, path[1:]))):
            if child.terminal or child.children:
                break
            del parent.children[ch]

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self._root
        for ch in _validate(word):
            child = node.children.get(ch)
            if child is None:
                return False
            node = child
        return node.terminal