"""Simple string manipulations."""

from __future__ import annotations


def is_palindrome(text: str) -> bool:
    """True when ``text`` reads the same backwards."""
    return text == text[::-1]


def replace_char(text: str, old: str, new: str) -> str:
    """Replace every occurrence of the character ``old`` with ``new``."""
    if len(old) != 1 or len(new) != 1:
        raise ValueError("old and new must be single characters")
    return text.replace(old, new)


def reverse_each_word(text: str) -> str:
    """Reverse the characters of every space-separated word in place."""
    return " ".join(word[::-1] for word in text.split(" "))


def reverse_string(text: str) -> str:
    """The characters of ``text`` in reverse order."""
    return text[::-1]


def reverse_word_order(text: str) -> str:
    """The space-separated words of ``text`` in reverse order."""
    return " ".join(reversed(text.split(" ")))


def remove_spaces(text: str) -> str:
    """``text`` with every space removed."""
    return text.replace(" ", "")