"""Enumerations of codes, keypad words, subsequences and subsets."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

_KEYPAD = {
    2: "abc",
    3: "def",
    4: "ghi",
    5: "jkl",
    6: "mno",
    7: "pqrs",
    8: "tuv",
    9: "wxyz",
}


def _letter(code: int) -> str:
    return chr(ord("a") + code - 1)


def _codes(digits: str) -> Iterator[str]:
    if not digits:
        yield ""
        return
    if digits[0] != "0":
        head = _letter(int(digits[0]))
        for rest in _codes(digits[1:]):
            yield head + rest
    if len(digits) >= 2 and 10 <= int(digits[:2]) <= 26:
        head = _letter(int(digits[:2]))
        for rest in _codes(digits[2:]):
            yield head + rest


def letter_codes(digits: str) -> list[str]:
    """Every way to read a digit string as letters with a=1 ... z=26.

    Single-digit readings come before two-digit ones at each step; a zero
    has no letter of its own.
    """
    if not all(ch in "0123456789" for ch in digits):
        raise ValueError(f"only decimal digits are allowed: {digits!r}")
    return list(_codes(digits))


def case_variants(text: str) -> list[str]:
    """Every combination of keeping or upper-casing each character."""
    variants = [""]
    for ch in text:
        variants = [prefix + option for prefix in variants for option in (ch, ch.upper())]
    return variants


def keypad_letters(digit: int) -> str:
    """Letters on a phone keypad key; keys 0 and 1 give a single space."""
    if not 0 <= digit <= 9:
        raise ValueError(f"not a keypad digit: {digit}")
    return _KEYPAD.get(digit, " ")


def keypad_combinations(number: int) -> list[str]:
    """Every word that the digits of ``number`` can spell on a keypad."""
    if number < 0:
        raise ValueError("number must not be negative")
    words = [""]
    if number == 0:
        return words
    for ch in str(number):
        letters = keypad_letters(int(ch))
        words = [prefix + letter for letter in letters for prefix in words]
    return words


def space_partitions(text: str) -> list[str]:
    """Every way to put single spaces between the characters of ``text``."""
    if not text:
        return [""]
    results = [text[0]]
    for ch in text[1:]:
        results = [prefix + sep + ch for prefix in results for sep in (" ", "")]
    return results


def subsequences(text: str) -> list[str]:
    """All 2**n subsequences, the empty one first."""
    results = [""]
    for ch in reversed(text):
        results = results + [ch + rest for rest in results]
    return results


def subsets(values: Sequence[int]) -> list[list[int]]:
    """All 2**n subsets as lists keeping the original order, the empty one first."""
    results: list[list[int]] = [[]]
    for value in reversed(values):
        results = results + [[value, *rest] for rest in results]
    return results