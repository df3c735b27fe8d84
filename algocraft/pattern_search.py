"""Substring search: Knuth-Morris-Pratt and Rabin-Karp."""

from __future__ import annotations

_PRIME = 101
_BASE = 256


def _partial_match_table(pattern: str) -> list[int]:
    """Length of the longest proper prefix of ``pattern[:i + 1]`` that is also its suffix."""
    partial = [0]
    for ch in pattern[1:]:
        j = partial[-1]
        while j > 0 and pattern[j] != ch:
            j = partial[j - 1]
        partial.append(j + 1 if pattern[j] == ch else j)
    return partial


def knuth_morris_pratt(text: str, pattern: str) -> list[int]:
    """Return the start of every occurrence of ``pattern`` in ``text``, overlaps included."""
    if not text or not pattern:
        return []

    partial = _partial_match_table(pattern)
    matches: list[int] = []
    j = 0
    for i, ch in enumerate(text):
        while j > 0 and ch != pattern[j]:
            j = partial[j - 1]
        if ch == pattern[j]:
            j += 1
        if j == len(pattern):
            matches.append(i + 1 - j)
            j = partial[j - 1]
    return matches


def pattern_hash(text: str) -> int:
    """Rolling hash of ``text`` modulo 101, as used by :func:`rabin_karp`."""
    if not text:
        raise ValueError("cannot hash an empty string")

    *head, last = text
    result = 0
    for i, ch in enumerate(head):
        if i == 0:
            result = (ord(ch) * _BASE) % _PRIME
        else:
            result = (((result + ord(ch)) % _PRIME) * _BASE) % _PRIME
    return (result + ord(last)) % _PRIME


def rabin_karp(target: str, pattern: str) -> list[int]:
    """Return the start of every occurrence of ``pattern`` in ``target``, overlaps included."""
    if not target or not pattern or len(pattern) > len(target):
        return []

    wanted = pattern_hash(pattern)
    width = len(pattern)
    matches: list[int] = []
    for i in range(len(target) - width + 1):
        window = target[i : i + width]
        if pattern_hash(window) == wanted and window == pattern:
            matches.append(i)
    return matches