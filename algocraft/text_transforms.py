"""Burrows-Wheeler transform, longest palindromic substring and string reversal."""

from __future__ import annotations


def burrows_wheeler_transform(text: str) -> tuple[str, int]:
    """Return the last column of the sorted rotations of ``text`` and the row of ``text``.

    Rotations are ordered case-insensitively.
    """
    rotations = sorted(
        (text[i:] + text[:i] for i in range(len(text))), key=str.lower
    )
    encoded = "".join(rotation[-1] for rotation in rotations)
    index = 0
    for i, rotation in enumerate(rotations):
        if rotation == text:
            index = i
    return encoded, index


def inv_burrows_wheeler_transform(encoded: str, index: int) -> str:
    """Recover the text from its transform ``encoded`` and the row ``index``."""
    table = sorted(enumerate(encoded), key=lambda entry: entry[1])
    decoded = []
    idx = index
    for _ in range(len(encoded)):
        idx, ch = table[idx]
        decoded.append(ch)
    return "".join(decoded)


def manacher(text: str) -> str:
    """Return the longest palindromic substring of ``text``.

    Among equally long palindromes the last one found wins.
    """
    if len(text) <= 1:
        return text

    # Separators let even-length palindromes have a centre too.
    chars = "#" + "#".join(text) + "#"
    n = len(chars)
    lengths = [1] * n
    center = 0
    right = 0

    for i in range(n):
        if right > i > center:
            lengths[i] = min(right - i, lengths[2 * center - i])
            if lengths[i] + i >= right:
                center = i
                right = lengths[i] + i
                if right >= n - 1:
                    break
            else:
                continue

        radius = (lengths[i] - 1) // 2 + 1
        while i >= radius and i + radius <= n - 1 and chars[i - radius] == chars[i + radius]:
            lengths[i] += 2
            radius += 1

    best = max(range(n), key=lambda i: (lengths[i], i))
    radius = (lengths[best] - 1) // 2
    return chars[best - radius : best + radius + 1].replace("#", "")


def reverse(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]