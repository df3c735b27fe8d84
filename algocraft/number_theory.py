"""Extended Euclid and the sum of multiples of 3 or 5."""

from __future__ import annotations


def _truncated_quotient(a: int, b: int) -> int:
    """Quotient of ``a / b`` rounded towards zero."""
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def extended_euclidean_algorithm(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, s, t)`` with ``g`` the gcd of ``a`` and ``b`` and ``a*s + b*t == g``."""
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r != 0:
        quotient = _truncated_quotient(old_r, r)
        old_r, r = r, old_r - quotient * r
        old_s, s = s, old_s - quotient * s
        old_t, t = t, old_t - quotient * t
    return old_r, old_s, old_t


def sum_of_multiples_of_3_or_5_below_1000() -> int:
    """Sum of the natural numbers below 1000 that are multiples of 3 or 5."""
    return sum(n for n in range(1, 1000) if n % 3 == 0 or n % 5 == 0)