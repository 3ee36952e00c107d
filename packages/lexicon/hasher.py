"""
Polynomial rolling hash for dictionary words.

    hash(w) = sum( fold(w[i]) * p^i ) mod bins

with p = 31 (see https://cp-algorithms.com/string/string-hashing.html).
Characters are folded to lowercase first, so "Apple" and "apple" land in
the same bucket. The running sum and power wrap at 32 bits, as unsigned
arithmetic would.
"""

from __future__ import annotations

from .config import HASH_MASK, HASH_PRIME, HBINS

# ASCII-only case folding; everything outside A-Z passes through untouched.
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


def fold(word: str) -> str:
    """Fold ASCII uppercase letters to lowercase."""
    return word.translate(_ASCII_LOWER)


def hash_word(word: str, bins: int = HBINS) -> int:
    """
    Map `word` to a bucket index in [0, bins).

    Every character contributes, including the last one.
    """
    h = 0
    p_power = 1
    for ch in fold(word):
        h = (h + ord(ch) * p_power) & HASH_MASK
        p_power = (p_power * HASH_PRIME) & HASH_MASK
    return h % bins
