"""
Lexicon configuration.

Single source of truth for the hash-table constants. The bucket count is a
large prime so that the load factor stays under 1 for a typical English
word list (143,091 / 524,287 ~= 0.27); the next smaller prime, 131,071,
would push it above 1.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

HBINS = 524287          # default number of buckets
LENGTH = 45             # maximum word length
HASH_PRIME = 31         # rolling-hash multiplier, good for single-case alphabets
HASH_MASK = 0xFFFFFFFF  # hash arithmetic wraps at 32 bits


@dataclass(frozen=True)
class LexiconConfig:
    """Sizing knobs for a Lexicon instance."""
    bins: int = HBINS
    max_length: int = LENGTH
    max_entries: Optional[int] = None   # None = unbounded

    def __post_init__(self) -> None:
        for name in ("bins", "max_length", "max_entries"):
            value = getattr(self, name)
            if value is None and name == "max_entries":
                continue
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{name} must be an int; got {value!r}")
        if self.bins < 1:
            raise ValueError(f"bins must be >= 1; got {self.bins}")
        if self.max_length < 1:
            raise ValueError(f"max_length must be >= 1; got {self.max_length}")
        if self.max_entries is not None and self.max_entries < 0:
            raise ValueError(f"max_entries must be None or >= 0; got {self.max_entries}")
