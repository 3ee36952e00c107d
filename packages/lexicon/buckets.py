"""
Fixed-size bucket store: one chain per bucket.

Chains are plain lists created on first insert, so an empty store of
524,287 buckets costs one list of None references rather than half a
million empty lists.
"""

from __future__ import annotations

from typing import Callable, List, Optional


class BucketStore:
    def __init__(self, bins: int):
        self.bins = int(bins)
        self._chains: List[Optional[List[str]]] = [None] * self.bins
        self._count = 0

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.bins:
            raise IndexError(f"bucket index {index} out of range [0, {self.bins})")

    def insert_at(self, index: int, entry: str) -> None:
        """Append `entry` to the chain at `index`. Duplicates are kept."""
        self._check_index(index)
        chain = self._chains[index]
        if chain is None:
            chain = self._chains[index] = []
        chain.append(entry)
        self._count += 1

    def scan(self, index: int, predicate: Callable[[str], bool]) -> bool:
        """Return True on the first entry in the chain satisfying `predicate`."""
        self._check_index(index)
        chain = self._chains[index]
        if not chain:
            return False
        for entry in chain:
            if predicate(entry):
                return True
        return False

    def clear(self) -> None:
        """Drop every chain. Safe to call any number of times."""
        self._chains = [None] * self.bins
        self._count = 0

    def chain_lengths(self) -> List[int]:
        return [len(c) if c else 0 for c in self._chains]

    def __len__(self) -> int:
        return self._count
