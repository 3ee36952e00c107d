"""
Lexicon: a hash-indexed, case-insensitive word set.

Lifecycle:
  - Empty      : fresh instance, or after release()
  - Populated  : after a successful populate(source)

populate() is all-or-nothing. Any failure while reading the source rolls the
lexicon back to Empty before the error propagates, so a caller never sees a
half-loaded dictionary. check() and size() are total: they work (and answer
False / 0) before anything has been loaded.

Typical use:
    from packages.lexicon import Lexicon
    with Lexicon() as lex:
        lex.populate("dictionaries/large")
        lex.check("Apple")   # -> True
"""

from __future__ import annotations

import os
from typing import Optional, TextIO, Union

from packages.datasets.io import iter_tokens
from .buckets import BucketStore
from .config import LexiconConfig
from .errors import (
    AllocationFailure,
    AlreadyPopulated,
    CapacityExceeded,
    EntryTooLong,
    LoadError,
    SourceUnavailable,
)
from .hasher import fold, hash_word

Source = Union[str, "os.PathLike[str]", TextIO]


class Lexicon:
    def __init__(self, config: Optional[LexiconConfig] = None):
        self.config = config or LexiconConfig()
        self._store = BucketStore(self.config.bins)
        self._words = 0
        self._populated = False

    # ---- lifecycle ----
    @property
    def populated(self) -> bool:
        return self._populated

    def populate(self, source: Source) -> None:
        """
        Load every whitespace-delimited token of `source` into the lexicon.

        `source` is either a filesystem path (opened here, UTF-8, and closed
        afterwards) or an already-open text stream (left open).

        Raises:
          AlreadyPopulated  : lexicon already holds a dictionary (contents kept)
          SourceUnavailable : path can't be opened, or reading/decoding fails
          EntryTooLong      : a token is longer than config.max_length
          CapacityExceeded  : more tokens than config.max_entries
          AllocationFailure : MemoryError while inserting
        """
        if self._populated:
            raise AlreadyPopulated("lexicon is already populated; call release() first", source)

        try:
            if isinstance(source, (str, os.PathLike)):
                try:
                    f = open(source, "r", encoding="utf-8")
                except OSError as e:
                    raise SourceUnavailable(f"cannot open dictionary: {source}", source) from e
                with f:
                    self._insert_all(f, source)
            else:
                self._insert_all(source, source)
        except LoadError:
            self._reset()
            raise
        except MemoryError as e:
            loaded = self._words
            self._reset()
            raise AllocationFailure(f"out of memory after {loaded} words", source) from e
        except (OSError, UnicodeDecodeError) as e:
            self._reset()
            raise SourceUnavailable(f"cannot read dictionary: {source}", source) from e
        except BaseException:
            self._reset()
            raise

        self._populated = True

    def _insert_all(self, stream: TextIO, source: object) -> None:
        max_length = self.config.max_length
        max_entries = self.config.max_entries
        bins = self.config.bins

        for token in iter_tokens(stream):
            if len(token) > max_length:
                raise EntryTooLong(
                    f"word longer than {max_length} characters: {token[:max_length]}...", source)
            if max_entries is not None and self._words >= max_entries:
                raise CapacityExceeded(f"dictionary exceeds {max_entries} entries", source)
            self._store.insert_at(hash_word(token, bins), token)
            self._words += 1

    def _reset(self) -> None:
        self._store.clear()
        self._words = 0
        self._populated = False

    def release(self) -> bool:
        """Drop every entry and return to Empty. Always succeeds."""
        self._reset()
        return True

    # ---- queries ----
    def size(self) -> int:
        """Number of loaded words (duplicates included), 0 when Empty."""
        return self._words if self._populated else 0

    def check(self, word: str) -> bool:
        """Case-insensitive membership test."""
        if len(word) > self.config.max_length:
            return False
        key = fold(word)
        return self._store.scan(hash_word(word, self.config.bins), lambda e: fold(e) == key)

    # ---- conveniences ----
    def chain_lengths(self):
        return self._store.chain_lengths()

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, word: str) -> bool:
        return self.check(word)

    def __enter__(self) -> "Lexicon":
        return self

    def __exit__(self, *exc) -> None:
        self.release()

    def __repr__(self) -> str:
        state = "populated" if self._populated else "empty"
        return f"Lexicon(bins={self.config.bins}, size={self.size()}, {state})"
