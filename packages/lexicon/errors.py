"""
Errors raised while populating a Lexicon.

All of them derive from LoadError, so callers that only care about
"did the dictionary load?" can catch one type. Whenever one of these is
raised the lexicon has already been rolled back to its empty state.
"""

from __future__ import annotations


class LoadError(Exception):
    """Base class: population failed; the lexicon is empty."""

    def __init__(self, message: str, source: object = None):
        super().__init__(message)
        self.source = source


class SourceUnavailable(LoadError):
    """The source could not be opened or read."""


class AllocationFailure(LoadError):
    """Ran out of memory while inserting entries."""


class EntryTooLong(LoadError):
    """A token in the source exceeds the configured maximum length."""


class CapacityExceeded(LoadError):
    """The source holds more tokens than the configured maximum."""


class AlreadyPopulated(LoadError):
    """populate() was called on a lexicon that is already populated."""
