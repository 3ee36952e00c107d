from .config import HBINS, LENGTH, LexiconConfig
from .errors import (
    LoadError,
    SourceUnavailable,
    AllocationFailure,
    EntryTooLong,
    CapacityExceeded,
    AlreadyPopulated,
)
from .hasher import fold, hash_word
from .buckets import BucketStore
from .lexicon import Lexicon

__all__ = [
    "HBINS",
    "LENGTH",
    "LexiconConfig",
    "LoadError",
    "SourceUnavailable",
    "AllocationFailure",
    "EntryTooLong",
    "CapacityExceeded",
    "AlreadyPopulated",
    "fold",
    "hash_word",
    "BucketStore",
    "Lexicon",
]
