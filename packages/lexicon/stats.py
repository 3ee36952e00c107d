"""
Hash distribution diagnostics for a Lexicon.

Summarizes how evenly the loaded words spread over the buckets: load factor,
how many buckets are used, and how long the chains get. Useful when picking
a bucket count or checking the hash function against a new word list.
"""

from __future__ import annotations

from typing import Dict

import numpy as np


def distribution_report(lexicon) -> Dict:
    """
    Compute chain-length statistics for `lexicon`.

    Returns a JSON-serializable dict:
      bins, entries, load_factor, used_buckets, empty_buckets,
      max_chain, mean_chain (over used buckets), collisions
    """
    lengths = np.asarray(lexicon.chain_lengths(), dtype=np.int64)
    bins = int(lengths.size)
    entries = int(lengths.sum())
    used = lengths[lengths > 0]

    return {
        "bins": bins,
        "entries": entries,
        "load_factor": entries / bins if bins else 0.0,
        "used_buckets": int(used.size),
        "empty_buckets": bins - int(used.size),
        "max_chain": int(lengths.max()) if bins else 0,
        "mean_chain": float(used.mean()) if used.size else 0.0,
        # every entry after the first in its bucket
        "collisions": int((used - 1).sum()),
    }


def pretty_summary(report: Dict) -> str:
    """
    Example:
        bins=524287 | entries=143091 | load=0.273 | used=...(empty=...) | max_chain=4 | mean_chain=1.14
    """
    return (
        f"bins={report['bins']} | entries={report['entries']} "
        f"| load={report['load_factor']:.3f} "
        f"| used={report['used_buckets']} (empty={report['empty_buckets']}) "
        f"| max_chain={report['max_chain']} | mean_chain={report['mean_chain']:.2f} "
        f"| collisions={report['collisions']}"
    )
