"""
I/O utilities for speller runs.

Responsibilities:
- write_csv:      one row per checked text (counts + timings).
- write_misspelled: plain list of misspelled words, one per line.
- write_manifest: dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

from packages.datasets.io import write_lines

CSV_FIELDS = [
    "text", "dictionary", "misspelled", "words_checked", "dictionary_size",
    "time_load_ms", "time_check_ms", "time_size_ms", "time_unload_ms", "time_total_ms",
]


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of speller results to CSV.

    The `misspelled` column holds the count; the words themselves go to
    write_misspelled().

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()

        for r in results:
            row = {k: r.get(k, "") for k in CSV_FIELDS}
            row["misspelled"] = len(r.get("misspelled", []))
            for k in CSV_FIELDS:
                if k.startswith("time_") and row[k] != "":
                    row[k] = round(float(row[k]), 3)
            w.writerow(row)

    return str(p)


def write_misspelled(result: Dict, path: str) -> str:
    """Write the misspelled words of one result, in text order."""
    return write_lines(result.get("misspelled", []), path)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dictionary validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (dictionary, texts, bins, max_length, outdir)
      - dictionary: output of datasets.validate_source(...)
      - distribution: output of lexicon.stats.distribution_report(...), if requested
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
