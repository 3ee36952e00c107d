# apps/cli/run.py
"""
CLI entry point for the speller.

This script:
  1) Validates the dictionary (prints counts + SHA, flags invalid/over-long words).
  2) Loads it into a Lexicon.
  3) Spell-checks each text, printing misspelled words and the usual
     statistics block, with a progress bar when several texts are given.
  4) Optionally prints hash distribution stats, then releases the lexicon and
     writes:
       - CSV:  one row per text (counts + timings)
       - TXT:  misspelled words per text
       - JSON: manifest with config, dictionary report, git commit, etc.

Usage:
    python -m apps.cli.run --dictionary dictionaries/large texts/lalaland.txt
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from packages.datasets import validate_source, pretty_summary
from packages.lexicon import HBINS, LENGTH, Lexicon, LexiconConfig, LoadError
from packages.lexicon.stats import distribution_report, pretty_summary as stats_summary
from packages.speller import spell_check
from packages.speller.io import (
    write_csv, write_misspelled, write_manifest, timestamp_id, git_commit_or_unknown,
)


def _print_result(r: dict, *, show_words: bool) -> None:
    if show_words:
        print("\nMISSPELLED WORDS\n")
        for w in r["misspelled"]:
            print(w)
    print()
    print(f"WORDS MISSPELLED:     {len(r['misspelled'])}")
    print(f"WORDS IN DICTIONARY:  {r['dictionary_size']}")
    print(f"WORDS IN TEXT:        {r['words_checked']}")
    print(f"TIME IN load:         {r['time_load_ms'] / 1000.0:.2f}")
    print(f"TIME IN check:        {r['time_check_ms'] / 1000.0:.2f}")
    print(f"TIME IN size:         {r['time_size_ms'] / 1000.0:.2f}")
    print(f"TIME IN unload:       {r['time_unload_ms'] / 1000.0:.2f}")
    print(f"TIME IN TOTAL:        {r['time_total_ms'] / 1000.0:.2f}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, load the dictionary, check the texts, and write outputs.
    Returns a process exit code.
    """
    ap = argparse.ArgumentParser(description="speller — check texts against a hashed dictionary")
    ap.add_argument("texts", nargs="+", help="text file(s) to spell-check")
    ap.add_argument("--dictionary", default="dictionaries/large",
                    help="path to the dictionary (whitespace-separated words)")
    ap.add_argument("--bins", type=int, default=HBINS, help="number of hash buckets")
    ap.add_argument("--max-length", type=int, default=LENGTH, help="longest accepted word")
    ap.add_argument("--max-entries", type=int, help="reject dictionaries with more words")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-write", action="store_true", help="don't write CSV/TXT/JSON outputs")
    ap.add_argument("--quiet", action="store_true", help="don't print the misspelled words")
    ap.add_argument("--stats", action="store_true", help="print hash distribution statistics")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="Show a progress bar over texts (auto = only for several texts on a terminal)."
    )
    args = ap.parse_args(argv)

    try:
        config = LexiconConfig(bins=args.bins, max_length=args.max_length,
                               max_entries=args.max_entries)
    except ValueError as e:
        ap.error(str(e))

    # 1) Validate the dictionary and print a one-liner summary
    rep = validate_source(args.dictionary, max_length=config.max_length)
    print(pretty_summary(rep))

    # 2) Load
    lex = Lexicon(config)
    t0 = time.perf_counter_ns()
    try:
        lex.populate(args.dictionary)
    except LoadError as e:
        print(f"Could not load {args.dictionary}: {e}", file=sys.stderr)
        return 1
    t_load = (time.perf_counter_ns() - t0) / 1_000_000.0

    # 3) Check each text
    mode = args.progress
    if mode == "auto":
        mode = "bar" if (len(args.texts) > 1 and sys.stderr.isatty()) else "off"
    iterator = tqdm(args.texts, ncols=80, desc="Checking", unit="text") if mode == "bar" else args.texts

    results = []
    for path in iterator:
        try:
            text = Path(path).read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            print(f"Could not open {path}: {e}", file=sys.stderr)
            lex.release()
            return 1
        r = spell_check(lex, text)
        t0 = time.perf_counter_ns()
        r["dictionary_size"] = lex.size()
        r["time_size_ms"] = (time.perf_counter_ns() - t0) / 1_000_000.0
        r["text"] = str(path)
        r["dictionary"] = str(args.dictionary)
        r["time_load_ms"] = t_load
        results.append(r)

    # 4) Distribution stats (before release, while the chains still exist)
    dist = None
    if args.stats:
        dist = distribution_report(lex)
        print(stats_summary(dist))

    t0 = time.perf_counter_ns()
    lex.release()
    t_unload = (time.perf_counter_ns() - t0) / 1_000_000.0

    for r in results:
        r["time_unload_ms"] = t_unload
        r["time_total_ms"] = t_load + r["time_check_ms"] + r["time_size_ms"] + t_unload
        if len(results) > 1:
            print(f"\n== {r['text']}")
        _print_result(r, show_words=not args.quiet)

    if args.no_write:
        return 0

    # 5) Write outputs (CSV + misspelled lists + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    for i, r in enumerate(results, 1):
        write_misspelled(r, str(outdir / f"run_{run_id}_misspelled_{i}.txt"))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": rep,
        "distribution": dist,
        "num_texts": len(results),
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
