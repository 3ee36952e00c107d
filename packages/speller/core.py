"""
Spell-checking harness on top of a Lexicon.

- iter_words:   split a text into candidate words the way the classic speller
                does (letters and apostrophes; skip numbers and over-long runs).
- spell_check:  check every word of a text against a populated lexicon.
- run_speller:  full load -> check -> size -> release cycle with timings.

These functions are UI-agnostic so they can be reused by the CLI, a notebook,
or tests without changes.
"""

from __future__ import annotations

import re
import time
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from packages.lexicon import LENGTH, Lexicon, LexiconConfig

# A run of ASCII letters/digits, apostrophes allowed after the first character.
_WORD_RE = re.compile(r"[A-Za-z0-9][A-Za-z0-9']*")
_DIGIT_RE = re.compile(r"[0-9]")


def _ms_since(t0: int) -> float:
    return (time.perf_counter_ns() - t0) / 1_000_000.0


def iter_words(text: str, max_length: int = LENGTH) -> Iterator[str]:
    """
    Yield the words of `text` in order.

    Words containing digits are skipped, as are words longer than
    `max_length` (they can't be in the dictionary anyway).
    """
    for m in _WORD_RE.finditer(text):
        w = m.group(0)
        if _DIGIT_RE.search(w) or len(w) > max_length:
            continue
        yield w


def spell_check(lexicon: Lexicon, text: str) -> Dict:
    """
    Check every word in `text`.

    Returns:
        dict with keys:
            misspelled (list[str], text order), words_checked (int),
            dictionary_size (int), time_check_ms (float)
    """
    misspelled: List[str] = []
    checked = 0

    t0 = time.perf_counter_ns()
    for w in iter_words(text, lexicon.config.max_length):
        checked += 1
        if not lexicon.check(w):
            misspelled.append(w)
    dt = _ms_since(t0)

    return {
        "misspelled": misspelled,
        "words_checked": checked,
        "dictionary_size": lexicon.size(),
        "time_check_ms": dt,
    }


def run_speller(
        dictionary: str,
        text_path: str,
        *,
        config: Optional[LexiconConfig] = None,
        lexicon: Optional[Lexicon] = None,
) -> Dict:
    """
    Load `dictionary`, spell-check the text at `text_path`, and release.

    LoadError from populate() propagates unchanged and the lexicon is left
    as populate() left it; once loaded, the lexicon is always released.

    Returns:
        the spell_check() dict plus: text, dictionary, time_load_ms,
        time_size_ms, time_unload_ms, time_total_ms
    """
    lex = lexicon if lexicon is not None else Lexicon(config)

    t0 = time.perf_counter_ns()
    lex.populate(dictionary)
    t_load = _ms_since(t0)

    try:
        text = Path(text_path).read_text(encoding="utf-8", errors="replace")
        result = spell_check(lex, text)

        t0 = time.perf_counter_ns()
        result["dictionary_size"] = lex.size()
        t_size = _ms_since(t0)
    finally:
        t0 = time.perf_counter_ns()
        lex.release()
        t_unload = _ms_since(t0)

    result.update({
        "text": str(text_path),
        "dictionary": str(dictionary),
        "time_load_ms": t_load,
        "time_size_ms": t_size,
        "time_unload_ms": t_unload,
        "time_total_ms": t_load + result["time_check_ms"] + t_size + t_unload,
    })
    return result
