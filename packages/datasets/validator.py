"""
Dictionary-source validator.

What this module does:
- Check a dictionary file before handing it to a Lexicon.
- Enforce formatting rules (letters and apostrophes only, length <= LENGTH).
- Count tokens, case-insensitive unique tokens and duplicates; compute the
  SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Duplicates are reported but don't fail validation: the lexicon accepts them
(each copy is counted by size()).

Typical use:
    from packages.datasets import validate_source, pretty_summary
    rep = validate_source("dictionaries/large")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib
import re

from .io import iter_tokens
from packages.lexicon.config import LENGTH
from packages.lexicon.hasher import fold

# letters, optionally with apostrophes after the first character (e.g. "o'clock")
TOKEN_RE = re.compile(r"[A-Za-z][A-Za-z']*")


# -----------------------------
# Dataclass for the structured report
# -----------------------------

@dataclass
class SourceReport:
    """Diagnostics and metadata for one dictionary source."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    token_count: int     # all whitespace-delimited tokens (duplicates counted)
    unique_count: int    # case-insensitive unique tokens
    invalid_tokens: int  # tokens with characters other than letters/apostrophes
    too_long: int        # tokens longer than max_length
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    max_length: int
    passed: bool
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _scan_tokens(path: Path, max_length: int) -> Tuple[int, int, int, int]:
    """
    Walk every token in the file.

    Returns:
      (token_count, unique_count, invalid_count, too_long_count)
    """
    seen = set()
    total = invalid = too_long = 0

    with path.open("r", encoding="utf-8") as f:
        for tok in iter_tokens(f):
            total += 1
            seen.add(fold(tok))
            if not TOKEN_RE.fullmatch(tok):
                invalid += 1
            if len(tok) > max_length:
                too_long += 1

    return total, len(seen), invalid, too_long


# -----------------------------
# Public API
# -----------------------------

def validate_source(path: str, max_length: int = LENGTH) -> Dict:
    """
    Validate a dictionary source file.

    Parameters
    ----------
    path : str
        Path to the dictionary (whitespace-separated words).
    max_length : int
        Longest word the lexicon will accept.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see SourceReport) whose `passed` flag
        requires: file exists, is readable UTF-8, is non-empty, and has no
        invalid or over-long tokens.
    """
    p = Path(path)
    issues: List[str] = []

    if not p.is_file():
        issues.append(f"dictionary not found: {path}")
        return asdict(SourceReport(path, False, 0, 0, 0, 0, "", max_length, False, issues))

    try:
        total, unique, invalid, too_long = _scan_tokens(p, max_length)
    except UnicodeDecodeError as e:
        issues.append(f"dictionary is not valid UTF-8: {e.reason}")
        return asdict(SourceReport(str(p), True, 0, 0, 0, 0, _sha256_file(p), max_length, False, issues))
    except OSError as e:
        issues.append(f"dictionary is not readable: {e}")
        return asdict(SourceReport(str(p), True, 0, 0, 0, 0, "", max_length, False, issues))

    if total == 0:
        issues.append("dictionary contains 0 words")
    if invalid:
        issues.append(f"{invalid} invalid token(s)")
    if too_long:
        issues.append(f"{too_long} token(s) longer than {max_length}")
    if total != unique:
        issues.append(f"{total - unique} duplicate token(s) (kept by the lexicon)")

    passed = total > 0 and invalid == 0 and too_long == 0

    rep = SourceReport(
        path=str(p),
        exists=True,
        token_count=total,
        unique_count=unique,
        invalid_tokens=invalid,
        too_long=too_long,
        sha256=_sha256_file(p),
        max_length=max_length,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for console output.

    Example:
        dictionaries/large | words=143091 (uniq=143091, sha=abc123...) | invalid=0 | too_long=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{report['path']} | words={report['token_count']} "
        f"(uniq={report['unique_count']}, sha={sha}) "
        f"| invalid={report['invalid_tokens']} | too_long={report['too_long']} | {status}"
    )
