"""
Download a word list and write a clean dictionary file for the speller.

What it does:
- Downloads the URL (plain-text word list or an HTML page listing words).
- For HTML, parses the visible text; otherwise uses the body as-is.
- Keeps tokens made of letters/apostrophes no longer than LENGTH, lowercased.
- De-duplicates while preserving source order (unless --keep-duplicates), and
  writes one word per line.

Usage:
    python -m script.fetch_wordlist --url https://example.org/words.txt --out dictionaries/large
    # or alphabetically sorted:
    python -m script.fetch_wordlist --url ... --sort --out dictionaries/large
"""

import argparse
from pathlib import Path

import requests
from bs4 import BeautifulSoup  # pip install beautifulsoup4 requests

from packages.datasets.io import write_lines
from packages.datasets.validator import TOKEN_RE
from packages.lexicon import LENGTH

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def extract_words(body: str, *, html: bool = False, max_length: int = LENGTH) -> list[str]:
    """Pull dictionary words out of a downloaded body."""
    if html:
        body = BeautifulSoup(body, "html.parser").get_text("\n", strip=True)
    return [t.lower() for t in body.split() if TOKEN_RE.fullmatch(t) and len(t) <= max_length]


def fetch_words(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    is_html = "html" in r.headers.get("Content-Type", "")
    return extract_words(r.text, html=is_html)


def main():
    ap = argparse.ArgumentParser(description="Fetch a word list for the speller")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="dictionaries/large")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    ap.add_argument("--keep-duplicates", action="store_true",
                    help="keep repeated words (the lexicon counts each copy)")
    args = ap.parse_args()

    words = fetch_words(args.url)
    if not args.keep_duplicates:
        words = unique_preserve_order(words)
    if args.sort:
        words = sorted(words)

    write_lines(words, Path(args.out))
    print(f"Wrote {len(words)} words -> {args.out}")

if __name__ == "__main__":
    main()
