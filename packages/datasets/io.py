from __future__ import annotations
from pathlib import Path
import re
from typing import Iterable, Iterator, TextIO

# ASCII whitespace only; characters like U+00A0 stay inside a token
_TOKEN_RE = re.compile(r"[^ \t\n\r\f\v]+")


def iter_tokens(stream: TextIO) -> Iterator[str]:
    """
    Yield whitespace-delimited tokens from an open text stream, one line at a
    time so large dictionaries are never read into memory whole.
    """
    for line in stream:
        yield from _TOKEN_RE.findall(line)


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
