from pathlib import Path
from packages.datasets import validate_source, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_source_happy_path(tmp_path: Path):
    d = tmp_path / "large"
    _write(d, ["apple", "banana", "o'clock", "cherry"])

    rep = validate_source(str(d))
    assert rep["passed"] is True
    assert rep["token_count"] == 4
    assert rep["unique_count"] == 4
    assert rep["issues"] == []
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "words=4" in s and s.endswith("OK")


def test_validate_source_duplicates_are_not_fatal(tmp_path: Path):
    d = tmp_path / "dups"
    _write(d, ["apple", "banana", "Apple"])

    rep = validate_source(str(d))
    assert rep["passed"] is True
    assert rep["token_count"] == 3 and rep["unique_count"] == 2
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_source_flags_errors(tmp_path: Path):
    d = tmp_path / "bad"
    # '123' and "'tis" are invalid tokens, the long one exceeds max_length=10
    _write(d, ["apple", "123", "'tis", "supercalifragilistic"])

    rep = validate_source(str(d), max_length=10)
    assert rep["passed"] is False
    assert rep["invalid_tokens"] == 2
    assert rep["too_long"] == 1
    assert any("invalid" in msg for msg in rep["issues"])
    assert "FAIL" in pretty_summary(rep)


def test_validate_source_missing(tmp_path: Path):
    rep = validate_source(str(tmp_path / "nope"))
    assert rep["exists"] is False
    assert rep["passed"] is False
    assert any("not found" in msg for msg in rep["issues"])


def test_validate_source_empty(tmp_path: Path):
    d = tmp_path / "empty"
    d.write_text("", encoding="utf-8")
    rep = validate_source(str(d))
    assert rep["passed"] is False
    assert any("0 words" in msg for msg in rep["issues"])


def test_validate_source_unreadable(tmp_path: Path, monkeypatch):
    import packages.datasets.validator as validator

    d = tmp_path / "locked"
    _write(d, ["apple"])

    def denied(path, max_length):
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr(validator, "_scan_tokens", denied)
    rep = validate_source(str(d))
    assert rep["exists"] is True
    assert rep["passed"] is False
    assert any("not readable" in msg for msg in rep["issues"])
