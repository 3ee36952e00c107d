from pathlib import Path

import pytest
from packages.lexicon import Lexicon, LexiconConfig
from packages.lexicon.stats import distribution_report, pretty_summary


def test_distribution_report_empty():
    rep = distribution_report(Lexicon(LexiconConfig(bins=11)))
    assert rep["bins"] == 11
    assert rep["entries"] == 0
    assert rep["load_factor"] == 0.0
    assert rep["empty_buckets"] == 11
    assert rep["max_chain"] == 0
    assert rep["mean_chain"] == 0.0
    assert rep["collisions"] == 0


def test_distribution_report_single_bucket(tmp_path: Path):
    d = tmp_path / "d"
    d.write_text("a b c d\n", encoding="utf-8")
    lex = Lexicon(LexiconConfig(bins=1))
    lex.populate(str(d))

    rep = distribution_report(lex)
    assert rep["entries"] == 4
    assert rep["used_buckets"] == 1
    assert rep["max_chain"] == 4
    assert rep["collisions"] == 3
    assert rep["load_factor"] == pytest.approx(4.0)


def test_distribution_report_counts_match_size(tmp_path: Path):
    words = [f"w{'a' * i}" for i in range(1, 40)]
    d = tmp_path / "d"
    d.write_text("\n".join(words) + "\n", encoding="utf-8")
    lex = Lexicon(LexiconConfig(bins=101))
    lex.populate(str(d))

    rep = distribution_report(lex)
    assert rep["entries"] == lex.size() == len(words)
    assert rep["used_buckets"] + rep["empty_buckets"] == 101
    assert rep["used_buckets"] + rep["collisions"] == rep["entries"]
    s = pretty_summary(rep)
    assert "bins=101" in s and "entries=39" in s
