import csv
import json
from pathlib import Path

import pytest
from packages.lexicon import AlreadyPopulated, Lexicon, SourceUnavailable
from packages.speller import iter_words, spell_check, run_speller, write_csv, write_manifest


def test_iter_words_rules():
    text = "The cat's 2nd hat, isn't it? R2D2 'quoted' " + "x" * 50 + " end."
    assert list(iter_words(text, max_length=45)) == [
        "The", "cat's", "hat", "isn't", "it", "quoted'", "end",
    ]


def test_spell_check_reports_misspellings(tmp_path: Path):
    d = tmp_path / "dict"
    d.write_text("the\ncat\nsat\non\nmat\n", encoding="utf-8")
    lex = Lexicon()
    lex.populate(str(d))

    r = spell_check(lex, "The cat szt on the MAT. The dgo sat.")
    assert r["misspelled"] == ["szt", "dgo"]
    assert r["words_checked"] == 9
    assert r["dictionary_size"] == 5


def test_run_speller_full_cycle(tmp_path: Path):
    d = tmp_path / "dict"
    d.write_text("hello\nworld\n", encoding="utf-8")
    t = tmp_path / "text.txt"
    t.write_text("Hello, wrld!\n", encoding="utf-8")

    lex = Lexicon()
    r = run_speller(str(d), str(t), lexicon=lex)
    assert r["misspelled"] == ["wrld"]
    assert r["dictionary_size"] == 2
    assert r["words_checked"] == 2
    for k in ("time_load_ms", "time_check_ms", "time_size_ms", "time_unload_ms", "time_total_ms"):
        assert r[k] >= 0.0
    # released afterwards
    assert lex.size() == 0


def test_run_speller_missing_dictionary(tmp_path: Path):
    t = tmp_path / "text.txt"
    t.write_text("hello\n", encoding="utf-8")
    with pytest.raises(SourceUnavailable):
        run_speller(str(tmp_path / "missing"), str(t))


def test_run_speller_keeps_already_populated_lexicon(tmp_path: Path):
    d = tmp_path / "dict"
    d.write_text("hello\n", encoding="utf-8")
    t = tmp_path / "text.txt"
    t.write_text("hello\n", encoding="utf-8")

    lex = Lexicon()
    lex.populate(str(d))
    with pytest.raises(AlreadyPopulated):
        run_speller(str(d), str(t), lexicon=lex)
    assert lex.populated is True
    assert lex.size() == 1
    assert lex.check("hello")


def test_writers(tmp_path: Path):
    results = [{
        "text": "a.txt", "dictionary": "d", "misspelled": ["x", "y"],
        "words_checked": 10, "dictionary_size": 5,
        "time_load_ms": 1.23456, "time_check_ms": 0.5, "time_size_ms": 0.0,
        "time_unload_ms": 0.1, "time_total_ms": 1.83456,
    }]
    csv_path = write_csv(results, str(tmp_path / "out" / "run.csv"))
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["misspelled"] == "2"
    assert rows[0]["time_load_ms"] == "1.235"

    m_path = write_manifest({"run_id": "x", "num_texts": 1}, str(tmp_path / "m.json"))
    assert json.loads(Path(m_path).read_text(encoding="utf-8"))["num_texts"] == 1
