from .core import iter_words, spell_check, run_speller
from .io import write_csv, write_misspelled, write_manifest

__all__ = ["iter_words", "spell_check", "run_speller", "write_csv", "write_misspelled",
           "write_manifest"]
