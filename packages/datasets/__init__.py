from .io import iter_tokens, write_lines
from .validator import validate_source, pretty_summary

__all__ = ["iter_tokens", "write_lines", "validate_source", "pretty_summary"]
