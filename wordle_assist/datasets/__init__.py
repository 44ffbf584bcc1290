from .validator import validate_dictionary, pretty_summary
from .io import (
    DEFAULT_DICTIONARY, DEFAULT_KIND, read_lines, write_lines, read_words, read_ranked_words,
    read_dictionary, load_store,
)

__all__ = [
    "validate_dictionary", "pretty_summary", "DEFAULT_DICTIONARY", "DEFAULT_KIND", "read_lines",
    "write_lines", "read_words", "read_ranked_words", "read_dictionary", "load_store",
]
