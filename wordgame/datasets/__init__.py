from .validator import check_wordlists, pretty_summary
from .io import read_lines, read_words
from .wordbank import WordBank

__all__ = ["check_wordlists", "pretty_summary", "read_lines", "read_words", "WordBank"]
