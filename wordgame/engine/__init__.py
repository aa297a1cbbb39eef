from .scoring import Classification, PATTERN_CHARS, evaluate, to_pattern, is_solved
from .constraints import filter_candidates
from .validation import normalize, is_letter, is_well_formed

__all__ = [
    "Classification", "PATTERN_CHARS", "evaluate", "to_pattern", "is_solved",
    "filter_candidates", "normalize", "is_letter", "is_well_formed",
]
