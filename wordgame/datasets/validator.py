"""
Word-list checks for the word bank.

Given the secret list ("answers") and the allowed-guess list, report:
  - words that are not exactly N lowercase letters,
  - duplicates inside either list,
  - whether answers ⊆ allowed, and whether the inclusion is strict
    (the allowed set must be larger, otherwise acceptance of a guess
    would leak the whole answer space).

The report is a plain dataclass; `passed` is the strict verdict that
`WordBank` relies on.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field, asdict
from typing import Dict, Iterable, List

from wordgame.engine.validation import is_well_formed


@dataclass
class ListReport:
    """Diagnostics for one word list."""
    count: int             # words given (after blank removal)
    unique_count: int      # distinct well-formed words
    invalid: List[str]     # words with the wrong shape
    duplicates: List[str]  # words seen more than once


@dataclass
class WordListReport:
    N: int
    answers: ListReport
    allowed: ListReport
    answers_subset_allowed: bool
    allowed_strict_superset: bool
    passed: bool
    issues: List[str] = field(default_factory=list)

    def as_dict(self) -> Dict:
        return asdict(self)


def _inspect(words: List[str], N: int) -> ListReport:
    invalid = [w for w in words if not (is_well_formed(w, N) and w == w.lower())]
    counts = Counter(w for w in words if w not in invalid)
    return ListReport(
        count=len(words),
        unique_count=len(counts),
        invalid=invalid,
        duplicates=sorted(w for w, c in counts.items() if c > 1),
    )


def check_wordlists(answers: Iterable[str], allowed: Iterable[str], N: int = 5) -> WordListReport:
    """
    Check an (answers, allowed) pair for word length N.

    Duplicates are reported but do not fail the check; bad shapes, an
    empty list, or a non-strict superset do.
    """
    answers = list(answers)
    allowed = list(allowed)
    ans_rep = _inspect(answers, N)
    all_rep = _inspect(allowed, N)

    ans_set = {w for w in answers if w not in ans_rep.invalid}
    all_set = {w for w in allowed if w not in all_rep.invalid}
    subset_ok = ans_set <= all_set
    strict_ok = subset_ok and len(all_set) > len(ans_set)

    issues: List[str] = []
    if not ans_set:
        issues.append("answers list contains 0 valid words")
    if not all_set:
        issues.append("allowed list contains 0 valid words")
    if ans_rep.invalid:
        issues.append(f"answers has {len(ans_rep.invalid)} invalid word(s), e.g. {ans_rep.invalid[:5]}")
    if all_rep.invalid:
        issues.append(f"allowed has {len(all_rep.invalid)} invalid word(s), e.g. {all_rep.invalid[:5]}")
    if ans_rep.duplicates:
        issues.append("answers contains duplicate words")
    if all_rep.duplicates:
        issues.append("allowed contains duplicate words")
    if not subset_ok:
        missing = sorted(ans_set - all_set)[:5]
        issues.append(f"answers not subset of allowed (e.g., {missing})")
    elif not strict_ok:
        issues.append("allowed must be a strict superset of answers")

    passed = (
        strict_ok
        and bool(ans_set)
        and not ans_rep.invalid
        and not all_rep.invalid
    )
    return WordListReport(
        N=N,
        answers=ans_rep,
        allowed=all_rep,
        answers_subset_allowed=subset_ok,
        allowed_strict_superset=strict_ok,
        passed=passed,
        issues=issues,
    )


def pretty_summary(report: WordListReport) -> str:
    """
    One-liner for the console, e.g.
        N=5 | answers=110 (uniq=110) | allowed=305 (uniq=305) | answers⊂allowed=True | OK
    """
    status = "OK" if report.passed else "FAIL"
    return (
        f"N={report.N} | answers={report.answers.count} (uniq={report.answers.unique_count}) "
        f"| allowed={report.allowed.count} (uniq={report.allowed.unique_count}) "
        f"| answers⊂allowed={report.allowed_strict_superset} | {status}"
    )
