from __future__ import annotations

from pathlib import Path
from typing import List

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_ANSWERS = DATA_DIR / "answers_5.txt"
DEFAULT_ALLOWED = DATA_DIR / "allowed_5.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of raw lines (no trailing CR/LF).
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def read_words(p: Path | str) -> List[str]:
    """
    Read a newline-separated word list, lowercased, blanks dropped.
    Shape problems are left for `check_wordlists` to report.
    """
    return [ln.strip().lower() for ln in read_lines(p) if ln.strip()]
