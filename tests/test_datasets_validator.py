from pathlib import Path

import pytest
from wordgame.datasets import check_wordlists, pretty_summary, read_words, WordBank


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_check_wordlists_happy_path():
    rep = check_wordlists(["crane", "raise", "stare"], ["crane", "raise", "stare", "trace", "cared"])
    assert rep.passed is True
    assert rep.answers_subset_allowed is True
    assert rep.allowed_strict_superset is True
    s = pretty_summary(rep)
    assert "N=5" in s and "answers⊂allowed=True" in s and s.endswith("OK")


def test_check_wordlists_flags_bad_shapes():
    rep = check_wordlists(["crane", "cranes", "???"], ["crane", "stare"])
    assert rep.passed is False
    assert rep.answers.invalid == ["cranes", "???"]
    assert any("invalid" in msg for msg in rep.issues)


def test_check_wordlists_subset_violation():
    rep = check_wordlists(["crane", "raise", "stare"], ["crane", "stare", "trace"])
    assert rep.passed is False
    assert rep.answers_subset_allowed is False
    assert any("subset" in msg for msg in rep.issues)


def test_check_wordlists_requires_strict_superset():
    rep = check_wordlists(["crane", "stare"], ["stare", "crane"])
    assert rep.answers_subset_allowed is True
    assert rep.allowed_strict_superset is False
    assert rep.passed is False


def test_duplicates_are_reported_but_not_fatal():
    rep = check_wordlists(["crane", "crane"], ["crane", "stare", "stare"])
    assert rep.passed is True
    assert rep.answers.duplicates == ["crane"]
    assert rep.allowed.duplicates == ["stare"]


def test_read_words_normalizes(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["CRANE", "  stare ", "", "trace"])
    assert read_words(p) == ["crane", "stare", "trace"]
    with pytest.raises(FileNotFoundError):
        read_words(tmp_path / "missing.txt")


def test_bundled_lists_pass_the_checks():
    bank = WordBank.from_files()
    rep = check_wordlists(bank.secrets, bank.allowed)
    assert rep.passed, rep.issues
    assert len(bank.allowed) > len(bank.secrets)
