import random
from pathlib import Path

import pytest
from wordgame.datasets import WordBank

ANSWERS = ["crane", "raise", "stare"]
ALLOWED = ["crane", "raise", "stare", "trace", "cared"]


def test_is_valid_guess_is_case_normalized():
    bank = WordBank(ANSWERS, ALLOWED)
    assert bank.is_valid_guess("CRANE") is True
    assert bank.is_valid_guess("trace") is True   # allowed but never a secret
    assert bank.is_valid_guess("zzzzz") is False
    assert bank.is_valid_guess("cranes") is False
    assert "Cared" in bank


def test_pick_secret_is_seedable_and_only_from_secrets():
    bank = WordBank(ANSWERS, ALLOWED)
    a = [bank.pick_secret(random.Random(7)) for _ in range(5)]
    b = [bank.pick_secret(random.Random(7)) for _ in range(5)]
    assert a == b
    rng = random.Random(1)
    picks = {bank.pick_secret(rng) for _ in range(200)}
    assert picks == set(ANSWERS)


def test_secrets_are_always_guessable():
    bank = WordBank(ANSWERS, ALLOWED)
    assert all(bank.is_valid_guess(w) for w in bank.secrets)


def test_rejects_lists_without_a_strict_superset():
    with pytest.raises(ValueError):
        WordBank(ANSWERS, ANSWERS)
    with pytest.raises(ValueError):
        WordBank([], ALLOWED)


def test_from_files(tmp_path: Path):
    ans = tmp_path / "answers_5.txt"
    allw = tmp_path / "allowed_5.txt"
    ans.write_text("crane\nstare\n", encoding="utf-8")
    allw.write_text("crane\nstare\ntrace\n", encoding="utf-8")
    bank = WordBank.from_files(ans, allw)
    assert bank.secrets == ("crane", "stare")
    assert len(bank) == 3
