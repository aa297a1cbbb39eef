import itertools
from collections import Counter

import pytest
from wordgame.engine import (
    Classification, evaluate, to_pattern, is_solved, filter_candidates, is_well_formed, is_letter,
)

C, P, A = Classification.CORRECT, Classification.PRESENT, Classification.ABSENT


# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,secret,expected", [
    ("belle", "level", "-GYYY"),
    ("level", "level", "GGGGG"),
    ("lemon", "level", "GG---"),
    ("cools", "scoop", "YYG-Y"),
    ("crane", "crane", "GGGGG"),
    ("raise", "crane", "YY--G"),
    ("stare", "crane", "--GYG"),
    ("eagle", "allee", "YY-YG"),
])
def test_evaluate_golden(guess, secret, expected):
    assert to_pattern(evaluate(guess, secret)) == expected


def test_duplicate_letters_consume_secret_occurrences():
    # 'e' is correct at the end; the leading 'e' takes the only other 'e'
    assert evaluate("eagle", "allee") == [P, P, A, P, C]
    # the secret's only 'l' goes to the exact match, so the first guessed 'l' is absent
    assert evaluate("hello", "world") == [A, A, A, C, P]


def test_evaluate_against_itself_is_all_correct():
    for w in ["crane", "allee", "level", "mamma", "zebra"]:
        result = evaluate(w, w)
        assert result == [C] * 5
        assert is_solved(result)


WORDS = ["allee", "eagle", "level", "belle", "llama", "mamma", "crane", "scoop", "cools", "eerie"]


@pytest.mark.parametrize("guess,secret", list(itertools.product(WORDS, repeat=2)))
def test_marks_never_exceed_letter_multiplicity(guess, secret):
    result = evaluate(guess, secret)
    marked = Counter(g for g, r in zip(guess, result) if r is not A)
    for letter, n in marked.items():
        assert n <= secret.count(letter)
        assert n <= guess.count(letter)


def test_evaluate_is_length_aware():
    assert to_pattern(evaluate("settle", "letter")) == "-GGGYY"
    with pytest.raises(AssertionError):
        evaluate("crane", "cranes")


def test_filter_candidates_history():
    words = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop"]
    history = [("raise", evaluate("raise", "crane"))]
    cand = filter_candidates(words, history)
    assert "crane" in cand and "stare" not in cand and "scoop" not in cand


def test_word_shape_checks():
    assert is_well_formed("CRANE", 5) is True
    assert is_well_formed(" crane ", 5) is True
    assert is_well_formed("cranes", 5) is False
    assert is_well_formed("cr4ne", 5) is False
    assert is_well_formed(None, 5) is False
    assert is_letter("Q") and not is_letter("enter") and not is_letter("1")
