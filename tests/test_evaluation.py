from collections import Counter
from itertools import product

import pytest

from daily_wordle.models.game import Hint
from daily_wordle.services.game_service import evaluate_guess, merge_hint

C, P, A = Hint.CORRECT, Hint.PRESENT, Hint.ABSENT


@pytest.mark.parametrize("answer, guess, expected", [
    ("speed", "erase", [P, A, A, P, P]),
    ("abcde", "eeeee", [A, A, A, A, C]),
    ("crane", "crane", [C, C, C, C, C]),
    ("crane", "eerie", [A, A, P, A, C]),
    ("abbey", "babes", [P, P, C, C, A]),
    ("lilac", "llama", [C, P, P, A, A]),
    ("robot", "stony", [A, P, P, A, A]),
])
def test_two_pass_regressions(answer, guess, expected):
    assert evaluate_guess(guess, answer).hints == expected


def test_exact_match_is_all_correct_and_a_win():
    evaluated = evaluate_guess("speed", "speed")
    assert evaluated.is_win
    assert evaluated.word == "speed"
    assert list(evaluated) == [(c, Hint.CORRECT) for c in "speed"]


def test_evaluated_guess_pairs_letters_with_hints():
    evaluated = evaluate_guess("erase", "speed")
    assert len(evaluated) == 5
    assert [letter for letter, _ in evaluated] == list("erase")
    assert not evaluated.is_win


WORDS = ["speed", "erase", "eerie", "abbey", "babes", "lilac", "llama",
         "robot", "geese", "eeeee", "abcde", "mamma", "sassy", "attic"]


@pytest.mark.parametrize("answer, guess", list(product(WORDS, WORDS)))
def test_letter_credits_never_exceed_answer_count(answer, guess):
    evaluated = evaluate_guess(guess, answer)
    credits = Counter(letter for letter, hint in evaluated if hint != Hint.ABSENT)
    answer_counts = Counter(answer)
    for letter, count in credits.items():
        assert count <= answer_counts[letter]


def test_correct_positions_always_match_answer():
    for answer, guess in product(WORDS, WORDS):
        for i, (letter, hint) in enumerate(evaluate_guess(guess, answer)):
            assert (hint == Hint.CORRECT) == (letter == answer[i])


@pytest.mark.parametrize("current, observed, expected", [
    (None, A, A),
    (None, P, P),
    (None, C, C),
    (A, P, P),
    (A, C, C),
    (P, C, C),
    (P, A, P),
    (C, P, C),
    (C, A, C),
    (P, P, P),
])
def test_merge_hint_only_upgrades(current, observed, expected):
    assert merge_hint(current, observed) == expected
