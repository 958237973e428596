import random

import pytest

from chimielab.atom_game import CORRECT, NEUTRONS, WRONG, AtomQuiz


def make_quiz(seed=0):
    return AtomQuiz(random.Random(seed))


def test_initial_atom_is_known():
    quiz = make_quiz()
    assert quiz.current_z in NEUTRONS


def test_new_atom_covers_all_numbers():
    quiz = make_quiz(1)
    seen = {quiz.new_atom() for _ in range(500)}
    assert seen == set(NEUTRONS)


def test_new_atom_returns_current():
    quiz = make_quiz(2)
    z = quiz.new_atom()
    assert z == quiz.current_z
    assert quiz.label == f"🔢 Z = {z}"


def test_sodium_neutrons_from_table():
    quiz = make_quiz(7)
    for _ in range(1000):
        if quiz.new_atom() == 11:
            break
    assert quiz.current_z == 11
    assert quiz.check(11, 11, 12) is True
    assert quiz.check(11, 11, 11) is False
    assert quiz.hint().endswith("➔ neutroni ≈ 12")


def test_check_correct_and_wrong():
    quiz = make_quiz(3)
    z = quiz.current_z
    assert quiz.check(z, z, NEUTRONS[z]) is True
    assert quiz.check(z, z, NEUTRONS[z] + 1) is False
    assert quiz.check(z + 1, z, NEUTRONS[z]) is False
    assert quiz.check(z, z - 1, NEUTRONS[z]) is False


def test_check_text_messages():
    quiz = make_quiz(4)
    z = quiz.current_z
    n = NEUTRONS[z]
    assert quiz.check_text(str(z), f" {z} ", f"+{n}") == CORRECT
    assert quiz.check_text(str(z), str(z), str(n + 3)) == WRONG


@pytest.mark.parametrize("bad", ["", "abc", "1.5", "1_0", "99999999999"])
def test_check_text_rejects_non_integers(bad):
    quiz = make_quiz(5)
    with pytest.raises(ValueError):
        quiz.check_text(bad, "1", "1")


def test_hint_mentions_current_atom():
    quiz = make_quiz(6)
    z = quiz.current_z
    text = quiz.hint()
    assert f"Exemplu pentru Z = {z}:" in text
    assert text.endswith(f"➔ neutroni ≈ {NEUTRONS[z]}")