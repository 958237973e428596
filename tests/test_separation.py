import random

import pytest

from chimielab.separation import CORRECT, METHODS, MIXTURES, SeparationQuiz


@pytest.mark.parametrize("seed", range(30))
def test_spin_gives_four_distinct_options_with_answer(seed):
    quiz = SeparationQuiz(random.Random(seed))
    options = quiz.spin()
    assert len(options) == 4
    assert len(set(options)) == 4
    assert set(options) <= set(METHODS)
    assert quiz.current in MIXTURES
    assert quiz.current.method in options


def test_correct_answer():
    quiz = SeparationQuiz(random.Random(5))
    quiz.spin()
    assert quiz.answer(quiz.current.method) is True
    assert quiz.result_text == CORRECT


def test_wrong_answer_names_correct_method():
    quiz = SeparationQuiz(random.Random(5))
    options = quiz.spin()
    wrong = next(o for o in options if o != quiz.current.method)
    assert quiz.answer(wrong) is False
    assert quiz.result_text == "Greșit! Corect era: " + quiz.current.method


def test_mixture_text_and_reset_on_spin():
    quiz = SeparationQuiz(random.Random(2))
    quiz.spin()
    quiz.answer("cristalizare")
    quiz.spin()
    assert quiz.result_text == ""
    assert quiz.mixture_text == "Amestec extras: " + quiz.current.name


def test_answer_before_spin_raises():
    quiz = SeparationQuiz(random.Random(0))
    with pytest.raises(RuntimeError):
        quiz.answer("filtrare")