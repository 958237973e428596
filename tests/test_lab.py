import pytest

from chimielab.lab import (
    BOARD_PROMPT,
    OUTSIDE_ZONES,
    TOOLS,
    Rect,
    SortingBoard,
    describe_tool,
)


def test_describe_tool_known():
    assert describe_tool("eprubeta") == (
        "Eprubeta este un vas de reacție mic pentru experimente simple."
    )
    assert all(describe_tool(name) == text for name, text in TOOLS.items())


def test_describe_tool_unknown():
    with pytest.raises(KeyError):
        describe_tool("microscop")


def test_rect_intersection():
    a = Rect(0, 0, 10, 10)
    assert a.intersects(Rect(5, 5, 10, 10))
    assert Rect(5, 5, 10, 10).intersects(a)
    assert not a.intersects(Rect(10, 0, 10, 10))
    assert not a.intersects(Rect(0, 20, 10, 10))


def test_initial_drop_outside_zones():
    board = SortingBoard()
    assert board.feedback == BOARD_PROMPT
    assert board.drop("eprubeta") is False
    assert board.feedback == OUTSIDE_ZONES
    assert board.score == 0


def test_correct_drop_scores():
    board = SortingBoard()
    board.move("eprubeta", 100, 100)
    assert board.drop("eprubeta") is True
    assert board.feedback == 'Eprubetă a fost plasat corect în categoria "Vase de reacție"!'
    assert board.score == 1


def test_wrong_drop_names_correct_category():
    board = SortingBoard()
    board.move("palnie", 100, 100)
    assert board.drop("palnie") is False
    assert board.feedback == (
        "Pâlnie de filtrare a fost pus greșit. Categoria corectă era: Instrumente de separare"
    )
    assert board.score == 0


def test_separation_zone_accepts_funnel():
    board = SortingBoard()
    zone = board.zones[1]
    board.move("palnie", zone.bounds.x, zone.bounds.y)
    assert board.drop("palnie") is True
    assert board.score == 1


def test_unknown_item_raises():
    board = SortingBoard()
    with pytest.raises(KeyError):
        board.move("termometru", 0, 0)
    with pytest.raises(KeyError):
        board.drop("termometru")