import random

import pytest

from chimielab.molecule import (
    TARGETS,
    UNKNOWN_MOLECULE,
    MoleculeBuilder,
    distance,
    formula_of,
    molecule_name,
)


def make_builder(seed=0):
    return MoleculeBuilder(random.Random(seed))


def test_initial_target_is_known():
    builder = make_builder()
    assert builder.target in TARGETS
    assert builder.target_text == f"Construiește: {builder.target}"
    assert builder.score == 0


@pytest.mark.parametrize(
    "symbols, formula",
    [(["H", "O", "H"], "H2O"), (["O", "C", "O"], "CO2"), (["N", "N"], "N2"), (["O"], "O"), ([], "")],
)
def test_formula_of(symbols, formula):
    assert formula_of(symbols) == formula


@pytest.mark.parametrize(
    "formula, name",
    [("H2O", "Apă"), ("CO2", "Dioxid de carbon"), ("N2", "Azot molecular"), ("CH4", UNKNOWN_MOLECULE)],
)
def test_molecule_name(formula, name):
    assert molecule_name(formula) == name


def test_distance_symmetric_and_truncated():
    assert distance((0, 0), (3, 4)) == 5
    assert distance((1, 1), (2, 2)) == distance((2, 2), (1, 1))
    assert distance((7, 7), (7, 7)) == 0


def test_close_atoms_are_bonded_far_ones_not():
    builder = make_builder()
    builder.target = "N2"
    a = builder.drop("H", 0, 0)
    b = builder.drop("O", 30, 0)
    builder.drop("C", 500, 500)
    assert builder.bonds == [(a, b)]


def test_building_target_scores_and_changes_target():
    builder = make_builder(7)
    builder.target = "H2O"
    builder.drop("H", 0, 0)
    builder.drop("H", 100, 0)
    assert builder.score == 0
    assert builder.drop("O", 50, 0) is not None
    assert builder.score == 1
    assert builder.result_text == "Molecula formată: Apă (H2O)"
    assert builder.target in TARGETS


def test_update_reports_match():
    builder = make_builder(8)
    builder.target = "CO2"
    builder.drop("N", 0, 0)
    assert builder.update() is False
    builder.target = "N"
    assert builder.update() is True
    assert builder.score == 1


def test_remove_drops_atom_and_bonds():
    builder = make_builder()
    builder.target = "N2"
    a = builder.drop("O", 0, 0)
    b = builder.drop("O", 10, 0)
    builder.remove(a)
    assert builder.atoms == [b]
    assert builder.bonds == []
    assert builder.formula() == "O"


def test_remove_unknown_atom_raises():
    builder = make_builder()
    other = make_builder().drop("H", 0, 0)
    with pytest.raises(ValueError):
        builder.remove(other)


def test_move_shifts_position():
    builder = make_builder()
    builder.target = "N2"
    atom = builder.drop("C", 10, 20)
    builder.move(atom, 5, -5)
    assert atom.position == (15, 15)
    assert builder.result_text == "Molecula formată: Moleculă necunoscută (C)"