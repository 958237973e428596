"""Molecule builder: place atoms, link close neighbours and match a target formula."""

from __future__ import annotations

import math
import random
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

PALETTE = ("H", "O", "C", "N")
TARGETS = ("H2O", "O2", "H2", "CO2", "N2")

MOLECULE_NAMES = {
    "H2O": "Apă",
    "O2": "Oxigen molecular",
    "H2": "Hidrogen molecular",
    "CO2": "Dioxid de carbon",
    "N2": "Azot molecular",
}
UNKNOWN_MOLECULE = "Moleculă necunoscută"

BOND_DISTANCE = 60
"""Atoms dropped closer than this to another atom are bonded to it."""


@dataclass(eq=False)
class Atom:
    """An atom placed on the workspace, positioned by its top-left corner."""

    symbol: str
    x: int
    y: int

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)


def distance(a: tuple[int, int], b: tuple[int, int]) -> int:
    """Return the Euclidean distance between two points, truncated to an int."""
    return int(math.sqrt((a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2))


def formula_of(symbols: Iterable[str]) -> str:
    """Return the formula: symbols sorted, each followed by its count when above one."""
    counts = Counter(symbols)
    return "".join(
        symbol + (str(counts[symbol]) if counts[symbol] > 1 else "")
        for symbol in sorted(counts)
    )


def molecule_name(formula: str) -> str:
    """Return the Romanian name of a known formula."""
    return MOLECULE_NAMES.get(formula, UNKNOWN_MOLECULE)


class MoleculeBuilder:
    """Workspace state of the molecule building game."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.atoms: list[Atom] = []
        self.bonds: list[tuple[Atom, Atom]] = []
        self.score = 0
        self.result_text = ""
        self.target = ""
        self.new_target()

    @property
    def target_text(self) -> str:
        return f"Construiește: {self.target}"

    def new_target(self) -> str:
        """Choose and return a new target formula."""
        self.target = self._rng.choice(TARGETS)
        return self.target

    def drop(self, symbol: str, x: int, y: int) -> Atom:
        """Place an atom, bond it to close atoms and re-evaluate the molecule."""
        atom = Atom(symbol, x, y)
        self.atoms.append(atom)
        self.bonds.extend(
            (other, atom)
            for other in self.atoms
            if other is not atom and distance(other.position, atom.position) < BOND_DISTANCE
        )
        self.update()
        return atom

    def remove(self, atom: Atom) -> None:
        """Remove an atom and its bonds from the workspace."""
        self.atoms.remove(atom)
        self.bonds = [bond for bond in self.bonds if atom not in bond]
        self.update()

    def move(self, atom: Atom, dx: int, dy: int) -> None:
        """Shift an atom by (dx, dy) and re-evaluate the molecule."""
        atom.x += dx
        atom.y += dy
        self.update()

    def formula(self) -> str:
        """Return the formula of all atoms on the workspace."""
        return formula_of(atom.symbol for atom in self.atoms)

    def update(self) -> bool:
        """Refresh the result text; score and pick a new target if it was built."""
        formula = self.formula()
        self.result_text = f"Molecula formată: {molecule_name(formula)} ({formula})"
        if formula != self.target:
            return False
        self.score += 1
        self.new_target()
        return True