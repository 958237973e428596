"""Atom structure quiz: give protons, electrons and neutrons for a random Z."""

from __future__ import annotations

import random
import re

NEUTRONS: dict[int, int] = {
    1: 0,
    2: 2,
    6: 6,
    7: 7,
    8: 8,
    11: 12,
    17: 18,
    19: 20,
    20: 20,
}
"""Neutron count accepted as correct for each atomic number in the quiz."""

CORRECT = "✔ Bravo! Ai construit atomul corect!"
WRONG = "✖ Hmm, nu e corect. Încearcă din nou!"
INVALID = "Introduceți valori numerice corecte!"

_INT_PATTERN = re.compile(r"\s*[+-]?\d+\s*")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _parse_int(text: str) -> int:
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError(INVALID)
    value = int(text)
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(INVALID)
    return value


class AtomQuiz:
    """One round-based quiz over the atomic numbers in NEUTRONS."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.current_z = 0
        self.new_atom()

    def new_atom(self) -> int:
        """Pick a new atomic number and return it."""
        self.current_z = self._rng.choice(list(NEUTRONS))
        return self.current_z

    @property
    def neutrons(self) -> int:
        return NEUTRONS[self.current_z]

    @property
    def label(self) -> str:
        return f"🔢 Z = {self.current_z}"

    def check(self, protons: int, electrons: int, neutrons: int) -> bool:
        """Return whether the three counts build the current atom."""
        return (
            protons == self.current_z
            and electrons == self.current_z
            and neutrons == self.neutrons
        )

    def check_text(self, protons: str, electrons: str, neutrons: str) -> str:
        """Check typed answers and return the feedback message."""
        values = [_parse_int(text) for text in (protons, electrons, neutrons)]
        return CORRECT if self.check(*values) else WRONG

    def hint(self) -> str:
        """Return the theory reminder for the current atom."""
        z = self.current_z
        return (
            "🧠 Teorie:\n\n"
            "- Numărul atomic Z = numărul de protoni = electroni (atom neutru)\n"
            "- Neutronii ≈ Z (variază ușor, izotopi)\n\n"
            f"Exemplu pentru Z = {z}:\n"
            f"➔ protoni = {z}\n"
            f"➔ electroni = {z}\n"
            f"➔ neutroni ≈ {self.neutrons}"
        )