"""Guided concentration problems: calculations and step-by-step explanations."""

from __future__ import annotations

import math

NACL_MOLAR_MASS = 58.5
"""Molar mass of NaCl in g/mol, used by the solute-mass problem."""

PERCENT_EXERCISE = "Un elev dizolvă 60g NaCl într-o soluție de 150g. Calculați c%"

PERCENT_SOLUTION = (
    "PASUL 1: Folosim formula: c% = (m_subst / m_sol) * 100\n"
    "PASUL 2: Înlocuim valorile: c% = (60 / 150) * 100\n"
    "PASUL 3: c% = 0.4 * 100 = 40%\n"
    "Rezultat: Concentrația este 40%"
)

PERCENT_CORRECT = "✔ Corect! Ai aplicat formula bine și ai obținut rezultatul corect."
PERCENT_WRONG = "✖ Verifică formula, împărțirea sau înmulțirea. Încearcă din nou."

INVALID_INPUT = "Introduceți valori numerice valide."


def _f2(value: float) -> str:
    return f"{value:.2f}"


def parse_number(text: str) -> float:
    """Parse a user-entered number, raising ValueError when it is not a finite number."""
    stripped = text.strip()
    if not stripped:
        raise ValueError(INVALID_INPUT)
    try:
        value = float(stripped)
    except ValueError:
        raise ValueError(INVALID_INPUT) from None
    if not math.isfinite(value):
        raise ValueError(INVALID_INPUT)
    return value


def molar_concentration(moles: float, volume: float) -> float:
    """Return the molar concentration Cm = n / V in mol/L."""
    if not volume > 0:
        raise ValueError(INVALID_INPUT)
    return moles / volume


def explain_molar_concentration(moles: float, volume: float) -> str:
    """Return the step-by-step solution for the molar concentration problem."""
    cm = molar_concentration(moles, volume)
    return "".join(
        [
            "PASUL 1: Ce cunoaștem:\n",
            f" - Numărul de moli (n) = {_f2(moles)} moli\n",
            f" - Volumul soluției (V) = {_f2(volume)} litri\n\n",
            "PASUL 2: Formula concentrației molare este:\n",
            "         Cm = n / V\n",
            "         (unde Cm este concentrația molară, n numărul de moli și V volumul în litri)\n\n",
            "PASUL 3: Aplicăm formula cu valorile date:\n",
            f"         Cm = {_f2(moles)} / {_f2(volume)}\n",
            "\nPASUL 4: Rezultatul final:\n",
            f"         Cm = {_f2(cm)} mol/L\n",
        ]
    )


def solution_mass(solute_mass: float, concentration: float) -> float:
    """Return the solution mass m_sol = m_subst * 100 / c% in grams."""
    if not concentration > 0:
        raise ValueError(INVALID_INPUT)
    return solute_mass * 100 / concentration


def explain_solution_mass(solute_mass: float, concentration: float) -> str:
    """Return the detailed step-by-step solution for the solution-mass problem."""
    if not concentration > 0:
        raise ValueError(INVALID_INPUT)
    fraction = solute_mass / concentration
    mass = fraction * 100
    return "".join(
        [
            "PASUL 1: Scriem formula concentrației procentuale:\n",
            "       c% = (masa substanței / masa soluției) * 100\n\n",
            "PASUL 2: Reformulăm pentru a afla masa soluției:\n",
            "       masa soluției = masa substanței * 100 / c%\n\n",
            "Calcul pas cu pas:\n",
            f"       1. masa substanței = {_f2(solute_mass)} g\n",
            f"       2. c% = {_f2(concentration)} %\n",
            f"       3. fractie = {_f2(solute_mass)} / {_f2(concentration)} = {fraction:.4f}\n",
            f"       4. masa soluției = fractie * 100 = {_f2(mass)} g\n\n",
            "Rezultat final:\n",
            f"       masa soluției = {_f2(mass)} g\n",
        ]
    )


def explain_solution_mass_brief(solute_mass: float, concentration: float) -> str:
    """Return the short solution for the solution-mass problem."""
    mass = solution_mass(solute_mass, concentration)
    return "".join(
        [
            "Formulă: c% = (m_subst / m_sol) * 100\n",
            "Reformulare: m_sol = m_subst * 100 / c%\n\n",
            f"m_sol = {_f2(solute_mass)} * 100 / {_f2(concentration)}\n",
            f"m_sol = {_f2(mass)} g\n",
        ]
    )


def solute_mass(molarity: float, volume: float, molar_mass: float = NACL_MOLAR_MASS) -> float:
    """Return the dissolved mass m = Cm * V * M in grams."""
    return molarity * volume * molar_mass


def explain_solute_mass(molarity: float, volume: float) -> str:
    """Return the step-by-step solution for the NaCl solute-mass problem."""
    moles = molarity * volume
    mass = moles * NACL_MOLAR_MASS
    m_f2 = _f2(NACL_MOLAR_MASS)
    return "".join(
        [
            "PASUL 1: Calculăm numărul de moli (n) folosind concentrația molară și volumul.\n",
            "Formula: n = Cm × V\n",
            "Unde:\n",
            f"  Cm = {_f2(molarity)} mol/L (concentrația molară)\n",
            f"  V = {_f2(volume)} L (volumul soluției)\n",
            f"=> n = {_f2(molarity)} × {_f2(volume)} = {_f2(moles)} mol\n\n",
            "PASUL 2: Calculăm masa substanței dizolvate folosind numărul de moli și masa molară.\n",
            "Formula: m = n × M\n",
            "Unde:\n",
            f"  M = {m_f2} g/mol (masa molară a NaCl)\n",
            f"  n = {_f2(moles)} mol (calculat anterior)\n",
            f"=> m = {_f2(moles)} × {m_f2} = {_f2(mass)} g\n\n",
            f"Rezultatul final: Ai nevoie de {_f2(mass)} grame de NaCl "
            "pentru a obține această soluție.\n",
        ]
    )


def check_percent_answer(text: str) -> bool:
    """Check a written solution to the guided 60 g in 150 g percent exercise."""
    answer = text.replace(" ", "").lower()
    return "60/150" in answer and "*100" in answer and "40" in answer