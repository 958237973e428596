"""Periodic table data: element records, category colours and the table layout."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

DEFAULT_COLOR = "LightGray"

ELEMENTS_FILE = "elemente.txt"

_CATEGORIES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Pink", ("Li", "Na", "K", "Rb", "Cs", "Fr")),
    ("Orange", ("Be", "Mg", "Ca", "Sr", "Ba", "Ra")),
    (
        "LightGray",
        (
            "Sc", "Ti", "V", "Cr", "Mn", "Fe", "Co", "Ni", "Cu", "Zn", "Y",
            "Zr", "Nb", "Mo", "Tc", "Ru", "Rh", "Pd", "Ag", "Cd", "Hf", "Ta",
            "W", "Re", "Os", "Ir", "Pt", "Au", "Hg", "Rf", "Db", "Sg", "Bh",
            "Hs", "Mt", "Ds", "Rg", "Cn",
        ),
    ),
    ("LightGreen", ("B", "Si", "Ge", "As", "Sb", "Te", "Po")),
    ("Plum", ("F", "Cl", "Br", "I", "At", "Ts")),
    ("LightBlue", ("He", "Ne", "Ar", "Kr", "Xe", "Rn", "Og")),
    (
        "Khaki",
        ("La", "Ce", "Pr", "Nd", "Pm", "Sm", "Eu", "Gd", "Tb", "Dy", "Ho",
         "Er", "Tm", "Yb", "Lu"),
    ),
    (
        "Gold",
        ("Ac", "Th", "Pa", "U", "Np", "Pu", "Am", "Cm", "Bk", "Cf", "Es",
         "Fm", "Md", "No", "Lr"),
    ),
)

ELEMENT_COLORS: dict[str, str] = {
    symbol: color for color, symbols in _CATEGORIES for symbol in symbols
}

ROWS = 10
COLUMNS = 18

_LAYOUT: tuple[tuple[str, ...], ...] = (
    ("H", "", "", "", "", "", "", "", "", "", "", "", "", "", "", "", "", "He"),
    ("Li", "Be", "", "", "", "", "", "", "", "", "", "", "B", "C", "N", "O", "F", "Ne"),
    ("Na", "Mg", "", "", "", "", "", "", "", "", "", "", "Al", "Si", "P", "S", "Cl", "Ar"),
    ("K", "Ca", "Sc", "Ti", "V", "Cr", "Mn", "Fe", "Co", "Ni", "Cu", "Zn",
     "Ga", "Ge", "As", "Se", "Br", "Kr"),
    ("Rb", "Sr", "Y", "Zr", "Nb", "Mo", "Tc", "Ru", "Rh", "Pd", "Ag", "Cd",
     "In", "Sn", "Sb", "Te", "I", "Xe"),
    ("Cs", "Ba", "La", "Hf", "Ta", "W", "Re", "Os", "Ir", "Pt", "Au", "Hg",
     "Tl", "Pb", "Bi", "Po", "At", "Rn"),
    ("Fr", "Ra", "Ac", "Rf", "Db", "Sg", "Bh", "Hs", "Mt", "Ds", "Rg", "Cn",
     "Nh", "Fl", "Mc", "Lv", "Ts", "Og"),
    ("", "", "Ce", "Pr", "Nd", "Pm", "Sm", "Eu", "Gd", "Tb", "Dy", "Ho",
     "Er", "Tm", "Yb", "Lu", "", ""),
    ("", "", "Th", "Pa", "U", "Np", "Pu", "Am", "Cm", "Bk", "Cf", "Es",
     "Fm", "Md", "No", "Lr", "", ""),
)


class UnknownElementError(LookupError):
    """Raised when no information is known for an element symbol."""


@dataclass(frozen=True)
class ElementInfo:
    """One line of the element data file."""

    symbol: str
    name: str
    atomic_number: str
    atomic_mass: str
    description: str

    def describe(self) -> str:
        """Return the text shown when the element is selected."""
        return (
            f"Nume: {self.name}\nNumăr atomic: {self.atomic_number}"
            f"\nMasa atomică: {self.atomic_mass}\nDescriere: {self.description}"
        )


def parse_elements(lines: Iterable[str]) -> dict[str, ElementInfo]:
    """Parse pipe-separated element lines; lines with fewer than five fields are skipped."""
    elements: dict[str, ElementInfo] = {}
    for line in lines:
        parts = line.rstrip("\r\n").split("|")
        if len(parts) < 5:
            continue
        symbol, name, number, mass, description = (p.strip() for p in parts[:5])
        elements[symbol] = ElementInfo(symbol, name, number, mass, description)
    return elements


def load_elements(path: str | Path) -> dict[str, ElementInfo]:
    """Read the element data file at ``path``."""
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"Fișierul {file_path.name} nu a fost găsit!")
    with file_path.open(encoding="utf-8") as handle:
        return parse_elements(handle)


def element_color(symbol: str) -> str:
    """Return the colour name of the element's category."""
    return ELEMENT_COLORS.get(symbol, DEFAULT_COLOR)


def table_cells() -> list[list[str]]:
    """Return the table grid, ROWS by COLUMNS, with empty strings for blank cells."""
    rows = [list(row) for row in _LAYOUT]
    rows.extend([""] * COLUMNS for _ in range(ROWS - len(rows)))
    return rows


def element_message(data: dict[str, ElementInfo], symbol: str) -> tuple[str, str]:
    """Return the (title, text) shown for a symbol, or raise UnknownElementError."""
    info = data.get(symbol)
    if info is None:
        raise UnknownElementError(f"Nu există informații pentru elementul: {symbol}")
    return f"Informații despre {symbol}", info.describe()