"""Menu definitions and the layout rule that centres a column of menu buttons."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

MANUAL_FILE = "Manual-Chimie-cl-7.pdf"


@dataclass(frozen=True)
class MenuItem:
    """One entry of a menu: its label, button colour and the command it leads to."""

    label: str
    color: str
    command: str | None = None


MAIN_TITLE = "Chimie pentru clasa a 7-a"
MAIN_MENU: tuple[MenuItem, ...] = (
    MenuItem("📘 Teorie", "LightYellow", "jocuri"),
    MenuItem("🧠 Exerciții", "LightYellow", "exercitii"),
    MenuItem("📝 Teste", "LightYellow", "grades"),
    MenuItem("🔬 Tabelul Periodic", "LightYellow", "table"),
    MenuItem("📚 Resurse", "LightYellow", "manual"),
    MenuItem("📊 Dashboard", "LightYellow", "dashboard"),
)

CONCENTRATION_TITLE = "📘 Alege tipul de problemă de chimie:"
CONCENTRATION_MENU: tuple[MenuItem, ...] = (
    MenuItem("💧 Concentrație Procentuală", "LightSkyBlue", "check-percent"),
    MenuItem("⚗️ Concentrație Molară", "LightGreen", "molar"),
    MenuItem("⚖️ Determină masa substanței", "LightCoral", "solute-mass"),
    MenuItem("🧪 Determină masa soluției", "LightGoldenrodYellow", "solution-mass"),
    MenuItem("📦 Determină volumul soluției", "Thistle", None),
)

EXERCISE_TITLE = "📘 Alege un exercițiu sau un joc:"
EXERCISE_MENU: tuple[MenuItem, ...] = (
    MenuItem("🔬 Jocul Moleculelor", "LightGreen", None),
    MenuItem("💧 Exercițiu Concentrație", "LightSkyBlue", "check-percent"),
)

GAMES_TITLE = "Să învățăm prin joacă!"
GAMES_DESCRIPTION = (
    "Explorează chimia prin jocuri interactive! Alege un nivel pentru a începe:"
)
GAMES_MENU: tuple[MenuItem, ...] = (
    MenuItem("Level 1: Ustensile și Recunoaștere", "MistyRose", None),
    MenuItem("Level 2: Memory - Stări de agregare", "MistyRose", None),
    MenuItem("Level 3: Separarea amestecurilor", "MistyRose", "separation"),
)

MENUS: dict[str, tuple[str, tuple[MenuItem, ...]]] = {
    "main": (MAIN_TITLE, MAIN_MENU),
    "concentratie": (CONCENTRATION_TITLE, CONCENTRATION_MENU),
    "exercitii": (EXERCISE_TITLE, EXERCISE_MENU),
    "jocuri": (GAMES_TITLE, GAMES_MENU),
}


def _half(value: int) -> int:
    """Halve an integer, truncating toward zero."""
    quotient = abs(value) // 2
    return quotient if value >= 0 else -quotient


def center_column(
    width: int,
    height: int,
    count: int,
    item_width: int,
    item_height: int,
    spacing: int,
) -> list[tuple[int, int]]:
    """Return top-left positions that centre ``count`` stacked items in the area."""
    if count < 0:
        raise ValueError("Numărul de elemente nu poate fi negativ.")
    if count == 0:
        return []
    step = item_height + spacing
    total = count * step - spacing
    start_y = _half(height - total)
    x = _half(width - item_width)
    return [(x, start_y + i * step) for i in range(count)]


def manual_path(base_dir: str | Path) -> Path:
    """Return the path of the chemistry manual in ``base_dir``; raise if it is missing."""
    path = Path(base_dir) / MANUAL_FILE
    if not path.is_file():
        raise FileNotFoundError(
            f"Fișierul PDF nu a fost găsit în folderul aplicației:\n{path}"
        )
    return path