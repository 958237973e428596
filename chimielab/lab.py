"""Laboratory level: tool descriptions and sorting tools into categories."""

from __future__ import annotations

from dataclasses import dataclass

INTRO = "Apasă pe o ustensilă pentru explicație."

TOOLS: dict[str, str] = {
    "berzelius": "Paharul Berzelius este folosit pentru amestecarea și încălzirea substanțelor.",
    "palnie": "Pâlnia de filtrare este utilizată pentru separarea amestecurilor.",
    "fund_plat": "Balonul cu fund plat este folosit pentru reacții care necesită încălzire uniformă.",
    "erlenmeyer": "Paharul Erlenmeyer este folosit pentru reacții și încălzire în laborator.",
    "eprubeta": "Eprubeta este un vas de reacție mic pentru experimente simple.",
    "wurtz": "Balonul Wurtz este folosit pentru reacții ce implică distilare.",
}

REACTION = "Vase de reacție"
SEPARATION = "Instrumente de separare"
SUPPORT = "Dispozitive de susținere"

BOARD_PROMPT = "Plasează obiectele în zona potrivită."
OUTSIDE_ZONES = "Obiectul nu este într-o zonă validă."

ZONE_SIZE = 180
ITEM_SIZE = 100


def describe_tool(name: str) -> str:
    """Return the explanation of a laboratory tool."""
    try:
        return TOOLS[name]
    except KeyError:
        raise KeyError(f"Ustensilă necunoscută: {name}") from None


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: int
    y: int
    width: int
    height: int

    def intersects(self, other: Rect) -> bool:
        """Return whether the rectangles overlap; touching edges do not count."""
        return (
            other.x < self.x + self.width
            and self.x < other.x + other.width
            and other.y < self.y + self.height
            and self.y < other.y + other.height
        )


@dataclass(frozen=True)
class Zone:
    """A drop zone for one category."""

    category: str
    bounds: Rect


@dataclass
class LabItem:
    """A draggable tool that belongs to one category."""

    name: str
    category: str
    image: str
    bounds: Rect


class SortingBoard:
    """Drag-and-drop board where tools are placed into category zones."""

    def __init__(self) -> None:
        spacing = 200
        top = 100
        self.zones: list[Zone] = [
            Zone(REACTION, Rect(100, top, ZONE_SIZE, ZONE_SIZE)),
            Zone(SEPARATION, Rect(100 + spacing + ZONE_SIZE, top, ZONE_SIZE, ZONE_SIZE)),
            Zone(SUPPORT, Rect(100 + 2 * (spacing + ZONE_SIZE), top, ZONE_SIZE, ZONE_SIZE)),
        ]
        specs = (
            ("eprubeta", "eprubeta.png", REACTION, "Eprubetă"),
            ("becher", "paharBerzelius.png", REACTION, "Pahar Berzelius"),
            ("erlenmeyer", "paharErlenmeyer.jpeg", REACTION, "Erlenmeyer"),
            ("palnie", "palnieDeFiltrare.jpeg", SEPARATION, "Pâlnie de filtrare"),
        )
        self.items: dict[str, LabItem] = {
            key: LabItem(name, category, image, Rect(150 + k * 150, 400, ITEM_SIZE, ITEM_SIZE))
            for k, (key, image, category, name) in enumerate(specs)
        }
        self.score = 0
        self.feedback = BOARD_PROMPT

    def _item(self, name: str) -> LabItem:
        try:
            return self.items[name]
        except KeyError:
            raise KeyError(f"Obiect necunoscut: {name}") from None

    def move(self, name: str, x: int, y: int) -> None:
        """Place the item's top-left corner at (x, y)."""
        item = self._item(name)
        item.bounds = Rect(x, y, item.bounds.width, item.bounds.height)

    def drop(self, name: str) -> bool:
        """Release the item where it is; return whether it landed in its category."""
        item = self._item(name)
        for zone in self.zones:
            if zone.bounds.intersects(item.bounds):
                if zone.category == item.category:
                    self.feedback = (
                        f'{item.name} a fost plasat corect în categoria "{zone.category}"!'
                    )
                    self.score += 1
                    return True
                self.feedback = (
                    f"{item.name} a fost pus greșit. Categoria corectă era: {item.category}"
                )
                return False
        self.feedback = OUTSIDE_ZONES
        return False