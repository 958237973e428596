"""Separation of mixtures quiz: pick the right method for a random mixture."""

from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass(frozen=True)
class Mixture:
    """A mixture and the method that separates it."""

    name: str
    method: str


MIXTURES: tuple[Mixture, ...] = (
    Mixture("apă + nisip", "filtrare"),
    Mixture("apă + ulei", "decantare"),
    Mixture("apă + sare", "evaporare"),
    Mixture("alcool + apă", "distilare"),
    Mixture("pilitură fier + nisip", "magnetizare"),
)

METHODS: tuple[str, ...] = (
    "filtrare",
    "decantare",
    "evaporare",
    "distilare",
    "magnetizare",
    "cristalizare",
)

OPTION_COUNT = 4
CORRECT = "Corect! Bravo!"


class SeparationQuiz:
    """Wheel-of-mixtures quiz with four answer options per spin."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.mixtures: list[Mixture] = list(MIXTURES)
        self.current: Mixture | None = None
        self.options: list[str] = []
        self.result_text = ""

    @property
    def mixture_text(self) -> str:
        if self.current is None:
            return ""
        return f"Amestec extras: {self.current.name}"

    def spin(self) -> list[str]:
        """Draw a mixture and return four shuffled options, one of them correct."""
        self.current = self._rng.choice(self.mixtures)
        options = list(METHODS)
        while len(options) > OPTION_COUNT:
            del options[self._rng.randrange(len(options))]
        if self.current.method not in options:
            options[self._rng.randrange(OPTION_COUNT)] = self.current.method
        self._rng.shuffle(options)
        self.options = options
        self.result_text = ""
        return list(options)

    def answer(self, choice: str) -> bool:
        """Check a chosen method against the current mixture."""
        if self.current is None:
            raise RuntimeError("Nu a fost extras niciun amestec.")
        correct = choice == self.current.method
        self.result_text = (
            CORRECT if correct else f"Greșit! Corect era: {self.current.method}"
        )
        return correct