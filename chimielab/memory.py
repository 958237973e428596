"""Memory card game: match each object with its state of aggregation."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass

PAIRS: tuple[tuple[str, str], ...] = (
    ("Gheata", "solid"),
    ("Apa", "lichid"),
    ("Heliu", "gazos"),
    ("Sare", "solid"),
    ("Mercur", "lichid"),
    ("Oxigen", "gazos"),
)
"""Object and state pairs; each object matches any card showing its state."""

HIDDEN = "?"
WIN_MESSAGE = "Felicitări! Ai potrivit toate perechile!"
FLIP_BACK_DELAY_MS = 1000
"""Delay before two mismatched cards are turned face down again."""


@dataclass(eq=False)
class Card:
    """One card on the board."""

    text: str
    face_up: bool = False

    @property
    def label(self) -> str:
        return self.text if self.face_up else HIDDEN


class FlipResult(enum.Enum):
    """What happened when a card was turned over."""

    IGNORED = "ignored"
    FIRST = "first"
    MATCH = "match"
    MISMATCH = "mismatch"
    REVEALED = "revealed"


class MemoryGame:
    """State of the matching game."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.pairs: list[tuple[str, str]] = list(PAIRS)
        self.cards: list[Card] = []
        self.first: Card | None = None
        self.second: Card | None = None
        self.restart()

    def restart(self) -> None:
        """Deal a freshly shuffled, face-down set of cards."""
        content = [text for pair in self.pairs for text in pair]
        self._rng.shuffle(content)
        self.cards = [Card(text) for text in content]
        self.first = None
        self.second = None

    @property
    def pending(self) -> bool:
        """Whether two mismatched cards wait to be turned back."""
        return self.second is not None

    def flip(self, index: int) -> FlipResult:
        """Turn over the card at ``index`` and report the outcome."""
        card = self.cards[index]
        if card.face_up:
            return FlipResult.IGNORED
        card.face_up = True
        if self.first is None:
            self.first = card
            return FlipResult.FIRST
        if self.second is None and card is not self.first:
            self.second = card
            if self.is_pair(self.first.text, card.text):
                self.first = None
                self.second = None
                return FlipResult.MATCH
            return FlipResult.MISMATCH
        return FlipResult.REVEALED

    def flip_back(self) -> bool:
        """Turn the pending mismatched cards face down; return whether any were."""
        if self.first is None or self.second is None:
            return False
        self.first.face_up = False
        self.second.face_up = False
        self.first = None
        self.second = None
        return True

    def is_pair(self, a: str, b: str) -> bool:
        """Return whether the two card texts form an object and state pair."""
        return any(
            (text == a and group == b) or (text == b and group == a)
            for text, group in self.pairs
        )

    def won(self) -> bool:
        """Return whether every card is face up."""
        return all(card.face_up for card in self.cards)