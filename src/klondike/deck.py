"""The undealt card pile."""

from __future__ import annotations

import random
from typing import Optional

from klondike.cards import Card, make_deck_52


class Deck:
    """Ordered collection of the cards not yet dealt.

    A fresh deck holds all 52 cards face down in shuffled order. Cards leave
    from the front and never come back until the next ``reset``.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self._cards: list[Card] = []
        self.reset()

    def reset(self) -> None:
        """Rebuild all 52 cards face down and shuffle them."""
        self._cards.clear()
        self._cards.extend(make_deck_52())
        self.shuffle()

    def shuffle(self) -> None:
        self.rng.shuffle(self._cards)

    def deal(self) -> Optional[Card]:
        """Remove and return the front card, or None when the deck is empty."""
        if not self._cards:
            return None
        return self._cards.pop(0)

    def is_empty(self) -> bool:
        return not self._cards

    def size(self) -> int:
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)
