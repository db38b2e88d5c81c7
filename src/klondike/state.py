"""Mutable Klondike game state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from klondike.cards import Card

FOUNDATION_COUNT = 4
TABLEAU_COLUMNS = 7
CARDS_PER_FOUNDATION = 13
TOTAL_CARDS = FOUNDATION_COUNT * CARDS_PER_FOUNDATION


def _empty_piles(count: int) -> List[List[Card]]:
    return [[] for _ in range(count)]


@dataclass
class GameState:
    """Snapshot of every pile plus score and move counters.

    Piles are ordered bottom to top, so the playable card of every pile is
    its last element. Only ``KlondikeEngine`` mutates a state; everyone else
    reads it and should re-read after each engine call.
    """

    stock: List[Card] = field(default_factory=list)
    waste: List[Card] = field(default_factory=list)
    foundations: List[List[Card]] = field(default_factory=lambda: _empty_piles(FOUNDATION_COUNT))
    tableau: List[List[Card]] = field(default_factory=lambda: _empty_piles(TABLEAU_COLUMNS))
    score: int = 0
    moves: int = 0

    def is_game_won(self) -> bool:
        return all(len(pile) == CARDS_PER_FOUNDATION for pile in self.foundations)

    def get_top_card(self, pile: Sequence[Card]) -> Optional[Card]:
        return pile[-1] if pile else None

    def get_top_foundation_card(self, foundation_index: int) -> Optional[Card]:
        return self.get_top_card(self.foundations[foundation_index])

    def get_visible_tableau_cards(self, column_index: int) -> List[Card]:
        """Face-up cards of a column, for rendering and hit-testing."""
        return [card for card in self.tableau[column_index] if card.face_up]

    def foundation_card_count(self) -> int:
        return sum(len(pile) for pile in self.foundations)

    def all_cards(self) -> List[Card]:
        """Every card in every pile: stock, waste, foundations, then tableau."""
        cards = list(self.stock) + list(self.waste)
        for pile in self.foundations:
            cards.extend(pile)
        for column in self.tableau:
            cards.extend(column)
        return cards

    def copy(self) -> "GameState":
        """Independent snapshot. Cards are immutable and shared safely."""
        return GameState(
            stock=list(self.stock),
            waste=list(self.waste),
            foundations=[list(pile) for pile in self.foundations],
            tableau=[list(column) for column in self.tableau],
            score=self.score,
            moves=self.moves,
        )
