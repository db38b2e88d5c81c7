"""Klondike solitaire rule engine."""

from klondike.cards import Card, CardColor, Rank, Suit
from klondike.deck import Deck
from klondike.state import GameState
from klondike.moves import (
    WasteSource,
    TableauSource,
    FoundationSource,
    FoundationDestination,
    TableauDestination,
    MoveSource,
    MoveDestination,
    LegalMove,
    generate_legal_moves,
)
from klondike.scoring import ScoringRules
from klondike.engine import GamePhase, KlondikeEngine

__version__ = "0.1.0"

__all__ = [
    "Card",
    "CardColor",
    "Rank",
    "Suit",
    "Deck",
    "GameState",
    "WasteSource",
    "TableauSource",
    "FoundationSource",
    "FoundationDestination",
    "TableauDestination",
    "MoveSource",
    "MoveDestination",
    "LegalMove",
    "generate_legal_moves",
    "ScoringRules",
    "GamePhase",
    "KlondikeEngine",
]
