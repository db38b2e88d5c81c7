"""Card model and placement predicates."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class CardColor(Enum):
    """Card colors."""

    RED = "red"
    BLACK = "black"


class Suit(Enum):
    """Playing card suits."""

    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"
    SPADES = "S"

    @property
    def color(self) -> CardColor:
        if self in (Suit.HEARTS, Suit.DIAMONDS):
            return CardColor.RED
        return CardColor.BLACK


class Rank(Enum):
    """Playing card ranks."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    @property
    def number(self) -> int:
        """Ordinal value, ace low (1..13)."""
        return RANK_NUMBERS[self]


RANK_NUMBERS = {rank: i for i, rank in enumerate(Rank, start=1)}


@dataclass(frozen=True)
class Card:
    """Immutable playing card.

    ``face_up`` describes the slot the card currently occupies. Turning a
    card produces a new value; piles replace the old value in place.
    """

    rank: Rank
    suit: Suit
    face_up: bool = False

    @property
    def color(self) -> CardColor:
        return self.suit.color

    @property
    def key(self) -> tuple[Suit, Rank]:
        """Logical identity, independent of facing."""
        return (self.suit, self.rank)

    def turned(self, face_up: bool) -> "Card":
        """Return this card with the given facing."""
        if self.face_up == face_up:
            return self
        return replace(self, face_up=face_up)

    def can_place_on_tableau(self, other: Card) -> bool:
        """True if this card may go directly below ``other`` in a tableau run."""
        return (
            self.rank.number == other.rank.number - 1
            and self.color != other.color
        )

    def can_place_on_foundation(self, top: Card | None) -> bool:
        """True if this card may go on a foundation whose top card is ``top``."""
        if top is None:
            return self.rank == Rank.ACE
        return self.suit == top.suit and self.rank.number == top.rank.number + 1

    def __str__(self) -> str:
        return f"{self.rank.value}{self.suit.value}"


def make_deck_52(face_up: bool = False) -> list[Card]:
    """Build the full 52-card cross product of suits and ranks, suit by suit."""
    return [Card(rank=rank, suit=suit, face_up=face_up) for suit in Suit for rank in Rank]
