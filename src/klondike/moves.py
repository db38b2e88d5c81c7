"""Move intents and legal move generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Union

from klondike.cards import Card, Rank
from klondike.state import GameState


@dataclass(frozen=True)
class WasteSource:
    """Top card of the waste."""


@dataclass(frozen=True)
class TableauSource:
    """Card at ``card_index`` of a tableau column, with everything above it."""

    column: int
    card_index: int


@dataclass(frozen=True)
class FoundationSource:
    """Top card of a foundation."""

    index: int


@dataclass(frozen=True)
class FoundationDestination:
    index: int


@dataclass(frozen=True)
class TableauDestination:
    index: int


MoveSource = Union[WasteSource, TableauSource, FoundationSource]
MoveDestination = Union[FoundationDestination, TableauDestination]


@dataclass(frozen=True)
class LegalMove:
    """A move that the engine would accept in the state it was generated for."""

    source: MoveSource
    destination: MoveDestination


def resolve_card(state: GameState, source: MoveSource) -> Optional[Card]:
    """Card a move from ``source`` would pick up, or None if there is none.

    Tableau sources must point at a face-up card; the cards above it travel
    with it.
    """
    if isinstance(source, WasteSource):
        return state.get_top_card(state.waste)
    if isinstance(source, TableauSource):
        if not 0 <= source.column < len(state.tableau):
            return None
        column = state.tableau[source.column]
        if not 0 <= source.card_index < len(column):
            return None
        card = column[source.card_index]
        return card if card.face_up else None
    if isinstance(source, FoundationSource):
        if not 0 <= source.index < len(state.foundations):
            return None
        return state.get_top_foundation_card(source.index)
    raise TypeError(f"Unknown move source: {source!r}")


def check_move(
    state: GameState, source: MoveSource, destination: MoveDestination
) -> Optional[Card]:
    """Return the moving card if the move is legal, otherwise None."""
    card = resolve_card(state, source)
    if card is None:
        return None

    if isinstance(destination, FoundationDestination):
        if not 0 <= destination.index < len(state.foundations):
            return None
        # Only a single card can go up to a foundation
        if isinstance(source, TableauSource):
            if source.card_index != len(state.tableau[source.column]) - 1:
                return None
        if isinstance(source, FoundationSource) and source.index == destination.index:
            return None
        top = state.get_top_foundation_card(destination.index)
        return card if card.can_place_on_foundation(top) else None

    if isinstance(destination, TableauDestination):
        if not 0 <= destination.index < len(state.tableau):
            return None
        if isinstance(source, TableauSource) and source.column == destination.index:
            return None
        target = state.get_top_card(state.tableau[destination.index])
        if target is None:
            return card if card.rank == Rank.KING else None
        return card if card.can_place_on_tableau(target) else None

    raise TypeError(f"Unknown move destination: {destination!r}")


def _destinations(state: GameState) -> List[MoveDestination]:
    destinations: List[MoveDestination] = [
        FoundationDestination(i) for i in range(len(state.foundations))
    ]
    destinations.extend(TableauDestination(i) for i in range(len(state.tableau)))
    return destinations


def is_trivial_move(state: GameState, move: LegalMove) -> bool:
    """True for moving a whole column onto an empty column.

    Such a move is legal but changes nothing about the position.
    """
    source = move.source
    if not isinstance(source, TableauSource) or source.card_index != 0:
        return False
    if not isinstance(move.destination, TableauDestination):
        return False
    return not state.tableau[move.destination.index]


def generate_legal_moves(state: GameState, include_trivial: bool = True) -> List[LegalMove]:
    """All legal moves from the waste top and face-up tableau cards.

    Foundation-to-tableau moves are legal engine calls but are not listed.
    """
    sources: List[MoveSource] = []
    if state.waste:
        sources.append(WasteSource())
    for col_idx, column in enumerate(state.tableau):
        for card_idx, card in enumerate(column):
            if card.face_up:
                sources.append(TableauSource(col_idx, card_idx))

    moves: List[LegalMove] = []
    for source in sources:
        for destination in _destinations(state):
            if check_move(state, source, destination) is None:
                continue
            move = LegalMove(source=source, destination=destination)
            if not include_trivial and is_trivial_move(state, move):
                continue
            moves.append(move)
    return moves
