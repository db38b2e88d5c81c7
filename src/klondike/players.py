"""Automated players for headless playouts."""

import random
from abc import ABC, abstractmethod
from typing import List, Optional

from klondike.moves import FoundationDestination, LegalMove, TableauSource
from klondike.state import GameState


def can_draw(state: GameState) -> bool:
    """True if dealing from stock would do something (draw or recycle)."""
    return bool(state.stock or state.waste)


class Player(ABC):
    """Base class for automated players."""

    @abstractmethod
    def choose_move(
        self,
        state: GameState,
        legal_moves: List[LegalMove]
    ) -> Optional[LegalMove]:
        """Choose a move from legal moves, or None to deal from stock."""
        pass


class RandomPlayer(Player):
    """Player that chooses uniformly among legal moves and drawing."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)

    def choose_move(
        self,
        state: GameState,
        legal_moves: List[LegalMove]
    ) -> Optional[LegalMove]:
        options: List[Optional[LegalMove]] = list(legal_moves)
        if can_draw(state):
            options.append(None)
        if not options:
            raise ValueError("No legal moves available")
        return self.rng.choice(options)


def _reveals_card(state: GameState, move: LegalMove) -> bool:
    source = move.source
    if not isinstance(source, TableauSource) or source.card_index == 0:
        return False
    return not state.tableau[source.column][source.card_index - 1].face_up


class GreedyPlayer(Player):
    """Foundation plays first, then reveals, then drawing; random among ties."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)

    def choose_move(
        self,
        state: GameState,
        legal_moves: List[LegalMove]
    ) -> Optional[LegalMove]:
        if not legal_moves:
            if can_draw(state):
                return None
            raise ValueError("No legal moves available")

        def score_move(move: LegalMove) -> tuple[int, int]:
            to_foundation = 1 if isinstance(move.destination, FoundationDestination) else 0
            reveals = 1 if _reveals_card(state, move) else 0
            return (to_foundation, reveals)

        best_score = max(score_move(m) for m in legal_moves)
        if best_score == (0, 0) and can_draw(state):
            return None

        ties = [m for m in legal_moves if score_move(m) == best_score]
        return self.rng.choice(ties)


PLAYERS = {
    "random": RandomPlayer,
    "greedy": GreedyPlayer,
}


def make_player(name: str, seed: Optional[int] = None) -> Player:
    try:
        player_cls = PLAYERS[name]
    except KeyError:
        raise ValueError(f"Unknown player '{name}', expected one of {sorted(PLAYERS)}")
    return player_cls(seed)
