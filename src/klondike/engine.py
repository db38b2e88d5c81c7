"""Klondike rule engine."""

from __future__ import annotations

import logging
import random
import time
from enum import Enum
from typing import Callable, List, Optional

from klondike.cards import Card
from klondike.deck import Deck
from klondike.moves import (
    FoundationDestination,
    FoundationSource,
    LegalMove,
    MoveDestination,
    MoveSource,
    TableauDestination,
    TableauSource,
    WasteSource,
    check_move,
    generate_legal_moves,
)
from klondike.scoring import ScoringRules
from klondike.state import TABLEAU_COLUMNS, TOTAL_CARDS, GameState

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """Lifecycle of a single game."""

    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class KlondikeEngine:
    """Owns the deck and the game state and applies every state change.

    Every mutating operation reports failure by returning False and leaves
    the state untouched when it does. Once all foundations are full the
    game is COMPLETED and further mutations are rejected until ``new_game``.

    Args:
        rules: Point awards. Defaults to the standard ``ScoringRules``.
        rng: Random source for shuffling. Seed it for reproducible deals.
        clock: Returns the current time in seconds; drives the time bonus.
    """

    def __init__(
        self,
        rules: Optional[ScoringRules] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.rules = rules if rules is not None else ScoringRules()
        self.clock = clock
        self.deck = Deck(rng)
        self._state = GameState()
        self._phase = GamePhase.IN_PROGRESS
        self._completion_time: Optional[float] = None
        self._start_time = clock()

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def is_game_completed(self) -> bool:
        return self._phase is GamePhase.COMPLETED

    @property
    def completion_time(self) -> Optional[float]:
        return self._completion_time

    def new_game(self) -> None:
        """Shuffle a fresh deck and deal a new layout."""
        self.deck.reset()
        self._state = GameState()
        self._phase = GamePhase.IN_PROGRESS
        self._completion_time = None
        self._start_time = self.clock()
        self._deal_initial_cards()
        logger.debug(
            f"New game: {len(self._state.stock)} cards in stock, "
            f"{TOTAL_CARDS - len(self._state.stock)} on tableau"
        )

    def _deal_initial_cards(self) -> None:
        # Column c gets c + 1 cards, the last one face up
        for col in range(TABLEAU_COLUMNS):
            for row in range(col + 1):
                card = self.deck.deal()
                if card is None:
                    logger.warning(f"Deck exhausted while dealing column {col}")
                    return
                self._state.tableau[col].append(card.turned(row == col))

        while not self.deck.is_empty():
            card = self.deck.deal()
            assert card is not None
            self._state.stock.append(card.turned(False))

    def deal_from_stock(self) -> bool:
        """Draw the stock top onto the waste, or recycle the waste when stock is empty."""
        if self.is_game_completed:
            return False

        state = self._state
        if state.stock:
            card = state.stock.pop()
            state.waste.append(card.turned(True))
            state.moves += 1
            logger.debug(f"Drew {card} ({len(state.stock)} left in stock)")
            return True

        if state.waste:
            # Popping from the waste top reverses it, so redraws replay the same order
            while state.waste:
                state.stock.append(state.waste.pop().turned(False))
            state.moves += 1
            logger.debug(f"Recycled {len(state.stock)} cards from waste to stock")
            return True

        return False

    def move_card(self, source: MoveSource, destination: MoveDestination) -> bool:
        """Move a card (or a tableau run) if the rules allow it."""
        if self.is_game_completed:
            return False

        card = check_move(self._state, source, destination)
        if card is None:
            logger.debug(f"Rejected move {source} -> {destination}")
            return False

        moving = self._take_from_source(source)
        if isinstance(destination, FoundationDestination):
            self._state.foundations[destination.index].extend(moving)
            self._state.score += self.rules.foundation_bonus
        elif isinstance(destination, TableauDestination):
            self._state.tableau[destination.index].extend(moving)
        else:
            raise TypeError(f"Unknown move destination: {destination!r}")

        self._reveal_tableau_card(source)
        self._state.moves += 1
        logger.debug(f"Moved {', '.join(str(c) for c in moving)}: {source} -> {destination}")

        self.check_game_completion()
        return True

    def _take_from_source(self, source: MoveSource) -> List[Card]:
        """Detach the moving cards from a source already validated by check_move."""
        state = self._state
        if isinstance(source, WasteSource):
            return [state.waste.pop()]
        if isinstance(source, TableauSource):
            column = state.tableau[source.column]
            moving = column[source.card_index:]
            del column[source.card_index:]
            return moving
        if isinstance(source, FoundationSource):
            return [state.foundations[source.index].pop()]
        raise TypeError(f"Unknown move source: {source!r}")

    def _reveal_tableau_card(self, source: MoveSource) -> None:
        if not isinstance(source, TableauSource):
            return
        column = self._state.tableau[source.column]
        if column and not column[-1].face_up:
            column[-1] = column[-1].turned(True)
            self._state.score += self.rules.reveal_bonus

    def check_game_completion(self) -> None:
        """Enter the COMPLETED phase once every foundation is full.

        The completion bonus is applied exactly once per game.
        """
        if self.is_game_completed:
            return
        if not self._state.is_game_won():
            return

        self._completion_time = self.clock()
        self._phase = GamePhase.COMPLETED
        bonus = self.rules.completion_bonus(
            self.get_game_duration_seconds(), self._state.moves
        )
        self._state.score += bonus
        logger.info(
            f"Game completed in {self.get_formatted_game_time()} "
            f"after {self._state.moves} moves, bonus {bonus}, score {self._state.score}"
        )

    def get_game_duration_seconds(self) -> int:
        end_time = self._completion_time if self._completion_time is not None else self.clock()
        return max(0, int(end_time - self._start_time))

    def get_formatted_game_time(self) -> str:
        """Elapsed time as MM:SS."""
        minutes, seconds = divmod(self.get_game_duration_seconds(), 60)
        return f"{minutes:02d}:{seconds:02d}"

    def get_foundation_card_count(self) -> int:
        return self._state.foundation_card_count()

    def get_completion_percentage(self) -> int:
        """Share of the deck on the foundations, 0-100, rounded down."""
        return self.get_foundation_card_count() * 100 // TOTAL_CARDS

    def legal_moves(self, include_trivial: bool = True) -> List[LegalMove]:
        if self.is_game_completed:
            return []
        return generate_legal_moves(self._state, include_trivial=include_trivial)

    def has_available_moves(self) -> bool:
        """True if the waste top or any face-up tableau card can move right now."""
        return bool(generate_legal_moves(self._state))

    def is_potentially_winnable(self) -> bool:
        """Cheap optimistic hint, not a solver.

        Hidden tableau cards count as hope; otherwise any available move
        does. May say True for a lost position, never False while a move
        exists.
        """
        if self.is_game_completed:
            return True
        has_hidden_cards = any(
            not card.face_up for column in self._state.tableau for card in column
        )
        return has_hidden_cards or self.has_available_moves()
