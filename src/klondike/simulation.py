"""Headless playouts of complete games."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from klondike.engine import KlondikeEngine
from klondike.players import Player, can_draw, make_player
from klondike.scoring import ScoringRules
from klondike.state import GameState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameResult:
    """Result of a simulated game."""

    seed: int
    won: bool
    score: int
    moves: int
    foundation_cards: int
    completion_percentage: int
    steps: int


@dataclass
class SimulationConfig:
    """Configuration for a batch of playouts."""

    num_games: int = 100
    seed: Optional[int] = None
    player: str = "greedy"
    max_steps: int = 1000
    stall_limit: int = 200
    rules: ScoringRules = field(default_factory=ScoringRules)

    def __post_init__(self):
        """Generate seed if not provided."""
        if self.seed is None:
            self.seed = random.randint(0, 2**32 - 1)


@dataclass(frozen=True)
class BatchSummary:
    """Aggregate of a batch of playouts."""

    results: tuple[GameResult, ...]

    @property
    def games(self) -> int:
        return len(self.results)

    @property
    def wins(self) -> int:
        return sum(1 for r in self.results if r.won)

    @property
    def win_rate(self) -> float:
        return self.wins / self.games if self.results else 0.0

    @property
    def average_completion(self) -> float:
        if not self.results:
            return 0.0
        return sum(r.completion_percentage for r in self.results) / self.games

    def to_dict(self) -> dict:
        return {
            "games": self.games,
            "wins": self.wins,
            "win_rate": self.win_rate,
            "average_completion": self.average_completion,
            "results": [
                {
                    "seed": r.seed,
                    "won": r.won,
                    "score": r.score,
                    "moves": r.moves,
                    "foundation_cards": r.foundation_cards,
                    "steps": r.steps,
                }
                for r in self.results
            ],
        }


def _progress(state: GameState) -> tuple[int, int]:
    hidden = sum(1 for column in state.tableau for card in column if not card.face_up)
    return (state.foundation_card_count(), -hidden)


def simulate_game(
    player: Player,
    seed: int,
    max_steps: int = 1000,
    stall_limit: int = 200,
    rules: Optional[ScoringRules] = None,
) -> GameResult:
    """Play one seeded game until it is won, stuck, or out of steps.

    A game counts as stuck when nothing can be done, or when ``stall_limit``
    steps pass without a new foundation card or a revealed tableau card.
    """
    engine = KlondikeEngine(rules=rules, rng=random.Random(seed))
    engine.new_game()

    best = _progress(engine.state)
    stalled = 0
    steps = 0
    while steps < max_steps and not engine.is_game_completed:
        state = engine.state
        legal_moves = engine.legal_moves(include_trivial=False)
        if not legal_moves and not can_draw(state):
            break

        move = player.choose_move(state, legal_moves)
        if move is None:
            engine.deal_from_stock()
        else:
            engine.move_card(move.source, move.destination)
        steps += 1

        progress = _progress(engine.state)
        if progress > best:
            best = progress
            stalled = 0
        else:
            stalled += 1
            if stalled >= stall_limit:
                break

    result = GameResult(
        seed=seed,
        won=engine.is_game_completed,
        score=engine.state.score,
        moves=engine.state.moves,
        foundation_cards=engine.get_foundation_card_count(),
        completion_percentage=engine.get_completion_percentage(),
        steps=steps,
    )
    logger.debug(
        f"Seed {seed}: {'won' if result.won else 'lost'} with "
        f"{result.foundation_cards} foundation cards after {steps} steps"
    )
    return result


def simulate_batch(config: SimulationConfig) -> BatchSummary:
    """Play ``config.num_games`` games with seeds ``config.seed + i``."""
    assert config.seed is not None
    results: List[GameResult] = []
    for i in range(config.num_games):
        seed = config.seed + i
        player = make_player(config.player, seed=seed)
        results.append(simulate_game(
            player,
            seed,
            max_steps=config.max_steps,
            stall_limit=config.stall_limit,
            rules=config.rules,
        ))

    summary = BatchSummary(results=tuple(results))
    logger.info(
        f"Simulated {summary.games} games with {config.player} player: "
        f"{summary.wins} wins ({summary.win_rate:.1%}), "
        f"avg completion {summary.average_completion:.1f}%"
    )
    return summary
