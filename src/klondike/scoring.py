"""Scoring rules and completion bonus."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringRules:
    """Point awards for a game.

    Tier tuples are ``(limit, points)`` pairs checked in order; the first
    tier whose limit is strictly greater than the measured value pays out,
    otherwise the floor applies.
    """

    foundation_bonus: int = 10
    reveal_bonus: int = 5
    time_bonus_tiers: tuple[tuple[int, int], ...] = ((120, 500), (300, 300), (600, 100))
    time_bonus_floor: int = 50
    move_bonus_tiers: tuple[tuple[int, int], ...] = ((150, 200), (200, 100), (300, 50))
    move_bonus_floor: int = 0

    def time_bonus(self, elapsed_seconds: int) -> int:
        return _tiered(elapsed_seconds, self.time_bonus_tiers, self.time_bonus_floor)

    def move_bonus(self, moves: int) -> int:
        return _tiered(moves, self.move_bonus_tiers, self.move_bonus_floor)

    def completion_bonus(self, elapsed_seconds: int, moves: int) -> int:
        """One-time award for filling every foundation."""
        return self.time_bonus(elapsed_seconds) + self.move_bonus(moves)


def _tiered(value: int, tiers: tuple[tuple[int, int], ...], floor: int) -> int:
    for limit, points in tiers:
        if value < limit:
            return points
    return floor


DEFAULT_RULES = ScoringRules()
