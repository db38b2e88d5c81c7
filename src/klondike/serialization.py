"""JSON serialization for GameState snapshots."""

import json
from typing import Any, Dict, List

from klondike.cards import Card, Rank, Suit
from klondike.state import FOUNDATION_COUNT, TABLEAU_COLUMNS, GameState


def card_to_dict(card: Card) -> Dict[str, Any]:
    """Convert Card to dict, enums by name (e.g. "KING", "SPADES")."""
    return {
        "rank": card.rank.name,
        "suit": card.suit.name,
        "face_up": card.face_up,
    }


def card_from_dict(data: Dict[str, Any]) -> Card:
    if not isinstance(data, dict):
        raise ValueError(f"Invalid card data {data!r}: expected a dict")
    face_up = data.get("face_up", False)
    if not isinstance(face_up, bool):
        raise ValueError(f"Invalid card data {data!r}: face_up must be a bool")
    try:
        return Card(
            rank=Rank[data["rank"]],
            suit=Suit[data["suit"]],
            face_up=face_up,
        )
    except (KeyError, TypeError) as e:
        raise ValueError(f"Invalid card data {data!r}: missing or unknown {e}") from e


def _pile_to_list(pile: List[Card]) -> List[Dict[str, Any]]:
    return [card_to_dict(card) for card in pile]


def _pile_from_list(data: Any, name: str) -> List[Card]:
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of cards for {name}")
    return [card_from_dict(c) for c in data]


def _piles_from_list(data: Any, expected: int, name: str) -> List[List[Card]]:
    if not isinstance(data, list) or len(data) != expected:
        raise ValueError(f"Expected {expected} {name} piles")
    return [_pile_from_list(pile, name) for pile in data]


def state_to_dict(state: GameState) -> Dict[str, Any]:
    """Convert GameState to JSON-serializable dict."""
    return {
        "stock": _pile_to_list(state.stock),
        "waste": _pile_to_list(state.waste),
        "foundations": [_pile_to_list(pile) for pile in state.foundations],
        "tableau": [_pile_to_list(column) for column in state.tableau],
        "score": state.score,
        "moves": state.moves,
    }


def state_from_dict(data: Dict[str, Any]) -> GameState:
    """Create GameState from dict.

    Raises:
        ValueError: If a pile is missing or has the wrong shape, a card is
            unknown, or the same card appears twice.
    """
    if not isinstance(data, dict):
        raise ValueError("Invalid state data: expected a dict")
    try:
        state = GameState(
            stock=_pile_from_list(data["stock"], "stock"),
            waste=_pile_from_list(data["waste"], "waste"),
            foundations=_piles_from_list(data["foundations"], FOUNDATION_COUNT, "foundation"),
            tableau=_piles_from_list(data["tableau"], TABLEAU_COLUMNS, "tableau"),
            score=int(data.get("score", 0)),
            moves=int(data.get("moves", 0)),
        )
    except (KeyError, TypeError) as e:
        raise ValueError(f"Invalid state data: missing or malformed {e}") from e

    seen = set()
    for card in state.all_cards():
        if card.key in seen:
            raise ValueError(f"Invalid state data: duplicate card {card}")
        seen.add(card.key)
    return state


def state_to_json(state: GameState, indent: int = 2) -> str:
    return json.dumps(state_to_dict(state), indent=indent)


def state_from_json(json_str: str) -> GameState:
    return state_from_dict(json.loads(json_str))
