"""Tests for GameState JSON serialization."""

import json
import random

import pytest
from klondike.cards import Card, Rank, Suit
from klondike.engine import KlondikeEngine
from klondike.state import GameState
from klondike.serialization import (
    card_from_dict,
    card_to_dict,
    state_from_dict,
    state_from_json,
    state_to_dict,
    state_to_json,
)


def test_card_dict_uses_enum_names() -> None:
    data = card_to_dict(Card(Rank.QUEEN, Suit.DIAMONDS, face_up=True))

    assert data == {"rank": "QUEEN", "suit": "DIAMONDS", "face_up": True}
    assert card_from_dict(data) == Card(Rank.QUEEN, Suit.DIAMONDS, face_up=True)


def test_dealt_state_survives_json() -> None:
    engine = KlondikeEngine(rng=random.Random(5))
    engine.new_game()
    engine.deal_from_stock()

    restored = state_from_json(state_to_json(engine.state))

    assert restored == engine.state
    assert restored is not engine.state


def test_state_dict_shape() -> None:
    engine = KlondikeEngine(rng=random.Random(5))
    engine.new_game()

    data = json.loads(state_to_json(engine.state))

    assert len(data["stock"]) == 24
    assert len(data["foundations"]) == 4
    assert [len(col) for col in data["tableau"]] == [1, 2, 3, 4, 5, 6, 7]
    assert data["score"] == 0
    assert data["moves"] == 0


def test_unknown_rank_rejected() -> None:
    with pytest.raises(ValueError):
        card_from_dict({"rank": "ELEVEN", "suit": "HEARTS"})


def test_wrong_pile_count_rejected() -> None:
    engine = KlondikeEngine(rng=random.Random(5))
    engine.new_game()
    data = state_to_dict(engine.state)
    data["tableau"] = data["tableau"][:6]

    with pytest.raises(ValueError):
        state_from_dict(data)


def test_missing_pile_rejected() -> None:
    with pytest.raises(ValueError):
        state_from_dict({"stock": [], "waste": []})


def empty_state_dict() -> dict:
    return state_to_dict(GameState())


class TestMalformedInput:
    """Malformed snapshots raise ValueError."""

    def test_non_list_pile(self):
        data = empty_state_dict()
        data["stock"] = None

        with pytest.raises(ValueError):
            state_from_dict(data)

    def test_non_list_tableau_column(self):
        data = empty_state_dict()
        data["tableau"][3] = "KS"

        with pytest.raises(ValueError):
            state_from_dict(data)

    def test_non_dict_state(self):
        with pytest.raises(ValueError):
            state_from_dict(["stock"])  # type: ignore

    def test_non_dict_card(self):
        with pytest.raises(ValueError):
            card_from_dict("AH")  # type: ignore

    def test_non_bool_face_up(self):
        with pytest.raises(ValueError):
            card_from_dict({"rank": "ACE", "suit": "HEARTS", "face_up": "false"})

    def test_non_string_rank(self):
        with pytest.raises(ValueError):
            card_from_dict({"rank": ["ACE"], "suit": "HEARTS"})

    def test_duplicate_card(self):
        data = empty_state_dict()
        ace = card_to_dict(Card(Rank.ACE, Suit.HEARTS))
        data["stock"] = [ace, ace]

        with pytest.raises(ValueError):
            state_from_dict(data)
