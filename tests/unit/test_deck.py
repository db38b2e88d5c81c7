"""Tests for Deck."""

import random

from klondike.deck import Deck


def test_fresh_deck_has_52_unique_face_down_cards() -> None:
    deck = Deck(random.Random(1))

    assert deck.size() == 52
    assert len(deck) == 52
    assert not deck.is_empty()

    cards = [deck.deal() for _ in range(52)]
    assert len({c.key for c in cards}) == 52
    assert all(not c.face_up for c in cards)


def test_deal_until_empty() -> None:
    deck = Deck(random.Random(1))
    for expected_size in range(51, -1, -1):
        assert deck.deal() is not None
        assert deck.size() == expected_size

    assert deck.is_empty()
    assert deck.deal() is None
    assert deck.size() == 0


def test_reset_restores_full_deck() -> None:
    deck = Deck(random.Random(1))
    for _ in range(30):
        deck.deal()

    deck.reset()

    assert deck.size() == 52
    keys = set()
    while not deck.is_empty():
        keys.add(deck.deal().key)
    assert len(keys) == 52


def test_same_seed_same_order() -> None:
    """Test seeded decks deal identically."""
    deck1 = Deck(random.Random(42))
    deck2 = Deck(random.Random(42))

    assert [deck1.deal() for _ in range(52)] == [deck2.deal() for _ in range(52)]


def test_shuffle_changes_order() -> None:
    deck1 = Deck(random.Random(42))
    deck2 = Deck(random.Random(43))

    assert [deck1.deal() for _ in range(52)] != [deck2.deal() for _ in range(52)]
