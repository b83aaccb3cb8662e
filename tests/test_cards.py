"""Tests for Card identifiers and deck ordering."""

import pytest
from mental_poker.cards import DECK_SIZE, RANK_SYMBOLS, Card, Rank, Suit, standard_deck


# ── Card basics ──────────────────────────────────────────────────────

class TestCard:
    def test_creation(self):
        c = Card(Rank.ACE, Suit.SPADES)
        assert c.rank == Rank.ACE
        assert c.suit == Suit.SPADES

    def test_repr(self):
        assert repr(Card(Rank.ACE, Suit.HEARTS)) == "Ah"
        assert repr(Card(Rank.TEN, Suit.CLUBS)) == "Tc"

    def test_equality_and_hash(self):
        a = Card(Rank.QUEEN, Suit.DIAMONDS)
        b = Card(Rank.QUEEN, Suit.DIAMONDS)
        assert a == b
        assert len({a, b}) == 1

    def test_eq_with_non_card(self):
        c = Card(Rank.ACE, Suit.SPADES)
        assert c != "As"
        assert c.__eq__("As") is NotImplemented

    def test_to_dict(self):
        assert Card(Rank.JACK, Suit.HEARTS).to_dict() == {"rank": 11, "suit": "h"}

    def test_from_dict(self):
        assert Card.from_dict({"rank": 14, "suit": "s"}) == Card(Rank.ACE, Suit.SPADES)

    def test_from_str(self):
        assert Card.from_str("Ah") == Card(Rank.ACE, Suit.HEARTS)
        assert Card.from_str("2c") == Card(Rank.TWO, Suit.CLUBS)
        assert Card.from_str("kd") == Card(Rank.KING, Suit.DIAMONDS)


# ── Index mapping ────────────────────────────────────────────────────

class TestCardIndex:
    def test_first_and_last(self):
        assert Card(Rank.TWO, Suit.HEARTS).index == 0
        assert Card(Rank.ACE, Suit.SPADES).index == DECK_SIZE - 1

    def test_suit_major(self):
        assert Card(Rank.TWO, Suit.DIAMONDS).index == 13

    def test_from_index_inverse(self):
        for i in range(DECK_SIZE):
            assert Card.from_index(i).index == i

    def test_from_index_out_of_range(self):
        with pytest.raises(ValueError, match="out of range"):
            Card.from_index(DECK_SIZE)
        with pytest.raises(ValueError, match="out of range"):
            Card.from_index(-1)


class TestStandardDeck:
    def test_size_and_unique(self):
        deck = standard_deck()
        assert len(deck) == DECK_SIZE == 52
        assert len(set(deck)) == 52

    def test_in_index_order(self):
        assert [c.index for c in standard_deck()] == list(range(52))

    def test_rank_symbols_complete(self):
        assert set(RANK_SYMBOLS) == set(Rank)
