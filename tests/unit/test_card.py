"""Tests for card module."""
import pytest
from bitpoker.core.card import (
    RANK_MASK, SUIT_WIDTH, VALID_BITS, Card, Rank, Suit,
    card_bit, decode_bit, rank_bit, shift_rank_mask, suit_offset
)


def test_rank_order_ace_first():
    """Ace is index 0 and Two index 12."""
    assert Rank.ACE == 0
    assert Rank.KING == 1
    assert Rank.TWO == 12
    assert len(Rank) == 13


def test_suit_indices():
    """Suits are numbered clubs, diamonds, hearts, spades."""
    assert [int(s) for s in (Suit.CLUB, Suit.DIAMOND, Suit.HEART, Suit.SPADE)] == [0, 1, 2, 3]


def test_card_bit_layout():
    """Each suit owns a 16-bit block indexed by rank."""
    assert card_bit(Rank.ACE, Suit.CLUB) == 1
    assert card_bit(Rank.TWO, Suit.CLUB) == 1 << 12
    assert card_bit(Rank.ACE, Suit.DIAMOND) == 1 << 16
    assert card_bit(Rank.ACE, Suit.SPADE) == 1 << 48
    assert suit_offset(Suit.HEART) == 2 * SUIT_WIDTH
    assert rank_bit(Rank.QUEEN) == 0b100


def test_valid_bits_exclude_padding():
    """52 card positions, none in the padding bits of a block."""
    assert bin(VALID_BITS).count("1") == 52
    for suit in Suit:
        padding = 0b111 << (suit_offset(suit) + 13)
        assert VALID_BITS & padding == 0


@pytest.mark.parametrize("rank,suit", [(13, 0), (-1, 0), (0, 4), (0, -1)])
def test_card_bit_rejects_out_of_range(rank, suit):
    """Out-of-range indices fail fast."""
    with pytest.raises(ValueError):
        card_bit(rank, suit)


def test_decode_bit_round_trip():
    """Every legal position decodes back to its rank and suit."""
    for suit in Suit:
        for rank in Rank:
            assert decode_bit(card_bit(rank, suit)) == (rank, suit)


@pytest.mark.parametrize("bit", [0, 0b11, 1 << 13, 1 << 15, 1 << 63])
def test_decode_bit_rejects_non_cards(bit):
    """Zero, several bits and padding bits are not cards."""
    with pytest.raises(ValueError):
        decode_bit(bit)


def test_shift_rank_mask():
    """A rank mask lands in the requested suit block."""
    assert shift_rank_mask(RANK_MASK, Suit.HEART) == RANK_MASK << 32
    with pytest.raises(ValueError):
        shift_rank_mask(1 << 13, Suit.CLUB)


def test_card_string_representation():
    """Test string conversion of cards."""
    assert str(Card(Rank.ACE, Suit.SPADE)) == "AS"
    assert str(Card(Rank.TEN, Suit.HEART)) == "TH"
    assert str(Card(Rank.TWO, Suit.CLUB)) == "2C"


def test_card_accepts_plain_ints():
    """Plain indices are converted to enum members."""
    card = Card(0, 3)
    assert card.rank is Rank.ACE
    assert card.suit is Suit.SPADE
    assert card == Card(Rank.ACE, Suit.SPADE)


@pytest.mark.parametrize("card_str,expected_rank,expected_suit", [
    ("AS", Rank.ACE, Suit.SPADE),
    ("2h", Rank.TWO, Suit.HEART),
    ("td", Rank.TEN, Suit.DIAMOND),
    ("Kc", Rank.KING, Suit.CLUB),
])
def test_card_from_string(card_str, expected_rank, expected_suit):
    """Test creating cards from string representation."""
    card = Card.from_string(card_str)
    assert card.rank == expected_rank
    assert card.suit == expected_suit


@pytest.mark.parametrize("card_str", ["", "A", "ASX", "1S", "AX", "*j"])
def test_card_from_string_invalid(card_str):
    """Invalid strings raise ValueError."""
    with pytest.raises(ValueError):
        Card.from_string(card_str)


def test_card_from_bit():
    """Cards can be rebuilt from their bit."""
    card = Card(Rank.SEVEN, Suit.DIAMOND)
    assert Card.from_bit(card.bit) == card


def test_rank_names():
    """Names used by hand descriptions."""
    assert Rank.ACE.full_name == "Ace"
    assert Rank.ACE.plural_name == "Aces"
    assert Rank.SIX.plural_name == "Sixes"
    assert Rank.TWO.plural_name == "Twos"
    assert Rank.from_symbol("q") is Rank.QUEEN
    assert Suit.from_symbol("h") is Suit.HEART
