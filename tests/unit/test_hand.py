"""Tests for the bit-packed Hand."""
import pytest

from bitpoker.core.card import Card, Rank, Suit
from bitpoker.core.hand import Hand
from bitpoker.core.notation import format_hand, parse_hand


def test_empty_hand():
    """Empty hand has no cards."""
    hand = Hand.empty()
    assert hand.bits == 0
    assert hand.card_count() == 0
    assert len(hand) == 0
    assert not hand
    assert list(hand) == []


def test_from_card():
    """Singleton hand holds exactly one bit."""
    hand = Hand.from_card(Rank.ACE, Suit.SPADE)
    assert hand.bits == 1 << 48
    assert hand.card_count() == 1
    assert Card(Rank.ACE, Suit.SPADE) in hand
    assert Card(Rank.ACE, Suit.HEART) not in hand


def test_from_card_out_of_range():
    """Bad indices are rejected at construction."""
    with pytest.raises(ValueError):
        Hand.from_card(13, Suit.CLUB)
    with pytest.raises(ValueError):
        Hand.from_card(Rank.ACE, 4)


@pytest.mark.parametrize("bits", [-1, 1 << 64, 1 << 13, 1 << 31, 0xE000 << 48])
def test_malformed_bits_rejected(bits):
    """Padding bits and out-of-range values never make a hand."""
    with pytest.raises(ValueError):
        Hand(bits)


def test_union_properties():
    """Union is commutative, associative and idempotent."""
    a = Hand.from_card(Rank.ACE, Suit.CLUB)
    b = Hand.from_card(Rank.KING, Suit.DIAMOND)
    c = Hand.from_card(Rank.TWO, Suit.SPADE)

    assert a | b == b | a
    assert (a | b) | c == a | (b | c)
    assert a | a == a
    assert a.union(b).card_count() == 2


def test_adding_same_card_twice():
    """Set membership is idempotent."""
    card = Card(Rank.QUEEN, Suit.HEART)
    assert Hand.from_cards([card, card]) == Hand.from_cards([card])


def test_subtract():
    """Subtract removes exactly the cards of the other hand."""
    hand = parse_hand("AC/AD/AH/AS/KC")
    quads = parse_hand("AC/AD/AH/AS")
    assert format_hand(hand - quads) == "KC"
    assert hand.subtract(hand) == Hand.empty()


def test_subtract_ignores_missing_cards():
    """Cards not in the hand are silently ignored."""
    hand = parse_hand("AC/KD")
    assert hand - parse_hand("QS") == hand
    assert hand - parse_hand("AC/QS") == parse_hand("KD")


def test_operations_do_not_mutate():
    """Hands are values."""
    hand = parse_hand("AC/KD")
    hand | parse_hand("QS")
    hand - parse_hand("AC")
    assert format_hand(hand) == "AC/KD"


def test_cards_in_suit():
    """Per-suit 13-bit rank masks."""
    hand = parse_hand("AC/KC/2C/AH")
    assert hand.cards_in_suit(Suit.CLUB) == 0b1_0000_0000_0011
    assert hand.cards_in_suit(Suit.HEART) == 0b1
    assert hand.cards_in_suit(Suit.SPADE) == 0


def test_all_ranks_present():
    """Rank masks of all suits are merged."""
    hand = parse_hand("AC/AD/KH/2S")
    assert hand.all_ranks_present() == (1 << Rank.ACE) | (1 << Rank.KING) | (1 << Rank.TWO)


def test_suits_present():
    """4-bit mask of the suits held."""
    assert parse_hand("AC/2S").suits_present() == 0b1001
    assert parse_hand("AD/KD").suits_present() == 0b0010
    assert Hand.empty().suits_present() == 0


def test_rank_counts():
    """Rank-count table counts suits per rank, Ace first."""
    counts = parse_hand("AC/AD/AH/KS/KC/2D").rank_counts()
    assert len(counts) == 13
    assert counts[Rank.ACE] == 3
    assert counts[Rank.KING] == 2
    assert counts[Rank.TWO] == 1
    assert sum(counts) == 6


def test_iteration_order():
    """Cards come out clubs first, Ace to Two within a suit."""
    hand = Hand.from_card(Rank.TWO, Suit.SPADE) | Hand.from_card(Rank.ACE, Suit.HEART)
    assert [str(c) for c in hand] == ["AH", "2S"]
    assert hand.cards() == [Card(Rank.ACE, Suit.HEART), Card(Rank.TWO, Suit.SPADE)]


def test_full_suit():
    """A whole suit iterates in rank order."""
    hand = Hand.from_rank_mask(0x1FFF, Suit.CLUB)
    assert hand.card_count() == 13
    assert format_hand(hand) == "AC/KC/QC/JC/TC/9C/8C/7C/6C/5C/4C/3C/2C"


def test_hand_is_hashable():
    """Equal hands hash equal."""
    assert len({parse_hand("AC/KD"), parse_hand("KD/AC")}) == 1
