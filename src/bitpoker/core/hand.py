"""Bit-packed hand implementation."""

from dataclasses import dataclass
from typing import Iterable, Iterator, List

from .card import (
    RANK_COUNT,
    RANK_MASK,
    VALID_BITS,
    Card,
    Suit,
    card_bit,
    shift_rank_mask,
    suit_offset,
)

# First bit of every suit block; shifted left once per rank to count a rank
# across all four suits
_RANK_COLUMN = sum(1 << suit_offset(suit) for suit in Suit)

_MAX_BITS = (1 << 64) - 1


@dataclass(frozen=True)
class Hand:
    """
    A set of cards stored as a single 64-bit bit-set.

    Hands are values: operations return new hands and never modify the
    receiver. Bits outside the 13 rank bits of each suit block are rejected
    on construction.

    Attributes:
        bits: The raw bit-set
    """

    bits: int = 0

    def __post_init__(self):
        if not 0 <= self.bits <= _MAX_BITS:
            raise ValueError(f"Hand bits out of 64-bit range: {self.bits:#x}")
        if self.bits & ~VALID_BITS:
            raise ValueError(f"Hand has padding bits set: {self.bits:#x}")

    @classmethod
    def empty(cls) -> "Hand":
        """A hand with no cards."""
        return cls(0)

    @classmethod
    def from_card(cls, rank: int, suit: int) -> "Hand":
        """A hand holding a single card."""
        return cls(card_bit(rank, suit))

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> "Hand":
        """A hand holding every card given; duplicates collapse."""
        bits = 0
        for card in cards:
            bits |= card.bit
        return cls(bits)

    @classmethod
    def from_rank_mask(cls, mask: int, suit: int) -> "Hand":
        """A hand holding the ranks of a 13-bit mask, all in one suit."""
        return cls(shift_rank_mask(mask, suit))

    def union(self, other: "Hand") -> "Hand":
        """Cards held by either hand."""
        return Hand(self.bits | other.bits)

    def subtract(self, other: "Hand") -> "Hand":
        """Cards of this hand that are not in other."""
        return Hand(self.bits & ~other.bits)

    __or__ = union
    __sub__ = subtract

    def cards_in_suit(self, suit: int) -> int:
        """13-bit rank mask of the cards held in a suit."""
        return (self.bits >> suit_offset(suit)) & RANK_MASK

    def all_ranks_present(self) -> int:
        """13-bit mask of every rank held, in any suit."""
        mask = 0
        for suit in Suit:
            mask |= self.cards_in_suit(suit)
        return mask

    def card_count(self) -> int:
        """Number of cards in the hand."""
        return bin(self.bits).count("1")

    def suits_present(self) -> int:
        """4-bit mask of suits holding at least one card."""
        mask = 0
        for suit in Suit:
            if self.cards_in_suit(suit):
                mask |= 1 << suit
        return mask

    def rank_counts(self) -> List[int]:
        """Number of suits holding each rank, Ace first."""
        counts = []
        column = _RANK_COLUMN
        for _ in range(RANK_COUNT):
            counts.append(bin(self.bits & column).count("1"))
            column <<= 1
        return counts

    def cards(self) -> List[Card]:
        """Cards of the hand in bit order."""
        return list(self)

    def __iter__(self) -> Iterator[Card]:
        bits = self.bits
        while bits:
            low = bits & -bits
            yield Card.from_bit(low)
            bits ^= low

    def __contains__(self, card: object) -> bool:
        if not isinstance(card, Card):
            return False
        return bool(self.bits & card.bit)

    def __len__(self) -> int:
        return self.card_count()

    def __bool__(self) -> bool:
        return self.bits != 0

    def __repr__(self) -> str:
        return f"Hand({'/'.join(str(c) for c in self) or 'empty'})"


