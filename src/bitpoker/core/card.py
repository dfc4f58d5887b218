"""Card related classes and bit encoding utilities.

A hand is stored as a 64-bit integer split into four 16-bit suit blocks.
Inside each block the low 13 bits are indexed by rank (Ace = bit 0,
Two = bit 12); bits 13..15 are padding and are never set.
"""
from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

RANK_COUNT = 13
SUIT_COUNT = 4
SUIT_WIDTH = 16

# The 13 rank bits of one suit block
RANK_MASK = (1 << RANK_COUNT) - 1

# Every legal card position in the 64-bit space
VALID_BITS = sum(RANK_MASK << (suit * SUIT_WIDTH) for suit in range(SUIT_COUNT))


class Rank(IntEnum):
    """Card ranks, strongest first (index 0 = Ace)."""
    ACE = 0
    KING = 1
    QUEEN = 2
    JACK = 3
    TEN = 4
    NINE = 5
    EIGHT = 6
    SEVEN = 7
    SIX = 8
    FIVE = 9
    FOUR = 10
    THREE = 11
    TWO = 12

    @property
    def symbol(self) -> str:
        return RANK_SYMBOLS[self]

    @property
    def full_name(self) -> str:
        """Name such as 'Ace' or 'Six'."""
        return self.name.capitalize()

    @property
    def plural_name(self) -> str:
        """Name such as 'Aces' or 'Sixes'."""
        if self == Rank.SIX:
            return "Sixes"
        return f"{self.full_name}s"

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Rank':
        """Rank for a symbol such as 'A' or 't'."""
        index = RANK_SYMBOLS.find(symbol.upper()) if len(symbol) == 1 else -1
        if index < 0:
            raise ValueError(f"Invalid rank symbol: {symbol!r}")
        return cls(index)

    def __str__(self) -> str:
        return self.symbol


class Suit(IntEnum):
    """Card suits. No suit outranks another."""
    CLUB = 0
    DIAMOND = 1
    HEART = 2
    SPADE = 3

    @property
    def symbol(self) -> str:
        return SUIT_SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Suit':
        """Suit for a symbol such as 'C' or 'h'."""
        index = SUIT_SYMBOLS.find(symbol.upper()) if len(symbol) == 1 else -1
        if index < 0:
            raise ValueError(f"Invalid suit symbol: {symbol!r}")
        return cls(index)

    def __str__(self) -> str:
        return self.symbol


RANK_SYMBOLS = "AKQJT98765432"
SUIT_SYMBOLS = "CDHS"


def suit_offset(suit: int) -> int:
    """First bit position of a suit block."""
    return Suit(suit) * SUIT_WIDTH


def rank_bit(rank: int) -> int:
    """13-bit rank mask holding a single rank."""
    return 1 << Rank(rank)


def card_bit(rank: int, suit: int) -> int:
    """Absolute bit for a (rank, suit) pair.

    Raises:
        ValueError: If rank or suit is out of range
    """
    return rank_bit(rank) << suit_offset(suit)


def shift_rank_mask(mask: int, suit: int) -> int:
    """
    Move a 13-bit rank mask into the block of a suit.

    Raises:
        ValueError: If the mask has bits outside the 13 rank bits
    """
    if mask < 0 or mask & ~RANK_MASK:
        raise ValueError(f"Rank mask out of range: {mask:#x}")
    return mask << suit_offset(suit)


def decode_bit(bit: int) -> Tuple[Rank, Suit]:
    """
    Recover the (rank, suit) pair of a single card bit.

    Raises:
        ValueError: If bit is not exactly one legal card position
    """
    if bit <= 0 or bit & (bit - 1) or not bit & VALID_BITS:
        raise ValueError(f"Not a single card bit: {bit:#x}")
    position = bit.bit_length() - 1
    suit, rank = divmod(position, SUIT_WIDTH)
    return Rank(rank), Suit(suit)


@dataclass(frozen=True, order=True)
class Card:
    """
    A playing card.

    Attributes:
        rank: Card rank (A-2)
        suit: Card suit (clubs, diamonds, hearts, spades)
    """
    rank: Rank
    suit: Suit

    def __post_init__(self):
        # Normalise plain ints and reject out-of-range indices early
        object.__setattr__(self, 'rank', Rank(self.rank))
        object.__setattr__(self, 'suit', Suit(self.suit))

    @property
    def bit(self) -> int:
        """Bit position of this card inside a hand."""
        return card_bit(self.rank, self.suit)

    def __str__(self) -> str:
        """String representation in format 'AS' for Ace of spades."""
        return f"{self.rank}{self.suit}"

    @classmethod
    def from_bit(cls, bit: int) -> 'Card':
        """Create a Card from a single hand bit."""
        rank, suit = decode_bit(bit)
        return cls(rank, suit)

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: String in format 'AS' (case-insensitive)

        Returns:
            Card instance

        Raises:
            ValueError: If string format is invalid
        """
        if len(card_str) != 2:
            raise ValueError(f"Invalid card string: {card_str!r}")

        try:
            rank = Rank.from_symbol(card_str[0])
            suit = Suit.from_symbol(card_str[1])
        except ValueError as e:
            raise ValueError(f"Invalid rank or suit in {card_str!r}: {e}")

        return cls(rank, suit)
