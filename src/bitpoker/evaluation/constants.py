"""Constants for poker hand evaluation.

Every hand category owns a contiguous range of values. Lower values are
stronger hands: 1 is the royal flush and 7462 the worst high card. 0 means
"category not present" and is never a real value.
"""
from enum import IntEnum
from typing import Dict, Tuple

# Minimum number of cards for a composite evaluation
MIN_HAND_SIZE = 5


class HandCategory(IntEnum):
    """Hand categories, strongest first."""
    STRAIGHT_FLUSH = 1
    FOUR_OF_A_KIND = 2
    FULL_HOUSE = 3
    FLUSH = 4
    STRAIGHT = 5
    THREE_OF_A_KIND = 6
    TWO_PAIR = 7
    ONE_PAIR = 8
    HIGH_CARD = 9

    @property
    def display_name(self) -> str:
        return CATEGORY_NAMES[self]


CATEGORY_NAMES = {
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FLUSH: "Flush",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.HIGH_CARD: "High Card",
}

# Number of distinct values in each category
CATEGORY_WIDTHS = {
    HandCategory.STRAIGHT_FLUSH: 10,       # 10 runs
    HandCategory.FOUR_OF_A_KIND: 156,      # 13 quads x 12 kickers
    HandCategory.FULL_HOUSE: 156,          # 13 trips x 12 pairs
    HandCategory.FLUSH: 1277,              # C(13,5) - 10 runs
    HandCategory.STRAIGHT: 10,             # 10 runs
    HandCategory.THREE_OF_A_KIND: 858,     # 13 trips x C(12,2) kickers
    HandCategory.TWO_PAIR: 858,            # C(13,2) pairs x 11 kickers
    HandCategory.ONE_PAIR: 2860,           # 13 pairs x C(12,3) kickers
    HandCategory.HIGH_CARD: 1277,          # C(13,5) - 10 runs
}


def _build_ranges() -> Dict[HandCategory, Tuple[int, int]]:
    ranges = {}
    base = 1
    for category in HandCategory:
        width = CATEGORY_WIDTHS[category]
        ranges[category] = (base, width)
        base += width
    return ranges


# (base, width) per category; each base follows the previous range
CATEGORY_RANGES = _build_ranges()

BASE_SF = CATEGORY_RANGES[HandCategory.STRAIGHT_FLUSH][0]    # 1
BASE_FK = CATEGORY_RANGES[HandCategory.FOUR_OF_A_KIND][0]    # 11
BASE_FH = CATEGORY_RANGES[HandCategory.FULL_HOUSE][0]        # 167
BASE_F = CATEGORY_RANGES[HandCategory.FLUSH][0]              # 323
BASE_S = CATEGORY_RANGES[HandCategory.STRAIGHT][0]           # 1600
BASE_TK = CATEGORY_RANGES[HandCategory.THREE_OF_A_KIND][0]   # 1610
BASE_TP = CATEGORY_RANGES[HandCategory.TWO_PAIR][0]          # 2468
BASE_OP = CATEGORY_RANGES[HandCategory.ONE_PAIR][0]          # 3326
BASE_HC = CATEGORY_RANGES[HandCategory.HIGH_CARD][0]         # 6186

WORST_VALUE = BASE_HC + CATEGORY_WIDTHS[HandCategory.HIGH_CARD] - 1  # 7462


def category_of(value: int) -> HandCategory:
    """
    Category whose range holds a value.

    Raises:
        ValueError: If value is outside every range
    """
    for category, (base, width) in CATEGORY_RANGES.items():
        if base <= value < base + width:
            return category
    raise ValueError(f"Value {value} is outside every hand category")
