"""Human-readable descriptions of hand values."""
from typing import Callable, Dict, Optional

from bitpoker.core.card import RANK_COUNT, Rank
from bitpoker.core.hand import Hand
from bitpoker.evaluation.categories import (
    OP_KICKER_SETS,
    TK_KICKER_SETS,
    combination_at,
    expand,
    non_run_at,
)
from bitpoker.evaluation.constants import (
    CATEGORY_RANGES,
    BASE_SF,
    HandCategory,
    category_of,
)
from bitpoker.evaluation.evaluator import HandEvaluator, evaluator as default_evaluator
from bitpoker.evaluation.runs import run_high_rank


class HandDescriber:
    """Generates human-readable descriptions for hand values."""

    def __init__(self, hand_evaluator: Optional[HandEvaluator] = None):
        """Initialize with the evaluator used for describe_hand."""
        self.evaluator = hand_evaluator or default_evaluator
        self._detailed: Dict[HandCategory, Callable[[int], str]] = {
            HandCategory.STRAIGHT_FLUSH: self._describe_straight_flush,
            HandCategory.FOUR_OF_A_KIND: self._describe_four_of_kind,
            HandCategory.FULL_HOUSE: self._describe_full_house,
            HandCategory.FLUSH: self._describe_flush,
            HandCategory.STRAIGHT: self._describe_straight,
            HandCategory.THREE_OF_A_KIND: self._describe_three_of_kind,
            HandCategory.TWO_PAIR: self._describe_two_pair,
            HandCategory.ONE_PAIR: self._describe_pair,
            HandCategory.HIGH_CARD: self._describe_high_card,
        }

    def describe_value(self, value: int) -> str:
        """
        Category name of a value.

        Raises:
            ValueError: If value is outside every category
        """
        if value == BASE_SF:
            return "Royal Flush"
        return category_of(value).display_name

    def describe_value_detailed(self, value: int) -> str:
        """
        Detailed description of a value, e.g. 'Full House, Aces over Kings'.

        Raises:
            ValueError: If value is outside every category
        """
        category = category_of(value)
        base, _ = CATEGORY_RANGES[category]
        return self._detailed[category](value - base)

    def describe_hand(self, hand: Hand) -> str:
        """Get a basic description of the hand."""
        return self.describe_value(self.evaluator.best_value(hand))

    def describe_hand_detailed(self, hand: Hand) -> str:
        """Get a detailed description of the hand."""
        return self.describe_value_detailed(self.evaluator.best_value(hand))

    # Each helper receives the offset of the value inside its category

    def _describe_straight_flush(self, offset: int) -> str:
        if offset == 0:
            return "Royal Flush"
        return f"{run_high_rank(offset + 1).full_name}-high Straight Flush"

    def _describe_four_of_kind(self, offset: int) -> str:
        quad = Rank(offset // (RANK_COUNT - 1))
        return f"Four {quad.plural_name}"

    def _describe_full_house(self, offset: int) -> str:
        trips, slot = divmod(offset, RANK_COUNT - 1)
        pair = Rank(expand(slot, trips))
        return f"Full House, {Rank(trips).plural_name} over {pair.plural_name}"

    def _describe_flush(self, offset: int) -> str:
        highest = Rank(non_run_at(offset)[0])
        return f"{highest.full_name}-high Flush"

    def _describe_straight(self, offset: int) -> str:
        return f"{run_high_rank(offset + 1).full_name}-high Straight"

    def _describe_three_of_kind(self, offset: int) -> str:
        trips = Rank(offset // TK_KICKER_SETS)
        return f"Three {trips.plural_name}"

    def _describe_two_pair(self, offset: int) -> str:
        high, low = combination_at(offset // (RANK_COUNT - 2), RANK_COUNT, 2)
        return f"Two Pair, {Rank(high).plural_name} and {Rank(low).plural_name}"

    def _describe_pair(self, offset: int) -> str:
        pair = Rank(offset // OP_KICKER_SETS)
        return f"Pair of {pair.plural_name}"

    def _describe_high_card(self, offset: int) -> str:
        highest = Rank(non_run_at(offset)[0])
        return f"{highest.full_name} High"
