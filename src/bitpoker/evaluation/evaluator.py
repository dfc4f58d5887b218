"""Main poker hand evaluation interface."""
from dataclasses import dataclass
from typing import Optional
import logging

from bitpoker.core.hand import Hand
from bitpoker.evaluation.cache import HandValueCache
from bitpoker.evaluation.categories import CATEGORY_EVALUATORS, value_straight_flush
from bitpoker.evaluation.constants import MIN_HAND_SIZE, HandCategory, category_of
from bitpoker.evaluation.evaluation_config import EvaluatorConfig

logger = logging.getLogger(__name__)


@dataclass
class HandResult:
    """
    Result of hand evaluation.

    Attributes:
        value: Absolute strength of the hand (1 is best)
        category: Category the value falls in
        description: Human-readable description of hand
    """
    value: int
    category: HandCategory
    description: Optional[str] = None


class HandEvaluator:
    """
    Assigns poker hands a single comparable value.

    Categories are tried from strongest to weakest and the first one the
    hand makes gives its value. Values are memoized per bit-set.
    """

    def __init__(self, config: Optional[EvaluatorConfig] = None):
        """
        Initialize evaluator.

        Args:
            config: Evaluator settings, defaults when omitted
        """
        self.config = config or EvaluatorConfig()
        self._suit_order = self.config.suits
        self.cache = HandValueCache(self.config.cache_size)

    def best_value(self, hand: Hand) -> int:
        """
        Value of the best poker hand the cards make.

        Args:
            hand: At least five cards

        Returns:
            Value from 1 (royal flush) to 7462 (worst high card)
        """
        assert hand.card_count() >= MIN_HAND_SIZE, (
            f"best_value needs at least {MIN_HAND_SIZE} cards, got {hand.card_count()}"
        )

        cached = self.cache.get(hand.bits)
        if cached is not None:
            return cached

        value = self._compute(hand)
        self.cache.put(hand.bits, value)
        return value

    def _compute(self, hand: Hand) -> int:
        for category, evaluate in CATEGORY_EVALUATORS:
            if evaluate is value_straight_flush:
                value = value_straight_flush(hand, self._suit_order)
            else:
                value = evaluate(hand)
            if value:
                logger.debug(f"Hand {hand!r} scored {value} as {category.name}")
                return value

        # Any five cards make at least one category
        raise AssertionError(f"No category matched hand {hand!r}")

    def evaluate(self, hand: Hand) -> HandResult:
        """Evaluate a hand into value and category."""
        value = self.best_value(hand)
        return HandResult(value=value, category=category_of(value))

    def compare_hands(self, hand1: Hand, hand2: Hand) -> int:
        """
        Compare two poker hands.

        Returns:
            1 if hand1 wins, -1 if hand2 wins, 0 if tie

        Note:
            Lower value = better hand
        """
        value1 = self.best_value(hand1)
        value2 = self.best_value(hand2)
        if value1 == value2:
            return 0
        return 1 if value1 < value2 else -1


# Global evaluator instance
evaluator = HandEvaluator(EvaluatorConfig.from_env())


def best_value(hand: Hand) -> int:
    """Value of a hand using the global evaluator."""
    return evaluator.best_value(hand)
