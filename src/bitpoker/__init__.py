"""Bit-packed poker hand evaluation package."""

from bitpoker.core.card import Card, Rank, Suit
from bitpoker.core.hand import Hand
from bitpoker.core.notation import format_hand, parse_hand
from bitpoker.evaluation.constants import HandCategory
from bitpoker.evaluation.evaluator import HandEvaluator, HandResult, best_value

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Hand",
    "parse_hand",
    "format_hand",
    "HandCategory",
    "HandEvaluator",
    "HandResult",
    "best_value",
]
