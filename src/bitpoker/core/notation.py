"""Conversion between text notation and hands.

Cards are written as two characters, rank then suit ("AC", "tD"), and may be
separated by '/' ("AC/KD") or simply concatenated ("ACKD").
"""

import logging

from .card import Card
from .hand import Hand

logger = logging.getLogger(__name__)

SEPARATOR = "/"


def parse_hand(hand_str: str) -> Hand:
    """
    Create a Hand from a string representation.

    Args:
        hand_str: Card notation such as "AC/KD" or "ACKD"

    Returns:
        Hand holding the parsed cards

    Raises:
        ValueError: If the string contains an invalid or incomplete card
    """
    text = hand_str.strip()
    hand = Hand.empty()
    position = 0
    index = 0

    while index < len(text):
        card_str = text[index:index + 2]
        position += 1
        if len(card_str) < 2:
            raise ValueError(f"Incomplete card at position {position} in hand string '{hand_str}'")

        try:
            card = Card.from_string(card_str)
        except ValueError as e:
            raise ValueError(f"Invalid card at position {position} in hand string '{hand_str}': {e}")

        hand = hand | Hand(card.bit)
        index += 2
        if text[index:index + 1] == SEPARATOR:
            index += 1

    logger.debug(f"Parsed hand string '{hand_str}' into {format_hand(hand)}")
    return hand


def format_card(hand: Hand) -> str:
    """
    Name of a single-card hand, e.g. "AS".

    Raises:
        ValueError: If the hand does not hold exactly one card
    """
    if hand.card_count() != 1:
        raise ValueError(f"Expected a single card, got {hand.card_count()}")
    return str(Card.from_bit(hand.bits))


def format_hand(hand: Hand) -> str:
    """Cards of a hand in bit order, joined with '/'."""
    return SEPARATOR.join(str(card) for card in hand)
