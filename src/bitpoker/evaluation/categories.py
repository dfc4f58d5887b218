"""Per-category hand evaluators.

Each evaluator reads a Hand and returns 0 when the hand does not make the
category, otherwise a value inside the category's range (see constants).
Lower values are stronger.

Straight flush, four of a kind and full house use bespoke formulas. The
remaining categories number the rank combination that defines the hand in
lexicographic order of rank indices; since index 0 is the Ace, that order
runs from strongest to weakest.
"""
from functools import lru_cache
from itertools import combinations
from typing import Callable, Dict, List, Sequence, Tuple

from bitpoker.core.card import RANK_COUNT, Card, Rank, Suit, rank_bit
from bitpoker.core.hand import Hand
from bitpoker.evaluation.constants import (
    BASE_F,
    BASE_FH,
    BASE_FK,
    BASE_HC,
    BASE_OP,
    BASE_S,
    BASE_SF,
    BASE_TK,
    BASE_TP,
    HandCategory,
)
from bitpoker.evaluation.runs import RUN_LENGTH, is_run, run_from_rank_mask

# Order in which suits are searched for a straight flush
DEFAULT_SUIT_ORDER: Tuple[Suit, ...] = (Suit.DIAMOND, Suit.HEART, Suit.CLUB, Suit.SPADE)

# Kicker slots once the defining ranks are removed
_FK_KICKERS = RANK_COUNT - 1           # 12
_FH_PAIRS = RANK_COUNT - 1             # 12
_TP_KICKERS = RANK_COUNT - 2           # 11
TK_KICKER_SETS = 66                    # C(12,2)
OP_KICKER_SETS = 220                   # C(12,3)


# Combinatorics

@lru_cache(maxsize=None)
def _combination_table(n: int, k: int) -> Dict[Tuple[int, ...], int]:
    return {combo: index for index, combo in enumerate(combinations(range(n), k))}


@lru_cache(maxsize=None)
def _combination_list(n: int, k: int) -> Tuple[Tuple[int, ...], ...]:
    return tuple(combinations(range(n), k))


def _mask_of(ranks: Sequence[int]) -> int:
    mask = 0
    for rank in ranks:
        mask |= rank_bit(rank)
    return mask


@lru_cache(maxsize=None)
def _non_run_fives() -> Tuple[Tuple[int, ...], ...]:
    """Five-rank combinations that are not runs, strongest first."""
    return tuple(
        combo for combo in combinations(range(RANK_COUNT), RUN_LENGTH)
        if not is_run(_mask_of(combo))
    )


@lru_cache(maxsize=None)
def _non_run_index() -> Dict[Tuple[int, ...], int]:
    return {combo: index for index, combo in enumerate(_non_run_fives())}


def combination_index(ranks: Sequence[int], n: int) -> int:
    """Lexicographic index of a sorted rank combination drawn from range(n)."""
    return _combination_table(n, len(ranks))[tuple(ranks)]


def combination_at(index: int, n: int, k: int) -> Tuple[int, ...]:
    """Inverse of combination_index."""
    return _combination_list(n, k)[index]


def non_run_index(ranks: Sequence[int]) -> int:
    """Index of five ranks among the five-rank combinations that are not runs."""
    return _non_run_index()[tuple(ranks)]


def non_run_at(index: int) -> Tuple[int, ...]:
    """Inverse of non_run_index."""
    return _non_run_fives()[index]


def compact(rank: int, *removed: int) -> int:
    """Index of a rank once the removed ranks are taken out of the ordering."""
    return rank - sum(1 for r in removed if rank > r)


def expand(slot: int, *removed: int) -> int:
    """Inverse of compact."""
    for r in sorted(removed):
        if slot >= r:
            slot += 1
    return slot


# Rank helpers

def _bit_count(mask: int) -> int:
    return bin(mask).count("1")


def _lowest_rank(mask: int) -> int:
    """Strongest rank in a rank mask."""
    return (mask & -mask).bit_length() - 1


def _top_ranks(mask: int, count: int) -> List[int]:
    """Up to count strongest ranks of a rank mask, strongest first."""
    ranks = []
    while mask and len(ranks) < count:
        low = mask & -mask
        ranks.append(low.bit_length() - 1)
        mask ^= low
    return ranks


def _ranks_with_count(counts: Sequence[int], minimum: int) -> List[int]:
    return [rank for rank, count in enumerate(counts) if count >= minimum]


def _other_ranks(counts: Sequence[int], *excluded: int) -> List[int]:
    return [rank for rank, count in enumerate(counts) if count and rank not in excluded]


# Evaluators

def value_straight_flush(hand: Hand, suit_order: Sequence[int] = DEFAULT_SUIT_ORDER) -> int:
    """Straight flush value; the first suit in suit_order holding a run wins."""
    for suit in suit_order:
        run = run_from_rank_mask(hand.cards_in_suit(suit))
        if run:
            return BASE_SF + run - 1
    return 0


def value_four_of_a_kind(hand: Hand) -> int:
    """Four of a kind value: strongest quad rank, then its kicker."""
    four = (
        hand.cards_in_suit(Suit.CLUB)
        & hand.cards_in_suit(Suit.DIAMOND)
        & hand.cards_in_suit(Suit.HEART)
        & hand.cards_in_suit(Suit.SPADE)
    )
    if not four:
        return 0

    quad = _lowest_rank(four)
    quad_cards = Hand.from_cards(Card(Rank(quad), suit) for suit in Suit)
    remaining = (hand - quad_cards).all_ranks_present()
    if not remaining:
        return 0

    kicker = _lowest_rank(remaining)
    return BASE_FK + quad * _FK_KICKERS + compact(kicker, quad)


def _full_house_trips_first(counts: Sequence[int]) -> int:
    """Look for a 3, then a 2 or better after it."""
    for c3, count in enumerate(counts):
        if count == 3:
            for c2 in range(c3 + 1, RANK_COUNT):
                if counts[c2] >= 2:
                    return BASE_FH + _FH_PAIRS * c3 + c2 - 1
            return 0
    return 0


def _full_house_pair_first(counts: Sequence[int]) -> int:
    """Look for a 2, then a 3 after it."""
    for c2, count in enumerate(counts):
        if count == 2:
            for c3 in range(c2 + 1, RANK_COUNT):
                if counts[c3] == 3:
                    return BASE_FH + _FH_PAIRS * c3 + c2
            return 0
    return 0


def value_full_house(hand: Hand) -> int:
    """
    Full house value.

    Ranks are scanned from Ace down. When a pair shows up before the first
    triple, the pair is the stronger half and the triple is searched after
    it; otherwise the first triple is taken and the pair searched after it.
    A triple with nothing to pair it scores 0.
    """
    counts = hand.rank_counts()
    found2 = found3 = pair_first = False

    for count in counts:
        found2 |= count == 2
        if found2 and not found3:
            pair_first = True
        found3 |= count == 3

    if not found3:
        return 0
    if pair_first:
        return _full_house_pair_first(counts)
    return _full_house_trips_first(counts)


def value_flush(hand: Hand) -> int:
    """
    Flush value from the five strongest cards of the best flush suit.

    Five strongest cards forming a run are a straight flush and score 0 here.
    """
    best = 0
    for suit in Suit:
        mask = hand.cards_in_suit(suit)
        if _bit_count(mask) < RUN_LENGTH:
            continue
        top = _top_ranks(mask, RUN_LENGTH)
        if is_run(_mask_of(top)):
            continue
        value = BASE_F + non_run_index(top)
        if not best or value < best:
            best = value
    return best


def value_straight(hand: Hand) -> int:
    """Straight value from the ranks held in any suit."""
    run = run_from_rank_mask(hand.all_ranks_present())
    if not run:
        return 0
    return BASE_S + run - 1


def value_three_of_a_kind(hand: Hand) -> int:
    """Three of a kind value: trip rank, then the two best kickers."""
    counts = hand.rank_counts()
    trips = _ranks_with_count(counts, 3)
    if not trips:
        return 0

    trip = trips[0]
    kickers = _other_ranks(counts, trip)[:2]
    if len(kickers) < 2:
        return 0

    slots = [compact(k, trip) for k in kickers]
    return BASE_TK + trip * TK_KICKER_SETS + combination_index(slots, RANK_COUNT - 1)


def value_two_pair(hand: Hand) -> int:
    """Two pair value: both pair ranks, then the best kicker."""
    counts = hand.rank_counts()
    pairs = _ranks_with_count(counts, 2)[:2]
    if len(pairs) < 2:
        return 0

    kickers = _other_ranks(counts, *pairs)
    if not kickers:
        return 0

    high, low = pairs
    return (
        BASE_TP
        + combination_index(pairs, RANK_COUNT) * _TP_KICKERS
        + compact(kickers[0], high, low)
    )


def value_one_pair(hand: Hand) -> int:
    """One pair value: pair rank, then the three best kickers."""
    counts = hand.rank_counts()
    pairs = _ranks_with_count(counts, 2)
    if not pairs:
        return 0

    pair = pairs[0]
    kickers = _other_ranks(counts, pair)[:3]
    if len(kickers) < 3:
        return 0

    slots = [compact(k, pair) for k in kickers]
    return BASE_OP + pair * OP_KICKER_SETS + combination_index(slots, RANK_COUNT - 1)


def value_high_card(hand: Hand) -> int:
    """High card value from the five strongest ranks; 0 if they form a run."""
    top = _top_ranks(hand.all_ranks_present(), RUN_LENGTH)
    if len(top) < RUN_LENGTH or is_run(_mask_of(top)):
        return 0
    return BASE_HC + non_run_index(top)


Evaluator = Callable[[Hand], int]

# Strongest first, the order the composite evaluation walks them
CATEGORY_EVALUATORS: Tuple[Tuple[HandCategory, Evaluator], ...] = (
    (HandCategory.STRAIGHT_FLUSH, value_straight_flush),
    (HandCategory.FOUR_OF_A_KIND, value_four_of_a_kind),
    (HandCategory.FULL_HOUSE, value_full_house),
    (HandCategory.FLUSH, value_flush),
    (HandCategory.STRAIGHT, value_straight),
    (HandCategory.THREE_OF_A_KIND, value_three_of_a_kind),
    (HandCategory.TWO_PAIR, value_two_pair),
    (HandCategory.ONE_PAIR, value_one_pair),
    (HandCategory.HIGH_CARD, value_high_card),
)
