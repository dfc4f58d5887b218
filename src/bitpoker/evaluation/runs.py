"""Detection of five consecutive ranks in a 13-bit rank mask."""
from typing import Tuple

from bitpoker.core.card import Rank, rank_bit

RUN_LENGTH = 5


def _window(*ranks: Rank) -> int:
    mask = 0
    for rank in ranks:
        mask |= rank_bit(rank)
    return mask


# The ten runs, strongest first. The nine normal windows start at Ace
# through Six; the wheel wraps the Ace under the Five.
RUN_MASKS: Tuple[int, ...] = tuple(
    _window(*(Rank(top + i) for i in range(RUN_LENGTH)))
    for top in range(Rank.SIX + 1)
) + (_window(Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO, Rank.ACE),)

RUN_COUNT = len(RUN_MASKS)


def run_from_rank_mask(mask: int) -> int:
    """
    Strongest run held in a rank mask.

    Args:
        mask: 13-bit rank mask, Ace in bit 0

    Returns:
        0 if there is no run, otherwise 1 (Ace-high) to 10 (the wheel)
    """
    if bin(mask).count("1") < RUN_LENGTH:
        return 0
    for ordinal, run_mask in enumerate(RUN_MASKS, 1):
        if mask & run_mask == run_mask:
            return ordinal
    return 0


def run_high_rank(ordinal: int) -> Rank:
    """Top card of a run; the wheel is Five-high."""
    if not 1 <= ordinal <= RUN_COUNT:
        raise ValueError(f"Invalid run ordinal: {ordinal}")
    if ordinal == RUN_COUNT:
        return Rank.FIVE
    return Rank(ordinal - 1)


def is_run(mask: int) -> bool:
    """True if the mask is exactly one five-card run."""
    return mask in RUN_MASKS
