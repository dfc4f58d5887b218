"""Cache for composite hand values."""
import logging
from collections import OrderedDict
from typing import Optional

logger = logging.getLogger(__name__)


class HandValueCache:
    """
    Bounded least-recently-used map from hand bits to hand value.

    Identical bit-sets always evaluate to the same value, so entries never
    need invalidation. A max_size of 0 disables caching.
    """

    def __init__(self, max_size: int = 4096):
        if max_size < 0:
            raise ValueError(f"Cache size must not be negative: {max_size}")
        self.max_size = max_size
        self._values: "OrderedDict[int, int]" = OrderedDict()
        self.hits = 0
        self.misses = 0

    def get(self, bits: int) -> Optional[int]:
        """Cached value for a bit-set, or None."""
        value = self._values.get(bits)
        if value is None:
            self.misses += 1
            return None
        self.hits += 1
        self._values.move_to_end(bits)
        return value

    def put(self, bits: int, value: int) -> None:
        """Remember a value, evicting the oldest entry when full."""
        if not self.max_size:
            return
        self._values[bits] = value
        self._values.move_to_end(bits)
        if len(self._values) > self.max_size:
            evicted, _ = self._values.popitem(last=False)
            logger.debug(f"Evicted cached value for hand bits {evicted:#x}")

    def clear(self) -> None:
        self._values.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._values)
