"""Tests for the hand value cache."""
import pytest

from bitpoker.evaluation.cache import HandValueCache


def test_get_and_put():
    cache = HandValueCache(max_size=3)
    assert cache.get(0b11111) is None
    cache.put(0b11111, 1)
    assert cache.get(0b11111) == 1
    assert (cache.hits, cache.misses) == (1, 1)


def test_least_recently_used_evicted():
    """Reading an entry keeps it alive."""
    cache = HandValueCache(max_size=2)
    cache.put(1, 100)
    cache.put(2, 200)
    cache.get(1)
    cache.put(3, 300)

    assert len(cache) == 2
    assert cache.get(2) is None
    assert cache.get(1) == 100
    assert cache.get(3) == 300


def test_disabled_cache():
    cache = HandValueCache(max_size=0)
    cache.put(1, 100)
    assert len(cache) == 0
    assert cache.get(1) is None


def test_clear():
    cache = HandValueCache()
    cache.put(1, 100)
    cache.get(1)
    cache.clear()
    assert len(cache) == 0
    assert cache.hits == 0


def test_negative_size():
    with pytest.raises(ValueError):
        HandValueCache(max_size=-1)
