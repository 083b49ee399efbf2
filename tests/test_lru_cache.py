import pytest
from hypothesis import given, strategies as st

from algokit.lru_cache import LRUCache


def _filled():
    cache = LRUCache(5)
    for i in range(1, 7):
        cache.put(f"key{i}", f"value{i}")
    return cache


def test_oldest_is_evicted():
    cache = _filled()
    assert "key1" not in cache
    assert len(cache) == 5
    assert [k for k, _ in cache.items()] == ["key6", "key5", "key4", "key3", "key2"]


def test_get_moves_to_front():
    cache = _filled()
    assert cache.get("key4") == "value4"
    assert cache.items()[0] == ("key4", "value4")


def test_update_moves_to_front():
    cache = _filled()
    cache.put("key5", "newValue5")
    assert cache.items()[0] == ("key5", "newValue5")
    assert len(cache) == 5


def test_missing_key_raises():
    cache = _filled()
    with pytest.raises(KeyError):
        cache.get("aaa")


def test_get_protects_from_eviction():
    cache = LRUCache(2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.get("a")
    cache.put("c", 3)
    assert "a" in cache
    assert "b" not in cache


def test_zero_capacity_keeps_nothing():
    cache = LRUCache(0)
    cache.put("a", 1)
    assert len(cache) == 0


def test_negative_capacity():
    with pytest.raises(ValueError):
        LRUCache(-3)


@given(st.integers(1, 6), st.lists(st.integers(0, 10), max_size=40))
def test_keeps_most_recent_distinct_keys(capacity, keys):
    cache = LRUCache(capacity)
    for k in keys:
        cache.put(k, k)
    recent = list(dict.fromkeys(reversed(keys)))[:capacity]
    assert [k for k, _ in cache.items()] == recent