import pytest

from algokit.lru_cache import LRUCache


def _filled(capacity=5, count=6):
    cache = LRUCache(capacity)
    for i in range(1, count + 1):
        cache.put(f"key{i}", f"value{i}")
    return cache


def test_oldest_entry_is_evicted_when_full():
    cache = _filled()
    assert len(cache) == 5
    assert "key1" not in cache
    assert [k for k, _ in cache.items()] == ["key6", "key5", "key4", "key3", "key2"]


def test_get_moves_entry_to_front():
    cache = _filled()
    assert cache.get("key4") == "value4"
    assert cache.items()[0] == ("key4", "value4")
    assert len(cache) == 5


def test_update_replaces_value_and_moves_to_front():
    cache = _filled()
    cache.put("key5", "newValue5")
    assert cache.items()[0] == ("key5", "newValue5")
    assert len(cache) == 5
    assert cache.get("key5") == "newValue5"


def test_missing_key_raises_key_error():
    cache = _filled()
    with pytest.raises(KeyError):
        cache.get("aaa")


def test_recently_read_entry_survives_eviction():
    cache = LRUCache(2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.get("a")
    cache.put("c", 3)
    assert "a" in cache
    assert "b" not in cache
    assert "c" in cache


def test_default_capacity_is_ten():
    cache = LRUCache()
    for i in range(20):
        cache.put(i, i)
    assert len(cache) == 10
    assert cache.capacity == 10
    assert [k for k, _ in cache.items()] == list(range(19, 9, -1))


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        LRUCache(-1)