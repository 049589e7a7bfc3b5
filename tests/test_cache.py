import pytest

from huelab.core.types import ColorFormat
from huelab.logic.convert.cache import ResultCache, make_key


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_entries_expire():
    clock = FakeClock()
    cache = ResultCache(max_size=10, ttl=300, clock=clock)
    cache.store("a", 1)
    assert cache.lookup("a") == 1
    clock.now = 299.0
    assert cache.has("a")
    clock.now = 301.0
    assert cache.lookup("a") is None
    assert not cache.has("a")
    stats = cache.stats()
    assert stats.hits == 1
    assert stats.misses == 1
    assert stats.size == 0


def test_least_recently_used_is_evicted():
    cache = ResultCache(max_size=2, smart_sizing=False)
    cache.set("a", 1)
    cache.set("b", 2)
    assert cache.get("a") == 1
    cache.set("c", 3)
    assert cache.has("a")
    assert not cache.has("b")
    assert cache.has("c")
    assert cache.stats().evictions == 1
    assert len(cache) == 2


def test_delete_and_clear():
    cache = ResultCache()
    cache.store("a", 1)
    assert cache.delete("a")
    assert not cache.delete("a")
    cache.store("b", 2)
    cache.lookup("b")
    cache.clear()
    stats = cache.stats()
    assert stats.size == 0
    assert stats.hits == 0
    assert stats.hit_rate == 0.0


def test_hot_full_cache_grows():
    cache = ResultCache(max_size=10, clock=FakeClock())
    for i in range(10):
        cache.store(i, i)
    for _ in range(10):
        for i in range(10):
            assert cache.lookup(i) == i
    cache.store("new", 0)
    stats = cache.stats()
    assert stats.max_size == 15
    assert stats.size == 11
    assert stats.evictions == 0
    cache.clear()
    assert cache.stats().max_size == 10


def test_churning_cache_never_shrinks_below_initial_size():
    cache = ResultCache(max_size=5, clock=FakeClock())
    for i in range(100):
        cache.store(i, i)
        cache.lookup(-i - 1)
    stats = cache.stats()
    assert stats.max_size == 5
    assert stats.size == 5


def test_invalid_size():
    with pytest.raises(ValueError):
        ResultCache(max_size=0)


def test_make_key():
    assert make_key("  red ") == "red|auto|all"
    assert make_key("red", ColorFormat.HEX, [ColorFormat.RGB, ColorFormat.HSL]) == "red|hex|rgb,hsl"


def test_concurrent_access_stays_consistent():
    import threading

    cache = ResultCache(max_size=32, smart_sizing=False)
    threads_count = 8
    rounds = 500
    overflows = []

    def worker(n):
        for i in range(rounds):
            key = (n, i % 50)
            cache.store(key, i)
            cache.lookup((n, (i * 7) % 50))
            if len(cache) > 32:
                overflows.append(len(cache))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(threads_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    stats = cache.stats()
    assert not overflows
    assert stats.size <= stats.max_size == 32
    assert stats.hits + stats.misses == threads_count * rounds
    assert stats.hit_rate == pytest.approx(stats.hits / (threads_count * rounds))
