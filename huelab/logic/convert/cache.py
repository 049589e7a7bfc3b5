#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huelab/logic/convert/cache.py

"""
Bounded, thread-safe memo for conversion results.

Entries expire after a time-to-live and the least recently used entry is
evicted when the cache is full. The bound adapts to the workload: a cache
that is nearly full while serving mostly hits grows (up to three times its
initial size); one that misses a lot while evicting often shrinks back
toward its initial size.
"""

import math
import threading
import time
from collections import OrderedDict
from typing import Any, Callable, Hashable, NamedTuple, Optional

from huelab.core import config as c


class CacheStats(NamedTuple):
    size: int
    max_size: int
    hits: int
    misses: int
    hit_rate: float
    evictions: int


class _Entry(NamedTuple):
    value: Any
    expires_at: float


class ResultCache:
    """LRU + TTL cache whose operations are each serialized by one lock."""

    def __init__(
        self,
        max_size: int = c.CACHE_MAX_SIZE,
        ttl: float = c.CACHE_TTL,
        smart_sizing: bool = True,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self._initial_size = max_size
        self._max_size = max_size
        self._ttl = ttl
        self._smart_sizing = smart_sizing
        self._clock = clock
        self._entries: "OrderedDict[Hashable, _Entry]" = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def lookup(self, key: Hashable) -> Optional[Any]:
        """Stored value for ``key``, or None when absent or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                return None
            if self._clock() >= entry.expires_at:
                del self._entries[key]
                self._misses += 1
                return None
            self._entries.move_to_end(key)
            self._hits += 1
            return entry.value

    def store(self, key: Hashable, value: Any) -> None:
        with self._lock:
            if key in self._entries:
                del self._entries[key]
            else:
                if self._smart_sizing:
                    self._resize()
                while len(self._entries) >= self._max_size:
                    self._entries.popitem(last=False)
                    self._evictions += 1
            self._entries[key] = _Entry(value, self._clock() + self._ttl)

    # Mapping-style aliases
    get = lookup
    set = store

    def has(self, key: Hashable) -> bool:
        """True when ``key`` holds a live entry; does not count as a hit."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return False
            if self._clock() >= entry.expires_at:
                del self._entries[key]
                return False
            return True

    def delete(self, key: Hashable) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        """Drop every entry and reset counters and the adapted bound."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0
            self._evictions = 0
            self._max_size = self._initial_size

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                size=len(self._entries),
                max_size=self._max_size,
                hits=self._hits,
                misses=self._misses,
                hit_rate=self._hit_rate(),
                evictions=self._evictions,
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _hit_rate(self) -> float:
        total = self._hits + self._misses
        return self._hits / total if total else 0.0

    def _resize(self) -> None:
        # Caller holds the lock.
        hit_rate = self._hit_rate()
        size = len(self._entries)
        if hit_rate > c.CACHE_GROW_HIT_RATE and size > self._max_size * c.CACHE_GROW_FILL:
            self._max_size = int(math.floor(min(
                self._initial_size * c.CACHE_GROW_LIMIT,
                self._max_size * c.CACHE_GROW_FACTOR,
            )))
        elif hit_rate < c.CACHE_SHRINK_HIT_RATE and self._evictions > c.CACHE_SHRINK_EVICTIONS:
            self._max_size = int(math.floor(max(
                self._initial_size,
                self._max_size * c.CACHE_SHRINK_FACTOR,
            )))
            self._evictions = 0


def make_key(value: str, source_format=None, target_formats=None) -> str:
    """Normalized signature of a convert() request."""
    hint = getattr(source_format, "value", source_format) or "auto"
    if target_formats is None:
        targets = "all"
    else:
        targets = ",".join(getattr(t, "value", t) for t in target_formats)
    return f"{value.strip()}|{hint}|{targets}"


# Process-wide cache handed to convert() by the CLI
conversion_cache = ResultCache(
    max_size=c.CONVERSION_CACHE_MAX_SIZE,
    ttl=c.CONVERSION_CACHE_TTL,
)
