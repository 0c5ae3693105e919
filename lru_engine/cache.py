"""
LRU Cache implementation for the LRU Cache Engine
Copyright 2025 Jurden Bruce

Entries live in an arena (a list of slots) and are linked into usage order
by slot index. The index maps each key to its slot, so lookup, promotion
and eviction are all O(1). The front of the usage order is the most
recently used entry, the back is the least recently used one.

Not thread-safe: callers sharing a cache across threads must serialize
access themselves.
"""

import logging
from dataclasses import replace
from typing import Any, Callable, Dict, Hashable, Iterator, List, Optional, Tuple

from .config import CacheConfig
from .errors import InvalidCapacity, NotFound
from .keys import KEY_FUNCS, derive_key
from .models import CacheEntry, CacheStats

logger = logging.getLogger("lru-engine.cache")


class LRUCache:
    """Fixed-capacity cache evicting the least recently used entry"""

    def __init__(self, capacity: int, key_func: Callable[[Any], Hashable] = derive_key):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidCapacity(capacity)

        self._capacity = capacity
        self._key_func = key_func

        self._index: Dict[Hashable, int] = {}
        self._slots: List[Optional[CacheEntry]] = []
        self._free_slots: List[int] = []
        self._front: Optional[int] = None
        self._back: Optional[int] = None

        self._stats = CacheStats()

        logger.info(f"LRU cache created with capacity {capacity}")

    @classmethod
    def from_config(cls, config: CacheConfig) -> "LRUCache":
        return cls(config.capacity, key_func=KEY_FUNCS[config.key_mode])

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def stats(self) -> CacheStats:
        """Snapshot of the hit/miss/eviction counters"""
        return replace(self._stats)

    # ===== PUBLIC OPERATIONS =====

    def insert_or_touch(self, value: Any) -> Hashable:
        """Insert a value under its derived key, or promote it if already resident.

        Returns the derived key, which retrieve() accepts. A resident entry
        keeps its original payload even when the derived key came from a
        different value.
        """
        key = self._key_func(value)
        self.add(key, value)
        return key

    def add(self, key: Hashable, value: Any) -> bool:
        """Insert value under an explicit key.

        Returns True if a new entry was created. If the key is already
        resident its entry is promoted, its payload left as is, and False
        is returned. Inserting past capacity evicts exactly one entry.
        """
        slot = self._index.get(key)
        if slot is not None:
            self._move_to_front(slot)
            self._stats.touches += 1
            return False

        slot = self._allocate(key, value)
        self._link_front(slot)
        self._index[key] = slot
        self._stats.inserts += 1
        logger.debug(f"Inserted key {key!r} into slot {slot}")

        if len(self._index) > self._capacity:
            self._evict_back()
        return True

    def retrieve(self, key: Hashable) -> Any:
        """Return the payload stored under key and mark it most recently used.

        Raises NotFound if the key was never inserted or has been evicted.
        """
        slot = self._index.get(key)
        if slot is None:
            self._stats.misses += 1
            raise NotFound(key)
        self._move_to_front(slot)
        self._stats.hits += 1
        return self._slots[slot].value

    def get(self, key: Hashable, default: Any = None) -> Any:
        try:
            return self.retrieve(key)
        except NotFound:
            return default

    def peek(self, key: Hashable) -> Any:
        """Return the payload stored under key without changing usage order"""
        slot = self._index.get(key)
        if slot is None:
            raise NotFound(key)
        return self._slots[slot].value

    def clear(self):
        """Drop every entry. Counters are kept."""
        dropped = len(self._index)
        self._index.clear()
        self._slots.clear()
        self._free_slots.clear()
        self._front = None
        self._back = None
        logger.debug(f"Cleared {dropped} entries")

    def keys(self) -> Iterator[Hashable]:
        """Iterate keys from most to least recently used"""
        for entry in self._walk():
            yield entry.key

    def items(self) -> Iterator[Tuple[Hashable, Any]]:
        for entry in self._walk():
            yield entry.key, entry.value

    def get_statistics(self) -> Dict[str, Any]:
        stats = {
            "size": len(self._index),
            "capacity": self._capacity,
            "slots_allocated": len(self._slots),
        }
        stats.update(self._stats.to_dict())
        return stats

    def validate(self) -> List[str]:
        """Check the index and usage order against each other.

        Returns a list of problems found, empty when the cache is consistent.
        """
        problems = []
        size = len(self._index)

        if size > self._capacity:
            problems.append(f"size {size} exceeds capacity {self._capacity}")
        if (self._front is None) != (self._back is None):
            problems.append(f"front {self._front} and back {self._back} disagree on emptiness")

        seen = set()
        prev = None
        slot = self._front
        while slot is not None:
            if slot in seen or len(seen) > size:
                problems.append(f"cycle in usage order at slot {slot}")
                break
            seen.add(slot)
            entry = self._slots[slot]
            if entry is None:
                problems.append(f"usage order references released slot {slot}")
                break
            if entry.prev != prev:
                problems.append(f"slot {slot} has prev {entry.prev}, expected {prev}")
            if self._index.get(entry.key) != slot:
                problems.append(f"key {entry.key!r} in slot {slot} is not indexed to it")
            prev = slot
            slot = entry.next

        if prev != self._back:
            problems.append(f"usage order ends at slot {prev}, back is {self._back}")
        if len(seen) != size:
            problems.append(f"usage order has {len(seen)} entries, index has {size}")

        return problems

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[Hashable]:
        return self.keys()

    def __repr__(self) -> str:
        return f"LRUCache(capacity={self._capacity}, size={len(self._index)})"

    # ===== USAGE ORDER =====

    def _walk(self) -> Iterator[CacheEntry]:
        slot = self._front
        while slot is not None:
            entry = self._slots[slot]
            yield entry
            slot = entry.next

    def _allocate(self, key: Hashable, value: Any) -> int:
        entry = CacheEntry(key=key, value=value)
        if self._free_slots:
            slot = self._free_slots.pop()
            self._slots[slot] = entry
        else:
            slot = len(self._slots)
            self._slots.append(entry)
        return slot

    def _link_front(self, slot: int):
        entry = self._slots[slot]
        entry.prev = None
        entry.next = self._front
        if self._front is not None:
            self._slots[self._front].prev = slot
        self._front = slot
        if self._back is None:
            self._back = slot

    def _unlink(self, slot: int):
        entry = self._slots[slot]
        if entry.prev is not None:
            self._slots[entry.prev].next = entry.next
        else:
            self._front = entry.next
        if entry.next is not None:
            self._slots[entry.next].prev = entry.prev
        else:
            self._back = entry.prev
        entry.prev = None
        entry.next = None

    def _move_to_front(self, slot: int):
        if slot == self._front:
            return
        self._unlink(slot)
        self._link_front(slot)

    def _evict_back(self) -> Optional[CacheEntry]:
        if self._back is None:
            return None
        slot = self._back
        entry = self._slots[slot]
        self._unlink(slot)
        del self._index[entry.key]
        self._slots[slot] = None
        self._free_slots.append(slot)
        self._stats.evictions += 1
        logger.debug(f"Evicted key {entry.key!r} from slot {slot}")
        return entry
