"""
Data models for the LRU Cache Engine
Copyright 2025 Jurden Bruce
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Hashable, Optional


@dataclass
class CacheEntry:
    """One arena slot: a resident value and its neighbours in usage order"""
    key: Hashable
    value: Any
    prev: Optional[int] = None  # slot of the more recently used neighbour
    next: Optional[int] = None  # slot of the less recently used neighbour


@dataclass
class CacheStats:
    hits: int = 0
    misses: int = 0
    inserts: int = 0
    touches: int = 0
    evictions: int = 0

    @property
    def hit_rate(self) -> float:
        """Fraction of retrievals that found a resident entry"""
        lookups = self.hits + self.misses
        if not lookups:
            return 0.0
        return self.hits / lookups

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["hit_rate"] = round(self.hit_rate, 4)
        return data
