"""
Exceptions for the LRU Cache Engine
Copyright 2025 Jurden Bruce
"""


class CacheError(Exception):
    """Base class for cache engine errors"""


class InvalidCapacity(CacheError, ValueError):
    """Raised when a cache is constructed with a non-positive capacity"""

    def __init__(self, capacity):
        self.capacity = capacity
        super().__init__(f"Cache capacity must be a positive integer, got {capacity!r}")


class NotFound(CacheError, KeyError):
    """Raised when a key has no resident entry"""

    def __init__(self, key):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"No resident entry for key {self.key!r}"
