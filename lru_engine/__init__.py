"""
LRU Cache Engine - fixed-capacity in-memory cache with least-recently-used eviction
Copyright 2025 Jurden Bruce
"""

__version__ = "1.0.0"

from .cache import LRUCache
from .config import CacheConfig, load_config
from .errors import CacheError, InvalidCapacity, NotFound
from .keys import content_key, derive_key
from .models import CacheEntry, CacheStats

__all__ = [
    'LRUCache',
    'CacheConfig',
    'load_config',
    'CacheError',
    'InvalidCapacity',
    'NotFound',
    'content_key',
    'derive_key',
    'CacheEntry',
    'CacheStats',
]
