"""
Key derivation for the LRU Cache Engine
Copyright 2025 Jurden Bruce

Values inserted without an explicit key are indexed under a key derived
from the value itself. Two values that derive the same key are the same
logical entry: the first payload stays resident and later inserts only
promote it. Use LRUCache.add() with an explicit key when that merge is
not acceptable.
"""

import hashlib
from typing import Any, Callable, Dict


def content_key(value: Any) -> int:
    """Signed 64-bit key from a SHA-256 digest of the value's repr.

    Stable across processes, unlike hash() on str/bytes which is salted
    per interpreter run.
    """
    digest = hashlib.sha256(repr(value).encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big", signed=True)


def derive_key(value: Any) -> int:
    """Key from the value's own hash, or its content digest if unhashable"""
    try:
        return hash(value)
    except TypeError:
        return content_key(value)


KEY_FUNCS: Dict[str, Callable[[Any], int]] = {
    "hash": derive_key,
    "content": content_key,
}
