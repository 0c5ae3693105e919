"""
Configuration for the LRU Cache Engine
Copyright 2025 Jurden Bruce
"""

import os
import logging
from typing import Literal

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger("lru-engine.config")

DEFAULT_CAPACITY = 1000


class CacheConfig(BaseModel):
    capacity: int = Field(default=DEFAULT_CAPACITY, gt=0, description="Maximum number of resident entries")
    key_mode: Literal["hash", "content"] = Field(
        default="hash",
        description="Key derivation for insert_or_touch: hash() of the value, or a digest of its repr",
    )


def load_config() -> CacheConfig:
    """Build a CacheConfig from CACHE_MAXSIZE and CACHE_KEY_MODE"""
    raw = {
        "capacity": os.getenv("CACHE_MAXSIZE", DEFAULT_CAPACITY),
        "key_mode": os.getenv("CACHE_KEY_MODE", "hash"),
    }
    try:
        config = CacheConfig(**raw)
    except ValidationError as e:
        logger.error(f"Invalid cache configuration {raw}: {e}")
        raise
    logger.debug(f"Loaded cache configuration: {config.model_dump()}")
    return config
