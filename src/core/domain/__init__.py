"""
Domain models and value objects.

Contains immutable configuration values: PriceRange, FixedPointConfig.
"""

from src.core.domain.fixed_point_config import (
    DEFAULT_FIXED_WIDTH,
    MAX_FIXED_WIDTH,
    MIN_FIXED_WIDTH,
    FixedPointConfig,
)
from src.core.domain.price_range import DEFAULT_PRICE_RANGE, PriceRange

__all__ = [
    # Price range
    "PriceRange",
    "DEFAULT_PRICE_RANGE",
    # Fixed-point config
    "FixedPointConfig",
    "DEFAULT_FIXED_WIDTH",
    "MIN_FIXED_WIDTH",
    "MAX_FIXED_WIDTH",
]
