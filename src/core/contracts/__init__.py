"""
Contract Validation Module

Модуль для валидации JSON конфигурационных документов кодека цен.
"""

from .validators import (
    ContractValidator,
    FixedPointConfigValidator,
    PriceCodecConfigValidator,
    PriceRangeValidator,
    SchemaLoader,
    validate_fixed_point_config,
    validate_price_codec_config,
    validate_price_range,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PriceRangeValidator",
    "FixedPointConfigValidator",
    "PriceCodecConfigValidator",
    # Functions
    "validate_price_range",
    "validate_fixed_point_config",
    "validate_price_codec_config",
]
