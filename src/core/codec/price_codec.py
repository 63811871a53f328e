"""
PriceCodec — Компактное хранение цены в fixed-point int

Композиция RangeMapper и FixedPointCodec:
    encode: price → normalize(price, range) → to_fixed(y, scale, width)
    decode: n → from_fixed(n, scale) → denormalize(y, range)

Ошибка round-trip по цене: не более span * 2^-scale / 2 (плюс ошибка
округления float при нормализации).
"""

from typing import Any, Dict

from src.core.contracts import validate_price_codec_config
from src.core.domain.fixed_point_config import FixedPointConfig
from src.core.domain.price_range import PriceRange
from src.core.math.fixed_point import FixedPointCodec
from src.core.math.range_mapper import denormalize, normalize


class PriceCodec:
    """
    Кодек цены: диапазон + fixed-point контейнер.

    Stateless, immutable конфигурация. Несколько кодеков с разными
    диапазонами и масштабами сосуществуют независимо.
    """

    def __init__(self, price_range: PriceRange, config: FixedPointConfig):
        """
        Args:
            price_range: Диапазон цены [min, max]
            config: Конфигурация fixed-point контейнера
        """
        self.price_range = price_range
        self.config = config
        self._fixed = FixedPointCodec(config)

    @classmethod
    def from_config(cls, data: Dict[str, Any]) -> "PriceCodec":
        """
        Создание кодека из конфигурационного документа.

        Документ сначала проверяется по контракту price_codec_config,
        затем инварианты проверяют модели PriceRange / FixedPointConfig.

        Raises:
            ValidationError: Документ не соответствует JSON Schema
            ConfigurationError: Нарушен инвариант диапазона или масштаба
        """
        validate_price_codec_config(data)
        return cls(
            price_range=PriceRange(**data["price_range"]),
            config=FixedPointConfig(**data["fixed_point"]),
        )

    @property
    def resolution(self) -> float:
        """Минимальный шаг цены, различимый после кодирования."""
        return self.price_range.span * self.config.resolution

    def encode(self, price: float) -> int:
        """
        Цена → fixed-point int.

        Raises:
            FixedPointOverflowError: Нормализованная цена не помещается в контейнер
        """
        return self._fixed.encode(normalize(price, self.price_range))

    def decode(self, n: int) -> float:
        """fixed-point int → цена."""
        return denormalize(self._fixed.decode(n), self.price_range)
