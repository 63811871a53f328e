"""
PriceRange — Ограниченный диапазон цены

Immutable Pydantic модель, задающая домен [min, max] для аффинной
нормализации цены в единичный интервал.

ИНВАРИАНТЫ:
1. min < max
2. min и max конечны (не NaN/Inf)
3. span = max - min конечен

Нарушение инварианта: ConfigurationError при создании.
"""

import math
from typing import Final

import structlog
from pydantic import BaseModel, Field, model_validator

from src.core.errors import ConfigurationError

log = structlog.get_logger(__name__)


# =============================================================================
# PRICE RANGE MODEL
# =============================================================================


class PriceRange(BaseModel):
    """
    Диапазон цены [min, max].

    Immutable модель (frozen=True). Создаётся один раз и передаётся
    явно в каждый вызов normalize/denormalize.
    """

    min: float = Field(..., description="Нижняя граница диапазона цены")
    max: float = Field(..., description="Верхняя граница диапазона цены")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_bounds(self) -> "PriceRange":
        """Проверка min < max, конечности границ и ширины диапазона."""
        if not (math.isfinite(self.min) and math.isfinite(self.max)):
            log.warning("price_range_rejected", min=self.min, max=self.max, reason="non_finite")
            raise ConfigurationError(
                f"PriceRange bounds must be finite, got min={self.min}, max={self.max}"
            )

        if self.min >= self.max:
            log.warning("price_range_rejected", min=self.min, max=self.max, reason="min_ge_max")
            raise ConfigurationError(
                f"PriceRange requires min < max, got min={self.min}, max={self.max}"
            )

        if not math.isfinite(self.max - self.min):
            log.warning("price_range_rejected", min=self.min, max=self.max, reason="span_overflow")
            raise ConfigurationError(
                f"PriceRange span max - min overflows float64, got min={self.min}, max={self.max}"
            )

        return self

    @property
    def span(self) -> float:
        """Ширина диапазона (max - min), всегда > 0."""
        return self.max - self.min

    def contains(self, price: float) -> bool:
        """Лежит ли цена в [min, max] (границы включены)."""
        return self.min <= price <= self.max


# Диапазон цены исходной конфигурации кодека
DEFAULT_PRICE_RANGE: Final[PriceRange] = PriceRange(min=240.0, max=60000.0)
