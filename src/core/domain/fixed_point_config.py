"""
FixedPointConfig — Конфигурация fixed-point контейнера

Immutable Pydantic модель: двоичный масштаб (scale) и ширина знакового
целочисленного контейнера (width).

Значение x хранится как round(x * 2^scale) в W-битном знаковом int.

ИНВАРИАНТЫ:
1. 0 <= scale
2. 2 <= width <= 64
3. scale < width - 1 (минимум один бит знака/запаса)

Конфигурация scale=31, width=32 не оставляет бита запаса и отклоняется.
"""

import math
from typing import Final

import structlog
from pydantic import BaseModel, Field, model_validator

from src.core.errors import ConfigurationError

log = structlog.get_logger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Ширина контейнера по умолчанию (int32)
DEFAULT_FIXED_WIDTH: Final[int] = 32

# Допустимые границы ширины контейнера
MIN_FIXED_WIDTH: Final[int] = 2
MAX_FIXED_WIDTH: Final[int] = 64


# =============================================================================
# FIXED POINT CONFIG MODEL
# =============================================================================


class FixedPointConfig(BaseModel):
    """
    Конфигурация fixed-point кодирования.

    Immutable модель (frozen=True). Разные конфигурации могут
    сосуществовать и тестироваться изолированно.
    """

    scale: int = Field(..., description="Двоичный масштаб: значение * 2^scale")
    width: int = Field(
        DEFAULT_FIXED_WIDTH, description="Ширина знакового контейнера в битах"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_headroom(self) -> "FixedPointConfig":
        """Проверка ширины, масштаба и бита запаса."""
        if not MIN_FIXED_WIDTH <= self.width <= MAX_FIXED_WIDTH:
            log.warning("fixed_point_config_rejected", scale=self.scale, width=self.width)
            raise ConfigurationError(
                f"width must be in [{MIN_FIXED_WIDTH}, {MAX_FIXED_WIDTH}], got {self.width}"
            )

        if self.scale < 0:
            log.warning("fixed_point_config_rejected", scale=self.scale, width=self.width)
            raise ConfigurationError(f"scale must be non-negative, got {self.scale}")

        if self.scale >= self.width - 1:
            log.warning("fixed_point_config_rejected", scale=self.scale, width=self.width)
            raise ConfigurationError(
                f"scale={self.scale} leaves no sign/headroom bit in a {self.width}-bit "
                f"container (scale must be < {self.width - 1})"
            )

        return self

    # -------------------------------------------------------------------------
    # Границы контейнера
    # -------------------------------------------------------------------------

    @property
    def int_min(self) -> int:
        """Минимальное целое контейнера: -2^(W-1)."""
        return -(1 << (self.width - 1))

    @property
    def int_max(self) -> int:
        """Максимальное целое контейнера: 2^(W-1) - 1."""
        return (1 << (self.width - 1)) - 1

    @property
    def resolution(self) -> float:
        """Шаг квантования: 2^-scale."""
        return math.ldexp(1.0, -self.scale)

    @property
    def max_quantization_error(self) -> float:
        """Максимальная ошибка round-trip: 2^-scale / 2."""
        return math.ldexp(1.0, -self.scale - 1)

    @property
    def min_value(self) -> float:
        """Наименьшее представимое вещественное значение."""
        return math.ldexp(self.int_min, -self.scale)

    @property
    def max_value(self) -> float:
        """Наибольшее представимое вещественное значение."""
        return math.ldexp(self.int_max, -self.scale)
