"""
FixedPointCodec — Конверсия float ↔ fixed-point int

Представление вещественного числа целым, масштабированным степенью двойки:
    to_fixed(x)   = round(x * 2^scale), проверка на W-битный знаковый диапазон
    from_fixed(n) = n / 2^scale

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Умножение на 2^scale точное (math.ldexp), ошибка только от округления
2. Округление к ближайшему, при равенстве к чётному (IEEE 754 default)
3. Переполнение контейнера всегда FixedPointOverflowError, без wrap/saturate
4. |from_fixed(to_fixed(x)) - x| <= 2^-scale / 2
"""

import math

import structlog

from src.core.domain.fixed_point_config import DEFAULT_FIXED_WIDTH, FixedPointConfig
from src.core.errors import FixedPointOverflowError

log = structlog.get_logger(__name__)


# =============================================================================
# ENCODE / DECODE
# =============================================================================


def encode_fixed(x: float, config: FixedPointConfig) -> int:
    """
    Кодирование float в fixed-point int по готовой конфигурации.

    Args:
        x: Вещественное значение
        config: Конфигурация контейнера (scale, width)

    Returns:
        round(x * 2^scale) в диапазоне [int_min, int_max]

    Raises:
        ValueError: Если x равен NaN
        FixedPointOverflowError: Если результат не помещается в контейнер
    """
    if math.isnan(x):
        raise ValueError("Cannot encode NaN as fixed-point")

    if math.isinf(x):
        log.warning("fixed_point_overflow", value=x, scale=config.scale, width=config.width)
        raise FixedPointOverflowError(x, config.scale, config.width)

    try:
        scaled = math.ldexp(x, config.scale)
    except OverflowError:
        log.warning("fixed_point_overflow", value=x, scale=config.scale, width=config.width)
        raise FixedPointOverflowError(x, config.scale, config.width) from None

    n = round(scaled)

    if not config.int_min <= n <= config.int_max:
        log.warning("fixed_point_overflow", value=x, scale=config.scale, width=config.width)
        raise FixedPointOverflowError(x, config.scale, config.width)

    return n


def to_fixed(x: float, scale: int, width: int = DEFAULT_FIXED_WIDTH) -> int:
    """
    Кодирование float в fixed-point int.

    Args:
        x: Вещественное значение
        scale: Двоичный масштаб
        width: Ширина знакового контейнера (default: 32)

    Returns:
        round(x * 2^scale)

    Raises:
        ConfigurationError: Если scale >= width - 1
        FixedPointOverflowError: Если результат не помещается в контейнер

    Examples:
        >>> to_fixed(0.5, scale=8)
        128
        >>> to_fixed(-1.25, scale=4, width=16)
        -20
    """
    return encode_fixed(x, FixedPointConfig(scale=scale, width=width))


def from_fixed(n: int, scale: int) -> float:
    """
    Декодирование fixed-point int в float.

    Args:
        n: Fixed-point значение
        scale: Двоичный масштаб, с которым значение кодировалось

    Returns:
        n / 2^scale

    Examples:
        >>> from_fixed(128, scale=8)
        0.5
    """
    if scale < 0:
        raise ValueError(f"scale must be non-negative, got {scale}")

    return math.ldexp(n, -scale)


# =============================================================================
# CODEC
# =============================================================================


class FixedPointCodec:
    """
    Fixed-point кодек, привязанный к одной конфигурации.

    Stateless: хранит только immutable FixedPointConfig.
    """

    def __init__(self, config: FixedPointConfig):
        """
        Args:
            config: Конфигурация контейнера (scale, width)
        """
        self.config = config

    def encode(self, x: float) -> int:
        """float → fixed-point int (см. encode_fixed)."""
        return encode_fixed(x, self.config)

    def decode(self, n: int) -> float:
        """
        fixed-point int → float.

        Raises:
            ValueError: Если n вне W-битного знакового диапазона
        """
        if not self.config.int_min <= n <= self.config.int_max:
            raise ValueError(
                f"Fixed-point value {n} outside signed {self.config.width}-bit range "
                f"[{self.config.int_min}, {self.config.int_max}]"
            )

        return from_fixed(n, self.config.scale)

    def is_encodable(self, x: float) -> bool:
        """Можно ли закодировать x без переполнения."""
        if not math.isfinite(x):
            return False

        try:
            n = round(math.ldexp(x, self.config.scale))
        except OverflowError:
            return False

        return self.config.int_min <= n <= self.config.int_max
