"""
RangeMapper — Аффинная нормализация цены

Отображение между ограниченным доменом [min, max] и единичным интервалом:
    normalize(x)   = (x - min) / (max - min)
    denormalize(y) = y * (max - min) + min

Функции принимают любые конечные значения, в том числе вне [min, max] / [0, 1],
и экстраполируют. Выход за [0, 1] не ошибка, решение принимает вызывающий
код (см. is_unit_interval).

Единственный путь ошибки: инвариант PriceRange (min < max), проверяемый
при создании диапазона.
"""

from src.core.domain.price_range import PriceRange


def normalize(x: float, price_range: PriceRange) -> float:
    """
    Нормализация цены в единичный интервал.

    Args:
        x: Цена (любое конечное значение)
        price_range: Диапазон цены

    Returns:
        (x - min) / (max - min); в [0, 1] если x в [min, max]

    Examples:
        >>> normalize(240.0, PriceRange(min=240.0, max=60000.0))
        0.0
        >>> normalize(60000.0, PriceRange(min=240.0, max=60000.0))
        1.0
    """
    return (x - price_range.min) / (price_range.max - price_range.min)


def denormalize(y: float, price_range: PriceRange) -> float:
    """
    Обратное отображение из единичного интервала в цену.

    Args:
        y: Нормализованное значение (любое конечное)
        price_range: Диапазон цены

    Returns:
        y * (max - min) + min
    """
    return y * (price_range.max - price_range.min) + price_range.min


def is_unit_interval(y: float) -> bool:
    """Лежит ли нормализованное значение в [0, 1]."""
    return 0.0 <= y <= 1.0
