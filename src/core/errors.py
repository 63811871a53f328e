"""
Ошибки кодека цен

Таксономия:
- ConfigurationError: невалидная конфигурация (PriceRange, FixedPointConfig).
  Возникает сразу при создании объекта, автоматически не восстанавливается.
- FixedPointOverflowError: результат fixed-point кодирования не помещается
  в W-битный знаковый контейнер. Никогда не заменяется wrap/truncate.
"""


class ConfigurationError(Exception):
    """
    Невалидная конфигурация кодека.

    Примеры:
    - PriceRange с min >= max
    - FixedPointConfig с scale >= width - 1 (нет бита знака/запаса)

    Не наследуется от ValueError: pydantic пробрасывает исключение из
    валидатора без обёртки в ValidationError.
    """

    pass


class FixedPointOverflowError(OverflowError):
    """
    Переполнение fixed-point контейнера.

    Возникает, когда round(x * 2^scale) выходит за диапазон
    [-2^(W-1), 2^(W-1) - 1].
    """

    def __init__(self, value: float, scale: int, width: int):
        self.value = value
        self.scale = scale
        self.width = width
        super().__init__(
            f"Value {value!r} * 2^{scale} does not fit a signed {width}-bit "
            f"fixed-point container (fixed_point_overflow)"
        )
