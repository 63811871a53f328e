"""
Тесты для RangeMapper и PriceRange

Проверяет:
1. Инвариант PriceRange (min < max, конечные границы и span)
2. Immutability PriceRange
3. Корректность normalize / denormalize на границах и внутри диапазона
4. Экстраполяцию за пределы [min, max]
5. Round-trip denormalize(normalize(x)) == x с точностью float
"""

import math
import random

import pytest
from pydantic import ValidationError

from src.core.domain import DEFAULT_PRICE_RANGE, PriceRange
from src.core.errors import ConfigurationError
from src.core.math.range_mapper import denormalize, is_unit_interval, normalize


@pytest.fixture
def price_range() -> PriceRange:
    """Диапазон цены исходной конфигурации: [240, 60000]."""
    return PriceRange(min=240.0, max=60000.0)


# =============================================================================
# ТЕСТЫ PRICE RANGE
# =============================================================================


class TestPriceRange:
    """Тесты модели PriceRange"""

    def test_valid_range(self) -> None:
        """Корректный диапазон создаётся"""
        r = PriceRange(min=240.0, max=60000.0)
        assert r.min == 240.0
        assert r.max == 60000.0
        assert r.span == 59760.0

    def test_reversed_range_rejected(self) -> None:
        """min > max: ошибка конфигурации"""
        with pytest.raises(ConfigurationError, match="min < max"):
            PriceRange(min=60000.0, max=240.0)

    def test_empty_range_rejected(self) -> None:
        """min == max: ошибка конфигурации (деление на ноль)"""
        with pytest.raises(ConfigurationError, match="min < max"):
            PriceRange(min=100.0, max=100.0)

    def test_non_finite_bounds_rejected(self) -> None:
        """NaN/Inf границы: ошибка конфигурации"""
        with pytest.raises(ConfigurationError, match="finite"):
            PriceRange(min=float("nan"), max=1.0)

        with pytest.raises(ConfigurationError, match="finite"):
            PriceRange(min=0.0, max=float("inf"))

        with pytest.raises(ConfigurationError, match="finite"):
            PriceRange(min=float("-inf"), max=0.0)

    def test_overflowing_span_rejected(self) -> None:
        """Конечные границы, но max - min переполняется до inf"""
        with pytest.raises(ConfigurationError, match="span"):
            PriceRange(min=-1e308, max=1e308)

        with pytest.raises(ConfigurationError, match="span"):
            PriceRange(min=-1.7e308, max=1.7e308)

    def test_wide_finite_span_roundtrip(self) -> None:
        """Широкий, но конечный span не даёт NaN при round-trip"""
        r = PriceRange(min=-8e307, max=8e307)
        assert math.isfinite(r.span)
        back = denormalize(normalize(5.0, r), r)
        assert math.isfinite(back)
        assert back == pytest.approx(5.0, abs=1e-9 * r.span)

    def test_configuration_error_not_wrapped(self) -> None:
        """ConfigurationError не превращается в pydantic ValidationError"""
        with pytest.raises(ConfigurationError) as exc_info:
            PriceRange(min=1.0, max=0.0)
        assert not isinstance(exc_info.value, ValidationError)

    def test_wrong_type_rejected_by_pydantic(self) -> None:
        """Нечисловые границы отклоняет pydantic"""
        with pytest.raises(ValidationError):
            PriceRange(min="cheap", max=1.0)

    def test_immutable(self) -> None:
        """Модель frozen: изменение запрещено"""
        r = PriceRange(min=0.0, max=1.0)
        with pytest.raises(ValidationError):
            r.min = 0.5

    def test_contains(self, price_range: PriceRange) -> None:
        """contains включает границы"""
        assert price_range.contains(240.0)
        assert price_range.contains(60000.0)
        assert price_range.contains(12345.0)
        assert not price_range.contains(239.99)
        assert not price_range.contains(60000.01)

    def test_default_range(self) -> None:
        """Диапазон по умолчанию [240, 60000]"""
        assert DEFAULT_PRICE_RANGE.min == 240.0
        assert DEFAULT_PRICE_RANGE.max == 60000.0

    def test_independent_ranges_coexist(self) -> None:
        """Несколько диапазонов не влияют друг на друга"""
        a = PriceRange(min=0.0, max=1.0)
        b = PriceRange(min=-100.0, max=100.0)
        assert normalize(0.5, a) == 0.5
        assert normalize(0.5, b) == pytest.approx(0.5025)
        assert normalize(0.5, a) == 0.5


# =============================================================================
# ТЕСТЫ NORMALIZE / DENORMALIZE
# =============================================================================


class TestNormalize:
    """Тесты для normalize"""

    def test_bounds_map_to_unit_interval(self, price_range: PriceRange) -> None:
        """min → 0, max → 1"""
        assert normalize(240.0, price_range) == 0.0
        assert normalize(60000.0, price_range) == 1.0

    def test_midpoint(self, price_range: PriceRange) -> None:
        """Середина диапазона → 0.5"""
        assert normalize(30120.0, price_range) == 0.5

    def test_value_near_min(self, price_range: PriceRange) -> None:
        """Цена чуть выше min даёт малое положительное значение"""
        y = normalize(242.0, price_range)
        assert y == pytest.approx(2.0 / 59760.0)
        assert 0.0 < y < 1e-4

    def test_below_min_extrapolates(self, price_range: PriceRange) -> None:
        """Цена ниже min → отрицательное значение, без ошибки"""
        y = normalize(0.0, price_range)
        assert y == pytest.approx(-240.0 / 59760.0)
        assert y < 0.0

    def test_above_max_extrapolates(self, price_range: PriceRange) -> None:
        """Цена выше max → значение > 1, без ошибки"""
        y = normalize(119760.0, price_range)
        assert y == pytest.approx(2.0)

    def test_unit_range_is_identity(self) -> None:
        """Диапазон [0, 1]: тождественное отображение"""
        unit = PriceRange(min=0.0, max=1.0)
        for x in (0.0, 0.25, 0.5, 1.0, -3.0, 7.5):
            assert normalize(x, unit) == x
            assert denormalize(x, unit) == x

    def test_nan_propagates(self, price_range: PriceRange) -> None:
        """NaN проходит насквозь по правилам IEEE 754"""
        assert math.isnan(normalize(float("nan"), price_range))
        assert math.isnan(denormalize(float("nan"), price_range))


class TestDenormalize:
    """Тесты для denormalize"""

    def test_unit_bounds_map_to_range(self, price_range: PriceRange) -> None:
        """0 → min, 1 → max"""
        assert denormalize(0.0, price_range) == 240.0
        assert denormalize(1.0, price_range) == 60000.0

    def test_outside_unit_interval(self, price_range: PriceRange) -> None:
        """Значения вне [0, 1] экстраполируются"""
        assert denormalize(2.0, price_range) == pytest.approx(119760.0)
        assert denormalize(-1.0, price_range) == pytest.approx(-59520.0)


class TestRoundTrip:
    """Инвариант: denormalize(normalize(x)) ≈ x"""

    @pytest.mark.parametrize(
        "x",
        [240.0, 242.0, 12345.0, 12346.0, 59999.99, 60000.0, 0.0, -1e6, 1e9, 0.123456789],
    )
    def test_roundtrip_fixed_values(self, price_range: PriceRange, x: float) -> None:
        """Фиксированные значения внутри и вне диапазона"""
        assert denormalize(normalize(x, price_range), price_range) == pytest.approx(
            x, rel=1e-9, abs=1e-9
        )

    def test_roundtrip_random_values(self) -> None:
        """Детерминированная выборка значений и диапазонов"""
        rng = random.Random(616)
        for _ in range(1000):
            lo = rng.uniform(-1e6, 1e6)
            hi = lo + rng.uniform(1e-3, 1e6)
            r = PriceRange(min=lo, max=hi)
            x = rng.uniform(lo - (hi - lo), hi + (hi - lo))
            back = denormalize(normalize(x, r), r)
            assert back == pytest.approx(x, rel=1e-9, abs=1e-9 * (hi - lo))


class TestIsUnitInterval:
    """Тесты для is_unit_interval"""

    def test_inside(self) -> None:
        assert is_unit_interval(0.0)
        assert is_unit_interval(0.5)
        assert is_unit_interval(1.0)

    def test_outside(self) -> None:
        assert not is_unit_interval(-1e-12)
        assert not is_unit_interval(1.0000001)
        assert not is_unit_interval(float("nan"))
