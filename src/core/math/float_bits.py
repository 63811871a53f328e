"""
BitInspector — Битовое представление IEEE 754 float

Декомпозиция float на поля sign / exponent / mantissa и рендер битового
паттерна в строку для верификации вывода fixed-point кодека.

Форматы:
- binary32: sign 1 бит, exponent 8 бит, mantissa 23 бита, bias 127
- binary64: sign 1 бит, exponent 11 бит, mantissa 52 бита, bias 1023

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Raw-паттерн получается только реинтерпретацией байтов через struct
   при совпадающей ширине (f ↔ I, d ↔ Q), никогда арифметикой над значением
2. Декомпозиция тотальна: любой паттерн валиден (NaN, Inf, -0.0, subnormal)
3. render_bits / parse_bits взаимно обратны на raw-паттерне, строка MSB-first
   ровно width символов (включая signalling NaN любой ширины)
4. Печать (dump_bits) отделена от чистой декомпозиции
"""

import math
import struct
import sys
from dataclasses import dataclass
from typing import Final, TextIO


# =============================================================================
# LAYOUTS
# =============================================================================


@dataclass(frozen=True)
class FloatLayout:
    """Раскладка полей IEEE 754 для одной ширины."""

    width: int
    exponent_bits: int
    mantissa_bits: int

    # struct-коды для реинтерпретации (big-endian, стандартный размер)
    float_code: str
    int_code: str

    @property
    def bias(self) -> int:
        return (1 << (self.exponent_bits - 1)) - 1

    @property
    def exponent_max(self) -> int:
        """Значение поля exponent для Inf/NaN (все единицы)."""
        return (1 << self.exponent_bits) - 1

    @property
    def mantissa_mask(self) -> int:
        return (1 << self.mantissa_bits) - 1


BINARY32: Final[FloatLayout] = FloatLayout(
    width=32, exponent_bits=8, mantissa_bits=23, float_code=">f", int_code=">I"
)
BINARY64: Final[FloatLayout] = FloatLayout(
    width=64, exponent_bits=11, mantissa_bits=52, float_code=">d", int_code=">Q"
)

_LAYOUTS: Final[dict[int, FloatLayout]] = {32: BINARY32, 64: BINARY64}


def layout_for(width: int) -> FloatLayout:
    """
    Раскладка IEEE 754 по ширине.

    Raises:
        ValueError: Если ширина не 32 и не 64
    """
    try:
        return _LAYOUTS[width]
    except KeyError:
        raise ValueError(f"Unsupported float width {width}, expected 32 or 64") from None


# =============================================================================
# FLOAT BITS
# =============================================================================


@dataclass(frozen=True)
class FloatBits:
    """
    Read-only вид на битовый паттерн float.

    Поля: беззнаковые целые, извлечённые из raw-паттерна по раскладке width.
    """

    sign: int
    exponent: int
    mantissa: int
    width: int

    @property
    def layout(self) -> FloatLayout:
        return layout_for(self.width)

    @property
    def raw(self) -> int:
        """Сборка raw-паттерна из полей."""
        layout = self.layout
        return (
            (self.sign << (layout.width - 1))
            | (self.exponent << layout.mantissa_bits)
            | self.mantissa
        )

    @property
    def unbiased_exponent(self) -> int:
        """
        Несмещённый показатель.

        Для zero/subnormal (exponent == 0) возвращает 1 - bias,
        эффективный показатель денормализованных чисел.
        """
        if self.exponent == 0:
            return 1 - self.layout.bias
        return self.exponent - self.layout.bias

    @property
    def is_nan(self) -> bool:
        return self.exponent == self.layout.exponent_max and self.mantissa != 0

    @property
    def is_infinite(self) -> bool:
        return self.exponent == self.layout.exponent_max and self.mantissa == 0

    @property
    def is_zero(self) -> bool:
        return self.exponent == 0 and self.mantissa == 0

    @property
    def is_subnormal(self) -> bool:
        return self.exponent == 0 and self.mantissa != 0

    def to_float(self) -> float:
        """Обратная реинтерпретация в float (см. float_from_bits про binary32 sNaN)."""
        return float_from_bits(self.raw, self.width)


# =============================================================================
# REINTERPRETATION
# =============================================================================


def to_float32(x: float) -> float:
    """
    Ближайшее binary32 значение (round-to-nearest-even).

    Конечные значения за пределами binary32 сужаются до ±Inf,
    как при приведении double → float.

    Examples:
        >>> to_float32(0.1)
        0.10000000149011612
        >>> to_float32(1e39)
        inf
    """
    try:
        packed = struct.pack(BINARY32.float_code, x)
    except OverflowError:
        return math.copysign(math.inf, x)
    return struct.unpack(BINARY32.float_code, packed)[0]


def raw_bits(x: float, width: int = 64) -> int:
    """
    Raw битовый паттерн float как беззнаковое целое.

    Args:
        x: Значение
        width: 32 (сначала сужение до binary32) или 64

    Returns:
        Беззнаковое целое в [0, 2^width)
    """
    layout = layout_for(width)
    try:
        packed = struct.pack(layout.float_code, x)
    except OverflowError:
        packed = struct.pack(layout.float_code, math.copysign(math.inf, x))
    return struct.unpack(layout.int_code, packed)[0]


def float_from_bits(raw: int, width: int = 64) -> float:
    """
    Реинтерпретация raw-паттерна обратно в float.

    Для width=32 значение расширяется до binary64 Python float, и
    signalling NaN binary32 может стать quiet (выставляется старший бит
    mantissa). Точный паттерн такого NaN несёт FloatBits из
    decompose_bits(raw, 32), а не float.

    Raises:
        ValueError: Если raw не помещается в width бит
    """
    layout = layout_for(width)
    _check_raw(raw, width)
    return struct.unpack(layout.float_code, struct.pack(layout.int_code, raw))[0]


def decompose_bits(raw: int, width: int = 64) -> FloatBits:
    """Разбор raw-паттерна на поля sign / exponent / mantissa."""
    layout = layout_for(width)
    _check_raw(raw, width)
    return FloatBits(
        sign=raw >> (layout.width - 1),
        exponent=(raw >> layout.mantissa_bits) & layout.exponent_max,
        mantissa=raw & layout.mantissa_mask,
        width=width,
    )


def bits_of(x: float, width: int = 64) -> FloatBits:
    """
    Декомпозиция float на поля IEEE 754.

    Examples:
        >>> bits_of(1.0, 32)
        FloatBits(sign=0, exponent=127, mantissa=0, width=32)
        >>> bits_of(-2.5, 32)
        FloatBits(sign=1, exponent=128, mantissa=2097152, width=32)
    """
    return decompose_bits(raw_bits(x, width), width)


# =============================================================================
# RENDER / PARSE
# =============================================================================


def render_bits(raw: int, width: int) -> str:
    """
    Рендер raw-паттерна в двоичную строку, MSB-first, ровно width символов.

    Examples:
        >>> render_bits(0x3F800000, 32)
        '00111111100000000000000000000000'
    """
    _check_raw(raw, width)
    return format(raw, f"0{width}b")


def parse_bits(text: str, width: int) -> int:
    """
    Разбор двоичной строки обратно в raw-паттерн.

    Raises:
        ValueError: Если длина != width или есть символы кроме '0'/'1'
    """
    if len(text) != width:
        raise ValueError(f"Bit string must have exactly {width} characters, got {len(text)}")

    if not set(text) <= {"0", "1"}:
        raise ValueError(f"Bit string must contain only '0' and '1', got {text!r}")

    return int(text, 2)


def format_fields(bits: FloatBits) -> str:
    """Группировка полей через пробел: 's eeeeeeee mmm...'."""
    layout = bits.layout
    return " ".join(
        (
            render_bits(bits.sign, 1),
            render_bits(bits.exponent, layout.exponent_bits),
            render_bits(bits.mantissa, layout.mantissa_bits),
        )
    )


def dump_bits(x: float, width: int = 64, file: TextIO | None = None) -> None:
    """
    Диагностическая печать битового представления.

    Единственная функция модуля с side-effect.

    Args:
        x: Значение
        width: 32 или 64
        file: Поток вывода (default: sys.stdout)
    """
    out = file if file is not None else sys.stdout
    bits = bits_of(x, width)
    hex_digits = width // 4

    print(f"value     {x!r}", file=out)
    print(f"hex       0x{bits.raw:0{hex_digits}x}", file=out)
    print(f"sign      {bits.sign}", file=out)
    print(f"exponent  {bits.exponent} (unbiased {bits.unbiased_exponent})", file=out)
    print(f"mantissa  0x{bits.mantissa:x}", file=out)
    print(f"fields    {format_fields(bits)}", file=out)
    print(f"bits      {render_bits(bits.raw, width)}", file=out)


def _check_raw(raw: int, width: int) -> None:
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")

    if not 0 <= raw < (1 << width):
        raise ValueError(f"Raw bit pattern {raw} does not fit {width} bits")
