"""
Core math modules

Чистые функции над примитивными числами: нормализация, fixed-point,
битовое представление IEEE 754.
"""

# Range Mapper
from src.core.math.range_mapper import (
    denormalize,
    is_unit_interval,
    normalize,
)

# Fixed Point Codec
from src.core.math.fixed_point import (
    FixedPointCodec,
    encode_fixed,
    from_fixed,
    to_fixed,
)

# Bit Inspector
from src.core.math.float_bits import (
    BINARY32,
    BINARY64,
    FloatBits,
    FloatLayout,
    bits_of,
    decompose_bits,
    dump_bits,
    float_from_bits,
    format_fields,
    layout_for,
    parse_bits,
    raw_bits,
    render_bits,
    to_float32,
)

__all__ = [
    # Range Mapper
    "normalize",
    "denormalize",
    "is_unit_interval",
    # Fixed Point Codec
    "FixedPointCodec",
    "encode_fixed",
    "to_fixed",
    "from_fixed",
    # Bit Inspector, Layouts
    "BINARY32",
    "BINARY64",
    "FloatLayout",
    "layout_for",
    # Bit Inspector, Types
    "FloatBits",
    # Bit Inspector, Functions
    "bits_of",
    "decompose_bits",
    "raw_bits",
    "float_from_bits",
    "to_float32",
    "render_bits",
    "parse_bits",
    "format_fields",
    "dump_bits",
]
