"""Price codec: диапазон цены + fixed-point контейнер."""

from src.core.codec.price_codec import PriceCodec

__all__ = ["PriceCodec"]
