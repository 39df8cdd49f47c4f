"""Built-in trade converters and their default registration."""

from collections.abc import Collection

from villager_trades.core.converter_registry import ConverterRegistry

from .base_converter import BaseTradeConverter
from .enchantment_trades import EnchantItemConverter, SellSingleEnchantmentConverter
from .special_trades import (
    SellDyedArmorConverter,
    SellMapConverter,
    SellPotionContainerConverter,
)
from .stack_trades import (
    BuyItemConverter,
    DimensionSellStackConverter,
    ProcessItemConverter,
    SellStackConverter,
)

DEFAULT_CONVERTERS: tuple[type[BaseTradeConverter], ...] = (
    SellStackConverter,
    DimensionSellStackConverter,
    SellMapConverter,
    SellSingleEnchantmentConverter,
    EnchantItemConverter,
    ProcessItemConverter,
    SellDyedArmorConverter,
    SellPotionContainerConverter,
    BuyItemConverter,
)


def register_default_converters(
    registry: ConverterRegistry, known_items: Collection[str] | None = None
) -> None:
    """Register all built-in converters with ``registry``."""
    for converter_class in DEFAULT_CONVERTERS:
        registry.register(
            converter_class.kind_id(), converter_class(known_items=known_items)
        )


__all__ = [
    "BaseTradeConverter",
    "BuyItemConverter",
    "DEFAULT_CONVERTERS",
    "DimensionSellStackConverter",
    "EnchantItemConverter",
    "ProcessItemConverter",
    "SellDyedArmorConverter",
    "SellMapConverter",
    "SellPotionContainerConverter",
    "SellSingleEnchantmentConverter",
    "SellStackConverter",
    "register_default_converters",
]
