"""Converters for enchanted book and enchanted item trades."""

from villager_trades.core.exceptions import ConversionError
from villager_trades.models.trade_factories import (
    EnchantItemFactory,
    SellSingleEnchantmentFactory,
)

from .base_converter import BaseTradeConverter

# Lowest enchanting level at which treasure enchantments may be rolled.
MIN_TREASURE_LEVEL = 5


class SellSingleEnchantmentConverter(BaseTradeConverter):
    """Convert a 'sell_single_enchantment' entry into an enchanted book trade."""

    factory_model = SellSingleEnchantmentFactory


class EnchantItemConverter(BaseTradeConverter):
    """Convert an 'enchant_item' entry into an EnchantItemFactory."""

    factory_model = EnchantItemFactory

    def _check(self, factory: EnchantItemFactory) -> None:
        if factory.allow_treasure and factory.level < MIN_TREASURE_LEVEL:
            raise ConversionError(
                f"Treasure enchantments need at least level {MIN_TREASURE_LEVEL}, "
                f"got {factory.level}"
            )
