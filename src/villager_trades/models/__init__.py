from .trade_factories import (
    BuyItemFactory,
    DimensionSellStackFactory,
    EnchantItemFactory,
    ItemStackSpec,
    ProcessItemFactory,
    SellDyedArmorFactory,
    SellMapFactory,
    SellPotionContainerFactory,
    SellSingleEnchantmentFactory,
    SellStackFactory,
    TradeFactory,
)

__all__ = [
    "BuyItemFactory",
    "DimensionSellStackFactory",
    "EnchantItemFactory",
    "ItemStackSpec",
    "ProcessItemFactory",
    "SellDyedArmorFactory",
    "SellMapFactory",
    "SellPotionContainerFactory",
    "SellSingleEnchantmentFactory",
    "SellStackFactory",
    "TradeFactory",
]
