from typing import Final

from villager_trades.core.exceptions import ConversionError
from villager_trades.models.trade_factories import (
    SellDyedArmorFactory,
    SellMapFactory,
    SellPotionContainerFactory,
)

from .base_converter import BaseTradeConverter

POTION_CONTAINERS: Final[frozenset[str]] = frozenset(
    {
        "minecraft:arrow",
        "minecraft:tipped_arrow",
        "minecraft:glass_bottle",
        "minecraft:potion",
        "minecraft:splash_potion",
        "minecraft:lingering_potion",
    }
)


class SellMapConverter(BaseTradeConverter):
    """Convert a 'sell_map' entry into an explorer map trade."""

    factory_model = SellMapFactory


class SellDyedArmorConverter(BaseTradeConverter):
    """Convert a 'sell_dyed_armor' entry; only leather items can be dyed."""

    factory_model = SellDyedArmorFactory


class SellPotionContainerConverter(BaseTradeConverter):
    """Convert a 'sell_potion_container' entry into a potion-filled item trade."""

    factory_model = SellPotionContainerFactory

    def _check(self, factory: SellPotionContainerFactory) -> None:
        if factory.container.item not in POTION_CONTAINERS:
            raise ConversionError(
                f"'{factory.container.item}' cannot hold a potion. "
                f"Supported containers: {', '.join(sorted(POTION_CONTAINERS))}"
            )
