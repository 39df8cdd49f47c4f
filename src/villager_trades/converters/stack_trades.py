"""Converters for trades that move plain item stacks."""

from villager_trades.core.exceptions import ConversionError
from villager_trades.models.trade_factories import (
    BuyItemFactory,
    DimensionSellStackFactory,
    ProcessItemFactory,
    SellStackFactory,
)

from .base_converter import BaseTradeConverter


class SellStackConverter(BaseTradeConverter):
    """Convert a 'sell_stack' entry into a SellStackFactory."""

    factory_model = SellStackFactory


class DimensionSellStackConverter(BaseTradeConverter):
    """Convert a 'dimension_sell_stack' entry into a DimensionSellStackFactory."""

    factory_model = DimensionSellStackFactory


class ProcessItemConverter(BaseTradeConverter):
    """Convert a 'process_item' entry into a ProcessItemFactory."""

    factory_model = ProcessItemFactory

    def _check(self, factory: ProcessItemFactory) -> None:
        if factory.buy == factory.sell:
            raise ConversionError(
                f"Processing '{factory.buy.item}' must change the item or count"
            )


class BuyItemConverter(BaseTradeConverter):
    """Convert a 'buy_item' entry into a BuyItemFactory."""

    factory_model = BuyItemFactory
