"""Unit tests for the built-in trade converters."""

from __future__ import annotations

from typing import Any

import pydantic
import pytest

from villager_trades.converters import (
    DEFAULT_CONVERTERS,
    BuyItemConverter,
    DimensionSellStackConverter,
    EnchantItemConverter,
    ProcessItemConverter,
    SellDyedArmorConverter,
    SellMapConverter,
    SellPotionContainerConverter,
    SellSingleEnchantmentConverter,
    SellStackConverter,
    register_default_converters,
)
from villager_trades.core.context import DeserializationContext
from villager_trades.core.converter_registry import ConverterRegistry
from villager_trades.core.exceptions import ConversionError
from villager_trades.models import ItemStackSpec


def _entry(kind: str, **fields: Any) -> dict[str, Any]:
    return {"kind": f"numismatic-overhaul:{kind}", "price": 10, **fields}


class TestDefaults:
    def test_all_nine_kinds_registered(self) -> None:
        reg = ConverterRegistry()
        register_default_converters(reg)

        assert reg.available_kinds() == sorted(
            f"numismatic-overhaul:{k}"
            for k in (
                "sell_stack",
                "dimension_sell_stack",
                "sell_map",
                "sell_single_enchantment",
                "enchant_item",
                "process_item",
                "sell_dyed_armor",
                "sell_potion_container",
                "buy_item",
            )
        )
        assert len(DEFAULT_CONVERTERS) == 9


class TestSellStack:
    def test_shorthand_item_and_defaults(self) -> None:
        factory = SellStackConverter().convert(_entry("sell_stack", sell="diamond"))

        assert factory.sell == ItemStackSpec(item="minecraft:diamond", count=1)
        assert factory.price == 10
        assert factory.max_uses == 12
        assert factory.villager_experience == 2
        assert factory.price_multiplier == pytest.approx(0.05)

    def test_does_not_touch_context(self) -> None:
        ctx = DeserializationContext("mod:f", "minecraft:mason", 2, {"x": 1})
        SellStackConverter().convert(_entry("sell_stack", sell="stone"), ctx)
        assert ctx == DeserializationContext("mod:f", "minecraft:mason", 2, {"x": 1})

    def test_missing_field_is_named(self) -> None:
        with pytest.raises(ConversionError, match="'sell' is missing"):
            SellStackConverter().convert(_entry("sell_stack"))

    def test_out_of_range_count(self) -> None:
        with pytest.raises(ConversionError, match="sell.count"):
            SellStackConverter().convert(
                _entry("sell_stack", sell={"item": "stone", "count": 65})
            )

    def test_wrong_value_type(self) -> None:
        with pytest.raises(ConversionError, match="price"):
            SellStackConverter().convert(
                {"kind": "numismatic-overhaul:sell_stack", "sell": "stone", "price": "lots"}
            )

    def test_invalid_item_identifier(self) -> None:
        with pytest.raises(ConversionError, match="Invalid path"):
            SellStackConverter().convert(_entry("sell_stack", sell="Not An Item"))

    def test_unknown_item_with_known_items(self) -> None:
        converter = SellStackConverter(known_items={"minecraft:stone"})
        converter.convert(_entry("sell_stack", sell="stone"))
        with pytest.raises(ConversionError, match="Unknown item 'minecraft:bedrock'"):
            converter.convert(_entry("sell_stack", sell="bedrock"))

    def test_message_names_kind(self) -> None:
        with pytest.raises(ConversionError) as exc:
            SellStackConverter().convert(_entry("sell_stack", price=-1, sell="stone"))
        assert str(exc.value).startswith("Invalid numismatic-overhaul:sell_stack trade")


class TestOtherKinds:
    def test_dimension_sell_stack(self) -> None:
        factory = DimensionSellStackConverter().convert(
            _entry("dimension_sell_stack", sell="netherrack", dimension="the_nether")
        )
        assert factory.dimension == "minecraft:the_nether"

    def test_sell_map(self) -> None:
        factory = SellMapConverter().convert(
            _entry("sell_map", structure="monument", name="Ocean Map")
        )
        assert factory.structure == "minecraft:monument"
        assert factory.name == "Ocean Map"

    def test_single_enchantment_optional_fields(self) -> None:
        conv = SellSingleEnchantmentConverter()
        assert conv.convert(_entry("sell_single_enchantment")).enchantment is None
        with pytest.raises(ConversionError, match="'level' requires 'enchantment'"):
            conv.convert(_entry("sell_single_enchantment", level=2))

    def test_enchant_item_level_bounds_and_treasure(self) -> None:
        conv = EnchantItemConverter()
        factory = conv.convert(_entry("enchant_item", item="diamond_sword", level=30))
        assert factory.level == 30
        with pytest.raises(ConversionError, match="level"):
            conv.convert(_entry("enchant_item", item="diamond_sword", level=31))
        with pytest.raises(ConversionError, match="Treasure"):
            conv.convert(
                _entry("enchant_item", item="book", level=2, allow_treasure=True)
            )

    def test_process_item(self) -> None:
        conv = ProcessItemConverter()
        factory = conv.convert(
            _entry("process_item", buy={"item": "cod", "count": 6}, sell="cooked_cod")
        )
        assert factory.buy.count == 6
        with pytest.raises(ConversionError, match="must change"):
            conv.convert(_entry("process_item", buy="cod", sell="cod"))

    def test_sell_dyed_armor_requires_dyeable_item(self) -> None:
        conv = SellDyedArmorConverter()
        factory = conv.convert(_entry("sell_dyed_armor", item="leather_boots"))
        assert factory.item == "minecraft:leather_boots"
        with pytest.raises(ConversionError, match="cannot be dyed"):
            conv.convert(_entry("sell_dyed_armor", item="iron_boots"))

    def test_sell_potion_container(self) -> None:
        conv = SellPotionContainerConverter()
        factory = conv.convert(
            _entry(
                "sell_potion_container",
                container={"item": "arrow", "count": 5},
                buy="arrow",
            )
        )
        assert factory.container.count == 5
        with pytest.raises(ConversionError, match="cannot hold a potion"):
            conv.convert(_entry("sell_potion_container", container="stone", buy="arrow"))

    def test_buy_item(self) -> None:
        factory = BuyItemConverter().convert(
            _entry("buy_item", buy={"item": "wheat", "count": 20}, max_uses=16)
        )
        assert factory.buy.item == "minecraft:wheat"
        assert factory.max_uses == 16

    def test_factories_are_frozen(self) -> None:
        factory = BuyItemConverter().convert(_entry("buy_item", buy="wheat"))
        with pytest.raises(pydantic.ValidationError):
            factory.price = 1  # type: ignore[misc]
