"""
trade_factories.py - Trade factory models
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Validated, immutable descriptions of villager trades. Each built-in trade kind
has one model; a converter validates a raw catalog entry against it and hands
the resulting instance to the host.
"""

from typing import Annotated, Any, ClassVar, Final

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
)

from villager_trades.core.identifier import normalize_identifier

KIND_NAMESPACE: Final[str] = "numismatic-overhaul"

ResourceId = Annotated[str, AfterValidator(normalize_identifier)]

DYEABLE_ITEMS: Final[frozenset[str]] = frozenset(
    {
        "minecraft:leather_helmet",
        "minecraft:leather_chestplate",
        "minecraft:leather_leggings",
        "minecraft:leather_boots",
        "minecraft:leather_horse_armor",
    }
)

# ---------------------------------------------------------------------------
# Building blocks
# ---------------------------------------------------------------------------


class ItemStackSpec(BaseModel):
    """An item and a stack size; accepts a bare identifier as shorthand."""

    item: ResourceId
    count: int = Field(default=1, ge=1, le=64)
    tag: str | None = Field(default=None, description="Optional SNBT data tag.")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def _from_shorthand(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"item": data}
        return data


class TradeFactory(BaseModel):
    """Fields shared by every trade kind."""

    kind_path: ClassVar[str] = ""

    kind: ResourceId
    price: int = Field(..., gt=0, description="Price in bronze coins.")
    max_uses: int = Field(default=12, gt=0)
    villager_experience: int = Field(default=2, ge=0)
    price_multiplier: float = Field(default=0.05, ge=0)

    model_config = ConfigDict(frozen=True, extra="ignore")

    @classmethod
    def kind_id(cls) -> str:
        return f"{KIND_NAMESPACE}:{cls.kind_path}"

    def referenced_items(self) -> list[str]:
        """Item identifiers this trade depends on."""
        return []


# ---------------------------------------------------------------------------
# Trade kinds
# ---------------------------------------------------------------------------


class SellStackFactory(TradeFactory):
    """The villager sells a stack of items."""

    kind_path: ClassVar[str] = "sell_stack"

    sell: ItemStackSpec

    def referenced_items(self) -> list[str]:
        return [self.sell.item]


class DimensionSellStackFactory(SellStackFactory):
    """Like ``sell_stack`` but only offered by villagers in one dimension."""

    kind_path: ClassVar[str] = "dimension_sell_stack"

    dimension: ResourceId


class SellMapFactory(TradeFactory):
    """The villager sells an explorer map pointing at a structure."""

    kind_path: ClassVar[str] = "sell_map"

    structure: ResourceId
    name: str | None = None


class SellSingleEnchantmentFactory(TradeFactory):
    """The villager sells an enchanted book with a single enchantment."""

    kind_path: ClassVar[str] = "sell_single_enchantment"

    enchantment: ResourceId | None = Field(
        default=None, description="Fixed enchantment; random when omitted."
    )
    level: int | None = Field(default=None, ge=1, le=10)

    @model_validator(mode="after")
    def _level_needs_enchantment(self) -> "SellSingleEnchantmentFactory":
        if self.level is not None and self.enchantment is None:
            raise ValueError("'level' requires 'enchantment'")
        return self


class EnchantItemFactory(TradeFactory):
    """The villager sells an item enchanted at the given level."""

    kind_path: ClassVar[str] = "enchant_item"

    item: ResourceId
    level: int = Field(..., ge=1, le=30)
    allow_treasure: bool = False

    def referenced_items(self) -> list[str]:
        return [self.item]


class ProcessItemFactory(TradeFactory):
    """The villager turns one stack into another for a fee."""

    kind_path: ClassVar[str] = "process_item"

    buy: ItemStackSpec
    sell: ItemStackSpec

    def referenced_items(self) -> list[str]:
        return [self.buy.item, self.sell.item]


class SellDyedArmorFactory(TradeFactory):
    """The villager sells a randomly dyed piece of leather armor."""

    kind_path: ClassVar[str] = "sell_dyed_armor"

    item: ResourceId

    @model_validator(mode="after")
    def _dyeable(self) -> "SellDyedArmorFactory":
        if self.item not in DYEABLE_ITEMS:
            raise ValueError(f"'{self.item}' cannot be dyed")
        return self

    def referenced_items(self) -> list[str]:
        return [self.item]


class SellPotionContainerFactory(TradeFactory):
    """The villager fills a container (arrows, bottles) with a random potion."""

    kind_path: ClassVar[str] = "sell_potion_container"

    container: ItemStackSpec
    buy: ItemStackSpec

    def referenced_items(self) -> list[str]:
        return [self.container.item, self.buy.item]


class BuyItemFactory(TradeFactory):
    """The villager buys a stack of items and pays ``price``."""

    kind_path: ClassVar[str] = "buy_item"

    buy: ItemStackSpec

    def referenced_items(self) -> list[str]:
        return [self.buy.item]
