"""In-memory trade host used by the CLI and by tests."""

import logging
from collections import defaultdict
from collections.abc import Iterable
from typing import Any, Final

from villager_trades.core.identifier import Identifier

logger = logging.getLogger(__name__)

VANILLA_PROFESSIONS: Final[tuple[str, ...]] = (
    "armorer",
    "butcher",
    "cartographer",
    "cleric",
    "farmer",
    "fisherman",
    "fletcher",
    "leatherworker",
    "librarian",
    "mason",
    "shepherd",
    "toolsmith",
    "weaponsmith",
)


class InMemoryTradeRegistry:
    """
    Records trades per profession and tier.

    Professions are plain identifiers; anything not in ``professions`` is
    reported as unknown to the loader.
    """

    def __init__(self, professions: Iterable[str] | None = None):
        names = VANILLA_PROFESSIONS if professions is None else professions
        self.professions: set[Identifier] = {Identifier.parse(p) for p in names}
        self.leveled: dict[Identifier, dict[int, list[Any]]] = defaultdict(
            lambda: defaultdict(list)
        )
        self.wandering: list[Any] = []

    def resolve_profession(self, profession_id: Identifier) -> Identifier | None:
        return profession_id if profession_id in self.professions else None

    def register_leveled(self, profession: Identifier, tier: int, factory: Any) -> None:
        self.leveled[profession][tier].append(factory)
        logger.debug(f"Registered level {tier} trade for {profession}")

    def register_unleveled(self, factory: Any) -> None:
        self.wandering.append(factory)
        logger.debug("Registered wandering trader trade")

    def trades_for(self, profession: str, tier: int) -> list[Any]:
        """Trades recorded for ``profession`` at ``tier``."""
        return list(self.leveled.get(Identifier.parse(profession), {}).get(tier, []))

    def total(self) -> int:
        leveled = sum(len(t) for tiers in self.leveled.values() for t in tiers.values())
        return leveled + len(self.wandering)

    def clear(self) -> None:
        """Drop every recorded trade before a fresh reload."""
        self.leveled.clear()
        self.wandering.clear()
