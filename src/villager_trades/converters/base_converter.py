"""Abstract base class for the built-in trade converters."""

import logging
from abc import ABC
from collections.abc import Collection
from typing import Any, ClassVar

from pydantic import ValidationError

from villager_trades.core.context import DeserializationContext
from villager_trades.core.exceptions import ConversionError
from villager_trades.models.trade_factories import TradeFactory

logger = logging.getLogger(__name__)


class BaseTradeConverter(ABC):
    """
    Base class for converters backed by a trade factory model.

    Validates the raw entry against ``factory_model`` and collapses every
    pydantic validation problem into a single :class:`ConversionError`, so
    the loader only ever has to deal with one failure shape.

    Subclasses must set:
    - factory_model: The pydantic model describing the trade kind

    Subclasses can optionally override:
    - _check(): Extra semantic checks on the validated factory
    """

    factory_model: ClassVar[type[TradeFactory]]

    def __init__(self, known_items: Collection[str] | None = None):
        """
        Initialize the converter.

        Args:
            known_items: Item identifiers the host knows about. When given,
                trades referring to any other item are rejected.
        """
        self.known_items = frozenset(known_items) if known_items is not None else None
        self._logger = logger.getChild(self.__class__.__name__)

    @classmethod
    def kind_id(cls) -> str:
        return cls.factory_model.kind_id()

    def convert(
        self,
        entry: dict[str, Any],
        context: DeserializationContext | None = None,
    ) -> TradeFactory:
        """
        Convert a trade entry into its factory model.

        Args:
            entry: The raw entry mapping
            context: The loader's current location, used for logging only

        Returns:
            The validated trade factory

        Raises:
            ConversionError: If the entry does not describe a valid trade
        """
        if context is not None:
            self._logger.debug(
                f"Converting {self.kind_id()} entry "
                f"(file={context.source}, level={context.tier})"
            )

        try:
            factory = self.factory_model.model_validate(entry)
        except ValidationError as e:
            raise ConversionError(self._describe(e)) from e

        self._check_known_items(factory)
        self._check(factory)
        return factory

    def _check(self, factory: TradeFactory) -> None:
        """Hook for kind-specific checks; raise ConversionError to reject."""
        return None

    def _check_known_items(self, factory: TradeFactory) -> None:
        if self.known_items is None:
            return
        for item in factory.referenced_items():
            if item not in self.known_items:
                raise ConversionError(f"Unknown item '{item}'")

    def _describe(self, error: ValidationError) -> str:
        problems = []
        for detail in error.errors():
            location = ".".join(str(part) for part in detail["loc"])
            if detail["type"] == "missing":
                problems.append(f"'{location}' is missing")
                continue

            message = detail["msg"].removeprefix("Value error, ")
            problems.append(f"{location}: {message}" if location else message)

        return f"Invalid {self.kind_id()} trade: " + "; ".join(problems)
