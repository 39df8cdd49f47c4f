from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .catalog_loader import CatalogDocument
    from .context import DeserializationContext
    from .diagnostics import ReportEntry
    from .identifier import Identifier


class TradeConverter(Protocol):
    """Defines the contract for turning one trade entry into a trade factory."""

    def convert(
        self,
        entry: dict[str, Any],
        context: "DeserializationContext | None" = None,
    ) -> Any:
        """
        Convert a single trade entry into a host trade factory.

        Args:
            entry: The raw entry mapping, including its ``kind`` field
            context: The loader's current location; read-only for converters

        Returns:
            The trade factory the host will register

        Raises:
            ConversionError: If the entry is invalid for this kind
        """
        ...


class TradeHost(Protocol):
    """Defines the host side that accepts converted trade factories."""

    def resolve_profession(self, profession_id: "Identifier") -> Any | None:
        """
        Look up a villager profession.

        Returns:
            The host's profession object, or None if it is unknown
        """
        ...

    def register_leveled(self, profession: Any, tier: int, factory: Any) -> None:
        """Record a trade for ``profession`` at ``tier`` (1-5)."""
        ...

    def register_unleveled(self, factory: Any) -> None:
        """Record a wandering trader trade."""
        ...


class DiagnosticAudience(Protocol):
    """Defines a recipient of rendered diagnostic reports."""

    def send(self, header: str, entries: Sequence["ReportEntry"]) -> None:
        """
        Present one report to this audience.

        Args:
            header: Report headline
            entries: One rendered entry per diagnostic, in recording order
        """
        ...


class DocumentSource(Protocol):
    """Defines a provider of parsed catalog documents for one reload."""

    def discover(self) -> list[str]:
        """
        List the source names of every available catalog.

        Returns:
            Source names in the order they should be loaded
        """
        ...

    def read(self, source: str) -> "CatalogDocument":
        """
        Read and parse one catalog.

        Raises:
            CatalogReadError: If the catalog cannot be read or parsed
        """
        ...
