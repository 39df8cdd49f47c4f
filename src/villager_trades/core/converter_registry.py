"""Converter registry mapping trade kind identifiers to converters."""

import logging

from .identifier import DEFAULT_NAMESPACE, Identifier
from .protocols import TradeConverter

logger = logging.getLogger(__name__)


class ConverterRegistry:
    """
    Registry for the converters of every known trade kind.

    Maps a namespaced kind identifier to the converter that understands
    entries of that kind. It is filled once at startup, before any catalog
    is loaded, and only read afterwards. Not thread-safe.
    """

    def __init__(self, default_namespace: str = DEFAULT_NAMESPACE):
        """
        Initialize an empty registry.

        Args:
            default_namespace: Namespace assumed for kinds written without one
        """
        self._converters: dict[Identifier, TradeConverter] = {}
        self._default_namespace = default_namespace
        self._logger = logger.getChild(self.__class__.__name__)

    def register(self, kind: str | Identifier, converter: TradeConverter) -> None:
        """
        Register a converter for a trade kind.

        A kind that is already registered is replaced; the last registration
        wins.

        Args:
            kind: The kind identifier (e.g., 'numismatic-overhaul:sell_stack')
            converter: The converter instance for this kind

        Raises:
            ValueError: If kind is not a valid identifier or converter is None
        """
        if converter is None:
            raise ValueError("Converter cannot be None")

        kind_id = self._to_identifier(kind)

        if kind_id in self._converters:
            self._logger.warning(
                f"Overwriting existing converter registration for kind '{kind_id}'"
            )

        self._converters[kind_id] = converter
        self._logger.debug(
            f"Registered converter '{converter.__class__.__name__}' "
            f"for kind '{kind_id}'"
        )

    def lookup(self, kind: str | Identifier) -> TradeConverter | None:
        """
        Get the converter for a trade kind.

        Args:
            kind: The kind identifier to look up

        Returns:
            The registered converter, or None if the kind is unknown or the
            identifier is malformed
        """
        if isinstance(kind, Identifier):
            return self._converters.get(kind)

        kind_id = Identifier.try_parse(kind, self._default_namespace)
        if kind_id is None:
            return None
        return self._converters.get(kind_id)

    def available_kinds(self) -> list[str]:
        """
        Get all registered kinds.

        Returns:
            Sorted list of kind identifiers as strings
        """
        return [str(kind) for kind in sorted(self._converters)]

    def __len__(self) -> int:
        """Return the number of registered kinds."""
        return len(self._converters)

    def __contains__(self, kind: object) -> bool:
        """Check if a kind is registered (supports 'in' operator)."""
        if not isinstance(kind, str | Identifier):
            return False
        return self.lookup(kind) is not None

    def _to_identifier(self, kind: str | Identifier) -> Identifier:
        if isinstance(kind, Identifier):
            return kind
        return Identifier.parse(kind, self._default_namespace)
