import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .context import DeserializationContext
from .converter_registry import ConverterRegistry
from .diagnostics import Diagnostic, DiagnosticSink
from .exceptions import (
    DocumentError,
    EntryError,
    MalformedDocumentError,
    MissingKindError,
    NotAnObjectError,
    TradeCatalogError,
    UnknownKindError,
    UnknownProfessionError,
    UnknownTierError,
)
from .identifier import Identifier
from .protocols import TradeHost
from .settings import TIER_LEVELS, LoaderSettings

logger = logging.getLogger(__name__)

TradeConsumer = Callable[[int, Any], None]


@dataclass(frozen=True)
class CatalogDocument:
    """One parsed catalog: where it came from and its generic data tree."""

    source: str
    data: Any


@dataclass
class LoadResult:
    """Outcome of loading a single catalog document."""

    source: str
    registered: int = 0
    failed_entries: int = 0
    aborted: bool = False
    diagnostics: list[Diagnostic] = field(default_factory=list)


class CatalogLoader:
    """
    Walks one catalog document and registers its trades with the host.

    The walk resolves the profession, validates every tier key, then converts
    each entry through the converter registry. A broken entry is recorded
    and skipped; a broken document is recorded once and abandoned. Nothing
    raised for document content escapes :meth:`load`.
    """

    def __init__(
        self,
        registry: ConverterRegistry,
        sink: DiagnosticSink,
        context: DeserializationContext | None = None,
        settings: LoaderSettings | None = None,
    ) -> None:
        self.registry = registry
        self.sink = sink
        self.context = context or DeserializationContext()
        self.settings = settings or LoaderSettings()
        self._logger = logger.getChild(self.__class__.__name__)

    def load(self, document: CatalogDocument, host: TradeHost) -> LoadResult:
        """
        Load one catalog document.

        Args:
            document: The parsed document and its source name
            host: Receiver of the converted trade factories

        Returns:
            Counts of registered and failed entries for this document
        """
        result = LoadResult(source=document.source)

        self.context.reset()
        self.context.set_source(document.source)

        self._logger.debug(f"Loading trade catalog: {document.source}")

        try:
            data = self._require_mapping(document.data, "document")
            consumer = self._select_consumer(data, host)
            self._deserialize_trades(data, consumer, result)
        except DocumentError as e:
            result.aborted = True
            self._record(e, result)

        self._logger.info(
            f"Loaded {result.registered} trade(s) from {document.source}"
            + (f", {result.failed_entries} failed" if result.failed_entries else "")
            + (" (aborted)" if result.aborted else "")
        )
        return result

    def _select_consumer(self, data: dict[str, Any], host: TradeHost) -> TradeConsumer:
        """Resolve the profession and bind the matching host callback."""
        raw_profession = data.get("profession")
        if not isinstance(raw_profession, str):
            raise MalformedDocumentError(
                f"{raw_profession!r} is not a valid profession", "profession"
            )

        profession_id = Identifier.try_parse(
            raw_profession, self.settings.default_namespace
        )
        if profession_id is None:
            raise MalformedDocumentError(
                f"'{raw_profession}' is not a valid profession identifier",
                "profession",
            )

        self.context.set_profession(str(profession_id))

        if profession_id.path == self.settings.wandering_profession:
            return lambda _tier, factory: host.register_unleveled(factory)

        profession = host.resolve_profession(profession_id)
        if profession is None:
            raise UnknownProfessionError(str(profession_id))

        return lambda tier, factory: host.register_leveled(profession, tier, factory)

    def _deserialize_trades(
        self, data: dict[str, Any], consumer: TradeConsumer, result: LoadResult
    ) -> None:
        trades = data.get("trades")
        if not isinstance(trades, dict):
            raise MalformedDocumentError(f"{trades!r} is not an object", "trades")

        # All tiers are validated before the first registration.
        tiers: list[tuple[int, list[Any]]] = []
        for tier_name, entries in trades.items():
            level = TIER_LEVELS.get(tier_name)
            if level is None:
                raise UnknownTierError(str(tier_name), list(TIER_LEVELS))
            if not isinstance(entries, list):
                raise MalformedDocumentError(
                    f"{entries!r} is not a list", f"trades.{tier_name}"
                )
            tiers.append((level, entries))

        for level, entries in tiers:
            for entry in entries:
                self.context.set_tier(level)
                self.context.set_entry(entry)

                try:
                    factory = self._convert_entry(entry)
                except EntryError as e:
                    result.failed_entries += 1
                    self._record(e, result)
                    continue

                consumer(level, factory)
                result.registered += 1

    def _convert_entry(self, entry: Any) -> Any:
        if not isinstance(entry, dict):
            raise NotAnObjectError(f"{entry!r} is not an object")

        if "kind" not in entry:
            raise MissingKindError()

        kind = entry["kind"]
        converter = self.registry.lookup(kind) if isinstance(kind, str) else None
        if converter is None:
            raise UnknownKindError(kind)

        return converter.convert(entry, self.context)

    def _require_mapping(self, value: Any, field_name: str) -> dict[str, Any]:
        if not isinstance(value, dict):
            raise MalformedDocumentError(f"{value!r} is not an object", field_name)
        return value

    def _record(self, error: TradeCatalogError, result: LoadResult) -> None:
        diagnostic = Diagnostic.from_error(error, self.context)
        self.sink.record(diagnostic)
        result.diagnostics.append(diagnostic)
