"""Reload service coordinating catalog loads and diagnostic delivery."""

import logging
from collections.abc import Collection, Iterable, Iterator
from dataclasses import dataclass, field

from .catalog_loader import CatalogDocument, CatalogLoader, LoadResult
from .context import DeserializationContext
from .converter_registry import ConverterRegistry
from .diagnostics import Diagnostic, DiagnosticSink
from .exceptions import CatalogReadError
from .protocols import DiagnosticAudience, DocumentSource, TradeHost
from .settings import LoaderSettings

logger = logging.getLogger(__name__)


@dataclass
class ReloadSummary:
    """Aggregated outcome of one reload cycle."""

    results: list[LoadResult] = field(default_factory=list)

    @property
    def documents(self) -> int:
        return len(self.results)

    @property
    def registered(self) -> int:
        return sum(r.registered for r in self.results)

    @property
    def failed_entries(self) -> int:
        return sum(r.failed_entries for r in self.results)

    @property
    def aborted_documents(self) -> int:
        return sum(1 for r in self.results if r.aborted)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return [d for r in self.results for d in r.diagnostics]


class TradeReloadService:
    """
    Owns the converter registry, the deserialization context and the
    diagnostic sink for one host.

    Documents are loaded strictly one after another: they share a single
    context, so concurrent loads on the same service are not supported.
    """

    def __init__(
        self,
        registry: ConverterRegistry | None = None,
        settings: LoaderSettings | None = None,
    ):
        """
        Initialize the reload service.

        Args:
            registry: Converter registry to use; a fresh empty one by default
            settings: Loader settings shared with the catalog loader
        """
        self.settings = settings or LoaderSettings()
        self.registry = registry or ConverterRegistry(self.settings.default_namespace)
        self.context = DeserializationContext()
        self.sink = DiagnosticSink()
        self.loader = CatalogLoader(
            self.registry, self.sink, self.context, self.settings
        )
        self._logger = logger.getChild(self.__class__.__name__)

    def register_defaults(self, known_items: Collection[str] | None = None) -> None:
        """Register the built-in trade kinds."""
        # Import here to avoid circular imports
        from villager_trades.converters import register_default_converters

        register_default_converters(self.registry, known_items=known_items)

    def load_document(self, document: CatalogDocument, host: TradeHost) -> LoadResult:
        """Load a single document; never raises for problems in its content."""
        return self.loader.load(document, host)

    def reload(
        self, documents: Iterable[CatalogDocument], host: TradeHost
    ) -> ReloadSummary:
        """
        Run one reload cycle over ``documents``.

        Diagnostics left over from a previous cycle that were never flushed
        are discarded first.

        Args:
            documents: Parsed catalogs, loaded in iteration order
            host: Receiver of the converted trade factories

        Returns:
            Per-document results for the cycle
        """
        if not self.sink.is_empty():
            self._logger.warning(
                f"Discarding {len(self.sink)} undelivered diagnostic(s) "
                "from the previous reload"
            )
            self.sink.clear()

        self._logger.info("Starting trade reload")
        summary = ReloadSummary()
        for document in documents:
            summary.results.append(self.load_document(document, host))

        self._logger.info(
            f"Trade reload completed: {summary.registered} trade(s) from "
            f"{summary.documents} document(s), {len(self.sink)} diagnostic(s)"
        )
        return summary

    def reload_from(self, source: DocumentSource, host: TradeHost) -> ReloadSummary:
        """
        Run one reload cycle over every document a source yields.

        A document the source cannot read is recorded as a diagnostic and the
        reload moves on to the next one.
        """
        return self.reload(self._read_documents(source), host)

    def flush_diagnostics(self, audiences: Iterable[DiagnosticAudience]) -> int:
        """Deliver and clear the collected diagnostics."""
        return self.sink.drain_and_deliver(audiences)

    def _read_documents(self, source: DocumentSource) -> Iterator[CatalogDocument]:
        for name in source.discover():
            try:
                document = source.read(name)
            except CatalogReadError as e:
                self.context.reset()
                self.context.set_source(e.source)
                self.sink.record(Diagnostic.from_error(e, self.context))
                continue
            yield document
