"""Profession trade catalogs: converter registry, document loader and diagnostics."""

from villager_trades.core.catalog_loader import CatalogDocument, CatalogLoader
from villager_trades.core.context import ContextSnapshot, DeserializationContext
from villager_trades.core.converter_registry import ConverterRegistry
from villager_trades.core.diagnostics import Diagnostic, DiagnosticSink
from villager_trades.core.reload_service import TradeReloadService
from villager_trades.core.settings import LoaderSettings

__all__ = [
    "CatalogDocument",
    "CatalogLoader",
    "ContextSnapshot",
    "ConverterRegistry",
    "DeserializationContext",
    "Diagnostic",
    "DiagnosticSink",
    "LoaderSettings",
    "TradeReloadService",
]
