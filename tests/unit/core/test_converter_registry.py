"""Unit tests for ConverterRegistry."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from villager_trades.core.catalog_loader import CatalogDocument, CatalogLoader
from villager_trades.core.converter_registry import ConverterRegistry
from villager_trades.core.diagnostics import DiagnosticSink
from villager_trades.core.identifier import Identifier


class ConstantConverter:
    def __init__(self, value: Any) -> None:
        self.value = value

    def convert(self, entry: dict[str, Any], context: Any = None) -> Any:
        return self.value


class RecordingHost:
    def __init__(self) -> None:
        self.factories: list[Any] = []

    def resolve_profession(self, profession_id: Identifier) -> Identifier:
        return profession_id

    def register_leveled(self, profession: Any, tier: int, factory: Any) -> None:
        self.factories.append(factory)

    def register_unleveled(self, factory: Any) -> None:
        self.factories.append(factory)


class TestRegistration:
    def test_register_and_lookup(self) -> None:
        reg = ConverterRegistry()
        conv = ConstantConverter(1)
        reg.register("numismatic-overhaul:sell_stack", conv)

        assert reg.lookup("numismatic-overhaul:sell_stack") is conv
        assert reg.lookup(Identifier("numismatic-overhaul", "sell_stack")) is conv
        assert "numismatic-overhaul:sell_stack" in reg
        assert len(reg) == 1

    def test_default_namespace_is_applied(self) -> None:
        reg = ConverterRegistry()
        conv = ConstantConverter(1)
        reg.register("sell_stack", conv)

        assert reg.lookup("minecraft:sell_stack") is conv
        assert reg.available_kinds() == ["minecraft:sell_stack"]

    def test_lookup_unknown_or_malformed_returns_none(self) -> None:
        reg = ConverterRegistry()
        assert reg.lookup("mod:missing") is None
        assert reg.lookup("Not Valid!") is None
        assert 42 not in reg

    def test_register_rejects_invalid_input(self) -> None:
        reg = ConverterRegistry()
        with pytest.raises(ValueError):
            reg.register("Not Valid!", ConstantConverter(1))
        with pytest.raises(ValueError, match="cannot be None"):
            reg.register("mod:kind", None)  # type: ignore[arg-type]

    def test_available_kinds_sorted(self) -> None:
        reg = ConverterRegistry()
        reg.register("b:two", ConstantConverter(2))
        reg.register("a:one", ConstantConverter(1))
        assert reg.available_kinds() == ["a:one", "b:two"]


class TestLastWriteWins:
    def test_overwrite_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.WARNING)
        reg = ConverterRegistry()
        reg.register("mod:kind", ConstantConverter(1))
        reg.register("mod:kind", ConstantConverter(2))

        assert len(reg) == 1
        assert any("Overwriting" in r.message for r in caplog.records)

    def test_replacement_is_used_by_loader(self) -> None:
        reg = ConverterRegistry()
        reg.register("mod:kind", ConstantConverter("old"))
        reg.register("mod:kind", ConstantConverter("new"))

        host = RecordingHost()
        sink = DiagnosticSink()
        CatalogLoader(reg, sink).load(
            CatalogDocument(
                source="test:doc",
                data={
                    "profession": "minecraft:farmer",
                    "trades": {"novice": [{"kind": "mod:kind"}]},
                },
            ),
            host,
        )

        assert host.factories == ["new"]
        assert sink.is_empty()
