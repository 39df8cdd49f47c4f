from __future__ import annotations

import pytest

from villager_trades.core.identifier import Identifier, normalize_identifier


class TestIdentifier:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("minecraft:librarian", Identifier("minecraft", "librarian")),
            ("librarian", Identifier("minecraft", "librarian")),
            ("numismatic-overhaul:sell_stack", Identifier("numismatic-overhaul", "sell_stack")),
            ("mod:trades/village.v2", Identifier("mod", "trades/village.v2")),
        ],
    )
    def test_parse_valid(self, raw: str, expected: Identifier) -> None:
        assert Identifier.parse(raw) == expected

    @pytest.mark.parametrize("raw", ["", "Mod:x", "mod:", ":path", "mod:a b", "a:b:c"])
    def test_parse_invalid(self, raw: str) -> None:
        with pytest.raises(ValueError):
            Identifier.parse(raw)
        assert Identifier.try_parse(raw) is None

    def test_try_parse_non_string(self) -> None:
        assert Identifier.try_parse(None) is None
        assert Identifier.try_parse(3) is None

    def test_custom_default_namespace(self) -> None:
        assert str(Identifier.parse("thing", "mymod")) == "mymod:thing"

    def test_normalize(self) -> None:
        assert normalize_identifier("diamond") == "minecraft:diamond"
