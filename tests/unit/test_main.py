from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from villager_trades.main import main


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    # main() reconfigures logging with force=True
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _write(path: Path, data: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


def _catalog(*entries: object) -> dict:
    return {"profession": "minecraft:librarian", "trades": {"novice": list(entries)}}


GOOD_ENTRY = {"kind": "numismatic-overhaul:sell_stack", "sell": "paper", "price": 4}


class TestCheckCommand:
    def test_clean_catalogs_exit_zero(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        _write(tmp_path / "mymod" / "librarian.json", _catalog(GOOD_ENTRY))

        with pytest.raises(SystemExit) as exc:
            main(["check", str(tmp_path)])

        assert exc.value.code == 0
        out = capsys.readouterr().out
        assert "Loaded 1 trade(s) from 1 catalog(s); 0 problem(s) found" in out

    def test_problems_are_reported_and_exit_one(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        _write(tmp_path / "mymod" / "librarian.json", _catalog(GOOD_ENTRY, {"price": 1}))
        (tmp_path / "mymod" / "broken.json").write_text("{", encoding="utf-8")

        with pytest.raises(SystemExit) as exc:
            main(["check", str(tmp_path)])

        assert exc.value.code == 1
        out = capsys.readouterr().out
        assert "The following errors have occurred during trade reload:" in out
        assert "[MissingKind] -> Trade kind missing" in out
        assert "[MalformedDocument]" in out
        assert "File: mymod:librarian" in out
        assert "2 problem(s) found" in out

    def test_summary_only_hides_details(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        _write(tmp_path / "x.json", _catalog({"price": 1}))

        with pytest.raises(SystemExit):
            main(["check", str(tmp_path), "--summary-only"])

        out = capsys.readouterr().out
        assert "[MissingKind]" in out
        assert "Problematic trade" not in out

    def test_missing_directory_exit_two(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["check", str(tmp_path / "nope")])
        assert exc.value.code == 2

    def test_invalid_namespace_exit_two(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["check", str(tmp_path), "--namespace", "Bad NS"])
        assert exc.value.code == 2


class TestKindsCommand:
    def test_lists_builtin_kinds(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["kinds"])

        assert exc.value.code == 0
        out = capsys.readouterr().out
        assert "numismatic-overhaul:sell_potion_container" in out
        assert out.count("numismatic-overhaul:") == 9
