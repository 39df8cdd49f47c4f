"""
Diagnostics collected during a reload and the batch delivery protocol.

A :class:`Diagnostic` is captured for every failure the loader swallows. The
:class:`DiagnosticSink` keeps them in order until the host drains it at the end
of a reload, at which point each audience receives one rendered report.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from pydantic import BaseModel, ConfigDict

from .context import ContextSnapshot, DeserializationContext, thaw_entry
from .exceptions import TradeCatalogError

if TYPE_CHECKING:
    from .protocols import DiagnosticAudience

logger = logging.getLogger(__name__)

REPORT_HEADER: Final[str] = "The following errors have occurred during trade reload:"


class Diagnostic(BaseModel):
    """A captured failure: what went wrong and where the walk was at the time."""

    kind: str
    message: str
    context: ContextSnapshot

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_error(
        cls, error: TradeCatalogError, context: DeserializationContext
    ) -> Diagnostic:
        """Build a diagnostic from ``error`` and a snapshot of ``context``."""
        return cls(
            kind=error.error_code,
            message=error.message,
            context=context.snapshot(),
        )

    def summary(self) -> str:
        """One-line description shown in the report list."""
        return f"-> {self.message}"

    def detail(self) -> str:
        """Multi-line location view for the captured context."""
        ctx = self.context
        lines = [
            f"File: {ctx.source}",
            "",
            f"Profession: {ctx.profession}",
            f"Level: {ctx.tier}",
            "",
            "Problematic trade:",
            _render_entry(ctx.entry),
        ]
        return "\n".join(lines)


def _render_entry(entry: object) -> str:
    try:
        return json.dumps(thaw_entry(entry), indent=2, sort_keys=False, default=str)
    except (TypeError, ValueError):
        return repr(thaw_entry(entry))


@dataclass(frozen=True)
class ReportEntry:
    """One rendered diagnostic: a summary line and its detail view."""

    kind: str
    summary: str
    detail: str


def render_report(diagnostics: Iterable[Diagnostic]) -> list[ReportEntry]:
    """Render diagnostics into report entries, preserving their order."""
    return [
        ReportEntry(kind=d.kind, summary=d.summary(), detail=d.detail())
        for d in diagnostics
    ]


class DiagnosticSink:
    """
    Ordered accumulator of diagnostics for one reload cycle.

    Appending never fails. Draining renders one report, hands it to every
    audience and then always empties the sink, so nothing is delivered twice.
    """

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []
        self._logger = logger.getChild(self.__class__.__name__)

    def record(self, diagnostic: Diagnostic) -> None:
        """Append a diagnostic."""
        self._diagnostics.append(diagnostic)
        ctx = diagnostic.context
        self._logger.error(
            f"Caught {diagnostic.kind} while loading trade definitions: "
            f"{diagnostic.message} (file={ctx.source}, "
            f"profession={ctx.profession}, level={ctx.tier})"
        )

    def drain_and_deliver(self, audiences: Iterable[DiagnosticAudience]) -> int:
        """
        Deliver the collected diagnostics to each audience, then clear them.

        Args:
            audiences: Recipients of the rendered report

        Returns:
            Number of diagnostics that were drained (0 when nothing happened)
        """
        if not self._diagnostics:
            return 0

        drained = len(self._diagnostics)
        try:
            entries = render_report(self._diagnostics)
            for audience in audiences:
                try:
                    audience.send(REPORT_HEADER, entries)
                except Exception as e:
                    self._logger.error(
                        f"Failed to deliver diagnostics to "
                        f"{audience.__class__.__name__}: {e}",
                        exc_info=True,
                    )
        finally:
            self._diagnostics.clear()

        self._logger.info(f"Delivered {drained} diagnostic(s)")
        return drained

    def clear(self) -> None:
        """Discard everything without delivering."""
        self._diagnostics.clear()

    def is_empty(self) -> bool:
        return not self._diagnostics

    def __len__(self) -> int:
        return len(self._diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(list(self._diagnostics))
