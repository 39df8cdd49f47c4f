"""Diagnostic audience that prints reports to a text stream."""

import sys
from collections.abc import Sequence
from typing import TextIO

from villager_trades.core.diagnostics import ReportEntry


class ConsoleAudience:
    """Writes each report as a summary list, optionally with detail views."""

    def __init__(self, stream: TextIO | None = None, show_details: bool = True):
        self.stream = stream or sys.stdout
        self.show_details = show_details

    def send(self, header: str, entries: Sequence[ReportEntry]) -> None:
        write = self.stream.write
        write(f"{header}\n\n")
        for entry in entries:
            write(f"[{entry.kind}] {entry.summary}\n")
            if self.show_details:
                for line in entry.detail.splitlines():
                    write(f"    {line}\n")
                write("\n")
        self.stream.flush()
