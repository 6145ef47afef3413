"""
u8g2emu - Diagnostics
=====================

Structured sink for advisory failures. The emulator never aborts the
firmware's byte stream, so every session, init, rasterization or
present failure is recorded here (and logged) instead of being
raised. Tests assert on the entries; interactive runs can print the
report.

Copyright (c) 2025 u8g2emu Contributors
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional


# Categories used by the emulator
SESSION = "session"
INIT = "init"
RASTER = "raster"
PRESENT = "present"


@dataclass
class DiagnosticEntry:
    """
    Record of a single advisory failure.

    Attributes:
        index: Sequential entry number (1-based for readability)
        category: What failed ("session", "init", "raster" or "present")
        message: Error details
        page: Page being drawn when the failure happened, if any
        timestamp: Wall-clock time of the failure
    """

    index: int
    category: str
    message: str
    page: Optional[int] = None
    timestamp: datetime = field(default_factory=datetime.now)

    def format_short(self) -> str:
        """
        Format entry as single-line summary.

        Returns:
            Formatted string like '[  3] raster(page 7): blit failed'
        """
        where = f"(page {self.page})" if self.page is not None else ""
        return f"[{self.index:3}] {self.category}{where}: {self.message}"


class Diagnostics:
    """
    Bounded collector of diagnostic entries.

    When the collector is full the oldest half is dropped, so the most
    recent failures are always available.

    Usage:
        diagnostics = Diagnostics()
        diagnostics.record("raster", "blit failed", page=3)
        print(diagnostics.format_report())
    """

    def __init__(self, max_entries: int = 100):
        if max_entries < 1:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        self._max_entries = max_entries
        self._entries: List[DiagnosticEntry] = []
        self._count = 0

    @property
    def entries(self) -> List[DiagnosticEntry]:
        """Recorded entries, oldest first."""
        return list(self._entries)

    @property
    def total_recorded(self) -> int:
        """Number of entries ever recorded, including dropped ones."""
        return self._count

    def __len__(self) -> int:
        return len(self._entries)

    def record(
        self,
        category: str,
        message: str,
        page: Optional[int] = None,
    ) -> DiagnosticEntry:
        """
        Record a failure.

        Args:
            category: Failure category
            message: Error details
            page: Page index involved, if any

        Returns:
            The new entry
        """
        if len(self._entries) >= self._max_entries:
            self._entries = self._entries[self._max_entries // 2:]

        self._count += 1
        entry = DiagnosticEntry(
            index=self._count,
            category=category,
            message=message,
            page=page,
        )
        self._entries.append(entry)
        return entry

    def by_category(self) -> Dict[str, List[DiagnosticEntry]]:
        """Group retained entries by category."""
        grouped: Dict[str, List[DiagnosticEntry]] = {}
        for entry in self._entries:
            grouped.setdefault(entry.category, []).append(entry)
        return grouped

    def clear(self) -> None:
        """Forget all retained entries."""
        self._entries.clear()

    def format_report(self) -> str:
        """
        Format all retained entries as a multi-line report.

        Returns:
            Report text, or a one-line note when nothing was recorded
        """
        if not self._entries:
            return "No diagnostics recorded."

        lines = [f"{len(self._entries)} diagnostic(s) ({self._count} total):"]
        lines.extend(entry.format_short() for entry in self._entries)
        return "\n".join(lines)
