from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class ChooserEntry:
    name: str
    summary: Optional[str]

    def display(self, width: int = 0) -> str:
        if self.summary:
            return f"{self.name.ljust(width)}  {self.summary}"
        return self.name


def build_entries(pairs: Iterable[tuple[str, Optional[str]]]) -> list[ChooserEntry]:
    return [ChooserEntry(name=name, summary=summary) for name, summary in pairs]


def filter_entries(entries: list[ChooserEntry], query: str) -> list[ChooserEntry]:
    """Case-insensitive substring match on name or summary."""
    needle = query.strip().lower()
    if not needle:
        return list(entries)
    return [
        entry
        for entry in entries
        if needle in entry.name.lower() or needle in (entry.summary or "").lower()
    ]


def name_width(entries: list[ChooserEntry]) -> int:
    return max((len(entry.name) for entry in entries), default=0)
