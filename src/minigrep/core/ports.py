"""Ports (interfaces) used by the search runner.

Ports define the minimal contracts for reading content and writing lines so
the core can be reused with other sources and sinks.
"""

from __future__ import annotations

from typing import Iterable, Protocol


class ContentReader(Protocol):
    """Loads the full text to search."""

    def read(self, path: str) -> str:
        ...


class LineWriter(Protocol):
    """Emits matched lines in the order received."""

    def write_lines(self, lines: Iterable[str]) -> None:
        ...
