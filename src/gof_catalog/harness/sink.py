"""
Output sink - the replacement for console printing.

Scenarios never print. They emit text lines into a sink, which the
runner captures per scenario so the output can be inspected and tested.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class OutputSink:
    """
    Ordered collection of text lines emitted by a scenario.

    Each emitted line is also forwarded to the logger at DEBUG level,
    tagged with the sink's name.
    """

    def __init__(self, name: str = "scenario"):
        self.name = name
        self._lines: list[str] = []

    def emit(self, line: str) -> None:
        """Append a line of output."""
        self._lines.append(line)
        logger.debug("[%s] %s", self.name, line)

    @property
    def lines(self) -> list[str]:
        """A copy of all lines emitted so far."""
        return list(self._lines)

    def clear(self) -> None:
        """Discard all collected lines."""
        self._lines.clear()

    def __len__(self) -> int:
        return len(self._lines)

    def __repr__(self) -> str:
        return f"OutputSink({self.name!r}, {len(self._lines)} lines)"
