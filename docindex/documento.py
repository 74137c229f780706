"""Documents and how many times a term occurs in them."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Document:
    """A named document with an occurrence count that starts at one."""

    name: str
    count: int = 1

    def increment(self, amount: int = 1) -> None:
        """Add ``amount`` occurrences to the count."""
        self.count += amount

    def rank_key(self) -> tuple[int, str]:
        """Sort key: higher counts first, ties broken by name in ascending order."""
        return (-self.count, self.name)