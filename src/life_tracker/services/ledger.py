"""Ledger store interface shared by every collection."""

from contextlib import AbstractContextManager
from dataclasses import dataclass, field
from typing import Protocol


@dataclass
class LedgerDocument:
    """Whole contents of one collection document."""

    items: list[dict[str, object]] = field(default_factory=list)
    next_id: int = 1
    initialized: bool = True

    def allocate_id(self) -> int:
        """Return the next id and advance the counter."""
        allocated = self.next_id
        self.next_id += 1
        return allocated


class LedgerRepository(Protocol):
    """Persistence interface for a single flat collection."""

    def load_all(self) -> LedgerDocument:
        """Return the whole collection; a missing store yields the empty default."""

    def save_all(self, items: list[dict[str, object]], next_id: int) -> None:
        """Replace the whole collection."""

    def lock(self) -> AbstractContextManager[object]:
        """Return a context manager serializing load-mutate-save cycles."""


def find_index(items: list[dict[str, object]], key: str, value: object) -> int | None:
    """Return the position of the first item whose ``key`` equals ``value``."""
    for index, item in enumerate(items):
        if item.get(key) == value:
            return index
    return None
