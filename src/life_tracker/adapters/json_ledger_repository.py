"""JSON file implementation of the ledger store."""

import json
import logging
import os
import threading
from dataclasses import dataclass
from pathlib import Path

from life_tracker.domain.errors import StorageError
from life_tracker.services.ledger import LedgerDocument, LedgerRepository

_logger = logging.getLogger(__name__)

_LOCKS: dict[Path, threading.RLock] = {}
_LOCKS_GUARD = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    with _LOCKS_GUARD:
        lock = _LOCKS.get(path)
        if lock is None:
            lock = threading.RLock()
            _LOCKS[path] = lock
        return lock


@dataclass
class JsonLedgerRepository(LedgerRepository):
    """Stores one collection as ``{"items": [...], "nextId": N}`` on disk."""

    path: Path

    def __post_init__(self) -> None:
        self.path = Path(self.path).expanduser().resolve()

    def load_all(self) -> LedgerDocument:
        """Read the whole document, or the empty default when the file is absent."""
        if not self.path.exists():
            return LedgerDocument(items=[], next_id=1, initialized=False)
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            _logger.error("Failed to read ledger %s: %s", self.path, exc)
            raise StorageError(f"Failed to read {self.path.name}") from exc
        if not isinstance(raw, dict) or not isinstance(raw.get("items", []), list):
            raise StorageError(f"Malformed ledger document {self.path.name}")
        items = [item for item in raw.get("items", []) if isinstance(item, dict)]
        return LedgerDocument(
            items=items,
            next_id=_next_id(raw.get("nextId"), items),
            initialized=True,
        )

    def save_all(self, items: list[dict[str, object]], next_id: int) -> None:
        """Write the whole document through a temporary sibling file."""
        payload = json.dumps({"items": items, "nextId": next_id}, indent=2) + "\n"
        tmp_path = self.path.with_name(f".{self.path.name}.tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(payload, encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as exc:
            _logger.error("Failed to write ledger %s: %s", self.path, exc)
            raise StorageError(f"Failed to write {self.path.name}") from exc

    def lock(self) -> threading.RLock:
        """Return the process-wide lock for this document path."""
        return _lock_for(self.path)


def _next_id(raw_next_id: object, items: list[dict[str, object]]) -> int:
    """Trust the stored counter unless it would reuse an existing id."""
    highest = max(
        (item["id"] for item in items if isinstance(item.get("id"), int)),
        default=0,
    )
    if isinstance(raw_next_id, int) and raw_next_id > highest:
        return raw_next_id
    return highest + 1
