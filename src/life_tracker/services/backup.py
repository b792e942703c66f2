"""Timestamped snapshots of the data directories."""

import logging
import re
import shutil
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from life_tracker.domain.errors import StorageError

_logger = logging.getLogger(__name__)

_BACKUP_NAME = re.compile(r"^backup-(\d{4}-\d{2}-\d{2})_(\d{2})-(\d{2})-(\d{2})$")
DEFAULT_MAX_BACKUPS = 5


@dataclass(frozen=True)
class BackupInfo:
    """A backup folder on disk."""

    name: str
    taken_at: str
    path: Path


@dataclass
class BackupService:
    """Copies each data directory into ``backup-YYYY-MM-DD_HH-MM-SS`` folders."""

    sources: dict[str, Path]
    backup_dir: Path
    max_backups: int = DEFAULT_MAX_BACKUPS
    clock: Callable[[], datetime] = field(default=datetime.now)

    def list_backups(self) -> list[BackupInfo]:
        """Return backups newest first."""
        if not self.backup_dir.is_dir():
            return []
        backups = []
        for entry in self.backup_dir.iterdir():
            match = _BACKUP_NAME.match(entry.name)
            if not entry.is_dir() or not match:
                continue
            day, hours, minutes, seconds = match.groups()
            backups.append(
                BackupInfo(
                    name=entry.name,
                    taken_at=f"{day} {hours}:{minutes}:{seconds}",
                    path=entry,
                )
            )
        return sorted(backups, key=lambda backup: backup.name, reverse=True)

    def has_backup_for_today(self) -> bool:
        prefix = f"backup-{self.clock().strftime('%Y-%m-%d')}"
        return any(backup.name.startswith(prefix) for backup in self.list_backups())

    def create_backup(self) -> Path | None:
        """Copy every existing source directory; None when there was nothing to copy."""
        stamp = self.clock().strftime("%Y-%m-%d_%H-%M-%S")
        target = self.backup_dir / f"backup-{stamp}"
        copied = 0
        try:
            for name, source in self.sources.items():
                if not source.is_dir():
                    continue
                shutil.copytree(source, target / name, dirs_exist_ok=True)
                copied += 1
        except OSError as exc:
            shutil.rmtree(target, ignore_errors=True)
            raise StorageError(f"Backup failed: {exc}") from exc
        if not copied:
            _logger.info("No data directories found to back up")
            return None
        _logger.info("Backup created: %s (%s directories)", target.name, copied)
        self.clean_old_backups()
        return target

    def clean_old_backups(self) -> int:
        """Delete all but the newest ``max_backups`` backups."""
        stale = self.list_backups()[self.max_backups :]
        for backup in stale:
            shutil.rmtree(backup.path, ignore_errors=True)
            _logger.info("Deleted old backup: %s", backup.name)
        return len(stale)

    def ensure_daily_backup(self) -> Path | None:
        """Take a backup unless one already exists for today."""
        if self.has_backup_for_today():
            return None
        return self.create_backup()
