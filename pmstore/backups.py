from __future__ import annotations

import logging
import re
import shutil
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)

BACKUP_TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"

# <YYYYMMDD-HHMMSS>[.<seq>]-<original filename>; "." cannot follow the stamp otherwise
_BACKUP_NAME_RE = re.compile(r"^(\d{8}-\d{6})(?:\.(\d+))?-(.+)$")


def backup_name(filename: str, when: datetime, seq: int = 0) -> str:
    stamp = when.strftime(BACKUP_TIMESTAMP_FORMAT)
    if seq:
        return f"{stamp}.{seq}-{filename}"
    return f"{stamp}-{filename}"


def _sort_key(entry: Path) -> tuple[str, int]:
    m = _BACKUP_NAME_RE.match(entry.name)
    if m is None:
        return ("", 0)
    return (m.group(1), int(m.group(2) or 0))


def _next_seq(backups_dir: Path, filename: str, when: datetime) -> int:
    # Same-second backups get increasing suffixes, even after older ones were pruned.
    stamp = when.strftime(BACKUP_TIMESTAMP_FORMAT)
    seqs = [
        int(m.group(2) or 0)
        for m in (_BACKUP_NAME_RE.match(p.name) for p in list_backups(backups_dir, filename))
        if m is not None and m.group(1) == stamp
    ]
    return max(seqs) + 1 if seqs else 0


def list_backups(backups_dir: Path, filename: str | None = None) -> list[Path]:
    """
    Backup entries in ``backups_dir``, oldest first.

    With ``filename``, only entries that are backups of exactly that file name
    are returned. Backup names carry the basename only, so documents with the
    same basename in different subdirectories share one series.
    """
    if not backups_dir.is_dir():
        return []
    entries = []
    for p in backups_dir.iterdir():
        m = _BACKUP_NAME_RE.match(p.name)
        if m is None or not p.is_file():
            continue
        if filename is None or m.group(3) == filename:
            entries.append(p)
    return sorted(entries, key=_sort_key)


def prune_backups(backups_dir: Path, filename: str, keep: int) -> list[Path]:
    """Delete all but the newest ``keep`` backups of ``filename``. Failures are logged and skipped."""
    entries = list_backups(backups_dir, filename)
    stale = entries[:-keep] if keep > 0 else entries
    removed: list[Path] = []
    for entry in stale:
        try:
            entry.unlink()
        except OSError as e:
            logger.warning("BACKUP PRUNE: failed to remove %s: %r", entry, e)
            continue
        removed.append(entry)
    return removed


def backup_file(
    path: Path,
    backups_dir: Path,
    *,
    keep: int | None = None,
    now: datetime | None = None,
) -> Path | None:
    """
    Copy ``path`` into ``backups_dir`` as <timestamp>-<name>.

    Best effort: any failure is logged and ``None`` is returned so the caller's
    write can still go ahead.
    """
    when = now or datetime.now()
    try:
        backups_dir.mkdir(parents=True, exist_ok=True)
        target = backups_dir / backup_name(path.name, when, _next_seq(backups_dir, path.name, when))
        shutil.copy2(path, target)
    except OSError as e:
        logger.warning("BACKUP: failed to copy %s into %s: %r", path, backups_dir, e)
        return None

    logger.debug("BACKUP: %s -> %s", path, target)
    if keep is not None:
        try:
            prune_backups(backups_dir, path.name, keep)
        except OSError as e:
            logger.warning("BACKUP PRUNE: failed to list %s: %r", backups_dir, e)
    return target
