from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from .backups import backup_file
from .errors import DocumentIOError, DocumentParseError
from .paths import BACKUPS_DIRNAME, ensure_dir

logger = logging.getLogger(__name__)

TMP_SUFFIX = ".tmp"


def read_json(path: Path) -> Any:
    """
    Read and parse the JSON document at ``path``.

    Raises DocumentIOError if the file cannot be read and DocumentParseError if
    its contents are not well-formed UTF-8 JSON. Missing files are the caller's
    concern (see DocumentStore.load).
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DocumentParseError(f"{path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise DocumentIOError(f"failed to read {path}: {e}") from e
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise DocumentParseError(f"invalid JSON in {path}: {e}") from e


def dumps_document(payload: Any, *, indent: int = 2, sort_keys: bool = True) -> bytes:
    try:
        text = json.dumps(payload, indent=indent, sort_keys=sort_keys, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise DocumentIOError(f"document is not JSON-serializable: {e}") from e
    return (text + "\n").encode("utf-8")


def _discard(tmp_path: Path) -> None:
    try:
        tmp_path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning("ATOMIC WRITE: could not remove %s: %r", tmp_path, e)


def atomic_write_json(
    path: Path,
    payload: Any,
    *,
    backups_dir: Path | None = None,
    keep: int | None = None,
    indent: int = 2,
    sort_keys: bool = True,
) -> None:
    """
    Atomically write JSON to disk.

    The bytes go to a sibling ``<name>.tmp`` file which is fsync'ed before the
    existing target (if any) is copied into ``backups_dir`` and the temp file is
    renamed over the target. Readers see either the old or the new file, never
    a partial one. Backup failures are tolerated; every other failure raises
    DocumentIOError and leaves the target untouched.
    """
    ensure_dir(path.parent)
    data = dumps_document(payload, indent=indent, sort_keys=sort_keys)
    if backups_dir is None:
        backups_dir = path.parent / BACKUPS_DIRNAME

    tmp_path = path.with_suffix(path.suffix + TMP_SUFFIX)
    try:
        with tmp_path.open("wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        if path.exists():
            backup_file(path, backups_dir, keep=keep)
        tmp_path.replace(path)
    except OSError as e:
        _discard(tmp_path)
        raise DocumentIOError(f"failed to write {path}: {e}") from e
