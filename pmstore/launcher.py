from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

from .errors import DocumentIOError


def open_in_file_manager(path: Path) -> None:
    """Hand ``path`` to the OS default file browser."""
    try:
        if sys.platform.startswith("win"):
            os.startfile(str(path))  # type: ignore[attr-defined]
        elif sys.platform == "darwin":
            subprocess.run(["open", str(path)], check=True)
        else:
            subprocess.run(["xdg-open", str(path)], check=True)
    except (OSError, subprocess.CalledProcessError) as e:
        raise DocumentIOError(f"failed to open {path}: {e}") from e
