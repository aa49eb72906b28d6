# src/folio/io.py
"""
Folio I/O Utilities
===================
Writing the synced portfolio artifact (JSON).
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger("folio.io")


def _default_file_mode() -> int:
    """0o666 minus the process umask, as a plain open() would create."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def dump_json(obj: Dict[str, Any]) -> str:
    """Serialize dict the way it is written to disk (indent 2, UTF-8 text)."""
    return json.dumps(obj, ensure_ascii=False, indent=2, allow_nan=False)


def save_json(path: Path, obj: Dict[str, Any]) -> None:
    """Save dict as JSON (atomic write).

    Serializes first, then writes a temp file next to the target and renames
    it over. A failure leaves any previous file untouched.
    """
    path = Path(path)
    text = dump_json(obj)
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_path = tempfile.mkstemp(suffix=".json", dir=path.parent, prefix=f".tmp_{path.stem}_")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.chmod(tmp_path, _default_file_mode())
        os.replace(tmp_path, path)
    except Exception:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise
    logger.debug(f"Saved JSON: {path}")
