# notekeeper/infrastructure/filesystem.py

from __future__ import annotations

import os
import uuid
from datetime import datetime
from pathlib import Path, PurePath

from notekeeper.core.filenames import title_to_stem
from notekeeper.settings import RECOVERY_DIR


# ───────────────────────── public API ─────────────────────────

def atomic_write_bytes(path: Path, data: bytes) -> None:
    """
    Atomic-ish file write:
    - write to temp file in same directory
    - fsync
    - replace()

    The target is either fully replaced or left as it was.
    The parent directory must already exist.
    """
    path = Path(path)
    tmp_path = path.parent / f".{path.name}.tmp-{uuid.uuid4().hex}"

    f = None
    try:
        f = open(tmp_path, "wb")
        f.write(data)
        f.flush()
        os.fsync(f.fileno())
        f.close()
        f = None

        tmp_path.replace(path)

    finally:
        if f is not None:
            f.close()

        try:
            if tmp_path.exists():
                tmp_path.unlink()
        except OSError:
            pass


def write_recovery_copy(
    file_name: str,
    data: bytes,
    *,
    recovery_dir: Path = RECOVERY_DIR,
) -> Path:
    """
    Best-effort emergency save when normal save fails.

    Writes timestamped copy into:
      ~/.notekeeper/recovery/
    """
    name = PurePath(file_name or "")
    stem = title_to_stem(name.stem).strip() or "Untitled"
    ext = name.suffix or ".json"
    ts = datetime.now().strftime("%Y%m%d-%H%M%S")

    recovery_dir = Path(recovery_dir)
    recovery_dir.mkdir(parents=True, exist_ok=True)

    recovery_path = recovery_dir / f"{stem}.recovery.{ts}{ext}"
    atomic_write_bytes(recovery_path, data)

    return recovery_path
