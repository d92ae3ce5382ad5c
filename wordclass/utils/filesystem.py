# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Safe filesystem operations for wordclass.

Artifacts are written atomically: content goes to a temporary file in the
same directory as the target, which is then renamed over the target. Rename
on the same filesystem is atomic on POSIX, so a crash mid-write leaves a
stray temp file, never a truncated vocabulary table.

The up-to-date check lives here too, since it is nothing more than a
comparison of file modification times.
"""

import tempfile
from pathlib import Path


def atomic_write(target_path: Path, content: str, encoding: str = "utf-8") -> None:
    """
    Write content to a file atomically, creating parent directories first.

    If anything goes wrong during the write (disk full, permissions, crash),
    the target file is never touched — you either get the full new content or
    the old content, never a partial mess.

    Raises:
        OSError: If the directory can't be created or the write or rename fails.
    """
    target_path.parent.mkdir(parents=True, exist_ok=True)

    # delete=False because we need the file to survive closing so we can rename it.
    # dir= same directory as target so rename is atomic (same filesystem).
    temp_fd = tempfile.NamedTemporaryFile(
        mode="w",
        encoding=encoding,
        newline="\n",
        dir=str(target_path.parent),
        prefix=".wordclass_tmp_",
        suffix=".tmp",
        delete=False,
    )
    temp_path = Path(temp_fd.name)

    try:
        temp_fd.write(content)
        temp_fd.flush()
        temp_fd.close()
        temp_path.replace(target_path)
    except BaseException:
        temp_fd.close()
        # Clean up the temp file if anything goes wrong.
        if temp_path.exists():
            temp_path.unlink()
        raise


def is_up_to_date(target_path: Path, source_path: Path) -> bool:
    """
    True if `target_path` exists and is not older than `source_path`.

    A missing target is never up to date. A missing source with an existing
    target counts as up to date: there is nothing newer to rebuild from, and
    the build itself reports the missing input if it runs.
    """
    if not target_path.is_file():
        return False
    if not source_path.exists():
        return True
    return target_path.stat().st_mtime >= source_path.stat().st_mtime
