"""Filesystem operations used by triage moves."""

from __future__ import annotations
import errno
import os
import shutil


def ensure_directory(path: str) -> None:
    """Create ``path`` (and parents). An existing directory is not an error.

    Raises:
        OSError: If the directory cannot be created, including when ``path``
            exists but is not a directory.
    """
    os.makedirs(path, exist_ok=True)


def move_file(src: str, dst: str) -> None:
    """Move ``src`` to ``dst``, refusing to overwrite an existing file.

    Works across filesystems (falls back to copy + delete).

    Raises:
        FileExistsError: If ``dst`` already exists.
        OSError: If the move itself fails.
    """
    if os.path.lexists(dst):
        raise FileExistsError(errno.EEXIST, "destination already exists", dst)
    shutil.move(src, dst)


def file_name(path: str) -> str:
    """Final component of ``path``, or ``""`` when it has none.

    Trailing separators are ignored; ``.``, ``..`` and filesystem roots have
    no file name.
    """
    name = os.path.basename(path.rstrip(os.sep + (os.altsep or "")))
    if name in ("", ".", ".."):
        return ""
    return name
