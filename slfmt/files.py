"""File helpers used for log rotation."""

from __future__ import annotations

import os
import shutil
import zipfile
from pathlib import Path
from typing import Union

PathLike = Union[str, os.PathLike]


def _require_exists(file_path: Path) -> None:
    if not file_path.exists():
        raise FileNotFoundError(f"Source file does not exist: {file_path}")


def copy_file_to_dir(file_path: PathLike, directory: PathLike) -> Path:
    """Copy a file into ``directory``, overwriting any file of the same name."""
    source = Path(file_path)
    _require_exists(source)
    dest = Path(directory) / source.name
    shutil.copyfile(source, dest)
    return dest


def move_file_to_dir(file_path: PathLike, directory: PathLike) -> Path:
    """Move a file into ``directory``, replacing any file of the same name."""
    source = Path(file_path)
    _require_exists(source)
    dest = Path(directory) / source.name
    os.replace(source, dest)
    return dest


def compress_file(file: PathLike, zip_name: str) -> Path:
    """Write ``file`` into a new archive ``<zip_name>.zip`` and return its path."""
    source = Path(file)
    _require_exists(source)
    archive = Path(f"{zip_name}.zip")
    with zipfile.ZipFile(archive, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=9) as zf:
        zf.write(source, arcname=os.fspath(file))
    return archive


def clear_file(file: PathLike) -> None:
    """Truncate ``file`` to zero length, creating it if missing."""
    with open(file, "w"):
        pass