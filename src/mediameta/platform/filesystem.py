"""Filesystem helpers used by the artwork resolver."""

from __future__ import annotations

import os
from pathlib import Path

from mediameta.platform.logging import logger


class LocalDirectoryLister:
    """List regular files of a directory in native filesystem order."""

    def list_files(self, directory: Path) -> list[str]:
        """Return file names in ``directory`` without re-sorting them.

        Unreadable or missing directories yield an empty listing.
        """

        try:
            with os.scandir(directory) as entries:
                return [entry.name for entry in entries if entry.is_file()]
        except OSError as exc:
            logger.warning("Could not list directory %s: %s", directory, exc)
            return []


def read_file_bytes(path: Path) -> bytes:
    """Read the whole file at ``path``."""

    with open(path, "rb") as handle:
        return handle.read()


def write_file_bytes(path: Path, data: bytes) -> int:
    """Write ``data`` to ``path``, creating parent directories as needed."""

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as handle:
        return handle.write(data)


__all__ = ["LocalDirectoryLister", "read_file_bytes", "write_file_bytes"]
