"""File transports used by the directory watcher.

A transport lists, reads and writes flat file names inside one directory.
:class:`LocalDirectoryTransport` serves local or mounted directories; other
transports only need to satisfy :class:`FileTransport`.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileTransport(Protocol):
    """Protocol for the directory a watcher polls."""

    def list_files(self) -> list[str]:
        """Return visible, non-directory file names in sorted order."""

        ...

    def read_bytes(self, name: str) -> bytes:
        ...

    def write_bytes(self, name: str, data: bytes) -> None:
        ...

    def exists(self, name: str) -> bool:
        ...


class LocalDirectoryTransport:
    """Transport over a directory on the local filesystem.

    Output files may go to a separate ``output_directory``; :meth:`exists`
    and :meth:`write_bytes` then refer to that directory.
    """

    def __init__(
        self,
        directory: str | os.PathLike[str],
        output_directory: str | os.PathLike[str] | None = None,
    ) -> None:
        self.directory = Path(directory)
        self.output_directory = Path(output_directory) if output_directory else self.directory

    def list_files(self) -> list[str]:
        return sorted(
            entry.name
            for entry in self.directory.iterdir()
            if entry.is_file() and not entry.name.startswith(".")
        )

    def read_bytes(self, name: str) -> bytes:
        return (self.directory / name).read_bytes()

    def write_bytes(self, name: str, data: bytes) -> None:
        self.output_directory.mkdir(parents=True, exist_ok=True)
        target = self.output_directory / name
        tmp = target.with_name(f".{target.name}.part")
        tmp.write_bytes(data)
        os.replace(tmp, target)

    def exists(self, name: str) -> bool:
        return (self.output_directory / name).exists()


__all__ = ["FileTransport", "LocalDirectoryTransport"]
