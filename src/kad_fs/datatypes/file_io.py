from __future__ import annotations

import contextvars
from dataclasses import dataclass
import pathlib
from typing import Optional

from fs.base import FS

file_system_context = contextvars.ContextVar[Optional[FS]]("file_system_context", default=None)
"""
If set, stores are created inside this filesystem instead of the OS filesystem.
Mostly useful for tests backed by fs.memoryfs.MemoryFS.
"""

@dataclass
class Path:
    """
    A path in a specific filesystem.
    """

    fs: FS
    path: pathlib.PurePosixPath = pathlib.PurePosixPath('/')

    def __init__(self, file_system: FS, path: pathlib.PurePosixPath | str | None = None) -> None:
        self.fs = file_system
        if path is None:
            self.path = pathlib.PurePosixPath('/')
        else:
            self.path = pathlib.PurePosixPath(path)

    def __fspath__(self) -> str:
        return self.path.as_posix()

    def as_posix(self) -> str:
        return self.path.as_posix()

    def __truediv__(self, key: str) -> Path:
        return Path(self.fs, self.path / key)

    def exists(self) -> bool:
        return self.fs.exists(self.as_posix())

    def is_dir(self) -> bool:
        return self.fs.isdir(self.as_posix())

    def mkdir(self) -> None:
        """Create this directory. The parent must already exist."""
        self.fs.makedir(self.as_posix())

    def iterdir_names(self) -> list[str]:
        return self.fs.listdir(self.as_posix())

    def read_bytes(self) -> bytes:
        return self.fs.readbytes(self.as_posix())

    def write_bytes(self, data: bytes) -> None:
        self.fs.writebytes(self.as_posix(), data)

    def unlink(self) -> None:
        self.fs.remove(self.as_posix())

    def opendir(self) -> FS:
        return self.fs.opendir(self.as_posix())

    @property
    def name(self) -> str:
        return self.path.name
