#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
KadFS is a store that keeps every record as a separate file in a single flat
directory. The filename is the encoded key (base64 by default) and the file's
entire content is the UTF-8 value.

For example, with the default key format the key `hello` is stored in the file
`aGVsbG8=` directly inside the data directory.

KadFS assumes it owns the directory. It performs no locking, so several stores
(or processes) writing the same directory may interleave arbitrarily.
"""

import asyncio
from collections.abc import Iterator
import os
import pathlib
from typing import Any, Optional, Self

import fs.errors
import fs.osfs
from fs.base import FS as FileSystem
from pydantic import field_validator
from typing_extensions import override

from kad_fs.datatypes.file_io import Path, file_system_context
from kad_fs.errors import ConstructionError, StorageIOError
from kad_fs.file_keys import FileKey
from kad_fs.logger import logger

from .base import KeyValueStore

class KadFS(KeyValueStore):

    root: pathlib.Path

    _host_file_system: Optional[FileSystem] = None
    _owns_host: bool = False
    _file_system: Optional[FileSystem] = None

    @field_validator("root", mode="before")
    @classmethod
    def check_root(cls, root: Any) -> Any:
        # Path("") is the current directory
        if root == "":
            raise ConstructionError("Invalid data directory: path is empty")
        return root

    @classmethod
    def with_file_system(cls, root: pathlib.Path | str, file_system: FileSystem, **kwargs: Any) -> Self:
        """Create a store whose data directory lives inside file_system instead of on the OS filesystem."""
        token = file_system_context.set(file_system)
        try:
            return cls(root=root, **kwargs)
        finally:
            file_system_context.reset(token)

    @override
    def model_post_init(self, context: Any, /) -> None:
        host = file_system_context.get()
        if host is None:
            # Open the parent directory, so that a missing parent is reported rather than created.
            absolute_root = pathlib.Path(os.path.abspath(self.root.expanduser()))
            try:
                host = fs.osfs.OSFS(str(absolute_root.parent))
            except fs.errors.CreateFailed as e:
                raise ConstructionError(f"Invalid data directory {self.root}: parent directory does not exist") from e
            self._owns_host = True
            data_dir = Path(host) / absolute_root.name
        else:
            data_dir = Path(host, pathlib.PurePosixPath('/') / self.root.as_posix())
        self._host_file_system = host

        try:
            if not data_dir.exists():
                logger.info(f"Creating data directory {self.root}")
                data_dir.mkdir()
            if not data_dir.is_dir():
                raise ConstructionError(f"Invalid data directory {self.root}: not a directory")
            self._file_system = data_dir.opendir()
        except fs.errors.FSError as e:
            self.close()
            raise ConstructionError(f"Invalid data directory {self.root}: {e}") from e
        except ConstructionError:
            self.close()
            raise
        logger.verbose(f"Opened data directory {self.root}")

    @property
    def file_system(self) -> FileSystem:
        if self._file_system is None:
            raise StorageIOError(f"Store at {self.root} is closed")
        return self._file_system

    def get_key_path(self, file_key: FileKey) -> Path:
        """Get the path of the file holding a key, relative to the data directory."""
        return Path(self.file_system) / file_key.filename

    async def _run_io[T](self, description: str, func, *args) -> T:
        try:
            return await asyncio.to_thread(func, *args)
        except (fs.errors.FSError, OSError) as e:
            logger.warning(f"Failed to {description}: {e}")
            raise StorageIOError(f"Failed to {description}: {e}") from e

    @override
    async def contains(self, file_key: FileKey) -> bool:
        return await self._run_io(f"check {file_key.key!r}", self.get_key_path(file_key).exists)

    @override
    async def read_value(self, file_key: FileKey) -> str:
        data = await self._run_io(f"read {file_key.key!r}", self.get_key_path(file_key).read_bytes)
        try:
            return data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise StorageIOError(f"Value of {file_key.key!r} is not valid UTF-8") from e

    @override
    async def write_value(self, file_key: FileKey, value: str) -> None:
        await self._run_io(f"write {file_key.key!r}", self.get_key_path(file_key).write_bytes, value.encode('utf-8'))

    @override
    async def remove_value(self, file_key: FileKey) -> None:
        await self._run_io(f"delete {file_key.key!r}", self.get_key_path(file_key).unlink)

    @override
    def list_keys(self) -> Iterator[FileKey]:
        try:
            names = Path(self.file_system).iterdir_names()
        except fs.errors.FSError as e:
            raise StorageIOError(f"Failed to list {self.root}: {e}") from e
        return (self.key_format.from_filename(name) for name in names)

    @override
    def close(self) -> None:
        if self._file_system is not None:
            self._file_system.close()
            self._file_system = None
        if self._host_file_system is not None and self._owns_host:
            self._host_file_system.close()
        self._host_file_system = None
