#!/usr/bin/env python
# -*- coding: utf-8 -*-

from abc import abstractmethod
import asyncio
from collections.abc import AsyncGenerator, AsyncIterator, Iterator
from contextlib import asynccontextmanager
from typing import Any, Optional, Self

from kad_fs.datatypes.async_utils import CompletionCallback, MaybeAwaitable, maybe_await, schedule
from kad_fs.datatypes.common import Record
from kad_fs.datatypes.pydantic import AbstractBaseModel
from kad_fs.errors import NotFound, ValidationError
from kad_fs.file_keys import Base64Key, FileKey, FileKeyType
from kad_fs.logger import logger

def check_value(value: Any) -> None:
    if not isinstance(value, str):
        raise ValidationError(f"value is not a valid string: {value!r}")
    try:
        value.encode('utf-8')
    except UnicodeEncodeError as e:
        raise ValidationError("value cannot be encoded as UTF-8") from e

def check_callback(callback: Any) -> None:
    if callback is not None and not callable(callback):
        raise ValidationError(f"callback is not a valid function: {callback!r}")

class KeyValueStore(AbstractBaseModel):
    """
    A store mapping string keys to string values.

    The public operations validate their arguments immediately, raising
    ValidationError before any I/O, then start the operation as a task on the
    running event loop and return it. Awaiting the task yields the result or
    raises the operation's error.

    put and delete also accept an optional completion callback. It is called
    exactly once, with None on success or with the exception on failure; in that
    case the exception is not re-raised from the task.

    Stores do no locking: concurrent operations on the same key may interleave
    in any order. Callers that need read-your-writes must serialize themselves.
    """

    key_format: FileKeyType = Base64Key

    def make_key(self, key: Any) -> FileKey:
        return self.key_format.from_key(key)

    def get(self, key: str) -> asyncio.Task[str]:
        """Fetch the value stored at key. Raises NotFound if there is none."""
        file_key = self.make_key(key)
        return schedule(self._get(file_key))

    def put(self, key: str, value: str, callback: Optional[CompletionCallback] = None) -> asyncio.Task[None]:
        """Store value at key, replacing any previous value."""
        file_key = self.make_key(key)
        check_value(value)
        check_callback(callback)
        return schedule(self._put(file_key, value), callback)

    def delete(self, key: str, callback: Optional[CompletionCallback] = None) -> asyncio.Task[None]:
        """Delete the value at key. Deleting a missing key succeeds."""
        file_key = self.make_key(key)
        check_callback(callback)
        return schedule(self._delete(file_key), callback)

    def exists(self, key: str) -> asyncio.Task[bool]:
        """Returns whether a value is stored at key."""
        file_key = self.make_key(key)
        return schedule(self._exists(file_key))

    def scan(self) -> AsyncIterator[Record]:
        """
        Iterate over every record in the store.

        The set of keys is fixed when scan() is called; records written afterwards
        may not appear. Values are read one at a time as the iterator advances.
        The iterator cannot be restarted; call scan() again instead.
        """
        return self._read_records(self.list_keys())

    async def _get(self, file_key: FileKey) -> str:
        with logger.section(f"get {file_key.key!r}"):
            if not await maybe_await(self.contains(file_key)):
                raise NotFound(file_key.key)
            return await maybe_await(self.read_value(file_key))

    async def _exists(self, file_key: FileKey) -> bool:
        return await maybe_await(self.contains(file_key))

    async def _put(self, file_key: FileKey, value: str) -> None:
        with logger.section(f"put {file_key.key!r}"):
            await maybe_await(self.write_value(file_key, value))

    async def _delete(self, file_key: FileKey) -> None:
        with logger.section(f"delete {file_key.key!r}"):
            if not await maybe_await(self.contains(file_key)):
                return
            await maybe_await(self.remove_value(file_key))

    async def _read_records(self, file_keys: Iterator[FileKey]) -> AsyncGenerator[Record]:
        for file_key in file_keys:
            value = await maybe_await(self.read_value(file_key))
            yield Record(key=file_key.key, value=value)

    @abstractmethod
    def contains(self, file_key: FileKey) -> MaybeAwaitable[bool]:
        """Returns whether the key exists in the store."""

    @abstractmethod
    def read_value(self, file_key: FileKey) -> MaybeAwaitable[str]:
        """Read the value stored at an existing key."""

    @abstractmethod
    def write_value(self, file_key: FileKey, value: str) -> MaybeAwaitable[None]:
        """Create or fully overwrite the value at a key."""

    @abstractmethod
    def remove_value(self, file_key: FileKey) -> MaybeAwaitable[None]:
        """Remove an existing key."""

    @abstractmethod
    def list_keys(self) -> Iterator[FileKey]:
        """
        Snapshot the keys currently in the store.

        The listing itself happens before this returns. Decoding each entry may be
        deferred until the iterator reaches it.
        """

    def close(self) -> MaybeAwaitable[None]:
        """Release any resources held by the store."""

    @asynccontextmanager
    async def open(self) -> AsyncGenerator[Self]:
        """
        Use the store within a block, closing it on exit.
        """
        try:
            yield self
        finally:
            await maybe_await(self.close())
