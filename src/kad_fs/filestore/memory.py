#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
MemoryStore is an in-memory store useful for testing code that consumes a store.
It does not persist records across restarts.
"""

from collections.abc import Iterator

from pydantic import PrivateAttr
from typing_extensions import override

from kad_fs.file_keys import FileKey

from .base import KeyValueStore

class MemoryStore(KeyValueStore):

    _records: dict[str, str] = PrivateAttr(default_factory=dict)

    @override
    def contains(self, file_key: FileKey) -> bool:
        return file_key.key in self._records

    @override
    def read_value(self, file_key: FileKey) -> str:
        return self._records[file_key.key]

    @override
    def write_value(self, file_key: FileKey, value: str) -> None:
        self._records[file_key.key] = value

    @override
    def remove_value(self, file_key: FileKey) -> None:
        del self._records[file_key.key]

    @override
    def list_keys(self) -> Iterator[FileKey]:
        return iter([self.key_format(key) for key in self._records])
