#!/usr/bin/env python
# -*- coding: utf-8 -*-

from typing_extensions import Self, override

from kad_fs.errors import InvalidFileKey

from .base import FileKey

class HexKey(FileKey):
    """HexKey filenames are the lowercase hex encoding of the UTF-8 key."""

    @property
    @override
    def filename(self) -> str:
        return bytes(self).hex()

    @classmethod
    @override
    def from_filename(cls, filename: str) -> Self:
        if filename != filename.lower():
            raise InvalidFileKey(f"{filename!r} is not a lowercase hex encoded key")
        try:
            key = bytes.fromhex(filename).decode('utf-8')
        except (UnicodeError, ValueError) as e:
            raise InvalidFileKey(f"{filename!r} is not a hex encoded key") from e
        file_key = cls(key)
        if file_key.filename != filename:
            # fromhex skips whitespace
            raise InvalidFileKey(f"{filename!r} is not a canonical hex encoded key")
        return file_key
