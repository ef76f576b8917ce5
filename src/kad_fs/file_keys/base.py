#!/usr/bin/env python
# -*- coding: utf-8 -*-

from abc import abstractmethod
from dataclasses import dataclass
from typing_extensions import Any, Self

from kad_fs.errors import ValidationError

@dataclass(frozen=True)
class FileKey:
    """
    A record key together with the filename it is stored under.

    Each subclass describes a specific key encoding. Encodings must be reversible
    and produce names that are safe to use as a single path component, so that
    a directory listing can be turned back into the original keys.
    """

    key: str

    @classmethod
    def from_key(cls, key: Any) -> Self:
        """Validate a caller-supplied key and wrap it."""
        if not isinstance(key, str):
            raise ValidationError(f"key is not a valid string: {key!r}")
        if not key:
            # every encoding maps the empty key to the empty filename
            raise ValidationError("key must not be empty")
        try:
            key.encode('utf-8')
        except UnicodeEncodeError as e:
            raise ValidationError(f"key cannot be encoded as UTF-8: {key!r}") from e
        return cls(key)

    @property
    @abstractmethod
    def filename(self) -> str:
        """The name of the file holding this key's value."""
        raise NotImplementedError()

    @classmethod
    @abstractmethod
    def from_filename(cls, filename: str) -> Self:
        """Recover a key from a filename. Raises InvalidFileKey if the name is not a valid encoding."""
        raise NotImplementedError()

    def __bytes__(self) -> bytes:
        return self.key.encode('utf-8')

    def __str__(self) -> str:
        return self.key
