#!/usr/bin/env python
# -*- coding: utf-8 -*-

import base64
import binascii
from typing_extensions import Self, override

from kad_fs.errors import InvalidFileKey

from .base import FileKey

class Base64Key(FileKey):
    """
    Base64Key filenames are the base64 encoding of the UTF-8 key.

    The URL-safe alphabet is used ('-' and '_' in place of '+' and '/'),
    since '/' cannot appear in a filename.
    """

    @property
    @override
    def filename(self) -> str:
        return base64.urlsafe_b64encode(bytes(self)).decode('ascii')

    @classmethod
    @override
    def from_filename(cls, filename: str) -> Self:
        try:
            raw = base64.b64decode(filename.encode('ascii'), altchars=b"-_", validate=True)
            key = raw.decode('utf-8')
        except (UnicodeError, binascii.Error) as e:
            raise InvalidFileKey(f"{filename!r} is not a base64 encoded key") from e
        if base64.urlsafe_b64encode(raw).decode('ascii') != filename:
            # Non-canonical padding bits would decode, but then map to a different file.
            raise InvalidFileKey(f"{filename!r} is not a canonical base64 encoded key")
        return cls(key)
