#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Errors raised by kad-fs stores.

Callers are expected to branch on NotFound for existence checks and treat
every other KadFSError as an operational failure.
"""

class KadFSError(Exception):
    """Base class for every error raised by a store."""

class ConstructionError(KadFSError):
    """The data directory could not be created, or is not a directory."""

class ValidationError(KadFSError, TypeError):
    """An argument had the wrong type. Always raised before any I/O happens."""

class NotFound(KadFSError, FileNotFoundError):
    """No record exists for the requested key."""

    def __init__(self, key: str):
        super().__init__(f"Not found: {key!r}")
        self.key = key

class StorageIOError(KadFSError, OSError):
    """An underlying filesystem operation failed. The original error is kept as __cause__."""

class InvalidFileKey(KadFSError, ValueError):
    """A filename in the data directory does not decode to a key."""

__all__ = ['KadFSError', 'ConstructionError', 'ValidationError', 'NotFound', 'StorageIOError', 'InvalidFileKey']
