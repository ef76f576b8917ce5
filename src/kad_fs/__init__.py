#!/usr/bin/env python
# -*- coding: utf-8 -*-

from .application import Application
from .commands import get, put, delete, scan
from .datatypes.common import Record
from .errors import ConstructionError, InvalidFileKey, KadFSError, NotFound, StorageIOError, ValidationError
from .filestore import KadFS, KeyValueStore, MemoryStore

Application.subcommand("get", get.Get)
Application.subcommand("put", put.Put)
Application.subcommand("delete", delete.Delete)
Application.subcommand("scan", scan.Scan)

__all__ = [
    'Application', 'Record', 'KadFS', 'KeyValueStore', 'MemoryStore',
    'KadFSError', 'ConstructionError', 'ValidationError', 'NotFound', 'StorageIOError', 'InvalidFileKey',
]

if __name__ == "__main__":
    Application.run()

def main():
    Application.run()
