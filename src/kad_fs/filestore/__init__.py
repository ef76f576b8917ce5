#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
The logic for storing records.

A store is an interface that maps string keys to string values.

KadFS stores each record as its own file in a flat data directory, named by the
encoded key. MemoryStore keeps records in memory and is intended for tests.

Other stores could be added in the future by subclassing KeyValueStore and
implementing its raw I/O primitives.
"""

from .base import KeyValueStore
from .kadfs import KadFS
from .memory import MemoryStore

__all__ = ['KeyValueStore', 'KadFS', 'MemoryStore']
