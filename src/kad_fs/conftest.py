#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
This module contains pytest fixtures shared by the tests in this package.
"""

import contextlib
import pathlib

import fs.memoryfs
import pytest

from kad_fs.filestore import KadFS, KeyValueStore, MemoryStore

@pytest.fixture
def temp_dir(tmp_path):
    with contextlib.chdir(tmp_path):
        yield

def local_store_types():
    yield pytest.param(lambda tmp_path: KadFS(root=tmp_path / "data"), id="KadFS")
    yield pytest.param(lambda tmp_path: KadFS.with_file_system("data", fs.memoryfs.MemoryFS()), id="KadFS(MemoryFS)")
    yield pytest.param(lambda tmp_path: MemoryStore(), id="MemoryStore")

@pytest.fixture(params=local_store_types())
def store(request, tmp_path: pathlib.Path):
    """Every kind of store, each starting out empty."""
    key_value_store: KeyValueStore = request.param(tmp_path)
    yield key_value_store
    key_value_store.close()

@pytest.fixture
def os_store(tmp_path: pathlib.Path):
    """A KadFS store on the OS filesystem, in tmp_path / "data"."""
    store = KadFS(root=tmp_path / "data")
    yield store
    store.close()
