#!/usr/bin/env python
# -*- coding: utf-8 -*-

import itertools

import pytest

from kad_fs.errors import InvalidFileKey, ValidationError
from kad_fs.file_keys import Base64Key, FileKey, HexKey, get_file_key_type

sample_keys = [
    "a", "b", "ab", "ba", "A", "?", ">", "???", "~~~", "a=", "a/b", "../etc/passwd",
    "\x00", "\u00e9", "e\u0301", "🔑", "key with spaces", "x" * 100,
]

def test_base64_filename():
    assert Base64Key("hello").filename == "aGVsbG8="
    assert Base64Key("???").filename == "Pz8_"
    assert Base64Key("~~~").filename == "fn5-"

def test_hex_filename():
    assert HexKey("hello").filename == "68656c6c6f"
    assert HexKey("é").filename == "c3a9"

@pytest.mark.parametrize("key_type", [Base64Key, HexKey])
def test_filenames_are_safe_and_reversible(key_type: type[FileKey]):
    for key in sample_keys:
        filename = key_type(key).filename
        assert filename
        assert "/" not in filename and "\\" not in filename and "\x00" not in filename
        assert filename not in (".", "..")
        assert key_type.from_filename(filename) == key_type(key)

@pytest.mark.parametrize("key_type", [Base64Key, HexKey])
def test_filenames_are_distinct(key_type: type[FileKey]):
    for first, second in itertools.combinations(sample_keys, 2):
        assert key_type(first).filename != key_type(second).filename

@pytest.mark.parametrize("filename", [
    "not base64!",
    "aGVsbG8",       # missing padding
    "aGVsbG9=",      # non-canonical padding bits
    "Pz8/",          # standard alphabet
    "Pz8+",
    "__79",          # decodes to bytes that are not UTF-8
    "ä",
])
def test_base64_rejects_invalid_filenames(filename: str):
    with pytest.raises(InvalidFileKey):
        Base64Key.from_filename(filename)

@pytest.mark.parametrize("filename", ["6", "zz", "68656C6C6F", "ff", "68 65"])
def test_hex_rejects_invalid_filenames(filename: str):
    with pytest.raises(InvalidFileKey):
        HexKey.from_filename(filename)

@pytest.mark.parametrize("key", [None, 1, b"bytes", ["list"], "", "\udc80"])
def test_from_key_rejects_invalid_keys(key):
    with pytest.raises(ValidationError):
        Base64Key.from_key(key)

def test_from_key():
    assert Base64Key.from_key("key") == Base64Key("key")
    assert str(HexKey.from_key("key")) == "key"
    assert bytes(HexKey.from_key("ké")) == "ké".encode("utf-8")

def test_get_file_key_type():
    assert get_file_key_type("Base64Key") is Base64Key
    assert get_file_key_type("HexKey") is HexKey
    assert get_file_key_type("hexkey.HexKey") is HexKey
    with pytest.raises(ImportError):
        get_file_key_type("Sha256e")
    with pytest.raises(ImportError):
        get_file_key_type("base.FileKey.extra")
    with pytest.raises(ImportError):
        get_file_key_type("base.FileKey")
