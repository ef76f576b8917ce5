#!/usr/bin/env python
# -*- coding: utf-8 -*-

import json
import pathlib

from plumbum import local
import pytest

from kad_fs.file_keys import Base64Key, HexKey
from kad_fs.test_util import run

@pytest.fixture
def data_dir(tmp_path: pathlib.Path, temp_dir) -> str:
    return str(tmp_path / "data")

def test_put_and_get(data_dir: str):
    run(
        args=["kad-fs", "-d", data_dir, "put", "greeting", "hello world"],
        expected_output="Stored value at key 'greeting'"
    )
    assert (pathlib.Path(data_dir) / Base64Key("greeting").filename).read_text() == "hello world"

    output = run(args=["kad-fs", "-d", data_dir, "get", "greeting"])
    assert output == "hello world\n"

def test_get_missing_key(data_dir: str):
    run(
        args=["kad-fs", "-d", data_dir, "get", "missing"],
        expected_output_does_not_contain="missing",
        expected_error_code=1
    )

def test_delete(data_dir: str):
    run(args=["kad-fs", "-d", data_dir, "put", "key", "value"])
    run(args=["kad-fs", "-d", data_dir, "delete", "key"], expected_output="Deleted key 'key'")
    run(args=["kad-fs", "-d", data_dir, "get", "key"], expected_error_code=1)
    # Deleting again still succeeds
    run(args=["kad-fs", "-d", data_dir, "delete", "key"], expected_output="Deleted key 'key'")

def test_scan(data_dir: str):
    run(args=["kad-fs", "-d", data_dir, "put", "first", "1"])
    run(args=["kad-fs", "-d", data_dir, "put", "sécond", "two\nlines"])

    output = run(args=["kad-fs", "-d", data_dir, "scan"])
    records = [json.loads(line) for line in output.splitlines()]
    assert sorted(records, key=lambda r: r["key"]) == [
        {"key": "first", "value": "1"},
        {"key": "sécond", "value": "two\nlines"},
    ]

def test_scan_rejects_arguments(data_dir: str):
    run(args=["kad-fs", "-d", data_dir, "scan", "extra"], expected_error_code=1)

def test_key_format(data_dir: str):
    run(args=["kad-fs", "-d", data_dir, "--key-format", "HexKey", "put", "key", "value"])
    assert (pathlib.Path(data_dir) / HexKey("key").filename).read_text() == "value"

    run(args=["kad-fs", "-d", data_dir, "--key-format", "NoSuchFormat", "get", "key"], expected_error_code=1)

def test_invalid_data_dir(tmp_path: pathlib.Path, temp_dir):
    not_a_directory = tmp_path / "file"
    not_a_directory.write_text("contents")
    run(args=["kad-fs", "-d", str(not_a_directory), "get", "key"], expected_error_code=1)

def test_environment(data_dir: str):
    # plumbum reads switch defaults from its own copy of the environment
    with local.env(KADFS_DATA_DIR=data_dir):
        run(args=["kad-fs", "put", "from", "environment"])
    assert (pathlib.Path(data_dir) / Base64Key("from").filename).read_text() == "environment"

def test_config_file(tmp_path: pathlib.Path, temp_dir):
    config_path = tmp_path / "custom.json5"
    config_path.write_text("""
    {
        // comments are allowed in json5
        data_dir: "configured",
        key_format: "HexKey",
        log_level: "error",
    }
    """)
    run(args=["kad-fs", "-c", str(config_path), "put", "key", "value"])
    assert (tmp_path / "configured" / HexKey("key").filename).read_text() == "value"

def test_default_config_file(tmp_path: pathlib.Path, temp_dir):
    (tmp_path / "config.json5").write_text('{ filestore: { type: "KadFS", root: "from-config" } }')
    run(args=["kad-fs", "put", "key", "value"])
    assert (tmp_path / "from-config" / Base64Key("key").filename).read_text() == "value"

    # --data-dir takes precedence over the configured store
    run(args=["kad-fs", "-d", "override", "put", "key", "other"])
    assert (tmp_path / "override" / Base64Key("key").filename).read_text() == "other"

def test_data_dir_replaces_configured_store(tmp_path: pathlib.Path, temp_dir):
    (tmp_path / "config.json5").write_text('{ filestore: { type: "KadFS", root: "from-config" } }')
    run(args=["kad-fs", "-d", "override", "put", "key", "value"])
    assert (tmp_path / "override" / Base64Key("key").filename).read_text() == "value"
    assert not (tmp_path / "from-config").exists()

def test_data_dir_replaces_unusable_configured_store(tmp_path: pathlib.Path, temp_dir):
    (tmp_path / "blocker").write_text("not a directory")
    (tmp_path / "config.json5").write_text('{ filestore: { type: "KadFS", root: "blocker" } }')
    run(args=["kad-fs", "-d", "override", "put", "key", "value"])
    assert (tmp_path / "override" / Base64Key("key").filename).read_text() == "value"

    # Without -d the broken store is reported rather than raised
    run(args=["kad-fs", "get", "key"], expected_error_code=1)

def test_invalid_config_file(tmp_path: pathlib.Path, temp_dir):
    (tmp_path / "config.json5").write_text('{ data_dirr: "typo" }')
    run(args=["kad-fs", "get", "key"], expected_error_code=1)
    (tmp_path / "config.json5").write_text('{ filestore: { type: "NoSuchStore" } }')
    run(args=["kad-fs", "get", "key"], expected_error_code=1)
    (tmp_path / "config.json5").write_text('["not", "an", "object"]')
    run(args=["kad-fs", "get", "key"], expected_error_code=1)
