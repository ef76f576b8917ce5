# Validate that the example configuration file is correct by
# - loading it and seeing that it validates and matches the expected config
# - checking that the configured store is usable

import contextlib
import pathlib

import pyjson5
import pytest

from kad_fs.datatypes.config import Config
from kad_fs.file_keys import Base64Key, HexKey
from kad_fs.filestore import KadFS

example_config_path = pathlib.Path(__file__).parent / "config.json5"

@pytest.mark.asyncio
async def test_example_config(tmp_path: pathlib.Path):
    with contextlib.chdir(tmp_path):
        with open(example_config_path, encoding="utf-8") as f:
            loaded_config = Config.model_validate(pyjson5.decode(f.read()))

        example_config = Config(
            data_dir=pathlib.Path("kad-fs-data"),
            key_format=Base64Key,
            log_level="info",
            filestore=KadFS(root=pathlib.Path("records"), key_format=HexKey),
        )
        assert loaded_config.model_dump() == example_config.model_dump()
        assert loaded_config.model_dump(mode="json")["filestore"] == {
            "type": "KadFS", "root": "records", "key_format": "HexKey",
        }

        async with loaded_config.get_filestore().open() as store:
            await store.put("key", "value")
        assert (tmp_path / "records" / HexKey("key").filename).read_text() == "value"
        example_config.filestore.close()
