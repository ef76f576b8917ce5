#!/usr/bin/env python
# -*- coding: utf-8 -*-

from pathlib import Path
from pydantic import SerializeAsAny
from typing_extensions import Literal, Optional

from kad_fs.datatypes.pydantic import StrictBaseModel
from kad_fs.file_keys import Base64Key, FileKeyType
from kad_fs.filestore import KadFS, KeyValueStore

type LogLevel = Literal["error", "warning", "info", "verbose", "debug"]

class Config(StrictBaseModel):
    """Global configuration settings"""
    data_dir: Path = Path("kad-fs-data")
    key_format: FileKeyType = Base64Key
    log_level: LogLevel = "warning"
    filestore: Optional[SerializeAsAny[KeyValueStore]] = None

    def get_filestore(self) -> KeyValueStore:
        """
        Returns the configured store, or a KadFS store on data_dir if none is configured.

        Constructing a KadFS store creates its data directory.
        """
        if self.filestore is not None:
            return self.filestore
        return KadFS(root=self.data_dir, key_format=self.key_format)
