#!/usr/bin/env python
# -*- coding: utf-8 -*-

from pathlib import Path
import sys
from typing_extensions import Literal

from plumbum import cli
import pydantic
import pyjson5

from kad_fs.datatypes.config import Config
from kad_fs.errors import KadFSError
from kad_fs.file_keys import get_file_key_type
from kad_fs.logger import LEVELS, logger

class Env:
    CONFIG_FILE = "KADFS_CONFIG"
    DATA_DIR = "KADFS_DATA_DIR"
    KEY_FORMAT = "KADFS_KEY_FORMAT"
    LOG_LEVEL = "KADFS_LOG_LEVEL"

default_config_file_locations = [
    Path("config.json5"),
    Path("config.json"),
]

class Application(cli.Application):
    """The top level CLI command"""
    PROGNAME = "kad-fs"
    VERSION = "0.1.0"

    config_file = cli.SwitchAttr(['-c', '--config'], cli.ExistingFile, envname=Env.CONFIG_FILE)

    data_dir = cli.SwitchAttr(['-d', '--data-dir'], str, envname=Env.DATA_DIR,
                              help = "The directory holding the records. Overrides any store set in the config file.")

    key_format = cli.SwitchAttr("--key-format", str, envname=Env.KEY_FORMAT,
                                help = "How keys are turned into filenames: Base64Key or HexKey.")

    log_level = cli.SwitchAttr("--log-level", cli.Set(*LEVELS, case_sensitive=False), envname=Env.LOG_LEVEL)

    config: Config

    def main(self, *args) -> Literal[0, 1]:
        # Set each config parameter in order of preference:
        # 1. Command line argument
        # 2. environment variable
        # 3. Existing config file passed in with -c
        # 4. Existing config file in default location
        # 5. Default value
        if self.config_file is not None:
            config_file_locations = [Path(self.config_file)]
        else:
            config_file_locations = default_config_file_locations
        config_json = {}
        for config_path in config_file_locations:
            if config_path.exists():
                with open(config_path, encoding="utf-8") as fd:
                    config_json = pyjson5.load(fd)
                break
        if not isinstance(config_json, dict):
            print("Invalid configuration: expected an object", file=sys.stderr)
            return 1

        if self.data_dir:
            # -d replaces any configured store
            config_json.pop("filestore", None)
            config_json["data_dir"] = self.data_dir

        try:
            self.config = Config(**config_json)
        except (KadFSError, ImportError, pydantic.ValidationError) as e:
            print(f"Invalid configuration: {e}", file=sys.stderr)
            return 1

        if self.log_level:
            self.config.log_level = self.log_level.lower()
        logger.set_level(self.config.log_level)

        if self.key_format:
            try:
                self.config.key_format = get_file_key_type(self.key_format)
            except ImportError as e:
                print(e, file=sys.stderr)
                return 1

        if args:
            print(f"Unknown command: {args[0]}")
            return 1
        if self.nested_command is None:
            self.help()
            return 0
        return 0
