"""
Low-level commands for interacting directly with a store.

These commands are primarily intended for testing and debugging.
"""

from abc import ABC as AbstractBaseClass
import asyncio
import sys
from typing_extensions import Any, Coroutine

from plumbum import cli # type: ignore

from kad_fs.application import Application
from kad_fs.errors import KadFSError
from kad_fs.filestore import KeyValueStore

class SubCommand(cli.Application, AbstractBaseClass):

    parent: Application

    def store(self) -> KeyValueStore:
        """The store selected by the top level command's configuration."""
        return self.parent.config.get_filestore()

    def execute(self, coro: Coroutine[Any, Any, int]) -> int:
        """Run a coroutine to completion, reporting store errors instead of raising them."""
        try:
            return asyncio.run(coro)
        except KadFSError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
