#!/usr/bin/env python
# -*- coding: utf-8 -*-

from contextlib import contextmanager
import functools
import sys

from typing_extensions import Callable, Iterator

ERROR = 0
WARNING = 1
INFO = 2
VERBOSE = 3
DEBUG = 4

LEVELS = {
    "error": ERROR,
    "warning": WARNING,
    "info": INFO,
    "verbose": VERBOSE,
    "debug": DEBUG,
}

def parse_level(name: str) -> int:
    """Convert a level name such as "debug" into its numeric severity."""
    try:
        return LEVELS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown log level '{name}'. Expected one of: {', '.join(LEVELS)}") from None

class Logger:
    """A simple configurable logger"""
    def __init__(self, log_func: Callable, log_level=INFO):
        self.log_func = log_func
        self.log_level = log_level

    def set_level(self, log_level: int | str) -> None:
        if isinstance(log_level, str):
            log_level = parse_level(log_level)
        self.log_level = log_level

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """A context manager for logging the beginning and end of a code block"""
        self.debug(f"Starting {name}...")
        yield
        self.debug(f"Finished {name}")

    def log(self, log_level, *message):
        """Conditionally log a message based on the configured log level"""
        if self.log_level >= log_level:
            self.log_func(*message)

    def debug(self, *message):
        """Log a message with DEBUG severity"""
        self.log(DEBUG, *message)

    def verbose(self, *message):
        """Log a message with VERBOSE severity"""
        self.log(VERBOSE, *message)

    def info(self, *message):
        """Log a message with INFO severity"""
        self.log(INFO, *message)

    def warning(self, *message):
        """Log a message with WARNING severity"""
        self.log(WARNING, *message)

    def error(self, *message):
        """Log a message with ERROR severity"""
        self.log(ERROR, *message)

logger = Logger(functools.partial(print, file=sys.stderr), WARNING)
"""logger writes to stderr; the CLI raises or lowers its level from configuration"""
