#!/usr/bin/env python
# -*- coding: utf-8 -*-

from dataclasses import dataclass

@dataclass(frozen=True)
class Record:
    """A key and its value, as produced by a scan."""
    key: str
    value: str

__all__ = ['Record']
