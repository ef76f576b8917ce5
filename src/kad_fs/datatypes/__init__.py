#!/usr/bin/env python
# -*- coding: utf-8 -*-

from .common import Record
from .async_utils import MaybeAwaitable, maybe_await

__all__ = ['Record', 'MaybeAwaitable', 'maybe_await']
