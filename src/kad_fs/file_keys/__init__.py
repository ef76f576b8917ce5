#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Logic for turning record keys into filenames and back.

Base64Key is the default format. HexKey produces longer names but only uses
the characters 0-9 and a-f, which suits case-insensitive filesystems.
"""

import importlib
from pydantic import ModelWrapValidatorHandler, PlainSerializer, WrapValidator
from typing_extensions import Annotated, Optional
from .base import FileKey
from .base64key import Base64Key
from .hexkey import HexKey

def file_key_type_validator(name, _: ModelWrapValidatorHandler[type[FileKey]]) -> type[FileKey]:
    """Get the FileKey subclass for the given key format name."""
    if isinstance(name, type) and issubclass(name, FileKey):
        return name
    return get_file_key_type(str(name))

def get_file_key_type(name: str) -> type[FileKey]:
    """Get the FileKey subclass for the given key format name."""
    class_name: Optional[str]
    match name.split('.'):
        case [module_name]:
            class_name = None
        case [module_name, class_name]:
            pass
        case _:
            raise ImportError(f"Unsupported key format: {name}")
    try:
        file_key_module = importlib.import_module(f".{module_name.lower()}", package=__name__)
    except ModuleNotFoundError:
        raise ImportError(f"Unsupported key format: {name}") from None
    file_key_type = getattr(file_key_module, class_name or module_name, None)
    if not (isinstance(file_key_type, type) and issubclass(file_key_type, FileKey)) or file_key_type is FileKey:
        raise ImportError(f"Unsupported key format: {name}")
    return file_key_type

type FileKeyType = Annotated[type[FileKey], WrapValidator(file_key_type_validator), PlainSerializer(lambda t: t.__name__)]

__all__ = ['FileKey', 'FileKeyType', 'Base64Key', 'HexKey', 'get_file_key_type']
