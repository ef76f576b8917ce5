#!/usr/bin/env python
# -*- coding: utf-8 -*-

from abc import ABC
import importlib
from collections.abc import Iterator
from typing import Any, Self
from pydantic import ConfigDict, ModelWrapValidatorHandler, BaseModel, SerializerFunctionWrapHandler, model_serializer, model_validator

class StrictBaseModel(BaseModel):
    """A model that rejects unknown fields, so typos in config files are reported."""
    model_config = ConfigDict(extra='forbid')

class AbstractBaseModel(StrictBaseModel, ABC):
    """
    A model with several concrete implementations, selected by a "type" field
    holding the implementation's class name.

    Implementations that have not been imported yet are looked up in the sibling
    module named after the lowercased class name.
    """

    @classmethod
    def implementations(cls) -> Iterator[type[Self]]:
        for subclass in cls.__subclasses__():
            yield subclass
            yield from subclass.implementations()

    @classmethod
    def implementation(cls, type_name: str) -> type[Self]:
        for impl_cls in cls.implementations():
            if impl_cls.__name__ == type_name and not impl_cls.is_abstract():
                return impl_cls
        importlib.import_module(f"..{type_name.lower()}", package=cls.__module__)
        for impl_cls in cls.implementations():
            if impl_cls.__name__ == type_name and not impl_cls.is_abstract():
                return impl_cls
        raise ImportError(f"'{type_name}' is not an implementation of '{cls.__name__}'")

    @classmethod
    def is_abstract(cls) -> bool:
        return bool(getattr(cls, "__abstractmethods__", False))

    @model_validator(mode='wrap')
    @classmethod
    def validator(cls, v: Any, handler: ModelWrapValidatorHandler[Self]) -> Self:
        if isinstance(v, cls):
            return handler(v)

        if not cls.is_abstract():
            if isinstance(v, dict):
                v = {key: value for key, value in v.items() if key != "type"}
            return handler(v)

        if not isinstance(v, dict):
            raise ValueError(f"Expected an object describing a {cls.__name__}")
        v = dict(v)
        type_name = v.pop("type", None)
        if not isinstance(type_name, str):
            raise ValueError("Missing 'type' field in configuration")
        return cls.implementation(type_name)(**v)

    @model_serializer(mode='wrap')
    def serialize_model(
        self, handler: SerializerFunctionWrapHandler
    ) -> dict[str, object]:
        serialized = handler(self)
        serialized['type'] = self.__class__.__name__
        return serialized
