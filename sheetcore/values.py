"""
Tagged declaration values.

The ``$`` and ``%`` sigils of the source language are decoded once into one
of four value kinds instead of being re-inspected wherever a value is used.
"""
import re
from typing import Literal, Union

from pydantic import BaseModel

VARIABLE_PATTERN = re.compile(r'\$([-.\w/]+)')


class LiteralValue(BaseModel):
    kind: Literal["literal"] = "literal"
    text: str

    def render(self):
        return self.text


class LocalReference(BaseModel):
    """``$name``: a local of the current module."""
    kind: Literal["local"] = "local"
    name: str

    def render(self):
        return f"${self.name}"


class ExportReference(BaseModel):
    """``$alias/name``: an export of a required module."""
    kind: Literal["export"] = "export"
    alias: str
    name: str

    def render(self):
        return f"${self.alias}/{self.name}"


class PlaceholderReference(BaseModel):
    """``%name`` qualified by the module that defines it."""
    kind: Literal["placeholder"] = "placeholder"
    module: str
    name: str

    def render(self):
        return f"%{self.module}|{self.name}"


# What an :exports entry can hold once built
ExportValue = Union[LiteralValue, PlaceholderReference]


def reference(name):
    """Decode the name captured from a ``$`` token."""
    if '/' in name:
        alias, _, exported = name.partition('/')
        return ExportReference(alias=alias, name=exported)
    return LocalReference(name=name)


def classify_value(value, module):
    """
    Decode a whole declaration value.

    Args:
        value: Declaration value as written
        module: Source name of the module the value appears in, used to
            qualify placeholders
    """
    if value.startswith('%'):
        return PlaceholderReference(module=module, name=value[1:])
    if value.startswith('$'):
        return reference(value[1:])
    return LiteralValue(text=value)
