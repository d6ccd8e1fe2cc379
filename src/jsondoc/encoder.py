"""Encoder — renders registry objects as compact JSON text.

Layout is fixed for compatibility with existing consumers::

    { "k1":v1,"k2":[ a,b ] }

One space inside the braces/brackets, none around commas or colons.
Keys and strings are emitted between double quotes without escaping
unless the registry's config has ``escape_strings`` turned on.
"""

from __future__ import annotations

import json
import sys
from typing import IO

from .registry import FieldRecord, Handle, InstanceRegistry
from .values import Value, VBool, VFloat, VInteger, VObject, VString


def encode_text(registry: InstanceRegistry, handle: Handle) -> str:
    """The top-level encoding of *handle*, including the trailing newline."""
    return _encode_object(registry, handle) + "\n"


def encode(registry: InstanceRegistry, handle: Handle, stream: IO[str] | None = None) -> str:
    """Write the encoding of *handle* to *stream* (stdout by default)."""
    text = encode_text(registry, handle)
    dest = stream if stream is not None else sys.stdout
    dest.write(text)
    return text


def _quote(registry: InstanceRegistry, text: str) -> str:
    if registry.config.escape_strings:
        return json.dumps(text, ensure_ascii=False)
    return f'"{text}"'


def _encode_object(registry: InstanceRegistry, handle: Handle) -> str:
    record = registry.resolve(handle)
    store = registry.store
    parts = [
        _encode_field(registry, record.fields[name])
        for name in store.items(record.keys)
    ]
    return "{ " + ",".join(parts) + " }"


def _encode_field(registry: InstanceRegistry, fld: FieldRecord) -> str:
    encoded = ",".join(
        _encode_value(registry, v) for v in registry.store.items(fld.values)
    )
    if fld.isarray:
        encoded = "[ " + encoded + " ]"
    return _quote(registry, fld.name) + ":" + encoded


def _encode_value(registry: InstanceRegistry, value: Value) -> str:
    if isinstance(value, VObject):
        return _encode_object(registry, value.handle)
    if isinstance(value, VString):
        return _quote(registry, value.value)
    if isinstance(value, (VBool, VInteger, VFloat)):
        return str(value)
    return "null"
