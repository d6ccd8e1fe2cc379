"""Value types for jsondoc."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .registry import Handle

logger = logging.getLogger(__name__)

# Textual spellings accepted as boolean true; anything else is false.
TRUE_ALIASES = frozenset({"1", "yes", "true"})


class ValueType(Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    OBJECT = "object"

    @classmethod
    def parse(cls, name: "str | ValueType | None") -> "ValueType | None":
        """Map a type name to a ValueType; ``None`` if it is not recognized."""
        if isinstance(name, ValueType):
            return name
        if not name:
            return cls.NULL
        try:
            return cls(name)
        except ValueError:
            return None


class _Null:
    """Singleton for the JSON ``null`` value."""

    _instance: "_Null | None" = None

    def __new__(cls) -> "_Null":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Null"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "null"


Null = _Null()


@dataclass(frozen=True)
class VBool:
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class VInteger:
    text: str  # emitted verbatim

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class VFloat:
    text: str  # emitted verbatim

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class VString:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class VObject:
    """Reference to a child object owned by the field holding it."""

    handle: "Handle"

    def __str__(self) -> str:
        return f"VObject({self.handle})"


Value = Union[VBool, VInteger, VFloat, VString, VObject, _Null]


def to_bool(raw: object) -> bool:
    if isinstance(raw, bool):
        return raw
    return str(raw) in TRUE_ALIASES


def to_value(vtype: "str | ValueType | None", raw: object = None) -> Value:
    """Build a scalar Value from a type name and its raw (usually textual) form.

    - unknown type names degrade to ``Null``
    - a missing *raw* renders as the empty text for string/number types
    - ``object`` is not handled here; children are created by the field store
    """
    kind = ValueType.parse(vtype)
    if kind is None:
        logger.warning("unrecognized value type %r, storing null", vtype)
        return Null
    if kind is ValueType.OBJECT:
        raise ValueError("object values are created through the field store")

    if kind is ValueType.NULL:
        return Null
    if kind is ValueType.BOOLEAN:
        return VBool(to_bool("" if raw is None else raw))

    text = "" if raw is None else str(raw)
    if kind is ValueType.INTEGER:
        return VInteger(text)
    if kind is ValueType.FLOAT:
        return VFloat(text)
    return VString(text)


def value_type(value: Value) -> ValueType:
    if isinstance(value, VObject):
        return ValueType.OBJECT
    if isinstance(value, VString):
        return ValueType.STRING
    if isinstance(value, VBool):
        return ValueType.BOOLEAN
    if isinstance(value, VInteger):
        return ValueType.INTEGER
    if isinstance(value, VFloat):
        return ValueType.FLOAT
    return ValueType.NULL
