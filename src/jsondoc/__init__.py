"""jsondoc — handle-based JSON document construction and encoding."""

from .config import Config
from .destructor import destroy_object
from .dispatcher import Dispatcher, Method
from .document import JsonDocument, JsonObject
from .encoder import encode, encode_text
from .errors import (
    CapacityError,
    ConfigError,
    JsonDocError,
    SequenceError,
    StaleHandleError,
    UnknownMethodError,
)
from .fields import Action, add_value, field_names, get_values, is_array, set_field, set_value
from .registry import Handle, InstanceRegistry
from .repl import JsonRepl
from .sequence import SequenceStore
from .values import (
    Null,
    Value,
    ValueType,
    VBool,
    VFloat,
    VInteger,
    VObject,
    VString,
    to_value,
)

__all__ = [
    "Action",
    "CapacityError",
    "Config",
    "ConfigError",
    "Dispatcher",
    "Handle",
    "InstanceRegistry",
    "JsonDocError",
    "JsonDocument",
    "JsonObject",
    "JsonRepl",
    "Method",
    "Null",
    "SequenceError",
    "SequenceStore",
    "StaleHandleError",
    "UnknownMethodError",
    "Value",
    "ValueType",
    "VBool",
    "VFloat",
    "VInteger",
    "VObject",
    "VString",
    "add_value",
    "destroy_object",
    "encode",
    "encode_text",
    "field_names",
    "get_values",
    "is_array",
    "set_field",
    "set_value",
    "to_value",
]
