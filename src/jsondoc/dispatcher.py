"""Dispatcher — routes (handle, method) pairs to engine operations."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable

from .destructor import destroy_object
from .encoder import encode
from .errors import UnknownMethodError
from .fields import add_value, field_names, get_values, set_value
from .registry import Handle, InstanceRegistry

logger = logging.getLogger(__name__)


class Method(Enum):
    ADD = "add"
    SET = "set"
    ENCODE = "encode"
    DESTROY = "destroy"
    GET = "get"
    KEYS = "keys"

    @classmethod
    def parse(cls, name: "str | Method") -> "Method":
        if isinstance(name, Method):
            return name
        try:
            return cls(name)
        except ValueError:
            raise UnknownMethodError(name) from None


Operation = Callable[..., Any]

OPERATIONS: dict[Method, Operation] = {
    Method.ADD: add_value,
    Method.SET: set_value,
    Method.ENCODE: encode,
    Method.DESTROY: destroy_object,
    Method.GET: get_values,
    Method.KEYS: field_names,
}


class Dispatcher:
    """Function table over a single registry."""

    def __init__(self, registry: InstanceRegistry, table: dict[Method, Operation] | None = None) -> None:
        self.registry = registry
        self._table = dict(OPERATIONS if table is None else table)

    def invoke(self, handle: Handle, method: "str | Method", *args: Any) -> Any:
        """Run *method* on *handle*; unknown methods raise UnknownMethodError."""
        op = Method.parse(method)
        try:
            func = self._table[op]
        except KeyError:
            raise UnknownMethodError(op.value) from None
        logger.debug("invoke %s.%s%r", handle, op.value, args)
        return func(self.registry, handle, *args)
