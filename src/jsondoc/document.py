"""JsonDocument — the public face of the engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import IO, Any

from .config import Config
from .dispatcher import Dispatcher, Method
from .encoder import encode_text
from .registry import Handle, InstanceRegistry
from .values import Value, ValueType


@dataclass(eq=False)
class JsonDocument:
    """Owns one registry and exposes construct / add / set / encode / destroy.

    Usage::

        doc = JsonDocument()
        obj = doc.construct()
        obj.set("a", "string", "hi")
        obj.add("c", "integer", "1")
        obj.add("c", "integer", "2")
        obj.encode()            # prints { "a":"hi","c":[ 1,2 ] }
        obj.destroy()
    """

    config: Config = field(default_factory=Config)

    def __post_init__(self) -> None:
        self.registry = InstanceRegistry(self.config)
        self.dispatcher = Dispatcher(self.registry)

    # -- Handle-level operations ----------------------------------------

    def construct(self) -> "JsonObject":
        return JsonObject(self, self.registry.construct())

    def invoke(self, handle: Handle, method: "str | Method", *args: Any) -> Any:
        return self.dispatcher.invoke(handle, method, *args)

    def add(self, handle: Handle, name: str, vtype: "str | ValueType" = ValueType.NULL,
            value: object = None) -> "JsonObject | None":
        return self._wrap(self.invoke(handle, Method.ADD, name, vtype, value))

    def set(self, handle: Handle, name: str, vtype: "str | ValueType" = ValueType.NULL,
            value: object = None) -> "JsonObject | None":
        return self._wrap(self.invoke(handle, Method.SET, name, vtype, value))

    def encode(self, handle: Handle, stream: IO[str] | None = None) -> str:
        return self.invoke(handle, Method.ENCODE, stream)

    def encode_text(self, handle: Handle) -> str:
        return encode_text(self.registry, handle)

    def destroy(self, handle: Handle) -> int:
        return self.invoke(handle, Method.DESTROY)

    def is_live(self, handle: Handle) -> bool:
        return self.registry.is_live(handle)

    @property
    def live_count(self) -> int:
        return len(self.registry)

    def _wrap(self, child: Handle | None) -> "JsonObject | None":
        return None if child is None else JsonObject(self, child)


@dataclass(frozen=True)
class JsonObject:
    """Entry point bound to one handle: ``obj("set", "a", "string", "hi")``."""

    doc: JsonDocument
    handle: Handle

    def __call__(self, method: "str | Method", *args: Any) -> Any:
        result = self.doc.invoke(self.handle, method, *args)
        if isinstance(result, Handle):
            return JsonObject(self.doc, result)
        return result

    def add(self, name: str, vtype: "str | ValueType" = ValueType.NULL,
            value: object = None) -> "JsonObject | None":
        return self.doc.add(self.handle, name, vtype, value)

    def set(self, name: str, vtype: "str | ValueType" = ValueType.NULL,
            value: object = None) -> "JsonObject | None":
        return self.doc.set(self.handle, name, vtype, value)

    def encode(self, stream: IO[str] | None = None) -> str:
        return self.doc.encode(self.handle, stream)

    def encode_text(self) -> str:
        return self.doc.encode_text(self.handle)

    def destroy(self) -> int:
        return self.doc.destroy(self.handle)

    def keys(self) -> list[str]:
        return self.doc.invoke(self.handle, Method.KEYS)

    def get(self, name: str) -> list[Value]:
        return self.doc.invoke(self.handle, Method.GET, name)

    @property
    def live(self) -> bool:
        return self.doc.is_live(self.handle)
