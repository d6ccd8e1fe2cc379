"""Field store — ordered, typed fields on registry objects."""

from __future__ import annotations

import logging
from enum import Enum

from .destructor import destroy_object
from .registry import FieldRecord, Handle, InstanceRegistry
from .sequence import NOT_FOUND
from .values import Value, ValueType, VObject, to_value

logger = logging.getLogger(__name__)


class Action(Enum):
    APPEND = "append"
    SET = "set"

    @classmethod
    def parse(cls, name: "str | Action | None") -> "Action":
        if isinstance(name, Action):
            return name
        if not name:
            return cls.SET
        return cls(name)


def set_field(
    registry: InstanceRegistry,
    handle: Handle,
    name: str,
    vtype: "str | ValueType | None" = ValueType.NULL,
    value: object = None,
    action: "str | Action | None" = Action.SET,
) -> Handle | None:
    """Write one value into field *name* of *handle*.

    ``append`` adds to the field and puts it in array mode; ``set`` replaces
    the field's contents with the single value and puts it in scalar mode.
    A field keeps the position of its first write.

    For type ``object`` a new child object is constructed, stored in the
    field, and its handle returned; otherwise returns ``None``.
    """
    record = registry.resolve(handle)
    action = Action.parse(action)

    child: Handle | None = None
    stored: Value
    if ValueType.parse(vtype) is ValueType.OBJECT:
        child = registry.construct()
        stored = VObject(child)
    else:
        stored = to_value(vtype, value)

    store = registry.store
    fld = record.fields.get(name)
    if fld is None:
        fld = FieldRecord(name=name, values=registry.field_sequence_name(handle, name))
        store.create(fld.values)
        record.fields[name] = fld
    if store.find(record.keys, name) == NOT_FOUND:
        store.append(record.keys, name)

    if action is Action.APPEND:
        fld.isarray = True
        store.append(fld.values, stored)
    else:
        fld.isarray = False
        for dropped in store.set(fld.values, stored):
            if isinstance(dropped, VObject) and registry.is_live(dropped.handle):
                logger.debug("set %s.%s discards child %s", handle, name, dropped.handle)
                destroy_object(registry, dropped.handle)
    return child


def add_value(
    registry: InstanceRegistry,
    handle: Handle,
    name: str,
    vtype: "str | ValueType | None" = ValueType.NULL,
    value: object = None,
) -> Handle | None:
    return set_field(registry, handle, name, vtype, value, Action.APPEND)


def set_value(
    registry: InstanceRegistry,
    handle: Handle,
    name: str,
    vtype: "str | ValueType | None" = ValueType.NULL,
    value: object = None,
) -> Handle | None:
    return set_field(registry, handle, name, vtype, value, Action.SET)


# -- Read access ---------------------------------------------------------

def field_names(registry: InstanceRegistry, handle: Handle) -> list[str]:
    """Field names in first-write order."""
    record = registry.resolve(handle)
    return list(registry.store.items(record.keys))


def get_values(registry: InstanceRegistry, handle: Handle, name: str) -> list[Value]:
    """The values held by field *name*; empty if the field was never written."""
    record = registry.resolve(handle)
    fld = record.fields.get(name)
    if fld is None:
        return []
    return list(registry.store.items(fld.values))


def is_array(registry: InstanceRegistry, handle: Handle, name: str) -> bool:
    record = registry.resolve(handle)
    fld = record.fields.get(name)
    return fld is not None and fld.isarray
