"""Destructor — recursive teardown of an object and everything it owns."""

from __future__ import annotations

import logging

from .registry import Handle, InstanceRegistry
from .values import VObject

logger = logging.getLogger(__name__)


def destroy_object(registry: InstanceRegistry, handle: Handle) -> int:
    """Destroy *handle* and every child reachable through its fields.

    Fields are visited in key order; within a field only object-typed
    entries recurse, scalars go with the field's storage. Children that
    were already destroyed on their own are skipped. Returns the number
    of objects released.

    Raises StaleHandleError if *handle* is not live.
    """
    record = registry.resolve(handle)
    store = registry.store
    released = 0

    for name in list(store.items(record.keys)):
        fld = record.fields.pop(name)
        for value in store.items(fld.values):
            if isinstance(value, VObject) and registry.is_live(value.handle):
                released += destroy_object(registry, value.handle)
        store.destroy(fld.values)

    registry.release(handle)
    logger.debug("destroyed %s (%d objects)", handle, released + 1)
    return released + 1
