"""Instance registry — allocates object handles and owns the object heap."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

from .config import Config
from .errors import CapacityError, StaleHandleError
from .sequence import SequenceStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class Handle:
    """Opaque object identifier: a slot index plus the slot's generation."""

    index: int
    generation: int = 0

    def __str__(self) -> str:
        return f"_json_instance_{self.index}@{self.generation}"


@dataclass
class FieldRecord:
    name: str
    values: str  # sequence name
    isarray: bool = False


@dataclass
class ObjectRecord:
    handle: Handle
    keys: str  # sequence name
    fields: dict[str, FieldRecord] = field(default_factory=dict)


class InstanceRegistry:
    """Arena of live objects keyed by slot index.

    Slots are handed out round-robin from a counter taken modulo
    ``config.max_instances``; a slot is reused only once its previous
    occupant has been released, and reuse bumps the generation so old
    handles to the slot become detectably stale.
    """

    def __init__(self, config: Config | None = None, store: SequenceStore | None = None) -> None:
        self.config = config or Config()
        self.store = store if store is not None else SequenceStore()
        self._counter = 0
        self._live: dict[int, ObjectRecord] = {}
        self._generations: dict[int, int] = {}

    # -- Allocation -----------------------------------------------------

    def construct(self) -> Handle:
        index = self._next_index()
        generation = self._generations.get(index, -1) + 1
        self._generations[index] = generation

        handle = Handle(index, generation)
        record = ObjectRecord(handle=handle, keys=self._prefix(handle) + "_keys")
        self.store.create(record.keys)
        self._live[index] = record
        logger.debug("constructed %s", handle)
        return handle

    def _next_index(self) -> int:
        capacity = self.config.max_instances
        if not self.config.bounded:
            index = self._counter
            self._counter += 1
            return index

        start = self._counter
        for step in range(capacity):
            index = (start + step) % capacity
            if index not in self._live:
                self._counter = (index + 1) % capacity
                return index
        raise CapacityError(capacity, start)

    def release(self, handle: Handle) -> None:
        """Drop *handle*'s key list and its slot. Fields must already be gone."""
        record = self.resolve(handle)
        self.store.destroy(record.keys)
        del self._live[handle.index]
        logger.debug("released %s", handle)

    # -- Lookup ---------------------------------------------------------

    def resolve(self, handle: Handle) -> ObjectRecord:
        record = self._live.get(handle.index)
        if record is None or record.handle != handle:
            raise StaleHandleError(handle)
        return record

    def is_live(self, handle: Handle) -> bool:
        record = self._live.get(handle.index)
        return record is not None and record.handle == handle

    def handles(self) -> Iterator[Handle]:
        for record in list(self._live.values()):
            yield record.handle

    def __len__(self) -> int:
        return len(self._live)

    # -- Naming ---------------------------------------------------------

    @staticmethod
    def _prefix(handle: Handle) -> str:
        return f"_json_instance_{handle.index}"

    def field_sequence_name(self, handle: Handle, name: str) -> str:
        return f"{self._prefix(handle)}_{name}_val"
