"""Sequence store — named, ordered, 1-indexed containers.

Every list the engine keeps (an object's key list, a field's value list)
lives here under a string name. Index ``0`` is reserved: ``get(name, 0)``
returns the current element count, and elements are addressed ``1..size``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

from .errors import SequenceError

NOT_FOUND = -1


@dataclass
class SequenceStore:
    """A namespace of mutable sequences keyed by name."""

    _seqs: dict[str, list[Any]] = field(default_factory=dict)

    def create(self, name: str) -> None:
        if name in self._seqs:
            raise SequenceError(f"sequence already exists: {name}")
        self._seqs[name] = []

    def append(self, name: str, value: Any) -> None:
        self._lookup(name).append(value)

    def set(self, name: str, value: Any) -> list[Any]:
        """Replace the whole sequence with ``[value]``.

        Returns the discarded elements so owners can release them.
        """
        seq = self._lookup(name)
        dropped = list(seq)
        seq[:] = [value]
        return dropped

    def get(self, name: str, index: int) -> Any:
        seq = self._lookup(name)
        if index == 0:
            return len(seq)
        if not 1 <= index <= len(seq):
            raise SequenceError(
                f"index {index} out of range for {name} (size {len(seq)})"
            )
        return seq[index - 1]

    def find(self, name: str, value: Any) -> int:
        """1-based index of the first element equal to *value*, or ``NOT_FOUND``."""
        for i, item in enumerate(self._lookup(name), 1):
            if item == value:
                return i
        return NOT_FOUND

    def destroy(self, name: str) -> None:
        if self._seqs.pop(name, None) is None:
            raise SequenceError(f"no such sequence: {name}")

    def items(self, name: str) -> Iterator[Any]:
        """Iterate elements ``1..size`` in order."""
        for index in range(1, self.get(name, 0) + 1):
            yield self.get(name, index)

    def __contains__(self, name: object) -> bool:
        return name in self._seqs

    def __len__(self) -> int:
        return len(self._seqs)

    def _lookup(self, name: str) -> list[Any]:
        try:
            return self._seqs[name]
        except KeyError:
            raise SequenceError(f"no such sequence: {name}") from None
