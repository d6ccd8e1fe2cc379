"""Exception hierarchy for jsondoc."""

from __future__ import annotations


class JsonDocError(Exception):
    """Base class for every error raised by jsondoc."""


class SequenceError(JsonDocError):
    """Misuse of the sequence store (unknown name, bad index, duplicate create)."""


class UnknownMethodError(JsonDocError):
    def __init__(self, name: str) -> None:
        super().__init__(f"unknown method: {name!r}")
        self.name = name


class StaleHandleError(JsonDocError):
    """The handle does not refer to a live object."""

    def __init__(self, handle: object) -> None:
        super().__init__(f"handle is not live: {handle}")
        self.handle = handle


class CapacityError(JsonDocError):
    def __init__(self, capacity: int, index: int) -> None:
        super().__init__(
            f"all {capacity} object slots are live (slot {index} still in use)"
        )
        self.capacity = capacity
        self.index = index


class ConfigError(JsonDocError, ValueError):
    pass
