"""Parameters of the pool listing and mutation calls."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .nodes import Pair


class PoolWho(IntEnum):
    """Ownership scope of a pool listing."""

    PRIMARY_GROUP = -4
    MINE = -3
    ALL = -2
    GROUP = -1


class UpdateType(IntEnum):
    REPLACE = 0
    MERGE = 1


class LockLevel(IntEnum):
    USE = 1
    MANAGE = 2
    ADMIN = 3
    ALL = 4


class VMState(IntEnum):
    ANY = -2
    ANY_BUT_DONE = -1
    INIT = 0
    PENDING = 1
    HOLD = 2
    ACTIVE = 3
    STOPPED = 4
    SUSPENDED = 5
    DONE = 6
    POWEROFF = 8
    UNDEPLOYED = 9
    CLONING = 10
    CLONING_FAILURE = 11


NO_BOUND = -1


@dataclass
class Filter:
    """Scope and ID range of a pool listing.

    ``who`` is either a ``PoolWho`` scope or a user ID. A bound of -1 leaves
    that side of the range open.
    """

    who: int = PoolWho.MINE
    start: int = NO_BOUND
    end: int = NO_BOUND

    def set_uid(self, uid: int) -> None:
        # SetUID and SetVisibility share the same slot
        if uid < 0:
            raise ValueError("Filter.set_uid: parameter uid must be positive")
        self.who = uid

    def set_visibility(self, flag: PoolWho) -> None:
        self.who = PoolWho(flag)

    def set_range(self, start: int, end: int) -> None:
        self.start = start
        self.end = end

    def to_args(self) -> list:
        # xmlrpc.client refuses int subclasses, enums go on the wire as plain ints
        return [int(self.who), self.start, self.end]


@dataclass
class ExtendedFilter(Filter):
    pair: str = ""

    def set_pair(self, key: str, value: str) -> None:
        self.pair = Pair(key=key, value=value).serialize()

    def to_args(self) -> list:
        return [*super().to_args(), self.pair]


@dataclass
class VMFilter(Filter):
    state: VMState = VMState.ANY_BUT_DONE

    def set_state(self, state: VMState) -> None:
        self.state = VMState(state)

    def to_args(self) -> list:
        return [*super().to_args(), int(self.state)]


@dataclass
class VMExtendedFilter(ExtendedFilter):
    state: VMState = VMState.ANY_BUT_DONE

    def set_state(self, state: VMState) -> None:
        self.state = VMState(state)

    def to_args(self) -> list:
        return [int(self.who), self.start, self.end, int(self.state), self.pair]


@dataclass
class DocumentFilter(Filter):
    doc_type: int = 0

    def to_args(self) -> list:
        return [*super().to_args(), self.doc_type]


__all__ = [
    "PoolWho",
    "UpdateType",
    "LockLevel",
    "VMState",
    "Filter",
    "ExtendedFilter",
    "VMFilter",
    "VMExtendedFilter",
    "DocumentFilter",
]
