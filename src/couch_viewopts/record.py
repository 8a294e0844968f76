"""OptionRecord: one assigned option name/value pair."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from .flags import AssignFlags

if TYPE_CHECKING:
    from collections.abc import Iterable

Buffer = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True)
class StoredBytes:
    """Byte storage tagged with its ownership.

    Owned storage is an independent ``bytes`` copy held by the record.
    Borrowed storage references caller (or static) memory the record must
    not release; lengths are explicit since values may contain NUL bytes.
    """

    data: Buffer
    owned: bool

    @classmethod
    def borrow(cls, data: Buffer) -> StoredBytes:
        if isinstance(data, bytes):
            return cls(data, owned=False)
        return cls(memoryview(data).cast("B"), owned=False)

    @classmethod
    def copy(cls, data: Buffer) -> StoredBytes:
        return cls(bytes(data), owned=True)

    @classmethod
    def store(cls, data: Buffer, constant: bool) -> StoredBytes:
        """Borrow *data* when *constant* is set, copy it otherwise."""
        return cls.borrow(data) if constant else cls.copy(data)

    def __bytes__(self) -> bytes:
        return bytes(self.data)

    def __len__(self) -> int:
        return len(self.data)


class OptionRecord:
    """
    An option name and value, validated and stored in wire form.

    A record is created empty, populated once by the assignment engine and
    cleaned up by the caller. ``cleanup()`` is safe after a failed
    assignment and safe to call twice. Records are also context managers::

        with create_option("limit", "10") as record:
            record.to_kv()  # b"limit=10"
    """

    __slots__ = ("_name", "_value", "_flags")

    def __init__(self) -> None:
        self._name: StoredBytes | None = None
        self._value: StoredBytes | None = None
        self._flags = AssignFlags.NONE

    # -- population (assignment engine only) -----------------------------------

    def set_name(self, name: StoredBytes) -> None:
        if self._name is not None:
            raise ValueError("Option name is already assigned; call cleanup() first")
        self._name = name

    def set_value(self, value: StoredBytes) -> None:
        if self._value is not None:
            raise ValueError("Option value is already assigned; call cleanup() first")
        self._value = value

    def set_flags(self, flags: AssignFlags) -> None:
        self._flags = AssignFlags(flags) & ~(
            AssignFlags.NAME_CONSTANT | AssignFlags.VALUE_CONSTANT
        )

    # -- accessors -------------------------------------------------------------

    @property
    def name(self) -> bytes:
        return bytes(self._name) if self._name is not None else b""

    @property
    def value(self) -> bytes:
        return bytes(self._value) if self._value is not None else b""

    @property
    def name_length(self) -> int:
        return len(self._name) if self._name is not None else 0

    @property
    def value_length(self) -> int:
        return len(self._value) if self._value is not None else 0

    @property
    def name_storage(self) -> StoredBytes | None:
        return self._name

    @property
    def value_storage(self) -> StoredBytes | None:
        return self._value

    @property
    def flags(self) -> AssignFlags:
        """Interpretation flags plus the constant bits of borrowed storage."""
        flags = self._flags
        if self._name is not None and not self._name.owned:
            flags |= AssignFlags.NAME_CONSTANT
        if self._value is not None and not self._value.owned:
            flags |= AssignFlags.VALUE_CONSTANT
        return flags

    @property
    def is_assigned(self) -> bool:
        return self._name is not None and self._value is not None

    def to_kv(self) -> bytes:
        """Serialise as ``name=value``."""
        return self.name + b"=" + self.value

    # -- lifecycle -------------------------------------------------------------

    def cleanup(self) -> None:
        """Release owned storage and reset the record to its empty state."""
        self._name = None
        self._value = None
        self._flags = AssignFlags.NONE

    def __enter__(self) -> OptionRecord:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.cleanup()

    def __repr__(self) -> str:
        if not self.is_assigned:
            return "OptionRecord(<empty>)"
        return f"OptionRecord({self.to_kv()!r})"


def cleanup_list(records: Iterable[OptionRecord]) -> None:
    """Clean up every record in *records*."""
    for record in records:
        record.cleanup()
