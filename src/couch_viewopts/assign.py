"""
Option assignment: look up, validate and store a single view option.

``assign()`` fills a caller-provided ``OptionRecord``; ``create_option()``
returns a fresh one. Names may be given as strings or as ``ViewOption``
identifiers, values as strings or integers. Passing a Python ``int`` sets
the matching ``*_NUMERIC`` flag implicitly.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union

from .coercers import CoercerRegistry, build_default_coercers
from .exceptions import (
    MissingNameError,
    MissingValueError,
    OptionValidationError,
    PassthroughError,
    UnrecognizedOptionError,
    ValueTypeError,
)
from .flags import AssignFlags
from .record import OptionRecord, StoredBytes
from .registry import DEFAULT_REGISTRY, OptionKind, OptionRegistry

if TYPE_CHECKING:
    from .record import Buffer

logger = logging.getLogger("couch_viewopts.assign")

NameInput = Union[str, bytes, bytearray, memoryview, int]
ValueInput = Union[str, bytes, bytearray, memoryview, int]

_TEXT_TYPES = (str, bytes, bytearray, memoryview)


def _as_buffer(data: str | Buffer, length: int | None) -> Buffer:
    """Return *data* as bytes, truncated to *length* when given."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    if length is None:
        return data
    view = memoryview(data).cast("B")
    if length < 0 or length > len(view):
        raise ValueError(f"Length {length} out of range for a {len(view)}-byte buffer")
    if length == len(view) and isinstance(data, bytes):
        return data
    return view[:length]


class OptionAssigner:
    """Validates option name/value pairs against a registry.

    Usage::

        assigner = OptionAssigner()
        record = OptionRecord()
        assigner.assign(record, "limit", 10)
        record.to_kv()  # b"limit=10"
    """

    def __init__(
        self,
        registry: OptionRegistry | None = None,
        coercers: CoercerRegistry | None = None,
    ) -> None:
        self._registry = registry if registry is not None else DEFAULT_REGISTRY
        self._coercers = coercers if coercers is not None else build_default_coercers()

    @property
    def registry(self) -> OptionRegistry:
        return self._registry

    def assign(
        self,
        record: OptionRecord,
        name: NameInput,
        value: ValueInput,
        flags: AssignFlags = AssignFlags.NONE,
        *,
        name_length: int | None = None,
        value_length: int | None = None,
    ) -> OptionRecord:
        """
        Validate *name* and *value* and store them in *record*.

        Args:
            record: An empty record to populate.
            name: Option name, or an integer identifier with ``NAME_NUMERIC``.
            value: Option value, or an integer with ``VALUE_NUMERIC``.
            flags: ``AssignFlags`` controlling interpretation and storage.
            name_length: Number of name bytes to use (``None`` for all).
            value_length: Number of value bytes to use (``None`` for all).

        Returns:
            The populated *record*.

        Raises:
            OptionValidationError: If validation fails. *record* is left
                empty and ``cleanup()`` remains safe.
        """
        if record.name_storage is not None or record.value_storage is not None:
            raise ValueError("Record is already assigned; call cleanup() first")

        flags = AssignFlags(flags)
        if isinstance(name, int):
            flags |= AssignFlags.NAME_NUMERIC
        if isinstance(value, int):
            flags |= AssignFlags.VALUE_NUMERIC

        try:
            name_store, value_store, kind = self._resolve(
                name, value, flags, name_length, value_length
            )
        except OptionValidationError as exc:
            logger.debug("Rejected view option %r: %s", name, exc.reason)
            raise

        record.set_name(name_store)
        record.set_value(value_store)
        record.set_flags(flags)
        logger.debug(
            "Assigned view option %r (%s, %s)",
            record.name,
            kind,
            "owned" if value_store.owned else "borrowed",
        )
        return record

    def create(
        self,
        name: NameInput,
        value: ValueInput,
        flags: AssignFlags = AssignFlags.NONE,
        *,
        name_length: int | None = None,
        value_length: int | None = None,
    ) -> OptionRecord:
        """Like ``assign()``, on a new record."""
        return self.assign(
            OptionRecord(),
            name,
            value,
            flags,
            name_length=name_length,
            value_length=value_length,
        )

    # -- internals -------------------------------------------------------------

    def _resolve(
        self,
        name: NameInput,
        value: ValueInput,
        flags: AssignFlags,
        name_length: int | None,
        value_length: int | None,
    ) -> tuple[StoredBytes, StoredBytes, OptionKind]:
        name_numeric = bool(flags & AssignFlags.NAME_NUMERIC)
        value_numeric = bool(flags & AssignFlags.VALUE_NUMERIC)

        if name_numeric and flags & AssignFlags.PASSTHROUGH:
            raise PassthroughError(name)
        if name_numeric and not isinstance(name, int):
            raise ValueTypeError("Option identifier must be an integer", name)
        raw_value: int | Buffer
        if value_numeric:
            if not isinstance(value, int):
                raise ValueTypeError("Option requires an integer value", name)
            raw_value = value
        else:
            if not isinstance(value, _TEXT_TYPES):
                raise ValueTypeError("Option requires a string value", name)
            raw_value = _as_buffer(value, value_length)
            if len(memoryview(raw_value).cast("B")) == 0:
                raise MissingValueError(name)

        raw_name: int | Buffer
        if name_numeric:
            raw_name = name
        else:
            if not isinstance(name, _TEXT_TYPES):
                raise ValueTypeError("Option name must be a string", name)
            raw_name = _as_buffer(name, name_length)
            if len(memoryview(raw_name).cast("B")) == 0:
                raise MissingNameError()

        name_constant = bool(flags & AssignFlags.NAME_CONSTANT)

        if flags & AssignFlags.PASSTHROUGH:
            kind = OptionKind.NUMBER if value_numeric else OptionKind.STRING
            name_store = StoredBytes.store(raw_name, name_constant)  # type: ignore[arg-type]
            value_store = self._coercers.coerce(kind, raw_value, flags, name)
            return name_store, value_store, kind

        if name_numeric:
            entry = self._registry.get_by_id(raw_name)  # type: ignore[arg-type]
        else:
            entry = self._registry.get_by_name(bytes(raw_name))  # type: ignore[arg-type]
        if entry is None:
            raise UnrecognizedOptionError(name, self._registry.names())

        if name_numeric:
            name_store = StoredBytes.borrow(entry.name_bytes)
        else:
            name_store = StoredBytes.store(raw_name, name_constant)  # type: ignore[arg-type]

        value_store = self._coercers.coerce(entry.kind, raw_value, flags, entry.name)
        return name_store, value_store, entry.kind


_default_assigner = OptionAssigner()


def assign(
    record: OptionRecord,
    name: NameInput,
    value: ValueInput,
    flags: AssignFlags = AssignFlags.NONE,
    *,
    name_length: int | None = None,
    value_length: int | None = None,
) -> OptionRecord:
    """Validate and store an option in *record* using the default registry."""
    return _default_assigner.assign(
        record,
        name,
        value,
        flags,
        name_length=name_length,
        value_length=value_length,
    )


def create_option(
    name: NameInput,
    value: ValueInput,
    flags: AssignFlags = AssignFlags.NONE,
    *,
    name_length: int | None = None,
    value_length: int | None = None,
) -> OptionRecord:
    """Validate an option using the default registry and return a new record."""
    return _default_assigner.create(
        name,
        value,
        flags,
        name_length=name_length,
        value_length=value_length,
    )
