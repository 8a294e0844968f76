"""String options, including opaque JSON values and arrays."""

from __future__ import annotations

from typing import Any

from ..encoding import pct_encode_into, pct_encoded_length
from ..exceptions import ValueTypeError
from ..flags import AssignFlags
from ..record import StoredBytes
from ..registry import OptionKind
from .base import RawValue, ValueCoercer


class StringCoercer(ValueCoercer):
    """Stores the value verbatim, or percent-encoded when ``PCT_ENCODE`` is set."""

    @property
    def kinds(self) -> tuple[OptionKind, ...]:
        return (OptionKind.STRING, OptionKind.JSON_VALUE, OptionKind.JSON_ARRAY)

    def coerce(
        self, value: RawValue, flags: AssignFlags, option: Any = None
    ) -> StoredBytes:
        if flags & AssignFlags.VALUE_NUMERIC or isinstance(value, int):
            raise ValueTypeError("Option requires a string value", option)

        constant = bool(flags & AssignFlags.VALUE_CONSTANT)
        if not flags & AssignFlags.PCT_ENCODE:
            return StoredBytes.store(value, constant)

        needed = pct_encoded_length(value)
        if needed == len(memoryview(value).cast("B")):
            return StoredBytes.store(value, constant)

        encoded = bytearray(needed)
        pct_encode_into(encoded, value)
        return StoredBytes.copy(encoded)
