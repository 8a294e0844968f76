"""Numeric options: a signed decimal integer string."""

from __future__ import annotations

from typing import Any

from ..exceptions import MalformedNumberError, ValueTypeError
from ..flags import AssignFlags
from ..record import StoredBytes
from ..registry import OptionKind
from .base import RawValue, ValueCoercer
from .boolean import require_int

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_MINUS = 45


def _is_digit(b: int) -> bool:
    return 48 <= b <= 57


class NumberCoercer(ValueCoercer):
    """Integers are formatted in decimal; strings must match ``-?[0-9]+``."""

    @property
    def kinds(self) -> tuple[OptionKind, ...]:
        return (OptionKind.NUMBER,)

    def coerce(
        self, value: RawValue, flags: AssignFlags, option: Any = None
    ) -> StoredBytes:
        if flags & AssignFlags.VALUE_NUMERIC:
            number = require_int(value, option)
            if not INT32_MIN <= number <= INT32_MAX:
                raise MalformedNumberError(
                    "Number must fit a signed 32-bit integer", option
                )
            return StoredBytes.copy(b"%d" % number)

        if isinstance(value, int):
            raise ValueTypeError("Option requires a string value", option)

        digits = memoryview(value).cast("B")
        if len(digits) == 0:
            raise MalformedNumberError("Received an empty string", option)

        first = digits[0]
        if not _is_digit(first) and first != _MINUS:
            raise MalformedNumberError(
                "String must consist entirely of a signed number", option
            )
        if first == _MINUS and len(digits) == 1:
            raise MalformedNumberError(
                "String must consist entirely of a signed number", option
            )
        for b in digits[1:]:
            if not _is_digit(b):
                raise MalformedNumberError(
                    "String must consist entirely of digits", option
                )

        return StoredBytes.store(value, bool(flags & AssignFlags.VALUE_CONSTANT))
