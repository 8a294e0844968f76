"""Boolean options: coerced into ``true`` or ``false``."""

from __future__ import annotations

from typing import Any

from ..exceptions import InvalidChoiceError, ValueTypeError
from ..flags import AssignFlags
from ..record import StoredBytes
from ..registry import OptionKind
from .base import RawValue, ValueCoercer, match_literal

TRUE = b"true"
FALSE = b"false"

BOOL_REASON = "String must be either 'true' or 'false'"
INTEGER_REASON = "Option requires an integer value"


def require_int(value: RawValue, option: Any = None) -> int:
    if not isinstance(value, int):
        raise ValueTypeError(INTEGER_REASON, option)
    return value


def parse_bool(value: RawValue, flags: AssignFlags, option: Any = None) -> bool | None:
    """Truth value of *value*, or ``None`` if it is not boolean-coercible."""
    if flags & AssignFlags.VALUE_NUMERIC:
        return require_int(value, option) != 0
    if isinstance(value, int):
        raise ValueTypeError("Option requires a string value", option)
    literal = match_literal(value, (TRUE, FALSE))
    if literal is None:
        return None
    return literal == TRUE


class BooleanCoercer(ValueCoercer):
    @property
    def kinds(self) -> tuple[OptionKind, ...]:
        return (OptionKind.BOOL,)

    def coerce(
        self, value: RawValue, flags: AssignFlags, option: Any = None
    ) -> StoredBytes:
        bval = parse_bool(value, flags, option)
        if bval is None:
            raise InvalidChoiceError(BOOL_REASON, ("true", "false"), option)
        return StoredBytes.borrow(TRUE if bval else FALSE)
