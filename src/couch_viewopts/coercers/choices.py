"""Enumerated options: ``stale`` and ``on_error``."""

from __future__ import annotations

from typing import Any

from ..exceptions import InvalidChoiceError
from ..flags import AssignFlags
from ..record import StoredBytes
from ..registry import OptionKind
from .base import RawValue, ValueCoercer, match_literal
from .boolean import FALSE, parse_bool

OK = b"ok"
UPDATE_AFTER = b"update_after"
STOP = b"stop"
CONTINUE = b"continue"

STALE_REASON = "stale must be a boolean or the string 'update_after'"
ON_ERROR_REASON = "on_error must be one of 'continue' or 'stop'"


class StaleCoercer(ValueCoercer):
    """Accepts booleans (true becomes ``ok``), ``update_after`` and ``ok``."""

    @property
    def kinds(self) -> tuple[OptionKind, ...]:
        return (OptionKind.STALE,)

    def coerce(
        self, value: RawValue, flags: AssignFlags, option: Any = None
    ) -> StoredBytes:
        bval = parse_bool(value, flags, option)
        if bval is not None:
            return StoredBytes.borrow(OK if bval else FALSE)

        literal = match_literal(value, (UPDATE_AFTER, OK))  # type: ignore[arg-type]
        if literal is None:
            raise InvalidChoiceError(
                STALE_REASON, ("false", "ok", "update_after"), option
            )
        return StoredBytes.borrow(literal)


class OnErrorCoercer(ValueCoercer):
    @property
    def kinds(self) -> tuple[OptionKind, ...]:
        return (OptionKind.ON_ERROR,)

    def coerce(
        self, value: RawValue, flags: AssignFlags, option: Any = None
    ) -> StoredBytes:
        literal = None
        if not flags & AssignFlags.VALUE_NUMERIC and not isinstance(value, int):
            literal = match_literal(value, (STOP, CONTINUE))
        if literal is None:
            raise InvalidChoiceError(ON_ERROR_REASON, ("stop", "continue"), option)
        return StoredBytes.borrow(literal)
