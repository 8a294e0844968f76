"""
Value coercion strategy.

Provides the ValueCoercer interface and a registry that maps each
OptionKind to the coercer producing its canonical stored form.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from ..flags import AssignFlags
    from ..record import Buffer, StoredBytes
    from ..registry import OptionKind

RawValue = Union[int, "Buffer"]


class ValueCoercer(ABC):
    """
    Strategy interface for validating and normalising one kind of value.

    Each coercer is an isolated class with a single ``coerce`` method that
    either returns the value's stored form or raises an
    ``OptionValidationError``.
    """

    @property
    @abstractmethod
    def kinds(self) -> tuple[OptionKind, ...]:
        """The option kinds this coercer handles."""
        ...

    @abstractmethod
    def coerce(
        self,
        value: RawValue,
        flags: AssignFlags,
        option: Any = None,
    ) -> StoredBytes:
        """
        Validate *value* and return its canonical stored form.

        Args:
            value: An ``int`` when ``VALUE_NUMERIC`` is set in *flags*,
                otherwise the raw value bytes.
            flags: Interpretation flags for the assignment.
            option: Option name, used to label errors.
        """
        ...


class CoercerRegistry:
    """Registry of ValueCoercer instances keyed by OptionKind."""

    def __init__(self) -> None:
        self._coercers: dict[OptionKind, ValueCoercer] = {}

    def register(self, coercer: ValueCoercer) -> None:
        for kind in coercer.kinds:
            self._coercers[kind] = coercer

    def register_all(self, *coercers: ValueCoercer) -> None:
        for coercer in coercers:
            self.register(coercer)

    def get(self, kind: OptionKind) -> ValueCoercer | None:
        return self._coercers.get(kind)

    def has(self, kind: OptionKind) -> bool:
        return kind in self._coercers

    def coerce(
        self,
        kind: OptionKind,
        value: RawValue,
        flags: AssignFlags,
        option: Any = None,
    ) -> StoredBytes:
        """
        Look up the coercer for *kind* and run it.

        Raises:
            ValueError: If no coercer handles *kind*.
        """
        coercer = self.get(kind)
        if coercer is None:
            raise ValueError(f"No coercer registered for option kind: {kind}")
        return coercer.coerce(value, flags, option)


def match_literal(value: Buffer, literals: tuple[bytes, ...]) -> bytes | None:
    """Return the literal *value* equals, ignoring ASCII case, or ``None``."""
    lowered = bytes(value).lower()
    for literal in literals:
        if lowered == literal:
            return literal
    return None
