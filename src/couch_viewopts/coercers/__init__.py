"""
Value coercer implementations.

Provides a ValueCoercer subclass for each OptionKind and a factory
function to create registries.

Usage::

    from couch_viewopts.coercers import build_default_coercers

    coercers = build_default_coercers()
    stored = coercers.coerce(OptionKind.BOOL, b"TRUE", AssignFlags.NONE)
"""

from __future__ import annotations

from .base import CoercerRegistry, ValueCoercer
from .boolean import BooleanCoercer
from .choices import OnErrorCoercer, StaleCoercer
from .number import NumberCoercer
from .string import StringCoercer


def build_default_coercers() -> CoercerRegistry:
    """Create a registry with a coercer for every built-in option kind."""
    registry = CoercerRegistry()
    registry.register_all(
        BooleanCoercer(),
        NumberCoercer(),
        StringCoercer(),
        StaleCoercer(),
        OnErrorCoercer(),
    )
    return registry


__all__ = [
    "BooleanCoercer",
    "CoercerRegistry",
    "NumberCoercer",
    "OnErrorCoercer",
    "StaleCoercer",
    "StringCoercer",
    "ValueCoercer",
    "build_default_coercers",
]
