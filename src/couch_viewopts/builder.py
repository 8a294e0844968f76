"""Bulk construction of option lists from name/value pairs."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Union

from .assign import OptionAssigner
from .config import DEFAULT_CONFIG, ViewOptionsConfig
from .exceptions import (
    BulkArgumentsError,
    OptionsMemoryError,
    OptionValidationError,
    display_option,
)
from .flags import AssignFlags
from .record import OptionRecord, cleanup_list
from .registry import OptionKind
from .result import ValidationResult

if TYPE_CHECKING:
    from .assign import NameInput, ValueInput

logger = logging.getLogger("couch_viewopts.builder")

_default_assigner = OptionAssigner()

Pairs = Union[Iterable[tuple[Any, Any]], Mapping[Any, Any]]


def _pair_flags(
    assigner: OptionAssigner,
    name: NameInput,
    flags: AssignFlags,
    config: ViewOptionsConfig,
) -> AssignFlags:
    flags = AssignFlags(flags) | config.default_flags
    if config.pct_encode_strings:
        entry = assigner.registry.get(name)
        if entry is not None and entry.kind is OptionKind.STRING:
            flags |= AssignFlags.PCT_ENCODE
    return flags


def _iter_pairs(pairs: Pairs) -> Iterable[tuple[Any, Any]]:
    if isinstance(pairs, Mapping):
        return pairs.items()
    return pairs


def create_options_from_pairs(
    pairs: Pairs,
    *,
    flags: AssignFlags = AssignFlags.NONE,
    config: ViewOptionsConfig | None = None,
    assigner: OptionAssigner | None = None,
) -> list[OptionRecord]:
    """
    Validate every ``(name, value)`` pair and return the records in order.

    Raises:
        BulkArgumentsError: No pairs, or a pair without a value.
        OptionValidationError: A pair failed validation.
        OptionsMemoryError: Storage for the records could not be allocated.

    On failure every record built so far is cleaned up.
    """
    config = config or DEFAULT_CONFIG
    assigner = assigner or _default_assigner
    records: list[OptionRecord] = []
    try:
        for pair in _iter_pairs(pairs):
            if len(pair) != 2:
                raise BulkArgumentsError("Got odd number of arguments")
            name, value = pair
            record = OptionRecord()
            records.append(record)
            assigner.assign(
                record, name, value, _pair_flags(assigner, name, flags, config)
            )
        if not records:
            raise BulkArgumentsError("Got no arguments")
    except MemoryError as exc:
        cleanup_list(records)
        raise OptionsMemoryError("Out of memory while building view options") from exc
    except BaseException:
        cleanup_list(records)
        raise

    logger.debug("Built %d view options", len(records))
    return records


def create_options(
    *args: NameInput | ValueInput,
    flags: AssignFlags = AssignFlags.NONE,
    config: ViewOptionsConfig | None = None,
    assigner: OptionAssigner | None = None,
) -> list[OptionRecord]:
    """
    Build records from alternating name and value arguments::

        create_options("stale", "false", "limit", "20")

    Raises ``BulkArgumentsError`` if a trailing name has no value.
    """
    if len(args) % 2:
        raise BulkArgumentsError("Got odd number of arguments", args[-1])
    pairs = list(zip(args[::2], args[1::2]))
    return create_options_from_pairs(
        pairs, flags=flags, config=config, assigner=assigner
    )


def validate_options(
    pairs: Pairs,
    *,
    flags: AssignFlags = AssignFlags.NONE,
    config: ViewOptionsConfig | None = None,
    assigner: OptionAssigner | None = None,
) -> ValidationResult:
    """Validate every pair and collect all failures by option name."""
    config = config or DEFAULT_CONFIG
    assigner = assigner or _default_assigner
    result = ValidationResult()
    for pair in _iter_pairs(pairs):
        if len(pair) != 2:
            option = pair[0] if pair else None
            result.add(BulkArgumentsError("Got odd number of arguments", option))
            continue
        name, value = pair
        with OptionRecord() as record:
            try:
                assigner.assign(
                    record, name, value, _pair_flags(assigner, name, flags, config)
                )
            except OptionValidationError as exc:
                result.add(exc, display_option(name))
    return result
