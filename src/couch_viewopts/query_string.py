"""Query string serialisation: option records -> ``?name=value&...``.

Two forms are provided. ``calc_length()`` / ``write_query()`` measure and
then fill a caller-provided buffer. ``QueryStringBuilder`` appends to a
growing buffer and needs no sizing by the caller.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .config import DEFAULT_CONFIG, ViewOptionsConfig

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .record import Buffer, OptionRecord

logger = logging.getLogger("couch_viewopts.query_string")

_QUESTION = 63
_EQUALS = 61
_AMPERSAND = 38


def calc_length(records: Sequence[OptionRecord]) -> int:
    """Minimum buffer size for ``write_query()``, terminator included."""
    size = 1  # '?'
    for record in records:
        # '=' and '&'
        size += record.name_length + record.value_length + 2
    return size + 1


def write_query(records: Sequence[OptionRecord], buf: bytearray | memoryview) -> int:
    """
    Write the query string for *records* into *buf*.

    *buf* must hold at least ``calc_length(records)`` bytes. The output
    is ``?n1=v1&n2=v2`` followed by a NUL terminator; with no records
    only the terminator is written.

    Returns:
        The number of bytes written, excluding the terminator.
    """
    needed = calc_length(records)
    if len(buf) < needed:
        raise ValueError(
            f"Destination buffer holds {len(buf)} bytes, {needed} are required"
        )

    pos = 0
    buf[pos] = _QUESTION
    pos += 1
    for record in records:
        name = record.name
        buf[pos : pos + len(name)] = name
        pos += len(name)
        buf[pos] = _EQUALS
        pos += 1
        value = record.value
        buf[pos : pos + len(value)] = value
        pos += len(value)
        buf[pos] = _AMPERSAND
        pos += 1
    # trailing '&' (or the lone '?')
    pos -= 1
    buf[pos] = 0
    return pos


def _terminated(data: str | Buffer, length: int | None) -> bytes:
    """Return the first *length* bytes of *data*, or up to its first NUL."""
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    if length is None:
        end = raw.find(b"\0")
        return raw if end < 0 else raw[:end]
    if length < 0 or length > len(raw):
        raise ValueError(f"Length {length} out of range for a {len(raw)}-byte name")
    return raw[:length]


def _view_path(
    design: str | Buffer,
    view: str | Buffer,
    design_length: int | None,
    view_length: int | None,
    config: ViewOptionsConfig,
) -> bytes:
    return b"%s/%s/%s/%s" % (
        config.design_prefix.encode("utf-8"),
        _terminated(design, design_length),
        config.view_segment.encode("utf-8"),
        _terminated(view, view_length),
    )


def make_uri(
    design: str | Buffer,
    view: str | Buffer,
    records: Sequence[OptionRecord],
    *,
    design_length: int | None = None,
    view_length: int | None = None,
    config: ViewOptionsConfig | None = None,
) -> bytes:
    """
    Build ``_design/<design>/_view/<view>?<query>`` in a single allocation.

    Names are used up to *design_length* / *view_length* bytes, or up to
    their first NUL byte when no length is given.
    """
    path = _view_path(
        design, view, design_length, view_length, config or DEFAULT_CONFIG
    )
    buf = bytearray(len(path) + calc_length(records))
    buf[: len(path)] = path
    written = write_query(records, memoryview(buf)[len(path) :])
    logger.debug("Built view URI of %d bytes", len(path) + written)
    return bytes(buf[: len(path) + written])


class QueryStringBuilder:
    """Build query strings and view URIs from option records.

    Usage::

        builder = QueryStringBuilder()
        builder.build(records)  # b"?limit=10&stale=false"
        builder.build_uri("ddoc", "by_name", records)
    """

    def __init__(self, config: ViewOptionsConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def build(self, records: Sequence[OptionRecord], *, prefix: bool = True) -> bytes:
        """Produce the query string; empty when there are no records."""
        if not records:
            return b""
        out = bytearray()
        if prefix:
            out += b"?"
        for i, record in enumerate(records):
            if i:
                out += b"&"
            out += record.name
            out += b"="
            out += record.value
        return bytes(out)

    def build_uri(
        self,
        design: str | Buffer,
        view: str | Buffer,
        records: Sequence[OptionRecord],
        *,
        design_length: int | None = None,
        view_length: int | None = None,
    ) -> bytes:
        """Produce ``<design_prefix>/<design>/<view_segment>/<view>?<query>``."""
        path = _view_path(design, view, design_length, view_length, self.config)
        return path + self.build(records)
