"""
Registry of recognised view options.

Maps each option, by canonical name or integer identifier, to the kind of
value it accepts. The option names are what appears on the wire; the
identifiers are a client-side convenience.

New options are added by building a registry and calling ``register()``::

    registry = build_default_registry()
    registry.register(RegistryEntry(100, "conflict", OptionKind.BOOL))
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class OptionKind(str, Enum):
    """Kinds of value an option accepts."""

    BOOL = "bool"
    NUMBER = "num"
    STRING = "string"
    # JSON-encoded primitive or complex value, treated as an opaque string
    JSON_VALUE = "jval"
    # JSON array, treated as an opaque string
    JSON_ARRAY = "jarry"
    ON_ERROR = "onerror"
    STALE = "stale"


class ViewOption(IntEnum):
    """Integer identifiers for the recognised options."""

    CLIENT_PASSTHROUGH = 0
    DESCENDING = 1
    ENDKEY = 2
    ENDKEY_DOCID = 3
    FULLSET = 4
    GROUP = 5
    GROUP_LEVEL = 6
    INCLUSIVE_END = 7
    KEYS = 8
    SINGLE_KEY = 9
    ONERROR = 10
    REDUCE = 11
    STALE = 12
    SKIP = 13
    LIMIT = 14
    STARTKEY = 15
    STARTKEY_DOCID = 16
    DEBUG = 17


@dataclass(frozen=True)
class RegistryEntry:
    """A recognised option: identifier, wire name and value kind."""

    ident: int
    name: str
    kind: OptionKind

    @property
    def name_bytes(self) -> bytes:
        return self.name.encode("ascii")


_DEFAULT_ENTRIES: tuple[RegistryEntry, ...] = (
    RegistryEntry(ViewOption.DESCENDING, "descending", OptionKind.BOOL),
    RegistryEntry(ViewOption.ENDKEY, "endkey", OptionKind.JSON_VALUE),
    RegistryEntry(ViewOption.ENDKEY_DOCID, "endkey_docid", OptionKind.STRING),
    RegistryEntry(ViewOption.FULLSET, "full_set", OptionKind.BOOL),
    RegistryEntry(ViewOption.GROUP, "group", OptionKind.BOOL),
    RegistryEntry(ViewOption.GROUP_LEVEL, "group_level", OptionKind.NUMBER),
    RegistryEntry(ViewOption.INCLUSIVE_END, "inclusive_end", OptionKind.BOOL),
    RegistryEntry(ViewOption.KEYS, "keys", OptionKind.JSON_ARRAY),
    RegistryEntry(ViewOption.SINGLE_KEY, "key", OptionKind.JSON_VALUE),
    RegistryEntry(ViewOption.ONERROR, "on_error", OptionKind.ON_ERROR),
    RegistryEntry(ViewOption.REDUCE, "reduce", OptionKind.BOOL),
    RegistryEntry(ViewOption.STALE, "stale", OptionKind.STALE),
    RegistryEntry(ViewOption.SKIP, "skip", OptionKind.NUMBER),
    RegistryEntry(ViewOption.LIMIT, "limit", OptionKind.NUMBER),
    RegistryEntry(ViewOption.STARTKEY, "startkey", OptionKind.JSON_VALUE),
    RegistryEntry(ViewOption.STARTKEY_DOCID, "startkey_docid", OptionKind.STRING),
    RegistryEntry(ViewOption.DEBUG, "debug", OptionKind.BOOL),
)


class OptionRegistry:
    """
    Registry of ``RegistryEntry`` instances keyed by name and identifier.

    Usage::

        registry = build_default_registry()
        entry = registry.get(b"limit")
        entry = registry.get(ViewOption.LIMIT)
    """

    def __init__(self) -> None:
        self._by_name: dict[bytes, RegistryEntry] = {}
        self._by_id: dict[int, RegistryEntry] = {}

    # -- registration --------------------------------------------------------

    def register(self, entry: RegistryEntry) -> None:
        """Register an option entry."""
        if entry.ident == ViewOption.CLIENT_PASSTHROUGH:
            raise ValueError("Identifier 0 is reserved for pass-through options")
        self._by_name[entry.name_bytes] = entry
        self._by_id[int(entry.ident)] = entry

    def register_all(self, *entries: RegistryEntry) -> None:
        """Register multiple entries at once."""
        for entry in entries:
            self.register(entry)

    # -- look-up -------------------------------------------------------------

    def get_by_name(self, name: bytes) -> RegistryEntry | None:
        """Exact, case-sensitive name match."""
        return self._by_name.get(bytes(name))

    def get_by_id(self, ident: int) -> RegistryEntry | None:
        return self._by_id.get(int(ident))

    def get(self, option: str | bytes | int) -> RegistryEntry | None:
        """Return the entry for a name or identifier, or ``None``."""
        if isinstance(option, int):
            return self.get_by_id(option)
        if isinstance(option, str):
            option = option.encode("utf-8")
        elif not isinstance(option, (bytes, bytearray, memoryview)):
            return None
        return self.get_by_name(option)

    def has(self, option: str | bytes | int) -> bool:
        return self.get(option) is not None

    def names(self) -> list[str]:
        return [entry.name for entry in self]

    def by_kind(self, *kinds: OptionKind) -> list[RegistryEntry]:
        """Entries whose value kind is one of *kinds*."""
        return [entry for entry in self if entry.kind in kinds]

    def __iter__(self) -> Iterator[RegistryEntry]:
        return iter(sorted(self._by_id.values(), key=lambda e: e.ident))

    def __len__(self) -> int:
        return len(self._by_id)


def build_default_registry() -> OptionRegistry:
    """Create a registry holding every standard view option."""
    registry = OptionRegistry()
    registry.register_all(*_DEFAULT_ENTRIES)
    return registry


DEFAULT_REGISTRY = build_default_registry()
