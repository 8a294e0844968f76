"""ViewQuery: immutable description of a view query and its options."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, InstanceOf, field_validator

from .builder import create_options_from_pairs, validate_options
from .config import DEFAULT_CONFIG, ViewOptionsConfig
from .flags import AssignFlags
from .query_string import QueryStringBuilder
from .record import OptionRecord, cleanup_list
from .result import ValidationResult

OptionValue = Union[str, bool, int]


class ViewQuery(BaseModel):
    """A design document view plus its ordered options.

    Equality is structural. Options are validated when records, query
    strings or URIs are produced::

        query = ViewQuery(
            design="ddoc",
            view="by_name",
            options={"stale": False, "limit": 20},
        )
        query.uri()  # "_design/ddoc/_view/by_name?stale=false&limit=20"
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    design: str
    view: str
    options: tuple[tuple[str, OptionValue], ...] = ()
    flags: int = 0
    view_config: InstanceOf[ViewOptionsConfig] = DEFAULT_CONFIG

    @field_validator("options", mode="before")
    @classmethod
    def pairs_from_mapping(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return tuple(value.items())
        return value

    def with_option(self, name: str, value: OptionValue) -> ViewQuery:
        """Return a copy with ``(name, value)`` appended."""
        return self.model_copy(update={"options": (*self.options, (name, value))})

    def records(self) -> list[OptionRecord]:
        """Validated option records, in option order."""
        if not self.options:
            return []
        return create_options_from_pairs(
            self.options, flags=AssignFlags(self.flags), config=self.view_config
        )

    def validate_options(self) -> ValidationResult:
        return validate_options(
            self.options, flags=AssignFlags(self.flags), config=self.view_config
        )

    def query_string(self) -> str:
        records = self.records()
        try:
            query = QueryStringBuilder(self.view_config).build(records)
            return query.decode("utf-8")
        finally:
            cleanup_list(records)

    def uri(self) -> str:
        records = self.records()
        try:
            uri = QueryStringBuilder(self.view_config).build_uri(
                self.design, self.view, records
            )
            return uri.decode("utf-8")
        finally:
            cleanup_list(records)
