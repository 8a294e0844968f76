"""Configuration for building option lists and view URIs."""

from __future__ import annotations

from dataclasses import dataclass

from .flags import AssignFlags


@dataclass(frozen=True)
class ViewOptionsConfig:
    """View options configuration.

    Attributes:
        design_prefix: First path segment, followed by the design document name.
        view_segment: Path segment between the design document and view names.
        default_flags: Flags applied to every pair by the bulk builders.
        pct_encode_strings: Percent-encode values of string-kind options
            when building from pairs.
    """

    design_prefix: str = "_design"
    view_segment: str = "_view"
    default_flags: AssignFlags = AssignFlags.NONE
    pct_encode_strings: bool = False


DEFAULT_CONFIG = ViewOptionsConfig()
