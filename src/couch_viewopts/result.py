"""ValidationResult: option validation failures grouped by option name."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .exceptions import OptionValidationError, display_option


def _no_failures() -> dict[str, list[OptionValidationError]]:
    return {}


@dataclass
class ValidationResult:
    """Failures collected while validating a batch of options.

    Each failure keeps the raised ``OptionValidationError``, so its ``code``
    and any ``choices`` or ``suggestions`` survive alongside the reason::

        result = validate_options({"limit": "ten", "stale": "later"})
        result.errors  # {"limit": ["String must ..."], "stale": ["stale must ..."]}
        result.codes()  # {"limit": ["MALFORMED_NUMBER"], "stale": ["INVALID_CHOICE"]}
        result.raise_first()  # raises the MalformedNumberError
    """

    failures: dict[str, list[OptionValidationError]] = field(
        default_factory=_no_failures
    )

    @property
    def is_valid(self) -> bool:
        return not self.failures

    @property
    def errors(self) -> dict[str, list[str]]:
        """Reason texts by option name."""
        return {
            option: [exc.reason for exc in excs]
            for option, excs in self.failures.items()
        }

    def codes(self) -> dict[str, list[str]]:
        return {
            option: [exc.code for exc in excs] for option, excs in self.failures.items()
        }

    def add(self, error: OptionValidationError, option: str | None = None) -> None:
        """Record *error* under *option*, or under the option it names."""
        if option is None:
            option = display_option(error.option) if error.option is not None else ""
        self.failures.setdefault(option, []).append(error)

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Return a new result holding the failures of both, in order."""
        merged = ValidationResult()
        for result in (self, other):
            for option, excs in result.failures.items():
                for exc in excs:
                    merged.add(exc, option)
        return merged

    def raise_first(self) -> None:
        """Raise the earliest recorded failure, if any."""
        for excs in self.failures.values():
            raise excs[0]

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {
            option: [exc.to_dict() for exc in excs]
            for option, excs in self.failures.items()
        }

    def __bool__(self) -> bool:
        return self.is_valid
