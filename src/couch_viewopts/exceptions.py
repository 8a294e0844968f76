"""
View option exception hierarchy.

All exceptions inherit from ``ViewOptionError`` and provide ``to_dict()``
for API-friendly error responses. Validation failures carry a static
``reason`` text describing why the option was rejected.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class ViewOptionError(Exception):
    """Root exception for the view options package."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class OptionValidationError(ViewOptionError):
    """An option name or value failed validation.

    Attributes:
        reason: Static human-readable description of the failure.
        option: The option name (or identifier) being assigned, if known.
    """

    code = "VALIDATION_ERROR"

    def __init__(self, reason: str, option: Any = None) -> None:
        self.reason = reason
        self.option = option
        if option is None:
            message = reason
        else:
            message = f"{display_option(option)}: {reason}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.reason,
            "option": display_option(self.option) if self.option is not None else None,
        }


class MissingNameError(OptionValidationError):
    """Raised when a string option name has zero length."""

    code = "MISSING_NAME"

    def __init__(self, option: Any = None) -> None:
        super().__init__("Missing option name length", option)


class MissingValueError(OptionValidationError):
    """Raised when a string option value has zero length."""

    code = "MISSING_VALUE"

    def __init__(self, option: Any = None) -> None:
        super().__init__("Missing value length", option)


class PassthroughError(OptionValidationError):
    """Raised when pass-through is combined with a numeric option identifier."""

    code = "PASSTHROUGH_ERROR"

    def __init__(self, option: Any = None) -> None:
        super().__init__("Can't use passthrough with option constants", option)


class UnrecognizedOptionError(OptionValidationError):
    """
    Option name or identifier is not in the registry.

    Provides fuzzy-matched suggestions for likely intended option names.
    """

    code = "UNRECOGNIZED_OPTION"

    def __init__(self, option: Any, known_options: list[str] | None = None) -> None:
        self.known_options = list(known_options or [])
        if not isinstance(option, int):
            self.suggestions = get_close_matches(
                display_option(option), self.known_options, n=3, cutoff=0.6
            )
        else:
            self.suggestions = []
        super().__init__("Unrecognized option", option)
        if self.suggestions:
            self.args = (
                f"{self.args[0]}. Did you mean: {', '.join(self.suggestions)}?",
            )

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["suggestions"] = self.suggestions
        return data


class ValueTypeError(OptionValidationError):
    """Raised when a numeric value is given where a string is required, or vice versa."""

    code = "VALUE_TYPE_ERROR"


class MalformedNumberError(OptionValidationError):
    """Raised when a numeric string is empty or not of the form ``-?[0-9]+``."""

    code = "MALFORMED_NUMBER"


class InvalidChoiceError(OptionValidationError):
    """Raised when a value is not among an enumerated option's accepted literals."""

    code = "INVALID_CHOICE"

    def __init__(self, reason: str, choices: tuple[str, ...], option: Any = None) -> None:
        self.choices = choices
        super().__init__(reason, option)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["choices"] = list(self.choices)
        return data


class BulkArgumentsError(OptionValidationError):
    """Raised when bulk input is empty or has a trailing name without a value."""

    code = "BULK_ARGUMENTS"


class OptionsMemoryError(ViewOptionError):
    """Raised when storage for option records cannot be allocated."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "OUT_OF_MEMORY",
            "message": str(self),
        }


def display_option(option: Any) -> str:
    if isinstance(option, (bytes, bytearray, memoryview)):
        return bytes(option).decode("utf-8", errors="replace")
    return str(option)
