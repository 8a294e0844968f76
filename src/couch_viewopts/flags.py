from enum import IntFlag


class AssignFlags(IntFlag):
    """Flags controlling how an option name and value are interpreted and stored."""

    NONE = 0

    # Percent-encode the value if needed
    PCT_ENCODE = 1 << 0

    # Value is an int (and possibly coerced) rather than a string
    VALUE_NUMERIC = 1 << 1

    # Name is user-specified; no registry validation is performed
    PASSTHROUGH = 1 << 2

    # Value storage belongs to the caller
    VALUE_CONSTANT = 1 << 3

    # Name storage belongs to the caller
    NAME_CONSTANT = 1 << 4

    # Name is an integer option identifier, not a string
    NAME_NUMERIC = 1 << 5
