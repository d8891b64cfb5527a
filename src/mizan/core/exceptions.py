"""
Mizan exception hierarchy.

All mizan exceptions inherit from MizanError, making it easy for consumers
to catch library-level errors while still distinguishing specific failure modes.
Each class carries a machine-readable ``kind`` so presentation layers can map
errors to their own messages without parsing text.
"""


class MizanError(Exception):
    """Base exception class for all mizan errors."""

    kind = "error"


class ConfigurationError(MizanError):
    """Raised for configuration errors (missing keys, invalid values)."""

    kind = "configuration"


class InvalidDateError(MizanError):
    """Raised when a calendar component is outside its legal range."""

    kind = "invalid_date"


class InvalidInputError(MizanError):
    """Raised for negative, zero or non-finite numeric input."""

    kind = "invalid_input"


class OutOfRangeError(MizanError):
    """Raised when a lookup index has no table entry."""

    kind = "out_of_range"
