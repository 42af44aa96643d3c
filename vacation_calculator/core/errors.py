"""
Input errors raised by the calculation core.
"""

from enum import Enum


class InputErrorKind(str, Enum):
    """Kinds of invalid calculation requests."""

    WRONG_PARAMETER_COUNT = "wrong_parameter_count"
    START_AFTER_END = "start_after_end"
    NON_POSITIVE_DURATION = "non_positive_duration"
    UNREACHABLE_DURATION = "unreachable_duration"


_DEFAULT_MESSAGES = {
    InputErrorKind.WRONG_PARAMETER_COUNT: "exactly two of three parameters required",
    InputErrorKind.START_AFTER_END: "start date after end date",
    InputErrorKind.NON_POSITIVE_DURATION: "duration must be a positive number of days",
    InputErrorKind.UNREACHABLE_DURATION: "duration cannot be reached outside the holiday list",
}


class InputError(ValueError):
    """A calculation request that cannot be solved as given.

    Args:
        kind: Error kind, also the default translation key ("error.<kind>").
        message: Plain English message.
        message_key: Translation key when one kind has several causes.
    """

    def __init__(self, kind: InputErrorKind, message: str = None, message_key: str = None):
        self.kind = kind
        self.message_key = message_key or f"error.{kind.value}"
        super().__init__(message or _DEFAULT_MESSAGES[kind])
