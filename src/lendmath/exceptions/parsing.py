from typing import Any

from lendmath.exceptions.base import LendMathValueError


class ParseError(LendMathValueError):
    """
    Raised when a raw numeric input (typically a view-function result) cannot be parsed into an
    exact fixed-point value.
    """

    def __init__(
        self,
        raw: Any,
        field: str | None = None,
        reason: str | None = None,
        message: str | None = None,
    ) -> None:
        self.raw = raw
        self.field = field
        self.reason = reason

        if message is None:
            message = f"Could not parse {raw!r}"
            if field is not None:
                message += f" for field '{field}'"
            if reason is not None:
                message += f": {reason}"
        super().__init__(message=message)


class MissingField(ParseError):
    """
    Raised when a required field is absent from a raw data mapping.
    """

    def __init__(self, field: str) -> None:
        super().__init__(
            None,
            field,
            "field is missing",
            message=f"Required field '{field}' is missing.",
        )
