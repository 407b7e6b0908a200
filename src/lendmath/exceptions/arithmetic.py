from lendmath.exceptions.base import LendMathError, LendMathTypeError, LendMathValueError


class InvalidScale(LendMathValueError, LendMathTypeError):
    """
    Raised when a fixed-point value is built or rescaled with a scale that is not a non-negative
    integer.
    """

    def __init__(self, scale: object) -> None:
        self.scale = scale
        super().__init__(message=f"Invalid scale {scale!r}, must be a non-negative integer.")


class DivisionByZero(LendMathError, ArithmeticError):
    """
    Raised when a fixed-point division is attempted with a zero divisor.
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(message=f"Division by zero in {operation}.")
