from lendmath.exceptions import DivisionByZero, LendMathTypeError


def div_toward_zero(numerator: int, denominator: int, operation: str = "division") -> int:
    """
    Integer division truncating toward zero, matching the big-integer division of the reference
    client. For non-negative operands this is identical to floor division.
    """

    if denominator == 0:
        raise DivisionByZero(operation)
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


def div_round_half_up(numerator: int, denominator: int, operation: str = "division") -> int:
    """
    Integer division rounding half away from zero. Half the denominator is added to the magnitude
    of the numerator before the truncating division, then the sign is restored.
    """

    if denominator == 0:
        raise DivisionByZero(operation)
    quotient = (abs(numerator) + abs(denominator) // 2) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


def check_integer(value: object, name: str) -> int:
    """
    Return the value if it is a true integer, rejecting bools and every other numeric type.
    """

    if isinstance(value, bool) or not isinstance(value, int):
        raise LendMathTypeError(message=f"{name} must be an int, got {type(value).__name__}.")
    return value
