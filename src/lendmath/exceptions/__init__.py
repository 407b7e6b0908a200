from lendmath.exceptions.arithmetic import DivisionByZero, InvalidScale
from lendmath.exceptions.base import LendMathError, LendMathTypeError, LendMathValueError
from lendmath.exceptions.interest import FutureTimestamp, NegativeDuration
from lendmath.exceptions.parsing import MissingField, ParseError

from . import arithmetic, interest, parsing

__all__ = (
    "DivisionByZero",
    "FutureTimestamp",
    "InvalidScale",
    "LendMathError",
    "LendMathTypeError",
    "LendMathValueError",
    "MissingField",
    "NegativeDuration",
    "ParseError",
    "arithmetic",
    "interest",
    "parsing",
)
