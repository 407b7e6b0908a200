"""
Exact fixed-point numbers.

A `ScaledDecimal` pairs an arbitrary-precision integer `value` with a decimal `scale`, and
represents the number `value / 10**scale`. Values are immutable and every operation returns a
new instance. Scales are tracked explicitly by each operation and floating point is only used by
`to_float`, which is intended for the final presentation step.
"""

import dataclasses
import decimal
import re
from typing import Any

from lendmath.exceptions import InvalidScale, ParseError
from lendmath.functions import check_integer, div_round_half_up, div_toward_zero

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_DECIMAL_PATTERN = re.compile(r"(?P<sign>[+-]?)(?P<whole>[0-9]+)(?:\.(?P<fraction>[0-9]+))?")


def parse_integer(raw: Any, field: str | None = None) -> int:
    """
    Parse a raw integer input, as returned by a view-function call, without precision loss.

    Native integers are accepted as-is. Strings must contain an optionally signed run of decimal
    digits with no whitespace, fractional part or exponent. Floats and bools are rejected.
    """

    if isinstance(raw, bool):
        raise ParseError(raw, field, "booleans are not numeric values")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        raise ParseError(raw, field, "binary floating point values are not accepted")
    if not isinstance(raw, str):
        raise ParseError(raw, field, f"unsupported type {type(raw).__name__}")
    if _INTEGER_PATTERN.fullmatch(raw) is None:
        raise ParseError(raw, field, "not an integer string")
    return int(raw)


@dataclasses.dataclass(slots=True, frozen=True, eq=False)
class ScaledDecimal:
    value: int
    scale: int

    def __post_init__(self) -> None:
        check_integer(self.value, "value")
        _check_scale(self.scale)

    @classmethod
    def parse(cls, raw: Any, scale: int = 0, field: str | None = None) -> "ScaledDecimal":
        """
        Build a value from a raw integer (string or int) that is already expressed at `scale`,
        e.g. `ScaledDecimal.parse("1000000000000000000000000000", 27)` represents 1.0.
        """

        return ScaledDecimal(parse_integer(raw, field), scale)

    @classmethod
    def from_decimal_string(
        cls,
        text: str,
        scale: int | None = None,
        field: str | None = None,
    ) -> "ScaledDecimal":
        """
        Build a value from human-readable decimal text, e.g. "1.05" -> value 105 at scale 2.

        If `scale` is given, the parsed value is rescaled to it, rounding half up when digits are
        dropped.
        """

        if not isinstance(text, str):
            raise ParseError(text, field, "decimal input must be a string")
        match = _DECIMAL_PATTERN.fullmatch(text)
        if match is None:
            raise ParseError(text, field, "not a decimal string")

        fraction = match["fraction"] or ""
        value = int(match["whole"] + fraction)
        if match["sign"] == "-":
            value = -value

        result = ScaledDecimal(value, len(fraction))
        return result if scale is None else result.rescale(scale)

    def rescale(self, new_scale: int) -> "ScaledDecimal":
        """
        Express the value with `new_scale` fractional digits.

        Increasing the scale is exact. Reducing it rounds half up: `5 * 10**(k-1)` is added to the
        magnitude before the truncating division by `10**k`.
        """

        _check_scale(new_scale)

        if new_scale >= self.scale:
            return ScaledDecimal(self.value * 10 ** (new_scale - self.scale), new_scale)
        return ScaledDecimal(
            div_round_half_up(self.value, 10 ** (self.scale - new_scale), "rescale"),
            new_scale,
        )

    def add(self, other: "ScaledDecimal | int") -> "ScaledDecimal":
        a, b = _align(self, _coerce(other))
        return ScaledDecimal(a.value + b.value, a.scale)

    def sub(self, other: "ScaledDecimal | int") -> "ScaledDecimal":
        a, b = _align(self, _coerce(other))
        return ScaledDecimal(a.value - b.value, a.scale)

    def mul(self, other: "ScaledDecimal | int") -> "ScaledDecimal":
        """
        Multiply the values. The result scale is the sum of both scales, so multiplying by a plain
        integer leaves the scale unchanged.
        """

        other = _coerce(other)
        return ScaledDecimal(self.value * other.value, self.scale + other.scale)

    def scale_div(self, divisor: int) -> "ScaledDecimal":
        """
        Divide the value by a plain integer, truncating toward zero. The scale is unchanged.
        """

        check_integer(divisor, "divisor")
        return ScaledDecimal(div_toward_zero(self.value, divisor, "scale_div"), self.scale)

    def to_decimal(self) -> decimal.Decimal:
        return decimal.Decimal(str(self))

    def to_float(self) -> float:
        """
        Lossy conversion for display purposes. Python's true division of integers is correctly
        rounded, so the result is the nearest float to the exact value.
        """

        return self.value / 10**self.scale

    def _normalized(self) -> tuple[int, int]:
        value, scale = self.value, self.scale
        while scale > 0 and value % 10 == 0:
            value //= 10
            scale -= 1
        return value, scale

    def __add__(self, other: "ScaledDecimal | int") -> "ScaledDecimal":
        return self.add(other)

    def __radd__(self, other: int) -> "ScaledDecimal":
        return self.add(other)

    def __sub__(self, other: "ScaledDecimal | int") -> "ScaledDecimal":
        return self.sub(other)

    def __rsub__(self, other: int) -> "ScaledDecimal":
        return _coerce(other).sub(self)

    def __mul__(self, other: "ScaledDecimal | int") -> "ScaledDecimal":
        return self.mul(other)

    def __rmul__(self, other: int) -> "ScaledDecimal":
        return self.mul(other)

    def __neg__(self) -> "ScaledDecimal":
        return ScaledDecimal(-self.value, self.scale)

    def __abs__(self) -> "ScaledDecimal":
        return ScaledDecimal(abs(self.value), self.scale)

    def _compare(self, other: object) -> int | None:
        """
        Return -1, 0 or 1 after bringing both sides to a common scale, or None if `other` is not a
        comparable number.
        """

        if isinstance(other, bool) or not isinstance(other, ScaledDecimal | int):
            return None
        a, b = _align(self, _coerce(other))
        return (a.value > b.value) - (a.value < b.value)

    def __eq__(self, other: object) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result == 0

    def __lt__(self, other: object) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result < 0

    def __le__(self, other: object) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result <= 0

    def __gt__(self, other: object) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result > 0

    def __ge__(self, other: object) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result >= 0

    def __hash__(self) -> int:
        value, scale = self._normalized()
        return hash(value) if scale == 0 else hash((value, scale))

    def __bool__(self) -> bool:
        return self.value != 0

    def __str__(self) -> str:
        sign = "-" if self.value < 0 else ""
        digits = str(abs(self.value))
        if self.scale == 0:
            return f"{sign}{digits}"
        digits = digits.rjust(self.scale + 1, "0")
        return f"{sign}{digits[: -self.scale]}.{digits[-self.scale :]}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self.value}, scale={self.scale})"


def _check_scale(scale: object) -> None:
    if isinstance(scale, bool) or not isinstance(scale, int) or scale < 0:
        raise InvalidScale(scale)


def _coerce(other: "ScaledDecimal | int") -> ScaledDecimal:
    if isinstance(other, ScaledDecimal):
        return other
    return ScaledDecimal(check_integer(other, "operand"), 0)


def _align(a: ScaledDecimal, b: ScaledDecimal) -> tuple[ScaledDecimal, ScaledDecimal]:
    """
    Bring both operands to the larger of their scales. Scaling up is exact.
    """

    scale = max(a.scale, b.scale)
    return a.rescale(scale), b.rescale(scale)
