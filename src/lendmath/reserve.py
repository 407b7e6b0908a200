"""
Interpretation of the rate and index fields returned by a pool data provider's reserve view call.

The remote call layer returns every numeric field as a raw integer string (or a native integer).
`ReserveRates.from_raw` parses the fields needed for interest math, and the derived values mirror
what the pool contract would compute at a given time.
"""

import dataclasses
from collections.abc import Mapping
from typing import Any

from lendmath.constants import SECONDS_PER_YEAR
from lendmath.exceptions import MissingField, ParseError
from lendmath.fixed_point.ray_math import ray_mul
from lendmath.fixed_point.scaled_decimal import ScaledDecimal, parse_integer
from lendmath.fixed_point.types import Ray
from lendmath.interest.rates import calculate_compounded_interest, calculate_compounded_rate
from lendmath.logging import logger

RAY_FIELDS = (
    "liquidity_rate",
    "variable_borrow_rate",
    "liquidity_index",
    "variable_borrow_index",
)


def _get_field(raw: Mapping[str, Any], field: str) -> Any:
    try:
        return raw[field]
    except KeyError:
        raise MissingField(field) from None


@dataclasses.dataclass(slots=True, frozen=True)
class ReserveRates:
    liquidity_rate: Ray
    variable_borrow_rate: Ray
    liquidity_index: Ray
    variable_borrow_index: Ray
    last_update_timestamp: int

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "ReserveRates":
        """
        Build from the raw reserve data mapping. A missing or malformed field raises `ParseError`
        naming the field.
        """

        if not isinstance(raw, Mapping):
            raise ParseError(raw, reason="reserve data must be a mapping of field names to values")

        rays = {field: Ray(_get_field(raw, field), field=field) for field in RAY_FIELDS}
        last_update_timestamp = parse_integer(
            _get_field(raw, "last_update_timestamp"),
            field="last_update_timestamp",
        )
        if last_update_timestamp < 0:
            raise ParseError(
                last_update_timestamp,
                "last_update_timestamp",
                "timestamp cannot be negative",
            )

        logger.debug(f"Parsed reserve rates: {rays}, last updated {last_update_timestamp}")
        return cls(last_update_timestamp=last_update_timestamp, **rays)

    @property
    def supply_apy(self) -> float:
        return calculate_compounded_rate(self.liquidity_rate, SECONDS_PER_YEAR).to_float()

    @property
    def variable_borrow_apy(self) -> float:
        return calculate_compounded_rate(self.variable_borrow_rate, SECONDS_PER_YEAR).to_float()

    def normalized_variable_debt(self, current_timestamp: int | None = None) -> ScaledDecimal:
        """
        The variable borrow index brought forward from the last update to `current_timestamp`
        (default: now), accruing with the binomial approximation used by the pool contract.
        """

        if current_timestamp == self.last_update_timestamp:
            return self.variable_borrow_index

        return ray_mul(
            calculate_compounded_interest(
                self.variable_borrow_rate,
                self.last_update_timestamp,
                current_timestamp,
            ),
            self.variable_borrow_index,
        )

    def accrued_debt(self, scaled_debt: Any, current_timestamp: int | None = None) -> int:
        """
        Convert a scaled variable debt balance into the current debt balance.
        """

        scaled_amount = parse_integer(scaled_debt, field="scaled_variable_debt")
        normalized_debt = self.normalized_variable_debt(current_timestamp)
        return ray_mul(ScaledDecimal(scaled_amount, 0), normalized_debt).value
