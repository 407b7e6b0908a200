from lendmath.exceptions.base import LendMathValueError


class NegativeDuration(LendMathValueError):
    """
    Raised when an interest calculation would run over a negative time span.
    """

    def __init__(self, duration: int, message: str | None = None) -> None:
        self.duration = duration
        super().__init__(
            message=message or f"Duration must be non-negative, got {duration} seconds."
        )


class FutureTimestamp(NegativeDuration):
    """
    Raised when the last update timestamp of an index is later than the current timestamp, which
    indicates a clock inconsistency between the caller and the data source.
    """

    def __init__(self, last_update_timestamp: int, current_timestamp: int) -> None:
        self.last_update_timestamp = last_update_timestamp
        self.current_timestamp = current_timestamp
        super().__init__(
            duration=current_timestamp - last_update_timestamp,
            message=(
                f"Last update timestamp {last_update_timestamp} is later than the current "
                f"timestamp {current_timestamp}."
            ),
        )
