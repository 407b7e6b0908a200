class LendMathError(Exception):
    """
    Parent class for every exception raised by this package.

    Handle specific errors first, then `LendMathError`, then anything else:

    ```
    try:
        lendmath.calculate_compounded_interest(rate, last_update_timestamp)
    except NegativeDuration:
        ... # the caller's clock is behind the data source
    except LendMathError:
        ... # any other math or parsing failure
    ```

    A human-readable description is available from the `.message` attribute when one was given.
    """

    message: str | None = None

    def __init__(self, message: str | None = None) -> None:
        if message:
            self.message = message
            super().__init__(message)


class LendMathValueError(LendMathError): ...


class LendMathTypeError(LendMathError): ...
