"""Exceptions raised across the package."""


class QuakeError(Exception):
    """General failure in entry handling."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"There is an error: {self.message}"

    def __repr__(self) -> str:
        return f"QuakeError({self.message!r})"


class QuakeParserError(Exception):
    """Failure while parsing the Quake DSL."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"QuakeParserError: {self.message}"

    def __repr__(self) -> str:
        return f"QuakeParserError: {self.message}"