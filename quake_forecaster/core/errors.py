"""Error taxonomy for the earthquake query pipeline.

ParseError is raised by the lowest parsing layer when a record or one of
its sub-fields does not have the expected textual shape. QueryError is a
pipeline-level failure: degenerate query input, or an upstream stage that
has already failed.
"""


class ParseError(ValueError):
    """A record or sub-field did not match its expected textual shape.

    Attributes:
        value: The offending raw value, kept for diagnostics
    """

    def __init__(self, message: str, value: object = None) -> None:
        super().__init__(message)
        self.message = message
        self.value = value


class QueryError(Exception):
    """A query stage could not produce a result."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
