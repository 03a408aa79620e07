"""Exceptions raised by category queries."""


class InvalidInputError(ValueError):
    """A query was called with arguments it cannot work with."""

    def __init__(self, message: str, code: int = 0):
        super().__init__(message)
        self.code = code


EMPTY_ID_LIST = 1484823597
