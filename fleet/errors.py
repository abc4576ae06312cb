"""Errors raised by fleet queries."""


class NotFoundError(LookupError):
    """A referenced truck or rule does not exist."""

    def __init__(self, message: str = "Not found"):
        super().__init__(message)
        self.message = message
