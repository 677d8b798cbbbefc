"""Error taxonomy for catalog loading and order submission."""


class OrderError(Exception):
    """Base error. ``message`` is what the user gets to see."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(OrderError):
    """Local check failed before any request was made (empty selection)."""


class ServiceError(OrderError):
    """The remote service answered with ``success: false``."""


class TransportError(OrderError):
    """Network failure, non-OK status or a body that could not be parsed.

    The root cause is chained via ``raise ... from`` and only logged.
    """
