"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ApiRequestError(AdapterError):
    """A call to the artbook API failed.

    ``message`` is the server's ``detail`` when it sent one, otherwise empty;
    ``status_code`` is None when no response arrived at all.
    """

    def __init__(self, status_code: int | None, message: str = ""):
        self.status_code = status_code
        self.message = message
        super().__init__(message or f"Request failed (status {status_code})")
