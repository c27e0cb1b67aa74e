"""Exception classes raised by the Gett client."""

from typing import Optional


class GettError(Exception):
    """
    Base exception class for all Gett client errors.
    """
    pass


class PreconditionError(GettError):
    """
    Raised when a call is missing a required collaborator or credential,
    such as a file operation that needs a user when none is attached.
    """
    pass


class RequestError(GettError):
    """
    Raised when the service answers with a failure status or with a
    payload that lacks what the call needs.

    The full endpoint, query string included, is kept in `endpoint`. The
    message shows the path only, so access tokens never reach the user.
    """

    def __init__(self, endpoint: str, message: Optional[str] = None, status_line: Optional[str] = None):
        self.endpoint = endpoint
        self.path = endpoint.split('?', 1)[0]
        self.status_line = status_line
        if message is None:
            message = f"{self.path} said {status_line}" if status_line else f"Request to {self.path} failed"
        elif self.path != endpoint:
            message = message.replace(endpoint, self.path)
        super().__init__(message)
