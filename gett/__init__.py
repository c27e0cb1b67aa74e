"""Python client for the Ge.tt file sharing API."""

from gett.client import GettClient
from gett.exceptions import GettError, PreconditionError, RequestError
from gett.file import GettFile
from gett.request import Request
from gett.user import User

__all__ = [
    "GettClient",
    "GettError",
    "GettFile",
    "PreconditionError",
    "Request",
    "RequestError",
    "User",
]
