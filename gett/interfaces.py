"""Collaborator interfaces consumed by GettFile."""

from typing import Any, Optional, Protocol

import httpx


class RequestClient(Protocol):
    """Performs HTTP calls against the service base URL."""

    def send(self, method: str, endpoint: str, **kwargs: Any) -> httpx.Response:
        """Issue a request and return the unparsed response."""
        ...

    def get(self, endpoint: str) -> Any:
        ...

    def post(self, endpoint: str, data: Optional[dict] = None) -> Any:
        ...

    def put(self, url: str, content: bytes) -> Optional[httpx.Response]:
        ...


class UserSession(Protocol):
    """Owns the login state and the access token of a Gett account."""

    access_token: Optional[str]

    def has_access_token(self) -> bool:
        ...

    def login(self) -> bool:
        ...
