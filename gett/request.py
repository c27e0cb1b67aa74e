"""HTTP transport for the Gett REST API."""

from typing import Any, Optional

import httpx

from common.logging_config import get_logger
from gett.config import API_URL, REQUEST_TIMEOUT
from gett.exceptions import RequestError

logger = get_logger(__name__)


def status_line(response: httpx.Response) -> str:
    """
    Format the status of a response the way HTTP prints it.

    Args:
        response: HTTP response object

    Returns:
        Status line such as "404 Not Found"
    """
    return f"{response.status_code} {response.reason_phrase}".strip()


class Request:
    """HTTP client for the Gett API built on a shared httpx session."""

    def __init__(
        self,
        base_url: str = API_URL,
        timeout: float = REQUEST_TIMEOUT,
        session: Optional[httpx.Client] = None,
    ):
        """
        Initialize the request client.

        Args:
            base_url: Base URL every relative endpoint is resolved against
            timeout: Request timeout in seconds
            session: Optional preconfigured httpx.Client (used by tests)
        """
        self.base_url = base_url
        self.session = session if session is not None else httpx.Client(
            base_url=base_url,
            timeout=timeout,
            follow_redirects=True,
        )

    def send(self, method: str, endpoint: str, **kwargs: Any) -> httpx.Response:
        """
        Issue a request and return the raw response without checking it.

        Args:
            method: HTTP method (GET, POST, PUT)
            endpoint: Path relative to the base URL, or an absolute URL
            **kwargs: Additional arguments passed to httpx

        Returns:
            HTTP response object
        """
        logger.debug(f"Making request: {method} {endpoint}")
        response = self.session.request(method, endpoint, **kwargs)
        logger.debug(f"Response received: {method} {endpoint} status={response.status_code}")
        return response

    def get(self, endpoint: str) -> Any:
        """
        GET an endpoint and decode its JSON payload.

        Raises:
            RequestError: If the service answers with a non-2xx status
        """
        return self._process('GET', endpoint, self.send('GET', endpoint))

    def post(self, endpoint: str, data: Optional[dict] = None) -> Any:
        """
        POST an optional JSON body to an endpoint and decode the reply.

        Raises:
            RequestError: If the service answers with a non-2xx status
        """
        kwargs = {'json': data} if data is not None else {}
        return self._process('POST', endpoint, self.send('POST', endpoint, **kwargs))

    def put(self, url: str, content: bytes) -> Optional[httpx.Response]:
        """
        PUT raw content to a (usually absolute) upload URL.

        Args:
            url: Upload URL handed out by the service
            content: Payload bytes

        Returns:
            The response on success, None when the service refused the upload
        """
        response = self.send('PUT', url, content=content)
        if response.is_success:
            return response
        logger.warning(f"Upload refused: PUT {url} status={response.status_code}")
        return None

    def _process(self, method: str, endpoint: str, response: httpx.Response) -> Any:
        """
        Decode a response body, raising on failure statuses.

        Returns:
            Decoded JSON, or True for a successful response with no body
        """
        if not response.is_success:
            logger.warning(f"Request failed: {method} {endpoint} status={response.status_code}")
            raise RequestError(
                endpoint,
                f"{method} {endpoint} said {status_line(response)}",
                status_line=status_line(response),
            )

        if not response.content.strip():
            return True

        try:
            return response.json()
        except ValueError as e:
            raise RequestError(endpoint, f"{method} {endpoint} returned invalid JSON: {e}") from e

    def close(self) -> None:
        """Close the HTTP session."""
        self.session.close()

    def __enter__(self) -> 'Request':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
