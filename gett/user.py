"""Gett account session: credentials, login and tokens."""

from typing import Optional

from pydantic import ValidationError

from common.logging_config import get_logger
from gett.config import LOGIN_ENDPOINT
from gett.exceptions import PreconditionError, RequestError
from gett.request import Request
from gett.schemas import LoginRequest, LoginResponse, RefreshLoginRequest

logger = get_logger(__name__)


class User:
    """
    A Gett account.

    Logs in either with an api key, email and password, or with a refresh
    token kept from an earlier login. The refresh token wins when both are
    available.
    """

    def __init__(
        self,
        apikey: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
        refresh_token: Optional[str] = None,
        access_token: Optional[str] = None,
        request: Optional[Request] = None,
    ):
        self.apikey = apikey
        self.email = email
        self.password = password
        self.refresh_token = refresh_token
        self.access_token = access_token
        self.request = request if request is not None else Request()

        self.userid: Optional[str] = None
        self.fullname: Optional[str] = None
        self.storage_used: Optional[int] = None
        self.storage_limit: Optional[int] = None

    def has_access_token(self) -> bool:
        return bool(self.access_token)

    def has_refresh_token(self) -> bool:
        return bool(self.refresh_token)

    def login(self) -> bool:
        """
        Exchange the held credentials for an access token.

        Returns:
            True once the access token is stored

        Raises:
            PreconditionError: If neither a refresh token nor apikey/email/password are set
            RequestError: If the service rejects the login or omits the access token
        """
        if self.has_refresh_token():
            payload = RefreshLoginRequest(refreshtoken=self.refresh_token)
            logger.info("Logging in with refresh token")
        elif self.apikey and self.email and self.password:
            payload = LoginRequest(apikey=self.apikey, email=self.email, password=self.password)
            logger.info(f"Logging in as {self.email}")
        else:
            raise PreconditionError(
                "Cannot login() without an apikey, email and password or a refresh token."
            )

        response = self.request.post(LOGIN_ENDPOINT, payload.model_dump())

        if not isinstance(response, dict):
            raise RequestError(LOGIN_ENDPOINT, f"No access token returned from {LOGIN_ENDPOINT}")
        try:
            login = LoginResponse.model_validate(response)
        except ValidationError as e:
            raise RequestError(LOGIN_ENDPOINT, f"No access token returned from {LOGIN_ENDPOINT}") from e

        self.access_token = login.accesstoken
        if login.refreshtoken:
            self.refresh_token = login.refreshtoken

        if login.user is not None:
            self.userid = login.user.userid
            self.fullname = login.user.fullname
            self.email = login.user.email or self.email
            if login.user.storage is not None:
                self.storage_used = login.user.storage.used
                self.storage_limit = login.user.storage.limit

        logger.info(f"Login successful [userid={self.userid}]")
        return True
