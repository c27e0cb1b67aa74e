"""Gett file resource."""

import io
import os
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from typing import IO, Any, Optional, Union

from common.logging_config import get_logger
from gett.exceptions import PreconditionError, RequestError
from gett.interfaces import RequestClient, UserSession
from gett.request import Request, status_line

logger = get_logger(__name__)


FileContents = Union[bytes, bytearray, str, os.PathLike, IO]

_COLLABORATORS = ('user', 'request')


@dataclass(eq=False)
class GettFile:
    """
    A file stored in a Gett share.

    Instances are normally built by GettClient from service payloads. The
    scalar attributes are read only once set; only the user and request
    collaborators can be attached afterwards. Every network operation except
    send_file() needs both sharename and fileid.
    """

    filename: Optional[str] = None
    fileid: Optional[int] = None
    downloads: Optional[int] = None
    readystate: Optional[str] = None
    url: Optional[str] = None
    download: Optional[str] = None
    size: Optional[int] = None
    created: Optional[int] = None
    sharename: Optional[str] = None
    put_upload_url: Optional[str] = None
    post_upload_url: Optional[str] = None
    user: Optional[UserSession] = field(default=None, repr=False)
    request: RequestClient = field(default_factory=Request, repr=False)

    def __setattr__(self, name: str, value: Any) -> None:
        if name not in _COLLABORATORS and name in self.__dict__:
            raise AttributeError(f"{type(self).__name__}.{name} is read only")
        super().__setattr__(name, value)

    @classmethod
    def from_dict(
        cls,
        data: dict,
        sharename: Optional[str] = None,
        user: Optional[UserSession] = None,
        request: Optional[RequestClient] = None,
    ) -> 'GettFile':
        """
        Build a file from a service payload.

        Unknown keys are ignored and values are kept as the service sent
        them. The nested "upload" object is flattened into put_upload_url
        and post_upload_url.

        Args:
            data: Decoded file JSON
            sharename: Share name to use when the payload does not carry one
            user: Optional user session to attach
            request: Optional request client to share

        Returns:
            GettFile instance
        """
        names = {f.name for f in fields(cls)} - set(_COLLABORATORS)
        kwargs = {key: value for key, value in data.items() if key in names}

        upload = data.get('upload') or {}
        if 'puturl' in upload:
            kwargs['put_upload_url'] = upload['puturl']
        if 'posturl' in upload:
            kwargs['post_upload_url'] = upload['posturl']

        if sharename is not None and kwargs.get('sharename') is None:
            kwargs['sharename'] = sharename

        kwargs['user'] = user
        if request is not None:
            kwargs['request'] = request
        return cls(**kwargs)

    @property
    def has_user(self) -> bool:
        return self.user is not None

    @property
    def created_at(self) -> Optional[datetime]:
        """Creation time as an aware UTC datetime."""
        if self.created is None:
            return None
        return datetime.fromtimestamp(self.created, tz=timezone.utc)

    def send_file(self, upload_url: str, contents: FileContents, encoding: Optional[str] = None):
        """
        Upload file contents to a PUT upload URL.

        Normally called through GettClient.upload_file(), but usable on its
        own together with get_upload_url().

        Args:
            upload_url: PUT based Gett upload URL
            contents: A bytes buffer, a readable file object, or a file path
            encoding: Text encoding to read the contents with. None reads raw
                bytes without newline translation.

        Returns:
            True on success, False when there was nothing to read, None when
            the upload was refused
        """
        data = self._read_contents(contents, encoding)

        if not data:
            logger.warning(f"Nothing to upload for {self.filename or upload_url}")
            return False

        logger.info(f"Uploading {len(data)} bytes to {upload_url}")
        response = self.request.put(upload_url, data)

        if response:
            return True
        else:
            return None

    def get_upload_url(self) -> str:
        """
        Ask the service for a PUT upload URL for this file.

        Returns:
            The PUT upload URL

        Raises:
            PreconditionError: If no user is attached
            RequestError: If the service returned no PUT URL
        """
        if not self.has_user:
            raise PreconditionError("Cannot get_upload_url() without a user.")

        endpoint = self._authenticated_endpoint('upload')
        response = self.request.get(endpoint)

        if isinstance(response, dict) and 'puturl' in response:
            return response['puturl']
        else:
            raise RequestError(endpoint, f"Could not get a PUT url from {endpoint}")

    def destroy(self) -> bool:
        """
        Delete this file from its share.

        Returns:
            True when the service acknowledged the deletion, False otherwise

        Raises:
            PreconditionError: If no user is attached
        """
        if not self.has_user:
            raise PreconditionError("Cannot destroy() without a user.")

        endpoint = self._authenticated_endpoint('destroy')
        response = self.request.post(endpoint)

        if response:
            logger.info(f"Destroyed file {self.sharename}/{self.fileid}")
            return True
        else:
            logger.warning(f"Destroy not acknowledged for {self.sharename}/{self.fileid}")
            return False

    def contents(self) -> bytes:
        """
        Download the contents of this file.

        Encoding the bytes (if needed) is up to the caller.
        """
        return self._file_contents(f"/files/{self.sharename}/{self.fileid}/blob")

    def thumbnail(self) -> bytes:
        """Download the thumbnail of this file. Only images have one."""
        return self._file_contents(f"/files/{self.sharename}/{self.fileid}/blob/thumb")

    def _authenticated_endpoint(self, action: str) -> str:
        if not self.user.has_access_token():
            self.user.login()
        return f"/files/{self.sharename}/{self.fileid}/{action}?accesstoken={self.user.access_token}"

    def _file_contents(self, endpoint: str) -> bytes:
        response = self.request.send('GET', endpoint, follow_redirects=True)

        if response.is_success:
            logger.debug(f"Fetched {len(response.content)} bytes from {endpoint}")
            return response.content
        else:
            raise RequestError(endpoint, status_line=status_line(response))

    @staticmethod
    def _read_contents(contents: FileContents, encoding: Optional[str]) -> bytes:
        if isinstance(contents, (bytes, bytearray)):
            return bytes(contents)

        if hasattr(contents, 'read'):
            data = contents.read()
            if encoding is not None and isinstance(data, (bytes, bytearray)):
                data = io.TextIOWrapper(io.BytesIO(data), encoding=encoding).read()
        elif not contents:
            return b''
        elif encoding is None:
            with open(contents, 'rb') as f:
                data = f.read()
        else:
            with open(contents, 'r', encoding=encoding) as f:
                data = f.read()

        if isinstance(data, str):
            return data.encode(encoding or 'utf-8')
        return data
