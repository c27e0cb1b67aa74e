"""Entry point for looking up, creating and uploading Gett files."""

from typing import Optional

from pydantic import ValidationError

from common.logging_config import get_logger
from gett.exceptions import PreconditionError, RequestError
from gett.file import FileContents, GettFile
from gett.request import Request
from gett.schemas import UploadInfo
from gett.user import User

logger = get_logger(__name__)


class GettClient:
    """Builds GettFile objects wired to a shared user and request client."""

    def __init__(self, user: Optional[User] = None, request: Optional[Request] = None):
        """
        Initialize the client.

        Args:
            user: Optional user session, required for create/upload
            request: Optional request client; defaults to the user's, or a new one
        """
        if request is None:
            request = user.request if user is not None else Request()
        self.user = user
        self.request = request

    def get_file(self, sharename: str, fileid) -> GettFile:
        """
        Fetch the metadata of a file.

        Args:
            sharename: Share the file lives in
            fileid: File identifier within the share

        Returns:
            GettFile with the user and request client attached

        Raises:
            RequestError: If the service does not return file metadata
        """
        endpoint = f"/files/{sharename}/{fileid}"
        response = self.request.get(endpoint)

        if not isinstance(response, dict):
            raise RequestError(endpoint, f"No file metadata returned from {endpoint}")

        return GettFile.from_dict(response, sharename=sharename, user=self.user, request=self.request)

    def create_file(self, sharename: str, filename: str) -> GettFile:
        """
        Create an empty file slot in a share.

        Returns:
            GettFile carrying put_upload_url and post_upload_url

        Raises:
            PreconditionError: If no user is configured
            RequestError: If the service does not return file metadata
        """
        if self.user is None:
            raise PreconditionError("Cannot create_file() without a user.")

        if not self.user.has_access_token():
            self.user.login()

        endpoint = f"/files/{sharename}/create?accesstoken={self.user.access_token}"
        response = self.request.post(endpoint, {'filename': filename})

        if not isinstance(response, dict):
            raise RequestError(endpoint, f"No file metadata returned from {endpoint}")
        try:
            UploadInfo.model_validate(response.get('upload') or {})
        except ValidationError as e:
            raise RequestError(endpoint, f"Malformed upload URLs returned from {endpoint}") from e

        logger.info(f"Created file {filename} in share {sharename} [fileid={response.get('fileid')}]")
        return GettFile.from_dict(response, sharename=sharename, user=self.user, request=self.request)

    def upload_file(
        self,
        sharename: str,
        filename: str,
        contents: FileContents,
        encoding: Optional[str] = None,
    ) -> Optional[GettFile]:
        """
        Create a file in a share and upload its contents.

        Args:
            sharename: Target share
            filename: Name the file gets in the share
            contents: A bytes buffer, a readable file object, or a file path
            encoding: Text encoding for reading the contents (None for raw bytes)

        Returns:
            The created GettFile, or None when the upload failed
        """
        file = self.create_file(sharename, filename)

        upload_url = file.put_upload_url or file.get_upload_url()

        if file.send_file(upload_url, contents, encoding):
            logger.info(f"Uploaded {filename} to share {sharename}")
            return file

        logger.warning(f"Upload of {filename} to share {sharename} failed")
        return None

    def close(self) -> None:
        """Close the HTTP session."""
        self.request.close()
