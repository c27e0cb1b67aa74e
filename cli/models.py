"""Command request data types for CLI."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class LoginCommand:
    """Login with email and password."""

    email: str
    password: str
    command: Literal["login"] = "login"


@dataclass(frozen=True)
class InfoCommand:
    """Show metadata of a file."""

    sharename: str
    fileid: str
    command: Literal["info"] = "info"


@dataclass(frozen=True)
class UploadCommand:
    """Upload a local file into a share."""

    sharename: str
    file_path: str
    command: Literal["upload"] = "upload"


@dataclass(frozen=True)
class UploadUrlCommand:
    """Request a fresh PUT upload URL for a file."""

    sharename: str
    fileid: str
    command: Literal["upload-url"] = "upload-url"


@dataclass(frozen=True)
class DownloadCommand:
    """Download file contents."""

    sharename: str
    fileid: str
    output_path: str | None = None
    command: Literal["download"] = "download"


@dataclass(frozen=True)
class ThumbnailCommand:
    """Download the thumbnail of an image file."""

    sharename: str
    fileid: str
    output_path: str | None = None
    command: Literal["thumbnail"] = "thumbnail"


@dataclass(frozen=True)
class DestroyCommand:
    """Delete a file from its share."""

    sharename: str
    fileid: str
    command: Literal["destroy"] = "destroy"


CommandRequest = (
    LoginCommand
    | InfoCommand
    | UploadCommand
    | UploadUrlCommand
    | DownloadCommand
    | ThumbnailCommand
    | DestroyCommand
)
