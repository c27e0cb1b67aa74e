"""Command handler functions for CLI operations."""

import functools
from pathlib import Path
from typing import Callable, Optional

import httpx

from common.logging_config import get_logger
from cli.config import Config
from cli.constants import CONFIG_PATH, DOWNLOADS_DIR
from cli.models import (
    DestroyCommand,
    DownloadCommand,
    InfoCommand,
    LoginCommand,
    ThumbnailCommand,
    UploadCommand,
    UploadUrlCommand,
)
from cli.utils import format_file_size, format_timestamp
from gett.client import GettClient
from gett.exceptions import GettError
from gett.file import GettFile
from gett.request import Request
from gett.user import User

logger = get_logger(__name__)


_config: Optional[Config] = None
_client: Optional[GettClient] = None


def get_config() -> Config:
    """Get or load the global CLI configuration."""
    global _config
    if _config is None:
        _config = Config(CONFIG_PATH)
    return _config


def get_client() -> GettClient:
    """
    Get or create global GettClient instance.

    Returns:
        GettClient whose user carries the credentials from the config file
    """
    global _client
    if _client is None:
        logger.debug("Creating new GettClient instance")
        config = get_config()
        request = Request(base_url=config.get_api_url(), timeout=config.get_timeout())
        user = User(
            apikey=config.get_apikey(),
            email=config.get_email(),
            refresh_token=config.get_refresh_token(),
            request=request,
        )
        _client = GettClient(user=user, request=request)
    return _client


def reports_errors(action: str) -> Callable:
    """Turn client failures raised by a handler into an error message."""

    def decorator(handler: Callable[..., str]) -> Callable[..., str]:
        @functools.wraps(handler)
        def wrapper(*args, **kwargs) -> str:
            try:
                return handler(*args, **kwargs)
            except GettError as e:
                logger.warning(f"{action} failed: {e}")
                return f"Error: {e}"
            except httpx.TimeoutException:
                logger.error(f"{action} timed out")
                return "Error: Request timed out. The service may be overloaded."
            except httpx.HTTPError as e:
                logger.error(f"Network error during {action}: {e}")
                return f"Error: Cannot reach the Gett service ({e})"
            except OSError as e:
                logger.error(f"File error during {action}: {e}")
                return f"Error: {e}"
        return wrapper

    return decorator


def _file_ref(client: GettClient, sharename: str, fileid: str) -> GettFile:
    return GettFile(sharename=sharename, fileid=fileid, user=client.user, request=client.request)


def _output_file(output_path: Optional[str], default_name: str) -> Path:
    output_file = Path(output_path) if output_path else Path(DOWNLOADS_DIR) / default_name
    if output_file.is_dir():
        output_file = output_file / default_name
    output_file.parent.mkdir(parents=True, exist_ok=True)
    return output_file


def describe_file(file: GettFile) -> str:
    """Format file metadata for display."""
    return (
        f"{file.filename} (ID: {file.fileid}, Share: {file.sharename})\n"
        f"  Size: {format_file_size(file.size)}\n"
        f"  State: {file.readystate}\n"
        f"  Downloads: {file.downloads}\n"
        f"  Created: {format_timestamp(file.created_at)}\n"
        f"  URL: {file.url}"
    )


@reports_errors("login")
def handle_login(
    cmd: LoginCommand,
    client: Optional[GettClient] = None,
    config: Optional[Config] = None,
) -> str:
    """
    Handle 'login' command.

    Args:
        cmd: LoginCommand with email and password
        client: Optional GettClient for dependency injection (testing)
        config: Optional Config for dependency injection (testing)

    Returns:
        Success or error message
    """
    if client is None:
        client = get_client()
    if config is None:
        config = get_config()

    user = client.user
    user.email = cmd.email
    user.password = cmd.password
    user.refresh_token = None
    user.access_token = None

    user.login()
    config.set_login(user.email, user.refresh_token)

    lines = [f"Login successful!\nLogged in as: {user.fullname or user.email}"]
    if user.storage_limit is not None:
        lines.append(
            f"Storage: {format_file_size(user.storage_used)} of {format_file_size(user.storage_limit)}"
        )
    return '\n'.join(lines)


@reports_errors("info")
def handle_info(cmd: InfoCommand, client: Optional[GettClient] = None) -> str:
    """
    Handle 'info' command.

    Returns:
        Formatted file metadata or error message
    """
    if client is None:
        client = get_client()
    return describe_file(client.get_file(cmd.sharename, cmd.fileid))


@reports_errors("upload")
def handle_upload(cmd: UploadCommand, client: Optional[GettClient] = None) -> str:
    """
    Handle 'upload' command.

    Args:
        cmd: UploadCommand with sharename and local file path
        client: Optional GettClient for dependency injection (testing)

    Returns:
        Success or error message with upload result
    """
    logger.info(f"Executing upload command: share={cmd.sharename} path={cmd.file_path}")
    if client is None:
        client = get_client()

    path = Path(cmd.file_path)
    if not path.is_file():
        return f"Error: File not found: {cmd.file_path}"
    if path.stat().st_size == 0:
        return f"Error: File is empty: {cmd.file_path}"

    file = client.upload_file(cmd.sharename, path.name, path)
    if file is None:
        return f"Error: Upload of {cmd.file_path} was refused by the service"

    return (
        f"Uploaded: {file.filename} (ID: {file.fileid}, Size: {format_file_size(path.stat().st_size)})\n"
        f"URL: {file.url}"
    )


@reports_errors("upload-url")
def handle_upload_url(cmd: UploadUrlCommand, client: Optional[GettClient] = None) -> str:
    """Handle 'upload-url' command."""
    if client is None:
        client = get_client()
    return f"PUT upload URL: {_file_ref(client, cmd.sharename, cmd.fileid).get_upload_url()}"


@reports_errors("download")
def handle_download(cmd: DownloadCommand, client: Optional[GettClient] = None) -> str:
    """
    Handle 'download' command.

    Args:
        cmd: DownloadCommand with sharename, fileid and optional output_path
        client: Optional GettClient for dependency injection (testing)

    Returns:
        Success or error message with download details
    """
    logger.info(f"Executing download command: share={cmd.sharename} fileid={cmd.fileid}")
    if client is None:
        client = get_client()

    file = client.get_file(cmd.sharename, cmd.fileid)
    data = file.contents()

    output_file = _output_file(cmd.output_path, file.filename or f"{cmd.sharename}_{cmd.fileid}")
    output_file.write_bytes(data)

    return f"Downloaded: {file.filename} ({format_file_size(len(data))})\nSaved to: {output_file.absolute()}"


@reports_errors("thumbnail")
def handle_thumbnail(cmd: ThumbnailCommand, client: Optional[GettClient] = None) -> str:
    """Handle 'thumbnail' command."""
    if client is None:
        client = get_client()

    file = client.get_file(cmd.sharename, cmd.fileid)
    data = file.thumbnail()

    output_file = _output_file(cmd.output_path, f"thumb_{file.filename or cmd.fileid}")
    output_file.write_bytes(data)

    return f"Thumbnail of {file.filename} ({format_file_size(len(data))})\nSaved to: {output_file.absolute()}"


@reports_errors("destroy")
def handle_destroy(cmd: DestroyCommand, client: Optional[GettClient] = None) -> str:
    """
    Handle 'destroy' command.

    Returns:
        Success or error message
    """
    logger.info(f"Executing destroy command: share={cmd.sharename} fileid={cmd.fileid}")
    if client is None:
        client = get_client()

    if _file_ref(client, cmd.sharename, cmd.fileid).destroy():
        return f"Destroyed file {cmd.fileid} in share {cmd.sharename}."
    return f"Error: The service did not confirm deletion of {cmd.sharename}/{cmd.fileid}"
