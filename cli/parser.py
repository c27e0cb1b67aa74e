"""Command parser for CLI input."""

import shlex

from cli.models import (
    CommandRequest,
    DestroyCommand,
    DownloadCommand,
    InfoCommand,
    LoginCommand,
    ThumbnailCommand,
    UploadCommand,
    UploadUrlCommand,
)


class ParseError(Exception):
    """Raised when command parsing fails."""

    pass


def parse_command(input_line: str) -> CommandRequest:
    """Parse user input into a CommandRequest object.

    Args:
        input_line: Raw user input from REPL

    Returns:
        CommandRequest object (one of the command dataclasses in cli.models)

    Raises:
        ParseError: If command syntax is invalid
    """
    if not input_line.strip():
        raise ParseError("Empty command")

    try:
        tokens = shlex.split(input_line)
    except ValueError as e:
        raise ParseError(f"Invalid syntax: {e}")

    if not tokens:
        raise ParseError("Empty command")

    command_name = tokens[0]

    if command_name == "login":
        return _parse_login(tokens[1:])
    elif command_name == "info":
        return InfoCommand(*_parse_file_ref("info", tokens[1:]))
    elif command_name == "upload":
        return _parse_upload(tokens[1:])
    elif command_name == "upload-url":
        return UploadUrlCommand(*_parse_file_ref("upload-url", tokens[1:]))
    elif command_name == "download":
        return DownloadCommand(*_parse_file_ref("download", tokens[1:], allow_output=True))
    elif command_name == "thumbnail":
        return ThumbnailCommand(*_parse_file_ref("thumbnail", tokens[1:], allow_output=True))
    elif command_name == "destroy":
        return DestroyCommand(*_parse_file_ref("destroy", tokens[1:]))
    else:
        raise ParseError(f"Unknown command: {command_name}")


def _parse_login(args: list[str]) -> LoginCommand:
    """Parse 'login <email> <password>' command."""
    if len(args) != 2:
        raise ParseError("login requires exactly 2 arguments: <email> <password>")

    email, password = args
    return LoginCommand(email=email, password=password)


def _parse_upload(args: list[str]) -> UploadCommand:
    """Parse 'upload <sharename> <path>' command."""
    if len(args) != 2:
        raise ParseError("upload requires exactly 2 arguments: <sharename> <path>")

    sharename, file_path = args
    return UploadCommand(sharename=sharename, file_path=file_path)


def _parse_file_ref(name: str, args: list[str], allow_output: bool = False) -> tuple:
    """Parse '<sharename> <fileid> [output_path]' arguments."""
    if allow_output:
        if len(args) not in (2, 3):
            raise ParseError(f"{name} requires 2 or 3 arguments: <sharename> <fileid> [output_path]")
        return tuple(args) if len(args) == 3 else (args[0], args[1], None)

    if len(args) != 2:
        raise ParseError(f"{name} requires exactly 2 arguments: <sharename> <fileid>")
    return tuple(args)
