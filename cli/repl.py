"""REPL with prompt_toolkit for user interaction."""

import os
import sys
from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from cli.commands import (
    handle_destroy,
    handle_download,
    handle_info,
    handle_login,
    handle_thumbnail,
    handle_upload,
    handle_upload_url,
)
from cli.completer import GettCompleter
from cli.constants import (
    HELP_TEXT,
    LOGO,
    PROMPT_TEXT,
    STYLE,
    WELCOME_HELP,
    WELCOME_TITLE,
)
from cli.models import (
    DestroyCommand,
    DownloadCommand,
    InfoCommand,
    LoginCommand,
    ThumbnailCommand,
    UploadCommand,
    UploadUrlCommand,
)
from cli.parser import ParseError, parse_command


def clear_screen() -> None:
    """Clear the terminal screen (cross-platform)."""
    if sys.platform == "win32":
        os.system("cls")
    else:
        os.system("clear")


def show_welcome() -> None:
    """Display logo and welcome text."""
    print(LOGO)
    print(WELCOME_TITLE)
    print(WELCOME_HELP)


def dispatch_command(cmd_obj) -> str:
    """Dispatch parsed command to appropriate handler."""
    if isinstance(cmd_obj, LoginCommand):
        return handle_login(cmd_obj)
    elif isinstance(cmd_obj, InfoCommand):
        return handle_info(cmd_obj)
    elif isinstance(cmd_obj, UploadCommand):
        return handle_upload(cmd_obj)
    elif isinstance(cmd_obj, UploadUrlCommand):
        return handle_upload_url(cmd_obj)
    elif isinstance(cmd_obj, DownloadCommand):
        return handle_download(cmd_obj)
    elif isinstance(cmd_obj, ThumbnailCommand):
        return handle_thumbnail(cmd_obj)
    elif isinstance(cmd_obj, DestroyCommand):
        return handle_destroy(cmd_obj)
    else:
        return f"Unknown command type: {type(cmd_obj)}"


def repl_loop() -> None:
    """Start interactive REPL with prompt_toolkit."""
    session: PromptSession = PromptSession(
        completer=GettCompleter(), history=InMemoryHistory(), style=STYLE
    )

    clear_screen()
    show_welcome()

    while True:
        try:
            user_input = session.prompt([("class:prompt", PROMPT_TEXT)])

            if not user_input.strip():
                continue

            if user_input.strip() == "exit":
                print("Goodbye!")
                break

            if user_input.strip() == "help":
                print(HELP_TEXT)
                continue

            if user_input.strip() == "clear":
                clear_screen()
                show_welcome()
                continue

            cmd_obj = parse_command(user_input)
            print(dispatch_command(cmd_obj))

        except ParseError as e:
            print(f"Error: {e}")
        except KeyboardInterrupt:
            continue
        except EOFError:
            print("\nGoodbye!")
            break
