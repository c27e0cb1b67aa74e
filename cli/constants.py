"""CLI constants and configuration."""

from pathlib import Path

from prompt_toolkit.styles import Style

COMMANDS = ["login", "info", "upload", "upload-url", "download", "thumbnail", "destroy", "clear", "exit", "help"]

STYLE = Style.from_dict(
    {
        "prompt": "#2EA3F2 bold",
        "command": "#0088ff bold",
    }
)

BLUE = "\033[38;2;46;163;242m"
RESET = "\033[0m"

LOGO = f"""{BLUE}
  ██████╗ ███████╗████████╗████████╗
 ██╔════╝ ██╔════╝╚══██╔══╝╚══██╔══╝
 ██║  ███╗█████╗     ██║      ██║
 ██║   ██║██╔══╝     ██║      ██║
 ╚██████╔╝███████╗   ██║      ██║
  ╚═════╝ ╚══════╝   ╚═╝      ╚═╝
{RESET}"""

WELCOME_TITLE = "Gett CLI - Ge.tt file sharing client"
WELCOME_HELP = "Type 'help' for commands or 'exit' to quit.\n"

PROMPT_TEXT = "gett> "

CONFIG_PATH = Path.home() / '.gett' / 'config.json'

UPLOADS_DIR = "uploads"
DOWNLOADS_DIR = "downloads"

HELP_TEXT = """Available commands:
  login <email> <password>                      Login (api key from config or GETT_API_KEY)
  info <sharename> <fileid>                     Show file metadata
  upload <sharename> <path>                     Upload a local file into a share
  upload-url <sharename> <fileid>               Request a new PUT upload URL for a file
  download <sharename> <fileid> [output_path]   Download file contents (defaults to downloads/)
  thumbnail <sharename> <fileid> [output_path]  Download an image thumbnail (defaults to downloads/)
  destroy <sharename> <fileid>                  Delete a file
  clear                                         Clear screen and redisplay welcome message
  help                                          Show this help
  exit                                          Exit REPL

Examples:
  login alice@example.com mypassword123
  upload 4ddfds uploads/report.pdf
  info 4ddfds 0
  download 4ddfds 0 downloads/copy.pdf
  destroy 4ddfds 0"""
