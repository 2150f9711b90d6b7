"""CLI entry point for commitpost.

Every option can also be given as a GitHub Actions input (INPUT_<NAME>
environment variable) or in a YAML file passed with --config.
"""

import typer
from dotenv import load_dotenv

from commitpost.cli.main import main_command

# Load environment variables from .env file
load_dotenv()

# Main application
app = typer.Typer(
    name="commitpost",
    help="commitpost: summarize a commit range into an AI-written X post",
    add_completion=False,
)

app.command()(main_command)


__all__ = [
    "app",
    "main_command",
]
