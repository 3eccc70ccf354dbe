"""
plain.py

PURPOSE: Plain text output formatting for the CLI.
DEPENDENCIES: rich

ARCHITECTURE NOTES:
This module provides formatted console output using Rich.
It handles:
- Parsed command display
- Messages and errors
- The REPL prompt
"""

import json

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from text_reality.models.command import Command

# Global console instance
console = Console()


def command_to_dict(command: Command) -> dict[str, object]:
    """Flatten a command into JSON-friendly values."""
    return {
        "verb": command.verb.name,
        "noun": command.noun,
        "preposition": command.preposition.name,
        "noun2": command.noun2,
        "full_text": command.full_text,
        "profanity_detected": command.profanity_detected,
        "profanity_word": command.profanity_word,
    }


def print_command(command: Command) -> None:
    """Print a parsed command as a two-column table."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan")
    table.add_column()

    for field, value in command_to_dict(command).items():
        text = escape(str(value))
        if value in ("", "NO_COMMAND", "NOT_RECOGNISED"):
            text = f"[dim]{text or '-'}[/dim]"
        elif field == "profanity_detected" and value:
            text = f"[red]{text}[/red]"
        table.add_row(field, text)

    console.print(table)


def print_command_json(command: Command) -> None:
    """Print a parsed command as JSON."""
    console.print_json(json.dumps(command_to_dict(command)))


def print_message(text: str) -> None:
    """Print a normal message."""
    console.print(text)


def print_error(text: str) -> None:
    """Print an error message."""
    console.print(f"[red]{escape(text)}[/red]")


def print_success(text: str) -> None:
    """Print a success message."""
    console.print(f"[green]{text}[/green]")


def print_prompt() -> str:
    """Print the input prompt and get user input."""
    return console.input("[bold cyan]>[/bold cyan] ")


def print_title(title: str) -> None:
    """Print a title in a panel."""
    panel = Panel(
        Text(title, justify="center", style="bold"),
        border_style="blue",
    )
    console.print(panel)
