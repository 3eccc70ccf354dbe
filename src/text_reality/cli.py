"""
cli.py

PURPOSE: Command-line interface for the command parser.
DEPENDENCIES: typer, rich

ARCHITECTURE NOTES:
The CLI provides commands for:
- parse: Parse one line and show the reduced command
- repl: Parse lines interactively
- synonyms: List the aliases that share a word's canonical value
- vocab: Validate a vocabulary file
- config: Show the effective configuration
"""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console

from text_reality import __version__
from text_reality.config import Settings, get_settings
from text_reality.models.vocabulary import load_vocabulary
from text_reality.observability import init_telemetry, shutdown_telemetry
from text_reality.parser.parser import Parser
from text_reality.ui import plain

app = typer.Typer(
    name="text-reality",
    help="Reduce free-form text adventure input to canonical commands.",
    add_completion=False,
)

console = Console()

VocabOption = Annotated[
    Path | None,
    typer.Option(
        "--vocab",
        "-V",
        help="JSON vocabulary file with game-specific synonyms",
        exists=True,
        readable=True,
    ),
]
NoProfanityOption = Annotated[
    bool,
    typer.Option(
        "--no-profanity",
        help="Disable the profanity filter",
    ),
]


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"text-reality version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    _version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            "-d",
            help="Enable debug logging",
        ),
    ] = False,
) -> None:
    """Text Reality - a text adventure command parser."""
    settings = get_settings()
    level = "DEBUG" if debug or settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser(settings: Settings, vocab: Path | None, no_profanity: bool) -> Parser:
    """Create a parser from settings and CLI overrides, exiting on bad vocabulary."""
    parser_settings = settings.parser.model_copy()
    if vocab is not None:
        parser_settings.vocabulary_file = vocab
    if no_profanity:
        parser_settings.profanity_filter = False

    try:
        return Parser.from_settings(parser_settings)
    except json.JSONDecodeError as e:
        plain.print_error(f"Invalid JSON in vocabulary file: {e}")
        raise typer.Exit(1) from None
    except ValidationError as e:
        plain.print_error(f"Invalid vocabulary file: {e}")
        raise typer.Exit(1) from None
    except OSError as e:
        plain.print_error(f"Cannot read vocabulary file: {e}")
        raise typer.Exit(1) from None


@app.command()
def parse(
    text: Annotated[
        list[str],
        typer.Argument(help="The player input to parse"),
    ],
    vocab: VocabOption = None,
    no_profanity: NoProfanityOption = False,
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            "-j",
            help="Print the command as JSON",
        ),
    ] = False,
) -> None:
    """Parse one line of player input."""
    settings = get_settings()
    init_telemetry(settings.otel)

    parser = build_parser(settings, vocab, no_profanity)
    command = parser.parse_command(" ".join(text))

    if as_json:
        plain.print_command_json(command)
    else:
        plain.print_command(command)

    shutdown_telemetry()


@app.command()
def repl(
    vocab: VocabOption = None,
    no_profanity: NoProfanityOption = False,
) -> None:
    """Parse player input interactively until EOF or QUIT."""
    settings = get_settings()
    init_telemetry(settings.otel)

    parser = build_parser(settings, vocab, no_profanity)
    plain.print_title("Text Reality Parser")
    plain.print_message("Type a command, or 'quit' to leave.")
    console.print()

    while True:
        try:
            user_input = plain.print_prompt()
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if user_input.strip().lower() in ("quit", "exit"):
            break

        plain.print_command(parser.parse_command(user_input))
        console.print()

    plain.print_message("Goodbye!")
    shutdown_telemetry()


@app.command()
def synonyms(
    word: Annotated[
        str,
        typer.Argument(help="A verb, noun or preposition the parser knows"),
    ],
    vocab: VocabOption = None,
) -> None:
    """Show which words reduce to the same canonical value as WORD."""
    settings = get_settings()
    parser = build_parser(settings, vocab, no_profanity=False)
    word = word.strip().lower()

    found = False
    for kind, table in (
        ("verb", parser.verbs),
        ("noun", parser.nouns),
        ("preposition", parser.prepositions),
    ):
        if word not in table:
            continue
        found = True
        canonical = table.lookup(word)
        label = canonical.name if hasattr(canonical, "name") else canonical
        aliases = ", ".join(sorted(table.aliases_for(canonical)))
        console.print(f"[bold cyan]{kind}[/bold cyan] {label}: {aliases}")

    if not found:
        plain.print_error(f"Unknown word: {word}")
        raise typer.Exit(1)


@app.command("vocab")
def vocab_cmd(
    vocab_file: Annotated[
        Path,
        typer.Argument(
            help="Path to the vocabulary JSON file",
            exists=True,
            readable=True,
        ),
    ],
) -> None:
    """Validate a vocabulary JSON file."""
    try:
        vocabulary = load_vocabulary(vocab_file)
    except json.JSONDecodeError as e:
        plain.print_error(f"Invalid JSON at line {e.lineno}: {e.msg}")
        raise typer.Exit(1) from None
    except ValidationError as e:
        plain.print_error("Validation errors:")
        for error in e.errors():
            loc = " -> ".join(str(x) for x in error["loc"])
            plain.print_error(f"  {loc}: {error['msg']}")
        raise typer.Exit(1) from None

    plain.print_success(f"Valid vocabulary: {vocab_file.name}")
    console.print(f"  Verbs: {len(vocabulary.verbs)}")
    console.print(f"  Nouns: {len(vocabulary.nouns)}")
    console.print(f"  Prepositions: {len(vocabulary.prepositions)}")
    console.print(f"  Total words: {vocabulary.word_count}")


@app.command("config")
def config_cmd() -> None:
    """Show the effective configuration."""
    settings = get_settings()
    console.print("[bold]Current Configuration:[/bold]")
    console.print(f"  Log level: {settings.log_level}")
    console.print(f"  Debug: {settings.debug}")
    console.print()
    console.print("[bold]Parser Settings:[/bold]")
    console.print(f"  Profanity filter: {settings.parser.profanity_filter}")
    console.print(f"  Extra profanity words: {len(settings.parser.extra_profanity)}")
    console.print(f"  Default vocabulary: {settings.parser.default_vocabulary}")
    vocab_status = settings.parser.vocabulary_file or "(none)"
    console.print(f"  Vocabulary file: {vocab_status}")
    console.print()
    console.print("[bold]OpenTelemetry Settings:[/bold]")
    console.print(f"  Enabled: {settings.otel.enabled}")
    console.print(f"  Service name: {settings.otel.service_name}")
    endpoint_status = settings.otel.endpoint if settings.otel.endpoint else "(console only)"
    console.print(f"  Endpoint: {endpoint_status}")


if __name__ == "__main__":
    app()
