"""Command-line interface for Note Flashcards."""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

from .core.config import Config, load_config
from .core.exceptions import NoteFlashcardsError, ParserError
from .core.models import ParsedCard
from .parsing import frontmatter_tags, parse_cards, parse_frontmatter, split_frontmatter
from .output import CardCsvWriter, JsonExporter

# Rich console for enhanced output
console = Console()

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    datefmt='%H:%M:%S'
)
logger = logging.getLogger(__name__)

TYPE_STYLES = {
    "single_line_basic": "cyan",
    "single_line_reversed": "blue",
    "multi_line_basic": "green",
    "multi_line_reversed": "yellow",
    "cloze": "magenta",
}


def read_note(file_path: str) -> tuple[str, list[str]]:
    """Read a note and return its body and its frontmatter tags.

    The body has its frontmatter blanked out so card line numbers match
    the file. Unreadable frontmatter YAML only costs the note its tags.
    """
    try:
        text = Path(file_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ParserError(f"Could not read note: {file_path}", file_path=file_path, details=str(e))

    frontmatter, body = split_frontmatter(text)
    try:
        tags = frontmatter_tags(parse_frontmatter(frontmatter, file_path=file_path))
    except ParserError as e:
        logger.warning(f"{file_path}: {e} ({e.details})")
        tags = []
    return body, tags


def _load(config_path: str, verbose: bool) -> Config:
    cfg = load_config(config_path)
    logging.getLogger().setLevel(logging.DEBUG if verbose or cfg.verbose else cfg.log_level)
    return cfg


def _cards_table(title: str, cards: list[ParsedCard]) -> Table:
    table = Table(title=escape(title))
    table.add_column("Lines", style="dim", justify="right")
    table.add_column("Type")
    table.add_column("Text", style="white")

    for card in cards:
        style = TYPE_STYLES.get(card.card_type.value, "white")
        table.add_row(
            f"{card.first_line_num}-{card.last_line_num}",
            f"[{style}]{card.card_type.value}[/{style}]",
            escape(card.text),
        )
    return table


@click.group()
@click.version_option(version="0.1.0")
def cli():
    """Note Flashcards - Find flashcards in markdown notes.

    \b
    CARD SYNTAX (default separators):
        Question::Answer            single-line card
        Question:::Answer           single-line reversed card
        Question / ? / Answer       multi-line card (?? for reversed)
        ==highlighted== text        cloze card
    """
    pass


@cli.command()
@click.argument('files', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option('-c', '--config', type=click.Path(exists=True), help='Config file path')
@click.option('--single', 'single_sep', type=str, help='Single-line card separator')
@click.option('--reversed', 'reversed_sep', type=str, help='Single-line reversed card separator')
@click.option('--multi', 'multi_sep', type=str, help='Multi-line card separator')
@click.option('--multi-reversed', 'multi_reversed_sep', type=str,
              help='Multi-line reversed card separator')
@click.option('--highlights/--no-highlights', default=None,
              help='Treat ==highlights== as cloze markers')
@click.option('--bold/--no-bold', default=None, help='Treat **bold** text as cloze markers')
@click.option('--curly/--no-curly', default=None, help='Treat {{curly}} brackets as cloze markers')
@click.option('--json', 'json_path', type=click.Path(), help='Write cards to a JSON file')
@click.option('--csv', 'csv_path', type=click.Path(), help='Write cards to a CSV file')
@click.option('-v', '--verbose', is_flag=True, help='Verbose output')
def scan(
    files: tuple,
    config: str,
    single_sep: str,
    reversed_sep: str,
    multi_sep: str,
    multi_reversed_sep: str,
    highlights: bool,
    bold: bool,
    curly: bool,
    json_path: str,
    csv_path: str,
    verbose: bool,
):
    """Scan notes and list the flashcards they contain.

    Examples:
        # Scan a single note with default separators
        note-flashcards scan notes/biology.md

        # Custom separators, bold text as clozes, JSON export
        note-flashcards scan notes/*.md --single ";;" --bold --json cards.json
    """
    try:
        cfg = _load(config, verbose)

        # Override with CLI options
        options = cfg.parser
        overrides = {
            "single_line_separator": single_sep,
            "single_line_reversed_separator": reversed_sep,
            "multi_line_separator": multi_sep,
            "multi_line_reversed_separator": multi_reversed_sep,
            "convert_highlights_to_clozes": highlights,
            "convert_bold_text_to_clozes": bold,
            "convert_curly_brackets_to_clozes": curly,
        }
        for key, value in overrides.items():
            if value is not None:
                setattr(options, key, value)

        results = {}
        note_tags = {}
        for file_path in files:
            body, tags = read_note(file_path)
            cards = parse_cards(body, options)
            results[file_path] = cards
            note_tags[file_path] = tags
            logger.debug(f"{file_path}: {len(cards)} cards")

            if cards:
                console.print(_cards_table(file_path, cards))
            else:
                console.print(f"[dim]{file_path}: no cards found[/dim]")

        total = sum(len(cards) for cards in results.values())

        if json_path or cfg.output.json_output:
            path = json_path or str(Path(cfg.output.output_dir) / "cards.json")
            JsonExporter().export_notes(results, path)
            console.print(f"  Wrote JSON to {path}")

        if csv_path or cfg.output.csv_output:
            path = csv_path or str(Path(cfg.output.output_dir) / "cards.csv")
            CardCsvWriter(tags=cfg.output.tags).write_notes(results, path, note_tags)
            console.print(f"  Wrote CSV to {path}")

        console.print(Panel.fit(
            f"[bold green]✓ Found {total} cards in {len(results)} notes[/bold green]",
            border_style="green"
        ))

    except NoteFlashcardsError as e:
        console.print(f"\n[bold red]Error:[/bold red] {e}")
        if verbose:
            console.print_exception()
        sys.exit(1)


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.argument('line', type=int)
@click.option('-c', '--config', type=click.Path(exists=True), help='Config file path')
def locate(file: str, line: int, config: str):
    """Show the card that contains LINE (zero-based) of FILE."""
    try:
        cfg = _load(config, False)
        body, _ = read_note(file)
        cards = parse_cards(body, cfg.parser)
    except NoteFlashcardsError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    for card in cards:
        if card.contains_line(line):
            console.print(_cards_table(f"{file}:{line}", [card]))
            return

    console.print(f"[yellow]![/yellow] No card on line {line} of {file}")
    sys.exit(1)


@cli.command()
@click.argument('output_path', type=click.Path())
def init_config(output_path: str):
    """Create a sample configuration file."""
    sample_config = """# Note Flashcards Configuration

parser:
  single_line_separator: "::"
  single_line_reversed_separator: ":::"
  multi_line_separator: "?"
  multi_line_reversed_separator: "??"
  convert_highlights_to_clozes: true
  convert_bold_text_to_clozes: false
  convert_curly_brackets_to_clozes: false

output:
  output_dir: ./output
  json_output: false
  csv_output: false
  tags:
    - flashcards

log_level: INFO
"""
    with open(output_path, 'w') as f:
        f.write(sample_config)

    console.print(f"[green]✓[/green] Created config file: [cyan]{output_path}[/cyan]")
    console.print("  Edit this file and run: [dim]note-flashcards scan note.md -c config.yaml[/dim]")


def main():
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
