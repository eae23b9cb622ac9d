"""CSV output for scanned cards.

One row per card with its type, raw text and source line range, which is
enough for spreadsheet review or for re-locating the card in its note.
"""

import csv
import io
import logging
from pathlib import Path
from typing import TextIO

from ..core.exceptions import ExportError
from ..core.models import ParsedCard

logger = logging.getLogger(__name__)


class CardCsvWriter:
    """Writer for scanned-card CSV files.

    Columns:
    - Type: card type value (e.g. "single_line_basic")
    - Text: card text, newlines preserved inside the quoted field
    - First line / Last line: zero-based source line range
    - Tags: optional, space-separated
    """

    def __init__(
        self,
        include_header: bool = True,
        delimiter: str = "\t",
        tags: list[str] = None,
    ):
        self.include_header = include_header
        self.delimiter = delimiter
        self.tags = tags or []

    def write(self, cards: list[ParsedCard], output_path: str) -> int:
        """Write cards to CSV file.

        Returns:
            Number of cards written
        """
        return self._write_rows([(card, self.tags) for card in cards], output_path)

    def write_notes(
        self,
        results: dict[str, list[ParsedCard]],
        output_path: str,
        note_tags: dict[str, list[str]] = None,
    ) -> int:
        """Write cards from several notes, adding each note's own tags.

        Args:
            results: Mapping of note path to the cards found in it
            output_path: Path to output CSV file
            note_tags: Optional mapping of note path to extra tags

        Returns:
            Number of cards written
        """
        note_tags = note_tags or {}
        rows = []
        for note_path, cards in results.items():
            extra = [t for t in note_tags.get(note_path, []) if t not in self.tags]
            rows.extend((card, self.tags + extra) for card in cards)
        return self._write_rows(rows, output_path)

    def _write_rows(self, rows: list[tuple], output_path: str) -> int:
        try:
            Path(output_path).parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, 'w', newline='', encoding='utf-8') as f:
                return self._write_to_file(rows, f)
        except OSError as e:
            raise ExportError(f"Could not write CSV: {e}", output_path=output_path)

    def _write_to_file(self, rows: list[tuple], f: TextIO) -> int:
        """Write (card, tags) rows to a file handle."""
        writer = csv.writer(f, delimiter=self.delimiter, quoting=csv.QUOTE_MINIMAL)
        with_tags = any(tags for _, tags in rows) or bool(self.tags)

        if self.include_header:
            headers = ["Type", "Text", "First line", "Last line"]
            if with_tags:
                headers.append("Tags")
            writer.writerow(headers)

        count = 0
        for card, tags in rows:
            row = [card.card_type.value, card.text, card.first_line_num, card.last_line_num]
            if with_tags:
                row.append(" ".join(tags))
            writer.writerow(row)
            count += 1

        logger.info(f"Wrote {count} cards to CSV")
        return count


def cards_to_csv_string(cards: list[ParsedCard], delimiter: str = "\t") -> str:
    """Convert cards to CSV string (for clipboard, etc.)."""
    output = io.StringIO()
    writer = CardCsvWriter(include_header=False, delimiter=delimiter)
    writer._write_to_file([(card, []) for card in cards], output)
    return output.getvalue()
