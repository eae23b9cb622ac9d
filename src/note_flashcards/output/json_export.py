"""JSON export for scanned cards."""

import json
import logging
from collections import Counter
from pathlib import Path

from ..core.exceptions import ExportError
from ..core.models import ParsedCard

logger = logging.getLogger(__name__)


class JsonExporter:
    """Export scanned cards to JSON format."""

    def __init__(self, pretty: bool = True):
        self.pretty = pretty

    def export_cards(self, cards: list[ParsedCard], output_path: str) -> None:
        """Export a flat list of cards to a JSON file."""
        data = [card.to_dict() for card in cards]
        self._write_json(data, output_path)
        logger.info(f"Exported {len(cards)} cards to {output_path}")

    def export_notes(self, results: dict[str, list[ParsedCard]], output_path: str) -> None:
        """Export cards grouped by the note they came from.

        Args:
            results: Mapping of note path to the cards found in it
            output_path: Path to output JSON file
        """
        data = {
            "notes": [
                {
                    "path": note_path,
                    "stats": {
                        "total_cards": len(cards),
                        "by_type": dict(Counter(c.card_type.value for c in cards)),
                    },
                    "cards": [card.to_dict() for card in cards],
                }
                for note_path, cards in results.items()
            ],
        }

        self._write_json(data, output_path)
        total = sum(len(cards) for cards in results.values())
        logger.info(f"Exported {total} cards from {len(results)} notes to {output_path}")

    def _write_json(self, data, output_path: str) -> None:
        try:
            Path(output_path).parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, 'w', encoding='utf-8') as f:
                if self.pretty:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                else:
                    json.dump(data, f, ensure_ascii=False)
        except OSError as e:
            raise ExportError(f"Could not write JSON: {e}", output_path=output_path)


def load_cards_from_json(json_path: str) -> list[ParsedCard]:
    """Load cards written by export_cards or export_notes."""
    with open(json_path, encoding='utf-8') as f:
        data = json.load(f)

    if isinstance(data, list):
        items = data
    else:
        items = [card for note in data.get("notes", []) for card in note.get("cards", [])]

    return [ParsedCard.from_dict(item) for item in items]
