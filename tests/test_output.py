"""Tests for card export formats."""

import csv
import json

import pytest
from note_flashcards.core.exceptions import ExportError
from note_flashcards.core.models import CardType, ParsedCard
from note_flashcards.output import (
    CardCsvWriter,
    JsonExporter,
    cards_to_csv_string,
    load_cards_from_json,
)


@pytest.fixture
def cards():
    return [
        ParsedCard(CardType.SINGLE_LINE_BASIC, "Q::A\n<!--SR:!2024-01-01,3,250-->", 0, 1),
        ParsedCard(CardType.CLOZE, "The ==nucleus== holds DNA", 3, 3),
    ]


class TestCardCsvWriter:
    """Tests for CSV output."""

    def test_write_with_header(self, tmp_path, cards):
        path = tmp_path / "out" / "cards.csv"
        count = CardCsvWriter().write(cards, str(path))

        assert count == 2
        with open(path, newline='', encoding='utf-8') as f:
            rows = list(csv.reader(f, delimiter="\t"))

        assert rows[0] == ["Type", "Text", "First line", "Last line"]
        assert rows[1] == ["single_line_basic", "Q::A\n<!--SR:!2024-01-01,3,250-->", "0", "1"]
        assert rows[2] == ["cloze", "The ==nucleus== holds DNA", "3", "3"]

    def test_tags_column(self, tmp_path, cards):
        path = tmp_path / "cards.csv"
        CardCsvWriter(delimiter=",", tags=["bio", "cells"]).write(cards, str(path))

        with open(path, newline='', encoding='utf-8') as f:
            rows = list(csv.reader(f))

        assert rows[0][-1] == "Tags"
        assert rows[1][-1] == "bio cells"

    def test_csv_string_has_no_header(self, cards):
        output = cards_to_csv_string(cards[1:])
        assert output.strip() == "cloze\tThe ==nucleus== holds DNA\t3\t3"

    def test_unwritable_path(self, tmp_path, cards):
        with pytest.raises(ExportError):
            CardCsvWriter().write(cards, str(tmp_path))


class TestJsonExporter:
    """Tests for JSON output."""

    def test_export_cards(self, tmp_path, cards):
        path = tmp_path / "cards.json"
        JsonExporter().export_cards(cards, str(path))

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data[1] == {
            "card_type": "cloze",
            "text": "The ==nucleus== holds DNA",
            "first_line_num": 3,
            "last_line_num": 3,
        }
        assert load_cards_from_json(str(path)) == cards

    def test_export_notes(self, tmp_path, cards):
        path = tmp_path / "notes.json"
        JsonExporter(pretty=False).export_notes({"bio.md": cards, "empty.md": []}, str(path))

        data = json.loads(path.read_text(encoding="utf-8"))
        first, second = data["notes"]
        assert first["path"] == "bio.md"
        assert first["stats"] == {
            "total_cards": 2,
            "by_type": {"single_line_basic": 1, "cloze": 1},
        }
        assert second["stats"]["total_cards"] == 0
        assert load_cards_from_json(str(path)) == cards

    def test_unwritable_path(self, tmp_path, cards):
        with pytest.raises(ExportError):
            JsonExporter().export_cards(cards, str(tmp_path))


class TestCardCsvWriterNotes:
    """Tests for writing cards from several notes."""

    def test_note_tags_added_per_row(self, tmp_path, cards):
        path = tmp_path / "cards.csv"
        count = CardCsvWriter(tags=["bio"]).write_notes(
            {"cells.md": cards[:1], "dna.md": cards[1:]},
            str(path),
            note_tags={"cells.md": ["bio", "organelles"]},
        )

        assert count == 2
        with open(path, newline='', encoding='utf-8') as f:
            rows = list(csv.reader(f, delimiter="\t"))

        assert rows[0][-1] == "Tags"
        assert rows[1][-1] == "bio organelles"
        assert rows[2][-1] == "bio"

    def test_no_tags_no_column(self, tmp_path, cards):
        path = tmp_path / "cards.csv"
        CardCsvWriter().write_notes({"cells.md": cards}, str(path))

        with open(path, newline='', encoding='utf-8') as f:
            rows = list(csv.reader(f, delimiter="\t"))
        assert rows[0] == ["Type", "Text", "First line", "Last line"]
