"""Tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

from note_flashcards.cli import cli
from note_flashcards.core.config import load_config

NOTE = """---
tags: [biology]
---
Mitochondria::Powerhouse of the cell

What does DNA stand for?
?
Deoxyribonucleic acid
"""


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def note_path(tmp_path):
    path = tmp_path / "biology.md"
    path.write_text(NOTE, encoding="utf-8")
    return path


class TestScanCommand:
    """Tests for the scan command."""

    def test_scan_reports_cards(self, runner, note_path, tmp_path):
        with runner.isolated_filesystem(temp_dir=tmp_path):
            result = runner.invoke(cli, ["scan", str(note_path)])

        assert result.exit_code == 0, result.output
        assert "Found 2 cards in 1 notes" in result.output

    def test_scan_json_export(self, runner, note_path, tmp_path):
        json_path = tmp_path / "cards.json"
        with runner.isolated_filesystem(temp_dir=tmp_path):
            result = runner.invoke(cli, ["scan", str(note_path), "--json", str(json_path)])

        assert result.exit_code == 0, result.output
        data = json.loads(json_path.read_text(encoding="utf-8"))
        cards = data["notes"][0]["cards"]
        assert [(c["first_line_num"], c["last_line_num"]) for c in cards] == [(3, 3), (5, 7)]
        assert cards[1]["card_type"] == "multi_line_basic"

    def test_scan_separator_override(self, runner, note_path, tmp_path):
        csv_path = tmp_path / "cards.csv"
        with runner.isolated_filesystem(temp_dir=tmp_path):
            result = runner.invoke(cli, [
                "scan", str(note_path), "--single", ";;", "--csv", str(csv_path),
            ])

        assert result.exit_code == 0, result.output
        assert "Found 1 cards" in result.output
        content = csv_path.read_text(encoding="utf-8")
        assert "multi_line_basic" in content
        assert "biology" in content

    def test_empty_separator_fails(self, runner, note_path, tmp_path):
        with runner.isolated_filesystem(temp_dir=tmp_path):
            result = runner.invoke(cli, ["scan", str(note_path), "--multi", ""])

        assert result.exit_code == 1
        assert "multi_line_separator" in result.output

    def test_missing_file(self, runner):
        result = runner.invoke(cli, ["scan", "/nonexistent/note.md"])
        assert result.exit_code != 0


class TestLocateCommand:
    """Tests for the locate command."""

    def test_locate_card(self, runner, note_path, tmp_path):
        with runner.isolated_filesystem(temp_dir=tmp_path):
            result = runner.invoke(cli, ["locate", str(note_path), "6"])

        assert result.exit_code == 0, result.output
        assert "multi_line_basic" in result.output

    def test_locate_no_card(self, runner, note_path, tmp_path):
        with runner.isolated_filesystem(temp_dir=tmp_path):
            result = runner.invoke(cli, ["locate", str(note_path), "4"])

        assert result.exit_code == 1
        assert "No card on line 4" in result.output


class TestInitConfig:
    """Tests for the init-config command."""

    def test_writes_loadable_config(self, runner, tmp_path):
        path = tmp_path / "config.yaml"
        result = runner.invoke(cli, ["init-config", str(path)])

        assert result.exit_code == 0, result.output
        config = load_config(str(path))
        assert config.parser.single_line_separator == "::"
        assert config.output.tags == ["flashcards"]


class TestMalformedConfig:
    """Config errors are reported without a traceback."""

    @pytest.mark.parametrize("content", ["output: nope\n", "log_level: loud\n"])
    def test_scan_reports_config_error(self, runner, note_path, tmp_path, content):
        config_path = tmp_path / "bad.yaml"
        config_path.write_text(content)
        with runner.isolated_filesystem(temp_dir=tmp_path):
            result = runner.invoke(cli, ["scan", str(note_path), "-c", str(config_path)])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Error:" in result.output


class TestFrontmatterTags:
    """Frontmatter tags flow into CSV output."""

    def test_bad_frontmatter_still_scans(self, runner, tmp_path):
        note = tmp_path / "broken.md"
        note.write_text("---\ntags: [unclosed\n---\nQ::A\n", encoding="utf-8")
        csv_path = tmp_path / "cards.csv"
        with runner.isolated_filesystem(temp_dir=tmp_path):
            result = runner.invoke(cli, ["scan", str(note), "--csv", str(csv_path)])

        assert result.exit_code == 0, result.output
        assert "Found 1 cards" in result.output
