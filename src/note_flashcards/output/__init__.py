"""Output formats for scanned cards."""

from .card_csv import CardCsvWriter, cards_to_csv_string
from .json_export import JsonExporter, load_cards_from_json

__all__ = ["CardCsvWriter", "JsonExporter", "cards_to_csv_string", "load_cards_from_json"]
