"""Core models, configuration, and exceptions."""

from .models import CardType, ParsedCard, OpenCard, NoOpenCard, NO_OPEN_CARD
from .config import Config, OutputConfig, ParserOptions, load_config, save_config
from .exceptions import (
    NoteFlashcardsError,
    ConfigError,
    ParserError,
    ExportError,
)

__all__ = [
    "CardType",
    "ParsedCard",
    "OpenCard",
    "NoOpenCard",
    "NO_OPEN_CARD",
    "Config",
    "OutputConfig",
    "ParserOptions",
    "load_config",
    "save_config",
    "NoteFlashcardsError",
    "ConfigError",
    "ParserError",
    "ExportError",
]
