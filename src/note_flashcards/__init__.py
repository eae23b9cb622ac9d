"""
Note Flashcards - Extract spaced-repetition flashcards from markdown notes.

Recognizes inline, multi-line and cloze cards and records the source line
range of every card so callers can highlight or rewrite them in place.
"""

from .core.config import ParserOptions
from .core.models import CardType, ParsedCard
from .parsing import parse_cards

__version__ = "0.1.0"

__all__ = ["CardType", "ParsedCard", "ParserOptions", "parse_cards"]
