"""Flashcard extraction from markdown note text."""

import logging

from .frontmatter import frontmatter_tags, parse_frontmatter, split_frontmatter
from .normalizer import normalize_code_fences
from .scanner import CardScanner, scan
from ..core.config import ParserOptions
from ..core.models import ParsedCard

__all__ = [
    "CardScanner",
    "frontmatter_tags",
    "normalize_code_fences",
    "parse_cards",
    "parse_frontmatter",
    "scan",
    "split_frontmatter",
]

logger = logging.getLogger(__name__)


def parse_cards(text: str, options: ParserOptions) -> list[ParsedCard]:
    """Return the flashcards found in a note body.

    The body should already have its frontmatter removed; use
    split_frontmatter() to blank it out while keeping line numbers aligned.

    Raises:
        ConfigError: If any configured separator is empty
    """
    options.validate()
    cards = scan(normalize_code_fences(text), options)
    logger.debug(f"Parsed {len(cards)} cards from {len(text)} chars")
    return cards
