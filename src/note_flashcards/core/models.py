"""Core data models for scanned flashcards."""

from dataclasses import dataclass
from enum import Enum


class CardType(Enum):
    """Kinds of flashcard the scanner can recognize."""
    SINGLE_LINE_BASIC = "single_line_basic"         # Question::Answer
    SINGLE_LINE_REVERSED = "single_line_reversed"   # Question:::Answer
    MULTI_LINE_BASIC = "multi_line_basic"           # Question / ? / Answer
    MULTI_LINE_REVERSED = "multi_line_reversed"     # Question / ?? / Answer
    CLOZE = "cloze"                                 # ==highlight==, **bold**, {{curly}}


@dataclass(frozen=True)
class ParsedCard:
    """A flashcard found in a note.

    Line numbers are zero-based and inclusive, counted over the note body
    after line-ending normalization.
    """
    card_type: CardType
    text: str
    first_line_num: int
    last_line_num: int

    @property
    def line_count(self) -> int:
        return self.last_line_num - self.first_line_num + 1

    def contains_line(self, line_num: int) -> bool:
        """Check whether a source line belongs to this card."""
        return self.first_line_num <= line_num <= self.last_line_num

    def to_dict(self) -> dict:
        """Convert to a plain dictionary for export."""
        return {
            "card_type": self.card_type.value,
            "text": self.text,
            "first_line_num": self.first_line_num,
            "last_line_num": self.last_line_num,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ParsedCard":
        """Create a card from a dictionary produced by to_dict."""
        return cls(
            card_type=CardType(data["card_type"]),
            text=data["text"],
            first_line_num=data["first_line_num"],
            last_line_num=data["last_line_num"],
        )


class NoOpenCard:
    """Scanner state when no card type has been decided for the buffer."""

    is_open = False

    def __repr__(self) -> str:
        return "NO_OPEN_CARD"


NO_OPEN_CARD = NoOpenCard()


@dataclass(frozen=True)
class OpenCard:
    """Scanner state once the buffered lines have been classified."""
    card_type: CardType

    is_open = True
