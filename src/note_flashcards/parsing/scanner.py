"""Line scanner that splits a note body into flashcards.

The scanner walks a materialized list of lines with an explicit cursor.
Each line is offered to an ordered list of rules and the first rule whose
predicate matches handles it. Content lines are then offered to a second
ordered list of classification rules. Order matters in both lists: an
ambiguous line (say, one holding both ``:::`` and ``==x==``) is classified
by whichever rule comes first, never by inspecting its content further.

Rules may move the cursor forward to consume comments, scheduling
metadata or fenced code blocks; the main loop always steps one line past
wherever the cursor was left.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, NamedTuple, Union

from ..core.config import ParserOptions
from ..core.models import CardType, NoOpenCard, OpenCard, ParsedCard, NO_OPEN_CARD

logger = logging.getLogger(__name__)

COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"
SCHEDULING_COMMENT_PREFIX = "<!--SR:"

HIGHLIGHT_PATTERN = re.compile(r"==.*?==")
BOLD_PATTERN = re.compile(r"\*\*.*?\*\*")
CURLY_BRACKETS_PATTERN = re.compile(r"{{.*?}}")
CODE_FENCE_PATTERN = re.compile(r"^(`{3,}|~{3,})")


@dataclass
class ScanState:
    """Mutable state for a single scan."""
    lines: list[str]
    i: int = 0
    card_text: str = ""
    open_card: Union[NoOpenCard, OpenCard] = NO_OPEN_CARD
    first_line_num: int = 0
    cards: list[ParsedCard] = field(default_factory=list)

    @property
    def next_line(self):
        if self.i + 1 < len(self.lines):
            return self.lines[self.i + 1]
        return None

    def append(self, line: str) -> None:
        if self.card_text:
            self.card_text += "\n" + line
        else:
            # Possibly the first line of a multi-line card
            self.first_line_num = self.i
            self.card_text = line

    def emit(self, card_type: CardType, last_line_num: int) -> None:
        card = ParsedCard(card_type, self.card_text, self.first_line_num, last_line_num)
        logger.debug(
            f"Card {card_type.value} at lines {card.first_line_num}-{card.last_line_num}"
        )
        self.cards.append(card)

    def reset(self) -> None:
        self.card_text = ""
        self.open_card = NO_OPEN_CARD


class Rule(NamedTuple):
    """A named (predicate, action) pair evaluated against the current line."""
    name: str
    matches: Callable[[ScanState, str], bool]
    apply: Callable[[ScanState, str], None]


class CardScanner:
    """Single-pass scanner producing ParsedCard records.

    The scanner holds only its options; all per-scan state lives in a
    ScanState, so one instance may be reused across notes and threads.
    """

    def __init__(self, options: ParserOptions):
        self.options = options

        self.cloze_patterns = []
        if options.convert_highlights_to_clozes:
            self.cloze_patterns.append(HIGHLIGHT_PATTERN)
        if options.convert_bold_text_to_clozes:
            self.cloze_patterns.append(BOLD_PATTERN)
        if options.convert_curly_brackets_to_clozes:
            self.cloze_patterns.append(CURLY_BRACKETS_PATTERN)

        self.line_rules = [
            Rule("blank_line", self._is_blank, self._close_card),
            Rule("comment", self._is_comment, self._skip_comment),
            Rule("content", lambda state, line: True, self._add_content),
        ]
        self.classification_rules = [
            Rule("single_line", self._has_single_line_separator, self._emit_single_line),
            Rule("cloze", self._is_cloze_trigger, self._open_cloze),
            Rule("multi_line", self._is_multi_line_separator, self._open_multi_line),
            Rule(
                "multi_line_reversed",
                self._is_multi_line_reversed_separator,
                self._open_multi_line_reversed,
            ),
            Rule("code_fence", self._opens_code_fence, self._capture_code_block),
        ]

    def scan(self, text: str) -> list[ParsedCard]:
        """Scan normalized note text and return cards in source order."""
        state = ScanState(lines=text.replace("\r\n", "\n").split("\n"))

        while state.i < len(state.lines):
            self._apply_first(self.line_rules, state, state.lines[state.i])
            state.i += 1

        if state.open_card.is_open and state.card_text:
            state.emit(state.open_card.card_type, len(state.lines) - 1)

        return state.cards

    def _apply_first(self, rules: list[Rule], state: ScanState, line: str) -> None:
        for rule in rules:
            if rule.matches(state, line):
                rule.apply(state, line)
                return

    # Line rules

    def _is_blank(self, state: ScanState, line: str) -> bool:
        # Whitespace-only and zero-width lines still count as content
        return len(line) == 0

    def _close_card(self, state: ScanState, line: str) -> None:
        if state.open_card.is_open:
            state.emit(state.open_card.card_type, state.i - 1)
        state.reset()

    def _is_comment(self, state: ScanState, line: str) -> bool:
        return line.startswith(COMMENT_OPEN) and not line.startswith(SCHEDULING_COMMENT_PREFIX)

    def _skip_comment(self, state: ScanState, line: str) -> None:
        # Consume through the closing line plus the line after it
        while COMMENT_CLOSE not in state.lines[state.i] and state.next_line is not None:
            state.i += 1
        if state.next_line is not None:
            state.i += 1

    def _add_content(self, state: ScanState, line: str) -> None:
        state.append(line)
        self._apply_first(self.classification_rules, state, line)

    # Classification rules

    def _has_single_line_separator(self, state: ScanState, line: str) -> bool:
        return (
            self.options.single_line_reversed_separator in line
            or self.options.single_line_separator in line
        )

    def _emit_single_line(self, state: ScanState, line: str) -> None:
        if self.options.single_line_reversed_separator in line:
            card_type = CardType.SINGLE_LINE_REVERSED
        else:
            card_type = CardType.SINGLE_LINE_BASIC

        # Lines buffered before this one are dropped
        state.card_text = line
        state.first_line_num = state.i

        next_line = state.next_line
        if next_line is not None and next_line.startswith(SCHEDULING_COMMENT_PREFIX):
            state.card_text += "\n" + next_line
            state.i += 1

        state.emit(card_type, state.i)
        state.reset()

    def _is_cloze_trigger(self, state: ScanState, line: str) -> bool:
        if state.open_card.is_open:
            return False
        return any(pattern.search(line) for pattern in self.cloze_patterns)

    def _open_cloze(self, state: ScanState, line: str) -> None:
        # first_line_num stays put: cloze markers may only appear on a later line
        state.open_card = OpenCard(CardType.CLOZE)

    def _is_multi_line_separator(self, state: ScanState, line: str) -> bool:
        return line.strip() == self.options.multi_line_separator

    def _open_multi_line(self, state: ScanState, line: str) -> None:
        state.open_card = OpenCard(CardType.MULTI_LINE_BASIC)

    def _is_multi_line_reversed_separator(self, state: ScanState, line: str) -> bool:
        return line.strip() == self.options.multi_line_reversed_separator

    def _open_multi_line_reversed(self, state: ScanState, line: str) -> None:
        state.open_card = OpenCard(CardType.MULTI_LINE_REVERSED)

    def _opens_code_fence(self, state: ScanState, line: str) -> bool:
        return CODE_FENCE_PATTERN.match(line) is not None

    def _capture_code_block(self, state: ScanState, line: str) -> None:
        delimiter = CODE_FENCE_PATTERN.match(line).group(1)
        while state.next_line is not None:
            state.i += 1
            current = state.lines[state.i]
            state.card_text += "\n" + current
            if current.startswith(delimiter):
                break


def scan(text: str, options: ParserOptions) -> list[ParsedCard]:
    """Scan already-normalized text with the given options."""
    return CardScanner(options).scan(text)
