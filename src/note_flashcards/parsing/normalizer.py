"""Line normalization applied before scanning."""

import re

# Indented opening fence, e.g. a code block nested in a list item
INDENTED_FENCE_PATTERN = re.compile(r"^\s+```")


def normalize_code_fences(text: str) -> str:
    """Strip leading whitespace from indented backtick fences.

    The scanner only recognizes fences at the start of a line, so a fence
    nested under a list item would otherwise let its contents be read as
    card separators.
    """
    lines = text.split("\n")
    normalized = [
        line.lstrip() if INDENTED_FENCE_PATTERN.match(line) else line
        for line in lines
    ]
    return "\n".join(normalized)
