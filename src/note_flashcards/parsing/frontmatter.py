"""YAML frontmatter handling for notes.

Frontmatter is blanked out rather than removed so that the line numbers
reported for cards still match the line numbers of the note file.
"""

import logging

import yaml

from ..core.exceptions import ParserError

logger = logging.getLogger(__name__)

FRONTMATTER_DELIMITER = "---"


def split_frontmatter(text: str) -> tuple[str, str]:
    """Split a note into its frontmatter and its body.

    Args:
        text: Full note text

    Returns:
        (frontmatter, body) where frontmatter includes both delimiter lines
        and body has one empty line in place of each frontmatter line.
        Without a closed frontmatter block, frontmatter is "" and body is
        the unchanged text.
    """
    lines = text.replace("\r\n", "\n").split("\n")
    if not lines or lines[0].rstrip() != FRONTMATTER_DELIMITER:
        return "", text

    for end, line in enumerate(lines[1:], start=1):
        if line.rstrip() == FRONTMATTER_DELIMITER:
            break
    else:
        logger.debug("Frontmatter delimiter never closed, treating note as body only")
        return "", text

    frontmatter = "\n".join(lines[:end + 1])
    body = "\n".join([""] * (end + 1) + lines[end + 1:])
    return frontmatter, body


def parse_frontmatter(frontmatter: str, file_path: str = None) -> dict:
    """Load frontmatter produced by split_frontmatter() as a dictionary.

    Raises:
        ParserError: If the frontmatter is not valid YAML
    """
    lines = frontmatter.replace("\r\n", "\n").split("\n")
    if lines[0].rstrip() == FRONTMATTER_DELIMITER:
        lines = lines[1:]
        if lines and lines[-1].rstrip() == FRONTMATTER_DELIMITER:
            lines = lines[:-1]

    try:
        data = yaml.safe_load("\n".join(lines))
    except yaml.YAMLError as e:
        raise ParserError("Invalid YAML frontmatter", file_path=file_path, details=str(e))

    if not isinstance(data, dict):
        return {}
    return data


def frontmatter_tags(metadata: dict) -> list[str]:
    """Return the note tags listed under the frontmatter 'tags' key.

    Accepts a YAML list or a space/comma separated string; a leading '#'
    is dropped from each tag.
    """
    tags = metadata.get("tags") or []
    if isinstance(tags, str):
        tags = tags.replace(",", " ").split()
    elif not isinstance(tags, list):
        tags = [tags]
    return [str(tag).lstrip("#") for tag in tags if tag]
