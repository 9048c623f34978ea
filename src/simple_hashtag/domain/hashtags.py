"""Hashtag scanning for free text"""

import re
from typing import Any

from simple_hashtag.core.configuration import TagConfiguration
from simple_hashtag.domain.tags import TagList
from simple_hashtag.logger import get_logger

logger = get_logger(__name__)

DEFAULT_CONTENT_ATTRIBUTE = "body"

# "#" at the start of text or after whitespace, followed by word characters
# up to whitespace or the end of text. Purely numeric tags (#2024) and tags
# that start or end with "_" are not hashtags.
HASHTAG_PATTERN = re.compile(
    r"(?:\s|^)#(?!(?:\d+|\w+?_|_\w+?)(?:\s|$))(\w+)(?=\s|$)"
)


def scan_for_hashtags(text: str) -> list[str]:
    """
    Return hashtag names in order of first appearance, without the "#".

    Args:
        text: Content to scan

    Returns:
        Unique names exactly as written; no case folding happens here
    """
    matches = HASHTAG_PATTERN.findall(text)
    return list(dict.fromkeys(matches))


def extract_hashtags(text: Any, config: TagConfiguration | None = None) -> TagList:
    """Build a normalized TagList from the hashtags found in ``text``."""
    content = "" if text is None else str(text)
    names = scan_for_hashtags(content)
    logger.debug("Found %d hashtag(s) in %d characters of content.", len(names), len(content))
    return TagList(names, config=config)


def hashtaggable_content(
    record: Any,
    attribute: str = DEFAULT_CONTENT_ATTRIBUTE,
    config: TagConfiguration | None = None,
) -> TagList:
    """
    Extract the hashtags held in ``record.<attribute>``.

    The returned list has ``record`` as its owner so a persistence layer can
    attach the names to it.
    """
    content = getattr(record, attribute)
    tags = extract_hashtags(content, config=config)
    tags.owner = record
    return tags
