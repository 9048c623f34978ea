import re
import unicodedata
from collections.abc import Iterable

from simple_hashtag.core.configuration import TagConfiguration

_PARAMETERIZE_DISALLOWED = re.compile(r"[^a-z0-9\-_]+")
_REPEATED_SEPARATOR = re.compile(r"-{2,}")


def is_blank(value: object) -> bool:
    if value is None:
        return True
    return not str(value).strip()


def lowercase(tag: str) -> str:
    return tag.lower()


def parameterize(tag: str) -> str:
    """
    Turn a tag into a URL-friendly slug.

    "Crème Brûlée!" becomes "creme-brulee". Characters with no ASCII
    equivalent are dropped, so a tag may slug down to "".
    """
    cleaned = unicodedata.normalize("NFKD", tag).encode("ascii", "ignore").decode("ascii")
    cleaned = _PARAMETERIZE_DISALLOWED.sub("-", cleaned.lower())
    cleaned = _REPEATED_SEPARATOR.sub("-", cleaned)
    return cleaned.strip("-")


def apply_case_passes(tags: Iterable[str], config: TagConfiguration) -> list[str]:
    result = list(tags)
    if config.force_lowercase:
        result = [lowercase(tag) for tag in result]
    if config.force_parameterize:
        result = [parameterize(tag) for tag in result]
    return result


def normalize_tags(values: Iterable[object], config: TagConfiguration) -> list[str]:
    """Apply every normalization pass and return the canonical list."""
    tags = [str(value).strip() for value in values if not is_blank(value)]
    tags = apply_case_passes(tags, config)

    normalized: list[str] = []
    seen = set()
    for tag in tags:
        if tag and tag not in seen:
            normalized.append(tag)
            seen.add(tag)
    return normalized
