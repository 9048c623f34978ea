from collections.abc import Sequence
from typing import Any

from simple_hashtag.core.configuration import Delimiter, get_configuration
from simple_hashtag.errors import InvalidArgument
from simple_hashtag.logger import get_logger

logger = get_logger(__name__)

QUOTE_CHARS = ('"', "'")


def _end_of_quoted_token(text: str, position: int, delimiter: Delimiter) -> tuple[bool, int] | None:
    """
    Check that only whitespace separates ``position`` from the next delimiter
    or the end of input.

    Returns ``(True, index past the delimiter)`` or ``(False, len(text))``.
    """
    index = position
    while True:
        match = delimiter.pattern.match(text, index)
        if match:
            return True, match.end()
        if index < len(text) and text[index].isspace():
            index += 1
            continue
        break
    if index == len(text):
        return False, index
    return None


def _read_quoted(text: str, start: int, delimiter: Delimiter) -> tuple[str, int | None] | None:
    """
    Try to read a quoted token beginning at ``start``.

    Returns the unquoted value and the start of the next token (None when the
    input is exhausted), or None if there is no well-formed quoted token here.
    """
    index = start
    while index < len(text) and text[index].isspace():
        index += 1
    if index >= len(text) or text[index] not in QUOTE_CHARS:
        return None

    quote = text[index]
    close = text.find(quote, index + 1)
    if close == -1:
        # Unterminated: everything left is one literal token.
        logger.debug("Unterminated %s quote at offset %d, keeping the rest as text.", quote, index)
        return text[start:], None

    ending = _end_of_quoted_token(text, close + 1, delimiter)
    if ending is None:
        return None
    found_delimiter, next_start = ending
    return text[index + 1:close], next_start if found_delimiter else None


def split_tokens(text: str, delimiter: Delimiter) -> list[str]:
    tokens: list[str] = []
    position = 0
    while True:
        quoted = _read_quoted(text, position, delimiter)
        if quoted is not None:
            token, next_start = quoted
            tokens.append(token)
            if next_start is None:
                break
            position = next_start
            continue

        match = delimiter.pattern.search(text, position)
        if match is None:
            tokens.append(text[position:])
            break
        tokens.append(text[position:match.start()])
        position = match.end()
    return tokens


def parse(value: Any, delimiter: Delimiter | None = None) -> list[str]:
    """
    Split a raw tag string into tokens.

    Tokens are returned as written: not stripped, deduplicated or filtered.
    Quoted tokens ("Square,Cube" or 'Square,Cube') may contain the delimiter
    and are returned without their quotes. Sequences are passed through.

    Example:
        parse('Round, "Square,Cube"')  # ['Round', 'Square,Cube']
        parse('Round, Square')         # ['Round', ' Square']

    An opening quote with no closing quote is not an error: the rest of the
    input, quote included, becomes the last token.
    """
    if value is None:
        return []
    if isinstance(value, str):
        if not value.strip():
            return []
        active = delimiter or get_configuration().delimiter
        return split_tokens(value, active)
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return list(value)
    raise InvalidArgument(value, "parse")
