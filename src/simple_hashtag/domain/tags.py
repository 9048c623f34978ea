from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, overload

from simple_hashtag.core.configuration import TagConfiguration, get_configuration
from simple_hashtag.domain.normalize import apply_case_passes, is_blank, normalize_tags
from simple_hashtag.domain.parser import QUOTE_CHARS
from simple_hashtag.domain.parser import parse as parse_tags
from simple_hashtag.errors import InvalidArgument


def _quote(tag: str) -> str:
    # The wrapping quote must not be the one the tag starts with or contains.
    if tag.startswith("'"):
        quote = '"'
    elif tag.startswith('"') or ('"' in tag and "'" not in tag):
        quote = "'"
    else:
        quote = '"'
    return f"{quote}{tag}{quote}"


class TagList(Sequence):
    """
    Ordered list of canonical tag names.

    After every change the list holds no blank entries, every entry is
    stripped, and duplicates are dropped in favour of the first occurrence.

    Example:
        tags = TagList("Fun", "Happy")
        tags.add("Sad, Lonely", parse=True)
        tags.remove("Happy")
        tags.to_string()  # 'Fun, Sad, Lonely'
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        *values: Any,
        parse: bool = False,
        config: TagConfiguration | None = None,
        owner: Any = None,
    ):
        self.config = config or get_configuration()
        # Opaque to this package; kept for whoever persists the tags.
        self.owner = owner
        self._tags: list[str] = []
        self.add(*values, parse=parse)

    def add(self, *values: Any, parse: bool = False) -> TagList:
        """
        Add tags. Blank and duplicate tags are ignored.

        With ``parse=True`` each string argument is treated as a raw tag
        string, e.g. ``tags.add("Fun, Happy", parse=True)``.
        """
        self._tags.extend(self._resolve(values, parse, "add"))
        return self.normalize()

    def append(self, value: Any) -> TagList:
        return self.add(value)

    def concat(self, other: Iterable[Any]) -> TagList:
        if not isinstance(other, (list, tuple, TagList)):
            raise InvalidArgument(other, "concat")
        return self.add(other)

    def remove(self, *values: Any, parse: bool = False) -> TagList:
        """
        Remove tags. Names that are not present are ignored.

        ``tags.remove("Sad, Lonely", parse=True)`` removes both tags.
        """
        candidates = [str(value).strip() for value in self._resolve(values, parse, "remove")
                      if not is_blank(value)]
        names = set(apply_case_passes(candidates, self.config))
        self._tags = [tag for tag in self._tags if tag not in names]
        return self

    def combine(self, other: Any) -> TagList:
        """Return a new list holding the tags of ``self`` followed by ``other``."""
        return TagList(self, config=self.config, owner=self.owner).add(other)

    def normalize(self) -> TagList:
        self._tags = normalize_tags(self._tags, self.config)
        return self

    def to_string(self) -> str:
        """
        Render the tags for editing in a form.

        Tags are joined with the configured glue. A tag containing the
        delimiter is quoted: TagList("Round", "Square,Cube") renders as
        'Round, "Square,Cube"'. So is a tag that starts with a quote
        character, e.g. "'90s", which would otherwise read as an open quote.
        """
        self.normalize()
        delimiter = self.config.delimiter
        rendered = []
        for tag in self._tags:
            if delimiter.occurs_in(tag) or tag[:1] in QUOTE_CHARS:
                rendered.append(_quote(tag))
            else:
                rendered.append(tag)
        return self.config.glue.join(rendered)

    def to_list(self) -> list[str]:
        return list(self._tags)

    def _resolve(self, values: Iterable[Any], parse: bool, operation: str) -> list[Any]:
        resolved: list[Any] = []
        for value in values:
            if value is None:
                continue
            if isinstance(value, str):
                if parse:
                    resolved.extend(parse_tags(value, self.config.delimiter))
                else:
                    resolved.append(value)
            elif isinstance(value, (list, tuple, TagList)):
                # Only top-level strings are parsed; nested values are taken as tags.
                resolved.extend(self._resolve(value, False, operation))
            else:
                raise InvalidArgument(value, operation)
        return resolved

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> list[str]: ...

    def __getitem__(self, index: int | slice) -> str | list[str]:
        return self._tags[index]

    def __len__(self) -> int:
        return len(self._tags)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tags)

    def __contains__(self, value: object) -> bool:
        return value in self._tags

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TagList):
            return self._tags == other._tags
        if isinstance(other, (list, tuple)):
            return self._tags == list(other)
        return NotImplemented

    def __add__(self, other: Any) -> TagList:
        return self.combine(other)

    def __repr__(self) -> str:
        return f"TagList({self._tags!r})"

    def __str__(self) -> str:
        return self.to_string()
